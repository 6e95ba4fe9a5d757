"""
Summary: Value objects flowing through discovery, normalization and packaging.
Why: Keep the in-memory album model independent of any on-disk manifest schema.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import final


@final
@dataclass(frozen=True, slots=True)
class TrackInfo:
    """Metadata read from a track's sidecar document."""

    title: str = ""
    track: str = ""
    album: str = ""
    artists: tuple[str, ...] = ()
    release_year: int = 0
    upload_date: str = ""
    duration: int = 0
    genres: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    playlist_title: str = ""


@final
@dataclass(frozen=True, slots=True)
class Track:
    """An audio file paired with its parsed sidecar."""

    audio_path: Path
    info: TrackInfo = field(default_factory=TrackInfo)

    @property
    def filename(self) -> str:
        return self.audio_path.name


@final
@dataclass(frozen=True, slots=True)
class NormalizedTrack:
    """A track with every manifest field resolved."""

    number: int
    display_name: str
    primary_artist: str
    featuring_artists: tuple[str, ...]
    year: int
    source_filename: str
    duration: int = 0
    genres: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()


@final
@dataclass(frozen=True, slots=True)
class AlbumManifest:
    """Schema-agnostic description of a packaged album."""

    album_title: str
    album_artist: str
    cover_art_relative_path: str
    tracks: tuple[NormalizedTrack, ...]


class AlbumKind(StrEnum):
    """How a run was acquired, which decides where the album title comes from."""

    SINGLE = "single"
    ALBUM = "album"


__all__ = ["AlbumKind", "AlbumManifest", "NormalizedTrack", "Track", "TrackInfo"]
