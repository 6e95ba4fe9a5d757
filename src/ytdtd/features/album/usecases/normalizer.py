"""
Summary: Resolve display names, artists, years and track numbers for discovered tracks.
Why: Sidecars are inconsistent, so every manifest field needs one documented fallback chain.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from itertools import pairwise
from typing import Final

from ytdtd.config.settings import COVER_FILENAME, UNKNOWN_ARTIST
from ytdtd.features.album.domain.models import (
    AlbumKind,
    AlbumManifest,
    NormalizedTrack,
    Track,
    TrackInfo,
)
from ytdtd.platform.logging import logger
from ytdtd.shared.errors import UnresolvedYear

_LEADING_NUMBER: Final[re.Pattern[str]] = re.compile(r"^\s*(\d+)")
_MIN_YEAR: Final[int] = 1000
_MAX_YEAR: Final[int] = 9999


def extract_leading_number(filename: str) -> int | None:
    """Return the numeric prefix of ``filename`` (``"01. Song.opus"`` → 1), if any."""

    match = _LEADING_NUMBER.match(filename)
    if match is None:
        return None
    return int(match.group(1))


def resolve_display_name(track: Track) -> str:
    """Prefer the sidecar track name, then its title, then the filename stem."""

    return track.info.track or track.info.title or track.audio_path.stem


def split_artists(artists: Sequence[str]) -> tuple[str, tuple[str, ...]]:
    """Split credits into the primary artist and the featuring artists."""

    if not artists:
        return UNKNOWN_ARTIST, ()
    return artists[0], tuple(artists[1:])


def _is_four_digit_year(value: int) -> bool:
    return _MIN_YEAR <= value <= _MAX_YEAR


def resolve_year(info: TrackInfo, *, track_name: str = "") -> int:
    """Resolve a 4-digit year from ``release_year`` or the ``upload_date`` prefix.

    Raises:
        UnresolvedYear: If neither source yields a usable year.
    """
    if _is_four_digit_year(info.release_year):
        return info.release_year

    prefix = info.upload_date[:4]
    if len(prefix) == 4 and prefix.isdigit() and _is_four_digit_year(int(prefix)):
        return int(prefix)

    raise UnresolvedYear(track_name, info.release_year, info.upload_date)


def order_tracks(tracks: Sequence[Track]) -> list[Track]:
    """Order tracks by filename prefix, using discovery position where no prefix exists.

    Ties keep discovery order.
    """
    keyed: list[tuple[int, int, Track]] = []
    for position, track in enumerate(tracks, start=1):
        prefix = extract_leading_number(track.filename)
        keyed.append((prefix if prefix is not None else position, position, track))

    keyed.sort(key=lambda entry: (entry[0], entry[1]))
    return [track for _, _, track in keyed]


def assign_track_numbers(ordered: Sequence[Track]) -> list[int]:
    """Return the track number of each already ordered track.

    Filename prefixes are kept when every track has one and together they
    form a gap-free increasing run, as a partial playlist download does
    (``05.``, ``06.``, ``07.``). Otherwise tracks are numbered ``1..N`` by
    position, so numbers stay unique and contiguous.
    """
    prefixes = [extract_leading_number(track.filename) for track in ordered]
    present = [prefix for prefix in prefixes if prefix is not None]
    if (
        present
        and len(present) == len(prefixes)
        and present[0] >= 1
        and all(later == earlier + 1 for earlier, later in pairwise(present))
    ):
        return present

    numbers = list(range(1, len(ordered) + 1))
    for track, prefix, number in zip(ordered, prefixes, numbers, strict=True):
        if prefix is not None and prefix != number:
            logger.info("Renumbered %s from %d to %d", track.filename, prefix, number)
    return numbers


def normalize_track(track: Track, number: int) -> NormalizedTrack:
    """Resolve every manifest field of ``track`` under the given track number."""

    display_name = resolve_display_name(track)
    primary_artist, featuring_artists = split_artists(track.info.artists)
    return NormalizedTrack(
        number=number,
        display_name=display_name,
        primary_artist=primary_artist,
        featuring_artists=featuring_artists,
        year=resolve_year(track.info, track_name=display_name),
        source_filename=track.filename,
        duration=track.info.duration,
        genres=track.info.genres,
        tags=track.info.tags,
    )


def normalize_tracks(ordered: Sequence[Track]) -> tuple[NormalizedTrack, ...]:
    """Normalize tracks that ``order_tracks`` has already put in album order."""

    numbers = assign_track_numbers(ordered)
    return tuple(
        normalize_track(track, number) for track, number in zip(ordered, numbers, strict=True)
    )


def resolve_album_title(tracks: Sequence[Track], kind: AlbumKind) -> str:
    """Derive the album title from the first ordered track.

    Singles are named after the track itself; albums use the sidecar album,
    then the playlist title, then the first track's display name.
    """
    ordered = order_tracks(tracks)
    if not ordered:
        return ""

    first = ordered[0]
    if kind is AlbumKind.SINGLE:
        return resolve_display_name(first)
    return first.info.album or first.info.playlist_title or resolve_display_name(first)


def build_manifest(
    album_title: str,
    ordered: Sequence[Track],
    *,
    cover_art: str = COVER_FILENAME,
) -> AlbumManifest:
    """Build the manifest from ordered tracks; the album artist is the first track's primary artist."""

    normalized = normalize_tracks(ordered)
    album_artist = normalized[0].primary_artist if normalized else UNKNOWN_ARTIST
    return AlbumManifest(
        album_title=album_title,
        album_artist=album_artist,
        cover_art_relative_path=cover_art,
        tracks=normalized,
    )


__all__ = [
    "assign_track_numbers",
    "build_manifest",
    "extract_leading_number",
    "normalize_track",
    "normalize_tracks",
    "order_tracks",
    "resolve_album_title",
    "resolve_display_name",
    "resolve_year",
    "split_artists",
]
