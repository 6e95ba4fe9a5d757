"""
Summary: Ports defining album packaging dependencies.
Why: Decouple the packager from concrete collaborators so tests and swaps stay simple.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from ytdtd.features.album.domain.models import AlbumKind


@runtime_checkable
class CoverExtractionPort(Protocol):
    """Port for producing the album's square cover image."""

    def extract(self, source_audio: Path, album_dir: Path) -> Path:
        """Write the cover into ``album_dir`` and return its path."""
        ...


@runtime_checkable
class AudioAcquisitionPort(Protocol):
    """Port for fetching audio files plus sidecars into a working directory."""

    def download(self, url: str, workdir: Path, kind: AlbumKind) -> None:
        """Populate ``workdir`` with paired audio and sidecar files."""
        ...


class DurationProbe(Protocol):
    """Callable returning an audio file's length in whole seconds."""

    def __call__(self, audio_path: Path) -> int:
        ...


__all__ = ["AudioAcquisitionPort", "CoverExtractionPort", "DurationProbe"]
