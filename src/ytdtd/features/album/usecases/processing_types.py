"""src/ytdtd/features/album/usecases/processing_types.py
Where: Album feature usecases layer.
What: Structured log event names and the result record of a packaging run.
Why: Keep the packager lean by centralising type definitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from ytdtd.features.album.domain.models import AlbumManifest


class PackagingEvent(StrEnum):
    """Structured event identifiers for packaging logs."""

    RUN_START = "packaging.run.start"
    RUN_COMPLETE = "packaging.run.complete"
    RUN_ERROR = "packaging.run.error"
    DIRECTORY_CREATE = "packaging.directory.create"
    COVER_EXTRACT = "packaging.cover.extract"
    TRACK_COPY = "packaging.track.copy"
    MANIFEST_WRITE = "packaging.manifest.write"


@dataclass(frozen=True, slots=True)
class PackageResult:
    """Outcome of a successful packaging run."""

    album_dir: Path
    manifest_path: Path
    cover_path: Path
    manifest: AlbumManifest
    duration_seconds: float = 0.0


__all__ = ["PackageResult", "PackagingEvent"]
