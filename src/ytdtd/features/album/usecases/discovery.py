"""
Summary: Pair audio files with their sidecar documents inside a directory.
Why: Packaging needs complete metadata for every track, so gaps must fail the run early.
"""

from __future__ import annotations

from pathlib import Path

from ytdtd.config.config import AUDIO_EXTENSION_DEFAULT
from ytdtd.config.settings import SIDECAR_SUFFIX
from ytdtd.features.album.domain.models import Track
from ytdtd.platform.logging import logger
from ytdtd.shared.errors import MissingSidecar

from .sidecar_parser import parse_sidecar


def sidecar_path_for(audio_path: Path) -> Path:
    """Return the sidecar path expected next to ``audio_path``."""

    return audio_path.with_name(audio_path.stem + SIDECAR_SUFFIX)


def discover_tracks(directory: Path, *, audio_extension: str = AUDIO_EXTENSION_DEFAULT) -> list[Track]:
    """Discover audio/sidecar pairs in ``directory``.

    Only top-level entries are considered. Tracks are returned in lexical
    filename order; numbering is decided later by the normalizer.

    Args:
        directory: Directory holding freshly acquired audio files.
        audio_extension: Recognized audio suffix, including the leading dot.

    Returns:
        list[Track]: One track per audio file, possibly empty.

    Raises:
        MissingSidecar: If any audio file lacks its sidecar document.
        MalformedMetadata: If a sidecar cannot be parsed.
    """
    extension = audio_extension.lower()
    audio_files = sorted(
        (
            entry
            for entry in directory.iterdir()
            if entry.is_file() and entry.suffix.lower() == extension
        ),
        key=lambda entry: entry.name,
    )

    tracks: list[Track] = []
    for audio_path in audio_files:
        sidecar = sidecar_path_for(audio_path)
        if not sidecar.is_file():
            raise MissingSidecar(audio_path, sidecar)

        info = parse_sidecar(sidecar.read_bytes(), source=sidecar)
        tracks.append(Track(audio_path=audio_path, info=info))

    logger.debug("Discovered %d track(s) in %s", len(tracks), directory)
    return tracks


__all__ = ["discover_tracks", "sidecar_path_for"]
