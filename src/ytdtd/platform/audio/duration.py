"""Read track length from audio files with mutagen."""

from __future__ import annotations

from pathlib import Path

import mutagen
from mutagen import MutagenError

from ytdtd.platform.logging import logger
from ytdtd.shared.errors import MalformedMetadata


def probe_duration(audio_path: Path) -> int:
    """Return the length of ``audio_path`` in whole seconds.

    Formats mutagen does not recognize report 0.

    Raises:
        MalformedMetadata: If mutagen recognizes the file but cannot read it.
    """
    try:
        audio = mutagen.File(audio_path)
    except MutagenError as exc:
        logger.error("Failed to read audio stream info from %s: %s", audio_path, exc)
        raise MalformedMetadata(f"Unreadable audio file: {exc}", source=audio_path) from exc

    if audio is None or audio.info is None:
        logger.debug("No stream info available for %s", audio_path)
        return 0

    length = getattr(audio.info, "length", 0) or 0
    return int(round(length))


__all__ = ["probe_duration"]
