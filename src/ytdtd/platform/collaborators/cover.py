"""Where: src/ytdtd/platform/collaborators/cover.py
What: Extract one frame from an audio file's embedded artwork and crop it square.
Why: Cover extraction is delegated to ffmpeg and ImageMagick; only the final file matters.
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import final

from ytdtd.config.settings import COVER_FILENAME, WORKDIR_PREFIX
from ytdtd.shared.errors import CollaboratorFailure

from .process import ProcessRunner, run_process


@final
class FfmpegCoverExtractor:
    """Produce ``cover.png`` with ``ffmpeg`` (frame grab) and ``magick`` (square crop)."""

    ffmpeg: str
    magick: str
    timeout: float | None

    def __init__(
        self,
        ffmpeg: str = "ffmpeg",
        magick: str = "magick",
        *,
        timeout: float | None = None,
        runner: ProcessRunner = run_process,
    ) -> None:
        self.ffmpeg = ffmpeg
        self.magick = magick
        self.timeout = timeout
        self._runner = runner

    def frame_command(self, source_audio: Path, frame_path: Path) -> list[str]:
        return [self.ffmpeg, "-y", "-i", str(source_audio), "-frames:v", "1", str(frame_path)]

    def crop_command(self, frame_path: Path, target: Path) -> list[str]:
        return [self.magick, str(frame_path), "-gravity", "Center", "-extent", "1:1", str(target)]

    def extract(self, source_audio: Path, album_dir: Path) -> Path:
        """Write the square cover for ``source_audio`` into ``album_dir``.

        Raises:
            CollaboratorFailure: If either step fails or no cover file appears.
        """
        target = album_dir / COVER_FILENAME
        with tempfile.TemporaryDirectory(prefix=WORKDIR_PREFIX) as scratch:
            frame_path = Path(scratch) / COVER_FILENAME
            _ = self._runner(self.frame_command(source_audio, frame_path), timeout=self.timeout)
            crop = self.crop_command(frame_path, target)
            _ = self._runner(crop, timeout=self.timeout)

        if not target.is_file():
            raise CollaboratorFailure(crop, returncode=0, reason=f"did not produce {target}")
        return target


__all__ = ["FfmpegCoverExtractor"]
