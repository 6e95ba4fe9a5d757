"""Where: src/ytdtd/platform/collaborators/downloader.py
What: Invoke yt-dlp to fetch audio plus one info.json sidecar per track.
Why: The pipeline only consumes the resulting file layout, so acquisition stays a thin adapter.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, final

from ytdtd.features.album.domain.models import AlbumKind

from .process import ProcessRunner, run_process


@final
class YtDlpDownloader:
    """Acquire audio and sidecars with ``yt-dlp``."""

    # Filename templates carry the ordering prefix the normalizer reads back.
    OUTPUT_TEMPLATES: ClassVar[dict[AlbumKind, str]] = {
        AlbumKind.SINGLE: "01. %(track)s.%(ext)s",
        AlbumKind.ALBUM: "%(playlist_index)s. %(track)s.%(ext)s",
    }

    executable: str
    audio_format: str
    timeout: float | None

    def __init__(
        self,
        executable: str = "yt-dlp",
        *,
        audio_format: str = "opus",
        timeout: float | None = None,
        runner: ProcessRunner = run_process,
    ) -> None:
        self.executable = executable
        self.audio_format = audio_format.lstrip(".")
        self.timeout = timeout
        self._runner = runner

    def build_command(self, url: str, kind: AlbumKind) -> list[str]:
        """Return the argument vector for downloading ``url`` as ``kind``."""

        return [
            self.executable,
            "-x",
            "--audio-format",
            self.audio_format,
            "--embed-metadata",
            "--embed-thumbnail",
            "--write-info-json",
            "-o",
            self.OUTPUT_TEMPLATES[kind],
            url,
        ]

    def download(self, url: str, workdir: Path, kind: AlbumKind) -> None:
        """Download ``url`` into ``workdir``."""

        _ = self._runner(self.build_command(url, kind), cwd=workdir, timeout=self.timeout)


__all__ = ["YtDlpDownloader"]
