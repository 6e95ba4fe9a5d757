"""Application service for packaging albums.

This layer centralizes orchestration and construction of collaborators so the
CLI only translates arguments into a ``PackageRequest``.
"""

from __future__ import annotations

import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import final

from ytdtd.config.settings import WORKDIR_PREFIX, RuntimeSettings
from ytdtd.features.album.domain.models import AlbumKind
from ytdtd.features.album.usecases import (
    AlbumPackager,
    AudioAcquisitionPort,
    CoverExtractionPort,
    DurationProbe,
    PackageResult,
    discover_tracks,
    resolve_album_title,
)
from ytdtd.features.manifest import ManifestFormat, get_serializer
from ytdtd.platform.audio import probe_duration
from ytdtd.platform.collaborators import FfmpegCoverExtractor, YtDlpDownloader
from ytdtd.platform.logging import logger
from ytdtd.shared.errors import NoTracksFound


@dataclass(frozen=True)
class PackageRequest:
    """Input parameters for one packaging run.

    Attributes:
        destination_root: Directory that receives the album directory.
        kind: Single or album; decides the download template and album title.
        manifest_format: Schema of the manifest written into the album.
        album_title: Explicit album title; derived from the tracks when None.
    """

    destination_root: Path
    kind: AlbumKind = AlbumKind.ALBUM
    manifest_format: ManifestFormat = ManifestFormat.TOML
    album_title: str | None = None


@final
class PackageAlbumService:
    """Application service that acquires, discovers and packages one album per call."""

    def __init__(
        self,
        settings: RuntimeSettings,
        *,
        downloader: AudioAcquisitionPort | None = None,
        cover_extractor: CoverExtractionPort | None = None,
        duration_probe: DurationProbe | None = probe_duration,
    ) -> None:
        """Create a service; collaborators default to the configured toolchain.

        Tests can inject light-weight doubles in place of the external tools.
        """
        toolchain = settings.toolchain
        self.settings: RuntimeSettings = settings
        self.downloader: AudioAcquisitionPort = downloader or YtDlpDownloader(
            toolchain.yt_dlp,
            audio_format=settings.audio_extension,
            timeout=toolchain.timeout,
        )
        self.cover_extractor: CoverExtractionPort = cover_extractor or FfmpegCoverExtractor(
            toolchain.ffmpeg,
            toolchain.magick,
            timeout=toolchain.timeout,
        )
        self.duration_probe: DurationProbe | None = duration_probe

    def download_and_package(self, url: str, request: PackageRequest) -> PackageResult:
        """Download ``url`` into an isolated working directory and package the result.

        The working directory is removed when the run ends, successful or not.
        """
        with tempfile.TemporaryDirectory(prefix=WORKDIR_PREFIX) as scratch:
            workdir = Path(scratch)
            logger.debug("Using working directory %s", workdir)
            self.downloader.download(url, workdir, request.kind)
            return self.package_directory(workdir, request)

    def package_directory(self, source_dir: Path, request: PackageRequest) -> PackageResult:
        """Package already acquired audio and sidecars found in ``source_dir``.

        Raises:
            NoTracksFound: If ``source_dir`` holds no audio files.
        """
        tracks = discover_tracks(source_dir, audio_extension=self.settings.audio_extension)
        if not tracks:
            raise NoTracksFound(source_dir)

        album_title = request.album_title or resolve_album_title(tracks, request.kind)
        packager = AlbumPackager(
            self.cover_extractor,
            serializer=get_serializer(request.manifest_format),
            duration_probe=self.duration_probe,
        )
        return packager.package(album_title, tracks, source_dir, request.destination_root)


__all__ = ["PackageAlbumService", "PackageRequest"]
