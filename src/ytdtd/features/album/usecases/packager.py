"""
Summary: Assemble an album directory from discovered tracks.
Why: This is the only stage with filesystem and process side effects, so it owns their order.
"""

from __future__ import annotations

import dataclasses
import logging
import time
from collections.abc import Sequence
from pathlib import Path
from typing import final

from ytdtd.features.album.domain.models import Track
from ytdtd.features.album.domain.slug import slugify
from ytdtd.features.manifest import ManifestSerializer, TomlManifestSerializer, write_manifest
from ytdtd.platform.audio import probe_duration
from ytdtd.platform.filesystem import copy_file, create_exclusive_directory
from ytdtd.platform.logging import logger
from ytdtd.shared.errors import NoTracksFound

from .normalizer import build_manifest, order_tracks
from .ports import CoverExtractionPort, DurationProbe
from .processing_types import PackageResult, PackagingEvent


@final
class AlbumPackager:
    """Create the album directory, cover, audio copies and manifest.

    Steps run in a fixed order: directory, cover, audio copies, manifest.
    A failure at any step aborts the run and leaves whatever was already
    written in place; there is no rollback.
    """

    def __init__(
        self,
        cover_extractor: CoverExtractionPort,
        *,
        serializer: ManifestSerializer | None = None,
        duration_probe: DurationProbe | None = probe_duration,
    ) -> None:
        self._cover_extractor = cover_extractor
        self._serializer: ManifestSerializer = serializer or TomlManifestSerializer()
        self._duration_probe = duration_probe

    def package(
        self,
        album_title: str,
        tracks: Sequence[Track],
        source_dir: Path,
        destination_root: Path,
    ) -> PackageResult:
        """Package ``tracks`` into ``destination_root/<slug of album_title>``.

        Raises:
            NoTracksFound: If ``tracks`` is empty.
            DestinationExists: If the album directory already exists.
            CollaboratorFailure: If cover extraction fails.
            UnresolvedYear: If a track has no usable year.
        """
        start = time.perf_counter()
        if not tracks:
            raise NoTracksFound(source_dir)

        ordered = order_tracks(tracks)
        total = len(ordered)
        self._log(
            PackagingEvent.RUN_START,
            "Packaging %d track(s) from %s as '%s'",
            total,
            source_dir,
            album_title,
            album_title=album_title,
            total_tracks=total,
            source_path=source_dir,
        )

        album_dir = create_exclusive_directory(destination_root / slugify(album_title))
        self._log(
            PackagingEvent.DIRECTORY_CREATE,
            "Created album directory %s",
            album_dir,
            target_path=album_dir,
        )

        cover_source = ordered[0].audio_path
        self._log(
            PackagingEvent.COVER_EXTRACT,
            "Extracting cover from %s",
            cover_source,
            source_path=cover_source,
            source_base_path=source_dir,
        )
        cover_path = self._cover_extractor.extract(cover_source, album_dir)

        for sequence, track in enumerate(ordered, start=1):
            target = album_dir / track.filename
            self._log(
                PackagingEvent.TRACK_COPY,
                "Copying %s to %s",
                track.audio_path,
                target,
                sequence=sequence,
                total_tracks=total,
                source_path=track.audio_path,
                source_base_path=source_dir,
                target_path=target,
                target_base_path=destination_root,
            )
            _ = copy_file(track.audio_path, target)

        manifest = build_manifest(
            album_title,
            [self._with_duration(track) for track in ordered],
            cover_art=cover_path.relative_to(album_dir).as_posix(),
        )
        manifest_path = write_manifest(manifest, album_dir, self._serializer)
        self._log(
            PackagingEvent.MANIFEST_WRITE,
            "Wrote manifest %s",
            manifest_path,
            target_path=manifest_path,
            target_base_path=destination_root,
        )

        duration = time.perf_counter() - start
        self._log(
            PackagingEvent.RUN_COMPLETE,
            "Packaged '%s' into %s",
            album_title,
            album_dir,
            album_title=album_title,
            total_tracks=total,
            target_path=album_dir,
            duration_seconds=round(duration, 4),
        )
        return PackageResult(
            album_dir=album_dir,
            manifest_path=manifest_path,
            cover_path=cover_path,
            manifest=manifest,
            duration_seconds=duration,
        )

    def _with_duration(self, track: Track) -> Track:
        """Fill a missing sidecar duration from the audio stream itself."""

        if track.info.duration > 0 or self._duration_probe is None:
            return track
        duration = self._duration_probe(track.audio_path)
        if duration <= 0:
            return track
        return dataclasses.replace(track, info=dataclasses.replace(track.info, duration=duration))

    @staticmethod
    def _log(event: PackagingEvent, message: str, *args: object, **context: object) -> None:
        logger.log(logging.INFO, message, *args, extra={"packaging_event": event.value, **context})


__all__ = ["AlbumPackager"]
