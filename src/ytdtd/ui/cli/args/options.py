"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from ytdtd.features.album.domain.models import AlbumKind
from ytdtd.features.manifest import ManifestFormat


@final
@dataclass(slots=True)
class DownloadArgs:
    """Command line arguments for ``download single`` and ``download album``."""

    command: Literal["download"]
    kind: AlbumKind
    url: str
    output_dir: Path
    manifest_format: ManifestFormat
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class PackageArgs:
    """Command line arguments for the ``package`` subcommand."""

    command: Literal["package"]
    source_dir: Path
    kind: AlbumKind
    album_title: str | None
    output_dir: Path
    manifest_format: ManifestFormat
    verbose: bool
    quiet: bool


CLIArgs = DownloadArgs | PackageArgs

__all__ = ["CLIArgs", "DownloadArgs", "PackageArgs"]
