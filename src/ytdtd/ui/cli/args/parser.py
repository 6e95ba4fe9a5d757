"""Command line argument parser.

Subcommands are described by an immutable tree of ``CommandSpec`` values.
``ArgumentParser.create_parser`` walks the tree; nothing registers itself
on a shared parser at import time.
"""

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final, final

from ytdtd import __version__
from ytdtd.config.config import Config
from ytdtd.features.album.domain.models import AlbumKind
from ytdtd.features.manifest import ManifestFormat
from ytdtd.platform.filesystem import ensure_directory
from ytdtd.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from ytdtd.ui.cli.args.options import CLIArgs, DownloadArgs, PackageArgs

ArgsBuilder = Callable[[argparse.Namespace, Config], CLIArgs]


@final
@dataclass(frozen=True, slots=True)
class CommandSpec:
    """Describe one subcommand: its flags, how to build its args, and its children."""

    name: str
    help: str
    configure: Callable[[argparse.ArgumentParser], None] | None = None
    build: ArgsBuilder | None = None
    subcommands: tuple["CommandSpec", ...] = ()


def _configure_common(parser: argparse.ArgumentParser) -> None:
    """Flags shared by every packaging subcommand."""

    _ = parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=".",
        help="Directory that receives the album directory (default: current directory)",
        metavar="OUTPUT_DIR",
    )
    _ = parser.add_argument(
        "--format",
        type=str,
        choices=[f.value for f in ManifestFormat],
        default=None,
        help="Manifest schema to write (default: from configuration)",
    )
    verbosity = parser.add_mutually_exclusive_group()
    _ = verbosity.add_argument(
        "--verbose",
        action="store_true",
        help="Show collaborator output and debug information",
    )
    _ = verbosity.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all output except errors",
    )


def _configure_download(parser: argparse.ArgumentParser) -> None:
    _ = parser.add_argument(
        "url",
        type=str,
        help="Source URL handed to the downloader",
        metavar="URL",
    )
    _configure_common(parser)


def _configure_package(parser: argparse.ArgumentParser) -> None:
    _ = parser.add_argument(
        "source_dir",
        type=str,
        help="Directory holding audio files and their .info.json sidecars",
        metavar="SOURCE_DIR",
    )
    _ = parser.add_argument(
        "--album",
        type=str,
        default=None,
        help="Album title (default: derived from the first track's metadata)",
        metavar="TITLE",
    )
    _ = parser.add_argument(
        "--kind",
        type=str,
        choices=[k.value for k in AlbumKind],
        default=AlbumKind.ALBUM.value,
        help="Whether the directory holds a single or an album (default: album)",
    )
    _configure_common(parser)


def _resolve_output_dir(raw: str) -> Path:
    output_dir = Path(raw)
    try:
        _ = ensure_directory(output_dir)
    except OSError as exc:
        logger.error("Output directory is not usable: %s (%s)", output_dir, exc)
        sys.exit(1)
    return output_dir


def _resolve_manifest_format(raw: str | None, config: Config) -> ManifestFormat:
    try:
        return ManifestFormat.from_user_input(raw or config.manifest_format)
    except ValueError as exc:
        logger.error("%s", exc)
        sys.exit(1)


def _build_download(kind: AlbumKind) -> ArgsBuilder:
    def build(parsed_args: argparse.Namespace, config: Config) -> DownloadArgs:
        return DownloadArgs(
            command="download",
            kind=kind,
            url=parsed_args.url,
            output_dir=_resolve_output_dir(parsed_args.output),
            manifest_format=_resolve_manifest_format(parsed_args.format, config),
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    return build


def _build_package(parsed_args: argparse.Namespace, config: Config) -> PackageArgs:
    source_dir = Path(parsed_args.source_dir)
    if not source_dir.is_dir():
        logger.error("Source directory does not exist or is not a directory: %s", source_dir)
        sys.exit(1)

    return PackageArgs(
        command="package",
        source_dir=source_dir,
        kind=AlbumKind(parsed_args.kind),
        album_title=parsed_args.album or None,
        output_dir=_resolve_output_dir(parsed_args.output),
        manifest_format=_resolve_manifest_format(parsed_args.format, config),
        verbose=parsed_args.verbose,
        quiet=parsed_args.quiet,
    )


COMMANDS: Final[tuple[CommandSpec, ...]] = (
    CommandSpec(
        name="download",
        help="Download audio from a URL and package it as an album",
        subcommands=(
            CommandSpec(
                name="single",
                help="Download one track and package it as a single",
                configure=_configure_download,
                build=_build_download(AlbumKind.SINGLE),
            ),
            CommandSpec(
                name="album",
                help="Download a playlist and package it as an album",
                configure=_configure_download,
                build=_build_download(AlbumKind.ALBUM),
            ),
        ),
    ),
    CommandSpec(
        name="package",
        help="Package a directory of already downloaded audio and sidecars",
        configure=_configure_package,
        build=_build_package,
    ),
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser(commands: Sequence[CommandSpec] = COMMANDS) -> argparse.ArgumentParser:
        """Create argument parser from a command descriptor tree.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="ytdtd",
            description="ytdtd - Package downloaded audio and metadata into album directories.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )
        ArgumentParser._attach(parser, commands, depth=0)
        return parser

    @staticmethod
    def _attach(
        parser: argparse.ArgumentParser,
        commands: Sequence[CommandSpec],
        *,
        depth: int,
    ) -> None:
        subparsers = parser.add_subparsers(dest=f"command_{depth}", required=True)
        for spec in commands:
            subparser = subparsers.add_parser(spec.name, help=spec.help)
            if spec.configure is not None:
                spec.configure(subparser)
            if spec.subcommands:
                ArgumentParser._attach(subparser, spec.subcommands, depth=depth + 1)
            elif spec.build is not None:
                subparser.set_defaults(build_args=spec.build)

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If paths or configured values fail validation.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        build_args: ArgsBuilder | None = getattr(parsed_args, "build_args", None)
        if build_args is None:
            logger.error("Unsupported command: %s", parsed_args)
            sys.exit(2)

        return build_args(parsed_args, configuration)


__all__ = ["COMMANDS", "ArgumentParser", "CommandSpec"]
