"""Command line interface for ytdtd."""

import sys
from collections.abc import Callable, Mapping
from typing import Final, final

from ytdtd.application.services import PackageAlbumService
from ytdtd.config.config import Config
from ytdtd.config.settings import RuntimeSettings
from ytdtd.features.album.usecases import PackagingEvent
from ytdtd.platform.logging import logger
from ytdtd.shared.errors import PackagingError
from ytdtd.ui.cli.args import ArgumentParser
from ytdtd.ui.cli.args.options import CLIArgs, DownloadArgs, PackageArgs
from ytdtd.ui.cli.commands import CommandExecutor, DownloadCommand, PackageCommand

ServiceFactory = Callable[[RuntimeSettings], PackageAlbumService]

EXECUTORS: Final[Mapping[type, type[CommandExecutor]]] = {
    DownloadArgs: DownloadCommand,
    PackageArgs: PackageCommand,
}


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(
        args_list: list[str] | None = None,
        *,
        service_factory: ServiceFactory = PackageAlbumService,
    ) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            service_factory: Builds the application service from resolved settings.
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            settings = RuntimeSettings.from_config(Config.load())
            command = EXECUTORS[type(args)](args, service_factory(settings))
            _ = command.execute()

        except PackagingError as e:
            logger.error(
                "%s",
                e,
                extra={"packaging_event": PackagingEvent.RUN_ERROR.value, "error_message": str(e)},
            )
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures call ``sys.exit``
        with a non-zero status before this return is reached.
    """
    CommandProcessor.process_command()
    return 0
