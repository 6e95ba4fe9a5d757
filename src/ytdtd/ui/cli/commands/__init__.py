"""Command execution package for CLI."""

from ytdtd.ui.cli.commands.download import DownloadCommand
from ytdtd.ui.cli.commands.executor import CommandExecutor
from ytdtd.ui.cli.commands.package import PackageCommand

__all__ = [
    "CommandExecutor",
    "DownloadCommand",
    "PackageCommand",
]
