"""Command line argument handling."""

from ytdtd.ui.cli.args.options import CLIArgs, DownloadArgs, PackageArgs
from ytdtd.ui.cli.args.parser import COMMANDS, ArgumentParser, CommandSpec

__all__ = ["ArgumentParser", "CLIArgs", "COMMANDS", "CommandSpec", "DownloadArgs", "PackageArgs"]
