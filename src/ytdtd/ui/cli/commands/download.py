"""Download command implementation."""

from typing import final, override

from ytdtd.features.album.usecases import PackageResult
from ytdtd.ui.cli.args.options import DownloadArgs
from ytdtd.ui.cli.commands.executor import CommandExecutor


@final
class DownloadCommand(CommandExecutor):
    """Download a single or a playlist, then package it."""

    @override
    def run(self) -> PackageResult:
        assert isinstance(self.args, DownloadArgs)
        return self.service.download_and_package(self.args.url, self.request)
