"""Package command implementation."""

from typing import final, override

from ytdtd.features.album.usecases import PackageResult
from ytdtd.ui.cli.args.options import PackageArgs
from ytdtd.ui.cli.commands.executor import CommandExecutor


@final
class PackageCommand(CommandExecutor):
    """Package a directory that already holds audio and sidecars."""

    @override
    def run(self) -> PackageResult:
        assert isinstance(self.args, PackageArgs)
        return self.service.package_directory(self.args.source_dir, self.request)
