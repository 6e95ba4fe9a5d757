"""src/ytdtd/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse request construction and presentation helpers across commands.
"""

from abc import ABC, abstractmethod

from ytdtd.application.services import PackageAlbumService, PackageRequest
from ytdtd.features.album.usecases import PackageResult
from ytdtd.ui.cli.args.options import CLIArgs
from ytdtd.ui.cli.display.result import ResultDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CLIArgs
    service: PackageAlbumService
    request: PackageRequest
    result_display: ResultDisplay

    def __init__(
        self,
        args: CLIArgs,
        service: PackageAlbumService,
        result_display: ResultDisplay | None = None,
    ) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            service: Application service performing the run.
            result_display: Optional display override (for testing).
        """
        self.args = args
        self.service = service
        self.request = PackageRequest(
            destination_root=args.output_dir,
            kind=args.kind,
            manifest_format=args.manifest_format,
            album_title=getattr(args, "album_title", None),
        )
        self.result_display = result_display or ResultDisplay()

    @abstractmethod
    def run(self) -> PackageResult:
        """Perform the command's packaging run."""
        pass

    def execute(self) -> PackageResult:
        """Run the command and display its result."""

        result = self.run()
        self.result_display.show_result(result, quiet=self.args.quiet)
        return result
