"""src/ytdtd/ui/cli/display/result.py
What: Render the user-facing summary of a packaging run.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ytdtd.features.album.usecases import PackageResult


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_result(self, result: PackageResult, quiet: bool = False) -> None:
        """Display the packaged album.

        Args:
            result: Outcome of the packaging run.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        manifest = result.manifest
        self.console.print(
            f"[bold green]Packaged[/bold green] {escape(manifest.album_title)} "
            f"by {escape(manifest.album_artist)} → {escape(str(result.album_dir))}"
        )

        table = Table(title="Tracks", show_lines=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Title")
        table.add_column("Artist")
        table.add_column("Featuring")
        table.add_column("Year", justify="right")
        table.add_column("File", style="dim")

        for track in manifest.tracks:
            table.add_row(
                str(track.number),
                escape(track.display_name),
                escape(track.primary_artist),
                escape(", ".join(track.featuring_artists)),
                str(track.year),
                escape(track.source_filename),
            )

        self.console.print(table)
        self.console.print(
            f"Manifest: {escape(result.manifest_path.name)}  Cover: {escape(result.cover_path.name)}"
        )
