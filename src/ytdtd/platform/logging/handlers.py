"""Rich console handler for packaging events.

Where: platform/logging/handlers.py
What: Render structured packaging log records with icons, metrics and compact paths.
Why: Keep event presentation out of the pipeline code that emits the records.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PackagingRichHandler(RichHandler):
    """Rich handler that styles packaging events and renders paths in white."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "packaging.run.start": ("🚀", "cyan"),
        "packaging.run.complete": ("✅", "green"),
        "packaging.run.error": ("❌", "red"),
        "packaging.directory.create": ("📁", "cyan"),
        "packaging.cover.extract": ("🖼️", "magenta"),
        "packaging.track.copy": ("🎧", "blue"),
        "packaging.manifest.write": ("📝", "green"),
        "collaborator.start": ("⚙️", "yellow"),
        "collaborator.error": ("⛔", "red"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "packaging.run.start": "Packaging ",
        "packaging.run.complete": "Packaged ",
        "packaging.run.error": "Packaging failed ",
        "packaging.directory.create": "Created album directory ",
        "packaging.cover.extract": "Extracting cover from ",
        "packaging.track.copy": "Copying ",
        "packaging.manifest.write": "Wrote manifest ",
        "collaborator.start": "Running ",
        "collaborator.error": "Collaborator failed ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path relative to ``base`` with truncated leading segments."""

        pure_path = PurePath(path)
        base_path = PurePath(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and pure_path.is_relative_to(base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor and not truncated:
            display_string = anchor.rstrip("\\/") + separator if anchor.strip("\\/") else separator
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        for char in path_string:
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_packaging_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured packaging events with dedicated styling."""

        event = getattr(record, "packaging_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))

        sequence = getattr(record, "sequence", None)
        total_tracks = getattr(record, "total_tracks", None)
        if event == "packaging.track.copy" and isinstance(sequence, int) and isinstance(total_tracks, int):
            _ = body.append(f"[{sequence}/{total_tracks}] ")

        _ = body.append(self._EVENT_PREFIXES.get(event, ""))

        album_title = getattr(record, "album_title", None)
        if album_title and event in {"packaging.run.start", "packaging.run.complete"}:
            _ = body.append(f"'{album_title}' ")

        command = getattr(record, "command", None)
        if command and event.startswith("collaborator."):
            _ = body.append(str(command))

        source_path = getattr(record, "source_path", None)
        target_path = getattr(record, "target_path", None)
        if source_path:
            _ = body.append_text(
                self._format_path(str(source_path), base=getattr(record, "source_base_path", None))
            )
        if target_path:
            if source_path:
                _ = body.append(" → ")
            _ = body.append_text(
                self._format_path(str(target_path), base=getattr(record, "target_base_path", None))
            )

        metrics: list[str] = []
        if isinstance(total_tracks, int) and event != "packaging.track.copy":
            metrics.append(f"tracks={total_tracks}")
        duration = getattr(record, "duration_seconds", None)
        if isinstance(duration, (int, float)):
            metrics.append(f"duration={duration:.2f}s")
        returncode = getattr(record, "returncode", None)
        if isinstance(returncode, int):
            metrics.append(f"exit={returncode}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            metrics.append(str(error_message))
        if metrics:
            _ = body.append(" (" + ", ".join(metrics) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for packaging events."""

        packaging_text = self._render_packaging_message(record)
        if packaging_text is not None:
            return packaging_text

        return super().render_message(record, message)


__all__ = ["PackagingRichHandler"]
