# Where: ytdtd.shared.errors
# What: Exception hierarchy raised by the packaging pipeline and its collaborators.
# Why: Every failure is fatal for a run, so callers catch one base type at the boundary.

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class PackagingError(Exception):
    """Base exception for every packaging pipeline failure."""


class MalformedMetadata(PackagingError):
    """Raised when a sidecar document is not a usable metadata object."""

    def __init__(self, message: str, *, source: Path | None = None) -> None:
        detail = f"{message} ({source})" if source is not None else message
        super().__init__(detail)
        self.source: Path | None = source


class MissingSidecar(PackagingError):
    """Raised when an audio file has no matching sidecar document."""

    def __init__(self, audio_path: Path, sidecar_path: Path) -> None:
        super().__init__(f"Missing metadata sidecar for {audio_path.name}: expected {sidecar_path}")
        self.audio_path: Path = audio_path
        self.sidecar_path: Path = sidecar_path


class UnresolvedYear(PackagingError):
    """Raised when neither the release year nor the upload date yields a year."""

    def __init__(self, track_name: str, release_year: int, upload_date: str) -> None:
        super().__init__(
            f"Cannot resolve year for '{track_name}' "
            f"(release_year={release_year!r}, upload_date={upload_date!r})"
        )
        self.track_name: str = track_name


class DestinationExists(PackagingError):
    """Raised when the album directory already exists."""

    def __init__(self, destination: Path) -> None:
        super().__init__(f"Album directory already exists: {destination}")
        self.destination: Path = destination


class CollaboratorFailure(PackagingError):
    """Raised when an external process fails, times out, or cannot be started."""

    def __init__(
        self,
        command: Sequence[str],
        *,
        returncode: int | None,
        output: str = "",
        reason: str | None = None,
    ) -> None:
        self.command: tuple[str, ...] = tuple(command)
        self.returncode: int | None = returncode
        self.output: str = output
        program = self.command[0] if self.command else "<empty command>"
        if reason is None:
            reason = f"exited with status {returncode}"
        message = f"{program} {reason}"
        tail = _output_tail(output)
        if tail:
            message = f"{message}:\n{tail}"
        super().__init__(message)


class NoTracksFound(PackagingError):
    """Raised when a run produced no audio files to package."""

    def __init__(self, directory: Path) -> None:
        super().__init__(f"No audio tracks found in {directory}")
        self.directory: Path = directory


def _output_tail(output: str, lines: int = 20) -> str:
    return "\n".join(output.strip().splitlines()[-lines:])


__all__ = [
    "CollaboratorFailure",
    "DestinationExists",
    "MalformedMetadata",
    "MissingSidecar",
    "NoTracksFound",
    "PackagingError",
    "UnresolvedYear",
]
