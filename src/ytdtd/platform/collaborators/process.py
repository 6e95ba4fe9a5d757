"""
Summary: Run external collaborator executables and surface their failures.
Why: Every collaborator shares one contract: block until exit, fail loudly with its output.
"""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from ytdtd.platform.logging import logger
from ytdtd.shared.errors import CollaboratorFailure


class ProcessRunner(Protocol):
    """Signature shared by ``run_process`` and test doubles."""

    def __call__(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        timeout: float | None = None,
    ) -> str:
        ...


def _as_text(stream: str | bytes | None) -> str:
    if stream is None:
        return ""
    if isinstance(stream, bytes):
        return stream.decode("utf-8", errors="replace")
    return stream


def _failure(
    argv: list[str],
    *,
    returncode: int | None,
    output: str = "",
    reason: str | None = None,
) -> CollaboratorFailure:
    """Log a ``collaborator.error`` event and return the failure to raise."""

    failure = CollaboratorFailure(argv, returncode=returncode, output=output, reason=reason)
    summary = str(failure).splitlines()[0]
    logger.error(
        "%s",
        summary,
        extra={
            "packaging_event": "collaborator.error",
            "command": shlex.join(argv),
            "returncode": returncode,
            "error_message": summary,
        },
    )
    return failure


def run_process(
    command: Sequence[str],
    *,
    cwd: Path | None = None,
    timeout: float | None = None,
) -> str:
    """Run ``command`` to completion and return its standard output.

    The process is killed when ``timeout`` elapses. Output is captured and
    logged at debug level line by line.

    Raises:
        CollaboratorFailure: If the executable cannot be started, times out,
            or exits with a non-zero status.
    """
    argv = [str(part) for part in command]
    program = Path(argv[0]).name if argv else "<empty command>"
    logger.info(
        "Running %s",
        shlex.join(argv),
        extra={"packaging_event": "collaborator.start", "command": shlex.join(argv)},
    )

    try:
        completed = subprocess.run(
            argv,
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        output = _as_text(exc.stdout) + _as_text(exc.stderr)
        raise _failure(
            argv,
            returncode=None,
            output=output,
            reason=f"timed out after {timeout:g}s" if timeout else "timed out",
        ) from exc
    except OSError as exc:
        raise _failure(
            argv,
            returncode=None,
            reason=f"could not be started: {exc.strerror or exc}",
        ) from exc

    stdout = _as_text(completed.stdout)
    stderr = _as_text(completed.stderr)
    for line in (stdout + stderr).splitlines():
        if line.strip():
            logger.debug("[%s] %s", program, line)

    if completed.returncode != 0:
        raise _failure(argv, returncode=completed.returncode, output=stdout + stderr)

    return stdout


__all__ = ["ProcessRunner", "run_process"]
