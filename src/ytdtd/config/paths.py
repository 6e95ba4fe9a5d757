"""Locations of the configuration file and the default log file.

Both live under the checkout that contains the running package, so a clone
carries its own settings and logs:

- ``<repo_root>/config/config.toml``
- ``<repo_root>/logs/ytdtd.log``
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")
CONFIG_FILENAME: Final[str] = "config.toml"
LOG_FILENAME: Final[str] = "ytdtd.log"


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the nearest ancestor of ``start`` holding a root marker.

    Falls back to the working directory when no ancestor qualifies, as for
    an installed wheel.
    """
    origin = (start or Path(__file__).resolve()).parent
    return next(
        (
            candidate
            for candidate in (origin, *origin.parents)
            if any((candidate / marker).exists() for marker in _ROOT_MARKERS)
        ),
        Path.cwd(),
    )


def default_config_path() -> Path:
    return (_detect_repo_root() / "config" / CONFIG_FILENAME).resolve()


def default_log_dir() -> Path:
    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    return default_log_dir() / LOG_FILENAME


__all__ = [
    "CONFIG_FILENAME",
    "LOG_FILENAME",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
]
