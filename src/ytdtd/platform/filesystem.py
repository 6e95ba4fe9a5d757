"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import shutil
from pathlib import Path

from ytdtd.shared.errors import DestinationExists


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def create_exclusive_directory(directory: Path) -> Path:
    """Create ``directory`` and fail if anything already exists at that path.

    The parent must already exist. Creation is the only contention signal
    between concurrent runs, so existing directories are never reused.
    """

    try:
        directory.mkdir(mode=0o755)
    except FileExistsError as exc:
        raise DestinationExists(directory) from exc
    return directory


def copy_file(source: Path, destination: Path) -> Path:
    """Copy ``source`` byte-for-byte to ``destination`` and return the destination."""

    _ = shutil.copyfile(source, destination)
    return destination


__all__ = ["copy_file", "create_exclusive_directory", "ensure_directory"]
