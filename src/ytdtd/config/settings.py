"""Where: src/ytdtd/config/settings.py
What: Fixed naming constants and runtime settings derived from configuration.
Why: Resolve executables and limits once at startup so the pipeline never reads the environment.
Assumptions: - Executable overrides in the environment take precedence over config values.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from ytdtd.config.config import AUDIO_EXTENSION_DEFAULT, MANIFEST_FORMAT_DEFAULT, Config

# Naming policy ---------------------------------------------------------------

# Suffix that replaces the audio extension to locate a track's sidecar document.
SIDECAR_SUFFIX: Final[str] = ".info.json"

# Fixed name of the square cover image inside every album directory.
COVER_FILENAME: Final[str] = "cover.png"

# Primary artist reported when a sidecar credits nobody.
UNKNOWN_ARTIST: Final[str] = "Unknown Artist"

# Prefix for per-run temporary working directories.
WORKDIR_PREFIX: Final[str] = "ytdtd"


# Executable overrides --------------------------------------------------------

ENV_YT_DLP: Final[str] = "YTDTD_YT_DLP"
ENV_FFMPEG: Final[str] = "YTDTD_FFMPEG"
ENV_MAGICK: Final[str] = "YTDTD_MAGICK"


@dataclass(frozen=True, slots=True)
class Toolchain:
    """Resolved executables used to talk to external collaborators."""

    yt_dlp: str = "yt-dlp"
    ffmpeg: str = "ffmpeg"
    magick: str = "magick"
    timeout: float | None = None


@dataclass(frozen=True, slots=True)
class RuntimeSettings:
    """Validated settings for a single process invocation."""

    toolchain: Toolchain
    manifest_format: str
    audio_extension: str

    @classmethod
    def from_config(
        cls,
        config: Config,
        *,
        env: Mapping[str, str] | None = None,
    ) -> "RuntimeSettings":
        """Build settings from ``config`` honoring executable overrides in ``env``."""

        mapping = env if env is not None else os.environ
        timeout = config.collaborator_timeout
        toolchain = Toolchain(
            yt_dlp=resolve_executable(config.yt_dlp_path, env=mapping, env_var=ENV_YT_DLP, default="yt-dlp"),
            ffmpeg=resolve_executable(config.ffmpeg_path, env=mapping, env_var=ENV_FFMPEG, default="ffmpeg"),
            magick=resolve_executable(config.magick_path, env=mapping, env_var=ENV_MAGICK, default="magick"),
            timeout=float(timeout) if isinstance(timeout, (int, float)) and timeout > 0 else None,
        )
        return cls(
            toolchain=toolchain,
            manifest_format=(config.manifest_format or MANIFEST_FORMAT_DEFAULT).strip().lower(),
            audio_extension=normalize_extension(config.audio_extension),
        )


def resolve_executable(
    configured: str | None,
    *,
    env: Mapping[str, str],
    env_var: str,
    default: str,
) -> str:
    """Resolve an executable path: environment override, then config, then default."""

    candidate = (env.get(env_var) or "").strip()
    if candidate:
        return candidate
    if configured and configured.strip():
        return configured.strip()
    return default


def normalize_extension(extension: str | None) -> str:
    """Return ``extension`` lowercased with a leading dot."""

    value = (extension or "").strip().lower()
    if not value:
        return AUDIO_EXTENSION_DEFAULT
    return value if value.startswith(".") else f".{value}"


__all__ = [
    "COVER_FILENAME",
    "ENV_FFMPEG",
    "ENV_MAGICK",
    "ENV_YT_DLP",
    "RuntimeSettings",
    "SIDECAR_SUFFIX",
    "Toolchain",
    "UNKNOWN_ARTIST",
    "WORKDIR_PREFIX",
    "normalize_extension",
    "resolve_executable",
]
