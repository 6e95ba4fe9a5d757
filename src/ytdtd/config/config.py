"""Configuration management for ytdtd."""

import os
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from ytdtd.config.paths import default_config_path
from ytdtd.platform.logging import logger

MANIFEST_FORMAT_DEFAULT = "toml"
AUDIO_EXTENSION_DEFAULT = ".opus"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Manifest schema written into each album directory ("toml" or "json")
    manifest_format: str = MANIFEST_FORMAT_DEFAULT

    # Audio container produced by the downloader
    audio_extension: str = AUDIO_EXTENSION_DEFAULT

    # External executables
    yt_dlp_path: str = "yt-dlp"
    ffmpeg_path: str = "ffmpeg"
    magick_path: str = "magick"

    # Seconds before an external process is terminated (0 disables the limit)
    collaborator_timeout: int = 0

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self) -> None:
        """Write the configuration file, replacing any previous one atomically."""
        values = {
            key: str(value) if isinstance(value, Path) else value
            for key, value in asdict(self).items()
        }
        target = default_config_path()

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            staging = target.with_name(f".{target.name}.tmp")
            _ = staging.write_text(self._render_toml(values), encoding="utf-8")
            os.replace(staging, target)
            logger.info("Configuration saved to %s", target)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# ytdtd Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/ytdtd.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Manifest schema written into each album directory: toml or json")
        lines.append(f"manifest_format = {self._format_toml_value(config['manifest_format'])}")
        lines.append("")

        lines.append("# Audio file extension produced by the downloader")
        lines.append(f"audio_extension = {self._format_toml_value(config['audio_extension'])}")
        lines.append("")

        lines.append("# External executables (names on PATH or absolute paths)")
        lines.append("# YTDTD_YT_DLP, YTDTD_FFMPEG and YTDTD_MAGICK override these at startup")
        lines.append(f"yt_dlp_path = {self._format_toml_value(config['yt_dlp_path'])}")
        lines.append(f"ffmpeg_path = {self._format_toml_value(config['ffmpeg_path'])}")
        lines.append(f"magick_path = {self._format_toml_value(config['magick_path'])}")
        lines.append("")

        lines.append("# Seconds before an external process is terminated (0 = no limit)")
        lines.append(
            f"collaborator_timeout = {self._format_toml_value(config['collaborator_timeout'])}"
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file, creating a default file when missing.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(key for key in config_dict if key not in known)
                for key in unknown:
                    logger.warning("Ignoring unknown configuration key: %s", key)
                    del config_dict[key]

                log_file = config_dict.get("log_file")
                if isinstance(log_file, str) and not log_file.strip():
                    config_dict["log_file"] = None

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save()
            logger.info("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise
