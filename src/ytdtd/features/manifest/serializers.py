"""
Summary: Render album manifests into the supported on-disk schemas.
Why: Keep schema choice pluggable so new formats never touch discovery or normalization.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from enum import StrEnum
from pathlib import Path
from typing import Any, ClassVar, Final, Protocol, final, runtime_checkable

from ytdtd.features.album.domain.models import AlbumManifest, NormalizedTrack

_TOML_ESCAPES: Final[dict[str, str]] = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


class ManifestFormat(StrEnum):
    """Supported manifest schemas."""

    TOML = "toml"
    JSON = "json"

    @staticmethod
    def from_user_input(value: str) -> "ManifestFormat":
        """Translate raw CLI or config input into the matching format."""

        normalized = value.strip().lower()
        for manifest_format in ManifestFormat:
            if manifest_format.value == normalized:
                return manifest_format
        valid = ", ".join(f.value for f in ManifestFormat)
        raise ValueError(f"Unsupported manifest format '{value}'. Valid options: {valid}")


@runtime_checkable
class ManifestSerializer(Protocol):
    """Render an ``AlbumManifest`` into a document with a fixed file name."""

    filename: str

    def render(self, manifest: AlbumManifest) -> str:
        """Return the serialized document; identical input yields identical output."""
        ...


@final
class TomlManifestSerializer:
    """Structured schema: album fields plus one ``[[tracks]]`` table per track."""

    filename: ClassVar[str] = "album.toml"

    def render(self, manifest: AlbumManifest) -> str:
        lines: list[str] = [
            f"album = {toml_string(manifest.album_title)}",
            f"artist = {toml_string(manifest.album_artist)}",
            f"coverart = {toml_string(manifest.cover_art_relative_path)}",
        ]

        for track in manifest.tracks:
            lines.append("")
            lines.extend(self._render_track(track))

        return "\n".join(lines) + "\n"

    @staticmethod
    def _render_track(track: NormalizedTrack) -> list[str]:
        file_table = (
            f"{{ lossless = {toml_string('')}, lossy = {toml_string(track.source_filename)} }}"
        )
        return [
            "[[tracks]]",
            f"num = {track.number}",
            f"name = {toml_string(track.display_name)}",
            f"duration = {track.duration}",
            f"artist = {toml_string(track.primary_artist)}",
            f"year = {track.year}",
            f"tags = {toml_string_array(track.tags)}",
            f"genres = {toml_string_array(track.genres)}",
            f"featuring = {toml_string_array(track.featuring_artists)}",
            f"file = {file_table}",
        ]


@final
class JsonManifestSerializer:
    """Simplified schema: shared album fields and the ordered track file names."""

    filename: ClassVar[str] = "album.json"

    def render(self, manifest: AlbumManifest) -> str:
        document: dict[str, Any] = {
            "album": manifest.album_title,
            "artist": manifest.album_artist,
            "coverart": manifest.cover_art_relative_path,
            "year": manifest.tracks[0].year if manifest.tracks else None,
            "tracks": [track.source_filename for track in manifest.tracks],
        }
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


_SERIALIZERS: Final[dict[ManifestFormat, Callable[[], ManifestSerializer]]] = {
    ManifestFormat.TOML: TomlManifestSerializer,
    ManifestFormat.JSON: JsonManifestSerializer,
}


def get_serializer(manifest_format: ManifestFormat | str) -> ManifestSerializer:
    """Return a serializer instance for ``manifest_format``."""

    if not isinstance(manifest_format, ManifestFormat):
        manifest_format = ManifestFormat.from_user_input(manifest_format)
    return _SERIALIZERS[manifest_format]()


def write_manifest(
    manifest: AlbumManifest,
    album_dir: Path,
    serializer: ManifestSerializer,
) -> Path:
    """Write ``manifest`` into ``album_dir`` under the serializer's fixed file name."""

    target = album_dir / serializer.filename
    # newline="" keeps "\n" line endings on every platform
    with open(target, "w", encoding="utf-8", newline="") as handle:
        _ = handle.write(serializer.render(manifest))
    return target


def toml_string(value: str) -> str:
    """Render ``value`` as a TOML basic string."""

    escaped: list[str] = []
    for char in value:
        if char in _TOML_ESCAPES:
            escaped.append(_TOML_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            escaped.append(f"\\u{ord(char):04X}")
        else:
            escaped.append(char)
    return '"' + "".join(escaped) + '"'


def toml_string_array(values: Sequence[str]) -> str:
    """Render ``values`` as a single-line TOML array of strings."""

    return "[" + ", ".join(toml_string(value) for value in values) + "]"


__all__ = [
    "JsonManifestSerializer",
    "ManifestFormat",
    "ManifestSerializer",
    "TomlManifestSerializer",
    "get_serializer",
    "toml_string",
    "toml_string_array",
    "write_manifest",
]
