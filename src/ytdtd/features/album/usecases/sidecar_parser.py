"""
Summary: Parse sidecar metadata documents into ``TrackInfo`` records.
Why: Tolerate missing optional fields while rejecting documents that are not metadata at all.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

from ytdtd.features.album.domain.models import TrackInfo
from ytdtd.shared.errors import MalformedMetadata


def parse_sidecar(raw: bytes, *, source: Path | None = None) -> TrackInfo:
    """Parse raw sidecar bytes into a ``TrackInfo``.

    Args:
        raw: Document bytes as written by the acquisition tool.
        source: Optional path used only to enrich error messages.

    Returns:
        TrackInfo: Parsed metadata; absent or null fields take their empty value.

    Raises:
        MalformedMetadata: If the bytes are not a JSON object or a known field
            has an incompatible type.
    """
    try:
        document: Any = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedMetadata(f"Sidecar is not valid JSON: {exc}", source=source) from exc

    if not isinstance(document, dict):
        raise MalformedMetadata("Sidecar must contain a JSON object", source=source)

    fields = cast(dict[str, Any], document)
    artists = _get_string_list(fields, "artists", source)
    if not artists and "artists" not in fields:
        artists = _split_legacy_artist(_get_string(fields, "artist", source))

    return TrackInfo(
        title=_get_string(fields, "title", source),
        track=_get_string(fields, "track", source),
        album=_get_string(fields, "album", source),
        artists=artists,
        release_year=_get_int(fields, "release_year", source),
        upload_date=_get_string(fields, "upload_date", source),
        duration=_get_int(fields, "duration", source),
        genres=_get_string_list(fields, "genres", source),
        tags=_get_string_list(fields, "tags", source),
        playlist_title=_get_string(fields, "playlist_title", source),
    )


def _get_string(fields: Mapping[str, Any], key: str, source: Path | None) -> str:
    value = fields.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise MalformedMetadata(f"Field '{key}' must be a string", source=source)
    return value.strip()


def _get_int(fields: Mapping[str, Any], key: str, source: Path | None) -> int:
    value = fields.get(key)
    if value is None:
        return 0
    # bool is an int subclass; a boolean year or duration is never meaningful
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedMetadata(f"Field '{key}' must be a number", source=source)
    if not math.isfinite(value):
        raise MalformedMetadata(f"Field '{key}' must be a number", source=source)
    return int(round(value))


def _get_string_list(fields: Mapping[str, Any], key: str, source: Path | None) -> tuple[str, ...]:
    value = fields.get(key)
    if value is None:
        return ()
    if not isinstance(value, list):
        raise MalformedMetadata(f"Field '{key}' must be a list of strings", source=source)

    items: list[str] = []
    for item in cast(list[object], value):
        if not isinstance(item, str):
            raise MalformedMetadata(f"Field '{key}' must be a list of strings", source=source)
        stripped = item.strip()
        if stripped:
            items.append(stripped)
    return tuple(items)


def _split_legacy_artist(artist: str) -> tuple[str, ...]:
    """Split the older comma-separated ``artist`` field into individual names."""

    return tuple(part.strip() for part in artist.split(",") if part.strip())


__all__ = ["parse_sidecar"]
