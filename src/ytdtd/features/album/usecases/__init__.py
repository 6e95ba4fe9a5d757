"""
Summary: Album packaging use cases.
Why: Expose discovery, normalization and packaging behind one import surface.
"""

from .discovery import discover_tracks, sidecar_path_for
from .normalizer import (
    assign_track_numbers,
    build_manifest,
    extract_leading_number,
    normalize_tracks,
    order_tracks,
    resolve_album_title,
    resolve_year,
    split_artists,
)
from .packager import AlbumPackager
from .ports import AudioAcquisitionPort, CoverExtractionPort, DurationProbe
from .processing_types import PackageResult, PackagingEvent
from .sidecar_parser import parse_sidecar

__all__ = [
    "AlbumPackager",
    "AudioAcquisitionPort",
    "CoverExtractionPort",
    "DurationProbe",
    "PackageResult",
    "PackagingEvent",
    "assign_track_numbers",
    "build_manifest",
    "discover_tracks",
    "extract_leading_number",
    "normalize_tracks",
    "order_tracks",
    "parse_sidecar",
    "resolve_album_title",
    "resolve_year",
    "sidecar_path_for",
    "split_artists",
]
