"""
Summary: Domain layer for album packaging.
Why: Expose value objects and the slug policy without pulling in use cases.
"""

from .models import AlbumKind, AlbumManifest, NormalizedTrack, Track, TrackInfo
from .slug import Slugifier, slugify

__all__ = [
    "AlbumKind",
    "AlbumManifest",
    "NormalizedTrack",
    "Slugifier",
    "Track",
    "TrackInfo",
    "slugify",
]
