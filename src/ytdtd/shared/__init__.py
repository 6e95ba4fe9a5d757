# Where: ytdtd.shared.__init__
# What: Provide a concise import surface for shared errors.
# Why: Let every layer raise and catch the same exception types.

"""Shared cross-cutting types exposed at the package level."""

from .errors import (
    CollaboratorFailure,
    DestinationExists,
    MalformedMetadata,
    MissingSidecar,
    NoTracksFound,
    PackagingError,
    UnresolvedYear,
)

__all__ = [
    "CollaboratorFailure",
    "DestinationExists",
    "MalformedMetadata",
    "MissingSidecar",
    "NoTracksFound",
    "PackagingError",
    "UnresolvedYear",
]
