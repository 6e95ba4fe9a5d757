"""Audio file inspection helpers."""

from .duration import probe_duration

__all__ = ["probe_duration"]
