"""Console presentation helpers."""

from .result import ResultDisplay

__all__ = ["ResultDisplay"]
