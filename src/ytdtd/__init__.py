"""ytdtd: package downloaded audio and sidecar metadata into album directories."""

__version__ = "0.1.0"
