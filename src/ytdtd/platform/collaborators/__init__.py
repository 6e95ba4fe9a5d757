"""
Summary: Adapters for the external downloader and image tools.
Why: Give the application layer one import path for every collaborator.
"""

from .cover import FfmpegCoverExtractor
from .downloader import YtDlpDownloader
from .process import ProcessRunner, run_process

__all__ = ["FfmpegCoverExtractor", "ProcessRunner", "YtDlpDownloader", "run_process"]
