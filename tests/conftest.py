"""Shared pytest fixtures for ytdtd tests."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

TrackFactory = Callable[..., Path]


@pytest.fixture(autouse=True)
def portable_repo_root(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Iterator[Path]:
    """Point config discovery at a throwaway root and reset the config singleton."""

    root = tmp_path_factory.mktemp("repo_root")
    _ = (root / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import ytdtd.config.config as config_module
    import ytdtd.config.paths as paths

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return root

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    monkeypatch.setattr(config_module.Config, "_instance", None)
    monkeypatch.setattr(config_module.Config, "_loaded_from", None)
    yield root


@pytest.fixture
def make_track() -> TrackFactory:
    """Write an audio file and its ``.info.json`` sidecar into a directory."""

    def _make(directory: Path, filename: str, *, audio: bytes = b"opus-bytes", **sidecar: Any) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        audio_path = directory / filename
        _ = audio_path.write_bytes(audio)
        sidecar_path = audio_path.with_name(audio_path.stem + ".info.json")
        _ = sidecar_path.write_text(json.dumps(sidecar), encoding="utf-8")
        return audio_path

    return _make
