"""Tests for settings module behavior."""

from __future__ import annotations

import pytest

from ytdtd.config.config import Config
from ytdtd.config.settings import (
    ENV_FFMPEG,
    ENV_MAGICK,
    ENV_YT_DLP,
    RuntimeSettings,
    Toolchain,
    normalize_extension,
    resolve_executable,
)


def test_runtime_settings_use_config_defaults() -> None:
    settings = RuntimeSettings.from_config(Config(), env={})

    assert settings.toolchain == Toolchain(yt_dlp="yt-dlp", ffmpeg="ffmpeg", magick="magick", timeout=None)
    assert settings.manifest_format == "toml"
    assert settings.audio_extension == ".opus"


def test_runtime_settings_prefer_environment_overrides() -> None:
    config = Config(yt_dlp_path="/cfg/yt-dlp", ffmpeg_path="/cfg/ffmpeg", magick_path="/cfg/magick")
    env = {ENV_YT_DLP: "/env/yt-dlp", ENV_FFMPEG: "  ", ENV_MAGICK: "/env/magick"}

    toolchain = RuntimeSettings.from_config(config, env=env).toolchain

    assert toolchain.yt_dlp == "/env/yt-dlp"
    assert toolchain.ffmpeg == "/cfg/ffmpeg"
    assert toolchain.magick == "/env/magick"


def test_runtime_settings_read_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_FFMPEG, "/opt/ffmpeg")

    assert RuntimeSettings.from_config(Config()).toolchain.ffmpeg == "/opt/ffmpeg"


@pytest.mark.parametrize(("configured", "expected"), [(0, None), (-5, None), (30, 30.0)])
def test_runtime_settings_timeout(configured: int, expected: float | None) -> None:
    settings = RuntimeSettings.from_config(Config(collaborator_timeout=configured), env={})

    assert settings.toolchain.timeout == expected


def test_runtime_settings_normalize_manifest_format() -> None:
    assert RuntimeSettings.from_config(Config(manifest_format=" JSON "), env={}).manifest_format == "json"


def test_resolve_executable_falls_back_to_default() -> None:
    assert resolve_executable("", env={}, env_var=ENV_YT_DLP, default="yt-dlp") == "yt-dlp"
    assert resolve_executable(None, env={}, env_var=ENV_YT_DLP, default="yt-dlp") == "yt-dlp"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("opus", ".opus"), (".M4A", ".m4a"), ("", ".opus"), (None, ".opus"), (" .flac ", ".flac")],
)
def test_normalize_extension(raw: str | None, expected: str) -> None:
    assert normalize_extension(raw) == expected
