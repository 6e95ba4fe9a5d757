"""Tests for command line argument parser."""

import argparse
import logging
from argparse import Namespace
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from ytdtd.features.album.domain.models import AlbumKind
from ytdtd.features.manifest import ManifestFormat
from ytdtd.platform.logging import DEFAULT_LOG_FILE
from ytdtd.ui.cli.args import COMMANDS, ArgumentParser, CommandSpec, DownloadArgs, PackageArgs


@pytest.fixture
def mock_config(mocker: MockerFixture) -> MagicMock:
    """Replace configuration loading with in-memory defaults."""

    config_cls = mocker.patch("ytdtd.ui.cli.args.parser.Config")
    config = config_cls.load.return_value
    config.log_file = None
    config.manifest_format = "toml"
    return config


@pytest.fixture
def mock_setup_logger(mocker: MockerFixture) -> MagicMock:
    return mocker.patch("ytdtd.ui.cli.args.parser.setup_logger")


def test_create_parser() -> None:
    """Argument parser should expose the download and package subcommands."""

    parser = ArgumentParser.create_parser()

    single: Namespace = parser.parse_args(["download", "single", "https://example.invalid/v"])
    assert single.command_0 == "download"
    assert single.command_1 == "single"
    assert single.url == "https://example.invalid/v"
    assert single.output == "."

    package: Namespace = parser.parse_args(
        ["package", "downloads", "--album", "Mix", "--kind", "single", "-o", "out", "--format", "json", "--verbose"]
    )
    assert package.command_0 == "package"
    assert package.source_dir == "downloads"
    assert package.album == "Mix"
    assert package.kind == "single"
    assert package.output == "out"
    assert package.format == "json"
    assert package.verbose and not package.quiet


def test_parser_requires_subcommand() -> None:
    parser = ArgumentParser.create_parser()

    with pytest.raises(SystemExit) as excinfo:
        _ = parser.parse_args(["download"])

    assert excinfo.value.code == 2


def test_parser_rejects_verbose_with_quiet() -> None:
    parser = ArgumentParser.create_parser()

    with pytest.raises(SystemExit):
        _ = parser.parse_args(["download", "album", "u", "--verbose", "--quiet"])


def test_parser_rejects_unknown_format() -> None:
    parser = ArgumentParser.create_parser()

    with pytest.raises(SystemExit):
        _ = parser.parse_args(["package", "d", "--format", "yaml"])


def test_create_parser_walks_custom_command_tree() -> None:
    """Nested command specs become nested subparsers without global state."""

    def _configure(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument("value")

    tree = (
        CommandSpec(
            name="outer",
            help="outer",
            subcommands=(CommandSpec(name="inner", help="inner", configure=_configure),),
        ),
    )

    parsed = ArgumentParser.create_parser(tree).parse_args(["outer", "inner", "42"])

    assert (parsed.command_0, parsed.command_1, parsed.value) == ("outer", "inner", "42")
    assert not hasattr(parsed, "build_args")


def test_command_tree_leaves_all_have_builders() -> None:
    def _leaves(specs: tuple[CommandSpec, ...]) -> list[CommandSpec]:
        found: list[CommandSpec] = []
        for spec in specs:
            found.extend(_leaves(spec.subcommands) if spec.subcommands else [spec])
        return found

    assert [spec.name for spec in _leaves(COMMANDS)] == ["single", "album", "package"]
    assert all(spec.build is not None for spec in _leaves(COMMANDS))


def test_process_args_download(
    tmp_path: Path, mock_config: MagicMock, mock_setup_logger: MagicMock
) -> None:
    output = tmp_path / "albums"

    args = ArgumentParser.process_args(["download", "album", "https://example.invalid/p", "-o", str(output)])

    assert isinstance(args, DownloadArgs)
    assert args.kind is AlbumKind.ALBUM
    assert args.url == "https://example.invalid/p"
    assert args.output_dir == output
    assert output.is_dir()
    assert args.manifest_format is ManifestFormat.TOML
    assert not args.verbose and not args.quiet
    mock_setup_logger.assert_called_once_with(log_file=DEFAULT_LOG_FILE, console_level=logging.INFO)
    _ = mock_config


def test_process_args_package(tmp_path: Path, mock_config: MagicMock, mock_setup_logger: MagicMock) -> None:
    mock_config.manifest_format = "json"
    mock_config.log_file = tmp_path / "custom.log"

    args = ArgumentParser.process_args(
        ["package", str(tmp_path), "--album", "Mix", "--kind", "single", "-o", str(tmp_path), "--quiet"]
    )

    assert isinstance(args, PackageArgs)
    assert args.source_dir == tmp_path
    assert args.album_title == "Mix"
    assert args.kind is AlbumKind.SINGLE
    assert args.manifest_format is ManifestFormat.JSON
    assert args.quiet
    mock_setup_logger.assert_called_once_with(log_file=tmp_path / "custom.log", console_level=logging.ERROR)


def test_process_args_format_flag_overrides_config(
    tmp_path: Path, mock_config: MagicMock, mock_setup_logger: MagicMock
) -> None:
    _ = mock_setup_logger
    mock_config.manifest_format = "toml"

    args = ArgumentParser.process_args(["package", str(tmp_path), "--format", "json", "--verbose"])

    assert args.manifest_format is ManifestFormat.JSON
    assert args.verbose


def test_process_args_verbose_sets_debug_level(
    tmp_path: Path, mock_config: MagicMock, mock_setup_logger: MagicMock
) -> None:
    _ = mock_config

    _ = ArgumentParser.process_args(["package", str(tmp_path), "--verbose"])

    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG


def test_process_args_rejects_missing_source_dir(
    tmp_path: Path, mock_config: MagicMock, mock_setup_logger: MagicMock
) -> None:
    _ = (mock_config, mock_setup_logger)

    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["package", str(tmp_path / "missing")])

    assert excinfo.value.code == 1


def test_process_args_rejects_output_that_is_a_file(
    tmp_path: Path, mock_config: MagicMock, mock_setup_logger: MagicMock
) -> None:
    _ = (mock_config, mock_setup_logger)
    occupied = tmp_path / "file.txt"
    _ = occupied.write_text("x")

    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["download", "single", "u", "-o", str(occupied)])

    assert excinfo.value.code == 1


def test_process_args_rejects_bad_configured_format(
    tmp_path: Path, mock_config: MagicMock, mock_setup_logger: MagicMock
) -> None:
    _ = mock_setup_logger
    mock_config.manifest_format = "yaml"

    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["package", str(tmp_path)])

    assert excinfo.value.code == 1
