"""Tests for command line argument parser."""

from __future__ import annotations

import logging
from argparse import Namespace

import pytest
from pytest_mock import MockerFixture

from shapewrap.config.config import DEFAULT_SCENE
from shapewrap.platform.logging import DEFAULT_LOG_FILE
from shapewrap.ui.cli.args import ArgumentParser, SceneArgs, StrategiesArgs


def test_create_parser() -> None:
    """Argument parser should expose every subcommand."""

    parser = ArgumentParser.create_parser()

    draw_args: Namespace = parser.parse_args(["draw", "circle=2.0", "square=1.5"])
    assert draw_args.command == "draw"
    assert draw_args.tokens == ["circle=2.0", "square=1.5"]

    demo_args: Namespace = parser.parse_args(["demo", "--verbose"])
    assert demo_args.command == "demo"
    assert demo_args.tokens == []
    assert demo_args.verbose

    strategies_args: Namespace = parser.parse_args(["strategies", "--quiet"])
    assert strategies_args.command == "strategies"
    assert strategies_args.quiet


def test_verbose_and_quiet_are_exclusive() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.create_parser().parse_args(["draw", "--verbose", "--quiet"])


def test_subcommand_is_required() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.create_parser().parse_args([])


def test_process_args_scene(mocker: MockerFixture) -> None:
    """Scene arguments keep tokens in order and configure logging."""

    mock_config = mocker.patch("shapewrap.ui.cli.args.parser.Config")
    mock_setup_logger = mocker.patch("shapewrap.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.log_file = None
    mock_config.load.return_value.default_scene = list(DEFAULT_SCENE)

    args = ArgumentParser.process_args(["serialize", "square=1.5", "circle=2.0"])

    assert isinstance(args, SceneArgs)
    assert args.command == "serialize"
    assert args.tokens == ["square=1.5", "circle=2.0"]
    assert not args.verbose and not args.quiet
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO
    assert mock_setup_logger.call_args.kwargs["log_file"] == DEFAULT_LOG_FILE
    mock_config.load.assert_called_once()


def test_process_args_falls_back_to_configured_scene(mocker: MockerFixture) -> None:
    mock_config = mocker.patch("shapewrap.ui.cli.args.parser.Config")
    _ = mocker.patch("shapewrap.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.log_file = None
    mock_config.load.return_value.default_scene = ["square=3.0"]

    args = ArgumentParser.process_args(["demo"])

    assert isinstance(args, SceneArgs)
    assert args.tokens == ["square=3.0"]


@pytest.mark.parametrize(
    ("flag", "level"),
    [("--verbose", logging.DEBUG), ("--quiet", logging.ERROR)],
)
def test_process_args_log_levels(flag: str, level: int, mocker: MockerFixture) -> None:
    mock_config = mocker.patch("shapewrap.ui.cli.args.parser.Config")
    mock_setup_logger = mocker.patch("shapewrap.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.log_file = "custom.log"

    args = ArgumentParser.process_args(["strategies", flag])

    assert isinstance(args, StrategiesArgs)
    assert mock_setup_logger.call_args.kwargs["console_level"] == level
    assert mock_setup_logger.call_args.kwargs["log_file"] == "custom.log"
