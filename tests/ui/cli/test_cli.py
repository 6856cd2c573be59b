"""End-to-end tests for the CLI command processor."""

from __future__ import annotations

import pytest
from pytest_mock import MockerFixture

from shapewrap.ui.cli import CommandProcessor


@pytest.fixture(autouse=True)
def no_file_logging(mocker: MockerFixture) -> None:
    _ = mocker.patch("shapewrap.ui.cli.args.parser.setup_logger")


def test_draw_command_prints_shapes(capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["draw", "circle=2.0", "square=1.5@outline"])

    assert capsys.readouterr().out.splitlines() == [
        "Drawing circle with radius 2.0",
        "Drawing outline of Square(width=1.5)",
    ]


def test_demo_uses_configured_default_scene(capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["demo"])

    out = capsys.readouterr().out.splitlines()
    assert "Drawing outline of Circle(radius=4.2)" in out
    assert out[-1] == '{"kind": "circle", "radius": 4.2}'


@pytest.mark.parametrize("token", ["circle=abc", "hexagon=1", "circle=1@dotted"])
def test_bad_tokens_exit_with_usage_error(token: str) -> None:
    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["draw", token])

    assert excinfo.value.code == 2


def test_unexpected_errors_exit_with_failure(mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "shapewrap.ui.cli.cli.SceneCommand.execute",
        side_effect=RuntimeError("boom"),
    )

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["draw", "circle=1"])

    assert excinfo.value.code == 1


def test_keyboard_interrupt_exits_130(mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "shapewrap.ui.cli.cli.SceneCommand.execute",
        side_effect=KeyboardInterrupt,
    )

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["draw", "circle=1"])

    assert excinfo.value.code == 130
