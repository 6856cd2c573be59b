"""Tests for scene display functionality."""

from __future__ import annotations

from io import StringIO

from pytest_mock import MockerFixture
from rich.console import Console

from shapewrap.features.shapes import build_scene
from shapewrap.ui.cli.display.scene import SceneDisplay


def test_show_heading_prints_blank_line_first(mocker: MockerFixture) -> None:
    mock_console = mocker.patch("shapewrap.ui.cli.display.scene.Console")
    display = SceneDisplay()

    display.show_heading("Drawing all shapes:")

    calls = mock_console.return_value.print.call_args_list
    assert [call.args for call in calls] == [(), ("Drawing all shapes:",)]


def test_show_shapes_lists_each_shape() -> None:
    buffer = StringIO()
    display = SceneDisplay(Console(file=buffer, markup=False, highlight=False))

    display.show_shapes(build_scene(["circle=2.0", "square=1.5@wireframe"]))

    assert buffer.getvalue().splitlines() == ["Circle(radius=2.0)", "Square(width=1.5)"]
