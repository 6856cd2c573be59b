"""Tests for the ``ShapeEventRichHandler`` rendering and ``setup_logger`` handler management."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from io import StringIO
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console
from rich.text import Text

from shapewrap.platform.logging import ShapeEventRichHandler, setup_logger


def _make_handler() -> ShapeEventRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return ShapeEventRichHandler(console=console)


def _build_record(msg: str = "", **extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with extras for testing."""

    record = logging.LogRecord(
        name="shapewrap",
        level=logging.DEBUG,
        pathname="test",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_logger() -> Iterator[None]:
    try:
        yield None
    finally:
        _ = setup_logger()


def test_render_message_prefixes_shape_events() -> None:
    handler = _make_handler()
    record = _build_record(shape_event="shape.wrap")

    rendered = handler.render_message(record, "Wrapped Circle in ShapeModel(Circle(radius=2.0))")

    assert isinstance(rendered, Text)
    assert rendered.plain == "shape.wrap · Wrapped Circle in ShapeModel(Circle(radius=2.0))"


def test_render_message_without_event_is_plain() -> None:
    handler = _make_handler()

    rendered = handler.render_message(_build_record(), "[bold]literal[/bold]")

    assert rendered.plain == "[bold]literal[/bold]"


def test_setup_logger_adds_file_handler(tmp_path: Path, restore_logger: None) -> None:
    log_file = tmp_path / "logs" / "shapewrap.log"

    logger = setup_logger(log_file=log_file, console_level=logging.ERROR)
    logger.debug("written to file only")
    for handler in logger.handlers:
        handler.flush()

    assert len(logger.handlers) == 2
    assert isinstance(logger.handlers[0], ShapeEventRichHandler)
    assert logger.handlers[0].level == logging.ERROR
    assert "written to file only" in log_file.read_text(encoding="utf-8")


def test_setup_logger_reuses_handlers_on_repeat_calls(tmp_path: Path, restore_logger: None) -> None:
    log_file = tmp_path / "shapewrap.log"

    first = list(setup_logger(log_file=log_file).handlers)
    second = list(setup_logger(log_file=log_file, console_level=logging.DEBUG).handlers)

    assert len(second) == 2
    assert all(old is new for old, new in zip(first, second))
    assert second[0].level == logging.DEBUG


def test_setup_logger_swaps_the_log_file(tmp_path: Path, restore_logger: None) -> None:
    _ = setup_logger(log_file=tmp_path / "first.log")

    logger = setup_logger(log_file=tmp_path / "second.log")

    file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    assert [Path(h.baseFilename).name for h in file_handlers] == ["second.log"]


def test_setup_logger_without_file_uses_console_only(restore_logger: None) -> None:
    logger = setup_logger()

    assert [type(handler) for handler in logger.handlers] == [ShapeEventRichHandler]
