"""Rich console handler for shape events.

Where: platform/logging/handlers.py
What: Render log records tagged with a ``shape_event`` extra as ``event · message``.
Why: Keep wrapper lifecycle messages scannable next to regular CLI logging.
"""

from __future__ import annotations

import logging
from typing import final, override

from rich.logging import RichHandler
from rich.text import Text

EVENT_STYLE = "bold cyan"
SEPARATOR = " · "


@final
class ShapeEventRichHandler(RichHandler):
    """RichHandler that prefixes tagged records with their event name."""

    def __init__(self, **kwargs: object) -> None:
        _ = kwargs.setdefault("show_path", False)
        _ = kwargs.setdefault("markup", False)
        super().__init__(**kwargs)  # pyright: ignore[reportArgumentType]

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> Text:
        """Build the renderable for ``record``.

        Records without a ``shape_event`` attribute render as plain text.
        """
        event = getattr(record, "shape_event", None)
        body = Text(message)
        if not event:
            return body
        return Text.assemble((str(event), EVENT_STYLE), SEPARATOR, body)


__all__ = ["ShapeEventRichHandler"]
