"""src/shapewrap/ui/cli/display/scene.py
What: Render section headings and shape listings for scene commands.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

import io
from collections.abc import Sequence
from typing import final

from rich.console import Console

from shapewrap.features.erasure import Shape
from shapewrap.features.shapes import print_all


@final
class SceneDisplay:
    """Handles scene output in the CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize scene display.

        Args:
            console: Console to print to; a plain stdout console by default.
        """
        self.console = console or Console(markup=False, emoji=False, highlight=False)

    def show_heading(self, title: str) -> None:
        """Print a section heading preceded by a blank line."""

        self.console.print()
        self.console.print(title)

    def show_shapes(self, shapes: Sequence[Shape]) -> None:
        """Print each shape's formatted output on its own line."""

        buffer = print_all(shapes, io.StringIO())
        for line in buffer.getvalue().splitlines():
            self.console.print(line)


__all__ = ["SceneDisplay"]
