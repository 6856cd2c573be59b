"""src/shapewrap/ui/cli/commands/strategies.py
What: List registered draw strategies.
Why: Show which names are accepted after '@' in shape tokens.
"""

from __future__ import annotations

import inspect
from typing import final

from rich import box
from rich.console import Console
from rich.table import Table

from shapewrap.features.shapes import DrawStrategyRegistry
from shapewrap.ui.cli.args.options import StrategiesArgs


@final
class StrategiesCommand:
    """Render the strategy registry in a Rich table."""

    def __init__(self, args: StrategiesArgs, *, console: Console | None = None) -> None:
        self._args = args
        self._console = console or Console()

    def execute(self) -> list[str]:
        """Print the table and return the listed names."""

        names = DrawStrategyRegistry.names()
        table = Table(
            title="Draw Strategies",
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Name", style="bold")
        table.add_column("Description")
        for name in names:
            doc = inspect.getdoc(DrawStrategyRegistry.get(name)) or ""
            table.add_row(name, doc.splitlines()[0] if doc else "")

        self._console.print(table)
        return names


__all__ = ["StrategiesCommand"]
