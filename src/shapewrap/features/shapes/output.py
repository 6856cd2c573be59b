"""
Summary: Console shared by the sample shapes' draw and serialize functions.
Why: Route shape side effects through one Rich console that follows sys.stdout.
"""

from __future__ import annotations

import io
from typing import Final

from rich.console import Console

from shapewrap.features.erasure import print_to

# file=None makes Rich resolve sys.stdout on every print.
console: Final[Console] = Console(markup=False, emoji=False, highlight=False, soft_wrap=True)


def describe(value: object) -> str:
    """Return the ``print_to`` text of ``value``."""

    return print_to(value, io.StringIO()).getvalue()


__all__ = ["console", "describe"]
