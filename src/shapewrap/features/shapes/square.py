"""
Summary: Square value type and its free shape functions.
Why: A second independent shape type so scenes mix unrelated classes.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from shapewrap.features.erasure import draw, print_to, serialize
from shapewrap.features.erasure.contract import SinkT
from shapewrap.features.shapes.output import console


@dataclass(frozen=True, slots=True)
class Square:
    """Square described by its side width."""

    width: float


@serialize.register
def _serialize_square(square: Square) -> None:
    console.print(json.dumps({"kind": "square", "width": square.width}))


@draw.register
def _draw_square(square: Square) -> None:
    console.print(f"Drawing square with width {square.width}")


@print_to.register
def _print_square(square: Square, sink: SinkT) -> SinkT:
    _ = sink.write(f"Square(width={square.width})")
    return sink


__all__ = ["Square"]
