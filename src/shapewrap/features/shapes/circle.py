"""
Summary: Circle value type and its free shape functions.
Why: A shape that knows nothing about the wrapper, made wrappable by registration alone.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from shapewrap.features.erasure import draw, print_to, serialize
from shapewrap.features.erasure.contract import SinkT
from shapewrap.features.shapes.output import console


@dataclass(frozen=True, slots=True)
class Circle:
    """Circle described by its radius."""

    radius: float


@serialize.register
def _serialize_circle(circle: Circle) -> None:
    console.print(json.dumps({"kind": "circle", "radius": circle.radius}))


@draw.register
def _draw_circle(circle: Circle) -> None:
    console.print(f"Drawing circle with radius {circle.radius}")


@print_to.register
def _print_circle(circle: Circle, sink: SinkT) -> SinkT:
    _ = sink.write(f"Circle(radius={circle.radius})")
    return sink


__all__ = ["Circle"]
