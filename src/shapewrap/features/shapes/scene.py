"""
Summary: Build ordered sequences of Shape wrappers from compact text tokens.
Why: Give the CLI and configuration one way to describe heterogeneous scenes.

Token format is ``KIND=SIZE`` with an optional ``@STRATEGY`` suffix, for
example ``circle=4.2@outline``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Sequence
from typing import ClassVar, final

from shapewrap.features.erasure import Shape, draw, print_to, serialize
from shapewrap.features.erasure.contract import SinkT
from shapewrap.features.shapes.circle import Circle
from shapewrap.features.shapes.square import Square
from shapewrap.features.shapes.strategies import DrawStrategyRegistry

logger = logging.getLogger(__name__)


class ShapeTokenError(ValueError):
    """Raised when a scene token cannot be parsed."""

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(f"Invalid shape token {token!r}: {reason}")
        self.token: str = token
        self.reason: str = reason


class UnknownShapeKindError(ValueError):
    """Raised when the factory cannot resolve the requested shape kind."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Unknown shape kind: {kind}")
        self.kind: str = kind


@final
class ShapeFactory:
    """Factory for creating concrete shape values from a kind and a size."""

    _kinds: ClassVar[dict[str, Callable[[float], object]]] = {
        "circle": Circle,
        "square": Square,
    }

    @classmethod
    def create(cls, kind: str, size: float) -> object:
        """Create a concrete shape value.

        Args:
            kind: Registered shape kind (case-insensitive).
            size: Defining dimension passed to the kind's constructor.

        Returns:
            object: The concrete value, not yet wrapped.

        Raises:
            UnknownShapeKindError: If the requested kind is not registered.
        """
        constructor = cls._kinds.get(kind.strip().lower())
        if constructor:
            return constructor(size)
        raise UnknownShapeKindError(kind)

    @classmethod
    def register_kind(cls, kind: str, constructor: Callable[[float], object]) -> None:
        """Register a new shape kind.

        Args:
            kind: Name used in tokens.
            constructor: Callable building the value from its size.
        """
        cls._kinds[kind.strip().lower()] = constructor

    @classmethod
    def kinds(cls) -> list[str]:
        """Return registered kinds in sorted order."""

        return sorted(cls._kinds)


def parse_shape_token(token: str) -> Shape:
    """Parse one ``KIND=SIZE[@STRATEGY]`` token into a wrapped shape.

    Raises:
        ShapeTokenError: If the token is malformed or the size is invalid.
        UnknownShapeKindError: If the kind is not registered.
        UnknownStrategyError: If the strategy name is not registered.
    """
    body, sep, strategy_name = token.strip().partition("@")
    kind, eq, raw_size = body.partition("=")
    if not eq or not kind.strip() or not raw_size.strip():
        raise ShapeTokenError(token, "expected KIND=SIZE")
    if sep and not strategy_name.strip():
        raise ShapeTokenError(token, "empty strategy name after '@'")

    try:
        size = float(raw_size)
    except ValueError as exc:
        raise ShapeTokenError(token, f"size {raw_size.strip()!r} is not a number") from exc
    if not math.isfinite(size) or size < 0:
        raise ShapeTokenError(token, "size must be a finite, non-negative number")

    value = ShapeFactory.create(kind, size)
    if sep:
        return Shape(value, DrawStrategyRegistry.get(strategy_name))
    return Shape(value)


def build_scene(tokens: Iterable[str]) -> list[Shape]:
    """Parse ``tokens`` in order into a list of shapes."""

    shapes = [parse_shape_token(token) for token in tokens]
    logger.debug("Built scene with %d shapes", len(shapes), extra={"shape_event": "scene.build"})
    return shapes


def draw_all(shapes: Sequence[Shape]) -> None:
    """Draw every shape in order."""

    for shape in shapes:
        draw(shape)


def serialize_all(shapes: Sequence[Shape]) -> None:
    """Serialize every shape in order."""

    for shape in shapes:
        serialize(shape)


def print_all(shapes: Sequence[Shape], sink: SinkT) -> SinkT:
    """Write each shape to ``sink`` on its own line and return ``sink``."""

    for shape in shapes:
        _ = print_to(shape, sink)
        _ = sink.write("\n")
    return sink


__all__ = [
    "ShapeFactory",
    "ShapeTokenError",
    "UnknownShapeKindError",
    "build_scene",
    "draw_all",
    "parse_shape_token",
    "print_all",
    "serialize_all",
]
