"""
Summary: Shape value wrapper that erases the concrete type behind an owned adapter.
Why: Store unrelated shape types together and dispatch to each one's free functions.

A :class:`Shape` owns exactly one adapter while it is usable. Copies clone
the adapter, so two shapes never share state. :meth:`Shape.move` and
:meth:`Shape.take` transfer the adapter and leave the source empty; any
operation on an empty shape raises :class:`InvalidStateError`.
"""

from __future__ import annotations

import io
import logging
from typing import Any, final

from shapewrap.features.erasure import contract
from shapewrap.features.erasure.concept import ShapeConcept
from shapewrap.features.erasure.contract import DrawStrategy, SinkT
from shapewrap.features.erasure.errors import InvalidStateError
from shapewrap.features.erasure.models import ShapeModel, StrategyModel

logger = logging.getLogger(__name__)


@final
class Shape:
    """Type-erased shape with value semantics."""

    __slots__ = ("_concept",)

    _concept: ShapeConcept | None

    def __init__(self, value: object, strategy: DrawStrategy | None = None) -> None:
        """Wrap ``value``, optionally replacing how it is drawn.

        Args:
            value: Any value satisfying the shape contract. Passing another
                ``Shape`` without a strategy copies it.
            strategy: Callable taking the held value, used instead of the
                free ``draw`` for this instance only.

        Raises:
            ContractViolationError: If ``value`` lacks a required free
                function or ``strategy`` cannot be called with it.
            InvalidStateError: If ``value`` is an empty ``Shape``.
        """
        if strategy is None:
            if isinstance(value, Shape):
                self._concept = value._require("copy").clone()
                logger.debug("Copied %r", value, extra={"shape_event": "shape.copy"})
                return
            contract.ensure_shape(value)
            self._concept = ShapeModel(value)
        else:
            if isinstance(value, Shape):
                _ = value._require("wrap")
            contract.ensure_shape(value, require_draw=False)
            contract.ensure_draw_strategy(strategy, value)
            self._concept = StrategyModel(value, strategy)
        logger.debug(
            "Wrapped %s in %r",
            type(value).__qualname__,
            self._concept,
            extra={"shape_event": "shape.wrap"},
        )

    @classmethod
    def _adopt(cls, concept: ShapeConcept) -> Shape:
        shape = cls.__new__(cls)
        shape._concept = concept
        return shape

    def _require(self, operation: str) -> ShapeConcept:
        if self._concept is None:
            raise InvalidStateError(operation)
        return self._concept

    @property
    def empty(self) -> bool:
        """``True`` once the shape has been moved from and not reassigned."""

        return self._concept is None

    def move(self) -> Shape:
        """Transfer the adapter into a new shape and leave this one empty."""

        concept = self._require("move")
        self._concept = None
        logger.debug("Moved %r", concept, extra={"shape_event": "shape.move"})
        return Shape._adopt(concept)

    def assign(self, other: Shape) -> Shape:
        """Replace this shape's contents with an independent copy of ``other``.

        Returns:
            Shape: ``self``, to allow chaining.
        """
        if other is self:
            return self
        # Clone before releasing the current adapter so a failing copy leaves self intact.
        clone = other._require("copy").clone()
        self._concept = clone
        return self

    def take(self, other: Shape) -> Shape:
        """Move ``other``'s adapter into this shape, leaving ``other`` empty.

        Returns:
            Shape: ``self``, to allow chaining.
        """
        concept = other._require("move")
        other._concept = None
        self._concept = concept
        return self

    def __copy__(self) -> Shape:
        return Shape._adopt(self._require("copy").clone())

    def __deepcopy__(self, memo: dict[int, Any]) -> Shape:
        return self.__copy__()

    def __str__(self) -> str:
        return self._require("print").print_to(io.StringIO()).getvalue()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __repr__(self) -> str:
        if self._concept is None:
            return "Shape(<empty>)"
        return f"Shape({self._concept!r})"


@contract.serialize.register
def _serialize_shape(shape: Shape) -> None:
    shape._require("serialize").serialize()  # pyright: ignore[reportPrivateUsage]


@contract.draw.register
def _draw_shape(shape: Shape) -> None:
    shape._require("draw").draw()  # pyright: ignore[reportPrivateUsage]


@contract.print_to.register
def _print_shape(shape: Shape, sink: SinkT) -> SinkT:
    return shape._require("print").print_to(sink)  # pyright: ignore[reportPrivateUsage]


__all__ = ["Shape"]
