"""
Summary: Free shape operations and the structural contract a wrappable value must meet.
Why: Shape types stay independent classes; behaviour is attached by registering free functions.

A value "is a shape" when ``serialize``, ``draw`` and ``print_to`` each have an
implementation registered for its type (or one of its bases other than
``object``). Registration uses :func:`functools.singledispatch`::

    @draw.register
    def _draw_circle(circle: Circle) -> None:
        ...
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from functools import singledispatch
from typing import Any, Final, Protocol, TypeVar

from shapewrap.features.erasure.errors import ContractViolationError


class TextSink(Protocol):
    """Anything formatted output can be written to (``io.StringIO``, ``sys.stdout``)."""

    def write(self, text: str, /) -> object: ...


SinkT = TypeVar("SinkT", bound=TextSink)

DrawStrategy = Callable[[Any], None]


@singledispatch
def serialize(shape: object) -> None:
    """Serialize ``shape`` using the implementation registered for its type."""

    raise ContractViolationError(type(shape), ["serialize"])


@singledispatch
def draw(shape: object) -> None:
    """Draw ``shape`` using the implementation registered for its type."""

    raise ContractViolationError(type(shape), ["draw"])


@singledispatch
def print_to(shape: object, sink: SinkT) -> SinkT:
    """Write a human-readable form of ``shape`` to ``sink`` and return ``sink``."""

    raise ContractViolationError(type(shape), ["print_to"])


SHAPE_OPERATIONS: Final[tuple[tuple[str, Any], ...]] = (
    ("serialize", serialize),
    ("draw", draw),
    ("print_to", print_to),
)


def _is_registered(operation: Any, cls: type) -> bool:
    return operation.dispatch(cls) is not operation.registry[object]


def missing_operations(cls: type, *, require_draw: bool = True) -> tuple[str, ...]:
    """Return the names of contract operations with no implementation for ``cls``.

    Args:
        cls: Type to inspect.
        require_draw: When ``False`` a missing ``draw`` is tolerated, which is
            the case for values whose draw behaviour is injected.

    Returns:
        tuple[str, ...]: Missing operation names in contract order.
    """
    return tuple(
        name
        for name, operation in SHAPE_OPERATIONS
        if (require_draw or name != "draw") and not _is_registered(operation, cls)
    )


def is_shape(value: object) -> bool:
    """Return ``True`` when ``value`` satisfies the full shape contract."""

    return not missing_operations(type(value))


def ensure_shape(value: object, *, require_draw: bool = True) -> None:
    """Raise :class:`ContractViolationError` unless ``value`` can be wrapped."""

    missing = missing_operations(type(value), require_draw=require_draw)
    if missing:
        raise ContractViolationError(type(value), missing)


def ensure_draw_strategy(strategy: object, value: object) -> None:
    """Check that ``strategy`` can be called with ``value`` as its only argument.

    Raises:
        ContractViolationError: If the strategy is not callable or its
            signature cannot accept a single positional argument.
    """
    if not callable(strategy):
        raise ContractViolationError(
            type(value), [], detail=f"draw strategy {strategy!r} is not callable"
        )

    try:
        signature = inspect.signature(strategy)
    except (TypeError, ValueError):
        # Some builtins expose no signature; accept them as-is.
        return

    try:
        _ = signature.bind(value)
    except TypeError as exc:
        raise ContractViolationError(
            type(value), [], detail=f"draw strategy {strategy!r} cannot take the shape: {exc}"
        ) from exc


__all__ = [
    "DrawStrategy",
    "SHAPE_OPERATIONS",
    "SinkT",
    "TextSink",
    "draw",
    "ensure_draw_strategy",
    "ensure_shape",
    "is_shape",
    "missing_operations",
    "print_to",
    "serialize",
]
