"""
Summary: Adapters that bind one concrete value to the ShapeConcept interface.
Why: Route the wrapper's polymorphic calls to free functions or an injected draw strategy.
"""

from __future__ import annotations

import copy
from typing import Generic, TypeVar, final, override

from shapewrap.features.erasure import contract
from shapewrap.features.erasure.concept import ShapeConcept
from shapewrap.features.erasure.contract import DrawStrategy, SinkT

T = TypeVar("T")


@final
class ShapeModel(ShapeConcept, Generic[T]):
    """Adapter forwarding every operation to the free functions registered for ``T``."""

    __slots__ = ("_value",)

    _value: T

    def __init__(self, value: T) -> None:
        """Capture an independent copy of ``value``.

        Args:
            value: Concrete shape value to hold.
        """
        self._value = copy.deepcopy(value)

    @override
    def serialize(self) -> None:
        # Always the free function, even if the value defines a member of that name.
        contract.serialize(self._value)

    @override
    def draw(self) -> None:
        contract.draw(self._value)

    @override
    def print_to(self, sink: SinkT) -> SinkT:
        return contract.print_to(self._value, sink)

    @override
    def clone(self) -> ShapeModel[T]:
        return ShapeModel(self._value)

    @override
    def __repr__(self) -> str:
        return f"ShapeModel({self._value!r})"


@final
class StrategyModel(ShapeConcept, Generic[T]):
    """Adapter whose ``draw`` is an injected strategy rather than the type's free function.

    ``serialize`` and ``print_to`` still resolve through the free functions
    registered for ``T``; the strategy only replaces drawing for this instance.
    """

    __slots__ = ("_value", "_strategy")

    _value: T
    _strategy: DrawStrategy

    def __init__(self, value: T, strategy: DrawStrategy) -> None:
        """Capture an independent copy of ``value`` and a shallow copy of ``strategy``.

        The strategy copy keeps references to the objects it writes to, so a
        bound method or ``functools.partial`` still reaches the caller's sink.

        Args:
            value: Concrete shape value to hold.
            strategy: Callable invoked with the held value when drawing.
        """
        self._value = copy.deepcopy(value)
        self._strategy = copy.copy(strategy)

    @override
    def serialize(self) -> None:
        contract.serialize(self._value)

    @override
    def draw(self) -> None:
        self._strategy(self._value)

    @override
    def print_to(self, sink: SinkT) -> SinkT:
        return contract.print_to(self._value, sink)

    @override
    def clone(self) -> StrategyModel[T]:
        return StrategyModel(self._value, self._strategy)

    @override
    def __repr__(self) -> str:
        return f"StrategyModel({self._value!r}, {self._strategy!r})"


__all__ = ["ShapeModel", "StrategyModel"]
