"""
Summary: Named draw strategies that can replace a shape's default drawing.
Why: Let scenes pick per-instance draw behaviour by name without touching shape types.
"""

from __future__ import annotations

from typing import ClassVar, final

from shapewrap.features.erasure import DrawStrategy
from shapewrap.features.shapes.output import console, describe


def outline(value: object) -> None:
    """Draw only the outline of ``value``."""

    console.print(f"Drawing outline of {describe(value)}")


def filled(value: object) -> None:
    """Draw ``value`` as a filled area."""

    console.print(f"Drawing filled {describe(value)}")


def wireframe(value: object) -> None:
    """Draw ``value`` as edges only, with hidden lines shown."""

    console.print(f"Drawing wireframe of {describe(value)}")


class UnknownStrategyError(ValueError):
    """Raised when a draw strategy name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown draw strategy: {name}")
        self.name: str = name


@final
class DrawStrategyRegistry:
    """Registry of draw strategies addressable by name."""

    _strategies: ClassVar[dict[str, DrawStrategy]] = {
        "outline": outline,
        "filled": filled,
        "wireframe": wireframe,
    }

    @classmethod
    def get(cls, name: str) -> DrawStrategy:
        """Look up a strategy.

        Args:
            name: Registered strategy name (case-insensitive).

        Returns:
            DrawStrategy: The registered callable.

        Raises:
            UnknownStrategyError: If no strategy is registered under ``name``.
        """
        strategy = cls._strategies.get(name.strip().lower())
        if strategy is None:
            raise UnknownStrategyError(name)
        return strategy

    @classmethod
    def register(cls, name: str, strategy: DrawStrategy) -> None:
        """Register or replace a strategy under ``name``."""

        if not callable(strategy):
            raise TypeError(f"Draw strategy {name!r} must be callable")
        cls._strategies[name.strip().lower()] = strategy

    @classmethod
    def names(cls) -> list[str]:
        """Return registered strategy names in sorted order."""

        return sorted(cls._strategies)


__all__ = [
    "DrawStrategyRegistry",
    "UnknownStrategyError",
    "filled",
    "outline",
    "wireframe",
]
