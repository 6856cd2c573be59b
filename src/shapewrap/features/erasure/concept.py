"""
Summary: Internal polymorphic interface held by every Shape wrapper.
Why: Hide the concrete value type behind four operations the wrapper can forward to.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shapewrap.features.erasure.contract import SinkT


class ShapeConcept(ABC):
    """Operations a wrapper forwards to, implemented once per adapter kind."""

    __slots__ = ()

    @abstractmethod
    def serialize(self) -> None:
        """Run the serialization side effect for the held value."""
        pass

    @abstractmethod
    def draw(self) -> None:
        """Run the draw side effect for the held value."""
        pass

    @abstractmethod
    def print_to(self, sink: SinkT) -> SinkT:
        """Write the held value to ``sink``.

        Args:
            sink: Text sink receiving the representation.

        Returns:
            The same ``sink``, so calls can be chained.
        """
        pass

    @abstractmethod
    def clone(self) -> ShapeConcept:
        """Return a new adapter holding an independent copy of this one's state."""
        pass


__all__ = ["ShapeConcept"]
