"""
Summary: Exception types raised by the shape wrapper and its contract checks.
Why: Let callers tell contract misuse apart from failures of wrapped shapes.
"""

from __future__ import annotations

from collections.abc import Sequence


class ShapeWrapError(Exception):
    """Base class for errors raised by the wrapper machinery."""


class ContractViolationError(ShapeWrapError, TypeError):
    """Raised when a value cannot be wrapped because it does not behave like a shape."""

    def __init__(self, value_type: type, missing: Sequence[str], detail: str | None = None) -> None:
        self.value_type: type = value_type
        self.missing: tuple[str, ...] = tuple(missing)
        message = f"{value_type.__qualname__} does not satisfy the shape contract"
        if self.missing:
            message += f": missing {', '.join(self.missing)}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class InvalidStateError(ShapeWrapError, RuntimeError):
    """Raised when an operation is invoked on a moved-from shape."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Cannot {operation} an empty shape; it was moved from")
        self.operation: str = operation


__all__ = ["ContractViolationError", "InvalidStateError", "ShapeWrapError"]
