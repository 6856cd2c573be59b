"""
Summary: Type-erased Shape wrapper with free-function dispatch and injectable draw strategies.
Why: Give unrelated value types one polymorphic value type without a shared base class.
"""

from __future__ import annotations

from shapewrap.features.erasure import (
    ContractViolationError,
    DrawStrategy,
    InvalidStateError,
    Shape,
    ShapeWrapError,
    draw,
    is_shape,
    print_to,
    serialize,
)

__all__ = [
    "ContractViolationError",
    "DrawStrategy",
    "InvalidStateError",
    "Shape",
    "ShapeWrapError",
    "draw",
    "is_shape",
    "print_to",
    "serialize",
]
