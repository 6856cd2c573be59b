"""
Summary: Public surface of the type-erased Shape wrapper.
Why: Offer one import path for the wrapper, its free functions and its errors.
"""

from __future__ import annotations

from shapewrap.features.erasure.contract import (
    DrawStrategy,
    TextSink,
    draw,
    ensure_draw_strategy,
    ensure_shape,
    is_shape,
    missing_operations,
    print_to,
    serialize,
)
from shapewrap.features.erasure.errors import (
    ContractViolationError,
    InvalidStateError,
    ShapeWrapError,
)
from shapewrap.features.erasure.shape import Shape

__all__ = [
    "ContractViolationError",
    "DrawStrategy",
    "InvalidStateError",
    "Shape",
    "ShapeWrapError",
    "TextSink",
    "draw",
    "ensure_draw_strategy",
    "ensure_shape",
    "is_shape",
    "missing_operations",
    "print_to",
    "serialize",
]
