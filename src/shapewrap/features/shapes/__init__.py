"""
Summary: Sample shape types, draw strategies and scene building.
Why: Exercise the wrapper with independent value types that never subclass anything.
"""

from __future__ import annotations

from shapewrap.features.shapes.circle import Circle
from shapewrap.features.shapes.scene import (
    ShapeFactory,
    ShapeTokenError,
    UnknownShapeKindError,
    build_scene,
    draw_all,
    parse_shape_token,
    print_all,
    serialize_all,
)
from shapewrap.features.shapes.square import Square
from shapewrap.features.shapes.strategies import DrawStrategyRegistry, UnknownStrategyError

__all__ = [
    "Circle",
    "DrawStrategyRegistry",
    "ShapeFactory",
    "ShapeTokenError",
    "Square",
    "UnknownShapeKindError",
    "UnknownStrategyError",
    "build_scene",
    "draw_all",
    "parse_shape_token",
    "print_all",
    "serialize_all",
]
