"""Value types, bounds resolution and input validation."""

from .geometry import (
    Point,
    Size,
    Rect,
    Insets,
    Constrained,
    Unconstrained,
    UNCONSTRAINED,
    Extent,
    FlexSize,
)
from .bounds import AxisRange, Bounds, resolve_bounds

__all__ = [
    "Point",
    "Size",
    "Rect",
    "Insets",
    "Constrained",
    "Unconstrained",
    "UNCONSTRAINED",
    "Extent",
    "FlexSize",
    "AxisRange",
    "Bounds",
    "resolve_bounds",
]
