"""Content-size clamping so an overflowing panel stays inside its bounds."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.bounds import AxisRange, Bounds
from ..core.geometry import Point, Size


@dataclass(frozen=True)
class BoundContent:
    """Panel origin and content size after clamping to bounds."""

    origin: Point
    content_size: Size

    def to_dict(self) -> dict:
        return {
            "boundOrigin": self.origin.to_dict(),
            "boundContentSize": self.content_size.to_dict(),
        }


def _clamp_axis(
    origin: float,
    size: float,
    anchor: float,
    arrow: float,
    axis: AxisRange,
) -> tuple[float, float]:
    if origin < axis.min:
        # Far edge stays at the arrow
        return axis.min, anchor - arrow - axis.min
    if origin + size > axis.max:
        return origin, axis.max - origin
    return origin, size


def compute_bound_content_size(
    bounds: Bounds,
    tentative_origin: Point,
    anchor_point: Point,
    arrow_size: Size,
    content_size: Size,
) -> BoundContent:
    """Shrink the panel so it lies inside ``bounds``.

    Each axis is handled on its own. A panel starting before the axis
    minimum is snapped to it and shrunk so its far edge stays at the
    arrow; a panel running past the maximum keeps its origin and is cut
    at the maximum.
    """
    x, width = _clamp_axis(
        tentative_origin.x, content_size.width, anchor_point.x, arrow_size.width, bounds.x,
    )
    y, height = _clamp_axis(
        tentative_origin.y, content_size.height, anchor_point.y, arrow_size.height, bounds.y,
    )
    return BoundContent(origin=Point(x, y), content_size=Size(width, height))
