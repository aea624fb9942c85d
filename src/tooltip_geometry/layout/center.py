"""Center geometry for tooltips shown without an anchored child."""

from __future__ import annotations

from ..core.bounds import AxisRange, Bounds
from ..core.geometry import (
    Constrained,
    Extent,
    FlexSize,
    Point,
    Rect,
    Size,
    UNCONSTRAINED,
)
from .directional import PlacementResult


def _center_axis(content: float, axis: AxisRange) -> tuple[Extent, float]:
    """Return (extent, origin) for one axis.

    Content that fills the axis is pinned to the full span at the axis
    start; smaller content keeps its own size and is centered.
    """
    if content >= axis.span:
        return Constrained(axis.span), axis.min
    return UNCONSTRAINED, axis.min + (axis.span - content) / 2


def compute_center_geometry(
    content_size: Size,
    bounds: Bounds,
    anchor: Rect | None = None,
) -> PlacementResult:
    """Center the panel within ``bounds`` on both axes.

    Parameters
    ----------
    content_size : measured panel content size
    bounds : permitted region
    anchor : synthesized childless anchor; its center becomes the anchor
             point. Defaults to the center of ``bounds``.
    """
    width, x = _center_axis(content_size.width, bounds.x)
    height, y = _center_axis(content_size.height, bounds.y)
    anchor_point = anchor.center if anchor is not None else bounds.rect.center
    return PlacementResult(
        origin=Point(x, y),
        anchor_point=anchor_point,
        placement="center",
        adjusted_size=FlexSize(width, height),
        natural_origin=Point(x, y),
    )
