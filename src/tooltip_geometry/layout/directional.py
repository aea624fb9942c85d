"""Directional geometry: panel placement on one side of an anchor rectangle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ..core.bounds import AxisRange, Bounds
from ..core.geometry import FlexSize, Point, Rect, Size


# Extra inward shift applied when the arrow tip would cross a bound edge
ARROW_EDGE_MARGIN = 2.0


@dataclass(frozen=True)
class PlacementResult:
    """Where to put the panel and where its arrow touches the anchor.

    ``natural_origin`` is the origin before the primary axis was pulled
    back inside the bounds; comparing it with ``origin`` tells whether
    the content had to be shrunk to fit.
    """

    origin: Point
    anchor_point: Point
    placement: str
    adjusted_size: Size | FlexSize | None = None
    natural_origin: Point | None = None

    def to_dict(self) -> dict:
        """Serialize to a dict for JSON transfer to JS."""
        d = {
            "tooltipOrigin": self.origin.to_dict(),
            "anchorPoint": self.anchor_point.to_dict(),
            "placement": self.placement,
        }
        if self.adjusted_size is not None:
            d["adjustedContentSize"] = self.adjusted_size.to_dict()
        return d


GeometryFn = Callable[[Rect, Size, Size, Bounds], PlacementResult]


def oriented_arrow_size(arrow_size: Size, placement: str) -> Size:
    """Rotate the arrow for left/right placements.

    Arrow sizes are given for a downward pointing arrow (``top``). On the
    horizontal sides the same triangle is turned 90 degrees, so its depth
    is measured along x.
    """
    if placement in ("left", "right"):
        return arrow_size.swapped()
    return arrow_size


def _center_on(start: float, length: float, size: float, axis: AxisRange) -> float:
    """Center ``size`` over [start, start + length], kept inside ``axis``."""
    centered = start + (length - size) / 2
    return max(axis.min, min(axis.max - size, centered))


def _guard_arrow(
    position: float,
    footprint: float,
    nudge: float,
    axis: AxisRange,
    enabled: bool,
) -> float:
    """Move the arrow tip inward if its footprint would cross the axis limits."""
    if not enabled:
        return position
    half = footprint / 2
    if position - half < axis.min:
        return position + nudge
    if position + half > axis.max:
        return position - nudge
    return position


def _arrow_nudge(arrow_size: Size) -> float:
    return abs(arrow_size.width - arrow_size.height) + ARROW_EDGE_MARGIN


def compute_top_geometry(
    anchor: Rect,
    content_size: Size,
    arrow_size: Size,
    bounds: Bounds,
) -> PlacementResult:
    """Place the panel above ``anchor``, arrow pointing down."""
    width = min(content_size.width, bounds.x.span)
    x = _center_on(anchor.x, anchor.width, width, bounds.x)
    natural_y = anchor.y - content_size.height - arrow_size.height
    origin = Point(x, max(bounds.y.min, min(bounds.y.max, natural_y)))

    anchor_x = _guard_arrow(
        anchor.x + anchor.width / 2.0,
        arrow_size.width,
        _arrow_nudge(arrow_size),
        bounds.x,
        bounds.guards_arrow,
    )
    anchor_point = Point(anchor_x, anchor.y)

    height = content_size.height
    limit = anchor_point.y - arrow_size.height
    if origin.y + height > limit:
        height = limit - origin.y

    return PlacementResult(
        origin=origin,
        anchor_point=anchor_point,
        placement="top",
        adjusted_size=Size(width, height),
        natural_origin=Point(x, natural_y),
    )


def compute_bottom_geometry(
    anchor: Rect,
    content_size: Size,
    arrow_size: Size,
    bounds: Bounds,
) -> PlacementResult:
    """Place the panel below ``anchor``, arrow pointing up."""
    width = min(content_size.width, bounds.x.span)
    x = _center_on(anchor.x, anchor.width, width, bounds.x)
    natural_y = anchor.bottom + arrow_size.height
    origin = Point(x, max(bounds.y.min, min(bounds.y.max, natural_y)))

    anchor_x = _guard_arrow(
        anchor.x + anchor.width / 2.0,
        arrow_size.width,
        _arrow_nudge(arrow_size),
        bounds.x,
        bounds.guards_arrow,
    )
    anchor_point = Point(anchor_x, anchor.bottom)

    height = content_size.height
    if origin.y + height > bounds.y.max:
        height = bounds.y.max - origin.y

    return PlacementResult(
        origin=origin,
        anchor_point=anchor_point,
        placement="bottom",
        adjusted_size=Size(width, height),
        natural_origin=Point(x, natural_y),
    )


def compute_left_geometry(
    anchor: Rect,
    content_size: Size,
    arrow_size: Size,
    bounds: Bounds,
) -> PlacementResult:
    """Place the panel left of ``anchor``, arrow pointing right.

    ``arrow_size`` is expected already rotated (see ``oriented_arrow_size``).
    """
    height = min(content_size.height, bounds.y.span)
    y = _center_on(anchor.y, anchor.height, height, bounds.y)
    natural_x = anchor.x - content_size.width - arrow_size.width
    origin = Point(max(bounds.x.min, min(bounds.x.max, natural_x)), y)

    anchor_y = _guard_arrow(
        anchor.y + anchor.height / 2.0,
        arrow_size.height,
        _arrow_nudge(arrow_size),
        bounds.y,
        bounds.guards_arrow,
    )
    anchor_point = Point(anchor.x, anchor_y)

    width = content_size.width
    limit = anchor_point.x - arrow_size.width
    if origin.x + width > limit:
        width = limit - origin.x

    return PlacementResult(
        origin=origin,
        anchor_point=anchor_point,
        placement="left",
        adjusted_size=Size(width, height),
        natural_origin=Point(natural_x, y),
    )


def compute_right_geometry(
    anchor: Rect,
    content_size: Size,
    arrow_size: Size,
    bounds: Bounds,
) -> PlacementResult:
    """Place the panel right of ``anchor``, arrow pointing left.

    ``arrow_size`` is expected already rotated (see ``oriented_arrow_size``).
    """
    height = min(content_size.height, bounds.y.span)
    y = _center_on(anchor.y, anchor.height, height, bounds.y)
    natural_x = anchor.right + arrow_size.width
    origin = Point(max(bounds.x.min, min(bounds.x.max, natural_x)), y)

    anchor_y = _guard_arrow(
        anchor.y + anchor.height / 2.0,
        arrow_size.height,
        _arrow_nudge(arrow_size),
        bounds.y,
        bounds.guards_arrow,
    )
    anchor_point = Point(anchor.right, anchor_y)

    width = content_size.width
    if origin.x + width > bounds.x.max:
        width = bounds.x.max - origin.x

    return PlacementResult(
        origin=origin,
        anchor_point=anchor_point,
        placement="right",
        adjusted_size=Size(width, height),
        natural_origin=Point(natural_x, y),
    )


DIRECTIONAL_GEOMETRY: dict[str, GeometryFn] = {
    "top": compute_top_geometry,
    "bottom": compute_bottom_geometry,
    "left": compute_left_geometry,
    "right": compute_right_geometry,
}


def compute_directional_geometry(
    placement: str,
    anchor: Rect,
    content_size: Size,
    arrow_size: Size,
    bounds: Bounds,
) -> PlacementResult:
    """Dispatch to the side function, rotating the arrow as needed.

    Unlike the per-side functions, ``arrow_size`` here is the unrotated
    (top-placement) arrow.
    """
    try:
        fn = DIRECTIONAL_GEOMETRY[placement]
    except KeyError:
        raise ValueError(
            f"Unknown side '{placement}'. Use 'top', 'bottom', 'left' or 'right'."
        ) from None
    return fn(anchor, content_size, oriented_arrow_size(arrow_size, placement), bounds)
