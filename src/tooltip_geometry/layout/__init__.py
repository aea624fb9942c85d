"""Placement engines: directional, center, childless, auto and clamping."""

from .directional import (
    PlacementResult,
    compute_top_geometry,
    compute_bottom_geometry,
    compute_left_geometry,
    compute_right_geometry,
    compute_directional_geometry,
    oriented_arrow_size,
)
from .center import compute_center_geometry
from .childless import make_childless_rect, make_childless_rect_in_area
from .auto import DEFAULT_PLACEMENT_ORDER, compute_auto_geometry
from .clamp import BoundContent, compute_bound_content_size
from .composer import ArrowGeometry, PlacementComposer, TooltipLayout

__all__ = [
    "PlacementResult",
    "compute_top_geometry",
    "compute_bottom_geometry",
    "compute_left_geometry",
    "compute_right_geometry",
    "compute_directional_geometry",
    "oriented_arrow_size",
    "compute_center_geometry",
    "make_childless_rect",
    "make_childless_rect_in_area",
    "DEFAULT_PLACEMENT_ORDER",
    "compute_auto_geometry",
    "BoundContent",
    "compute_bound_content_size",
    "ArrowGeometry",
    "PlacementComposer",
    "TooltipLayout",
]
