"""tooltip-geometry: placement geometry for tooltips and popovers."""

from ._version import __version__
from .core.geometry import (
    Point,
    Size,
    Rect,
    Insets,
    Constrained,
    Unconstrained,
    UNCONSTRAINED,
    FlexSize,
)
from .core.bounds import AxisRange, Bounds, resolve_bounds
from .layout import (
    PlacementResult,
    compute_top_geometry,
    compute_bottom_geometry,
    compute_left_geometry,
    compute_right_geometry,
    compute_directional_geometry,
    oriented_arrow_size,
    compute_center_geometry,
    make_childless_rect,
    make_childless_rect_in_area,
    DEFAULT_PLACEMENT_ORDER,
    compute_auto_geometry,
    BoundContent,
    compute_bound_content_size,
    ArrowGeometry,
    PlacementComposer,
    TooltipLayout,
)


def compute_geometry(
    content_size,
    viewport=None,
    anchor=None,
    placement=None,
    display_area=None,
    **options,
):
    """One-shot tooltip layout with a default-configured composer.

    Parameters
    ----------
    content_size : Size
        Measured panel content size.
    viewport : Size, optional
        Viewport dimensions. Required when there is neither an anchor
        nor a display area.
    anchor : Rect, optional
        Measured anchor rectangle. None for a childless tooltip.
    placement : str, optional
        'top', 'bottom', 'left', 'right', 'auto' or 'center'.
    display_area : Rect, optional
        Explicit permitted rectangle instead of viewport minus insets.
    **options
        Forwarded to PlacementComposer (arrow_size, display_insets, ...).
    """
    return PlacementComposer(**options).compute(
        content_size,
        viewport=viewport,
        anchor=anchor,
        placement=placement,
        display_area=display_area,
    )


__all__ = [
    "__version__",
    "compute_geometry",
    "Point",
    "Size",
    "Rect",
    "Insets",
    "Constrained",
    "Unconstrained",
    "UNCONSTRAINED",
    "FlexSize",
    "AxisRange",
    "Bounds",
    "resolve_bounds",
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
