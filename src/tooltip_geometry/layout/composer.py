"""PlacementComposer: turns a measured anchor and content into a tooltip layout."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from ..core.bounds import Bounds, resolve_bounds
from ..core.geometry import (
    Constrained,
    FlexSize,
    Insets,
    Point,
    Rect,
    Size,
)
from ..core.validation import (
    resolve_insets,
    validate_offset,
    validate_placement,
    validate_placement_order,
    validate_size,
)
from .auto import DEFAULT_PLACEMENT_ORDER, compute_auto_geometry
from .center import compute_center_geometry
from .childless import make_childless_rect, make_childless_rect_in_area
from .clamp import BoundContent, compute_bound_content_size
from .directional import (
    PlacementResult,
    compute_directional_geometry,
    oriented_arrow_size,
)


logger = logging.getLogger(__name__)

# Default sizes
DEFAULT_ARROW_SIZE = Size(16.0, 8.0)
DEFAULT_INSET = 24.0
DEFAULT_DISPLAY_INSETS = Insets.uniform(DEFAULT_INSET)
DEFAULT_CHILD_CONTENT_SPACING = 4.0

# Rotation applied to a downward pointing arrow for each side
ARROW_ROTATION = {
    "top": 0.0,
    "bottom": 180.0,
    "left": -90.0,
    "right": 90.0,
}


@dataclass(frozen=True)
class ArrowGeometry:
    """Arrow triangle box and its rotation in degrees.

    ``rect`` is in viewport coordinates, ``offset`` is the box position
    relative to the panel origin.
    """

    rect: Rect
    offset: Point
    rotation: float

    def to_dict(self) -> dict:
        return {
            **self.rect.to_dict(),
            "offset": self.offset.to_dict(),
            "rotation": self.rotation,
        }


@dataclass(frozen=True)
class TooltipLayout:
    """Complete tooltip geometry handed to the rendering layer."""

    result: PlacementResult
    anchor: Rect
    bounds: Bounds
    panel_size: Size
    arrow: ArrowGeometry | None = None
    bound_content: BoundContent | None = None
    childless: bool = False

    @property
    def placement(self) -> str:
        return self.result.placement

    @property
    def origin(self) -> Point:
        if self.bound_content is not None:
            return self.bound_content.origin
        return self.result.origin

    @property
    def translate_origin(self) -> Point:
        """Vector from the panel center to the anchor point."""
        center_x = self.origin.x + self.panel_size.width / 2
        center_y = self.origin.y + self.panel_size.height / 2
        anchor_point = self.result.anchor_point
        return Point(anchor_point.x - center_x, anchor_point.y - center_y)

    def to_dict(self) -> dict:
        """Serialize to a dict for JSON transfer to JS."""
        d = self.result.to_dict()
        d["tooltipOrigin"] = self.origin.to_dict()
        d["childRect"] = self.anchor.to_dict()
        d["bounds"] = self.bounds.to_dict()
        d["panelSize"] = self.panel_size.to_dict()
        d["translateOrigin"] = self.translate_origin.to_dict()
        d["childless"] = self.childless
        if self.arrow is not None:
            d["arrow"] = self.arrow.to_dict()
        if self.bound_content is not None:
            d.update(self.bound_content.to_dict())
        return d


class PlacementComposer:
    """Computes tooltip geometry from measured inputs.

    Holds only configuration; every ``compute`` call is a pure function
    of its arguments and that configuration.
    """

    def __init__(
        self,
        arrow_size: Size = DEFAULT_ARROW_SIZE,
        display_insets: Insets | Mapping[str, Any] = DEFAULT_DISPLAY_INSETS,
        child_content_spacing: float = DEFAULT_CHILD_CONTENT_SPACING,
        top_adjustment: float = 0.0,
        horizontal_adjustment: float = 0.0,
        placement_order: Sequence[str] = DEFAULT_PLACEMENT_ORDER,
    ) -> None:
        self._arrow_size = validate_size(arrow_size, "arrow_size")
        self._display_insets = display_insets
        self._child_content_spacing = validate_offset(
            child_content_spacing, "child_content_spacing", minimum=0
        )
        self._top_adjustment = validate_offset(top_adjustment, "top_adjustment")
        self._horizontal_adjustment = validate_offset(
            horizontal_adjustment, "horizontal_adjustment"
        )
        self._placement_order = validate_placement_order(placement_order)

    @property
    def arrow_size(self) -> Size:
        return self._arrow_size

    @property
    def placement_order(self) -> tuple[str, ...]:
        return self._placement_order

    def resolve_insets(self, viewport: Size) -> Insets:
        """Display insets in pixels for ``viewport``."""
        return resolve_insets(self._display_insets, viewport)

    def compute(
        self,
        content_size: Size,
        viewport: Size | None = None,
        anchor: Rect | None = None,
        placement: str | None = None,
        display_area: Rect | None = None,
    ) -> TooltipLayout:
        """Compute the tooltip layout.

        Parameters
        ----------
        content_size : measured panel content size
        viewport : viewport dimensions; a childless tooltip needs either
                   this or ``display_area``
        anchor : measured anchor rectangle, or None for a childless tooltip
        placement : 'top', 'bottom', 'left', 'right', 'auto' or 'center'.
                    Defaults to 'top' with an anchor and 'center' without.
        display_area : explicit permitted rectangle, used instead of
                       viewport minus insets for the bounds
        """
        validate_size(content_size, "content_size")
        childless = anchor is None
        if placement is None:
            placement = "center" if childless else "top"
        validate_placement(placement)
        if placement == "center" and not childless:
            raise ValueError(
                "'center' placement is only available for tooltips without an anchor."
            )

        insets = self.resolve_insets(viewport) if viewport is not None else Insets()
        if display_area is not None:
            bounds = resolve_bounds(display_area=display_area)
        else:
            bounds = resolve_bounds(viewport=viewport, insets=insets)

        if childless and display_area is not None:
            anchor_rect = make_childless_rect_in_area(display_area, placement)
        elif childless:
            anchor_rect = make_childless_rect(viewport, insets, placement)
        else:
            anchor_rect = anchor.offset(self._horizontal_adjustment, self._top_adjustment)

        if placement == "center":
            result = compute_center_geometry(content_size, bounds, anchor_rect)
            return TooltipLayout(
                result=result,
                anchor=anchor_rect,
                bounds=bounds,
                panel_size=_flex_panel_size(result.adjusted_size, content_size),
                childless=childless,
            )

        # Spacing between the anchor and the arrow tip deepens the gap
        arrow = Size(
            self._arrow_size.width,
            self._arrow_size.height + self._child_content_spacing,
        )
        bound_content = None
        if placement == "auto":
            result = compute_auto_geometry(
                anchor_rect, content_size, arrow, bounds, self._placement_order,
            )
            if not bounds.contains_rect(result.natural_origin, content_size):
                logger.debug(
                    "Clamping '%s' fallback content to bounds %s",
                    result.placement, bounds.to_dict(),
                )
                bound_content = compute_bound_content_size(
                    bounds,
                    result.natural_origin,
                    result.anchor_point,
                    oriented_arrow_size(arrow, result.placement),
                    content_size,
                )
        else:
            result = compute_directional_geometry(
                placement, anchor_rect, content_size, arrow, bounds,
            )

        if bound_content is not None:
            panel_size = bound_content.content_size
            origin = bound_content.origin
        else:
            panel_size = result.adjusted_size
            origin = result.origin
        return TooltipLayout(
            result=result,
            anchor=anchor_rect,
            bounds=bounds,
            panel_size=panel_size,
            arrow=arrow_geometry(result.placement, result.anchor_point, origin, panel_size, self._arrow_size),
            bound_content=bound_content,
            childless=childless,
        )


def _flex_panel_size(size: FlexSize, content_size: Size) -> Size:
    width = size.width.value if isinstance(size.width, Constrained) else content_size.width
    height = size.height.value if isinstance(size.height, Constrained) else content_size.height
    return Size(width, height)


def arrow_geometry(
    placement: str,
    anchor_point: Point,
    origin: Point,
    panel_size: Size,
    arrow_size: Size,
) -> ArrowGeometry:
    """Arrow box sitting on the panel edge that faces the anchor.

    The box is centered on the anchor point along the panel edge and
    ``arrow_size`` is given for a downward pointing arrow.
    """
    box = oriented_arrow_size(arrow_size, placement)
    if placement == "top":
        rect = Rect(anchor_point.x - box.width / 2, origin.y + panel_size.height, box.width, box.height)
    elif placement == "bottom":
        rect = Rect(anchor_point.x - box.width / 2, origin.y - box.height, box.width, box.height)
    elif placement == "left":
        rect = Rect(origin.x + panel_size.width, anchor_point.y - box.height / 2, box.width, box.height)
    elif placement == "right":
        rect = Rect(origin.x - box.width, anchor_point.y - box.height / 2, box.width, box.height)
    else:
        raise ValueError(f"No arrow for placement '{placement}'.")
    return ArrowGeometry(
        rect=rect,
        offset=Point(rect.x - origin.x, rect.y - origin.y),
        rotation=ARROW_ROTATION[placement],
    )
