"""TooltipOptions: declarative, validated tooltip configuration."""

from __future__ import annotations

import param

from .core.geometry import Insets, Rect, Size
from .core.validation import VALID_PLACEMENTS
from .layout.auto import DEFAULT_PLACEMENT_ORDER
from .layout.composer import (
    DEFAULT_ARROW_SIZE,
    DEFAULT_CHILD_CONTENT_SPACING,
    DEFAULT_DISPLAY_INSETS,
    PlacementComposer,
    TooltipLayout,
)


class TooltipOptions(param.Parameterized):
    """User-facing tooltip configuration.

    Mirrors the props a tooltip component exposes for placement. The
    rendering layer keeps one instance per tooltip, updates it from its
    props, and calls ``compute`` whenever a measurement arrives.
    """

    # None picks 'top' for anchored tooltips and 'center' for childless ones
    placement = param.Selector(default=None, objects=[None, *VALID_PLACEMENTS])

    arrow_size = param.ClassSelector(class_=Size, default=DEFAULT_ARROW_SIZE)
    display_insets = param.ClassSelector(
        class_=(Insets, dict),
        default=DEFAULT_DISPLAY_INSETS,
        doc="Insets, or a dict of numbers / percentage strings like '5%'",
    )
    child_content_spacing = param.Number(default=DEFAULT_CHILD_CONTENT_SPACING, bounds=(0, None))

    # Corrections for anchors measured with an offset (e.g. Android status bar)
    top_adjustment = param.Number(default=0.0)
    horizontal_adjustment = param.Number(default=0.0)

    placement_order = param.List(default=list(DEFAULT_PLACEMENT_ORDER), item_type=str)

    def build_composer(self) -> PlacementComposer:
        """Build a PlacementComposer from the current option values."""
        return PlacementComposer(
            arrow_size=self.arrow_size,
            display_insets=self.display_insets,
            child_content_spacing=self.child_content_spacing,
            top_adjustment=self.top_adjustment,
            horizontal_adjustment=self.horizontal_adjustment,
            placement_order=self.placement_order,
        )

    def compute(
        self,
        content_size: Size,
        viewport: Size | None = None,
        anchor: Rect | None = None,
        display_area: Rect | None = None,
    ) -> TooltipLayout:
        """Compute the layout using the configured placement."""
        return self.build_composer().compute(
            content_size,
            viewport=viewport,
            anchor=anchor,
            placement=self.placement,
            display_area=display_area,
        )
