"""Bounds: the region a panel is allowed to occupy, resolved per axis."""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import Insets, Point, Rect, Size


@dataclass(frozen=True)
class AxisRange:
    """Inclusive [min, max] limits on one axis."""

    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def to_dict(self) -> dict:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class Bounds:
    """Resolved axis limits for panel placement.

    Built either from an explicit display-area rectangle or from the
    viewport size minus insets. Only the inset form keeps the arrow tip
    away from the bound edges (``guards_arrow``).
    """

    x: AxisRange
    y: AxisRange
    guards_arrow: bool = False

    @classmethod
    def from_display_area(cls, area: Rect) -> Bounds:
        return cls(
            x=_axis(area.x, area.right),
            y=_axis(area.y, area.bottom),
            guards_arrow=False,
        )

    @classmethod
    def from_viewport(cls, viewport: Size, insets: Insets) -> Bounds:
        return cls(
            x=_axis(insets.left, viewport.width - insets.right),
            y=_axis(insets.top, viewport.height - insets.bottom),
            guards_arrow=True,
        )

    @property
    def rect(self) -> Rect:
        return Rect(self.x.min, self.y.min, self.x.span, self.y.span)

    def contains_rect(self, origin: Point, size: Size) -> bool:
        """Whether a panel of ``size`` at ``origin`` lies fully inside."""
        return (
            self.x.min <= origin.x <= self.x.max - size.width
            and self.y.min <= origin.y <= self.y.max - size.height
        )

    def to_dict(self) -> dict:
        return {"x": self.x.to_dict(), "y": self.y.to_dict()}


def _axis(lo: float, hi: float) -> AxisRange:
    # Insets larger than the viewport collapse the axis instead of inverting it
    return AxisRange(lo, max(lo, hi))


def resolve_bounds(
    display_area: Rect | None = None,
    viewport: Size | None = None,
    insets: Insets | None = None,
) -> Bounds:
    """Resolve either a display area or a viewport (+ insets) into Bounds.

    Parameters
    ----------
    display_area : explicit permitted rectangle (older call shape)
    viewport : viewport dimensions
    insets : margins from each viewport edge; defaults to no margin
    """
    if display_area is not None and viewport is not None:
        raise ValueError(
            "Pass either display_area or viewport (+ insets), not both."
        )
    if display_area is not None:
        return Bounds.from_display_area(display_area)
    if viewport is None:
        raise ValueError(
            "Cannot resolve bounds: provide a display_area Rect or a viewport Size."
        )
    return Bounds.from_viewport(viewport, insets if insets is not None else Insets())
