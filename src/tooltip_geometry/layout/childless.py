"""Synthetic anchors for tooltips that have no wrapped child."""

from __future__ import annotations

from ..core.geometry import Insets, Point, Rect, Size


CHILDLESS_ANCHOR_SIZE = 1.0


def _edge_rect(
    left: float,
    top: float,
    right: float,
    bottom: float,
    middle: Point,
    placement: str,
) -> Rect:
    s = CHILDLESS_ANCHOR_SIZE
    if placement == "bottom":
        return Rect(middle.x, top, s, s)
    if placement == "top":
        return Rect(middle.x, bottom, s, s)
    if placement == "right":
        return Rect(left, middle.y, s, s)
    if placement == "left":
        return Rect(right, middle.y, s, s)
    return Rect(middle.x, middle.y, s, s)


def make_childless_rect(viewport: Size, insets: Insets, placement: str) -> Rect:
    """Fabricate a point-like anchor on the viewport edge opposite the panel.

    A ``bottom`` request anchors at the top inset so the panel hangs from
    the top of the screen; ``top`` anchors at the bottom inset, and the
    left/right pair is mirrored the same way. ``center`` (and anything
    else) anchors at the viewport center.
    """
    return _edge_rect(
        insets.left,
        insets.top,
        viewport.width - insets.right,
        viewport.height - insets.bottom,
        Point(viewport.width / 2, viewport.height / 2),
        placement,
    )


def make_childless_rect_in_area(area: Rect, placement: str) -> Rect:
    """Same as ``make_childless_rect`` for an explicit display area."""
    return _edge_rect(area.x, area.y, area.right, area.bottom, area.center, placement)
