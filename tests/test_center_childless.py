"""Tests for childless anchors and center geometry."""

import pytest

from tooltip_geometry.core.geometry import (
    Constrained,
    FlexSize,
    Insets,
    Point,
    Rect,
    Size,
    UNCONSTRAINED,
)
from tooltip_geometry.layout.center import compute_center_geometry
from tooltip_geometry.layout.childless import make_childless_rect, make_childless_rect_in_area
from tooltip_geometry.layout.directional import compute_directional_geometry


class TestMakeChildlessRect:
    @pytest.mark.parametrize("placement, expected", [
        ("bottom", Rect(187.5, 24, 1, 1)),
        ("top", Rect(187.5, 643, 1, 1)),
        ("right", Rect(24, 333.5, 1, 1)),
        ("left", Rect(351, 333.5, 1, 1)),
        ("center", Rect(187.5, 333.5, 1, 1)),
        ("auto", Rect(187.5, 333.5, 1, 1)),
    ])
    def test_anchor_positions(self, viewport, placement, expected):
        assert make_childless_rect(viewport, Insets.uniform(24), placement) == expected

    def test_bottom_request_hangs_from_top_edge(self, viewport, inset_bounds, arrow_size):
        anchor = make_childless_rect(viewport, Insets.uniform(24), "bottom")
        geom = compute_directional_geometry(
            "bottom", anchor, Size(200, 100), arrow_size, inset_bounds,
        )
        assert geom.placement == "bottom"
        assert geom.origin.y == 33  # 24 + 1 + 8
        assert geom.origin.y + geom.adjusted_size.height < viewport.height / 2

    def test_left_request_sits_on_right_side(self, viewport, inset_bounds, arrow_size):
        anchor = make_childless_rect(viewport, Insets.uniform(24), "left")
        geom = compute_directional_geometry(
            "left", anchor, Size(100, 50), arrow_size, inset_bounds,
        )
        assert geom.origin.x == 243  # 351 - 100 - 8
        assert geom.origin.x > viewport.width / 2


class TestCenterGeometry:
    def test_small_content_is_centered(self, inset_bounds):
        geom = compute_center_geometry(Size(200, 100), inset_bounds)
        assert geom.placement == "center"
        assert geom.origin == Point(87.5, 283.5)
        assert geom.adjusted_size == FlexSize(UNCONSTRAINED, UNCONSTRAINED)

    def test_oversized_content_is_capped(self, inset_bounds):
        geom = compute_center_geometry(Size(400, 700), inset_bounds)
        assert geom.origin == Point(24, 24)
        assert geom.adjusted_size == FlexSize(Constrained(327), Constrained(619))

    def test_axes_are_independent(self, inset_bounds):
        geom = compute_center_geometry(Size(400, 100), inset_bounds)
        assert geom.origin == Point(24, 283.5)
        assert geom.adjusted_size == FlexSize(Constrained(327), UNCONSTRAINED)

    def test_exact_fit_is_constrained(self, inset_bounds):
        geom = compute_center_geometry(Size(327, 619), inset_bounds)
        assert geom.adjusted_size == FlexSize(Constrained(327), Constrained(619))
        assert geom.origin == Point(24, 24)

    def test_anchor_point_defaults_to_bounds_center(self, inset_bounds):
        geom = compute_center_geometry(Size(10, 10), inset_bounds)
        assert geom.anchor_point == Point(187.5, 333.5)

    def test_anchor_point_from_childless_rect(self, viewport, inset_bounds):
        anchor = make_childless_rect(viewport, Insets.uniform(24), "center")
        geom = compute_center_geometry(Size(10, 10), inset_bounds, anchor)
        assert geom.anchor_point == Point(188, 334)

    def test_to_dict_uses_sentinel(self, inset_bounds):
        d = compute_center_geometry(Size(400, 100), inset_bounds).to_dict()
        assert d["placement"] == "center"
        assert d["adjustedContentSize"] == {"width": 327, "height": -1}


class TestMakeChildlessRectInArea:
    @pytest.mark.parametrize("placement, expected", [
        ("bottom", Rect(187.5, 200, 1, 1)),
        ("top", Rect(187.5, 500, 1, 1)),
        ("right", Rect(50, 350, 1, 1)),
        ("left", Rect(325, 350, 1, 1)),
        ("center", Rect(187.5, 350, 1, 1)),
    ])
    def test_anchor_positions(self, placement, expected):
        assert make_childless_rect_in_area(Rect(50, 200, 275, 300), placement) == expected

    def test_matches_viewport_form_for_symmetric_insets(self, viewport):
        area = Rect(24, 24, viewport.width - 48, viewport.height - 48)
        for placement in ("top", "bottom", "left", "right", "center"):
            assert make_childless_rect_in_area(area, placement) == make_childless_rect(
                viewport, Insets.uniform(24), placement,
            )
