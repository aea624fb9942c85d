"""Shared test fixtures for tooltip-geometry."""

import pytest

from tooltip_geometry.core.bounds import Bounds
from tooltip_geometry.core.geometry import Insets, Rect, Size


@pytest.fixture
def viewport():
    """Phone-sized portrait viewport."""
    return Size(375, 667)


@pytest.fixture
def display_bounds(viewport):
    """Bounds covering the whole viewport, no arrow guard."""
    return Bounds.from_display_area(Rect(0, 0, viewport.width, viewport.height))


@pytest.fixture
def inset_bounds(viewport):
    """Viewport bounds with 24px insets on every edge."""
    return Bounds.from_viewport(viewport, Insets.uniform(24))


@pytest.fixture
def arrow_size():
    return Size(16, 8)


@pytest.fixture
def centered_anchor():
    """Anchor well away from every viewport edge."""
    return Rect(150, 300, 64, 64)
