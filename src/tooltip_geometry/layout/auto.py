"""Automatic side selection for anchored tooltips."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from ..core.bounds import Bounds
from ..core.geometry import Rect, Size
from ..core.validation import validate_placement_order
from .directional import PlacementResult, compute_directional_geometry


logger = logging.getLogger(__name__)

# Preferred sides, tried in order. The trailing "top" is the fallback
# returned when nothing fits.
DEFAULT_PLACEMENT_ORDER: tuple[str, ...] = ("top", "bottom", "left", "right", "top")


def fit_mask(origins: np.ndarray, content_size: Size, bounds: Bounds) -> np.ndarray:
    """Boolean mask of which (n, 2) origins keep the full content in bounds."""
    lo = np.array([bounds.x.min, bounds.y.min], dtype=np.float64)
    hi = np.array(
        [bounds.x.max - content_size.width, bounds.y.max - content_size.height],
        dtype=np.float64,
    )
    return np.all((origins >= lo) & (origins <= hi), axis=1)


def compute_auto_geometry(
    anchor: Rect,
    content_size: Size,
    arrow_size: Size,
    bounds: Bounds,
    order: Sequence[str] = DEFAULT_PLACEMENT_ORDER,
) -> PlacementResult:
    """Pick the first side in ``order`` where the content fits unshrunk.

    Fit is judged on each candidate's natural origin, i.e. before the
    panel was pulled back inside the bounds. When no candidate fits,
    the last one in ``order`` is returned as is; callers should then
    clamp its content size.

    Parameters
    ----------
    anchor : anchor rectangle in viewport coordinates
    content_size : measured panel content size
    arrow_size : unrotated arrow size (as for a top placement)
    bounds : permitted region
    order : side preference order
    """
    order = validate_placement_order(order)
    candidates = [
        compute_directional_geometry(side, anchor, content_size, arrow_size, bounds)
        for side in order
    ]
    origins = np.array(
        [[c.natural_origin.x, c.natural_origin.y] for c in candidates],
        dtype=np.float64,
    )
    fitting = np.flatnonzero(fit_mask(origins, content_size, bounds))
    if fitting.size > 0:
        chosen = candidates[int(fitting[0])]
        logger.debug("Auto placement chose '%s' from %s", chosen.placement, order)
        return chosen

    logger.debug(
        "No side in %s fits content %sx%s; falling back to '%s'",
        order, content_size.width, content_size.height, order[-1],
    )
    return candidates[-1]
