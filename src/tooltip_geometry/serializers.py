"""Serializers: convert placement results to JS-transferable JSON."""

from __future__ import annotations

import json

from .layout.composer import TooltipLayout
from .layout.directional import PlacementResult


def serialize_placement(result: PlacementResult) -> str:
    """Serialize a single placement result as a JSON string."""
    return json.dumps(result.to_dict())


def serialize_layout(layout: TooltipLayout) -> str:
    """Serialize a full tooltip layout as a JSON string."""
    return json.dumps(layout.to_dict())
