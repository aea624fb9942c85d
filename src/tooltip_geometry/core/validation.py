"""Input validation with clear error messages for tooltip callers."""

from __future__ import annotations

import math
from typing import Any, Mapping

from .geometry import Insets, Size


SIDES = ("top", "bottom", "left", "right")
VALID_PLACEMENTS = SIDES + ("auto", "center")


def validate_placement(placement: Any, allowed: tuple[str, ...] = VALID_PLACEMENTS) -> str:
    """Validate a placement tag and return it unchanged."""
    if not isinstance(placement, str):
        raise TypeError(
            f"Placement must be a string, got {type(placement).__name__}."
        )
    if placement not in allowed:
        raise ValueError(
            f"Unknown placement '{placement}'. Use one of: {', '.join(allowed)}."
        )
    return placement


def validate_placement_order(order: Any) -> tuple[str, ...]:
    """Validate an auto-placement preference order."""
    order = tuple(order)
    if not order:
        raise ValueError("Placement order must contain at least one side.")
    for side in order:
        validate_placement(side, allowed=SIDES)
    return order


def validate_size(size: Any, name: str = "size") -> Size:
    """Validate a measured Size: finite and non-negative."""
    if not isinstance(size, Size):
        raise TypeError(f"{name} must be a Size, got {type(size).__name__}.")
    for field_name in ("width", "height"):
        value = getattr(size, field_name)
        if not math.isfinite(value):
            raise ValueError(f"{name}.{field_name} must be finite, got {value!r}.")
        if value < 0:
            raise ValueError(f"{name}.{field_name} must be >= 0, got {value!r}.")
    return size


def parse_offset(value: Any, reference: float) -> float:
    """Parse a padding/offset value into pixels.

    Accepts numbers, numeric strings (``"12"``) and percentage strings
    (``"5%"``, taken relative to ``reference``). Anything that does not
    resolve to a finite number is rejected.
    """
    if isinstance(value, bool):
        raise TypeError("Offset must be a number or a string, got bool.")
    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        text = value.strip()
        try:
            if text.endswith("%"):
                result = float(text[:-1]) * reference / 100.0
            else:
                result = float(text)
        except ValueError:
            raise ValueError(
                f"Cannot parse offset {value!r}. Use a number like 12 or a "
                f"percentage like '5%'."
            ) from None
    else:
        raise TypeError(
            f"Offset must be a number or a string, got {type(value).__name__}."
        )
    if not math.isfinite(result):
        raise ValueError(f"Offset {value!r} does not resolve to a finite number.")
    return result


def resolve_insets(insets: Insets | Mapping[str, Any] | None, viewport: Size) -> Insets:
    """Resolve insets given as an Insets, a mapping of raw offsets, or None.

    Percentages on top/bottom are relative to the viewport height, on
    left/right to the viewport width.
    """
    if insets is None:
        return Insets()
    if isinstance(insets, Insets):
        raw: Mapping[str, Any] = insets.to_dict()
    elif isinstance(insets, Mapping):
        unknown = set(insets) - {"top", "bottom", "left", "right"}
        if unknown:
            raise ValueError(f"Unknown inset keys: {sorted(unknown)}")
        raw = insets
    else:
        raise TypeError(
            f"Insets must be an Insets or a mapping, got {type(insets).__name__}."
        )
    resolved = {
        "top": parse_offset(raw.get("top", 0), viewport.height),
        "bottom": parse_offset(raw.get("bottom", 0), viewport.height),
        "left": parse_offset(raw.get("left", 0), viewport.width),
        "right": parse_offset(raw.get("right", 0), viewport.width),
    }
    negative = [k for k, v in resolved.items() if v < 0]
    if negative:
        raise ValueError(f"Insets must be >= 0. Negative: {negative}")
    return Insets(**resolved)


def validate_offset(value: Any, name: str, minimum: float | None = None) -> float:
    """Validate a pixel offset: a finite number, optionally bounded below."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}.")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value!r}.")
    if minimum is not None and value < minimum:
        raise ValueError(f"{name} must be >= {minimum:g}, got {value!r}.")
    return float(value)
