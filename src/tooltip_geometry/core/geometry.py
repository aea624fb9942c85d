"""Geometric primitives for placement computation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Point:
    """A 2D coordinate in viewport pixel space."""

    x: float
    y: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Size:
    """A width/height pair."""

    width: float
    height: float

    def swapped(self) -> Size:
        """The same size rotated by 90 degrees."""
        return Size(self.height, self.width)

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in pixel space."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.right and self.y <= py <= self.bottom

    def offset(self, dx: float = 0.0, dy: float = 0.0) -> Rect:
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class Insets:
    """Margins from each viewport edge that the panel and arrow must not cross."""

    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0

    @classmethod
    def uniform(cls, value: float) -> Insets:
        return cls(value, value, value, value)

    def to_dict(self) -> dict:
        return {
            "top": self.top,
            "bottom": self.bottom,
            "left": self.left,
            "right": self.right,
        }


# Extent: a panel dimension that is either pinned to a value or left to
# size itself from its content.

@dataclass(frozen=True)
class Constrained:
    value: float


@dataclass(frozen=True)
class Unconstrained:
    pass


UNCONSTRAINED = Unconstrained()

Extent = Union[Constrained, Unconstrained]

# JS consumers still expect -1 for "let the content size itself".
UNCONSTRAINED_SENTINEL = -1


def extent_to_json(extent: Extent) -> float:
    if isinstance(extent, Constrained):
        return extent.value
    return UNCONSTRAINED_SENTINEL


@dataclass(frozen=True)
class FlexSize:
    """A panel size whose dimensions may each be left unconstrained."""

    width: Extent
    height: Extent

    @property
    def is_constrained(self) -> bool:
        return isinstance(self.width, Constrained) or isinstance(self.height, Constrained)

    def to_dict(self) -> dict:
        return {
            "width": extent_to_json(self.width),
            "height": extent_to_json(self.height),
        }
