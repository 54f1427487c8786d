"""Axis-aligned rectangle tests used for every collision in the game."""

from __future__ import annotations

from dataclasses import dataclass

from leapfrog.config.schema import FieldConfig


@dataclass(frozen=True)
class Rect:
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


def rect_of(obj) -> Rect:
    """Return the bounding rectangle of any entity with x/y/width/height."""
    return Rect(obj.x, obj.y, obj.width, obj.height)


def pilot_box(pilot, cfg: FieldConfig) -> Rect:
    """The pilot's bounding square: center +/- radius on both axes."""
    r = cfg.pilot_radius
    return Rect(pilot.x - r, pilot.y - r, 2 * r, 2 * r)


def overlaps(a: Rect, b: Rect) -> bool:
    """True if the rectangles share interior area. Touching edges do not overlap."""
    return a.x < b.right and a.right > b.x and a.y < b.bottom and a.bottom > b.y


def contains(outer: Rect, inner: Rect) -> bool:
    """True if `inner` lies entirely within `outer`. Shared edges count as contained."""
    return (
        inner.x >= outer.x
        and inner.right <= outer.right
        and inner.y >= outer.y
        and inner.bottom <= outer.bottom
    )
