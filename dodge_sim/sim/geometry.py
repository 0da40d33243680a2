# dodge_sim/sim/geometry.py
from __future__ import annotations
from dataclasses import dataclass
import math

from .models import Entity, Position


@dataclass(frozen=True)
class Rect:
    left: float
    right: float
    bottom: float
    top: float

    @classmethod
    def centered(cls, size: float) -> "Rect":
        h = size / 2.0
        return cls(left=-h, right=h, bottom=-h, top=h)

    @property
    def half_extent(self) -> float:
        return (self.right - self.left) / 2.0

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.bottom <= y <= self.top


def clamp(v: float, lo: float, hi: float) -> float:
    return min(max(v, lo), hi)


def clamp_position(p: Position, rect: Rect) -> None:
    """Pull a position back inside `rect` in place."""
    p.x = clamp(p.x, rect.left, rect.right)
    p.y = clamp(p.y, rect.bottom, rect.top)


def overlaps(a: Entity, b: Entity) -> bool:
    """
    Bounding-box proximity test: both axis gaps must be strictly under the
    summed radii. Looser than a circle test on the diagonals.
    """
    reach = a.radius + b.radius
    dx = abs(a.position.x - b.position.x)
    dy = abs(a.position.y - b.position.y)
    return dx < reach and dy < reach


def overlaps_circle(a: Entity, b: Entity) -> bool:
    reach = a.radius + b.radius
    return math.hypot(a.position.x - b.position.x, a.position.y - b.position.y) < reach


COLLISION_TESTS = {
    "box": overlaps,
    "circle": overlaps_circle,
}
