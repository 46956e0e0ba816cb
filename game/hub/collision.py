"""
Collision primitives
--------------------
Point-in-time overlap tests only. There is no swept collision, so a fast
entity can pass through a thin one between two ticks.

The factories at the bottom build the ``(a, b) -> bool`` tests referenced
by ``CollisionRule``.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from .entities import Entity
from .utils import clamp, distance

CollisionTest = Callable[[Entity, Entity], bool]


def rect_overlap(ax, ay, aw, ah, bx, by, bw, bh) -> bool:
    """Axis-aligned rectangle overlap, edges touching do not count"""
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def point_in_rect(px, py, rx, ry, rw, rh) -> bool:
    """Strict point-inside-rectangle test"""
    return rx < px < rx + rw and ry < py < ry + rh


def circle_rect_overlap(cx, cy, r, rx, ry, rw, rh) -> bool:
    """Check if a circle touches a rectangle"""
    nx = clamp(cx, rx, rx + rw)
    ny = clamp(cy, ry, ry + rh)
    dx = cx - nx
    dy = cy - ny
    return (dx * dx + dy * dy) < (r * r)


def overlap(a: Entity, b: Entity) -> bool:
    """Bounding-box overlap of two entities"""
    return rect_overlap(a.x, a.y, a.w, a.h, b.x, b.y, b.w, b.h)


# ----------------------------
# Test factories for rule tables
# ----------------------------

def boxes(
    a_size: Optional[Tuple[float, float]] = None,
    b_size: Optional[Tuple[float, float]] = None,
) -> CollisionTest:
    """Rectangle test, optionally with hitboxes smaller than the drawn size"""
    def test(a: Entity, b: Entity) -> bool:
        aw, ah = a_size if a_size else (a.w, a.h)
        bw, bh = b_size if b_size else (b.w, b.h)
        return rect_overlap(a.x, a.y, aw, ah, b.x, b.y, bw, bh)
    return test


def point_inside() -> CollisionTest:
    """The origin of ``a`` lies strictly inside the box of ``b``"""
    def test(a: Entity, b: Entity) -> bool:
        return point_in_rect(a.x, a.y, b.x, b.y, b.w, b.h)
    return test


def within(
    radius: float,
    a_offset: Tuple[float, float] = (0.0, 0.0),
    b_offset: Tuple[float, float] = (0.0, 0.0),
) -> CollisionTest:
    """Anchor points (origin + offset) closer than ``radius``"""
    def test(a: Entity, b: Entity) -> bool:
        d = distance(a.x + a_offset[0], a.y + a_offset[1],
                     b.x + b_offset[0], b.y + b_offset[1])
        return d < radius
    return test
