"""
Collision primitive tests - no world needed.
"""
import random

import pytest

from game.hub.collision import (
    rect_overlap, point_in_rect, circle_rect_overlap, overlap,
    boxes, point_inside, within,
)
from game.hub.entities import Entity


def rect(x, y, w, h):
    return Entity(kind="box", x=x, y=y, w=w, h=h)


class TestRectOverlap:

    def test_overlapping_boxes(self):
        assert rect_overlap(0, 0, 10, 10, 5, 5, 10, 10)

    def test_touching_edges_do_not_overlap(self):
        assert not rect_overlap(0, 0, 10, 10, 10, 0, 10, 10)
        assert not rect_overlap(0, 0, 10, 10, 0, 10, 10, 10)

    def test_containment(self):
        assert rect_overlap(0, 0, 100, 100, 40, 40, 5, 5)

    def test_symmetric_for_random_pairs(self):
        rng = random.Random(1234)
        for _ in range(500):
            a = rect(rng.uniform(-50, 450), rng.uniform(-50, 450),
                     rng.uniform(0, 60), rng.uniform(0, 60))
            b = rect(rng.uniform(-50, 450), rng.uniform(-50, 450),
                     rng.uniform(0, 60), rng.uniform(0, 60))
            assert overlap(a, b) == overlap(b, a)

    def test_fast_entity_tunnels_through(self):
        """Point-in-time test: a jump over a thin wall is not a hit."""
        wall = rect(100, 0, 2, 100)
        bullet = rect(90, 50, 4, 4)
        assert not overlap(bullet, wall)
        bullet.x += 20
        assert not overlap(bullet, wall)


class TestPointAndCircle:

    def test_point_strictly_inside(self):
        assert point_in_rect(5, 5, 0, 0, 10, 10)
        assert not point_in_rect(0, 5, 0, 0, 10, 10)
        assert not point_in_rect(10, 5, 0, 0, 10, 10)

    def test_circle_touching_rect(self):
        assert circle_rect_overlap(15, 5, 6, 0, 0, 10, 10)
        assert not circle_rect_overlap(25, 5, 6, 0, 0, 10, 10)

    def test_circle_against_point(self):
        assert circle_rect_overlap(200, 200, 75, 250, 200, 0, 0)
        assert not circle_rect_overlap(200, 200, 75, 0, 0, 0, 0)


class TestFactories:

    def test_boxes_uses_hitbox_sizes(self):
        a = rect(0, 0, 40, 50)
        b = rect(30, 0, 30, 30)
        assert boxes()(a, b)
        assert not boxes(a_size=(25, 35))(a, b)

    def test_point_inside_uses_origin_of_first(self):
        bullet = rect(20, 10, 4, 10)
        target = rect(10, 0, 30, 30)
        assert point_inside()(bullet, target)
        assert not point_inside()(target, bullet)

    @pytest.mark.parametrize("dx,expected", [(10, True), (19.9, True), (20, False), (30, False)])
    def test_within_radius(self, dx, expected):
        a = rect(0, 0, 25, 25)
        b = rect(dx, 0, 25, 25)
        assert within(20)(a, b) is expected

    def test_within_with_offset(self):
        survivor = rect(200, 300, 25, 25)
        crate = rect(200, 300, 18, 18)
        # (212, 312) to (200, 300) is about 17px
        assert within(25, a_offset=(12, 12))(survivor, crate)
        crate.x = 240
        assert not within(25, a_offset=(12, 12))(survivor, crate)
