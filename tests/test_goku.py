"""
Rise of Goku rule table tests.
"""
import pytest

from game.hub.entities import Entity
from game.hub.games import goku
from game.hub.world import World, GameState


@pytest.fixture
def world():
    w = World(goku.RULES, seed=5)
    w.start()
    return w


class TestKi:

    def test_blast_costs_ki(self, world):
        world.input.press("space")
        world.step()

        assert world.player.resources["ki"] == goku.KI_START - goku.BLAST_COST
        blasts = world.of_kind("blast")
        assert len(blasts) == 1
        assert blasts[0].x == 50 + 40 + goku.BLAST_SPEED

    def test_blast_needs_ki(self, world):
        world.player.resources["ki"] = 10
        world.input.press("space")
        events = world.step()

        assert world.of_kind("blast") == []
        assert world.player.resources["ki"] == 10
        assert "need_ki" in [e.name for e in events]

    def test_charging_while_held(self, world):
        world.input.press("c")
        world.step()
        world.step()
        assert world.player.resources["ki"] == pytest.approx(goku.KI_START + 2 * goku.KI_CHARGE)
        assert len(world.of_kind("aura")) == 2

        world.input.release("c")
        world.step()
        assert world.player.resources["ki"] == pytest.approx(goku.KI_START + 2 * goku.KI_CHARGE)

    def test_charge_is_capped(self, world):
        world.player.resources["ki"] = goku.KI_MAX - 0.5
        world.input.press("c")
        world.step()
        world.step()
        assert world.player.resources["ki"] == goku.KI_MAX

    def test_orb_refills_ki(self, world):
        world.add(Entity(kind="orb", x=55, y=185, w=15, h=15))
        events = world.step()

        assert world.player.resources["ki"] == goku.KI_START + goku.ORB_KI
        assert world.score == goku.ORB_REWARD
        assert "orb" in [e.name for e in events]
        assert len(world.of_kind("glow")) == 12


class TestCombat:

    def test_blast_destroys_enemy(self, world):
        world.add(Entity(kind="blast", x=100, y=200, w=6, h=6, vx=goku.BLAST_SPEED))
        world.add(Entity(kind="enemy", x=105, y=190, w=30, h=30))
        world.step()

        assert world.score == goku.ENEMY_REWARD
        assert len(world.of_kind("spark")) == 8

    def test_enemy_contact_is_defeat(self, world):
        world.add(Entity(kind="enemy", x=60, y=190, w=30, h=30))
        world.step()
        assert world.state is GameState.LOST

    def test_vertical_moves_are_bounded(self, world):
        for _ in range(20):
            world.input.press("up")
            world.step()
        assert world.player.y == 0
        for _ in range(20):
            world.input.press("down")
            world.step()
        assert world.player.y == 400 - world.player.h
