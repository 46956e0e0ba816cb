"""
Space Ranger rule table tests.
"""
from game.hub.entities import Entity
from game.hub.games import space_ranger
from game.hub.world import World, GameState


def new_world(seed=1):
    world = World(space_ranger.RULES, seed=seed)
    world.start()
    return world


class TestSpaceRangerCombat:

    def test_laser_hits_invader_within_one_tick(self):
        world = new_world()
        world.add(Entity(kind="laser", x=20, y=10, w=4, h=10, vy=-7))
        world.add(Entity(kind="invader", x=20, y=0, w=30, h=30))

        events = world.step()

        assert world.score == space_ranger.INVADER_REWARD
        assert world.of_kind("laser") == []
        # only freshly spawned invaders (at the top edge) may be left
        assert all(e.y == -30 for e in world.of_kind("invader"))
        assert "kill" in [e.name for e in events]

    def test_fire_spawns_laser_from_nose(self):
        world = new_world()
        world.input.press("space")
        world.step()

        lasers = world.of_kind("laser")
        assert len(lasers) == 1
        assert lasers[0].x == 180 + 20 - 2
        assert lasers[0].y == 340 - space_ranger.LASER_SPEED

    def test_invader_contact_loses(self):
        world = new_world()
        world.add(Entity(kind="invader", x=180, y=340, w=30, h=30))
        world.step()
        assert world.state is GameState.LOST
        assert world.score == 0

    def test_coin_pickup(self):
        world = new_world()
        world.add(Entity(kind="coin", x=190, y=350, w=20, h=20))
        events = world.step()
        assert world.score == space_ranger.COIN_REWARD
        assert "coin" in [e.name for e in events]
        assert world.running


class TestSpaceRangerShip:

    def test_ship_stays_on_screen(self):
        world = new_world()
        for _ in range(30):
            world.input.press("left")
            world.step()
            assert 0 <= world.player.x <= 400 - space_ranger.SHIP_SIZE
        assert world.player.x == 0

        for _ in range(30):
            world.input.press("right")
            world.step()
            assert 0 <= world.player.x <= 400 - space_ranger.SHIP_SIZE
        assert world.player.x == 400 - space_ranger.SHIP_SIZE

    def test_invaders_fall_and_get_pruned(self):
        world = new_world()
        invader = world.add(Entity(kind="invader", x=0, y=398, w=30, h=30, vy=5))
        world.step()
        assert invader not in world.of_kind("invader")
