"""
Snake rule table tests.
"""
from game.hub.entities import COLLECTIBLE
from game.hub.games import snake
from game.hub.world import World, GameState


def new_world(seed=0):
    world = World(snake.RULES, seed=seed)
    world.start()
    return world


class TestSnakeMovement:

    def test_initial_layout(self):
        world = new_world()
        assert world.player.attrs["body"] == [(10, 10), (9, 10)]
        foods = world.of_kind("food")
        assert len(foods) == 1
        assert (foods[0].x, foods[0].y) == (15 * snake.CELL, 15 * snake.CELL)

    def test_five_idle_ticks_move_five_cells_right(self):
        world = new_world()
        for _ in range(5):
            world.step()

        assert world.player.attrs["body"] == [(15, 10), (14, 10)]
        assert (world.player.x, world.player.y) == (15 * snake.CELL, 10 * snake.CELL)
        assert world.running

    def test_turn(self):
        world = new_world()
        world.input.press("up")
        world.step()
        assert world.player.attrs["body"][0] == (10, 9)

    def test_reverse_is_ignored(self):
        world = new_world()
        world.input.press("left")
        world.step()
        assert world.player.attrs["body"][0] == (11, 10)
        assert world.running

    def test_unknown_key_is_ignored(self):
        world = new_world()
        world.input.press("q")
        world.step()
        assert world.player.attrs["body"][0] == (11, 10)


class TestSnakeEndings:

    def test_running_into_initial_tail_loses_with_zero_score(self):
        world = new_world()
        world.player.attrs["heading"] = (-1, 0)
        events = world.step()

        assert world.state is GameState.LOST
        assert world.score == 0
        assert "lost" in [e.name for e in events]

    def test_wall_loses(self):
        world = new_world()
        for _ in range(9):
            world.step()
        assert world.player.attrs["body"][0] == (19, 10)
        assert world.running

        world.step()
        assert world.state is GameState.LOST
        # the head never leaves the field
        assert world.player.x == 19 * snake.CELL


class TestSnakeFood:

    def test_eating_grows_and_scores(self):
        world = new_world()
        world.entities[COLLECTIBLE].clear()
        snake.place_food(world, 11, 10)

        events = world.step()

        assert world.score == snake.FOOD_REWARD
        assert world.player.attrs["body"] == [(11, 10), (10, 10), (9, 10)]
        assert "food" in [e.name for e in events]
        # a new piece of food replaces the eaten one
        assert len(world.of_kind("food")) == 1

    def test_food_never_spawns_on_its_own(self):
        world = new_world()
        for _ in range(3):
            world.step()
        assert len(world.of_kind("food")) == 1
