"""
Snake - grid game, one cell per tick
"""

from ..collision import boxes
from ..entities import Entity, Player, PLAYER, COLLECTIBLE
from ..rules import GameRules, KindSpec, SpawnClass, CollisionRule, Outcome

GRID = 20
CELL = 20
FOOD_REWARD = 10

HEADINGS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}


def make_snake(world) -> Player:
    p = Player(kind="snake", x=10 * CELL, y=10 * CELL, w=CELL, h=CELL)
    p.attrs["body"] = [(10, 10), (9, 10)]
    p.attrs["heading"] = (1, 0)
    return p


def place_food(world, cx: int, cy: int) -> Entity:
    return world.add(Entity(kind="food", x=cx * CELL, y=cy * CELL, w=CELL, h=CELL))


def random_food(world) -> Entity:
    cx = world.rng.randrange(GRID)
    cy = world.rng.randrange(GRID)
    return Entity(kind="food", x=cx * CELL, y=cy * CELL, w=CELL, h=CELL)


def setup(world):
    place_food(world, 15, 15)


def steer(heading):
    ndx, ndy = heading

    def action(world):
        dx, dy = world.player.attrs["heading"]
        # turning back onto the current axis is ignored
        if ndx != -dx and ndy != -dy:
            world.player.attrs["heading"] = (ndx, ndy)
    return action


def crawl(world):
    p = world.player
    body = p.attrs["body"]
    dx, dy = p.attrs["heading"]
    hx, hy = body[0][0] + dx, body[0][1] + dy

    if hx < 0 or hx >= GRID or hy < 0 or hy >= GRID or (hx, hy) in body:
        world.lose()
        return

    body.insert(0, (hx, hy))
    p.attrs["tail"] = body.pop()
    p.x = hx * CELL
    p.y = hy * CELL


def grow(world, snake, food):
    snake.attrs["body"].append(snake.attrs.pop("tail"))
    world.spawn_kind("food")


def hud(world):
    return [f"Score: {world.score}"]


RULES = GameRules(
    name="snake",
    title="Snake",
    make_player=make_snake,
    tick_interval=0.130,
    width=GRID * CELL,
    height=GRID * CELL,
    background=(15, 23, 42),
    kinds={
        "snake": KindSpec(PLAYER, color=(99, 102, 241), shape="segments"),
        "food": KindSpec(COLLECTIBLE, color=(244, 63, 94)),
    },
    # food only appears when eaten, never at random ticks
    spawns=[SpawnClass("food", random_food)],
    collisions=[
        CollisionRule("snake", "food", boxes(),
                      Outcome(remove_b=True, score=FOOD_REWARD, event="food",
                              after=grow)),
    ],
    on_press={key: steer(heading) for key, heading in HEADINGS.items()},
    setup=setup,
    update_player=crawl,
    clamp_player=False,
    hud=hud,
)
