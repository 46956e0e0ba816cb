"""
Space Ranger - vertical shooter

Left/Right slide the ship, Space fires. Invaders and coins fall from the top;
touching an invader ends the mission.
"""

from ..collision import boxes
from ..entities import (
    Entity, Player, PLAYER, PROJECTILE, HOSTILE, COLLECTIBLE,
)
from ..rules import (
    GameRules, KindSpec, SpawnClass, CollisionRule, Outcome,
    linear, below, above,
)

SHIP_SIZE = 40
SHIP_STEP = 20
LASER_SPEED = 7
INVADER_SIZE = 30
INVADER_REWARD = 50
COIN_SIZE = 20
COIN_SPEED = 2.5
COIN_REWARD = 100


def make_ship(world) -> Player:
    return Player(kind="ship", x=180, y=340, w=SHIP_SIZE, h=SHIP_SIZE)


def move_left(world):
    world.player.x -= SHIP_STEP


def move_right(world):
    world.player.x += SHIP_STEP


def fire(world):
    p = world.player
    world.add(Entity(kind="laser", x=p.x + SHIP_SIZE / 2 - 2, y=p.y,
                     w=4, h=10, vy=-LASER_SPEED))


def spawn_invader(world) -> Entity:
    speed = 2 + world.rng.random() * 3
    return Entity(kind="invader", x=world.rng.random() * 370, y=-30,
                  w=INVADER_SIZE, h=INVADER_SIZE, vy=speed, speed=speed)


def spawn_coin(world) -> Entity:
    return Entity(kind="coin", x=world.rng.random() * 380, y=-20,
                  w=COIN_SIZE, h=COIN_SIZE, vy=COIN_SPEED)


def hud(world):
    return [f"Score: {world.score}"]


RULES = GameRules(
    name="space_ranger",
    title="Space Ranger",
    make_player=make_ship,
    background=(0, 8, 20),
    kinds={
        "ship": KindSpec(PLAYER, color=(99, 102, 241), shape="triangle"),
        "laser": KindSpec(PROJECTILE, move=linear, prune=above(0),
                          color=(244, 63, 94)),
        "invader": KindSpec(HOSTILE, move=linear, prune=below(400),
                            color=(16, 185, 129)),
        "coin": KindSpec(COLLECTIBLE, move=linear, prune=below(400),
                         color=(250, 204, 21), shape="circle"),
    },
    spawns=[
        SpawnClass("invader", spawn_invader, probability=0.05),
        SpawnClass("coin", spawn_coin, probability=0.015),
    ],
    collisions=[
        CollisionRule("laser", "invader", boxes(),
                      Outcome(remove_a=True, remove_b=True,
                              score=INVADER_REWARD, event="kill")),
        CollisionRule("ship", "coin", boxes(),
                      Outcome(remove_b=True, score=COIN_REWARD, event="coin")),
        CollisionRule("ship", "invader", boxes(),
                      Outcome(lose=True)),
    ],
    on_press={"left": move_left, "right": move_right, "space": fire},
    hud=hud,
)
