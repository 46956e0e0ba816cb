"""
Rise of Goku - side-scrolling ki blaster

Up/Down move, hold C to charge ki, Space fires a blast for 15 ki. Energy orbs
refill ki; any enemy contact is a defeat.
"""

from ..collision import boxes, point_inside
from ..entities import (
    Entity, Player, PLAYER, PROJECTILE, HOSTILE, COLLECTIBLE, PARTICLE,
)
from ..rules import (
    GameRules, KindSpec, SpawnClass, CollisionRule, Outcome,
    linear, drifting, left_of, right_of, burst,
)

KI_START = 100
KI_MAX = 240
KI_CHARGE = 1.5
BLAST_COST = 15
BLAST_SPEED = 10
STEP = 25
ENEMY_REWARD = 100
ORB_REWARD = 50
ORB_KI = 40


def make_goku(world) -> Player:
    return Player(kind="goku", x=50, y=180, w=40, h=50,
                  resources={"ki": KI_START}, maxima={"ki": KI_MAX},
                  facing="right")


def move_up(world):
    world.player.y -= STEP


def move_down(world):
    world.player.y += STEP


def charge(world):
    p = world.player
    if p.resources["ki"] >= KI_MAX:
        return
    p.gain("ki", KI_CHARGE)
    rng = world.rng
    world.add(Entity(kind="aura", x=p.x + 20 + rng.uniform(-30, 30),
                     y=p.y + 25 + rng.uniform(-30, 30),
                     vx=rng.uniform(-2, 2), vy=rng.uniform(-2, 2), life=15))


def fire(world):
    p = world.player
    if p.spend("ki", BLAST_COST):
        world.add(Entity(kind="blast", x=p.x + 40, y=p.y + 25, w=6, h=6,
                         vx=BLAST_SPEED))
    else:
        world.emit("need_ki", "Need more Ki! Collect Orbs or Charge (C)")


def spawn_enemy(world) -> Entity:
    speed = 3 + world.rng.random() * 2
    return Entity(kind="enemy", x=430, y=world.rng.random() * 350,
                  w=30, h=30, vx=-speed, speed=speed)


def spawn_orb(world) -> Entity:
    return Entity(kind="orb", x=430, y=world.rng.random() * 350,
                  w=15, h=15, vx=-2)


def enemy_down(world, blast, enemy):
    burst(world, enemy.x, enemy.y, 8, 2, 20, kind="spark")


def orb_taken(world, goku, orb):
    burst(world, goku.x + 20, goku.y + 25, 12, 3, 30, kind="glow")


def hud(world):
    ki = world.player.resources["ki"]
    return [f"Power Level: {world.score}", f"Ki: {ki:.0f}/{KI_MAX}"]


RULES = GameRules(
    name="goku",
    title="Rise of Goku",
    make_player=make_goku,
    background=(5, 5, 16),
    kinds={
        "goku": KindSpec(PLAYER, color=(249, 115, 22)),
        "blast": KindSpec(PROJECTILE, move=linear, prune=right_of(400),
                          color=(255, 255, 255), shape="circle"),
        "enemy": KindSpec(HOSTILE, move=linear, prune=left_of(-30),
                          color=(239, 68, 68)),
        "orb": KindSpec(COLLECTIBLE, move=linear, prune=left_of(-20),
                        color=(251, 191, 36), shape="circle"),
        "aura": KindSpec(PARTICLE, move=drifting, color=(56, 189, 248),
                         shape="dot"),
        "spark": KindSpec(PARTICLE, move=drifting, color=(239, 68, 68),
                          shape="dot"),
        "glow": KindSpec(PARTICLE, move=drifting, color=(251, 191, 36),
                         shape="dot"),
    },
    spawns=[
        SpawnClass("enemy", spawn_enemy, probability=0.04),
        SpawnClass("orb", spawn_orb, probability=0.01),
    ],
    collisions=[
        CollisionRule("blast", "enemy", point_inside(),
                      Outcome(remove_a=True, remove_b=True,
                              score=ENEMY_REWARD, event="kill",
                              after=enemy_down)),
        CollisionRule("goku", "orb", boxes(a_size=(30, 40)),
                      Outcome(remove_b=True, score=ORB_REWARD,
                              gains={"ki": ORB_KI}, event="orb",
                              after=orb_taken)),
        CollisionRule("goku", "enemy", boxes(a_size=(25, 35), b_size=(25, 25)),
                      Outcome(lose=True)),
    ],
    on_press={"up": move_up, "down": move_down, "space": fire},
    on_hold={"c": charge},
    hud=hud,
)
