"""
Mini Free Fire - top-down survival shooter

Arrows move (held), Space shoots in the facing direction. Enemies of three
tiers home in on the player and drain health on contact; killed enemies may
drop ammo crates or medkits.
"""

from ..collision import point_inside, within
from ..entities import (
    Entity, Player, PLAYER, PROJECTILE, HOSTILE, COLLECTIBLE, PARTICLE,
)
from ..rules import (
    GameRules, KindSpec, SpawnClass, CollisionRule, Outcome, TerminalRule,
    linear, drifting, chase, outside, burst,
)

PLAYER_SIZE = 25
SPEED = 4
BULLET_SPEED = 8
HP_MAX = 100
AMMO_START = 40
MUZZLE_FRAMES = 4
SPAWN_EVERY = 80
CONTACT_DAMAGE = 0.8
DROP_CHANCE = 0.45

FACING = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}

# tier: (hp, speed, size, reward)
TIERS = {
    "grunt": (1, 1.2, 25, 100),
    "veteran": (2, 1.8, 25, 100),
    "boss": (5, 0.8, 35, 500),
}

TIER_COLORS = {
    "grunt": (185, 28, 28),
    "veteran": (249, 115, 22),
    "boss": (124, 58, 237),
}


def make_survivor(world) -> Player:
    return Player(kind="survivor", x=200, y=300, w=PLAYER_SIZE, h=PLAYER_SIZE,
                  resources={"hp": HP_MAX, "ammo": AMMO_START},
                  maxima={"hp": HP_MAX})


def walk(direction):
    dx, dy = FACING[direction]

    def action(world):
        p = world.player
        p.x += dx * SPEED
        p.y += dy * SPEED
        p.facing = direction
    return action


def shoot(world):
    p = world.player
    if not p.spend("ammo", 1):
        world.emit("out_of_ammo", "Out of AMMO! Kill enemies for crates.")
        return
    dx, dy = FACING[p.facing]
    world.add(Entity(kind="bullet", x=p.x + 12, y=p.y + 12, w=4, h=4,
                     vx=dx * BULLET_SPEED, vy=dy * BULLET_SPEED))
    p.cooldown = MUZZLE_FRAMES


def muzzle_fade(world):
    p = world.player
    if p.cooldown > 0:
        p.cooldown -= 1


def spawn_enemy(world) -> Entity:
    rank = world.rng.random()
    if rank > 0.95:
        tier = "boss"
    elif rank > 0.8:
        tier = "veteran"
    else:
        tier = "grunt"
    hp, speed, size, reward = TIERS[tier]
    return Entity(kind="enemy", x=world.rng.random() * 370, y=-30,
                  w=size, h=size, speed=speed, hp=hp, reward=reward, tier=tier,
                  attrs={"color": TIER_COLORS[tier]})


def enemy_hit(world, bullet, enemy):
    burst(world, enemy.x + 12, enemy.y + 12, 5, 2, 15, kind="blood")
    if enemy.alive:
        return
    world.emit("kill", enemy.tier)
    if world.rng.random() < DROP_CHANCE:
        kind = "ammo_crate" if world.rng.random() > 0.4 else "medkit"
        world.add(Entity(kind=kind, x=enemy.x, y=enemy.y, w=18, h=18))


def hud(world):
    p = world.player
    return [f"SCORE: {world.score}", f"AMMO: {p.resources['ammo']:.0f}",
            f"HP: {max(p.resources['hp'], 0):.0f}"]


# the survivor's centre is 12px into the sprite
PICKUP = within(25, a_offset=(12, 12))

RULES = GameRules(
    name="free_fire",
    title="Mini Free Fire",
    make_player=make_survivor,
    background=(15, 23, 42),
    kinds={
        "survivor": KindSpec(PLAYER, color=(59, 130, 246)),
        "bullet": KindSpec(PROJECTILE, move=linear, prune=outside(10),
                           color=(251, 191, 36)),
        "enemy": KindSpec(HOSTILE, move=chase, color=(185, 28, 28)),
        "ammo_crate": KindSpec(COLLECTIBLE, color=(251, 191, 36)),
        "medkit": KindSpec(COLLECTIBLE, color=(239, 68, 68)),
        "blood": KindSpec(PARTICLE, move=drifting, color=(239, 68, 68),
                          shape="dot"),
    },
    spawns=[SpawnClass("enemy", spawn_enemy, every=SPAWN_EVERY)],
    collisions=[
        CollisionRule("survivor", "ammo_crate", PICKUP,
                      Outcome(remove_b=True, gains={"ammo": 40}, event="ammo")),
        CollisionRule("survivor", "medkit", PICKUP,
                      Outcome(remove_b=True, gains={"hp": 50}, event="medkit")),
        CollisionRule("bullet", "enemy", point_inside(),
                      Outcome(remove_a=True, damage_b=1, after=enemy_hit)),
        CollisionRule("survivor", "enemy", within(20),
                      Outcome(player_damage=CONTACT_DAMAGE)),
    ],
    on_hold={direction: walk(direction) for direction in FACING},
    on_press={"space": shoot},
    update_player=muzzle_fade,
    terminal=TerminalRule(lose_when_depleted="hp"),
    hud=hud,
)
