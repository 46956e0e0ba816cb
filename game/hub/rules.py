"""
Declarative rule tables
-----------------------
A game is fully described by a ``GameRules`` instance: the kinds of entity it
uses and how they move, its spawn classes, collision outcomes, input bindings
and terminal conditions. ``World`` consumes the table; no game has its own
loop.

Hooks receive the ``World`` so that rules can stay plain module-level
functions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple

from .collision import CollisionTest
from .entities import Entity, Player
from .utils import normalize

if TYPE_CHECKING:
    from .world import World

Mover = Callable[[Entity, "World"], None]
PruneRule = Callable[[Entity, "World"], bool]
Factory = Callable[["World"], Entity]
Action = Callable[["World"], None]


@dataclass
class KindSpec:
    """One kind of entity and how it behaves between collisions"""
    role: str
    move: Optional[Mover] = None
    prune: Optional[PruneRule] = None
    color: Tuple[int, int, int] = (255, 255, 255)
    shape: str = "rect"  # rect, circle, triangle, dot


@dataclass
class SpawnClass:
    """Creates entities of one kind, randomly or on a fixed period"""
    kind: str
    factory: Factory
    probability: float = 0.0  # independent draw every tick
    every: int = 0  # ticks between spawns, 0 to disable


@dataclass
class Outcome:
    """What happens when a collision test passes"""
    remove_a: bool = False
    remove_b: bool = False
    damage_b: float = 0.0  # b.hp is reduced; b is removed at zero
    score: int = 0
    gains: Dict[str, float] = field(default_factory=dict)
    player_damage: float = 0.0  # per tick of contact, against resource "hp"
    lose: bool = False
    event: str = ""
    after: Optional[Callable[["World", Entity, Entity], None]] = None


@dataclass
class CollisionRule:
    """Pairs every entity of kind ``a`` with every entity of kind ``b``"""
    a: str
    b: str
    test: CollisionTest
    outcome: Outcome


@dataclass
class TerminalRule:
    win_score: Optional[int] = None
    lose_when_depleted: Optional[str] = None  # player resource name


@dataclass
class GameRules:
    """Everything the engine needs to run one game"""
    name: str
    title: str
    make_player: Callable[["World"], Player]
    kinds: Dict[str, KindSpec]
    tick_interval: Optional[float] = 1 / 60  # None: stepped once per input
    width: int = 400
    height: int = 400
    background: Tuple[int, int, int] = (0, 8, 20)
    spawns: List[SpawnClass] = field(default_factory=list)
    collisions: List[CollisionRule] = field(default_factory=list)
    on_press: Dict[str, Action] = field(default_factory=dict)
    on_hold: Dict[str, Action] = field(default_factory=dict)
    on_tap: Optional[Callable[["World", float, float], None]] = None
    terminal: TerminalRule = field(default_factory=TerminalRule)
    setup: Optional[Action] = None
    update_player: Optional[Action] = None
    clamp_player: bool = True
    hud: Optional[Callable[["World"], List[str]]] = None

    @property
    def input_keys(self) -> List[str]:
        """Every key this game reacts to, presses first"""
        keys = list(self.on_press)
        keys += [k for k in self.on_hold if k not in keys]
        return keys

    def role_of(self, kind: str) -> str:
        return self.kinds[kind].role


# ----------------------------
# Shared movement rules
# ----------------------------

def linear(e: Entity, world: "World") -> None:
    """Constant velocity"""
    e.x += e.vx
    e.y += e.vy


def drifting(e: Entity, world: "World") -> None:
    """Constant velocity with a lifetime countdown (particles)"""
    e.x += e.vx
    e.y += e.vy
    if e.life is not None:
        e.life -= 1


def chase(e: Entity, world: "World") -> None:
    """Head straight for the player at ``e.speed``"""
    p = world.player
    nx, ny = normalize(p.x - e.x, p.y - e.y)
    e.vx = nx * e.speed
    e.vy = ny * e.speed
    e.x += e.vx
    e.y += e.vy


# ----------------------------
# Shared prune rules
# ----------------------------

def below(limit: float) -> PruneRule:
    return lambda e, world: e.y > limit


def above(limit: float) -> PruneRule:
    return lambda e, world: e.y < limit


def left_of(limit: float) -> PruneRule:
    return lambda e, world: e.x < limit


def right_of(limit: float) -> PruneRule:
    return lambda e, world: e.x > limit


def outside(margin: float) -> PruneRule:
    """Further than ``margin`` outside the playfield on any side"""
    def rule(e: Entity, world: "World") -> bool:
        return (e.x < -margin or e.x > world.width + margin
                or e.y < -margin or e.y > world.height + margin)
    return rule


def burst(world: "World", x: float, y: float, count: int, spread: float,
          life: int, kind: str = "spark") -> None:
    """Spawn ``count`` particles flying out of (x, y)"""
    for _ in range(count):
        world.add(Entity(
            kind=kind, x=x, y=y,
            vx=world.rng.uniform(-spread, spread),
            vy=world.rng.uniform(-spread, spread),
            life=life,
        ))
