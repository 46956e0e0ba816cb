"""
Game entity dataclasses
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


# Entity roles. Every kind declared by a rule table belongs to exactly one.
PLAYER = "player"
PROJECTILE = "projectile"
HOSTILE = "hostile"
COLLECTIBLE = "collectible"
PARTICLE = "particle"


@dataclass
class Entity:
    """Any simulated object; position is the top-left corner"""
    kind: str
    x: float
    y: float
    w: float = 0.0
    h: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    speed: float = 0.0
    hp: float = 1.0
    life: Optional[int] = None  # ticks left; None for infinite
    reward: int = 0  # overrides the collision rule reward when > 0
    tier: str = ""
    alive: bool = True
    attrs: Dict[str, Any] = field(default_factory=dict)

    @property
    def cx(self) -> float:
        return self.x + self.w / 2

    @property
    def cy(self) -> float:
        return self.y + self.h / 2


@dataclass
class Player(Entity):
    """The single input-driven entity of a world"""
    resources: Dict[str, float] = field(default_factory=dict)
    maxima: Dict[str, float] = field(default_factory=dict)
    facing: str = "up"
    cooldown: int = 0

    def gain(self, name: str, amount: float) -> float:
        """Add to a resource, capped at its declared maximum"""
        value = self.resources.get(name, 0.0) + amount
        cap = self.maxima.get(name)
        if cap is not None and value > cap:
            value = cap
        self.resources[name] = value
        return value

    def spend(self, name: str, amount: float) -> bool:
        """Spend a resource if enough of it is left"""
        if self.resources.get(name, 0.0) < amount:
            return False
        self.resources[name] -= amount
        return True


@dataclass
class GameEvent:
    """Something the host may want to show (toast, sound)"""
    name: str
    tick: int
    message: str = ""
