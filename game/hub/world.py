"""
World - the mutable state of one running game and its tick pipeline
"""

from __future__ import annotations

import random
from enum import Enum, auto
from typing import Dict, List, Optional, Set, Tuple

from .entities import (
    Entity, Player, GameEvent,
    PLAYER, PROJECTILE, HOSTILE, COLLECTIBLE, PARTICLE,
)
from .rules import GameRules, CollisionRule, Outcome, SpawnClass
from .utils import clamp

# Order in which non-player roles move and get drawn
ENTITY_ROLES = (PROJECTILE, HOSTILE, COLLECTIBLE, PARTICLE)


class GameState(Enum):
    NOT_STARTED = auto()
    RUNNING = auto()
    WON = auto()
    LOST = auto()


class InputState:
    """Key flags and queued events for the lifetime of one session"""

    def __init__(self):
        self.held: Set[str] = set()
        self._presses: List[str] = []
        self._taps: List[Tuple[float, float]] = []

    def press(self, key: str):
        self.held.add(key)
        self._presses.append(key)

    def release(self, key: str):
        self.held.discard(key)

    def tap(self, x: float, y: float):
        self._taps.append((x, y))

    def drain_presses(self) -> List[str]:
        presses, self._presses = self._presses, []
        return presses

    def drain_taps(self) -> List[Tuple[float, float]]:
        taps, self._taps = self._taps, []
        return taps

    def clear(self):
        self.held.clear()
        self._presses.clear()
        self._taps.clear()


class World:
    """
    Owns every entity of one game instance.

    ``step()`` runs one tick: input, movement, spawning, collisions, pruning
    and the terminal check. Rendering is left to the caller
    (``render.render_frame``) so the simulation never touches a surface.
    """

    def __init__(self, rules: GameRules, seed: Optional[int] = None):
        self.rules = rules
        self.width = rules.width
        self.height = rules.height
        self.rng = random.Random(seed)

        self.tick = 0
        self.score = 0
        self.state = GameState.NOT_STARTED
        self.input = InputState()
        self.attrs: Dict[str, object] = {}

        self.entities: Dict[str, List[Entity]] = {role: [] for role in ENTITY_ROLES}
        self.events: List[GameEvent] = []
        self.player: Player = rules.make_player(self)

    # ----------------------------
    # Lifecycle
    # ----------------------------

    def start(self):
        if self.state is not GameState.NOT_STARTED:
            raise RuntimeError(f"{self.rules.name} already started")
        if self.rules.setup:
            self.rules.setup(self)
        self.state = GameState.RUNNING

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    @property
    def finished(self) -> bool:
        return self.state in (GameState.WON, GameState.LOST)

    def win(self, message: str = ""):
        if self.running:
            self.state = GameState.WON
            self.emit("won", message)

    def lose(self, message: str = ""):
        if self.running:
            self.state = GameState.LOST
            self.emit("lost", message)

    # ----------------------------
    # Entity bookkeeping
    # ----------------------------

    def add(self, entity: Entity) -> Entity:
        role = self.rules.role_of(entity.kind)
        if role == PLAYER:
            raise ValueError("a world has exactly one player")
        self.entities[role].append(entity)
        return entity

    def spawn(self, spawn_class: SpawnClass) -> Entity:
        return self.add(spawn_class.factory(self))

    def spawn_kind(self, kind: str) -> Entity:
        """Run the first spawn class declared for ``kind``"""
        for sc in self.rules.spawns:
            if sc.kind == kind:
                return self.spawn(sc)
        raise KeyError(kind)

    def of_kind(self, kind: str) -> List[Entity]:
        role = self.rules.role_of(kind)
        if role == PLAYER:
            return [self.player]
        return [e for e in self.entities[role] if e.kind == kind]

    def all_entities(self) -> List[Entity]:
        out: List[Entity] = []
        for role in ENTITY_ROLES:
            out.extend(self.entities[role])
        return out

    def emit(self, name: str, message: str = ""):
        self.events.append(GameEvent(name=name, tick=self.tick, message=message))

    def award(self, points: int):
        # score never decreases while running
        if points > 0:
            self.score += points

    # ----------------------------
    # Tick
    # ----------------------------

    def step(self) -> List[GameEvent]:
        if not self.running:
            raise RuntimeError(f"{self.rules.name} is not running ({self.state.name})")

        self.events = []
        self.tick += 1

        self._apply_input()
        if self.running:
            self._advance()
        if self.running:
            self._spawn()
            self._collide()
        self._prune()
        self._check_terminal()
        return self.events

    def _apply_input(self):
        rules = self.rules
        presses = self.input.drain_presses()
        for key in presses:
            action = rules.on_press.get(key)
            if action:
                action(self)

        # a key pressed and released between two ticks still acts once
        active = self.input.held.union(presses)
        for key, action in rules.on_hold.items():
            if key in active:
                action(self)

        for x, y in self.input.drain_taps():
            if not self.running:
                break
            if rules.on_tap:
                rules.on_tap(self, x, y)

        self._clamp_player()

    def _advance(self):
        if self.rules.update_player:
            self.rules.update_player(self)
            if not self.running:
                return

        kinds = self.rules.kinds
        for role in ENTITY_ROLES:
            for e in self.entities[role]:
                move = kinds[e.kind].move
                if move:
                    move(e, self)

        self._clamp_player()

    def _spawn(self):
        for sc in self.rules.spawns:
            if sc.every:
                if self.tick % sc.every == 0:
                    self.spawn(sc)
            elif sc.probability and self.rng.random() < sc.probability:
                self.spawn(sc)

    def _collide(self):
        for rule in self.rules.collisions:
            if not self.running:
                return
            self._resolve(rule)

    def _resolve(self, rule: CollisionRule):
        firsts = self.of_kind(rule.a)
        seconds = self.of_kind(rule.b)
        for a in firsts:
            for b in seconds:
                if not (a.alive and b.alive):
                    continue
                if rule.test(a, b):
                    self._apply(rule.outcome, a, b)
                    if not self.running:
                        return

    def _apply(self, outcome: Outcome, a: Entity, b: Entity):
        if outcome.remove_a:
            a.alive = False

        destroyed = False
        if outcome.damage_b:
            b.hp -= outcome.damage_b
            if b.hp <= 0:
                b.alive = False
                destroyed = True
        elif outcome.remove_b:
            b.alive = False
            destroyed = True

        if destroyed:
            self.award(b.reward if b.reward > 0 else outcome.score)

        for name, amount in outcome.gains.items():
            self.player.gain(name, amount)

        if outcome.player_damage:
            hp = self.player.resources.get("hp", 0.0)
            self.player.resources["hp"] = hp - outcome.player_damage

        if outcome.event:
            self.emit(outcome.event)
        if outcome.after:
            outcome.after(self, a, b)
        if outcome.lose:
            self.lose()

    def _prune(self):
        kinds = self.rules.kinds
        for role in ENTITY_ROLES:
            kept = []
            for e in self.entities[role]:
                if not e.alive:
                    continue
                if e.life is not None and e.life <= 0:
                    continue
                prune = kinds[e.kind].prune
                if prune and prune(e, self):
                    continue
                kept.append(e)
            self.entities[role] = kept

    def _check_terminal(self):
        if not self.running:
            return
        terminal = self.rules.terminal
        if terminal.lose_when_depleted is not None:
            if self.player.resources.get(terminal.lose_when_depleted, 0.0) <= 0:
                self.lose()
                return
        if terminal.win_score is not None and self.score >= terminal.win_score:
            self.win()

    def _clamp_player(self):
        if not self.rules.clamp_player:
            return
        p = self.player
        p.x = clamp(p.x, 0, self.width - p.w)
        p.y = clamp(p.y, 0, self.height - p.h)
