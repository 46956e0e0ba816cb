"""
Tick scheduling and the host side of the engine.

A ``Session`` drives one ``World``: it registers a tick callback with a
driver, forwards input, renders a frame after every tick and reports the
result when the world reaches a terminal state. The ``Hub`` owns at most one
active session and tears it down before launching the next one.

Drivers only need ``schedule(callback, interval)`` and
``unschedule(callback)``; callbacks receive the elapsed time. ``ManualDriver``
ticks when pumped (tests, headless runs), ``window.ArcadeDriver`` wraps
``arcade.schedule``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .entities import GameEvent
from .games import get_rules
from .render import Frame, render_frame
from .rules import GameRules
from .world import World


@dataclass
class GameResult:
    game: str
    outcome: str  # WON, LOST or STOPPED
    score: int
    ticks: int


class ManualDriver:
    """Runs scheduled callbacks only when ``pump`` is called"""

    def __init__(self):
        self.jobs: Dict[Callable, float] = {}

    def schedule(self, callback: Callable[[float], None], interval: float):
        self.jobs[callback] = interval

    def unschedule(self, callback: Callable[[float], None]):
        self.jobs.pop(callback, None)

    def pump(self, ticks: int = 1):
        for _ in range(ticks):
            for callback, interval in list(self.jobs.items()):
                callback(interval)


class Session:
    """One running game instance"""

    def __init__(
        self,
        rules: GameRules,
        driver=None,
        seed: Optional[int] = None,
        on_frame: Optional[Callable[[Frame], None]] = None,
        on_event: Optional[Callable[[GameEvent], None]] = None,
        on_finish: Optional[Callable[[GameResult], None]] = None,
    ):
        self.rules = rules
        self.driver = driver if driver is not None else ManualDriver()
        self.world = World(rules, seed=seed)
        self.on_frame = on_frame
        self.on_event = on_event
        self.on_finish = on_finish

        self.frame: Optional[Frame] = None
        self.result: Optional[GameResult] = None
        self._scheduled = False

    def start(self) -> "Session":
        self.world.start()
        self.frame = render_frame(self.world)
        if self.on_frame:
            self.on_frame(self.frame)
        if self.rules.tick_interval:
            self.driver.schedule(self._on_tick, self.rules.tick_interval)
            self._scheduled = True
        return self

    @property
    def running(self) -> bool:
        return self.result is None and self.world.running

    # ----------------------------
    # Input
    # ----------------------------

    def press(self, key: str):
        if not self.running or not isinstance(key, str):
            return
        self.world.input.press(key)
        if self.rules.tick_interval is None and key in self.rules.input_keys:
            self.advance()

    def release(self, key: str):
        if not self.running or not isinstance(key, str):
            return
        self.world.input.release(key)

    def tap(self, x: float, y: float):
        if not self.running:
            return
        try:
            x, y = float(x), float(y)
        except (TypeError, ValueError):
            return
        self.world.input.tap(x, y)
        if self.rules.tick_interval is None:
            self.advance()

    # ----------------------------
    # Ticking
    # ----------------------------

    def _on_tick(self, delta_time: float):
        if self.running:
            self.advance()

    def advance(self) -> Frame:
        """Run one tick and render it"""
        if not self.running:
            raise RuntimeError(f"{self.rules.name} session is not running")

        events = self.world.step()
        self.frame = render_frame(self.world)
        if self.on_frame:
            self.on_frame(self.frame)
        if self.on_event:
            for event in events:
                self.on_event(event)

        if self.world.finished:
            self._release()
            self.result = self._result(self.world.state.name)
            if self.on_finish:
                self.on_finish(self.result)
        return self.frame

    def stop(self) -> GameResult:
        """Release the timer and input; safe to call more than once"""
        self._release()
        if self.result is None:
            self.result = self._result("STOPPED")
        return self.result

    def _release(self):
        if self._scheduled:
            self.driver.unschedule(self._on_tick)
            self._scheduled = False
        self.world.input.clear()

    def _result(self, outcome: str) -> GameResult:
        return GameResult(game=self.rules.name, outcome=outcome,
                          score=self.world.score, ticks=self.world.tick)


class Hub:
    """
    Host of the arcade: launches games, guarantees a single active session
    and posts finished scores to the leaderboard.
    """

    def __init__(
        self,
        player_name: str = "guest",
        leaderboard=None,
        driver_factory: Callable[[], object] = ManualDriver,
        on_frame: Optional[Callable[[Frame], None]] = None,
        on_event: Optional[Callable[[GameEvent], None]] = None,
        on_finish: Optional[Callable[[GameResult], None]] = None,
        verbose: int = 0,
    ):
        self.player_name = player_name
        self.leaderboard = leaderboard
        self.driver_factory = driver_factory
        self.on_frame = on_frame
        self.on_event = on_event
        self.on_finish = on_finish
        self.verbose = verbose

        self.active: Optional[Session] = None
        self.last_result: Optional[GameResult] = None

    def launch(self, game: str, driver=None, seed: Optional[int] = None) -> Session:
        rules = get_rules(game)
        self.stop()

        session = Session(
            rules,
            driver=driver if driver is not None else self.driver_factory(),
            seed=seed,
            on_frame=self.on_frame,
            on_event=self.on_event,
            on_finish=self._finished,
        )
        self.active = session
        if self.verbose > 0:
            print(f"[Hub] Launching {rules.title}")
        return session.start()

    def stop(self) -> Optional[GameResult]:
        if self.active is None:
            return None
        session, self.active = self.active, None
        result = session.stop()
        self.last_result = result
        return result

    def _finished(self, result: GameResult):
        self.active = None
        self.last_result = result
        if self.verbose > 0:
            print(f"[Hub] {result.game} {result.outcome.lower()} with score {result.score}")
        self.submit_score(result)
        if self.on_finish:
            self.on_finish(result)

    def submit_score(self, result: GameResult):
        """Best-effort: a failed save never reaches the player"""
        if self.leaderboard is None:
            return
        try:
            self.leaderboard.submit(self.player_name, result.game, result.score)
        except (OSError, ValueError) as e:
            if self.verbose > 0:
                print(f"[Hub] Could not save score: {e}")
