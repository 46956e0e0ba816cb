"""
Arcade front end: game menu, input mapping and frame drawing.

The window owns a ``Hub``. Number keys launch a game from the menu, ESC quits
back to it; when a game ends its result is shown until any key is pressed.
Frames use a top-left origin, Arcade draws from the bottom-left, so every y
is flipped here.
"""

from __future__ import annotations

from typing import List, Optional

import arcade

from .config import WINDOW_CONFIG
from .entities import GameEvent
from .games import GAMES
from .render import Frame
from .session import GameResult, Hub

KEY_NAMES = {
    arcade.key.LEFT: "left",
    arcade.key.RIGHT: "right",
    arcade.key.UP: "up",
    arcade.key.DOWN: "down",
    arcade.key.SPACE: "space",
    arcade.key.C: "c",
}

MENU_KEYS = [
    arcade.key.KEY_1, arcade.key.KEY_2, arcade.key.KEY_3,
    arcade.key.KEY_4, arcade.key.KEY_5, arcade.key.KEY_6,
]

TOAST_FRAMES = 90
FIELD = 400


class ArcadeDriver:
    """Tick driver backed by Arcade's clock"""

    def schedule(self, callback, interval: float):
        arcade.schedule(callback, interval)

    def unschedule(self, callback):
        arcade.unschedule(callback)


class HubWindow(arcade.Window):
    """Arcade window hosting the hub"""

    def __init__(self, hub: Optional[Hub] = None, scale: int = WINDOW_CONFIG["scale"],
                 title: str = WINDOW_CONFIG["title"]):
        super().__init__(FIELD * scale, FIELD * scale, title)
        self.scale = scale
        self.hub = hub if hub is not None else Hub()
        self.hub.driver_factory = ArcadeDriver
        self.hub.on_frame = self._on_frame
        self.hub.on_event = self._on_event
        self.hub.on_finish = self._on_finish

        self.games = list(GAMES)
        self.frame: Optional[Frame] = None
        self.result: Optional[GameResult] = None
        self.toast = ""
        self._toast_left = 0

        # Colors
        self.TEXT_C = (220, 220, 220)
        self.MENU_BG = (18, 18, 22)
        self.TOAST_C = (250, 204, 21)

    def launch(self, game: str, seed: Optional[int] = None):
        self.result = None
        self.frame = None
        self.hub.launch(game, seed=seed)

    # ----------------------------
    # Hub callbacks
    # ----------------------------

    def _on_frame(self, frame: Frame):
        self.frame = frame
        if self._toast_left > 0:
            self._toast_left -= 1

    def _on_event(self, event: GameEvent):
        if event.message:
            self.toast = event.message
            self._toast_left = TOAST_FRAMES

    def _on_finish(self, result: GameResult):
        self.result = result

    # ----------------------------
    # Input
    # ----------------------------

    def on_key_press(self, symbol: int, modifiers: int):
        session = self.hub.active
        if session is None:
            if self.result is not None:
                self.result = None
                self.frame = None
            elif symbol in MENU_KEYS[:len(self.games)]:
                self.launch(self.games[MENU_KEYS.index(symbol)])
            elif symbol == arcade.key.ESCAPE:
                self.close()
            return

        if symbol == arcade.key.ESCAPE:
            self.hub.stop()
            self.frame = None
            return
        name = KEY_NAMES.get(symbol)
        if name:
            session.press(name)

    def on_key_release(self, symbol: int, modifiers: int):
        session = self.hub.active
        name = KEY_NAMES.get(symbol)
        if session is not None and name:
            session.release(name)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        session = self.hub.active
        if session is not None:
            session.tap(x / self.scale, FIELD - y / self.scale)

    # ----------------------------
    # Drawing
    # ----------------------------

    def on_draw(self):
        self.clear()
        if self.frame is None:
            self._draw_menu()
            return

        self._draw_frame(self.frame)
        if self.result is not None:
            self._draw_lines([
                f"{self.result.outcome}",
                f"Score: {self.result.score}",
                "Press any key",
            ], top=FIELD / 2)
        elif self._toast_left > 0:
            self._draw_lines([self.toast], top=FIELD - 30, color=self.TOAST_C)

    def _draw_menu(self):
        arcade.draw_lrbt_rectangle_filled(0, self.width, 0, self.height, self.MENU_BG)
        lines = ["ARCADE HUB", ""]
        lines += [f"{i + 1}  {GAMES[name].title}" for i, name in enumerate(self.games)]
        lines += ["", "ESC to quit"]
        self._draw_lines(lines, top=60)

    def _draw_frame(self, frame: Frame):
        s = self.scale
        arcade.draw_lrbt_rectangle_filled(0, self.width, 0, self.height, frame.background)

        for cmd in frame.commands:
            left = cmd.x * s
            right = (cmd.x + cmd.w) * s
            top = (FIELD - cmd.y) * s
            bottom = (FIELD - cmd.y - cmd.h) * s
            if cmd.shape == "rect":
                arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, cmd.color)
            elif cmd.shape == "circle":
                arcade.draw_ellipse_filled((left + right) / 2, (top + bottom) / 2,
                                           right - left, top - bottom, cmd.color)
            elif cmd.shape == "triangle":
                arcade.draw_triangle_filled((left + right) / 2, top,
                                            left, bottom, right, bottom, cmd.color)

        for i, line in enumerate(frame.hud):
            arcade.draw_text(line, 20 * s, self.height - (30 + 20 * i) * s,
                             self.TEXT_C, 10 * s)

    def _draw_lines(self, lines: List[str], top: float, color=None):
        s = self.scale
        for i, line in enumerate(lines):
            arcade.draw_text(line, self.width / 2, self.height - (top + 24 * i) * s,
                             color or self.TEXT_C, 10 * s, anchor_x="center")


def play(game: Optional[str] = None, hub: Optional[Hub] = None, seed: Optional[int] = None):
    """Open the window, optionally straight into a game"""
    window = HubWindow(hub)
    if game is not None:
        window.launch(game, seed=seed)
    arcade.run()
