"""
Clicker - tap the button, nothing else. Runs until the player quits.
"""

from ..collision import circle_rect_overlap
from ..entities import Player, PLAYER
from ..rules import GameRules, KindSpec

BUTTON_RADIUS = 75
MILESTONE = 50


def make_button(world) -> Player:
    size = BUTTON_RADIUS * 2
    return Player(kind="button", x=(world.width - size) / 2,
                  y=(world.height - size) / 2, w=size, h=size)


def tap(world, x, y):
    b = world.player
    # a tap is a zero-sized rectangle
    if not circle_rect_overlap(b.cx, b.cy, BUTTON_RADIUS, x, y, 0, 0):
        return
    world.award(1)
    if world.score % MILESTONE == 0:
        world.emit("milestone", f"Milestone: {world.score} clicks!")


def hud(world):
    return [f"{world.score}"]


RULES = GameRules(
    name="clicker",
    title="Clicker",
    make_player=make_button,
    tick_interval=None,
    background=(24, 24, 27),
    kinds={
        "button": KindSpec(PLAYER, color=(255, 255, 255), shape="circle"),
    },
    on_tap=tap,
    hud=hud,
)
