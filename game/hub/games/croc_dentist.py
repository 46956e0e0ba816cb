"""
Croc Dentist - press the teeth one by one, one of them snaps the jaw shut
"""

from ..collision import point_in_rect
from ..entities import Entity, Player, PLAYER, COLLECTIBLE
from ..rules import GameRules, KindSpec, TerminalRule

TEETH = 10
COLUMNS = 5
TOOTH_SIZE = 60
GAP = 12
TOP = 200
TOOTH_REWARD = 10

CLEAN_COLOR = (203, 213, 225)
BITTEN_COLOR = (239, 68, 68)


def make_hand(world) -> Player:
    return Player(kind="hand", x=0, y=0)


def setup(world):
    left = (world.width - COLUMNS * TOOTH_SIZE - (COLUMNS - 1) * GAP) / 2
    for i in range(TEETH):
        row, col = divmod(i, COLUMNS)
        world.add(Entity(kind="tooth",
                         x=left + col * (TOOTH_SIZE + GAP),
                         y=TOP + row * (TOOTH_SIZE + GAP),
                         w=TOOTH_SIZE, h=TOOTH_SIZE,
                         attrs={"index": i, "clean": False}))
    world.attrs["danger"] = world.rng.randrange(TEETH)


def press_tooth(world, x, y):
    world.player.x, world.player.y = x, y
    for tooth in world.of_kind("tooth"):
        if not point_in_rect(x, y, tooth.x, tooth.y, tooth.w, tooth.h):
            continue
        if tooth.attrs["index"] == world.attrs["danger"]:
            tooth.attrs["color"] = BITTEN_COLOR
            world.emit("snap", f"SNAP! Game Over! Score: {world.score}")
            world.lose()
        elif not tooth.attrs["clean"]:
            tooth.attrs["clean"] = True
            tooth.attrs["color"] = CLEAN_COLOR
            world.award(TOOTH_REWARD)
            world.emit("safe", f"Safe! +{TOOTH_REWARD}")
        return


def hud(world):
    return [f"{world.score}"]


RULES = GameRules(
    name="croc_dentist",
    title="Croc Dentist",
    make_player=make_hand,
    tick_interval=None,
    background=(22, 101, 52),
    kinds={
        "hand": KindSpec(PLAYER, shape="none"),
        "tooth": KindSpec(COLLECTIBLE, color=(255, 255, 255)),
    },
    on_tap=press_tooth,
    terminal=TerminalRule(win_score=(TEETH - 1) * TOOTH_REWARD),
    setup=setup,
    hud=hud,
)
