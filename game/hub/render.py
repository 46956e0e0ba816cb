"""
Rendering
---------
``render_frame`` turns a world into a ``Frame``: a full redraw of the
playfield as a list of draw commands plus HUD text. It never mutates the
world. Backends only have to paint frames:

- ``rasterize`` paints into a numpy RGB array (``HubEnv`` rgb_array mode)
- ``game.hub.window`` paints with Arcade
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from .entities import Entity, COLLECTIBLE, HOSTILE, PROJECTILE, PARTICLE
from .world import World

Color = Tuple[int, int, int]

# Painter's order, the player is drawn after these and particles last
BACK_TO_FRONT = (COLLECTIBLE, HOSTILE, PROJECTILE)

DOT_SIZE = 2


@dataclass
class DrawCommand:
    shape: str  # rect, circle, triangle
    x: float
    y: float
    w: float
    h: float
    color: Color


@dataclass
class Frame:
    width: int
    height: int
    background: Color
    commands: List[DrawCommand] = field(default_factory=list)
    hud: List[str] = field(default_factory=list)
    score: int = 0
    state: str = ""


def _commands_for(e: Entity, world: World) -> List[DrawCommand]:
    spec = world.rules.kinds[e.kind]
    color = e.attrs.get("color", spec.color)
    if spec.shape == "none":
        return []
    if spec.shape == "dot":
        return [DrawCommand("rect", e.x, e.y, DOT_SIZE, DOT_SIZE, color)]
    if spec.shape == "segments":
        cell_w, cell_h = e.w, e.h
        return [
            DrawCommand("rect", cx * cell_w + 1, cy * cell_h + 1,
                        cell_w - 2, cell_h - 2, color)
            for cx, cy in e.attrs.get("body", [])
        ]
    return [DrawCommand(spec.shape, e.x, e.y, e.w, e.h, color)]


def render_frame(world: World) -> Frame:
    """Full redraw of the world, back to front"""
    frame = Frame(
        width=world.width,
        height=world.height,
        background=world.rules.background,
        score=world.score,
        state=world.state.name,
    )
    for role in BACK_TO_FRONT:
        for e in world.entities[role]:
            frame.commands.extend(_commands_for(e, world))
    frame.commands.extend(_commands_for(world.player, world))
    for e in world.entities[PARTICLE]:
        frame.commands.extend(_commands_for(e, world))

    if world.rules.hud:
        frame.hud = world.rules.hud(world)
    else:
        frame.hud = [f"Score: {world.score}"]
    return frame


# ----------------------------
# numpy backend
# ----------------------------

def _span(lo: float, size: float, limit: int) -> Tuple[int, int]:
    a = int(max(0, np.floor(lo)))
    b = int(min(limit, np.ceil(lo + size)))
    return a, b


def rasterize(frame: Frame) -> np.ndarray:
    """Paint a frame into an (height, width, 3) uint8 array. HUD text is skipped."""
    img = np.empty((frame.height, frame.width, 3), dtype=np.uint8)
    img[:, :] = frame.background

    for cmd in frame.commands:
        x0, x1 = _span(cmd.x, cmd.w, frame.width)
        y0, y1 = _span(cmd.y, cmd.h, frame.height)
        if x0 >= x1 or y0 >= y1:
            continue

        if cmd.shape == "rect":
            img[y0:y1, x0:x1] = cmd.color
            continue

        # pixel centres of the clipped bounding box
        ys, xs = np.mgrid[y0:y1, x0:x1]
        px = xs + 0.5
        py = ys + 0.5
        if cmd.shape == "circle":
            rx, ry = cmd.w / 2, cmd.h / 2
            cx, cy = cmd.x + rx, cmd.y + ry
            mask = ((px - cx) / rx) ** 2 + ((py - cy) / ry) ** 2 <= 1.0
        elif cmd.shape == "triangle":
            # apex at the top centre, base along the bottom edge
            t = (py - cmd.y) / cmd.h
            half = t * cmd.w / 2
            mid = cmd.x + cmd.w / 2
            mask = (t >= 0) & (t <= 1) & (np.abs(px - mid) <= half)
        else:
            raise ValueError(f"Unknown shape: {cmd.shape}")
        img[y0:y1, x0:x1][mask] = cmd.color

    return img
