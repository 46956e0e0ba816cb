"""
HubEnv - Gymnasium wrapper around any ticked hub game
-----------------------------------------------------
- One env step is one engine tick
- Discrete actions: 0 does nothing, action i uses the i-th input key of the
  game (pressed for press keys, held for one tick for hold keys)
- Vector observation: player position + resources + K nearest hostiles +
  M nearest collectibles, all relative and scaled into [-1, 1]
- Reward: score gained this tick, minus a penalty when the game is lost

Useful for scripted play, replays and batch simulation of the rule tables.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .entities import Entity, HOSTILE, COLLECTIBLE
from .games import get_rules
from .render import render_frame, rasterize
from .utils import clamp
from .world import World, GameState


class HubEnv(gym.Env):
    """Gymnasium environment for one hub game"""

    metadata = {"render_modes": ["rgb_array"], "render_fps": 60}

    def __init__(
        self,
        game: str = "space_ranger",
        render_mode: Optional[str] = None,
        max_steps: int = 3600,
        k_hostiles: int = 5,
        m_collectibles: int = 3,
        death_penalty: float = 100.0,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode: {render_mode}"
        self.render_mode = render_mode

        self.rules = get_rules(game)
        if self.rules.tick_interval is None:
            raise ValueError(f"{game} is input-driven and has no tick loop")

        self.max_steps = max_steps
        self.k_hostiles = k_hostiles
        self.m_collectibles = m_collectibles
        self.death_penalty = death_penalty

        self.keys: List[str] = self.rules.input_keys
        self.action_space = spaces.Discrete(len(self.keys) + 1)

        # a throwaway world tells us which resources the player carries
        self.world = World(self.rules)
        self._resources = sorted(self.world.player.resources)
        self._resource_scale = {
            name: self.world.player.maxima.get(name) or max(1.0, value)
            for name, value in self.world.player.resources.items()
        }

        # player pos(2) + resources + hostile rel pos(2 each) + collectible rel pos(2 each)
        obs_dim = 2 + len(self._resources) + self.k_hostiles * 2 + self.m_collectibles * 2
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._step_count = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        world_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.world = World(self.rules, seed=world_seed)
        self.world.start()
        self._step_count = 0

        return self._get_obs(), self._get_info()

    def step(self, action):
        action = int(action)
        key = self.keys[action - 1] if action > 0 else None
        if key is not None:
            self.world.input.press(key)

        score_before = self.world.score
        self.world.step()
        if key is not None:
            # hold keys only last for the tick they were chosen on
            self.world.input.release(key)

        reward = float(self.world.score - score_before)
        if self.world.state is GameState.LOST:
            reward -= self.death_penalty

        terminated = self.world.finished
        self._step_count += 1
        truncated = not terminated and self._step_count >= self.max_steps

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self):
        if self.render_mode == "rgb_array":
            return rasterize(render_frame(self.world))
        return None

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _nearest(self, entities: List[Entity], count: int) -> List[float]:
        p = self.world.player
        ordered = sorted(
            entities,
            key=lambda e: (e.x - p.x) ** 2 + (e.y - p.y) ** 2
        )
        parts: List[float] = []
        for i in range(count):
            if i < len(ordered):
                e = ordered[i]
                dx = (e.x - p.x) / self.world.width
                dy = (e.y - p.y) / self.world.height
                parts += [clamp(dx, -1, 1), clamp(dy, -1, 1)]
            else:
                parts += [0.0, 0.0]
        return parts

    def _get_obs(self) -> np.ndarray:
        world = self.world
        p = world.player

        # map to [-1, 1]
        obs_parts = [
            clamp(p.x / world.width * 2 - 1, -1, 1),
            clamp(p.y / world.height * 2 - 1, -1, 1),
        ]
        for name in self._resources:
            value = p.resources.get(name, 0.0) / self._resource_scale[name]
            obs_parts.append(clamp(value * 2 - 1, -1, 1))

        obs_parts += self._nearest(world.entities[HOSTILE], self.k_hostiles)
        obs_parts += self._nearest(world.entities[COLLECTIBLE], self.m_collectibles)

        return np.array(obs_parts, dtype=np.float32)

    def _get_info(self) -> Dict[str, Any]:
        world = self.world
        info: Dict[str, Any] = {
            "score": world.score,
            "state": world.state.name,
            "tick": world.tick,
            "events": [e.name for e in world.events],
            "step": self._step_count,
        }
        for role, entities in world.entities.items():
            info[f"num_{role}"] = len(entities)
        info.update(world.player.resources)
        return info


def run_random_episode(env: HubEnv, seed: Optional[int] = None) -> Dict[str, Any]:
    """Play one episode with uniformly random actions"""
    obs, info = env.reset(seed=seed)
    if seed is not None:
        env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    return {
        "return": total,
        "score": info["score"],
        "outcome": info["state"],
        "length": info["step"],
    }
