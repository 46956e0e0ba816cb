"""Arcade hub - shared tick engine and rule tables for the hub mini-games"""

from .games import GAMES, get_rules
from .world import World, GameState
from .session import Hub, Session, GameResult, ManualDriver
from .render import render_frame, rasterize
from .env import HubEnv, run_random_episode

__all__ = [
    'GAMES', 'get_rules',
    'World', 'GameState',
    'Hub', 'Session', 'GameResult', 'ManualDriver',
    'render_frame', 'rasterize',
    'HubEnv', 'run_random_episode',
]
