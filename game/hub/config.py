"""
Hub configuration
"""

# Host settings
HUB_CONFIG = {
    "player_name": "guest",
    "leaderboard_path": "./data/leaderboard.json",
    "leaderboard_size": 10,  # top entries kept across all games
}

# HubEnv parameters
ENV_CONFIG = {
    "max_steps": 3600,  # 60s at 60 ticks per second
    "k_hostiles": 5,
    "m_collectibles": 3,
    "death_penalty": 100.0,
}

# Arcade window
WINDOW_CONFIG = {
    "title": "Arcade Hub",
    "scale": 2,  # window pixels per playfield unit
}

# simulate command
SIMULATE_CONFIG = {
    "episodes": 10,
    "seed": 42,
    "log_dir": "./logs",
}
