"""Rule tables for every game in the hub"""

from typing import Dict

from ..rules import GameRules
from . import space_ranger, snake, clicker, goku, free_fire, croc_dentist

GAMES: Dict[str, GameRules] = {
    rules.name: rules
    for rules in (
        space_ranger.RULES,
        snake.RULES,
        clicker.RULES,
        goku.RULES,
        free_fire.RULES,
        croc_dentist.RULES,
    )
}


def get_rules(name: str) -> GameRules:
    """Look up a game by name"""
    try:
        return GAMES[name]
    except KeyError:
        raise ValueError(f"Unknown game: {name}") from None


__all__ = ["GAMES", "get_rules"]
