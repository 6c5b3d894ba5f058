"""
Mazechase Game Framework.

Provides:
- base_game: BaseGame class that all games inherit from
- game_state: Standard GameState enum
- levels: YAML-based level loading
- input: Command events and input sources
"""

from mazechase.games.game_state import GameState
from mazechase.games.base_game import BaseGame
from mazechase.games.levels import (
    LevelFormatError,
    LevelInfo,
    LevelLoader,
)

__all__ = [
    'GameState',
    'BaseGame',
    'LevelFormatError',
    'LevelInfo',
    'LevelLoader',
]
