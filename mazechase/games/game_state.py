"""Common GameState enum for all mazechase games.

All games report one of these states through their `state` property so the
entry point and the presentation layer can react without knowing the game.
Games can keep richer internal state, but must map it to these values.
"""
from enum import Enum


class GameState(Enum):
    """Standard game states.

    States:
        START: Loaded and waiting for a start command
        PLAYING: Active gameplay in progress, ticks advance the simulation
        GAME_OVER: Run ended in loss (no lives left)
        WON: Run ended in success

    Usage in game_mode.py:
        from mazechase.games import GameState

        class MyGameMode(BaseGame):
            def __init__(self):
                self._internal_state = GameState.START

            def _get_internal_state(self) -> GameState:
                return self._internal_state
    """
    START = "start"
    PLAYING = "playing"
    GAME_OVER = "game_over"
    WON = "won"

    @property
    def is_terminal(self) -> bool:
        """True for states that stop the simulation until a restart."""
        return self in (GameState.GAME_OVER, GameState.WON)
