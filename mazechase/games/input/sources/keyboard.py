"""
Keyboard Input Source - maps pygame key presses to commands.

Window-level events the source does not consume (QUIT, ESC, unbound keys)
are re-posted to the pygame event queue for the main loop.
"""
import time
from typing import Dict, List, Optional

import pygame

from models import Command
from mazechase.games.input.input_event import InputEvent
from mazechase.games.input.sources.base import InputSource


DEFAULT_KEY_BINDINGS: Dict[int, Command] = {
    pygame.K_UP: Command.TURN_UP,
    pygame.K_w: Command.TURN_UP,
    pygame.K_DOWN: Command.TURN_DOWN,
    pygame.K_s: Command.TURN_DOWN,
    pygame.K_LEFT: Command.TURN_LEFT,
    pygame.K_a: Command.TURN_LEFT,
    pygame.K_RIGHT: Command.TURN_RIGHT,
    pygame.K_d: Command.TURN_RIGHT,
    pygame.K_SPACE: Command.ACTIVATE_SKILL,
    pygame.K_v: Command.BREAK_ICE,
    pygame.K_RETURN: Command.START_GAME,
    pygame.K_r: Command.RESTART_GAME,
}


class KeyboardInputSource(InputSource):
    """Keyboard input source.

    Converts KEYDOWN events for bound keys into InputEvent models.
    """

    def __init__(self, bindings: Optional[Dict[int, Command]] = None):
        """Initialize the keyboard source.

        Args:
            bindings: Key code -> Command map (defaults to arrows/WASD layout)
        """
        self._bindings = dict(DEFAULT_KEY_BINDINGS if bindings is None else bindings)
        self._event_queue: List[InputEvent] = []

    @property
    def bindings(self) -> Dict[int, Command]:
        return dict(self._bindings)

    def translate(self, key: int) -> Optional[Command]:
        """Command bound to a key code, or None."""
        return self._bindings.get(key)

    def poll_events(self) -> List[InputEvent]:
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Drain pygame events and queue commands for bound keys."""
        for event in pygame.event.get():
            command = None
            if event.type == pygame.KEYDOWN:
                command = self.translate(event.key)

            if command is not None:
                self._event_queue.append(InputEvent(
                    command=command,
                    timestamp=time.monotonic(),
                ))
            else:
                pygame.event.post(event)

    def clear(self) -> None:
        self._event_queue.clear()
