"""
Input manager.

Holds the active input source and gives the game loop one place to poll
commands from, so sources can be swapped (keyboard, scripted replay)
without touching the game.
"""

from typing import List, Optional

from mazechase.games.input.input_event import InputEvent
from mazechase.games.input.sources.base import InputSource


class InputManager:
    """Manages the active input source and provides unified event access.

    Only one input source can be active at a time.

    Examples:
        >>> manager = InputManager(KeyboardInputSource())
        >>> manager.update(0.016)
        >>> events = manager.get_events()
    """

    def __init__(self, source: Optional[InputSource] = None):
        """Initialize the input manager with an optional input source."""
        self._source: Optional[InputSource] = None
        if source is not None:
            self.set_source(source)

    def set_source(self, source: InputSource) -> None:
        """Set or change the active input source.

        Raises:
            TypeError: If source is not an instance of InputSource
        """
        if not isinstance(source, InputSource):
            raise TypeError(
                f"source must be an instance of InputSource, got {type(source).__name__}"
            )
        self._source = source

    def get_source(self) -> Optional[InputSource]:
        return self._source

    def has_source(self) -> bool:
        return self._source is not None

    def update(self, dt: float) -> None:
        """Update the active input source; safe to call with no source."""
        if self._source is not None:
            self._source.update(dt)

    def get_events(self) -> List[InputEvent]:
        """Get new input events from the active source (empty if none)."""
        if self._source is None:
            return []
        return self._source.poll_events()

    def clear_events(self) -> None:
        """Discard pending events, e.g. when switching game states."""
        if self._source is not None:
            self._source.poll_events()
