"""
Abstract base class for input sources.

Any device that can produce semantic commands (keyboard, gamepad, scripted
replay) implements InputSource, so games never depend on a specific device.
"""

from abc import ABC, abstractmethod
from typing import List

from mazechase.games.input.input_event import InputEvent


class InputSource(ABC):
    """Abstract base class for input sources.

    Subclasses must implement:
        - poll_events(): Return new input events since last poll
        - update(dt): Update source state for time-based processing
    """

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll.

        Returns all events collected since the previous call and clears the
        internal queue.
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update source state (called every frame).

        Args:
            dt: Delta time in seconds since last update
        """
        pass
