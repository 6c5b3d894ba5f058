"""
Input Event - a single semantic command from an input source.

Sources translate raw device input (keys, buttons) into Command values so
that no toolkit key code ever reaches game logic.
"""
from dataclasses import dataclass

from models import Command


@dataclass(frozen=True)
class InputEvent:
    """Immutable command event from any source.

    Attributes:
        command: The semantic command
        timestamp: Time when the event occurred (seconds, from monotonic clock)
    """
    command: Command
    timestamp: float

    def __post_init__(self):
        """Validate command type and timestamp."""
        if not isinstance(self.command, Command):
            raise ValueError(f'Command must be a Command, got {self.command!r}')
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')

    def __str__(self) -> str:
        return f"InputEvent(command={self.command.value}, t={self.timestamp:.3f})"
