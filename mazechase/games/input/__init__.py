"""
Input abstraction layer for mazechase games.

Sources turn device input into semantic Command events; games only ever
receive InputEvent values.
"""

from mazechase.games.input.input_event import InputEvent
from mazechase.games.input.input_manager import InputManager

__all__ = ['InputEvent', 'InputManager']
