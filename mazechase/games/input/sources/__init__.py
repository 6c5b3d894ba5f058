"""
Input source implementations.
"""

from mazechase.games.input.sources.base import InputSource
from mazechase.games.input.sources.keyboard import KeyboardInputSource, DEFAULT_KEY_BINDINGS

__all__ = ['InputSource', 'KeyboardInputSource', 'DEFAULT_KEY_BINDINGS']
