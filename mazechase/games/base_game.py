"""Base class for all mazechase games.

All games inherit from BaseGame so the standalone entry points and the
presentation adapters can drive them the same way.

Game metadata (NAME, DESCRIPTION, etc.) and CLI arguments (ARGUMENTS)
are declared as class attributes, making them part of the plugin contract.

Level Support:
Games opt in to YAML-based levels by:
1. Setting LEVELS_DIR class attribute to their levels directory
2. Implementing _create_level_loader() to return a game-specific loader
3. Implementing _apply_level_config() to apply level data to game state
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, TYPE_CHECKING

import pygame

from mazechase.games.game_state import GameState
from mazechase.logging import get_logger

log = get_logger('base_game')

if TYPE_CHECKING:
    from mazechase.games.levels import LevelLoader


class BaseGame(ABC):
    """Abstract base class for all mazechase games.

    Class Attributes (metadata):
        NAME: Display name for the game
        DESCRIPTION: Short description of gameplay
        VERSION: Semantic version string
        AUTHOR: Author/team name
        ARGUMENTS: List of CLI argument definitions for argparse

    Subclasses must implement:
        - _get_internal_state() -> GameState: Map internal state to standard state
        - get_score() -> int: Return current score
        - handle_input(events): Process input events
        - update(dt): Update game logic
        - render(screen): Draw the game

    Optional overrides:
        - reset(): Reset game to initial state
        - _create_level_loader(), _apply_level_config(): level support
    """

    # =========================================================================
    # Game Metadata (override in subclasses)
    # =========================================================================

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"
    VERSION: str = "1.0.0"
    AUTHOR: str = "Unknown"

    # CLI argument definitions for argparse
    # Each entry is a dict with keys: name, type, default, help, choices (optional), action (optional)
    ARGUMENTS: List[Dict[str, Any]] = []

    # Level support - set LEVELS_DIR to enable level loading
    LEVELS_DIR: Optional[Path] = None

    # Level-related arguments (only included if LEVELS_DIR is set)
    _LEVEL_ARGUMENTS: List[Dict[str, Any]] = [
        {
            'name': '--level',
            'type': str,
            'default': None,
            'help': 'Level to play (slug or path to YAML)'
        },
        {
            'name': '--list-levels',
            'action': 'store_true',
            'default': False,
            'help': 'List available levels and exit'
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Get all CLI arguments for this game (game-specific + level).

        Game-specific arguments come first, then level args (if LEVELS_DIR set).
        Duplicates by name are removed (game-specific takes precedence).
        """
        seen_names = set()
        result = []

        level_args = cls._LEVEL_ARGUMENTS if cls.LEVELS_DIR is not None else []
        for arg in list(cls.ARGUMENTS) + list(level_args):
            name = arg.get('name', '')
            if name and name not in seen_names:
                seen_names.add(name)
                result.append(arg)

        return result

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Get game metadata as a dictionary.

        Returns:
            Dict with keys: name, description, version, author, arguments
        """
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
            'arguments': cls.get_arguments(),
        }

    # =========================================================================
    # Instance Initialization
    # =========================================================================

    def __init__(
        self,
        level: Optional[str] = None,
        **kwargs,
    ):
        """Initialize base game.

        Args:
            level: Level slug or path to load (if game has levels)
        """
        self._level_loader: Optional['LevelLoader'] = None
        self._current_level_slug: Optional[str] = None
        self._current_level_data: Any = None

        if self.LEVELS_DIR is not None:
            self._init_level_support(level)

    @property
    def state(self) -> GameState:
        """Current game state (standard interface).

        Games should not override this - override _get_internal_state instead.
        """
        return self._get_internal_state()

    @abstractmethod
    def _get_internal_state(self) -> GameState:
        """Map internal game state to standard GameState."""
        pass

    @abstractmethod
    def get_score(self) -> int:
        """Get current score."""
        pass

    @abstractmethod
    def handle_input(self, events: List) -> None:
        """Process input events.

        Args:
            events: List of InputEvent objects
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update game logic.

        Args:
            dt: Delta time in seconds since last frame
        """
        pass

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        pass

    def reset(self) -> None:
        """Reset game to initial state.

        Override this to implement game-specific reset logic.
        """
        pass

    # =========================================================================
    # Level Support
    # =========================================================================

    def _init_level_support(self, level: Optional[str] = None) -> None:
        """Create the level loader and load the requested level.

        Called automatically if LEVELS_DIR is set.
        """
        self._level_loader = self._create_level_loader()

        if level and self._level_loader:
            self._load_level(level)

    def _create_level_loader(self) -> Optional['LevelLoader']:
        """Create the level loader instance.

        Override in subclass to return a game-specific loader.

        Returns:
            LevelLoader instance, or None if levels are unavailable
        """
        return None

    def _load_level(self, slug: str) -> bool:
        """Load a level by slug.

        Returns:
            True if loaded successfully
        """
        if not self._level_loader:
            return False

        try:
            self._current_level_data = self._level_loader.load_level(slug)
        except (FileNotFoundError, ValueError) as e:
            log.error(f"Failed to load level '{slug}': {e}")
            return False

        self._current_level_slug = slug
        self._apply_level_config(self._current_level_data)
        return True

    def _apply_level_config(self, level_data: Any) -> None:
        """Apply loaded level configuration to game state.

        Override in subclass to handle game-specific level setup.
        """
        pass  # Default: no-op, subclass implements

    @classmethod
    def print_levels(cls) -> None:
        """Print available levels to stdout."""
        loader = cls._level_loader_for_listing()
        if loader is None:
            print("No levels directory configured")
            return

        print(f"\nAvailable levels for {cls.NAME}:")
        print("-" * 50)

        levels = loader.list_levels()
        for slug in levels:
            info = loader.get_level_info(slug)
            if info:
                diff_str = "*" * info.difficulty
                print(f"  {slug:24} [{diff_str:5}] {info.name}")
            else:
                print(f"  {slug}")

        if not levels:
            print("  (no levels found)")

        print()

    @classmethod
    def _level_loader_for_listing(cls) -> Optional['LevelLoader']:
        """Loader used by print_levels(); override alongside _create_level_loader."""
        return None

    @property
    def current_level_name(self) -> str:
        """Get current level display name."""
        if self._level_loader and self._current_level_slug:
            info = self._level_loader.get_level_info(self._current_level_slug)
            if info:
                return info.name
        return ""

    @property
    def current_level_slug(self) -> Optional[str]:
        return self._current_level_slug

    @property
    def has_levels(self) -> bool:
        """Check if this game has level support configured."""
        return self._level_loader is not None
