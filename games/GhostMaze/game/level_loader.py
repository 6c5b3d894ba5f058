"""Level loader for GhostMaze.

Loads YAML levels with an ASCII maze layout and a few per-level rules.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from mazechase.games.levels import LevelFormatError, LevelLoader as BaseLevelLoader

from ..config import DEFAULT_LIVES, DEFAULT_POWER_PLUS, TILE_SIZE
from .tile_map import TileMap


class ClearPolicy(str, Enum):
    """What happens when the last collectible is eaten.

    Attributes:
        RELOAD: Regenerate collectibles and play another round
        WIN: End the game in the WON state
    """
    RELOAD = "reload"
    WIN = "win"


@dataclass
class LevelData:
    """Parsed level data ready for game use."""
    name: str
    tile_map: TileMap
    description: str = ""
    difficulty: int = 1
    author: str = "unknown"

    # Game rules
    lives: int = DEFAULT_LIVES
    power_plus: int = DEFAULT_POWER_PLUS
    on_clear: ClearPolicy = ClearPolicy.RELOAD

    # Source file
    file_path: Optional[Path] = None


class GhostMazeLevelLoader(BaseLevelLoader[LevelData]):
    """Loads and parses GhostMaze levels from YAML."""

    def __init__(self, levels_dir: Path, tile_size: int = TILE_SIZE):
        super().__init__(levels_dir)
        self._tile_size = tile_size

    def _parse_level_data(self, data: Dict[str, Any], file_path: Path) -> LevelData:
        """Parse YAML data into LevelData.

        Raises:
            LevelFormatError: On a missing or malformed layout, or invalid rules
        """
        layout = self._layout_lines(data.get('layout'), file_path)

        layout_key = data.get('layout_key') or {}
        if not isinstance(layout_key, dict):
            raise LevelFormatError("layout_key must be a mapping", file_path)
        # Single-character keys; YAML may hand back non-string scalars
        layout_key = {str(char): str(role) for char, role in layout_key.items()}

        portal_row = data.get('portal_row')
        if portal_row is not None and not isinstance(portal_row, int):
            raise LevelFormatError(f"portal_row must be an integer, got {portal_row!r}", file_path)

        tile_map = TileMap.from_layout(
            layout,
            self._tile_size,
            layout_key=layout_key,
            portal_row=portal_row,
            source_path=file_path,
        )
        # An empty board would count as cleared on every tick
        if not tile_map.food_cells:
            raise LevelFormatError("layout has no food cells", file_path)

        lives = data.get('lives', DEFAULT_LIVES)
        if not isinstance(lives, int) or lives <= 0:
            raise LevelFormatError(f"lives must be a positive integer, got {lives!r}", file_path)

        power_plus = data.get('power_plus', DEFAULT_POWER_PLUS)
        if not isinstance(power_plus, int) or power_plus < 0:
            raise LevelFormatError(
                f"power_plus must be a non-negative integer, got {power_plus!r}", file_path)

        try:
            on_clear = ClearPolicy(data.get('on_clear', ClearPolicy.RELOAD.value))
        except ValueError:
            raise LevelFormatError(f"unknown on_clear policy {data.get('on_clear')!r}", file_path)

        return LevelData(
            name=data.get('name', 'Untitled'),
            tile_map=tile_map,
            description=data.get('description', ''),
            difficulty=data.get('difficulty', 1),
            author=data.get('author', 'unknown'),
            lives=lives,
            power_plus=power_plus,
            on_clear=on_clear,
            file_path=file_path,
        )

    def _layout_lines(self, layout: Any, file_path: Path) -> List[str]:
        """Split a layout given as a block string or a list of rows."""
        if isinstance(layout, str):
            lines = layout.strip('\n').split('\n')
        elif isinstance(layout, list) and all(isinstance(row, str) for row in layout):
            lines = list(layout)
        else:
            raise LevelFormatError("level has no layout", file_path)
        if not lines or not any(lines):
            raise LevelFormatError("level has no layout", file_path)
        return lines
