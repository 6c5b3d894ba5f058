"""Grid and tile map.

The map is parsed once from an ASCII layout into a grid of cell kinds plus
spawn markers. It then answers the spatial questions the resolver asks:
does a box overlap a wall, is it on the board, is it inside the portal band.
"""

import math
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from mazechase.games.levels import LevelFormatError
from models import CellKind, GhostVariant

from ..config import LAYOUT_KEY
from .entities.entity import Bounds

Cell = Tuple[int, int]

_GHOST_ROLES = {
    'red': GhostVariant.RED,
    'pink': GhostVariant.PINK,
    'orange': GhostVariant.ORANGE,
    'blue': GhostVariant.BLUE,
}
_ROLES = {'wall', 'food', 'open', 'portal', 'player', *_GHOST_ROLES}


class TileMap:
    """Immutable grid of cells with spawn markers.

    Attributes:
        tile_size: Edge length of one cell in pixels
        player_spawn: (column, row) of the player spawn
        ghost_spawns: (column, row) per ghost variant present in the layout
        food_cells: Cells that hold food at level start, row-major
        portal_row: Row whose horizontal edges wrap, or None
    """

    def __init__(
        self,
        cells: Sequence[Sequence[CellKind]],
        tile_size: int,
        player_spawn: Cell,
        ghost_spawns: Dict[GhostVariant, Cell],
        food_cells: List[Cell],
        portal_row: Optional[int] = None,
    ):
        if not cells or not cells[0]:
            raise ValueError('Tile map must have at least one cell')
        self._cells = tuple(tuple(row) for row in cells)
        self.tile_size = tile_size
        self.player_spawn = player_spawn
        self.ghost_spawns = dict(ghost_spawns)
        self.food_cells = list(food_cells)
        self.portal_row = portal_row
        self._open_cells = [
            (col, row)
            for row, line in enumerate(self._cells)
            for col, kind in enumerate(line)
            if kind == CellKind.OPEN
        ]

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_layout(
        cls,
        layout: Iterable[str],
        tile_size: int,
        layout_key: Optional[Dict[str, str]] = None,
        portal_row: Optional[int] = None,
        source_path: Optional[Path] = None,
    ) -> 'TileMap':
        """Parse an ASCII layout.

        Args:
            layout: One string per row
            tile_size: Cell edge length in pixels
            layout_key: Character -> role ('wall', 'food', 'open', 'portal',
                'player', 'red', 'pink', 'orange', 'blue')
            portal_row: Row index of the portal band, if any
            source_path: Level file, used in error messages

        Raises:
            LevelFormatError: On ragged rows, unknown characters or roles,
                a missing or duplicated player spawn, duplicated ghost
                spawns, or a portal row outside the grid
        """
        key = dict(LAYOUT_KEY)
        key.update(layout_key or {})
        for char, role in key.items():
            if role not in _ROLES:
                raise LevelFormatError(f"unknown layout role {role!r} for {char!r}", source_path)

        lines = list(layout)
        if not lines:
            raise LevelFormatError("layout is empty", source_path)
        width = len(lines[0])
        cells: List[List[CellKind]] = []
        food_cells: List[Cell] = []
        player_spawn: Optional[Cell] = None
        ghost_spawns: Dict[GhostVariant, Cell] = {}

        for row, line in enumerate(lines):
            if len(line) != width:
                raise LevelFormatError(
                    f"row {row} has {len(line)} columns, expected {width}", source_path)
            kinds = []
            for col, char in enumerate(line):
                role = key.get(char)
                if role is None:
                    raise LevelFormatError(
                        f"unknown character {char!r} at row {row}, column {col}", source_path)

                if role == 'wall':
                    kinds.append(CellKind.WALL)
                    continue
                if role == 'portal':
                    kinds.append(CellKind.PORTAL_OPEN)
                    continue

                kinds.append(CellKind.OPEN)
                if role == 'food':
                    food_cells.append((col, row))
                elif role == 'player':
                    if player_spawn is not None:
                        raise LevelFormatError("more than one player spawn", source_path)
                    player_spawn = (col, row)
                elif role in _GHOST_ROLES:
                    variant = _GHOST_ROLES[role]
                    if variant in ghost_spawns:
                        raise LevelFormatError(f"more than one {role} ghost spawn", source_path)
                    ghost_spawns[variant] = (col, row)
            cells.append(kinds)

        if player_spawn is None:
            raise LevelFormatError("layout has no player spawn", source_path)
        if portal_row is not None and not 0 <= portal_row < len(lines):
            raise LevelFormatError(f"portal row {portal_row} is outside the grid", source_path)

        return cls(cells, tile_size, player_spawn, ghost_spawns, food_cells, portal_row)

    # ------------------------------------------------------------------
    # Grid queries
    # ------------------------------------------------------------------

    @property
    def columns(self) -> int:
        return len(self._cells[0])

    @property
    def rows(self) -> int:
        return len(self._cells)

    @property
    def width(self) -> int:
        """Board width in pixels."""
        return self.columns * self.tile_size

    @property
    def height(self) -> int:
        """Board height in pixels."""
        return self.rows * self.tile_size

    def cell(self, col: int, row: int) -> Optional[CellKind]:
        """Cell kind, or None outside the grid."""
        if 0 <= row < self.rows and 0 <= col < self.columns:
            return self._cells[row][col]
        return None

    def is_wall(self, col: int, row: int) -> bool:
        return self.cell(col, row) == CellKind.WALL

    def wall_cells(self) -> List[Cell]:
        return [
            (col, row)
            for row, line in enumerate(self._cells)
            for col, kind in enumerate(line)
            if kind == CellKind.WALL
        ]

    def open_cells(self) -> List[Cell]:
        """Walkable cells, portal cells excluded."""
        return list(self._open_cells)

    def cell_origin(self, cell: Cell) -> Tuple[float, float]:
        """Top-left pixel position of a cell."""
        col, row = cell
        return (float(col * self.tile_size), float(row * self.tile_size))

    def cell_bounds(self, cell: Cell) -> Bounds:
        x, y = self.cell_origin(cell)
        return (x, y, x + self.tile_size, y + self.tile_size)

    def cell_containing(self, x: float, y: float) -> Cell:
        """Cell under a pixel position (may lie outside the grid)."""
        return (math.floor(x / self.tile_size), math.floor(y / self.tile_size))

    # ------------------------------------------------------------------
    # Spatial queries
    # ------------------------------------------------------------------

    def overlaps_wall(self, bounds: Bounds) -> bool:
        """True if the box overlaps any wall cell with positive area."""
        left, top, right, bottom = bounds
        ts = self.tile_size
        first_col = max(0, math.floor(left / ts))
        last_col = min(self.columns - 1, math.ceil(right / ts) - 1)
        first_row = max(0, math.floor(top / ts))
        last_row = min(self.rows - 1, math.ceil(bottom / ts) - 1)

        for row in range(first_row, last_row + 1):
            line = self._cells[row]
            for col in range(first_col, last_col + 1):
                if line[col] == CellKind.WALL:
                    return True
        return False

    def contains(self, bounds: Bounds) -> bool:
        """True if the box lies entirely on the board."""
        left, top, right, bottom = bounds
        return left >= 0 and top >= 0 and right <= self.width and bottom <= self.height

    def in_portal_band(self, bounds: Bounds) -> bool:
        """True if the box lies vertically within the portal row."""
        if self.portal_row is None:
            return False
        band_top = self.portal_row * self.tile_size
        band_bottom = band_top + self.tile_size
        return bounds[1] >= band_top and bounds[3] <= band_bottom

    def blocks(self, bounds: Bounds) -> bool:
        """True if a mover may not occupy this box.

        Off-board positions are allowed only inside the portal band.
        """
        if not self.contains(bounds) and not self.in_portal_band(bounds):
            return True
        return self.overlaps_wall(bounds)
