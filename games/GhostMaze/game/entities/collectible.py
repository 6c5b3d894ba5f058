"""Collectibles: food pellets and PowerPlus skill pellets.

Both are small squares centered in their tile. A level's collectibles are
regenerated from the tile map's food cells, with a random sample of those
cells converted to PowerPlus.
"""

import random
from typing import TYPE_CHECKING, List, Tuple

from models import CollectibleKind

from ...config import FOOD_POINTS, FOOD_SIZE, POWER_PLUS_POINTS, POWER_PLUS_SIZE
from .entity import Entity

if TYPE_CHECKING:
    from ..tile_map import TileMap


class Collectible(Entity):
    """A pellet sitting in one tile."""

    def __init__(self, cell: Tuple[int, int], kind: CollectibleKind, tile_size: int):
        """Initialize collectible centered in its cell.

        Args:
            cell: (column, row) of the tile holding the pellet
            kind: FOOD or POWER_PLUS
            tile_size: Tile edge length in pixels
        """
        size = FOOD_SIZE if kind == CollectibleKind.FOOD else POWER_PLUS_SIZE
        offset = (tile_size - size) / 2
        col, row = cell
        super().__init__(col * tile_size + offset, row * tile_size + offset, size, size)
        self._cell = cell
        self._kind = kind

    @property
    def cell(self) -> Tuple[int, int]:
        return self._cell

    @property
    def kind(self) -> CollectibleKind:
        return self._kind

    @property
    def points(self) -> int:
        return FOOD_POINTS if self._kind == CollectibleKind.FOOD else POWER_PLUS_POINTS

    @property
    def skill_charges(self) -> int:
        """Skill charges granted on pickup."""
        return 1 if self._kind == CollectibleKind.POWER_PLUS else 0


def create_collectibles(
    tile_map: 'TileMap',
    rng: random.Random,
    power_plus_count: int,
) -> List[Collectible]:
    """Build a fresh set of collectibles for a level.

    Every food cell gets one pellet; `power_plus_count` of them (or all of
    them, on tiny maps) are chosen at random to be PowerPlus instead.

    Args:
        tile_map: Parsed level map
        rng: Random source
        power_plus_count: Number of food cells to convert

    Returns:
        Collectibles in row-major cell order
    """
    cells = tile_map.food_cells
    count = min(max(0, power_plus_count), len(cells))
    power_cells = set(rng.sample(cells, count))

    return [
        Collectible(
            cell,
            CollectibleKind.POWER_PLUS if cell in power_cells else CollectibleKind.FOOD,
            tile_map.tile_size,
        )
        for cell in cells
    ]
