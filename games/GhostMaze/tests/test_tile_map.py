"""
Tests for layout parsing and tile map spatial queries.
"""

import pytest

from mazechase.games.levels import LevelFormatError
from models import CellKind, GhostVariant
from games.GhostMaze.config import TILE_SIZE
from games.GhostMaze.game.level_loader import GhostMazeLevelLoader
from games.GhostMaze.game_mode import GhostMazeMode
from games.GhostMaze.game.tile_map import TileMap


# ============================================================================
# Parsing
# ============================================================================


class TestLayoutParsing:
    """Test TileMap.from_layout."""

    def test_room_dimensions(self, room_map):
        assert room_map.columns == 7
        assert room_map.rows == 7
        assert room_map.width == 7 * TILE_SIZE
        assert room_map.height == 7 * TILE_SIZE

    def test_player_spawn_is_open_without_food(self, room_map):
        assert room_map.player_spawn == (3, 3)
        assert room_map.cell(3, 3) == CellKind.OPEN
        assert (3, 3) not in room_map.food_cells

    def test_food_on_every_blank_cell(self, room_map):
        assert len(room_map.food_cells) == 24
        assert room_map.food_cells[0] == (1, 1)

    def test_portal_cells_hold_no_food(self, tunnel_map):
        assert tunnel_map.cell(0, 1) == CellKind.PORTAL_OPEN
        assert tunnel_map.cell(4, 1) == CellKind.PORTAL_OPEN
        assert tunnel_map.food_cells == [(1, 1), (3, 1)]

    def test_ghost_spawns(self):
        tile_map = TileMap.from_layout(["XXXXX", "XrPbX", "XXXXX"], TILE_SIZE)
        assert tile_map.ghost_spawns == {
            GhostVariant.RED: (1, 1),
            GhostVariant.BLUE: (3, 1),
        }

    def test_custom_layout_key(self):
        tile_map = TileMap.from_layout(
            ["#####", "#.@.#", "#####"],
            TILE_SIZE,
            layout_key={'#': 'wall', '.': 'food', '@': 'player'},
        )
        assert tile_map.is_wall(0, 0)
        assert tile_map.player_spawn == (2, 1)
        assert tile_map.food_cells == [(1, 1), (3, 1)]

    def test_open_role_has_no_food(self):
        tile_map = TileMap.from_layout(
            ["XXXX", "X.PX", "XXXX"], TILE_SIZE, layout_key={'.': 'open'})
        assert tile_map.food_cells == []
        assert tile_map.cell(1, 1) == CellKind.OPEN

    def test_ragged_rows_rejected(self):
        with pytest.raises(LevelFormatError) as exc_info:
            TileMap.from_layout(["XXXX", "XPX", "XXXX"], TILE_SIZE)
        assert "row 1 has 3 columns" in str(exc_info.value)

    def test_unknown_character_rejected(self):
        with pytest.raises(LevelFormatError) as exc_info:
            TileMap.from_layout(["XXX", "XP#", "XXX"], TILE_SIZE)
        assert "unknown character" in str(exc_info.value)

    def test_unknown_role_rejected(self):
        with pytest.raises(LevelFormatError):
            TileMap.from_layout(["XXX", "XPX", "XXX"], TILE_SIZE, layout_key={'#': 'lava'})

    def test_missing_player_rejected(self):
        with pytest.raises(LevelFormatError) as exc_info:
            TileMap.from_layout(["XXX", "X X", "XXX"], TILE_SIZE)
        assert "no player spawn" in str(exc_info.value)

    def test_duplicate_player_rejected(self):
        with pytest.raises(LevelFormatError):
            TileMap.from_layout(["XXXX", "XPPX", "XXXX"], TILE_SIZE)

    def test_duplicate_ghost_rejected(self):
        with pytest.raises(LevelFormatError) as exc_info:
            TileMap.from_layout(["XXXXX", "XrPrX", "XXXXX"], TILE_SIZE)
        assert "red" in str(exc_info.value)

    def test_portal_row_outside_grid_rejected(self):
        with pytest.raises(LevelFormatError):
            TileMap.from_layout(["XXX", "XPX", "XXX"], TILE_SIZE, portal_row=3)

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            TileMap.from_layout([], TILE_SIZE)


# ============================================================================
# Spatial queries
# ============================================================================


class TestSpatialQueries:
    """Test wall overlap, board containment and the portal band."""

    def test_aligned_open_cell_not_blocked(self, room_map):
        assert not room_map.blocks((32, 32, 64, 64))

    def test_touching_wall_is_not_overlap(self, room_map):
        # Cell (1, 1) touches the outer wall on two sides
        assert not room_map.overlaps_wall((32, 32, 64, 64))

    def test_partial_wall_overlap(self, room_map):
        assert room_map.overlaps_wall((24, 32, 56, 64))

    def test_off_board_blocked_without_portal(self, room_map):
        assert room_map.blocks((-8, 96, 24, 128))

    def test_off_board_allowed_inside_band(self, tunnel_map):
        assert not tunnel_map.blocks((-8, 32, 24, 64))
        assert not tunnel_map.blocks((150, 32, 182, 64))

    def test_band_requires_full_vertical_containment(self, tunnel_map):
        assert tunnel_map.in_portal_band((0, 32, 32, 64))
        assert not tunnel_map.in_portal_band((0, 36, 32, 68))

    def test_no_band_without_portal_row(self, room_map):
        assert not room_map.in_portal_band((0, 32, 32, 64))

    def test_cell_helpers(self, room_map):
        assert room_map.cell_origin((2, 3)) == (64.0, 96.0)
        assert room_map.cell_bounds((1, 1)) == (32.0, 32.0, 64.0, 64.0)
        assert room_map.cell_containing(70.0, 100.0) == (2, 3)
        assert room_map.cell(-1, 0) is None

    def test_open_cells_exclude_walls_and_portals(self, tunnel_map):
        assert tunnel_map.open_cells() == [(1, 1), (2, 1), (3, 1)]
        assert len(tunnel_map.wall_cells()) == 10


# ============================================================================
# Classic level
# ============================================================================


class TestClassicLevel:
    """Test the shipped reference maze."""

    @pytest.fixture
    def classic(self):
        return GhostMazeLevelLoader(GhostMazeMode.LEVELS_DIR).load_level('classic')

    def test_grid_size(self, classic):
        assert classic.tile_map.columns == 19
        assert classic.tile_map.rows == 21

    def test_spawns(self, classic):
        tile_map = classic.tile_map
        assert tile_map.player_spawn == (9, 15)
        assert tile_map.ghost_spawns == {
            GhostVariant.RED: (9, 8),
            GhostVariant.BLUE: (7, 9),
            GhostVariant.PINK: (9, 9),
            GhostVariant.ORANGE: (11, 9),
        }

    def test_food_and_walls(self, classic):
        assert len(classic.tile_map.food_cells) == 185
        assert len(classic.tile_map.wall_cells()) == 195

    def test_portal_row_is_open_at_both_edges(self, classic):
        tile_map = classic.tile_map
        assert tile_map.portal_row == 9
        assert tile_map.cell(0, 9) == CellKind.PORTAL_OPEN
        assert tile_map.cell(18, 9) == CellKind.PORTAL_OPEN
