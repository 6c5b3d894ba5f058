"""
Tests for the clone skill.
"""

import pytest

from models import Direction, GhostVariant
from games.GhostMaze.config import CLONE_SPEED, TILE_SIZE
from games.GhostMaze.game.entities import Ghost, Player
from games.GhostMaze.game.ghost_ai import behaviors_for
from games.GhostMaze.game.skills import SkillSystem


def make_player(col, row, charges=1):
    player = Player((col * TILE_SIZE, row * TILE_SIZE), TILE_SIZE, 8, lives=3)
    player.add_skill_charge(charges)
    return player


def make_ghost(col, row):
    return Ghost(1, GhostVariant.RED, behaviors_for(GhostVariant.RED),
                 (col * TILE_SIZE, row * TILE_SIZE), Direction.LEFT, TILE_SIZE, 8)


class TestActivate:
    """Test spending charges."""

    def test_no_charge_no_clone(self, corridor_map):
        skills = SkillSystem(corridor_map)
        player = make_player(1, 1, charges=0)
        assert skills.activate(player) is None
        assert skills.clones == []
        assert player.skill_charges == 0

    def test_clone_starts_on_player(self, corridor_map):
        skills = SkillSystem(corridor_map)
        player = make_player(1, 1, charges=2)
        player.take_turn(Direction.RIGHT)
        clone = skills.activate(player)

        assert (clone.x, clone.y) == (player.x, player.y)
        assert clone.width == player.width
        assert clone.direction == Direction.RIGHT
        assert clone.speed == CLONE_SPEED
        assert player.skill_charges == 1
        assert skills.clones == [clone]

    def test_clone_list_is_a_copy(self, corridor_map):
        skills = SkillSystem(corridor_map)
        skills.activate(make_player(1, 1))
        skills.clones.clear()
        assert len(skills.clones) == 1


class TestAdvance:
    """Test clone flight and termination."""

    def test_flies_straight_and_spins(self, corridor_map):
        skills = SkillSystem(corridor_map)
        clone = skills.activate(make_player(1, 1))
        skills.advance([])
        assert clone.x == 32 + CLONE_SPEED
        assert clone.y == 32
        assert clone.rotation == 30.0

    def test_destroyed_on_wall(self, corridor_map):
        skills = SkillSystem(corridor_map)
        skills.activate(make_player(1, 1))
        # Right edge reaches the far wall (x=448) after 32 steps of 12 px
        for _ in range(32):
            skills.advance([])
        assert len(skills.clones) == 1
        skills.advance([])
        assert skills.clones == []

    def test_strikes_first_ghost_met(self, corridor_map):
        skills = SkillSystem(corridor_map)
        skills.activate(make_player(1, 1))
        ghost = make_ghost(5, 1)
        for _ in range(8):
            assert skills.advance([ghost]) == []
        assert skills.advance([ghost]) == [ghost]
        assert skills.clones == []

    def test_passes_through_dead_ghost(self, corridor_map):
        skills = SkillSystem(corridor_map)
        skills.activate(make_player(1, 1))
        ghost = make_ghost(5, 1)
        ghost.kill(0)
        for _ in range(12):
            assert skills.advance([ghost]) == []
        assert len(skills.clones) == 1

    def test_destroyed_leaving_through_portal(self, tunnel_map):
        skills = SkillSystem(tunnel_map)
        player = make_player(2, 1)
        player.take_turn(Direction.LEFT)
        skills.activate(player)
        for _ in range(5):
            skills.advance([])
        assert len(skills.clones) == 1
        skills.advance([])
        assert skills.clones == []

    def test_clones_fly_independently(self, corridor_map):
        skills = SkillSystem(corridor_map)
        player = make_player(1, 1, charges=2)
        first = skills.activate(player)
        skills.advance([])
        second = skills.activate(player)
        skills.advance([])
        assert first.x - second.x == pytest.approx(CLONE_SPEED)

    def test_clear(self, corridor_map):
        skills = SkillSystem(corridor_map)
        skills.activate(make_player(1, 1))
        skills.clear()
        assert skills.clones == []
