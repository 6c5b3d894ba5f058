"""
Tests for the ghost behavior engine: movement, abilities and lifecycle.
"""

import random

import pytest

from models import CellKind, Direction, EffectKind, GhostVariant, TrapKind
from games.GhostMaze.config import TILE_SIZE
from games.GhostMaze.game.entities import Entity, Ghost
from games.GhostMaze.game.ghost_ai import behaviors_for
from games.GhostMaze.game.ghost_behavior import GhostBehaviorEngine
from games.GhostMaze.game.physics import overlaps
from games.GhostMaze.game.tile_map import TileMap


class FixedRandom(random.Random):
    """Random source whose random() always returns the same value."""

    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


def make_ghost(variant, col, row, direction=Direction.RIGHT, handle=1, now_ms=0):
    return Ghost(handle, variant, behaviors_for(variant),
                 (col * TILE_SIZE, row * TILE_SIZE), direction,
                 TILE_SIZE, 8, now_ms=now_ms)


def make_target(col, row):
    return Entity(col * TILE_SIZE, row * TILE_SIZE, TILE_SIZE, TILE_SIZE)


@pytest.fixture
def make_engine(clock, effects, traps):
    def _make(tile_map, rng=None):
        return GhostBehaviorEngine(tile_map, effects, traps, clock, rng or random.Random(99))
    return _make


# ============================================================================
# Movement
# ============================================================================


class TestStep:
    """Test the shared movement step."""

    def test_follows_corridor_toward_target(self, make_engine, corridor_map):
        engine = make_engine(corridor_map)
        ghost = make_ghost(GhostVariant.BLUE, 3, 1, Direction.RIGHT)
        assert engine.step(ghost, make_target(10, 1))
        assert ghost.x == 104
        assert ghost.direction == Direction.RIGHT

    def test_turns_back_toward_target(self, make_engine, corridor_map):
        engine = make_engine(corridor_map)
        ghost = make_ghost(GhostVariant.BLUE, 3, 1, Direction.LEFT)
        assert engine.step(ghost, make_target(10, 1))
        assert ghost.x == 104
        assert ghost.direction == Direction.RIGHT

    def test_scared_ghost_turns_back_in_corridor(self, make_engine, effects, corridor_map):
        engine = make_engine(corridor_map)
        ghost = make_ghost(GhostVariant.BLUE, 8, 1, Direction.LEFT)
        effects.apply(ghost.handle, EffectKind.SCARED, 5000)
        for _ in range(8):
            engine.step(ghost, make_target(2, 1))
        assert ghost.direction == Direction.RIGHT
        assert ghost.x == 8 * 32 + 64

    def test_reverses_at_dead_end(self, make_engine, corridor_map):
        engine = make_engine(corridor_map)
        ghost = make_ghost(GhostVariant.BLUE, 1, 1, Direction.LEFT)
        # Target straight ahead through the wall
        assert engine.step(ghost, make_target(0, 1))
        assert ghost.direction == Direction.RIGHT
        assert ghost.x == 40

    def test_random_turn_at_intersection(self, make_engine, room_map):
        engine = make_engine(room_map, FixedRandom(0.0))
        ghost = make_ghost(GhostVariant.BLUE, 3, 3, Direction.RIGHT)
        engine.step(ghost, make_target(5, 3))
        assert ghost.direction in (Direction.UP, Direction.DOWN)
        assert ghost.x == 96
        assert abs(ghost.y - 96) == 8

    def test_policy_at_intersection_without_turn_roll(self, make_engine, room_map):
        engine = make_engine(room_map, FixedRandom(0.99))
        ghost = make_ghost(GhostVariant.BLUE, 3, 3, Direction.UP)
        engine.step(ghost, make_target(5, 3))
        assert ghost.direction == Direction.RIGHT
        assert (ghost.x, ghost.y) == (104, 96)

    def test_scared_ghost_flees(self, make_engine, effects, room_map):
        engine = make_engine(room_map, FixedRandom(0.99))
        ghost = make_ghost(GhostVariant.BLUE, 3, 3, Direction.UP)
        effects.apply(ghost.handle, EffectKind.SCARED, 5000)
        engine.step(ghost, make_target(5, 3))
        assert ghost.direction == Direction.LEFT

    def test_never_overlaps_walls(self, make_engine, room_map):
        engine = make_engine(room_map, random.Random(5))
        ghost = make_ghost(GhostVariant.RED, 1, 1)
        target = make_target(3, 3)
        for _ in range(500):
            engine.step(ghost, target)
            assert not room_map.overlaps_wall(ghost.get_bounds())
            assert room_map.contains(ghost.get_bounds())

    def test_wraps_through_portal(self, make_engine, tunnel_map):
        engine = make_engine(tunnel_map)
        ghost = make_ghost(GhostVariant.BLUE, 0, 1, Direction.LEFT)
        for _ in range(3):
            engine.step(ghost, make_target(-5, 1))
        assert ghost.x == tunnel_map.width - 24


class TestUpdate:
    """Test per-tick update with effects."""

    def test_entangled_ghost_stands_still(self, make_engine, effects, corridor_map):
        engine = make_engine(corridor_map)
        ghost = make_ghost(GhostVariant.BLUE, 3, 1)
        effects.apply(ghost.handle, EffectKind.ENTANGLED, 3000)
        engine.update(ghost, make_target(10, 1))
        assert ghost.x == 96

    def test_entangled_red_still_teleports(self, clock, make_engine, effects, room_map):
        engine = make_engine(room_map)
        ghost = make_ghost(GhostVariant.RED, 1, 1)
        target = make_target(3, 3)
        clock.advance(15000)
        effects.apply(ghost.handle, EffectKind.ENTANGLED, 3000)
        engine.update(ghost, target)

        assert ghost.next_teleport_ms == 30000
        cell = room_map.cell_containing(ghost.x, ghost.y)
        assert (ghost.x, ghost.y) == room_map.cell_origin(cell)
        assert not overlaps(ghost.get_bounds(), target.get_bounds())

    def test_entangled_orange_still_lays_trap(self, clock, make_engine, effects, traps, room_map):
        engine = make_engine(room_map)
        ghost = make_ghost(GhostVariant.ORANGE, 2, 2, handle=3)
        clock.advance(15000)
        effects.apply(ghost.handle, EffectKind.ENTANGLED, 3000)
        engine.update(ghost, make_target(4, 4))

        assert (ghost.x, ghost.y) == (64, 64)
        assert len(traps) == 1
        assert ghost.next_trap_ms == 30000

    def test_frozen_ghost_steps_every_third_tick(self, clock, make_engine, effects, corridor_map):
        engine = make_engine(corridor_map)
        ghost = make_ghost(GhostVariant.BLUE, 3, 1)
        effects.apply(ghost.handle, EffectKind.FROZEN, 7000)
        positions = []
        for _ in range(6):
            clock.tick()
            engine.update(ghost, make_target(10, 1))
            positions.append(ghost.x)
        assert positions == [96, 96, 104, 104, 104, 112]

    def test_normal_ghost_steps_every_tick(self, clock, make_engine, corridor_map):
        engine = make_engine(corridor_map)
        ghost = make_ghost(GhostVariant.BLUE, 3, 1)
        for _ in range(3):
            clock.tick()
            engine.update(ghost, make_target(10, 1))
        assert ghost.x == 120


# ============================================================================
# Abilities
# ============================================================================


class TestTeleport:
    """Test the red ghost's teleport."""

    def test_no_teleport_before_cooldown(self, clock, make_engine, room_map):
        engine = make_engine(room_map)
        ghost = make_ghost(GhostVariant.RED, 1, 1)
        clock.advance(14950)
        engine.run_abilities(ghost, make_target(3, 3))
        assert (ghost.x, ghost.y) == (32, 32)
        assert ghost.next_teleport_ms == 15000

    def test_teleports_to_open_cell_away_from_target(self, clock, make_engine, room_map):
        engine = make_engine(room_map)
        target = make_target(3, 3)
        for _ in range(20):
            ghost = make_ghost(GhostVariant.RED, 1, 1, now_ms=clock.now_ms)
            clock.advance(15000)
            engine.run_abilities(ghost, target)
            cell = room_map.cell_containing(ghost.x, ghost.y)
            assert room_map.cell(*cell) == CellKind.OPEN
            assert (ghost.x, ghost.y) == room_map.cell_origin(cell)
            assert not overlaps(ghost.get_bounds(), target.get_bounds())
            assert ghost.next_teleport_ms == clock.now_ms + 15000

    def test_gives_up_when_nowhere_to_go(self, make_engine):
        tile_map = TileMap.from_layout(["XXX", "XPX", "XXX"], TILE_SIZE)
        engine = make_engine(tile_map)
        ghost = make_ghost(GhostVariant.RED, 1, 1)
        assert not engine.teleport(ghost, make_target(1, 1))
        assert (ghost.x, ghost.y) == (32, 32)

    def test_other_variants_never_teleport(self, clock, make_engine, room_map):
        engine = make_engine(room_map)
        ghost = make_ghost(GhostVariant.PINK, 1, 1)
        assert ghost.next_teleport_ms is None
        clock.advance(60000)
        engine.run_abilities(ghost, make_target(3, 3))
        assert (ghost.x, ghost.y) == (32, 32)


class TestTrapLaying:
    """Test periodic and death traps."""

    def test_orange_lays_entangle_trap_every_interval(self, clock, make_engine, traps, room_map):
        engine = make_engine(room_map)
        ghost = make_ghost(GhostVariant.ORANGE, 2, 2, handle=3)
        clock.advance(15000)
        engine.run_abilities(ghost, make_target(4, 4))

        assert len(traps) == 1
        trap = traps.active_traps[0]
        assert (trap.x, trap.y) == (64, 64)
        assert trap.kind == TrapKind.ENTANGLE
        assert trap.owner == 3
        assert trap.duration_ms == 10000
        assert ghost.placed_trap is trap
        assert ghost.next_trap_ms == 30000

    def test_trap_snaps_to_tile_under_center(self, make_engine, traps, room_map):
        engine = make_engine(room_map)
        ghost = make_ghost(GhostVariant.ORANGE, 2, 2)
        ghost.set_position(64 + 8, 64)
        trap = engine.lay_trap(ghost, TrapKind.ENTANGLE)
        assert (trap.x, trap.y) == (64, 64)

    @pytest.mark.parametrize("variant, kind", [
        (GhostVariant.ORANGE, TrapKind.ENTANGLE),
        (GhostVariant.BLUE, TrapKind.FREEZE),
    ])
    def test_death_trap(self, make_engine, traps, room_map, variant, kind):
        engine = make_engine(room_map)
        ghost = make_ghost(variant, 2, 2)
        trap = engine.on_eaten(ghost)
        assert trap.kind == kind
        assert (trap.x, trap.y) == (64, 64)
        assert not ghost.alive

    def test_red_leaves_no_death_trap(self, make_engine, traps, room_map):
        engine = make_engine(room_map)
        assert engine.on_eaten(make_ghost(GhostVariant.RED, 2, 2)) is None
        assert len(traps) == 0


# ============================================================================
# Lifecycle
# ============================================================================


class TestStrikes:
    """Test clone strikes and the pink shield."""

    def test_strike_scares_unshielded_ghost(self, make_engine, effects, room_map):
        engine = make_engine(room_map)
        ghost = make_ghost(GhostVariant.RED, 1, 1)
        assert engine.apply_strike(ghost)
        assert effects.remaining_ms(ghost.handle, EffectKind.SCARED) == 5000

    def test_pink_scared_on_third_strike(self, make_engine, effects, room_map):
        engine = make_engine(room_map)
        ghost = make_ghost(GhostVariant.PINK, 1, 1)
        assert not engine.apply_strike(ghost)
        assert ghost.shield == 2
        assert not engine.apply_strike(ghost)
        assert ghost.shield == 1
        assert not effects.is_active(ghost.handle, EffectKind.SCARED)

        assert engine.apply_strike(ghost)
        assert ghost.shield == 0
        assert effects.remaining_ms(ghost.handle, EffectKind.SCARED) == 15000

    def test_depleted_pink_scared_by_every_strike(self, clock, make_engine, effects, room_map):
        engine = make_engine(room_map)
        ghost = make_ghost(GhostVariant.PINK, 1, 1)
        ghost.shield = 0
        assert engine.apply_strike(ghost)
        clock.advance(20000)
        assert engine.apply_strike(ghost)
        assert effects.remaining_ms(ghost.handle, EffectKind.SCARED) == 15000

    def test_dead_ghost_ignores_strikes(self, make_engine, room_map):
        engine = make_engine(room_map)
        ghost = make_ghost(GhostVariant.RED, 1, 1)
        engine.on_eaten(ghost)
        assert not engine.apply_strike(ghost)


class TestRespawn:
    """Test death and respawn timing."""

    def test_respawns_after_exactly_thirty_seconds(self, clock, make_engine, effects, room_map):
        engine = make_engine(room_map)
        ghost = make_ghost(GhostVariant.RED, 1, 1, Direction.DOWN)
        ghost.face(Direction.LEFT)
        ghost.set_position(96, 96)
        effects.apply(ghost.handle, EffectKind.SCARED, 5000)
        engine.on_eaten(ghost)
        assert not effects.is_active(ghost.handle, EffectKind.SCARED)

        clock.advance(29999)
        engine.update(ghost, make_target(3, 3))
        assert not ghost.alive
        assert ghost.respawn_in_ms(clock.now_ms, engine.respawn_ms) == 1

        clock.advance(1)
        engine.update(ghost, make_target(3, 3))
        assert ghost.alive
        assert (ghost.x, ghost.y) == (32, 32)
        assert ghost.direction == Direction.DOWN

    def test_respawn_resets_abilities(self, clock, make_engine, room_map):
        engine = make_engine(room_map)
        ghost = make_ghost(GhostVariant.PINK, 1, 1)
        ghost.shield = 0
        engine.on_eaten(ghost)
        clock.advance(30000)
        engine.respawn(ghost)
        assert ghost.shield == 3

        red = make_ghost(GhostVariant.RED, 1, 1, handle=2)
        engine.on_eaten(red)
        clock.advance(30000)
        engine.respawn(red)
        assert red.next_teleport_ms == clock.now_ms + 15000

    def test_blue_respawns_frozen(self, clock, make_engine, effects, room_map):
        engine = make_engine(room_map)
        ghost = make_ghost(GhostVariant.BLUE, 1, 1, handle=4)
        engine.on_eaten(ghost)
        clock.advance(30000)
        engine.respawn(ghost)
        assert effects.remaining_ms(4, EffectKind.FROZEN) == 3000

    def test_return_to_spawn_skips_dead_ghosts(self, make_engine, effects, room_map):
        engine = make_engine(room_map)
        alive = make_ghost(GhostVariant.RED, 1, 1, Direction.UP, handle=1)
        dead = make_ghost(GhostVariant.PINK, 2, 2, handle=2)
        alive.set_position(128, 128)
        alive.face(Direction.RIGHT)
        effects.apply(1, EffectKind.FROZEN, 7000)
        dead.set_position(96, 96)
        engine.on_eaten(dead)

        engine.return_to_spawn([alive, dead])
        assert (alive.x, alive.y) == (32, 32)
        assert alive.direction == Direction.UP
        assert not effects.is_active(1, EffectKind.FROZEN)
        assert (dead.x, dead.y) == (96, 96)
