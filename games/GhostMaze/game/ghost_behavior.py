"""Ghost behavior engine.

One movement algorithm shared by every ghost, parameterized by the
variant's GhostBehaviors entry:

1. At an intersection (more than one non-reverse direction free) turn to a
   random free direction with INTERSECTION_TURN_CHANCE.
2. Otherwise face the variant policy's preferred direction, reverse
   included.
3. Move. If the move is blocked pick a random free non-reverse direction,
   or reverse at a dead end.
4. Wrap through the portal row.

Abilities (teleport, periodic traps) run after movement on their own
cooldowns, also while the ghost is entangled. Lifecycle events (eaten, respawn, clone strikes) also live here
so the controller only has to decide when they happen.
"""

import random
from typing import List, Optional

from mazechase.clock import SimulationClock
from mazechase.logging import get_logger
from models import CellKind, EffectKind, TrapKind

from ..config import (
    GHOST_RESPAWN_MS,
    INTERSECTION_TURN_CHANCE,
    PLACEMENT_ATTEMPTS,
    TRAP_DURATION_MS,
)
from .effects import StatusEffectRegistry
from .entities.entity import Entity
from .entities.ghost import Ghost
from .ghost_ai import preferred_direction
from .physics.collision import attempt_move, free_directions, overlaps, wrap_portal
from .tile_map import TileMap
from .traps import Trap, TrapManager

log = get_logger('ghost_behavior')


class GhostBehaviorEngine:
    """Drives ghosts: movement decisions, abilities and lifecycle."""

    def __init__(
        self,
        tile_map: TileMap,
        effects: StatusEffectRegistry,
        traps: TrapManager,
        clock: SimulationClock,
        rng: random.Random,
        respawn_ms: int = GHOST_RESPAWN_MS,
    ):
        self._tile_map = tile_map
        self._effects = effects
        self._traps = traps
        self._clock = clock
        self._rng = rng
        self.respawn_ms = respawn_ms

    # =========================================================================
    # Per-tick update
    # =========================================================================

    def update(self, ghost: Ghost, target: Entity) -> None:
        """Advance one ghost by one tick.

        Dead ghosts only check their respawn timer. Entangled ghosts do not
        move but their ability cooldowns keep running. Frozen ghosts step at
        a third of the rate.

        Args:
            ghost: Ghost to advance
            target: Entity the ghost chases (or flees while scared)
        """
        now = self._clock.now_ms
        if not ghost.alive:
            if ghost.respawn_due(now, self.respawn_ms):
                self.respawn(ghost)
            return

        if not self._effects.is_active(ghost.handle, EffectKind.ENTANGLED):
            steps = ghost.take_steps(self._effects.speed_multiplier(ghost.handle))
            for _ in range(steps):
                self.step(ghost, target)

        self.run_abilities(ghost, target)

    def step(self, ghost: Ghost, target: Entity) -> bool:
        """Take one movement step. Returns True if the ghost moved."""
        rng = self._rng
        tile_map = self._tile_map
        reverse = ghost.direction.opposite
        free = free_directions(ghost, tile_map, exclude=(reverse,))

        if len(free) > 1 and rng.random() < INTERSECTION_TURN_CHANCE:
            ghost.face(rng.choice([d for d in free if d != ghost.direction]))
        else:
            gx, gy = ghost.center
            tx, ty = target.center
            scared = self._effects.is_active(ghost.handle, EffectKind.SCARED)
            ghost.face(preferred_direction(ghost.behaviors, (tx - gx, ty - gy), scared, rng))

        moved = attempt_move(ghost, tile_map)
        if not moved:
            # free never holds the reverse of the direction the step began with
            options = [d for d in free if d != ghost.direction]
            ghost.face(rng.choice(options) if options else reverse)
            moved = attempt_move(ghost, tile_map)

        wrap_portal(ghost, tile_map)
        return moved

    def run_abilities(self, ghost: Ghost, target: Entity) -> None:
        """Fire teleport and periodic trap abilities whose cooldown is up."""
        now = self._clock.now_ms
        behaviors = ghost.behaviors

        if ghost.next_teleport_ms is not None and now >= ghost.next_teleport_ms:
            self.teleport(ghost, target)
            ghost.next_teleport_ms = now + behaviors.teleport_interval_ms

        if ghost.next_trap_ms is not None and now >= ghost.next_trap_ms:
            self.lay_trap(ghost, behaviors.trap_kind)
            ghost.next_trap_ms = now + behaviors.trap_interval_ms

    # =========================================================================
    # Abilities
    # =========================================================================

    def teleport(self, ghost: Ghost, avoid: Entity) -> bool:
        """Jump to a random open cell that does not overlap `avoid`.

        Gives up after PLACEMENT_ATTEMPTS tries and leaves the ghost where
        it is.

        Returns:
            True if the ghost moved
        """
        tile_map = self._tile_map
        avoid_bounds = avoid.get_bounds()
        for _ in range(PLACEMENT_ATTEMPTS):
            col = self._rng.randrange(tile_map.columns)
            row = self._rng.randrange(tile_map.rows)
            if tile_map.cell(col, row) != CellKind.OPEN:
                continue
            x, y = tile_map.cell_origin((col, row))
            if overlaps((x, y, x + ghost.width, y + ghost.height), avoid_bounds):
                continue
            ghost.set_position(x, y)
            ghost.reset_credit()
            log.debug(f"{ghost.variant.value} ghost teleported to ({col}, {row})")
            return True

        log.debug(f"{ghost.variant.value} ghost found no teleport target")
        return False

    def lay_trap(self, ghost: Ghost, kind: TrapKind) -> Trap:
        """Place a trap on the tile under the ghost's center."""
        cell = self._tile_map.cell_containing(*ghost.center)
        x, y = self._tile_map.cell_origin(cell)
        trap = self._traps.spawn_trap(x, y, kind, TRAP_DURATION_MS, owner=ghost.handle)
        ghost.placed_trap = trap
        return trap

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def apply_strike(self, ghost: Ghost) -> bool:
        """Resolve a clone strike.

        Returns:
            True if the ghost became scared
        """
        if not ghost.alive:
            return False
        if not ghost.absorb_strike():
            log.debug(f"{ghost.variant.value} ghost shield absorbed strike ({ghost.shield} left)")
            return False
        self._effects.apply(ghost.handle, EffectKind.SCARED, ghost.behaviors.strike_scared_ms)
        return True

    def on_eaten(self, ghost: Ghost) -> Optional[Trap]:
        """Kill a ghost and run its death behavior.

        Returns:
            Trap dropped at the death tile, if the variant drops one
        """
        trap = None
        if ghost.behaviors.death_trap_kind is not None:
            trap = self.lay_trap(ghost, ghost.behaviors.death_trap_kind)
        ghost.kill(self._clock.now_ms)
        self._effects.clear(ghost.handle)
        return trap

    def respawn(self, ghost: Ghost) -> None:
        """Bring a dead ghost back at its spawn."""
        ghost.respawn(self._clock.now_ms)
        self._effects.clear(ghost.handle)
        if ghost.behaviors.thaw_ms:
            self._effects.apply(ghost.handle, EffectKind.FROZEN, ghost.behaviors.thaw_ms)
        log.info(f"{ghost.variant.value} ghost respawned")

    def return_to_spawn(self, ghosts: List[Ghost]) -> None:
        """Send living ghosts home and clear their effects."""
        for ghost in ghosts:
            if ghost.alive:
                ghost.return_to_spawn()
                self._effects.clear(ghost.handle)
