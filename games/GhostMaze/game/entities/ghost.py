"""Ghost entity.

One record type for every ghost. The variant tag selects a GhostBehaviors
entry (see ghost_ai.py) describing the variant's detours and abilities;
the ability state below is what those behaviors consume at run time.
"""

from typing import TYPE_CHECKING, Optional, Tuple

from models import Direction, GhostVariant

from .entity import Mover

if TYPE_CHECKING:
    from ..ghost_ai import GhostBehaviors
    from ..traps import Trap


class Ghost(Mover):
    """Ghost with a variant tag, life state and ability state."""

    def __init__(
        self,
        handle: int,
        variant: GhostVariant,
        behaviors: 'GhostBehaviors',
        spawn: Tuple[float, float],
        spawn_direction: Direction,
        size: float,
        speed: float,
        now_ms: int = 0,
    ):
        """Initialize ghost alive at its spawn.

        Args:
            handle: Stable handle for side tables
            variant: Ghost variant (fixed for the ghost's lifetime)
            behaviors: Variant behaviors table entry
            spawn: Spawn position (top-left, pixels)
            spawn_direction: Direction restored on every respawn
            size: Edge length in pixels
            speed: Step length in pixels
            now_ms: Creation time, starts the ability cooldowns
        """
        super().__init__(spawn[0], spawn[1], size, size, spawn_direction, speed, handle)
        self._variant = variant
        self._behaviors = behaviors
        self._spawn = (float(spawn[0]), float(spawn[1]))
        self._spawn_direction = spawn_direction
        self._alive = True
        self._death_ms: Optional[int] = None

        self.shield = 0
        self.next_teleport_ms: Optional[int] = None
        self.next_trap_ms: Optional[int] = None
        self.placed_trap: Optional['Trap'] = None
        self.reset_abilities(now_ms)

    @property
    def variant(self) -> GhostVariant:
        return self._variant

    @property
    def behaviors(self) -> 'GhostBehaviors':
        return self._behaviors

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def death_ms(self) -> Optional[int]:
        """Time of death, or None while alive."""
        return self._death_ms

    @property
    def spawn(self) -> Tuple[float, float]:
        return self._spawn

    @property
    def spawn_direction(self) -> Direction:
        return self._spawn_direction

    def reset_abilities(self, now_ms: int) -> None:
        """Restore shield charges and restart ability cooldowns from now."""
        behaviors = self._behaviors
        self.shield = behaviors.shield_charges
        self.next_teleport_ms = (
            now_ms + behaviors.teleport_interval_ms
            if behaviors.teleport_interval_ms else None
        )
        self.next_trap_ms = (
            now_ms + behaviors.trap_interval_ms
            if behaviors.trap_kind and behaviors.trap_interval_ms else None
        )
        self.placed_trap = None

    def absorb_strike(self) -> bool:
        """Take a clone strike.

        Shielded ghosts lose one charge per strike; the strike that empties
        the shield, and every strike after it, gets through.

        Returns:
            True if the strike gets through (the ghost should be scared)
        """
        if self.shield > 0:
            self.shield -= 1
            return self.shield == 0
        return True

    def kill(self, now_ms: int) -> None:
        self._alive = False
        self._death_ms = now_ms

    def respawn_due(self, now_ms: int, delay_ms: int) -> bool:
        """True once a dead ghost has waited out the respawn delay."""
        return not self._alive and now_ms - self._death_ms >= delay_ms

    def respawn_in_ms(self, now_ms: int, delay_ms: int) -> int:
        """Milliseconds until respawn (0 while alive)."""
        if self._alive:
            return 0
        return max(0, delay_ms - (now_ms - self._death_ms))

    def return_to_spawn(self) -> None:
        """Move back to spawn facing the spawn direction."""
        self.set_position(*self._spawn)
        self.face(self._spawn_direction)
        self.reset_credit()

    def respawn(self, now_ms: int) -> None:
        """Come back to life at spawn with fresh ability state."""
        self._alive = True
        self._death_ms = None
        self.return_to_spawn()
        self.reset_abilities(now_ms)
