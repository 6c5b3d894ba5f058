"""Trap subsystem.

Traps are one-tile hazards with a lifetime. The player consumes a trap by
touching it. Ghosts are affected once per trap, never by a trap they laid
themselves, and leave the trap in place.
"""

from typing import List, Optional, Set, Tuple

from mazechase.clock import SimulationClock
from mazechase.logging import get_logger
from models import EffectKind, TrapKind

from ..config import TRAP_EFFECTS
from .entities.entity import Bounds, Entity
from .physics.collision import overlaps

log = get_logger('traps')


class Trap(Entity):
    """A placed trap."""

    def __init__(
        self,
        trap_id: int,
        x: float,
        y: float,
        size: float,
        kind: TrapKind,
        start_ms: int,
        duration_ms: int,
        owner: Optional[int] = None,
    ):
        super().__init__(x, y, size, size)
        self.id = trap_id
        self.kind = kind
        self.start_ms = start_ms
        self.duration_ms = duration_ms
        self.owner = owner
        self.active = True
        self._touched: Set[int] = set()

    @property
    def effect(self) -> Tuple[EffectKind, int]:
        """(effect kind, effect duration) applied on contact."""
        return TRAP_EFFECTS[self.kind]

    def expired(self, now_ms: int) -> bool:
        return now_ms - self.start_ms >= self.duration_ms

    def remaining_ms(self, now_ms: int) -> int:
        return max(0, self.duration_ms - (now_ms - self.start_ms))

    def affects(self, handle: int) -> bool:
        """True if a ghost with this handle has yet to feel this trap."""
        return self.active and handle != self.owner and handle not in self._touched

    def mark_touched(self, handle: int) -> None:
        self._touched.add(handle)

    def deactivate(self) -> None:
        self.active = False

    def __repr__(self) -> str:
        return f"Trap(id={self.id}, kind={self.kind.value}, x={self.x:.0f}, y={self.y:.0f})"


class TrapManager:
    """Owns every trap on the board."""

    def __init__(self, clock: SimulationClock, tile_size: float):
        self._clock = clock
        self._tile_size = tile_size
        self._traps: List[Trap] = []
        self._next_id = 1

    def spawn_trap(
        self,
        x: float,
        y: float,
        kind: TrapKind,
        duration_ms: int,
        owner: Optional[int] = None,
    ) -> Trap:
        """Place a one-tile trap with its top-left corner at (x, y)."""
        trap = Trap(self._next_id, x, y, self._tile_size, kind,
                    self._clock.now_ms, duration_ms, owner)
        self._next_id += 1
        self._traps.append(trap)
        log.debug(f"Spawned {trap!r} for {duration_ms}ms (owner {owner})")
        return trap

    def sweep_expired(self) -> List[Trap]:
        """Drop expired and consumed traps. Returns the dropped traps."""
        now = self._clock.now_ms
        kept, dropped = [], []
        for trap in self._traps:
            (kept if trap.active and not trap.expired(now) else dropped).append(trap)
        self._traps = kept
        return dropped

    def contacts(self, bounds: Bounds) -> List[Trap]:
        """Every live trap overlapping the box."""
        now = self._clock.now_ms
        return [
            trap for trap in self._traps
            if trap.active and not trap.expired(now) and overlaps(bounds, trap.get_bounds())
        ]

    def check_contact(self, bounds: Bounds) -> Optional[Trap]:
        """First live trap overlapping the box, or None."""
        found = self.contacts(bounds)
        return found[0] if found else None

    @property
    def active_traps(self) -> List[Trap]:
        now = self._clock.now_ms
        return [trap for trap in self._traps if trap.active and not trap.expired(now)]

    def clear(self) -> None:
        self._traps.clear()

    def __len__(self) -> int:
        return len(self._traps)
