"""Timed status effects keyed by entity handle.

An effect is active while `now - start < duration`. Applying a kind that is
already present refreshes it (new start, new duration). Nothing reactivates
an expired effect except a fresh apply.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, List, Optional, Tuple

from mazechase.clock import SimulationClock
from mazechase.logging import get_logger
from models import EffectKind

from ..config import ENTANGLED_SPEED_MULTIPLIER, FROZEN_SPEED_MULTIPLIER
from .entities.entity import Multiplier

log = get_logger('ghostmaze')


@dataclass
class StatusEffect:
    """One timed effect on one entity."""
    handle: int
    kind: EffectKind
    start_ms: int
    duration_ms: int

    def is_active(self, now_ms: int) -> bool:
        return now_ms - self.start_ms < self.duration_ms

    def remaining_ms(self, now_ms: int) -> int:
        return max(0, self.duration_ms - (now_ms - self.start_ms))


class StatusEffectRegistry:
    """Side table of status effects, at most one per (handle, kind)."""

    def __init__(self, clock: SimulationClock):
        self._clock = clock
        self._effects: Dict[Tuple[int, EffectKind], StatusEffect] = {}

    def apply(self, handle: int, kind: EffectKind, duration_ms: int) -> StatusEffect:
        """Insert or refresh an effect starting now.

        Raises:
            ValueError: If duration_ms is not positive
        """
        if duration_ms <= 0:
            raise ValueError(f'Effect duration must be positive, got {duration_ms}')
        effect = StatusEffect(handle, kind, self._clock.now_ms, duration_ms)
        self._effects[(handle, kind)] = effect
        log.debug(f"Effect {kind.value} on {handle} for {duration_ms}ms")
        return effect

    def get(self, handle: int, kind: EffectKind) -> Optional[StatusEffect]:
        return self._effects.get((handle, kind))

    def is_active(self, handle: int, kind: EffectKind) -> bool:
        effect = self._effects.get((handle, kind))
        return effect is not None and effect.is_active(self._clock.now_ms)

    def remaining_ms(self, handle: int, kind: EffectKind) -> int:
        effect = self._effects.get((handle, kind))
        if effect is None:
            return 0
        return effect.remaining_ms(self._clock.now_ms)

    def remove(self, handle: int, kind: EffectKind) -> bool:
        """Drop one effect. Returns True if it was present."""
        return self._effects.pop((handle, kind), None) is not None

    def clear(self, handle: Optional[int] = None) -> None:
        """Drop every effect on one entity, or on all entities."""
        if handle is None:
            self._effects.clear()
            return
        for key in [key for key in self._effects if key[0] == handle]:
            del self._effects[key]

    def active_kinds(self, handle: int) -> Dict[EffectKind, int]:
        """Active effects on an entity with their remaining milliseconds."""
        now = self._clock.now_ms
        return {
            kind: effect.remaining_ms(now)
            for (owner, kind), effect in self._effects.items()
            if owner == handle and effect.is_active(now)
        }

    def speed_multiplier(self, handle: int) -> Multiplier:
        """Movement multiplier: Entangled stops, Frozen slows."""
        if self.is_active(handle, EffectKind.ENTANGLED):
            return ENTANGLED_SPEED_MULTIPLIER
        if self.is_active(handle, EffectKind.FROZEN):
            return FROZEN_SPEED_MULTIPLIER
        return Fraction(1)

    def sweep(self) -> List[StatusEffect]:
        """Remove expired effects and return them."""
        now = self._clock.now_ms
        expired = [effect for effect in self._effects.values() if not effect.is_active(now)]
        for effect in expired:
            del self._effects[(effect.handle, effect.kind)]
        return expired

    def __len__(self) -> int:
        return len(self._effects)
