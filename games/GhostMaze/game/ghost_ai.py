"""Per-variant ghost behaviors and direction policies.

Every ghost shares one movement algorithm (see ghost_behavior.py). What
differs per variant lives in a GhostBehaviors table entry: how the ghost
sometimes deviates from a straight chase, and which abilities it has.

Policies look at the delta between the ghost's center and the player's
center and pick the axis of greater magnitude, ties going vertical. A
scared ghost always picks the opposite direction and skips its detour.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from models import Direction, GhostVariant, TrapKind

from ..config import (
    BLUE_THAW_MS,
    ORANGE_DETOUR_CHANCE,
    PINK_SECONDARY_CHANCE,
    PINK_SHIELD_CHARGES,
    RED_DETOUR_CHANCE,
    SCARED_DURATION_MS,
    SHIELD_BREAK_SCARED_MS,
    TELEPORT_INTERVAL_MS,
    TRAP_INTERVAL_MS,
)

Delta = Tuple[float, float]


class DetourKind(str, Enum):
    """How a variant deviates from the straight chase.

    Attributes:
        NONE: Always follow the chase/flee direction
        RANDOM: Pick any direction at random
        SECONDARY: Use the axis of smaller magnitude instead
    """
    NONE = "none"
    RANDOM = "random"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class GhostBehaviors:
    """Static behavior table entry for one ghost variant.

    Attributes:
        detour: Kind of deviation from the chase direction
        detour_chance: Probability of a deviation per decision
        shield_charges: Clone strikes absorbed before the ghost is scared
        strike_scared_ms: Scared duration from a clone strike
        teleport_interval_ms: Teleport cooldown, None if the variant cannot teleport
        trap_kind: Trap laid periodically, None if the variant lays no traps
        trap_interval_ms: Periodic trap cooldown
        death_trap_kind: Trap dropped where the ghost dies, if any
        thaw_ms: Frozen duration applied on respawn (0 for none)
    """
    detour: DetourKind = DetourKind.NONE
    detour_chance: float = 0.0
    shield_charges: int = 0
    strike_scared_ms: int = SCARED_DURATION_MS
    teleport_interval_ms: Optional[int] = None
    trap_kind: Optional[TrapKind] = None
    trap_interval_ms: Optional[int] = None
    death_trap_kind: Optional[TrapKind] = None
    thaw_ms: int = 0


VARIANT_BEHAVIORS: Dict[GhostVariant, GhostBehaviors] = {
    GhostVariant.RED: GhostBehaviors(
        detour=DetourKind.RANDOM,
        detour_chance=RED_DETOUR_CHANCE,
        teleport_interval_ms=TELEPORT_INTERVAL_MS,
    ),
    GhostVariant.PINK: GhostBehaviors(
        detour=DetourKind.SECONDARY,
        detour_chance=PINK_SECONDARY_CHANCE,
        shield_charges=PINK_SHIELD_CHARGES,
        strike_scared_ms=SHIELD_BREAK_SCARED_MS,
    ),
    GhostVariant.ORANGE: GhostBehaviors(
        detour=DetourKind.RANDOM,
        detour_chance=ORANGE_DETOUR_CHANCE,
        trap_kind=TrapKind.ENTANGLE,
        trap_interval_ms=TRAP_INTERVAL_MS,
        death_trap_kind=TrapKind.ENTANGLE,
    ),
    GhostVariant.BLUE: GhostBehaviors(
        death_trap_kind=TrapKind.FREEZE,
        thaw_ms=BLUE_THAW_MS,
    ),
}


def behaviors_for(variant: GhostVariant) -> GhostBehaviors:
    return VARIANT_BEHAVIORS[variant]


def chase_direction(delta: Delta) -> Direction:
    """Direction toward the target along the dominant axis."""
    dx, dy = delta
    if abs(dx) > abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP


def flee_direction(delta: Delta) -> Direction:
    """Direction away from the target along the dominant axis."""
    return chase_direction(delta).opposite


def secondary_direction(delta: Delta) -> Direction:
    """Direction toward the target along the minor axis."""
    dx, dy = delta
    if abs(dx) > abs(dy):
        return Direction.DOWN if dy > 0 else Direction.UP
    return Direction.RIGHT if dx > 0 else Direction.LEFT


def _random_detour(delta: Delta, rng: random.Random) -> Direction:
    return rng.choice(list(Direction))


def _secondary_detour(delta: Delta, rng: random.Random) -> Direction:
    return secondary_direction(delta)


DETOUR_POLICIES: Dict[DetourKind, Callable[[Delta, random.Random], Direction]] = {
    DetourKind.RANDOM: _random_detour,
    DetourKind.SECONDARY: _secondary_detour,
}


def preferred_direction(
    behaviors: GhostBehaviors,
    delta: Delta,
    scared: bool,
    rng: random.Random,
) -> Direction:
    """Pick the direction a ghost would like to take this decision.

    Args:
        behaviors: The ghost's variant behaviors
        delta: Player center minus ghost center
        scared: True while the ghost flees
        rng: Random source

    Returns:
        Preferred direction (not yet checked against walls)
    """
    # Fleeing takes no detours
    if scared:
        return flee_direction(delta)

    detour = DETOUR_POLICIES.get(behaviors.detour)
    if detour is not None and rng.random() < behaviors.detour_chance:
        return detour(delta, rng)
    return chase_direction(delta)
