"""
GhostMaze models package.

Enumerations and read-only snapshot models for the GhostMaze game.
"""

from .enums import (
    CellKind,
    CollectibleKind,
    Command,
    Direction,
    EffectKind,
    GhostCondition,
    GhostVariant,
    TrapKind,
)
from .models import (
    CloneView,
    CollectibleView,
    EntityView,
    GhostView,
    PlayerView,
    RenderSnapshot,
    TrapView,
)

__all__ = [
    'CellKind',
    'CollectibleKind',
    'Command',
    'Direction',
    'EffectKind',
    'GhostCondition',
    'GhostVariant',
    'TrapKind',
    'CloneView',
    'CollectibleView',
    'EntityView',
    'GhostView',
    'PlayerView',
    'RenderSnapshot',
    'TrapView',
]
