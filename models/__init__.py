"""
Unified models library for mazechase.

This package provides the Pydantic data models used across the system:
- Primitives: Basic geometric types (Point2D, Vector2D, Rectangle)
- GhostMaze: Game enums and read-only render snapshot models

Usage:
    >>> from models import Point2D, Direction, RenderSnapshot
    >>> from models.ghostmaze import GhostView
"""

# ============================================================================
# Primitives (basic types used everywhere)
# ============================================================================
from .primitives import (
    Point2D,
    Vector2D,  # Alias for Point2D
    Rectangle,
)

# ============================================================================
# GhostMaze models
# ============================================================================
from .ghostmaze import (
    CellKind,
    CollectibleKind,
    Command,
    Direction,
    EffectKind,
    GhostCondition,
    GhostVariant,
    TrapKind,
    CloneView,
    CollectibleView,
    EntityView,
    GhostView,
    PlayerView,
    RenderSnapshot,
    TrapView,
)

__all__ = [
    # Primitives
    'Point2D',
    'Vector2D',
    'Rectangle',
    # GhostMaze
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
