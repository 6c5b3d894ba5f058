"""GhostMaze collision detection and movement resolution."""

from .collision import (
    overlaps,
    entities_overlap,
    moved_bounds,
    can_travel,
    attempt_move,
    free_directions,
    wrap_portal,
)

__all__ = [
    'overlaps',
    'entities_overlap',
    'moved_bounds',
    'can_travel',
    'attempt_move',
    'free_directions',
    'wrap_portal',
]
