"""
GhostMaze enumerations.

Directions, ghost variants, effect and trap kinds, map cell kinds and the
semantic commands accepted from the input layer.
"""

from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """Facing/movement direction on the grid.

    Screen coordinates: y grows downwards, so UP is (0, -1).

    Attributes:
        UP: Towards row 0
        DOWN: Towards the last row
        LEFT: Towards column 0
        RIGHT: Towards the last column
    """
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def vector(self) -> Tuple[int, int]:
        """Unit (dx, dy) for this direction."""
        return _VECTORS[self]

    @property
    def opposite(self) -> 'Direction':
        return _OPPOSITES[self]

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)

    @property
    def angle(self) -> int:
        """Sprite rotation in degrees (clockwise from facing right)."""
        return _ANGLES[self]


_VECTORS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_ANGLES = {
    Direction.RIGHT: 0,
    Direction.DOWN: 90,
    Direction.LEFT: 180,
    Direction.UP: 270,
}


class GhostVariant(str, Enum):
    """Ghost variants, fixed at creation.

    Attributes:
        RED: Random detours, periodic teleport
        PINK: Secondary-axis detours, three-charge shield
        ORANGE: Random detours, lays entangle traps
        BLUE: Pure chaser, leaves a freeze trap on death
    """
    RED = "red"
    PINK = "pink"
    ORANGE = "orange"
    BLUE = "blue"


class EffectKind(str, Enum):
    """Timed status effects.

    Attributes:
        SCARED: Ghost flees and can be eaten
        FROZEN: Movement speed scaled to one third
        ENTANGLED: Movement stopped entirely
    """
    SCARED = "scared"
    FROZEN = "frozen"
    ENTANGLED = "entangled"


class TrapKind(str, Enum):
    """Trap kinds and the effect each applies on contact.

    Attributes:
        ENTANGLE: Applies ENTANGLED
        FREEZE: Applies FROZEN
    """
    ENTANGLE = "entangle"
    FREEZE = "freeze"


class CollectibleKind(str, Enum):
    """Collectible kinds.

    Attributes:
        FOOD: Regular pellet, points only
        POWER_PLUS: Skill pellet, grants one skill charge
    """
    FOOD = "food"
    POWER_PLUS = "power_plus"


class CellKind(str, Enum):
    """Static map cell kinds.

    Attributes:
        WALL: Impassable
        OPEN: Walkable
        PORTAL_OPEN: Walkable, never holds food (tunnel mouths, dead space)
    """
    WALL = "wall"
    OPEN = "open"
    PORTAL_OPEN = "portal_open"


class GhostCondition(str, Enum):
    """Ghost condition as seen by the presentation layer.

    Attributes:
        NORMAL: Alive and dangerous
        SCARED: Alive and edible
        DEAD: Waiting to respawn
    """
    NORMAL = "normal"
    SCARED = "scared"
    DEAD = "dead"


class Command(str, Enum):
    """Semantic commands produced by input sources.

    Attributes:
        TURN_UP: Steer up (queued until the turn is possible)
        TURN_DOWN: Steer down
        TURN_LEFT: Steer left
        TURN_RIGHT: Steer right
        ACTIVATE_SKILL: Spend one skill charge to fire a clone
        BREAK_ICE: Shake off the Frozen effect
        START_GAME: Leave the start screen
        RESTART_GAME: Start a fresh run
    """
    TURN_UP = "turn_up"
    TURN_DOWN = "turn_down"
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"
    ACTIVATE_SKILL = "activate_skill"
    BREAK_ICE = "break_ice"
    START_GAME = "start_game"
    RESTART_GAME = "restart_game"

    @property
    def direction(self) -> 'Direction | None':
        """Direction for turn commands, None for everything else."""
        return _TURN_DIRECTIONS.get(self)


_TURN_DIRECTIONS = {
    Command.TURN_UP: Direction.UP,
    Command.TURN_DOWN: Direction.DOWN,
    Command.TURN_LEFT: Direction.LEFT,
    Command.TURN_RIGHT: Direction.RIGHT,
}
