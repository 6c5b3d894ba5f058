"""Base entity classes.

Entity holds position and size. Mover adds a facing direction, a nominal
speed and fractional movement credit: each tick the credit grows by the
current speed multiplier and one full step is taken per whole unit. Frozen
movers therefore step every third tick and entangled movers never, while
positions stay on the step lattice that grid turns rely on.
"""

from fractions import Fraction
from typing import Optional, Tuple, Union

from models import Direction

Bounds = Tuple[float, float, float, float]
Multiplier = Union[int, Fraction]


class Entity:
    """Axis-aligned box on the board.

    Position is the top-left corner in pixels. Size never changes.
    """

    def __init__(self, x: float, y: float, width: float, height: float):
        """Initialize entity.

        Args:
            x: Left edge in pixels
            y: Top edge in pixels
            width: Width in pixels (must be positive)
            height: Height in pixels (must be positive)

        Raises:
            ValueError: If width or height is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f'Entity size must be positive, got {width}x{height}')
        self._x = float(x)
        self._y = float(y)
        self._width = float(width)
        self._height = float(height)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def center(self) -> Tuple[float, float]:
        return (self._x + self._width / 2, self._y + self._height / 2)

    def set_position(self, x: float, y: float) -> None:
        self._x = float(x)
        self._y = float(y)

    def get_bounds(self) -> Bounds:
        """Get bounds as (left, top, right, bottom)."""
        return (self._x, self._y, self._x + self._width, self._y + self._height)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self._x:.1f}, y={self._y:.1f})"


class Mover(Entity):
    """Entity that travels along a facing direction at a nominal speed."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        direction: Direction,
        speed: float,
        handle: Optional[int] = None,
    ):
        """Initialize mover.

        Args:
            x: Left edge in pixels
            y: Top edge in pixels
            width: Width in pixels
            height: Height in pixels
            direction: Initial facing direction
            speed: Nominal distance covered by one step, in pixels
            handle: Stable handle used by side tables (effects, traps)
        """
        super().__init__(x, y, width, height)
        self._direction = direction
        self._speed = speed
        self._handle = handle
        self._credit = Fraction(0)

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def handle(self) -> Optional[int]:
        return self._handle

    def face(self, direction: Direction) -> None:
        """Change facing direction. Position is untouched."""
        self._direction = direction

    def velocity(self, multiplier: Multiplier = 1) -> Tuple[float, float]:
        """Displacement per tick at the given speed multiplier."""
        dx, dy = self._direction.vector
        scale = self._speed * float(multiplier)
        return (dx * scale, dy * scale)

    def take_steps(self, multiplier: Multiplier) -> int:
        """Accrue one tick of movement credit and spend whole steps.

        Args:
            multiplier: Effective speed multiplier this tick (0, 1/3, 1, ...)

        Returns:
            Number of full steps to take this tick
        """
        self._credit += Fraction(multiplier)
        steps = int(self._credit)
        self._credit -= steps
        return steps

    def reset_credit(self) -> None:
        self._credit = Fraction(0)
