"""Clone projectile fired by the player's skill."""

from models import Direction

from .entity import Mover


class Clone(Mover):
    """Short-lived copy of the player flying in a straight line.

    The rotation angle is cosmetic: it starts at the facing angle and spins
    a fixed amount every tick.
    """

    def __init__(
        self,
        x: float,
        y: float,
        size: float,
        direction: Direction,
        speed: float,
        spin_degrees: float,
    ):
        super().__init__(x, y, size, size, direction, speed)
        self._rotation = float(direction.angle)
        self._spin = spin_degrees
        self._active = True

    @property
    def rotation(self) -> float:
        """Current spin angle in degrees [0, 360)."""
        return self._rotation

    @property
    def is_active(self) -> bool:
        return self._active

    def spin(self) -> None:
        self._rotation = (self._rotation + self._spin) % 360.0

    def destroy(self) -> None:
        self._active = False
