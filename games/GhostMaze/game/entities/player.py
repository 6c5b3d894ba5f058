"""Player agent.

The player keeps moving along its facing direction once started. Turn
requests that cannot be taken immediately are queued and retried every
tick, so a turn pressed just before an intersection is taken on arrival.
"""

from typing import Optional, Tuple

from models import Direction

from .entity import Mover


class Player(Mover):
    """Player-controlled agent with lives, score and skill charges."""

    def __init__(
        self,
        spawn: Tuple[float, float],
        size: float,
        speed: float,
        lives: int,
        handle: int = 0,
    ):
        """Initialize player at its spawn point, standing still facing right.

        Args:
            spawn: Spawn position (top-left, pixels)
            size: Edge length in pixels
            speed: Step length in pixels
            lives: Starting lives (must be positive)
            handle: Stable handle for side tables

        Raises:
            ValueError: If lives is not positive
        """
        if lives <= 0:
            raise ValueError(f'Lives must be positive, got {lives}')
        super().__init__(spawn[0], spawn[1], size, size, Direction.RIGHT, speed, handle)
        self._spawn = (float(spawn[0]), float(spawn[1]))
        self._lives = lives
        self._score = 0
        self._skill_charges = 0
        self._next_direction: Optional[Direction] = None
        self._moving = False

    @property
    def lives(self) -> int:
        return self._lives

    @property
    def score(self) -> int:
        return self._score

    @property
    def skill_charges(self) -> int:
        return self._skill_charges

    @property
    def next_direction(self) -> Optional[Direction]:
        """Queued turn, or None."""
        return self._next_direction

    @property
    def moving(self) -> bool:
        """False until the first turn is taken after a (re)spawn."""
        return self._moving

    @property
    def spawn(self) -> Tuple[float, float]:
        return self._spawn

    def queue_turn(self, direction: Direction) -> None:
        self._next_direction = direction

    def take_turn(self, direction: Direction) -> None:
        """Face a new direction and start moving; clears the queue."""
        self.face(direction)
        self._next_direction = None
        self._moving = True

    def add_score(self, points: int) -> None:
        self._score += points

    def add_skill_charge(self, count: int = 1) -> None:
        self._skill_charges += count

    def spend_skill_charge(self) -> bool:
        """Spend one charge. Returns False (and changes nothing) if none left."""
        if self._skill_charges <= 0:
            return False
        self._skill_charges -= 1
        return True

    def reset_skill_charges(self) -> None:
        self._skill_charges = 0

    def lose_life(self) -> int:
        """Remove one life (never below zero). Returns lives left."""
        self._lives = max(0, self._lives - 1)
        return self._lives

    def return_to_spawn(self) -> None:
        """Stand still at the spawn point, facing right, with no queued turn."""
        self.set_position(*self._spawn)
        self.face(Direction.RIGHT)
        self._next_direction = None
        self._moving = False
        self.reset_credit()
