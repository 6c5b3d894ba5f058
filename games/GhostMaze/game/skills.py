"""Clone skill.

Spending one skill charge fires a clone of the player along its facing
direction. Clones fly straight, spin for show, and end on the first wall,
board edge or ghost they meet.
"""

from typing import List, Optional, Sequence

from mazechase.logging import get_logger

from ..config import CLONE_SPEED, CLONE_SPIN_DEGREES
from .entities.clone import Clone
from .entities.ghost import Ghost
from .entities.player import Player
from .physics.collision import attempt_move, entities_overlap
from .tile_map import TileMap

log = get_logger('skills')


class SkillSystem:
    """Owns the clones in flight."""

    def __init__(
        self,
        tile_map: TileMap,
        speed: float = CLONE_SPEED,
        spin_degrees: float = CLONE_SPIN_DEGREES,
    ):
        self._tile_map = tile_map
        self._speed = speed
        self._spin = spin_degrees
        self._clones: List[Clone] = []

    @property
    def clones(self) -> List[Clone]:
        return list(self._clones)

    def activate(self, player: Player) -> Optional[Clone]:
        """Spend a charge and fire a clone.

        Returns:
            The new clone, or None when the player has no charges
        """
        if not player.spend_skill_charge():
            return None
        clone = Clone(player.x, player.y, player.width, player.direction,
                      self._speed, self._spin)
        self._clones.append(clone)
        log.debug(f"Clone fired {player.direction.value} ({player.skill_charges} charges left)")
        return clone

    def advance(self, ghosts: Sequence[Ghost]) -> List[Ghost]:
        """Move every clone one tick.

        Args:
            ghosts: Ghosts on the board (dead ones are ignored)

        Returns:
            Ghosts struck this tick, one entry per strike
        """
        struck: List[Ghost] = []
        for clone in self._clones:
            clone.spin()
            moved = attempt_move(clone, self._tile_map)

            hit = next(
                (g for g in ghosts if g.alive and entities_overlap(clone, g)),
                None,
            )
            if hit is not None:
                struck.append(hit)
                clone.destroy()
            elif not moved or not self._tile_map.contains(clone.get_bounds()):
                clone.destroy()

        self._clones = [clone for clone in self._clones if clone.is_active]
        return struck

    def clear(self) -> None:
        self._clones.clear()
