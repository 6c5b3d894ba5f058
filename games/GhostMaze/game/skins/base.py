"""Base class for GhostMaze skins.

Skins handle ALL rendering - the game only manages state. A skin reads a
RenderSnapshot plus the static tile map and never touches live entities.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pygame

from models import CloneView, CollectibleView, GhostView, PlayerView, RenderSnapshot, TrapView

if TYPE_CHECKING:
    from ..tile_map import TileMap


class GhostMazeSkin(ABC):
    """Base class for game skins.

    render() draws one frame in layer order; subclasses fill in the
    per-element methods.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    def render(self, screen: pygame.Surface, snapshot: RenderSnapshot, tile_map: 'TileMap') -> None:
        """Draw a full frame.

        Args:
            screen: Pygame surface to draw on
            snapshot: State to draw
            tile_map: Static walls
        """
        self.render_walls(screen, tile_map)
        for item in snapshot.collectibles:
            self.render_collectible(screen, item)
        for trap in snapshot.traps:
            self.render_trap(screen, trap)
        for ghost in snapshot.ghosts:
            self.render_ghost(screen, ghost)
        for clone in snapshot.clones:
            self.render_clone(screen, clone)
        self.render_player(screen, snapshot.player)
        self.render_hud(screen, snapshot, tile_map)

    @abstractmethod
    def render_walls(self, screen: pygame.Surface, tile_map: 'TileMap') -> None:
        pass

    @abstractmethod
    def render_player(self, screen: pygame.Surface, player: PlayerView) -> None:
        pass

    @abstractmethod
    def render_ghost(self, screen: pygame.Surface, ghost: GhostView) -> None:
        """Render a ghost, including dead ones (as a respawn marker or not at all)."""
        pass

    def render_collectible(self, screen: pygame.Surface, item: CollectibleView) -> None:
        pass

    def render_trap(self, screen: pygame.Surface, trap: TrapView) -> None:
        pass

    def render_clone(self, screen: pygame.Surface, clone: CloneView) -> None:
        pass

    def render_hud(self, screen: pygame.Surface, snapshot: RenderSnapshot, tile_map: 'TileMap') -> None:
        """Render the heads-up display below the board."""
        pass
