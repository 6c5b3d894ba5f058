"""Geometric skin - simple shapes, no assets."""

import math
from typing import TYPE_CHECKING, List, Optional, Tuple

import pygame

from mazechase.games import GameState
from models import (
    CloneView,
    CollectibleKind,
    CollectibleView,
    EffectKind,
    GhostCondition,
    GhostView,
    PlayerView,
    RenderSnapshot,
    TrapKind,
    TrapView,
)

from .base import GhostMazeSkin
from ...config import GHOST_COLORS, HUD_HEIGHT

if TYPE_CHECKING:
    from ..tile_map import TileMap

Color = Tuple[int, int, int]


class GeometricSkin(GhostMazeSkin):
    """Renders the maze with flat shapes.

    - Walls: Blue tiles
    - Player: Yellow wedge facing its direction
    - Ghosts: Colored domes; scared ghosts turn dark blue, dead ones show
      only their outline
    - Traps: Grey web (entangle) or pale blue tile (freeze)
    - Clones: Spinning yellow squares
    """

    NAME = "geometric"
    DESCRIPTION = "Flat shapes, no assets"

    WALL_COLOR = (33, 33, 222)
    FOOD_COLOR = (255, 184, 151)
    POWER_PLUS_COLOR = (255, 255, 255)
    PLAYER_COLOR = (255, 230, 0)
    FROZEN_TINT = (170, 220, 255)
    SCARED_COLOR = (40, 40, 200)
    ENTANGLE_COLOR = (180, 180, 180)
    FREEZE_COLOR = (150, 210, 255)
    HUD_COLOR = (255, 255, 255)
    OVERLAY_COLOR = (255, 255, 100)

    def __init__(self):
        self._font: Optional[pygame.font.Font] = None
        self._big_font: Optional[pygame.font.Font] = None

    def _ensure_font(self) -> None:
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 24)
            self._big_font = pygame.font.Font(None, 56)

    def render_walls(self, screen: pygame.Surface, tile_map: 'TileMap') -> None:
        size = tile_map.tile_size
        for cell in tile_map.wall_cells():
            x, y = tile_map.cell_origin(cell)
            pygame.draw.rect(screen, self.WALL_COLOR, (x, y, size, size))

    def render_collectible(self, screen: pygame.Surface, item: CollectibleView) -> None:
        color = self.FOOD_COLOR if item.kind == CollectibleKind.FOOD else self.POWER_PLUS_COLOR
        center = (int(item.position.x + item.size / 2), int(item.position.y + item.size / 2))
        pygame.draw.circle(screen, color, center, max(1, int(item.size / 2)))

    def render_trap(self, screen: pygame.Surface, trap: TrapView) -> None:
        x, y, size = trap.position.x, trap.position.y, trap.size
        if trap.kind == TrapKind.FREEZE:
            pygame.draw.rect(screen, self.FREEZE_COLOR, (x + 2, y + 2, size - 4, size - 4), 2)
            return
        # Entangle: a cross-hatched web
        for i in range(1, 4):
            offset = size * i / 4
            pygame.draw.line(screen, self.ENTANGLE_COLOR, (x + offset, y), (x + offset, y + size))
            pygame.draw.line(screen, self.ENTANGLE_COLOR, (x, y + offset), (x + size, y + offset))

    def render_player(self, screen: pygame.Surface, player: PlayerView) -> None:
        radius = player.width / 2
        cx = player.position.x + radius
        cy = player.position.y + radius
        color = self.FROZEN_TINT if EffectKind.FROZEN in player.effects else self.PLAYER_COLOR

        # Wedge with a 60 degree mouth opening along the facing direction
        facing = math.radians(player.direction.angle)
        points = [(cx, cy)]
        for step in range(13):
            angle = facing + math.radians(30 + step * 25)
            points.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
        pygame.draw.polygon(screen, color, points)

        if EffectKind.ENTANGLED in player.effects:
            pygame.draw.circle(screen, self.ENTANGLE_COLOR, (int(cx), int(cy)), int(radius), 2)

    def render_ghost(self, screen: pygame.Surface, ghost: GhostView) -> None:
        x, y = ghost.position.x, ghost.position.y
        w, h = ghost.width, ghost.height
        color = GHOST_COLORS.get(ghost.variant, (255, 255, 255))

        if ghost.condition == GhostCondition.DEAD:
            return
        if ghost.condition == GhostCondition.SCARED:
            color = self.SCARED_COLOR

        pygame.draw.circle(screen, color, (int(x + w / 2), int(y + h / 2)), int(w / 2))
        pygame.draw.rect(screen, color, (x, y + h / 2, w, h / 2))

        if EffectKind.FROZEN in ghost.effects:
            pygame.draw.rect(screen, self.FROZEN_TINT, (x, y, w, h), 2)
        if ghost.shield > 0:
            pygame.draw.circle(screen, self.HUD_COLOR, (int(x + w / 2), int(y + h / 2)),
                               int(w / 2) + 2, 1)

    def render_clone(self, screen: pygame.Surface, clone: CloneView) -> None:
        half = clone.size / 2
        cx = clone.position.x + half
        cy = clone.position.y + half
        points = []
        for corner in range(4):
            angle = math.radians(clone.rotation + 45 + corner * 90)
            points.append((cx + half * math.cos(angle), cy + half * math.sin(angle)))
        pygame.draw.polygon(screen, self.PLAYER_COLOR, points, 2)

    def render_hud(self, screen: pygame.Surface, snapshot: RenderSnapshot, tile_map: 'TileMap') -> None:
        self._ensure_font()
        top = tile_map.height + 4
        player = snapshot.player

        left = (f"Score: {player.score}   Lives: {player.lives}   "
                f"Charges: {player.skill_charges}")
        screen.blit(self._font.render(left, True, self.HUD_COLOR), (8, top))

        level = f"{snapshot.level_name}  round {snapshot.round}"
        text = self._font.render(level, True, self.HUD_COLOR)
        screen.blit(text, text.get_rect(topright=(screen.get_width() - 8, top)))

        statuses: List[str] = [f"{g.variant.value}: {g.status_label}" for g in snapshot.ghosts]
        statuses += [f"{kind.value} {(ms + 999) // 1000}s" for kind, ms in player.effects.items()]
        line = self._font.render("   ".join(statuses), True, self.HUD_COLOR)
        screen.blit(line, (8, top + HUD_HEIGHT // 2))

        overlay = {
            GameState.START: "Press ENTER to start",
            GameState.GAME_OVER: "GAME OVER - press R",
            GameState.WON: "YOU WIN - press R",
        }.get(snapshot.state)
        if overlay:
            text = self._big_font.render(overlay, True, self.OVERLAY_COLOR)
            screen.blit(text, text.get_rect(center=(tile_map.width // 2, tile_map.height // 2)))
