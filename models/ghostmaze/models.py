"""
GhostMaze snapshot models.

Read-only views of the simulation published once per render frame. The
presentation layer only ever sees these; it never touches live entities.
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from mazechase.games.game_state import GameState
from ..primitives import Point2D, Rectangle
from .enums import (
    CollectibleKind,
    Direction,
    EffectKind,
    GhostCondition,
    GhostVariant,
    TrapKind,
)


class EntityView(BaseModel):
    """Position, size and facing of a moving entity.

    Attributes:
        position: Top-left corner in pixels
        width: Width in pixels (must be positive)
        height: Height in pixels (must be positive)
        direction: Facing direction
        velocity: Displacement per tick at the current effective speed
    """
    position: Point2D
    width: float
    height: float
    direction: Direction
    velocity: Point2D = Point2D(x=0.0, y=0.0)

    model_config = ConfigDict(frozen=True)

    @field_validator('width', 'height')
    @classmethod
    def validate_size(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f'Size must be positive, got {v}')
        return v

    @property
    def bounds(self) -> Rectangle:
        """Bounding rectangle for drawing."""
        return Rectangle(x=self.position.x, y=self.position.y,
                         width=self.width, height=self.height)


class PlayerView(EntityView):
    """Player agent state.

    Attributes:
        lives: Remaining lives (non-negative)
        score: Current score (non-negative)
        skill_charges: Unspent skill currency (non-negative)
        effects: Remaining milliseconds per active effect
    """
    lives: int
    score: int
    skill_charges: int
    effects: Dict[EffectKind, int] = Field(default_factory=dict)

    @field_validator('lives', 'score', 'skill_charges')
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f'Value must be non-negative, got {v}')
        return v


class GhostView(EntityView):
    """Ghost state summary.

    Attributes:
        handle: Stable entity handle
        variant: Ghost variant
        condition: NORMAL, SCARED or DEAD
        scared_ms: Remaining scared time (0 unless SCARED)
        respawn_ms: Time until respawn (0 unless DEAD)
        shield: Remaining shield charges (Pink only, otherwise 0)
        effects: Remaining milliseconds per active effect

    Examples:
        >>> view.status_label
        'scared 4s'
    """
    handle: int
    variant: GhostVariant
    condition: GhostCondition
    scared_ms: int = 0
    respawn_ms: int = 0
    shield: int = 0
    effects: Dict[EffectKind, int] = Field(default_factory=dict)

    @field_validator('scared_ms', 'respawn_ms', 'shield')
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f'Value must be non-negative, got {v}')
        return v

    @computed_field
    @property
    def status_label(self) -> str:
        """Short HUD label: 'normal', 'scared Ns', 'dead Ns' or 'shield N'."""
        if self.condition == GhostCondition.DEAD:
            return f"dead {_whole_seconds(self.respawn_ms)}s"
        if self.condition == GhostCondition.SCARED:
            return f"scared {_whole_seconds(self.scared_ms)}s"
        if self.shield > 0:
            return f"shield {self.shield}"
        return "normal"


def _whole_seconds(ms: int) -> int:
    """Round remaining milliseconds up to whole seconds for display."""
    return (ms + 999) // 1000


class TrapView(BaseModel):
    """An active trap.

    Attributes:
        position: Top-left corner in pixels
        size: Edge length in pixels (one tile)
        kind: ENTANGLE or FREEZE
        remaining_ms: Time until the trap expires
    """
    position: Point2D
    size: float
    kind: TrapKind
    remaining_ms: int

    model_config = ConfigDict(frozen=True)


class CloneView(BaseModel):
    """A flying clone.

    Attributes:
        position: Top-left corner in pixels
        size: Edge length in pixels
        direction: Travel direction
        rotation: Cosmetic spin angle in degrees [0, 360)
    """
    position: Point2D
    size: float
    direction: Direction
    rotation: float

    model_config = ConfigDict(frozen=True)


class CollectibleView(BaseModel):
    """A remaining collectible."""
    position: Point2D
    size: float
    kind: CollectibleKind

    model_config = ConfigDict(frozen=True)


class RenderSnapshot(BaseModel):
    """Everything the presentation layer needs for one frame.

    Walls are static and read once from the game's tile map.

    Attributes:
        state: Current GameState
        tick: Ticks simulated so far
        time_ms: Simulation time in milliseconds
        level_name: Display name of the level
        round: How many times the level has been cleared and reloaded, plus one
        player: Player view
        ghosts: One view per ghost, dead ones included
        clones: Flying clones
        traps: Active traps
        collectibles: Remaining collectibles
    """
    state: GameState
    tick: int
    time_ms: int
    level_name: str = ""
    round: int = 1
    player: PlayerView
    ghosts: List[GhostView] = Field(default_factory=list)
    clones: List[CloneView] = Field(default_factory=list)
    traps: List[TrapView] = Field(default_factory=list)
    collectibles: List[CollectibleView] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def food_remaining(self) -> int:
        return sum(1 for c in self.collectibles if c.kind == CollectibleKind.FOOD)

    @computed_field
    @property
    def power_plus_remaining(self) -> int:
        return sum(1 for c in self.collectibles if c.kind == CollectibleKind.POWER_PLUS)
