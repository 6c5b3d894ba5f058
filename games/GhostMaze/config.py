"""Configuration for GhostMaze.

Grid geometry, tick cadence, speeds, timers, probabilities, scoring and
colors. Level files can override the per-level values (lives, PowerPlus
count, portal row, clear policy); everything else is fixed here.
"""

from fractions import Fraction
from typing import Dict, Tuple

from models import EffectKind, GhostVariant, TrapKind

# Grid
TILE_SIZE: int = 32
GRID_COLUMNS: int = 19
GRID_ROWS: int = 21

# Tick cadence
TICK_MS: int = 50
MAX_TICKS_PER_UPDATE: int = 5  # Cap catch-up after a stalled frame
FRAME_RATE: int = 60

# Entity size (pixels)
ENTITY_SIZE: int = TILE_SIZE

# Movement (pixels per tick)
BASE_SPEED: int = TILE_SIZE // 4
PLAYER_SPEED: int = BASE_SPEED
GHOST_SPEED: int = BASE_SPEED
CLONE_SPEED_FACTOR: float = 1.5
CLONE_SPEED: float = BASE_SPEED * CLONE_SPEED_FACTOR
CLONE_SPIN_DEGREES: float = 30.0

# Effect speed multipliers
FROZEN_SPEED_MULTIPLIER: Fraction = Fraction(1, 3)
ENTANGLED_SPEED_MULTIPLIER: Fraction = Fraction(0)

# Effect durations (ms)
ENTANGLED_DURATION_MS: int = 3000
FROZEN_DURATION_MS: int = 7000
SCARED_DURATION_MS: int = 5000
SHIELD_BREAK_SCARED_MS: int = 15000
BLUE_THAW_MS: int = 3000

# Trap effects: trap kind -> (effect applied, effect duration)
TRAP_EFFECTS: Dict[TrapKind, Tuple[EffectKind, int]] = {
    TrapKind.ENTANGLE: (EffectKind.ENTANGLED, ENTANGLED_DURATION_MS),
    TrapKind.FREEZE: (EffectKind.FROZEN, FROZEN_DURATION_MS),
}
TRAP_DURATION_MS: int = 10000

# Ghost lifecycle and abilities
GHOST_RESPAWN_MS: int = 30000
TELEPORT_INTERVAL_MS: int = 15000
TRAP_INTERVAL_MS: int = 15000
PINK_SHIELD_CHARGES: int = 3
PLACEMENT_ATTEMPTS: int = 100

# Ghost decision probabilities
INTERSECTION_TURN_CHANCE: float = 0.60
RED_DETOUR_CHANCE: float = 0.10
PINK_SECONDARY_CHANCE: float = 0.12
ORANGE_DETOUR_CHANCE: float = 0.15

# Scoring
FOOD_POINTS: int = 10
POWER_PLUS_POINTS: int = 10
GHOST_EAT_POINTS: int = 200

# Level defaults
DEFAULT_LEVEL: str = 'classic'
DEFAULT_LIVES: int = 3
DEFAULT_POWER_PLUS: int = 9
FOOD_SIZE: int = 4
POWER_PLUS_SIZE: int = 8

# Default layout characters
LAYOUT_KEY: Dict[str, str] = {
    'X': 'wall',
    ' ': 'food',
    'O': 'portal',
    'P': 'player',
    'r': 'red',
    'p': 'pink',
    'o': 'orange',
    'b': 'blue',
}

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (0, 0, 0)
HUD_HEIGHT: int = 48

GHOST_COLORS: Dict[GhostVariant, Tuple[int, int, int]] = {
    GhostVariant.RED: (255, 40, 40),
    GhostVariant.PINK: (255, 150, 210),
    GhostVariant.ORANGE: (255, 170, 60),
    GhostVariant.BLUE: (70, 180, 255),
}
