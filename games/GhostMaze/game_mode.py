"""GhostMaze - maze chase with four ghosts that fight back.

Features:
- Fixed 50 ms simulation tick driven by an injectable clock
- Ghost variants with shields, teleports and traps
- Clone skill fired with PowerPlus charges
- YAML levels with ASCII layouts
"""

import random
from pathlib import Path
from typing import Any, Dict, List, Optional

import pygame

from mazechase.clock import SimulationClock
from mazechase.games import BaseGame, GameState
from mazechase.games.input import InputEvent
from mazechase.logging import emit_record, get_logger
from models import (
    CloneView,
    CollectibleView,
    Command,
    Direction,
    EffectKind,
    GhostCondition,
    GhostVariant,
    GhostView,
    PlayerView,
    Point2D,
    RenderSnapshot,
    TrapView,
)

from .config import (
    BACKGROUND_COLOR,
    DEFAULT_LEVEL,
    ENTITY_SIZE,
    GHOST_EAT_POINTS,
    GHOST_SPEED,
    MAX_TICKS_PER_UPDATE,
    PLAYER_SPEED,
    TICK_MS,
)
from .game.effects import StatusEffectRegistry
from .game.entities import Collectible, Ghost, Player, create_collectibles
from .game.ghost_ai import behaviors_for
from .game.ghost_behavior import GhostBehaviorEngine
from .game.level_loader import ClearPolicy, GhostMazeLevelLoader, LevelData
from .game.physics.collision import attempt_move, can_travel, entities_overlap, wrap_portal
from .game.skills import SkillSystem
from .game.skins import GeometricSkin, GhostMazeSkin
from .game.tile_map import TileMap
from .game.traps import TrapManager

log = get_logger('ghostmaze')

PLAYER_HANDLE = 0

# Ghost creation order; handles follow it starting at 1
GHOST_ORDER = (GhostVariant.RED, GhostVariant.PINK, GhostVariant.ORANGE, GhostVariant.BLUE)


class GhostMazeMode(BaseGame):
    """GhostMaze game mode.

    Owns every piece of mutable simulation state and runs one tick at a
    time in a fixed order: player, ghosts, clones, player-ghost contacts,
    traps, collectibles, sweeps, clear check.
    """

    # Game metadata
    NAME = "Ghost Maze"
    DESCRIPTION = "Eat every pellet while four ghosts with special powers hunt you."
    VERSION = "1.0.0"
    AUTHOR = "mazechase"

    # Enable level support
    LEVELS_DIR = Path(__file__).parent / 'levels'

    # CLI arguments
    ARGUMENTS = [
        {
            'name': '--skin',
            'type': str,
            'default': 'geometric',
            'choices': ['geometric'],
            'help': 'Visual skin (geometric=shapes)'
        },
        {
            'name': '--lives',
            'type': int,
            'default': None,
            'help': 'Starting lives (default: from level)'
        },
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Random seed for reproducible ghosts and PowerPlus placement'
        },
        {
            'name': '--on-clear',
            'type': str,
            'default': None,
            'choices': [policy.value for policy in ClearPolicy],
            'help': 'What clearing the board does (default: from level)'
        },
    ]

    # Skin registry
    SKINS: Dict[str, type] = {}

    def __init__(
        self,
        skin: str = 'geometric',
        lives: Optional[int] = None,
        seed: Optional[int] = None,
        on_clear: Optional[str] = None,
        clock: Optional[SimulationClock] = None,
        rng: Optional[random.Random] = None,
        level: Optional[str] = None,
        **kwargs,
    ):
        """Initialize GhostMaze.

        Args:
            skin: Visual skin to use
            lives: Starting lives, overriding the level's value
            seed: Seed for the game's random source (ignored if rng is given)
            on_clear: 'reload' or 'win', overriding the level's policy
            clock: Simulation clock (a fresh 50 ms clock by default)
            rng: Random source (a seeded random.Random by default)
            level: Level slug or path (default: classic)
            **kwargs: Base game args

        Raises:
            ValueError: If lives is not positive or on_clear is unknown
        """
        if lives is not None and lives <= 0:
            raise ValueError(f'Lives must be positive, got {lives}')

        # Initialize attributes BEFORE super().__init__() because it may call _apply_level_config
        self._lives_override = lives
        self._on_clear_override = ClearPolicy(on_clear) if on_clear else None
        self._clock = clock or SimulationClock(tick_ms=TICK_MS)
        self._rng = rng or random.Random(seed)

        self._internal_state = GameState.START
        self._accumulator_ms = 0.0
        self._round = 1
        self._level: Optional[LevelData] = None

        self._tile_map: Optional[TileMap] = None
        self._player: Optional[Player] = None
        self._ghosts: List[Ghost] = []
        self._collectibles: List[Collectible] = []

        # Initialize skin registry
        self.SKINS = {
            'geometric': GeometricSkin,
        }
        skin_class = self.SKINS.get(skin, GeometricSkin)
        self._skin: GhostMazeSkin = skin_class()

        super().__init__(level=level or DEFAULT_LEVEL, **kwargs)

        if self._level is None:
            raise FileNotFoundError(f"Could not load level '{level or DEFAULT_LEVEL}'")

    # =========================================================================
    # Level support
    # =========================================================================

    def _create_level_loader(self) -> GhostMazeLevelLoader:
        return GhostMazeLevelLoader(self.LEVELS_DIR)

    @classmethod
    def _level_loader_for_listing(cls) -> GhostMazeLevelLoader:
        return GhostMazeLevelLoader(cls.LEVELS_DIR)

    def _apply_level_config(self, level_data: LevelData) -> None:
        """Build a fresh world from parsed level data."""
        self._level = level_data
        self._tile_map = level_data.tile_map
        self._build_world()
        log.info(f"Loaded level '{level_data.name}' "
                 f"({self._tile_map.columns}x{self._tile_map.rows})")

    def _build_world(self) -> None:
        tile_map = self._tile_map
        self._effects = StatusEffectRegistry(self._clock)
        self._traps = TrapManager(self._clock, tile_map.tile_size)
        self._engine = GhostBehaviorEngine(
            tile_map, self._effects, self._traps, self._clock, self._rng)
        self._skills = SkillSystem(tile_map)

        self._player = Player(
            tile_map.cell_origin(tile_map.player_spawn),
            ENTITY_SIZE,
            PLAYER_SPEED,
            self._lives_override or self._level.lives,
            handle=PLAYER_HANDLE,
        )

        now = self._clock.now_ms
        self._ghosts = []
        for handle, variant in enumerate(GHOST_ORDER, start=1):
            cell = tile_map.ghost_spawns.get(variant)
            if cell is None:
                continue
            self._ghosts.append(Ghost(
                handle,
                variant,
                behaviors_for(variant),
                tile_map.cell_origin(cell),
                self._rng.choice(list(Direction)),
                ENTITY_SIZE,
                GHOST_SPEED,
                now_ms=now,
            ))

        self._collectibles = create_collectibles(tile_map, self._rng, self._level.power_plus)
        self._round = 1
        self._accumulator_ms = 0.0
        self._internal_state = GameState.START

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def clock(self) -> SimulationClock:
        return self._clock

    @property
    def tile_map(self) -> TileMap:
        return self._tile_map

    @property
    def level(self) -> LevelData:
        return self._level

    @property
    def on_clear(self) -> ClearPolicy:
        return self._on_clear_override or self._level.on_clear

    @property
    def round(self) -> int:
        return self._round

    @property
    def player(self) -> Player:
        return self._player

    @property
    def ghosts(self) -> List[Ghost]:
        return list(self._ghosts)

    def ghost(self, variant: GhostVariant) -> Optional[Ghost]:
        return next((g for g in self._ghosts if g.variant == variant), None)

    @property
    def collectibles(self) -> List[Collectible]:
        return list(self._collectibles)

    @property
    def effects(self) -> StatusEffectRegistry:
        return self._effects

    @property
    def traps(self) -> TrapManager:
        return self._traps

    @property
    def skills(self) -> SkillSystem:
        return self._skills

    @property
    def engine(self) -> GhostBehaviorEngine:
        return self._engine

    def _get_internal_state(self) -> GameState:
        return self._internal_state

    def get_score(self) -> int:
        return self._player.score

    # =========================================================================
    # Commands
    # =========================================================================

    def handle_input(self, events: List[InputEvent]) -> None:
        """Apply each event's command in order.

        Args:
            events: List of input events
        """
        for event in events:
            self.apply_command(event.command)

    def apply_command(self, command: Command) -> None:
        """Apply one semantic command.

        START_GAME and RESTART_GAME drive the state machine; every other
        command only acts while PLAYING. Commands that cannot act are
        ignored.
        """
        if command == Command.START_GAME:
            if self._internal_state == GameState.START:
                self._set_state(GameState.PLAYING)
            return
        if command == Command.RESTART_GAME:
            self.reset()
            self._set_state(GameState.PLAYING)
            return

        if self._internal_state != GameState.PLAYING:
            return

        player = self._player
        if command == Command.ACTIVATE_SKILL:
            clone = self._skills.activate(player)
            if clone is not None:
                self._emit('skill_activated', direction=clone.direction.value,
                           charges=player.skill_charges)
            return
        if command == Command.BREAK_ICE:
            if self._effects.remove(PLAYER_HANDLE, EffectKind.FROZEN):
                self._emit('ice_broken')
            return

        direction = command.direction
        if direction is None:
            return
        if self._effects.is_active(PLAYER_HANDLE, EffectKind.ENTANGLED):
            log.trace(f"Ignored {command.value} while entangled")
            return
        if can_travel(player, direction, self._tile_map):
            player.take_turn(direction)
        else:
            player.queue_turn(direction)

    def start(self) -> None:
        """Leave the start screen."""
        self.apply_command(Command.START_GAME)

    # =========================================================================
    # Simulation
    # =========================================================================

    def update(self, dt: float) -> None:
        """Run as many whole ticks as the elapsed time covers.

        Args:
            dt: Delta time in seconds since the last frame
        """
        if self._internal_state != GameState.PLAYING:
            self._accumulator_ms = 0.0
            return

        tick_ms = self._clock.tick_ms
        self._accumulator_ms += dt * 1000.0
        ticks = 0
        while self._accumulator_ms >= tick_ms and ticks < MAX_TICKS_PER_UPDATE:
            self.tick()
            self._accumulator_ms -= tick_ms
            ticks += 1

        if self._accumulator_ms >= tick_ms:
            log.trace(f"Dropped {self._accumulator_ms:.0f}ms of backlog")
            self._accumulator_ms = 0.0

    def tick(self) -> None:
        """Run exactly one simulation tick (only while PLAYING)."""
        if self._internal_state != GameState.PLAYING:
            return

        self._clock.tick()
        self._effects.sweep()

        self._advance_player()
        for ghost in self._ghosts:
            self._engine.update(ghost, self._player)
        self._advance_clones()

        self._resolve_player_ghosts()
        if self._internal_state != GameState.PLAYING:
            return

        self._resolve_traps()
        self._collect()

        self._effects.sweep()
        self._traps.sweep_expired()

        if not self._collectibles:
            self._on_board_cleared()

    def _advance_player(self) -> None:
        player = self._player
        tile_map = self._tile_map
        entangled = self._effects.is_active(PLAYER_HANDLE, EffectKind.ENTANGLED)

        queued = player.next_direction
        if queued is not None and not entangled and can_travel(player, queued, tile_map):
            player.take_turn(queued)

        if not player.moving:
            return

        steps = player.take_steps(self._effects.speed_multiplier(PLAYER_HANDLE))
        for _ in range(steps):
            if not attempt_move(player, tile_map):
                break
            wrap_portal(player, tile_map)

    def _advance_clones(self) -> None:
        for ghost in self._skills.advance(self._ghosts):
            if self._engine.apply_strike(ghost):
                self._emit('ghost_scared', variant=ghost.variant.value,
                           duration_ms=self._effects.remaining_ms(ghost.handle, EffectKind.SCARED))
            else:
                self._emit('shield_hit', variant=ghost.variant.value, shield=ghost.shield)

    def _resolve_player_ghosts(self) -> None:
        """Eat scared ghosts; any other contact costs a life and ends the pass."""
        player = self._player
        for ghost in self._ghosts:
            if not ghost.alive or not entities_overlap(player, ghost):
                continue

            if self._effects.is_active(ghost.handle, EffectKind.SCARED):
                player.add_score(GHOST_EAT_POINTS)
                trap = self._engine.on_eaten(ghost)
                self._emit('ghost_eaten', variant=ghost.variant.value, score=player.score,
                           trap=trap.kind.value if trap else None)
                continue

            self._lose_life(ghost)
            return

    def _lose_life(self, ghost: Ghost) -> None:
        lives = self._player.lose_life()
        self._emit('life_lost', variant=ghost.variant.value, lives=lives)

        if lives == 0:
            self._set_state(GameState.GAME_OVER)
            return

        self._player.reset_skill_charges()
        self._reset_positions()

    def _reset_positions(self) -> None:
        """Player and living ghosts back to spawn, their effects and all clones gone."""
        self._player.return_to_spawn()
        self._effects.clear(PLAYER_HANDLE)
        self._engine.return_to_spawn(self._ghosts)
        self._skills.clear()

    def _resolve_traps(self) -> None:
        player = self._player
        for trap in self._traps.contacts(player.get_bounds()):
            kind, duration_ms = trap.effect
            self._effects.apply(PLAYER_HANDLE, kind, duration_ms)
            trap.deactivate()
            self._emit('trap_triggered', trap=trap.kind.value, effect=kind.value)

        for ghost in self._ghosts:
            if not ghost.alive:
                continue
            for trap in self._traps.contacts(ghost.get_bounds()):
                if trap.affects(ghost.handle):
                    trap.mark_touched(ghost.handle)
                    kind, duration_ms = trap.effect
                    self._effects.apply(ghost.handle, kind, duration_ms)

    def _collect(self) -> None:
        player = self._player
        remaining = []
        for item in self._collectibles:
            if entities_overlap(player, item):
                player.add_score(item.points)
                if item.skill_charges:
                    player.add_skill_charge(item.skill_charges)
            else:
                remaining.append(item)
        self._collectibles = remaining

    def _on_board_cleared(self) -> None:
        policy = self.on_clear
        self._emit('level_cleared', round=self._round, policy=policy.value,
                   score=self._player.score)

        if policy == ClearPolicy.WIN:
            self._set_state(GameState.WON)
            return

        self._collectibles = create_collectibles(self._tile_map, self._rng, self._level.power_plus)
        self._traps.clear()
        self._reset_positions()
        self._round += 1
        log.info(f"Round {self._round} started")

    # =========================================================================
    # Snapshot and rendering
    # =========================================================================

    def snapshot(self) -> RenderSnapshot:
        """Read-only view of the current frame."""
        now = self._clock.now_ms
        player = self._player
        effects = self._effects

        player_velocity = (
            player.velocity(effects.speed_multiplier(PLAYER_HANDLE))
            if player.moving else (0.0, 0.0)
        )
        player_view = PlayerView(
            position=Point2D(x=player.x, y=player.y),
            width=player.width,
            height=player.height,
            direction=player.direction,
            velocity=Point2D(x=player_velocity[0], y=player_velocity[1]),
            lives=player.lives,
            score=player.score,
            skill_charges=player.skill_charges,
            effects=effects.active_kinds(PLAYER_HANDLE),
        )

        ghost_views = []
        for ghost in self._ghosts:
            if not ghost.alive:
                condition = GhostCondition.DEAD
            elif effects.is_active(ghost.handle, EffectKind.SCARED):
                condition = GhostCondition.SCARED
            else:
                condition = GhostCondition.NORMAL
            velocity = (
                ghost.velocity(effects.speed_multiplier(ghost.handle))
                if ghost.alive else (0.0, 0.0)
            )
            ghost_views.append(GhostView(
                position=Point2D(x=ghost.x, y=ghost.y),
                width=ghost.width,
                height=ghost.height,
                direction=ghost.direction,
                velocity=Point2D(x=velocity[0], y=velocity[1]),
                handle=ghost.handle,
                variant=ghost.variant,
                condition=condition,
                scared_ms=effects.remaining_ms(ghost.handle, EffectKind.SCARED) if ghost.alive else 0,
                respawn_ms=ghost.respawn_in_ms(now, self._engine.respawn_ms),
                shield=ghost.shield,
                effects=effects.active_kinds(ghost.handle),
            ))

        return RenderSnapshot(
            state=self._internal_state,
            tick=self._clock.tick_count,
            time_ms=now,
            level_name=self._level.name,
            round=self._round,
            player=player_view,
            ghosts=ghost_views,
            clones=[
                CloneView(position=Point2D(x=c.x, y=c.y), size=c.width,
                          direction=c.direction, rotation=c.rotation)
                for c in self._skills.clones
            ],
            traps=[
                TrapView(position=Point2D(x=t.x, y=t.y), size=t.width,
                         kind=t.kind, remaining_ms=t.remaining_ms(now))
                for t in self._traps.active_traps
            ],
            collectibles=[
                CollectibleView(position=Point2D(x=c.x, y=c.y), size=c.width, kind=c.kind)
                for c in self._collectibles
            ],
        )

    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        screen.fill(BACKGROUND_COLOR)
        self._skin.render(screen, self.snapshot(), self._tile_map)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def reset(self) -> None:
        """Start over on the current level: fresh clock, lives, score and board."""
        super().reset()
        self._clock.reset()
        self._build_world()

    def _set_state(self, state: GameState) -> None:
        if state == self._internal_state:
            return
        previous = self._internal_state
        self._internal_state = state
        log.info(f"State {previous.name} -> {state.name}")
        self._emit('state_change', previous=previous.name, state=state.name,
                   score=self._player.score)

    def _emit(self, event_type: str, **fields: Any) -> None:
        record = {
            'type': event_type,
            'tick': self._clock.tick_count,
            'time_ms': self._clock.now_ms,
        }
        record.update(fields)
        emit_record('ghostmaze', record)
