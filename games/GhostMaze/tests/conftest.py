"""Pytest fixtures for GhostMaze tests."""

import random
from pathlib import Path
from typing import Callable, List

import pytest
import yaml

from mazechase.clock import SimulationClock
from games.GhostMaze.config import TILE_SIZE
from games.GhostMaze.game.effects import StatusEffectRegistry
from games.GhostMaze.game.tile_map import TileMap
from games.GhostMaze.game.traps import TrapManager
from games.GhostMaze.game_mode import GhostMazeMode


# A straight corridor: the player faces twelve food cells and a wall
CORRIDOR = [
    "XXXXXXXXXXXXXXX",
    "XP            X",
    "XXXXXXXXXXXXXXX",
]

# Open 5x5 room
OPEN_ROOM = [
    "XXXXXXX",
    "X     X",
    "X     X",
    "X  P  X",
    "X     X",
    "X     X",
    "XXXXXXX",
]

# Tunnel through both board edges on row 1
TUNNEL = [
    "XXXXX",
    "O P O",
    "XXXXX",
]


@pytest.fixture
def clock():
    return SimulationClock(tick_ms=50)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def effects(clock):
    return StatusEffectRegistry(clock)


@pytest.fixture
def traps(clock):
    return TrapManager(clock, TILE_SIZE)


@pytest.fixture
def corridor_map():
    return TileMap.from_layout(CORRIDOR, TILE_SIZE)


@pytest.fixture
def room_map():
    return TileMap.from_layout(OPEN_ROOM, TILE_SIZE)


@pytest.fixture
def tunnel_map():
    return TileMap.from_layout(TUNNEL, TILE_SIZE, portal_row=1)


@pytest.fixture
def make_level(tmp_path) -> Callable[..., str]:
    """Write a level YAML file and return its path.

    Usage:
        path = make_level(["XXX", "XPX", "XXX"], power_plus=0)
    """
    def _make(layout: List[str], name: str = "test_level", **rules) -> str:
        data = {'name': name, 'layout': list(layout)}
        data.update(rules)
        path = Path(tmp_path) / f"{name}.yaml"
        path.write_text(yaml.safe_dump(data))
        return str(path)
    return _make


@pytest.fixture
def game():
    """Classic level, seeded, already PLAYING."""
    mode = GhostMazeMode(seed=7)
    mode.start()
    return mode
