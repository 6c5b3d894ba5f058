"""GhostMaze game entities."""

from .entity import Bounds, Entity, Mover
from .player import Player
from .ghost import Ghost
from .clone import Clone
from .collectible import Collectible, create_collectibles

__all__ = [
    'Bounds', 'Entity', 'Mover',
    'Player',
    'Ghost',
    'Clone',
    'Collectible', 'create_collectibles',
]
