"""GhostMaze skins."""

from .base import GhostMazeSkin
from .geometric import GeometricSkin

__all__ = ['GhostMazeSkin', 'GeometricSkin']
