"""
Mazechase

Small arcade-game platform hosting the GhostMaze simulation: logging, the
BaseGame plugin contract, level loading, input commands and the simulation
clock.
"""

__version__ = "1.0.0"

__all__ = ['__version__']
