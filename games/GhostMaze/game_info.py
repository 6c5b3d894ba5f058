"""GhostMaze - Game Info.

Factory used by the standalone entry point.
"""


def get_game_mode(**kwargs):
    """Factory function to create a GhostMaze game instance.

    Args:
        **kwargs: Game configuration options (from CLI)

    Returns:
        GhostMazeMode instance
    """
    from games.GhostMaze.game_mode import GhostMazeMode
    return GhostMazeMode(**kwargs)
