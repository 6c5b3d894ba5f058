#!/usr/bin/env python3
"""GhostMaze - Standalone Entry Point.

Usage:
    python main.py
    python main.py --level small_box --lives 5
    python main.py --seed 42 --on-clear win
    python main.py --list-levels

Controls:
    Arrows / WASD  steer
    SPACE          fire a clone (needs a PowerPlus charge)
    V              break free of ice
    ENTER          start
    R              restart
    ESC            quit
"""

import argparse
import os
import sys
from typing import List, Optional

# Add project root to path for imports
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import pygame

from mazechase.games.input import InputManager
from mazechase.games.input.sources import KeyboardInputSource
from mazechase.logging import (
    close_all_sinks,
    configure_logging,
    create_sink_for_environment,
    get_logger,
    register_sink,
)
from games.GhostMaze.config import FRAME_RATE, HUD_HEIGHT
from games.GhostMaze.game_info import get_game_mode
from games.GhostMaze.game_mode import GhostMazeMode

log = get_logger('ghostmaze_main')


def build_parser() -> argparse.ArgumentParser:
    """Argument parser from the game's declared CLI arguments."""
    parser = argparse.ArgumentParser(description=f"{GhostMazeMode.NAME} - Standalone")
    for arg in GhostMazeMode.get_arguments():
        options = dict(arg)
        name = options.pop('name')
        parser.add_argument(name, **options)
    parser.add_argument('--log-level', type=str, default=None,
                        help='Console log level (TRACE, DEBUG, INFO, ...)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run GhostMaze standalone."""
    args = build_parser().parse_args(argv)

    if args.list_levels:
        GhostMazeMode.print_levels()
        return 0

    if args.log_level:
        configure_logging(level=args.log_level)
    register_sink('ghostmaze', create_sink_for_environment('ghostmaze'))

    try:
        game = get_game_mode(
            skin=args.skin,
            lives=args.lives,
            seed=args.seed,
            on_clear=args.on_clear,
            level=args.level,
        )
    except (FileNotFoundError, ValueError) as e:
        log.error(f"Could not start: {e}")
        close_all_sinks()
        return 1

    # Initialize pygame
    pygame.init()
    pygame.font.init()

    tile_map = game.tile_map
    screen = pygame.display.set_mode((tile_map.width, tile_map.height + HUD_HEIGHT))
    pygame.display.set_caption(GhostMazeMode.NAME)

    input_manager = InputManager()
    input_manager.set_source(KeyboardInputSource())

    clock = pygame.time.Clock()
    running = True

    print("\n" + "=" * 50)
    print(GhostMazeMode.NAME.upper())
    print("=" * 50)
    print(__doc__.split('Controls:')[1].rstrip())
    print("=" * 50 + "\n")

    try:
        while running:
            dt = clock.tick(FRAME_RATE) / 1000.0

            input_manager.update(dt)
            game.handle_input(input_manager.get_events())

            # Events the keyboard source did not consume
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            game.update(dt)

            game.render(screen)
            pygame.display.flip()
    finally:
        log.info(f"Final score: {game.get_score()}")
        close_all_sinks()
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
