"""
MAZERUNNER - Main Entry Point
=============================
Generate -> Place goal -> Check / Play

Usage:
    # Generate and summarize the level 3 maze
    python main.py --level 3 --seed 42

    # Print an ASCII dump
    python main.py --level 5 --seed 7 --ascii

    # Run structural checks
    python main.py --level 10 --check

    # Replay a move string (U/D/L/R)
    python main.py --level 1 --seed 1 --play RRDD
"""

import argparse
import sys
import logging
from typing import Optional

from mazerunner.core.definitions import CHAR_TO_DIRECTION, MazeError
from mazerunner.maze import Maze, MazeOptions
from mazerunner.simulation.validator import MazeMetrics, MazeSanityChecker

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def play_moves(maze: Maze, moves: str) -> dict:
    """
    Replay a move string against a maze.

    Args:
        maze: Maze to drive
        moves: Letters U, D, L, R (case-insensitive, whitespace ignored)

    Returns:
        Dict with accepted/rejected counts and whether the goal was reached
    """
    accepted = 0
    rejected = 0
    for char in moves.upper():
        if char.isspace():
            continue
        if char not in CHAR_TO_DIRECTION:
            raise ValueError(f"Unknown move '{char}' (expected U, D, L or R)")
        if maze.step(CHAR_TO_DIRECTION[char]):
            accepted += 1
        else:
            rejected += 1
        if maze.is_goal_reached():
            break
    return {
        'accepted': accepted,
        'rejected': rejected,
        'position': tuple(maze.player_position),
        'goal_reached': maze.is_goal_reached(),
    }


def run(level: int, seed: Optional[int] = None, max_level: Optional[int] = None,
        check: bool = False, ascii_dump: bool = False,
        moves: Optional[str] = None, verbose: bool = True) -> dict:
    """
    Build a maze and run the requested actions on it.

    Returns:
        Result dict with the maze, metrics and any check/play results
    """
    maze = Maze.create(level, seed=seed, options=MazeOptions(max_level=max_level))
    metrics = MazeMetrics.measure(maze.grid, maze.start_position, maze.goal_position)
    result = {'maze': maze, 'metrics': metrics}

    if verbose:
        # User-facing output
        print(f"\n{'='*40}")
        print(f"LEVEL {level} ({maze.width}x{maze.height}, seed={seed})")
        print(f"{'='*40}")
        print(f"  Start: {tuple(maze.start_position)}")
        print(f"  Goal:  {tuple(maze.goal_position)}")
        print(f"  Solution length: {metrics.solution_length}")
        print(f"  Open cells: {metrics.open_cells}, dead ends: {metrics.dead_ends}, "
              f"junctions: {metrics.junctions}")

    if check:
        ok, errors = MazeSanityChecker(maze.grid).check_all()
        result['valid'] = ok
        result['errors'] = errors
        if verbose:
            print("  ✓ Structure OK" if ok else "  ✗ Structure errors:")
            for error in errors:
                print(f"    - {error}")

    if moves:
        result['play'] = play_moves(maze, moves)
        if verbose:
            play = result['play']
            print(f"  Moves accepted: {play['accepted']}, rejected: {play['rejected']}")
            print(f"  Position: {play['position']}"
                  + ("  ✓ GOAL REACHED" if play['goal_reached'] else ""))

    if ascii_dump:
        print()
        print(maze.render_ascii())

    return result


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Mazerunner - generate a perfect maze for a level'
    )
    parser.add_argument(
        '--level', '-l', type=int, default=1,
        help='Level number (>= 1, default: 1)'
    )
    parser.add_argument(
        '--seed', '-s', type=int,
        help='Generation seed (random if omitted)'
    )
    parser.add_argument(
        '--max-level', type=int,
        help='Reject levels above this cap'
    )
    parser.add_argument(
        '--check', '-c', action='store_true',
        help='Run structural sanity checks'
    )
    parser.add_argument(
        '--play', '-p', type=str,
        help='Replay a move string of U/D/L/R'
    )
    parser.add_argument(
        '--ascii', action='store_true',
        help='Print ASCII dump of the maze'
    )
    parser.add_argument(
        '--quiet', '-q', action='store_true',
        help='Suppress summary output'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Debug logging'
    )

    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        result = run(
            args.level,
            seed=args.seed,
            max_level=args.max_level,
            check=args.check,
            ascii_dump=args.ascii,
            moves=args.play,
            verbose=not args.quiet,
        )
    except (MazeError, ValueError) as e:
        logger.error('%s', e)
        parser.error(str(e))

    if args.check and not result['valid']:
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
