"""
Level progression for a play session.

Tracks the current level and the Maze built for it. Scoring and timers
belong to the presentation layer and are not handled here.
"""

import random
import logging
from typing import Optional

from mazerunner.maze import Maze, MazeOptions

logger = logging.getLogger(__name__)


class MazeSession:
    """
    Holds the current level and replaces the Maze on every transition.

    Per-maze seeds are drawn from a session RNG, so a session built with a
    seed replays the same sequence of mazes.
    """

    def __init__(self, seed: Optional[int] = None, options: Optional[MazeOptions] = None):
        self.seed = seed
        self.options = options or MazeOptions()
        self._rng = random.Random(seed)
        self.level = 1
        self.levels_completed = 0
        self.maze = self._build(self.level)

    def _build(self, level: int) -> Maze:
        # Rejected levels must not advance the seed sequence
        self.options.validate_level(level)
        maze_seed = self._rng.getrandbits(32)
        return Maze.create(level, seed=maze_seed, options=self.options)

    def new_game(self) -> Maze:
        """Back to level 1 with a fresh maze."""
        self.level = 1
        self.levels_completed = 0
        self.maze = self._build(self.level)
        logger.info('New game started')
        return self.maze

    def restart_level(self) -> Maze:
        """Fresh maze for the current level."""
        self.maze = self._build(self.level)
        logger.info('Restarted level %d', self.level)
        return self.maze

    def next_level(self) -> Maze:
        """
        Advance once the current goal has been reached.

        Raises:
            RuntimeError: the player has not reached the goal yet
        """
        if not self.maze.is_goal_reached():
            raise RuntimeError(f"Level {self.level} is not complete")
        self.maze = self._build(self.level + 1)
        self.levels_completed += 1
        self.level += 1
        logger.info('Advanced to level %d', self.level)
        return self.maze

    def try_move(self, dx: int, dy: int) -> bool:
        return self.maze.try_move(dx, dy)

    def is_level_complete(self) -> bool:
        return self.maze.is_goal_reached()
