"""
Maze facade.

Owns one Grid, one PlayerState and the start/goal coordinates for a single
level. A Maze is built in one go by Maze.create() and replaced wholesale for
the next level; nothing carries over between levels.
"""

import random
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from mazerunner.core.definitions import (
    DIRECTION_DELTAS,
    MIN_SIZE,
    SIZE_STEP,
    START_POSITION,
    CellKind,
    Direction,
    InvalidLevelError,
    Position,
)
from mazerunner.core.grid import Grid, format_grid
from mazerunner.generation.maze_generator import MazeGenerator
from mazerunner.simulation.farthest_point import FarthestPointFinder
from mazerunner.simulation.player import PlayerState

logger = logging.getLogger(__name__)


@dataclass
class MazeOptions:
    """Configuration for level sizing.

    Defaults give the standard progression: 7x7 at level 1, two more rows and
    columns per level.
    """
    base_size: int = MIN_SIZE
    size_step: int = SIZE_STEP
    max_level: Optional[int] = None  # None means no cap

    def __post_init__(self):
        if self.base_size < MIN_SIZE or self.base_size % 2 == 0:
            raise ValueError(f"base_size must be odd and >= {MIN_SIZE}, got {self.base_size}")
        if self.size_step < 0 or self.size_step % 2 != 0:
            raise ValueError(f"size_step must be even and >= 0, got {self.size_step}")
        if self.max_level is not None and self.max_level < 1:
            raise ValueError(f"max_level must be >= 1, got {self.max_level}")

    def validate_level(self, level: int) -> None:
        if isinstance(level, bool) or not isinstance(level, (int, np.integer)):
            raise TypeError(f"level must be an integer, got {type(level).__name__}")
        if level < 1:
            raise InvalidLevelError(f"level must be >= 1, got {level}")
        if self.max_level is not None and level > self.max_level:
            raise InvalidLevelError(f"level {level} exceeds max_level {self.max_level}")

    def dimensions(self, level: int) -> Tuple[int, int]:
        """(width, height) for a level, rounded up to odd."""
        self.validate_level(level)
        size = self.base_size + self.size_step * (int(level) - 1)
        if size % 2 == 0:
            size += 1
        return size, size


def maze_dimensions(level: int) -> Tuple[int, int]:
    """(width, height) for a level under the default progression."""
    return MazeOptions().dimensions(level)


class Maze:
    """
    One level's maze: grid, start, goal and player.

    Query surface for a presentation layer: width, height, cell_kind(),
    start_position, goal_position, player_position. Mutation goes only
    through try_move()/step().
    """

    def __init__(self, level: int, grid: Grid, start: Position, goal: Position,
                 seed: Optional[int] = None, goal_distance: int = 0):
        self.level = level
        self.seed = seed
        self.goal_distance = goal_distance
        self._grid = grid
        self._start = Position(*start)
        self._goal = Position(*goal)
        self._player = PlayerState(grid, self._start)

    @classmethod
    def create(cls, level: int, seed: Optional[int] = None,
               rng: Optional[random.Random] = None,
               options: Optional[MazeOptions] = None) -> 'Maze':
        """
        Build the maze for a level.

        Args:
            level: Level number, >= 1
            seed: Seed for generation (ignored if rng is given)
            rng: Explicit RNG handle
            options: Sizing options (defaults to the standard progression)

        Returns:
            A fully generated Maze with the player at the start

        Raises:
            InvalidLevelError: level < 1 or above options.max_level
            TypeError: level is not an integer
        """
        options = options or MazeOptions()
        width, height = options.dimensions(level)
        logger.info('Generating level %d maze (%dx%d, seed=%s)', level, width, height, seed)

        generator = MazeGenerator(width, height, seed=seed, rng=rng)
        grid = generator.generate()

        # Goal search runs before START is stamped so the start is a plain PATH cell
        result = FarthestPointFinder(grid).search(START_POSITION)
        goal = result.farthest

        grid.set(goal.x, goal.y, CellKind.GOAL)
        grid.set(START_POSITION.x, START_POSITION.y, CellKind.START)

        logger.info('Level %d goal at %s, %d moves from start',
                    level, tuple(goal), result.max_distance)
        return cls(level, grid, START_POSITION, goal, seed=seed,
                   goal_distance=result.max_distance)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def start_position(self) -> Position:
        return self._start

    @property
    def goal_position(self) -> Position:
        return self._goal

    @property
    def player_position(self) -> Position:
        return self._player.position

    @property
    def moves_made(self) -> int:
        return self._player.moves_made

    @property
    def grid(self) -> Grid:
        """Snapshot copy of the grid."""
        return self._grid.copy()

    def cell_kind(self, x: int, y: int) -> CellKind:
        return self._grid.cell_kind(x, y)

    def to_array(self) -> np.ndarray:
        return self._grid.to_array()

    def is_goal_reached(self) -> bool:
        return self._player.is_at(self._goal)

    def valid_directions(self) -> List[Direction]:
        return self._player.valid_directions()

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def try_move(self, dx: int, dy: int) -> bool:
        moved = self._player.try_move(dx, dy)
        if moved and (dx, dy) != (0, 0) and self.is_goal_reached():
            logger.info('Level %d goal reached in %d moves', self.level, self.moves_made)
        return moved

    def step(self, direction: Direction) -> bool:
        dx, dy = DIRECTION_DELTAS[Direction(direction)]
        return self.try_move(dx, dy)

    def render_ascii(self) -> str:
        return format_grid(self._grid, player=self.player_position)

    def __repr__(self) -> str:
        return (f"Maze(level={self.level}, size={self.width}x{self.height}, "
                f"goal={tuple(self._goal)}, player={tuple(self.player_position)})")
