"""
Mazerunner Source Package
=========================

Perfect-maze generation, goal placement and movement validation for a
level-based maze game.

Submodules:
- core: Cell kinds, positions, directions, errors + Grid storage
- generation: Randomized backtracker (MazeGenerator)
- simulation: Farthest-point BFS, PlayerState, validation/metrics
- maze: Maze facade and sizing options
- session: Level progression (MazeSession)

Pipeline:
    level -> dimensions -> carve (MazeGenerator) -> BFS goal
    (FarthestPointFinder) -> PlayerState at start -> caller drives moves
"""

from .core.definitions import (
    CellKind,
    Direction,
    Position,
    MazeError,
    InvalidLevelError,
    InvalidDimensionsError,
)
from .core.grid import Grid
from .maze import Maze, MazeOptions, maze_dimensions
from .session import MazeSession

__version__ = "1.0.0"

__all__ = [
    'CellKind',
    'Direction',
    'Position',
    'MazeError',
    'InvalidLevelError',
    'InvalidDimensionsError',
    'Grid',
    'Maze',
    'MazeOptions',
    'maze_dimensions',
    'MazeSession',
]
