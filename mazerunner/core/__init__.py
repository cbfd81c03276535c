"""
Core grid types and constants.
"""

from .definitions import (
    CellKind,
    Position,
    Direction,
    DIRECTION_DELTAS,
    MOVE_DELTAS,
    OPEN_KINDS,
    START_POSITION,
    MazeError,
    InvalidLevelError,
    InvalidDimensionsError,
)
from .grid import Grid, format_grid

__all__ = [
    'CellKind',
    'Position',
    'Direction',
    'DIRECTION_DELTAS',
    'MOVE_DELTAS',
    'OPEN_KINDS',
    'START_POSITION',
    'MazeError',
    'InvalidLevelError',
    'InvalidDimensionsError',
    'Grid',
    'format_grid',
]
