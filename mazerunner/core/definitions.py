"""
MAZERUNNER DEFINITIONS
======================
Central constants and type definitions for the maze core.

This file is the SINGLE SOURCE OF TRUTH for:
- Cell kinds (grid values)
- Position value type
- Movement directions and deltas
- Size formula constants
- Error types

Import from here instead of duplicating constants across modules.
"""

from typing import Dict, FrozenSet, NamedTuple, Tuple
from enum import IntEnum


# ==========================================
# CELL KINDS
# ==========================================

class CellKind(IntEnum):
    """Cell kinds stored in the maze grid."""
    PATH = 0    # Carved passage
    WALL = 1    # Solid wall (impassable)
    GOAL = 2    # Exit cell (display annotation over a path cell)
    START = 4   # Entry cell (display annotation over a path cell)


# Cells the player can stand on
OPEN_KINDS: FrozenSet[int] = frozenset({
    CellKind.PATH,
    CellKind.START,
    CellKind.GOAL,
})

# ASCII glyphs for debug dumps
KIND_TO_CHAR: Dict[int, str] = {
    CellKind.PATH: ' ',
    CellKind.WALL: '#',
    CellKind.GOAL: 'G',
    CellKind.START: 'S',
}
PLAYER_CHAR = '@'


# ==========================================
# POSITION
# ==========================================

class Position(NamedTuple):
    """Immutable (x, y) grid coordinate."""
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> 'Position':
        return Position(self.x + dx, self.y + dy)


# ==========================================
# SIZE FORMULA
# ==========================================

MIN_SIZE = 7        # Level 1 is 7x7
SIZE_STEP = 2       # Each level adds two rows and two columns
START_POSITION = Position(1, 1)


# ==========================================
# DIRECTIONS
# ==========================================

class Direction(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

# Accepted (dx, dy) requests; (0, 0) is a no-op
MOVE_DELTAS: FrozenSet[Tuple[int, int]] = frozenset(DIRECTION_DELTAS.values()) | {(0, 0)}

# Lattice steps used while carving: right, down, left, up
CARVE_OFFSETS: Tuple[Tuple[int, int], ...] = ((2, 0), (0, 2), (-2, 0), (0, -2))

# BFS expansion order: +x, +y, -x, -y
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))

# Move-string letters for replays (CLI)
CHAR_TO_DIRECTION: Dict[str, Direction] = {
    'U': Direction.UP,
    'D': Direction.DOWN,
    'L': Direction.LEFT,
    'R': Direction.RIGHT,
}


# ==========================================
# ERRORS
# ==========================================

class MazeError(Exception):
    """Base class for maze construction errors."""


class InvalidLevelError(MazeError, ValueError):
    """Raised when a level number is outside the accepted range."""


class InvalidDimensionsError(MazeError, ValueError):
    """Raised when grid dimensions are even or smaller than MIN_SIZE."""


def validate_dimensions(width: int, height: int) -> None:
    """Reject grid sizes the lattice carving cannot handle."""
    for name, value in (('width', width), ('height', height)):
        if value < MIN_SIZE or value % 2 == 0:
            raise InvalidDimensionsError(
                f"{name} must be odd and >= {MIN_SIZE}, got {value}"
            )
