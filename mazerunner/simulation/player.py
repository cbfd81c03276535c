"""
Player state and movement validation.
"""

import logging
from typing import List, Tuple

from mazerunner.core.definitions import (
    DIRECTION_DELTAS,
    MOVE_DELTAS,
    CellKind,
    Direction,
    Position,
)
from mazerunner.core.grid import Grid

logger = logging.getLogger(__name__)


class PlayerState:
    """
    Current player position on a grid.

    The position only changes through an accepted try_move(). Accessors hand
    out Position values, so callers cannot mutate it in place.
    """

    def __init__(self, grid: Grid, start: Tuple[int, int]):
        self._grid = grid
        self._position = Position(*start)
        self.moves_made = 0

    @property
    def position(self) -> Position:
        return self._position

    def can_move(self, dx: int, dy: int) -> bool:
        """Check a move without applying it."""
        if (dx, dy) not in MOVE_DELTAS:
            return False
        if (dx, dy) == (0, 0):
            return True
        target = self._position.offset(dx, dy)
        # Border cells never accept the player, even if open
        if not self._grid.is_interior(target.x, target.y):
            return False
        return self._grid.cell_kind(target.x, target.y) != CellKind.WALL

    def try_move(self, dx: int, dy: int) -> bool:
        """
        Attempt a single-cell move.

        Args:
            dx: Column delta, one of -1, 0, 1
            dy: Row delta, one of -1, 0, 1 (only one axis may be non-zero)

        Returns:
            True if the move was applied (or was the (0, 0) no-op),
            False if it was rejected; state is unchanged on rejection.
        """
        if not self.can_move(dx, dy):
            logger.debug('Rejected move (%d, %d) from %s', dx, dy, tuple(self._position))
            return False
        if (dx, dy) != (0, 0):
            self._position = self._position.offset(dx, dy)
            self.moves_made += 1
        return True

    def valid_directions(self) -> List[Direction]:
        """Directions that would be accepted from the current position."""
        return [d for d, (dx, dy) in DIRECTION_DELTAS.items() if self.can_move(dx, dy)]

    def is_at(self, target: Tuple[int, int]) -> bool:
        return self._position == tuple(target)

    def __repr__(self) -> str:
        return f"PlayerState(position={tuple(self._position)})"
