"""
Maze grid storage.

A width x height numpy array of CellKind values indexed as [y, x].
Width and height are always odd and >= 7, and the full outer border is WALL.
"""

import numpy as np
from typing import Iterator, Optional, Tuple

from .definitions import (
    CellKind,
    KIND_TO_CHAR,
    OPEN_KINDS,
    PLAYER_CHAR,
    Position,
    validate_dimensions,
)


class Grid:
    """
    Owned 2D cell-kind storage.

    Coordinates are (x, y) with x as the column and y as the row. Every cell
    starts as WALL; carving and annotation go through set().
    """

    def __init__(self, width: int, height: int):
        validate_dimensions(width, height)
        self.width = width
        self.height = height
        self._cells = np.full((height, width), CellKind.WALL, dtype=np.int8)

    @classmethod
    def from_array(cls, cells: np.ndarray) -> 'Grid':
        """Build a grid from an existing [y, x] array of cell kinds."""
        cells = np.asarray(cells)
        if cells.ndim != 2:
            raise ValueError(f"Expected a 2D array, got shape {cells.shape}")
        unknown = sorted(set(np.unique(cells).tolist()) - {int(k) for k in CellKind})
        if unknown:
            raise ValueError(f"Unknown cell kind values: {unknown}")
        height, width = cells.shape
        grid = cls(width, height)
        grid._cells[:, :] = cells
        return grid

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_interior(self, x: int, y: int) -> bool:
        """True if (x, y) lies strictly inside the border walls."""
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def is_border(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and not self.is_interior(x, y)

    def cell_kind(self, x: int, y: int) -> CellKind:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} grid")
        return CellKind(int(self._cells[y, x]))

    def __getitem__(self, pos: Tuple[int, int]) -> CellKind:
        x, y = pos
        return self.cell_kind(x, y)

    def set(self, x: int, y: int, kind: CellKind) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} grid")
        self._cells[y, x] = kind

    def is_open(self, x: int, y: int) -> bool:
        """True for PATH, START and GOAL cells."""
        return self.in_bounds(x, y) and int(self._cells[y, x]) in OPEN_KINDS

    def positions_of(self, kind: CellKind) -> Iterator[Position]:
        """Yield positions holding `kind`, row by row."""
        ys, xs = np.where(self._cells == kind)
        for y, x in zip(ys.tolist(), xs.tolist()):
            yield Position(x, y)

    def count(self, kind: CellKind) -> int:
        return int(np.sum(self._cells == kind))

    def open_mask(self) -> np.ndarray:
        """Boolean [y, x] mask of walkable cells."""
        return np.isin(self._cells, list(OPEN_KINDS))

    def to_array(self) -> np.ndarray:
        """Copy of the underlying [y, x] array."""
        return self._cells.copy()

    def copy(self) -> 'Grid':
        return Grid.from_array(self._cells)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"


def format_grid(grid: Grid, player: Optional[Tuple[int, int]] = None) -> str:
    """ASCII dump of a grid, one row per line. The player overrides its cell."""
    lines = []
    for y in range(grid.height):
        row = []
        for x in range(grid.width):
            if player is not None and (x, y) == tuple(player):
                row.append(PLAYER_CHAR)
            else:
                row.append(KIND_TO_CHAR[grid.cell_kind(x, y)])
        lines.append(''.join(row))
    return '\n'.join(lines)
