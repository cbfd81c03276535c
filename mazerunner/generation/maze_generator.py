"""
Perfect Maze Generation
=======================

Algorithm: randomized recursive backtracker over an odd-coordinate lattice.

1. Every cell starts as WALL.
2. Lattice nodes sit at odd (x, y); the even cells between two adjacent
   nodes are the carvable walls.
3. From (1, 1), shuffle the four lattice steps (Fisher-Yates with the
   supplied RNG) and walk into each unvisited interior neighbour, carving the
   midpoint and the neighbour to PATH.
4. Backtrack when a node has no unvisited neighbours left.

The walk visits every lattice node exactly once, so the carved passages form
a spanning tree: exactly one simple path between any two cells, no cycles.

The recursion is unrolled onto an explicit stack of (node, remaining
directions) frames. Draw order matches the recursive form, so a given seed
produces the same grid either way.
"""

import random
import logging
from typing import Iterator, List, Optional, Tuple

from mazerunner.core.definitions import (
    CARVE_OFFSETS,
    START_POSITION,
    CellKind,
    Position,
    validate_dimensions,
)
from mazerunner.core.grid import Grid

logger = logging.getLogger(__name__)


class MazeGenerator:
    """
    Builds a perfect maze into a fresh Grid.

    Randomness comes only from the RNG handed in (or one seeded from `seed`),
    never from the process-wide `random` state.
    """

    def __init__(self, width: int, height: int, seed: Optional[int] = None,
                 rng: Optional[random.Random] = None):
        """
        Args:
            width: Odd grid width, >= 7
            height: Odd grid height, >= 7
            seed: Seed for a private random.Random (ignored if rng is given)
            rng: Explicit RNG handle to draw shuffles from
        """
        validate_dimensions(width, height)
        self.width = width
        self.height = height
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.cells_carved = 0

    def generate(self) -> Grid:
        """Carve a perfect maze and return the grid."""
        grid = Grid(self.width, self.height)
        visited = [[False] * self.width for _ in range(self.height)]

        start = START_POSITION
        grid.set(start.x, start.y, CellKind.PATH)
        visited[start.y][start.x] = True
        self.cells_carved = 1

        stack: List[Tuple[Position, Iterator[Tuple[int, int]]]] = [
            (start, iter(self._shuffled_offsets()))
        ]
        max_depth = 1

        while stack:
            node, remaining = stack[-1]
            for dx, dy in remaining:
                nx, ny = node.x + dx, node.y + dy
                if not grid.is_interior(nx, ny) or visited[ny][nx]:
                    continue

                # Open the wall between the two lattice nodes
                grid.set(node.x + dx // 2, node.y + dy // 2, CellKind.PATH)
                grid.set(nx, ny, CellKind.PATH)
                visited[ny][nx] = True
                self.cells_carved += 2

                stack.append((Position(nx, ny), iter(self._shuffled_offsets())))
                max_depth = max(max_depth, len(stack))
                break
            else:
                stack.pop()

        logger.debug('Carved %d cells in %dx%d maze (max stack depth %d)',
                     self.cells_carved, self.width, self.height, max_depth)
        return grid

    def _shuffled_offsets(self) -> List[Tuple[int, int]]:
        """Fisher-Yates shuffle of the lattice steps, last index first."""
        offsets = list(CARVE_OFFSETS)
        for i in range(len(offsets) - 1, 0, -1):
            j = self.rng.randrange(i + 1)
            offsets[i], offsets[j] = offsets[j], offsets[i]
        return offsets


def generate_maze(width: int, height: int, seed: Optional[int] = None) -> Grid:
    """Convenience wrapper: generate a perfect maze from a seed."""
    return MazeGenerator(width, height, seed=seed).generate()
