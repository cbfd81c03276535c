"""
Farthest-Point Goal Placement
=============================

Breadth-first search from the start cell over 4-neighbours. The PATH cell with
the largest hop distance becomes the goal, which maximizes the traversal the
player needs on a perfect maze.

Tie-break: neighbours expand in fixed order (+x, +y, -x, -y) and the running
maximum only moves on a strictly larger distance, so the first cell discovered
at the maximum distance wins. With a seeded generator the goal is reproducible.

Also provides the BFS helpers used by validation and the CLI:
- bfs_distances: full distance map over open cells
- shortest_path: start -> goal path with parent reconstruction
"""

import logging
import numpy as np
from collections import deque
from dataclasses import dataclass
from typing import AbstractSet, Dict, List, Optional, Tuple

from mazerunner.core.definitions import (
    NEIGHBOR_OFFSETS,
    OPEN_KINDS,
    CellKind,
    Position,
)
from mazerunner.core.grid import Grid

logger = logging.getLogger(__name__)

UNREACHED = -1


@dataclass
class FarthestPointResult:
    """Result of a farthest-point search."""
    farthest: Position
    max_distance: int
    distances: np.ndarray   # [y, x] hop distances, UNREACHED where not visited
    nodes_explored: int


class FarthestPointFinder:
    """
    Selects the goal cell for a freshly carved grid.

    Expands only into PATH cells; the start coordinate is marked visited up
    front and so is never a candidate. Run once at construction time, never
    during play.
    """

    def __init__(self, grid: Grid):
        self.grid = grid

    def search(self, start: Tuple[int, int]) -> FarthestPointResult:
        start = Position(*start)
        grid = self.grid

        distances = np.full(grid.shape, UNREACHED, dtype=np.int32)
        distances[start.y, start.x] = 0
        queue = deque([start])

        farthest = start
        max_distance = 0
        nodes_explored = 0

        while queue:
            current = queue.popleft()
            nodes_explored += 1
            current_distance = distances[current.y, current.x]

            for dx, dy in NEIGHBOR_OFFSETS:
                nx, ny = current.x + dx, current.y + dy
                if not grid.is_interior(nx, ny):
                    continue
                if distances[ny, nx] != UNREACHED:
                    continue
                if grid.cell_kind(nx, ny) != CellKind.PATH:
                    continue

                distances[ny, nx] = current_distance + 1
                # Strict '>' keeps the first cell found at a given distance
                if distances[ny, nx] > max_distance:
                    max_distance = int(distances[ny, nx])
                    farthest = Position(nx, ny)
                queue.append(Position(nx, ny))

        logger.debug('Farthest point from %s: %s at distance %d (%d nodes explored)',
                     tuple(start), tuple(farthest), max_distance, nodes_explored)
        return FarthestPointResult(
            farthest=farthest,
            max_distance=max_distance,
            distances=distances,
            nodes_explored=nodes_explored,
        )


def find_farthest(grid: Grid, start: Tuple[int, int]) -> Position:
    """Return the PATH cell of maximum BFS hop distance from start."""
    return FarthestPointFinder(grid).search(start).farthest


def bfs_distances(grid: Grid, start: Tuple[int, int],
                  passable: AbstractSet[int] = OPEN_KINDS) -> np.ndarray:
    """
    Hop distances from start to every reachable cell.

    Args:
        grid: Maze grid
        start: Source cell
        passable: Cell kinds the search may enter (default: PATH, START, GOAL)

    Returns:
        [y, x] int array, UNREACHED for cells not reached
    """
    start = Position(*start)
    distances = np.full(grid.shape, UNREACHED, dtype=np.int32)
    distances[start.y, start.x] = 0
    queue = deque([start])

    while queue:
        current = queue.popleft()
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = current.x + dx, current.y + dy
            if not grid.in_bounds(nx, ny) or distances[ny, nx] != UNREACHED:
                continue
            if grid.cell_kind(nx, ny) not in passable:
                continue
            distances[ny, nx] = distances[current.y, current.x] + 1
            queue.append(Position(nx, ny))

    return distances


def shortest_path(grid: Grid, start: Tuple[int, int],
                  goal: Tuple[int, int]) -> Optional[List[Position]]:
    """
    BFS shortest path over open cells, inclusive of both ends.

    Returns None if goal is unreachable.
    """
    start, goal = Position(*start), Position(*goal)
    parent: Dict[Position, Optional[Position]] = {start: None}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        if current == goal:
            break
        for dx, dy in NEIGHBOR_OFFSETS:
            nxt = current.offset(dx, dy)
            if nxt in parent or not grid.is_open(nxt.x, nxt.y):
                continue
            parent[nxt] = current
            queue.append(nxt)

    if goal not in parent:
        return None

    path = []
    node: Optional[Position] = goal
    while node is not None:
        path.append(node)
        node = parent[node]
    path.reverse()
    return path
