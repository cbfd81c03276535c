"""
MAZE VALIDATOR
==============
Structural checks and metrics for generated mazes.

This module provides:
1. SANITY CHECKER - dimension, border, marker, connectivity and tree checks
2. METRICS ENGINE - open cells, dead ends, junctions, solution length

Used by tests and the CLI; never on the play path.
"""

import logging
import numpy as np
import networkx as nx
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

from mazerunner.core.definitions import (
    MIN_SIZE,
    NEIGHBOR_OFFSETS,
    OPEN_KINDS,
    CellKind,
    Position,
)
from mazerunner.core.grid import Grid
from .farthest_point import UNREACHED, bfs_distances, shortest_path

logger = logging.getLogger(__name__)


def passage_graph(cells: np.ndarray) -> nx.Graph:
    """Undirected graph of open cells with an edge per adjacent open pair."""
    open_mask = np.isin(cells, list(OPEN_KINDS))
    graph = nx.Graph()
    ys, xs = np.nonzero(open_mask)
    height, width = cells.shape
    for y, x in zip(ys.tolist(), xs.tolist()):
        graph.add_node((x, y))
        # Right and down neighbours cover every edge once
        for dx, dy in NEIGHBOR_OFFSETS[:2]:
            nx_, ny_ = x + dx, y + dy
            if nx_ < width and ny_ < height and open_mask[ny_, nx_]:
                graph.add_edge((x, y), (nx_, ny_))
    return graph


class MazeSanityChecker:
    """
    Structural validity checks for a maze grid.

    Catches:
    - Even or undersized dimensions
    - Open cells on the border
    - Missing or duplicated start/goal markers
    - Values outside CellKind
    - Unreachable open cells
    - Cycles in the passage graph
    - Goal not at maximum BFS distance from start
    """

    def __init__(self, grid: Union[Grid, np.ndarray]):
        self.cells = grid.to_array() if isinstance(grid, Grid) else np.asarray(grid)
        self.height, self.width = self.cells.shape

    def check_all(self) -> Tuple[bool, List[str]]:
        """
        Run all sanity checks.

        Returns:
            is_valid: Whether the maze passes all checks
            errors: List of error messages
        """
        errors = []
        errors.extend(self.check_dimensions())
        errors.extend(self.check_border())
        errors.extend(self.check_markers())
        errors.extend(self.check_cell_kinds())

        # Graph checks need a well-formed grid with markers
        if not errors:
            errors.extend(self.check_tree())
            errors.extend(self.check_goal_placement())

        for message in errors:
            logger.debug('Sanity check failed: %s', message)
        return len(errors) == 0, errors

    def check_dimensions(self) -> List[str]:
        errors = []
        for name, value in (('width', self.width), ('height', self.height)):
            if value < MIN_SIZE:
                errors.append(f"{name} {value} is below {MIN_SIZE}")
            elif value % 2 == 0:
                errors.append(f"{name} {value} is even")
        return errors

    def check_border(self) -> List[str]:
        border = np.ones_like(self.cells, dtype=bool)
        border[1:-1, 1:-1] = False
        open_on_border = int(np.sum(border & (self.cells != CellKind.WALL)))
        if open_on_border:
            return [f"{open_on_border} border cells are not walls"]
        return []

    def check_cell_kinds(self) -> List[str]:
        known = {int(kind) for kind in CellKind}
        unknown = sorted(set(np.unique(self.cells).tolist()) - known)
        if unknown:
            return [f"Unknown cell kind values: {unknown}"]
        return []

    def check_markers(self) -> List[str]:
        errors = []
        for kind in (CellKind.START, CellKind.GOAL):
            found = int(np.sum(self.cells == kind))
            if found != 1:
                errors.append(f"Expected exactly one {kind.name} cell, found {found}")
        return errors

    def check_tree(self) -> List[str]:
        """Open cells must form one connected, acyclic component."""
        graph = passage_graph(self.cells)
        if graph.number_of_nodes() == 0:
            return ["Maze has no open cells"]
        errors = []
        if not nx.is_connected(graph):
            components = nx.number_connected_components(graph)
            errors.append(f"Open cells split into {components} components")
        elif not nx.is_tree(graph):
            extra = graph.number_of_edges() - (graph.number_of_nodes() - 1)
            errors.append(f"Passage graph has {extra} extra edges (cycles)")
        return errors

    def check_goal_placement(self) -> List[str]:
        start = self._find(CellKind.START)
        goal = self._find(CellKind.GOAL)
        grid = Grid.from_array(self.cells)
        distances = bfs_distances(grid, start)
        goal_distance = int(distances[goal.y, goal.x])
        max_distance = int(distances.max())
        if goal_distance == UNREACHED:
            return ["Goal is unreachable from start"]
        if goal_distance != max_distance:
            return [f"Goal distance {goal_distance} is below maximum {max_distance}"]
        return []

    def count_elements(self) -> Dict[str, int]:
        """Count occurrences of each cell kind."""
        return {kind.name: int(np.sum(self.cells == kind)) for kind in CellKind}

    def _find(self, kind: CellKind) -> Position:
        ys, xs = np.where(self.cells == kind)
        return Position(int(xs[0]), int(ys[0]))


@dataclass
class MazeMetrics:
    """Shape metrics for a generated maze."""
    width: int
    height: int
    open_cells: int
    dead_ends: int
    junctions: int
    solution_length: int     # Moves from start to goal
    max_distance: int        # Largest BFS distance from start

    @classmethod
    def measure(cls, grid: Grid, start: Tuple[int, int],
                goal: Tuple[int, int]) -> 'MazeMetrics':
        graph = passage_graph(grid.to_array())
        degrees = dict(graph.degree())
        path: Optional[List[Position]] = shortest_path(grid, start, goal)
        distances = bfs_distances(grid, start)
        return cls(
            width=grid.width,
            height=grid.height,
            open_cells=graph.number_of_nodes(),
            dead_ends=sum(1 for d in degrees.values() if d == 1),
            junctions=sum(1 for d in degrees.values() if d >= 3),
            solution_length=len(path) - 1 if path else -1,
            max_distance=int(distances.max()),
        )

    def to_dict(self) -> Dict:
        return {
            'width': self.width,
            'height': self.height,
            'open_cells': self.open_cells,
            'dead_ends': self.dead_ends,
            'junctions': self.junctions,
            'solution_length': self.solution_length,
            'max_distance': self.max_distance,
        }
