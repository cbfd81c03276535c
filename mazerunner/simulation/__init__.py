"""
Maze Simulation Module
======================
Search, movement and validation components.

This module contains:
- farthest_point: BFS goal placement plus distance/path helpers
- player: PlayerState movement validation
- validator: MazeSanityChecker and MazeMetrics
"""

from .farthest_point import (
    FarthestPointFinder,
    FarthestPointResult,
    UNREACHED,
    bfs_distances,
    find_farthest,
    shortest_path,
)
from .player import PlayerState
from .validator import MazeSanityChecker, MazeMetrics, passage_graph

__all__ = [
    'FarthestPointFinder',
    'FarthestPointResult',
    'UNREACHED',
    'bfs_distances',
    'find_farthest',
    'shortest_path',
    'PlayerState',
    'MazeSanityChecker',
    'MazeMetrics',
    'passage_graph',
]
