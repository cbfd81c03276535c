"""
Maze generation.
"""

from .maze_generator import MazeGenerator, generate_maze

__all__ = ['MazeGenerator', 'generate_maze']
