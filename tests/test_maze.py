"""Tests for the Maze facade."""

import random

import networkx as nx
import numpy as np
import pytest

from mazerunner.core.definitions import (
    DIRECTION_DELTAS,
    CellKind,
    InvalidLevelError,
    MazeError,
    Position,
)
from mazerunner.maze import Maze, MazeOptions, maze_dimensions
from mazerunner.simulation.farthest_point import bfs_distances, shortest_path
from mazerunner.simulation.validator import passage_graph


def walk(maze, path):
    """Drive the maze along a list of adjacent positions."""
    for a, b in zip(path, path[1:]):
        assert maze.try_move(b.x - a.x, b.y - a.y)


class TestDimensions:

    @pytest.mark.parametrize("level,expected", [(1, 7), (2, 9), (3, 11), (10, 25), (50, 105)])
    def test_dimension_formula(self, level, expected):
        assert maze_dimensions(level) == (expected, expected)

    @pytest.mark.parametrize("level", range(1, 15))
    def test_dimensions_odd_and_at_least_seven(self, level):
        maze = Maze.create(level, seed=level)
        assert maze.width == maze.height
        assert maze.width % 2 == 1
        assert maze.width >= 7
        assert maze.width == 7 + 2 * (level - 1)

    @pytest.mark.parametrize("level", [0, -1, -100])
    def test_non_positive_level_rejected(self, level):
        with pytest.raises(InvalidLevelError):
            Maze.create(level, seed=0)

    def test_level_error_types(self):
        assert issubclass(InvalidLevelError, MazeError)
        assert issubclass(InvalidLevelError, ValueError)

    @pytest.mark.parametrize("level", [1.5, "3", True, None])
    def test_non_integer_level_rejected(self, level):
        with pytest.raises(TypeError):
            Maze.create(level, seed=0)

    def test_max_level_cap(self):
        options = MazeOptions(max_level=3)
        assert Maze.create(3, seed=0, options=options).width == 11
        with pytest.raises(InvalidLevelError):
            Maze.create(4, seed=0, options=options)

    def test_custom_sizing(self):
        options = MazeOptions(base_size=9, size_step=4)
        assert options.dimensions(1) == (9, 9)
        assert options.dimensions(3) == (17, 17)

    @pytest.mark.parametrize("kwargs", [
        {'base_size': 8}, {'base_size': 5}, {'size_step': 3}, {'size_step': -2}, {'max_level': 0},
    ])
    def test_invalid_options(self, kwargs):
        with pytest.raises(ValueError):
            MazeOptions(**kwargs)


class TestLevelOne:

    def test_level_one_scenario(self):
        maze = Maze.create(1, seed=17)
        assert (maze.width, maze.height) == (7, 7)
        assert maze.start_position == Position(1, 1)
        assert maze.player_position == Position(1, 1)
        cells = maze.to_array()
        assert np.all(cells[0, :] == CellKind.WALL)
        assert np.all(cells[6, :] == CellKind.WALL)
        assert np.all(cells[:, 0] == CellKind.WALL)
        assert np.all(cells[:, 6] == CellKind.WALL)

    @pytest.mark.parametrize("seed", range(12))
    def test_move_right_from_start(self, seed):
        maze = Maze.create(1, seed=seed)
        open_right = maze.cell_kind(2, 1) != CellKind.WALL
        assert maze.try_move(1, 0) is open_right
        expected = Position(2, 1) if open_right else Position(1, 1)
        assert maze.player_position == expected


class TestStructure:

    @pytest.mark.parametrize("level", [1, 2, 3, 6])
    def test_markers_stamped(self, level):
        maze = Maze.create(level, seed=level * 31)
        grid = maze.grid
        assert grid.count(CellKind.START) == 1
        assert grid.count(CellKind.GOAL) == 1
        assert maze.cell_kind(1, 1) == CellKind.START
        goal = maze.goal_position
        assert maze.cell_kind(goal.x, goal.y) == CellKind.GOAL
        assert goal != maze.start_position

    @pytest.mark.parametrize("seed", range(6))
    def test_open_cells_form_tree(self, seed):
        maze = Maze.create(4, seed=seed)
        graph = passage_graph(maze.to_array())
        assert nx.is_connected(graph)
        assert graph.number_of_edges() == graph.number_of_nodes() - 1

    @pytest.mark.parametrize("seed", range(6))
    def test_level_three_goal_is_farthest(self, seed):
        maze = Maze.create(3, seed=seed)
        assert (maze.width, maze.height) == (11, 11)
        assert maze.grid.count(CellKind.GOAL) == 1
        distances = bfs_distances(maze.grid, maze.start_position)
        goal = maze.goal_position
        assert distances[goal.y, goal.x] == distances.max()
        assert maze.goal_distance == distances.max()

    def test_grid_property_is_snapshot(self):
        maze = Maze.create(2, seed=3)
        snapshot = maze.grid
        snapshot.set(1, 1, CellKind.WALL)
        assert maze.cell_kind(1, 1) == CellKind.START


class TestDeterminism:

    @pytest.mark.parametrize("level", [1, 3, 8])
    def test_same_seed_same_maze(self, level):
        a = Maze.create(level, seed=2024)
        b = Maze.create(level, seed=2024)
        assert a.to_array().tobytes() == b.to_array().tobytes()
        assert a.goal_position == b.goal_position

    def test_rng_handle(self):
        a = Maze.create(5, rng=random.Random(77))
        b = Maze.create(5, rng=random.Random(77))
        assert np.array_equal(a.to_array(), b.to_array())
        assert a.goal_position == b.goal_position


class TestPlay:

    def test_goal_reached_only_on_goal(self):
        maze = Maze.create(3, seed=5)
        path = shortest_path(maze.grid, maze.start_position, maze.goal_position)
        for a, b in zip(path, path[1:]):
            assert not maze.is_goal_reached()
            assert maze.try_move(b.x - a.x, b.y - a.y)
        assert maze.is_goal_reached()
        assert maze.player_position == maze.goal_position
        assert maze.moves_made == maze.goal_distance

    def test_goal_adjacent_is_not_goal(self):
        maze = Maze.create(2, seed=9)
        path = shortest_path(maze.grid, maze.start_position, maze.goal_position)
        walk(maze, path[:-1])
        assert maze.player_position != maze.goal_position
        assert not maze.is_goal_reached()

    def test_rejected_move_leaves_state(self):
        maze = Maze.create(1, seed=0)
        # (1,0) and (0,1) are border walls
        assert maze.try_move(0, -1) is False
        assert maze.try_move(-1, 0) is False
        assert maze.player_position == (1, 1)
        assert maze.moves_made == 0

    def test_step_matches_try_move(self):
        maze = Maze.create(4, seed=12)
        for direction in maze.valid_directions():
            dx, dy = DIRECTION_DELTAS[direction]
            target = maze.player_position.offset(dx, dy)
            assert maze.cell_kind(target.x, target.y) != CellKind.WALL
        direction = maze.valid_directions()[0]
        assert maze.step(direction)
        assert maze.player_position == Position(1, 1).offset(*DIRECTION_DELTAS[direction])

    def test_start_has_at_least_one_exit(self):
        for seed in range(10):
            assert Maze.create(1, seed=seed).valid_directions()

    def test_render_ascii_shows_player(self):
        maze = Maze.create(1, seed=1)
        text = maze.render_ascii().splitlines()
        assert len(text) == 7
        assert text[1][1] == '@'
        assert 'G' in maze.render_ascii()
