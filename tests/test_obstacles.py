import random

import pytest

from cadastros.obstacles import (
    obstacle_limit,
    random_obstacles,
    walk_with_obstacles,
)

ALLOWED = {"#", "O", "X", "A", "B"}


def test_obstacle_limit_smallest_grid():
    assert obstacle_limit(3, 3) == 1


@pytest.mark.parametrize("rows, cols", [(3, 3), (4, 5), (6, 7), (10, 10)])
def test_random_obstacles_stay_off_first_row_and_column(rows, cols):
    rng = random.Random(1234)
    count = obstacle_limit(rows, cols)
    obstacles = random_obstacles(rows, cols, count, rng)
    assert len(obstacles) == count
    for row, col in obstacles:
        assert 1 <= row < rows
        assert 1 <= col < cols


def test_random_obstacles_deterministic_with_seed():
    first = random_obstacles(5, 5, 4, random.Random(7))
    second = random_obstacles(5, 5, 4, random.Random(7))
    assert first == second


@pytest.mark.parametrize("count", [0, -1])
def test_random_obstacles_needs_at_least_one(count):
    with pytest.raises(ValueError):
        random_obstacles(5, 5, count, random.Random(0))


def test_random_obstacles_over_limit():
    with pytest.raises(ValueError):
        random_obstacles(5, 5, obstacle_limit(5, 5) + 1, random.Random(0))


def test_random_obstacles_grid_too_small():
    with pytest.raises(ValueError):
        random_obstacles(2, 5, 1, random.Random(0))


def test_walk_steps_around_obstacle():
    grid = walk_with_obstacles(3, 3, [(1, 1)], (0, 0), (2, 2))
    assert grid == [
        ["A", "X", "#"],
        ["#", "O", "X"],
        ["#", "#", "B"],
    ]


def test_walk_leaves_distant_obstacle_untouched():
    grid = walk_with_obstacles(5, 5, [(4, 1)], (0, 0), (0, 4))
    assert grid[4][1] == "O"
    assert grid[0][1:4] == ["X", "X", "X"]
    assert grid[0][0] == "A"
    assert grid[0][4] == "B"


@pytest.mark.parametrize("seed", range(15))
def test_walk_reaches_goal_with_random_obstacles(seed):
    rows, cols = 6, 7
    obstacles = random_obstacles(rows, cols, obstacle_limit(rows, cols), random.Random(seed))
    for goal in [(0, cols - 1), (rows - 1, 0)]:
        grid = walk_with_obstacles(rows, cols, obstacles, (0, 0), goal)
        assert len(grid) == rows
        assert all(len(line) == cols for line in grid)
        assert grid[0][0] == "A"
        assert grid[goal[0]][goal[1]] == "B"
        cells = [cell for line in grid for cell in line]
        assert set(cells) <= ALLOWED
        assert cells.count("A") == 1
        assert cells.count("B") == 1
        for row, col in obstacles:
            assert grid[row][col] in {"O", "X"}


def test_walk_start_equal_goal_marks_only_goal():
    grid = walk_with_obstacles(4, 4, [(2, 2)], (1, 1), (1, 1))
    cells = [cell for line in grid for cell in line]
    assert grid[1][1] == "B"
    assert cells.count("X") == 0


def test_walk_start_on_obstacle():
    with pytest.raises(ValueError):
        walk_with_obstacles(3, 3, [(1, 1)], (1, 1), (0, 0))


def test_walk_goal_on_obstacle():
    with pytest.raises(ValueError):
        walk_with_obstacles(3, 3, [(1, 1)], (0, 0), (1, 1))


def test_walk_goal_outside_grid():
    with pytest.raises(ValueError):
        walk_with_obstacles(3, 3, [(1, 1)], (0, 0), (3, 0))


def test_walk_obstacle_outside_grid():
    with pytest.raises(ValueError):
        walk_with_obstacles(3, 3, [(5, 1)], (0, 0), (2, 2))


def test_walk_grid_too_small():
    with pytest.raises(ValueError):
        walk_with_obstacles(2, 3, [], (0, 0), (1, 1))