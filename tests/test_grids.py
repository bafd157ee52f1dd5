import copy

import pytest

from graphdrills.grids import (
    capture_surrounded,
    distance_to_nearest_zero,
    has_valid_path,
    highest_peak,
    max_area_of_island,
    max_distance_from_land,
    nearest_exit,
    oranges_rotting,
    reveal,
    shortest_path_binary_matrix,
)


def _chars(rows):
    return [list(row) for row in rows]


def _orthogonal(rows, cols):
    for r in range(rows):
        for c in range(cols):
            for dr, dc in ((0, 1), (1, 0)):
                nr, nc = r + dr, c + dc
                if nr < rows and nc < cols:
                    yield (r, c), (nr, nc)


# oranges_rotting

def test_oranges_empty_and_no_fresh():
    assert oranges_rotting([]) == 0
    assert oranges_rotting([[2, 0], [0, 2]]) == 0


def test_oranges_unreachable_fresh():
    assert oranges_rotting([[2, 0, 1]]) == -1


@pytest.mark.parametrize("length", [2, 3, 7])
def test_oranges_line_takes_one_minute_per_cell(length):
    grid = [[2] + [1] * (length - 1)]
    assert oranges_rotting(grid) == length - 1


def test_oranges_does_not_mutate_input():
    grid = [[2, 1, 1], [1, 1, 0], [0, 1, 1]]
    before = copy.deepcopy(grid)
    oranges_rotting(grid)
    assert grid == before


# max_distance_from_land

def test_max_distance_all_water_or_all_land():
    assert max_distance_from_land([[0, 0], [0, 0]]) == -1
    assert max_distance_from_land([[1, 1], [1, 1]]) == -1


@pytest.mark.parametrize("n", [2, 3, 5])
def test_max_distance_single_corner_island(n):
    grid = [[0] * n for _ in range(n)]
    grid[0][0] = 1
    assert max_distance_from_land(grid) == 2 * (n - 1)


def test_max_distance_symmetric_under_transpose():
    grid = [[1, 0, 0, 0], [0, 0, 0, 0], [0, 0, 1, 0]]
    transposed = [list(col) for col in zip(*grid)]
    assert max_distance_from_land(grid) == max_distance_from_land(transposed)


# shortest_path_binary_matrix

def test_shortest_path_blocked_corners():
    assert shortest_path_binary_matrix([[1, 0], [0, 0]]) == -1
    assert shortest_path_binary_matrix([[0, 0], [0, 1]]) == -1


@pytest.mark.parametrize("n", [1, 2, 4])
def test_shortest_path_clear_grid_goes_diagonally(n):
    grid = [[0] * n for _ in range(n)]
    assert shortest_path_binary_matrix(grid) == n


def test_shortest_path_wall_blocks():
    grid = [[0, 1, 0], [1, 1, 0], [0, 0, 0]]
    assert shortest_path_binary_matrix(grid) == -1
    assert grid == [[0, 1, 0], [1, 1, 0], [0, 0, 0]]


# capture_surrounded

def test_capture_flips_enclosed_region_only():
    board = _chars(["XXXX", "XOOX", "XXOX", "XOXX"])
    capture_surrounded(board)
    assert board == _chars(["XXXX", "XXXX", "XXXX", "XOXX"])


def test_capture_keeps_border_connected_region():
    rows = ["XOX", "XOX", "XXX"]
    board = _chars(rows)
    capture_surrounded(board)
    assert board == _chars(rows)


def test_capture_empty_board():
    board = []
    capture_surrounded(board)
    assert board == []


# has_valid_path

@pytest.mark.parametrize("length", [1, 2, 5])
def test_valid_path_straight_horizontal_street(length):
    assert has_valid_path([[1] * length]) is True


def test_valid_path_vertical_street_cannot_go_right():
    assert has_valid_path([[2, 2]]) is False


def test_valid_path_requires_matching_connection():
    assert has_valid_path([[1, 2, 1]]) is False


# highest_peak

def test_highest_peak_invariants():
    water = [[0, 0, 1], [1, 0, 0], [0, 0, 0], [0, 0, 0]]
    heights = highest_peak(water)
    rows, cols = len(water), len(water[0])
    for r in range(rows):
        for c in range(cols):
            assert (heights[r][c] == 0) == bool(water[r][c])
    for (a, b), (c, d) in _orthogonal(rows, cols):
        assert abs(heights[a][b] - heights[c][d]) <= 1


def test_highest_peak_row_is_distance_from_water():
    heights = highest_peak([[1, 0, 0, 0]])
    assert heights == [[0, 1, 2, 3]]


# nearest_exit

def test_nearest_exit_none_available():
    maze = _chars(["+++", "+.+", "+++"])
    assert nearest_exit(maze, [1, 1]) == -1


def test_nearest_exit_entrance_itself_is_not_an_exit():
    maze = _chars([".+"])
    assert nearest_exit(maze, [0, 0]) == -1


@pytest.mark.parametrize("length", [3, 5, 8])
def test_nearest_exit_along_corridor(length):
    maze = [list("+" * length), list("+" + "." * (length - 1)), list("+" * length)]
    assert nearest_exit(maze, [1, 1]) == length - 2


# reveal

def test_reveal_mine_becomes_x():
    board = _chars(["EM", "EE"])
    assert reveal(board, [0, 1]) == _chars(["EX", "EE"])


def test_reveal_empty_board_opens_everything():
    board = _chars(["EEE", "EEE"])
    result = reveal(board, [1, 2])
    assert result is board
    assert board == _chars(["BBB", "BBB"])


def test_reveal_counts_adjacent_mines():
    board = _chars(["EEEEE", "EEMEE", "EEEEE", "EEEEE"])
    reveal(board, [3, 0])
    assert board == _chars(["B1E1B", "B1M1B", "B111B", "BBBBB"])


def test_reveal_empty_list():
    assert reveal([], [0, 0]) == []


# distance_to_nearest_zero

def test_distance_invariants():
    mat = [[0, 1, 1, 1], [1, 1, 1, 0], [1, 1, 1, 1]]
    dist = distance_to_nearest_zero(mat)
    rows, cols = len(mat), len(mat[0])
    for r in range(rows):
        for c in range(cols):
            assert (dist[r][c] == 0) == (mat[r][c] == 0)
            if dist[r][c]:
                assert any(
                    dist[nr][nc] == dist[r][c] - 1
                    for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1))
                    if 0 <= nr < rows and 0 <= nc < cols
                )
    for (a, b), (c, d) in _orthogonal(rows, cols):
        assert abs(dist[a][b] - dist[c][d]) <= 1


@pytest.mark.parametrize("zero_at", [0, 2, 4])
def test_distance_single_row(zero_at):
    mat = [[1] * 5]
    mat[0][zero_at] = 0
    assert distance_to_nearest_zero(mat) == [[abs(i - zero_at) for i in range(5)]]


def test_distance_without_zeros_stays_zero():
    assert distance_to_nearest_zero([[1, 1], [1, 1]]) == [[0, 0], [0, 0]]


# max_area_of_island

def test_max_area_full_block():
    grid = [[1] * 4 for _ in range(3)]
    assert max_area_of_island(grid) == 12


def test_max_area_no_land():
    assert max_area_of_island([[0, 0], [0, 0]]) == 0


def test_max_area_diagonals_do_not_connect():
    grid = [[1, 0, 1], [0, 1, 0], [1, 0, 1]]
    assert max_area_of_island(grid) == 1


def test_max_area_bounded_by_land_count_and_input_kept():
    grid = [[1, 1, 0, 0], [1, 0, 0, 1], [0, 0, 1, 1], [0, 1, 1, 0]]
    before = copy.deepcopy(grid)
    area = max_area_of_island(grid)
    assert area <= sum(map(sum, grid))
    assert area == 5
    assert grid == before