"""Grid searches: breadth- and depth-first walks over rectangular boards."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

_ORTHOGONAL = ((0, 1), (0, -1), (1, 0), (-1, 0))
_ALL_EIGHT = _ORTHOGONAL + ((1, 1), (1, -1), (-1, 1), (-1, -1))

# Street directions, indexed so that (d + 2) % 4 is the opposite of d.
_UP, _LEFT, _DOWN, _RIGHT = range(4)
_STEPS = {_UP: (-1, 0), _LEFT: (0, -1), _DOWN: (1, 0), _RIGHT: (0, 1)}
_STREETS = {
    1: frozenset({_LEFT, _RIGHT}),
    2: frozenset({_UP, _DOWN}),
    3: frozenset({_LEFT, _DOWN}),
    4: frozenset({_DOWN, _RIGHT}),
    5: frozenset({_UP, _LEFT}),
    6: frozenset({_UP, _RIGHT}),
}


def _neighbours(
    r: int, c: int, rows: int, cols: int, steps=_ORTHOGONAL
) -> Iterator[tuple[int, int]]:
    for dr, dc in steps:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def _cells(grid: Sequence[Sequence[object]]) -> Iterator[tuple[int, int, object]]:
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            yield r, c, value


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until no fresh orange remains, or -1 if some never rot."""
    if not grid:
        return 0
    cells = [list(row) for row in grid]
    rows, cols = len(cells), len(cells[0])
    queue = deque((r, c) for r, c, v in _cells(cells) if v == 2)
    fresh = sum(1 for _, _, v in _cells(cells) if v == 1)
    if fresh == 0:
        return 0
    minutes = 0
    while queue and fresh > 0:
        minutes += 1
        for _ in range(len(queue)):
            r, c = queue.popleft()
            for nr, nc in _neighbours(r, c, rows, cols):
                if cells[nr][nc] == 1:
                    cells[nr][nc] = 2
                    fresh -= 1
                    queue.append((nr, nc))
    return -1 if fresh > 0 else minutes


def max_distance_from_land(grid: Sequence[Sequence[int]]) -> int:
    """Largest Manhattan distance from a water cell to its nearest land, or -1."""
    rows, cols = len(grid), len(grid[0])
    seen = {(r, c) for r, c, v in _cells(grid) if v == 1}
    if not seen or len(seen) == rows * cols:
        return -1
    queue = deque(seen)
    levels = 0
    while queue:
        for _ in range(len(queue)):
            r, c = queue.popleft()
            for cell in _neighbours(r, c, rows, cols):
                if cell not in seen and grid[cell[0]][cell[1]] == 0:
                    seen.add(cell)
                    queue.append(cell)
        levels += 1
    return levels - 1


def shortest_path_binary_matrix(grid: Sequence[Sequence[int]]) -> int:
    """Cells on the shortest 8-connected clear path corner to corner, or -1."""
    size = len(grid)
    last = size - 1
    if grid[0][0] != 0 or grid[last][last] != 0:
        return -1
    steps = {(0, 0): 1}
    queue = deque([(0, 0)])
    while queue:
        x, y = queue.popleft()
        count = steps[(x, y)]
        if x == last and y == last:
            return count
        for cell in _neighbours(x, y, size, size, _ALL_EIGHT):
            if cell not in steps and grid[cell[0]][cell[1]] == 0:
                steps[cell] = count + 1
                queue.append(cell)
    return -1


def capture_surrounded(board: list[list[str]]) -> None:
    """Flip, in place, every 'O' region not connected to the border into 'X'."""
    if not board:
        return
    rows, cols = len(board), len(board[0])
    border = {(r, c) for r in range(rows) for c in (0, cols - 1)}
    border |= {(r, c) for c in range(cols) for r in (0, rows - 1)}
    safe: set[tuple[int, int]] = set()
    stack = [cell for cell in border if board[cell[0]][cell[1]] == "O"]
    while stack:
        cell = stack.pop()
        if cell in safe:
            continue
        safe.add(cell)
        for nr, nc in _neighbours(*cell, rows, cols):
            if board[nr][nc] == "O" and (nr, nc) not in safe:
                stack.append((nr, nc))
    for r, c, value in list(_cells(board)):
        if value == "O" and (r, c) not in safe:
            board[r][c] = "X"


def has_valid_path(grid: Sequence[Sequence[int]]) -> bool:
    """Whether the streets lead from the top-left to the bottom-right cell."""
    rows, cols = len(grid), len(grid[0])
    seen = {(0, 0)}
    queue = deque([(0, 0)])
    while queue:
        r, c = queue.popleft()
        if (r, c) == (rows - 1, cols - 1):
            return True
        for direction in _STREETS[grid[r][c]]:
            dr, dc = _STEPS[direction]
            nr, nc = r + dr, c + dc
            if not (0 <= nr < rows and 0 <= nc < cols) or (nr, nc) in seen:
                continue
            if (direction + 2) % 4 not in _STREETS[grid[nr][nc]]:
                continue
            seen.add((nr, nc))
            queue.append((nr, nc))
    return False


def highest_peak(is_water: Sequence[Sequence[int]]) -> list[list[int]]:
    """Assign heights: water is 0 and neighbours differ by at most one."""
    rows, cols = len(is_water), len(is_water[0])
    heights = [[-1] * cols for _ in range(rows)]
    queue: deque[tuple[int, int]] = deque()
    for r, c, value in _cells(is_water):
        if value:
            heights[r][c] = 0
            queue.append((r, c))
    while queue:
        r, c = queue.popleft()
        for nr, nc in _neighbours(r, c, rows, cols, ((1, 0), (0, 1), (-1, 0), (0, -1))):
            if heights[nr][nc] == -1:
                heights[nr][nc] = heights[r][c] + 1
                queue.append((nr, nc))
    return heights


def nearest_exit(maze: Sequence[Sequence[str]], entrance: Sequence[int]) -> int:
    """Steps from the entrance to the nearest open border cell, or -1."""
    rows, cols = len(maze), len(maze[0])
    start = (entrance[0], entrance[1])
    visited = {start}
    queue = deque([(start, 0)])
    while queue:
        (r, c), steps = queue.popleft()
        for nr, nc in _neighbours(r, c, rows, cols, ((-1, 0), (1, 0), (0, -1), (0, 1))):
            if maze[nr][nc] != "." or (nr, nc) in visited:
                continue
            if nr in (0, rows - 1) or nc in (0, cols - 1):
                return steps + 1
            visited.add((nr, nc))
            queue.append(((nr, nc), steps + 1))
    return -1


def _adjacent_mines(board: list[list[str]], x: int, y: int) -> int:
    return sum(
        1
        for r in range(x - 1, x + 2)
        for c in range(y - 1, y + 2)
        if 0 <= r < len(board) and 0 <= c < len(board[r]) and board[r][c] == "M"
    )


def reveal(board: list[list[str]], click: Sequence[int]) -> list[list[str]]:
    """Apply a minesweeper click to the board in place and return it."""
    if not board:
        return board
    x, y = click[0], click[1]
    if board[x][y] == "M":
        board[x][y] = "X"
        return board
    stack = [(x, y)]
    first = True
    while stack:
        r, c = stack.pop()
        if not first and board[r][c] == "B":
            continue
        first = False
        mines = _adjacent_mines(board, r, c)
        if mines:
            board[r][c] = str(mines)
            continue
        board[r][c] = "B"
        for nr in range(r - 1, r + 2):
            for nc in range(c - 1, c + 2):
                if 0 <= nr < len(board) and 0 <= nc < len(board[nr]) and board[nr][nc] != "B":
                    stack.append((nr, nc))
    return board


def distance_to_nearest_zero(mat: Sequence[Sequence[int]]) -> list[list[int]]:
    """Distance from every cell to the nearest zero cell."""
    rows, cols = len(mat), len(mat[0])
    result = [[0] * cols for _ in range(rows)]
    seen = {(r, c) for r, c, v in _cells(mat) if v == 0}
    queue = deque(((r, c), 0) for r, c in seen)
    while queue:
        (r, c), dist = queue.popleft()
        for cell in _neighbours(r, c, rows, cols, ((-1, 0), (0, 1), (1, 0), (0, -1))):
            if cell not in seen:
                seen.add(cell)
                result[cell[0]][cell[1]] = dist + 1
                queue.append((cell, dist + 1))
    return result


def max_area_of_island(grid: Sequence[Sequence[int]]) -> int:
    """Size of the largest 4-connected island of ones."""
    rows, cols = len(grid), len(grid[0])
    visited: set[tuple[int, int]] = set()
    best = 0
    for r, c, value in _cells(grid):
        if value == 0 or (r, c) in visited:
            continue
        visited.add((r, c))
        stack = [(r, c)]
        area = 0
        while stack:
            cr, cc = stack.pop()
            area += 1
            for cell in _neighbours(cr, cc, rows, cols):
                if cell not in visited and grid[cell[0]][cell[1]] != 0:
                    visited.add(cell)
                    stack.append(cell)
        best = max(best, area)
    return best