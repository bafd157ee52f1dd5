"""Graph searches over words, bombs, equations, rooms, routes and boards."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field


@dataclass
class Employee:
    """An employee with an importance value and direct subordinates."""

    id: int
    importance: int
    subordinates: list[int] = field(default_factory=list)


def _patterns(word: str) -> Iterator[str]:
    for j in range(len(word)):
        yield word[:j] + "*" + word[j + 1:]


def ladder_length(begin_word: str, end_word: str, word_list: Iterable[str]) -> int:
    """Words in the shortest transformation sequence, or 0 if there is none."""
    words = set(word_list)
    if end_word not in words:
        return 0
    words.add(begin_word)
    neighbours: dict[str, list[str]] = defaultdict(list)
    for word in words:
        for pattern in _patterns(word):
            neighbours[pattern].append(word)

    visited = {begin_word}
    queue = deque([begin_word])
    length = 1
    while queue:
        for _ in range(len(queue)):
            word = queue.popleft()
            if word == end_word:
                return length
            for pattern in _patterns(word):
                for other in neighbours.get(pattern, ()):
                    if other not in visited:
                        visited.add(other)
                        queue.append(other)
        length += 1
    return 0


def maximum_detonation(bombs: Sequence[Sequence[int]]) -> int:
    """Most bombs that detonating a single bomb can set off."""
    reach: dict[int, list[int]] = defaultdict(list)
    for i, (x1, y1, r1) in enumerate(bombs):
        for j in range(i + 1, len(bombs)):
            x2, y2, r2 = bombs[j]
            distance = (x1 - x2) ** 2 + (y1 - y2) ** 2
            if distance <= r1 * r1:
                reach[i].append(j)
            if distance <= r2 * r2:
                reach[j].append(i)

    best = 0
    for start in range(len(bombs)):
        visited = {start}
        stack = [start]
        while stack:
            for neighbour in reach.get(stack.pop(), ()):
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)
        best = max(best, len(visited))
    return best


def calc_equation(
    equations: Sequence[Sequence[str]],
    values: Sequence[float],
    queries: Sequence[Sequence[str]],
) -> list[float]:
    """Answer each division query from the given ratios, -1.0 when unknown."""
    graph: dict[str, list[tuple[str, float]]] = defaultdict(list)
    for (a, b), value in zip(equations, values):
        graph[a].append((b, value))
        graph[b].append((a, 1.0 / value))

    def search(current: str, target: str, visited: set[str]) -> float:
        if current not in graph:
            return -1.0
        if current == target:
            return 1.0
        visited.add(current)
        for neighbour, weight in graph[current]:
            if neighbour in visited:
                continue
            result = search(neighbour, target, visited)
            if result != -1.0:
                return result * weight
        return -1.0

    return [search(start, end, set()) for start, end in queries]


def count_provinces(is_connected: Sequence[Sequence[int]]) -> int:
    """Number of connected groups in an adjacency matrix."""
    matrix = [list(row) for row in is_connected]
    provinces = 0
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if matrix[i][j] != 1:
                continue
            provinces += 1
            stack = [(i, j)]
            while stack:
                a, b = stack.pop()
                if matrix[a][b] != 1:
                    continue
                matrix[a][b] = 0
                stack.extend((b, k) for k, value in enumerate(matrix[b]) if value == 1)
    return provinces


def total_importance(employees: Iterable[Employee], employee_id: int) -> int:
    """Importance of an employee plus that of everyone reporting to them."""
    by_id = {e.id: (e.importance, e.subordinates) for e in employees}
    total = 0
    queue = deque([employee_id])
    while queue:
        importance, subordinates = by_id.get(queue.popleft(), (0, []))
        total += importance
        queue.extend(subordinates)
    return total


def _turns(lock: str) -> Iterator[str]:
    for i, char in enumerate(lock):
        digit = int(char)
        for step in (1, -1):
            yield lock[:i] + str((digit + step) % 10) + lock[i + 1:]


def open_lock(deadends: Iterable[str], target: str) -> int:
    """Fewest wheel turns from "0000" to the target avoiding dead ends, or -1."""
    visited = set(deadends)
    if "0000" in visited:
        return -1
    queue = deque([("0000", 0)])
    while queue:
        lock, turns = queue.popleft()
        if lock == target:
            return turns
        for following in _turns(lock):
            if following not in visited:
                visited.add(following)
                queue.append((following, turns + 1))
    return -1


def num_buses_to_destination(
    routes: Sequence[Sequence[int]], source: int, target: int
) -> int:
    """Fewest buses to travel from source to target, or -1."""
    if source == target:
        return 0
    stop_routes: dict[int, list[int]] = defaultdict(list)
    for index, route in enumerate(routes):
        for stop in route:
            stop_routes[stop].append(index)

    visited_stops = {source}
    visited_routes: set[int] = set()
    queue = deque([source])
    buses = 0
    while queue:
        buses += 1
        for _ in range(len(queue)):
            stop = queue.popleft()
            for route in stop_routes.get(stop, ()):
                if route in visited_routes:
                    continue
                visited_routes.add(route)
                for next_stop in routes[route]:
                    if next_stop == target:
                        return buses
                    if next_stop not in visited_stops:
                        visited_stops.add(next_stop)
                        queue.append(next_stop)
    return -1


def can_visit_all_rooms(rooms: Sequence[Sequence[int]]) -> bool:
    """Whether the keys found from room 0 open every room."""
    opened = {0}
    stack = list(rooms[0])
    while stack:
        room = stack.pop()
        if room not in opened:
            opened.add(room)
            stack.extend(rooms[room])
    return len(opened) == len(rooms)


def snakes_and_ladders(board: Sequence[Sequence[int]]) -> int:
    """Fewest dice rolls to reach the last square of a boustrophedon board, or -1."""
    size = len(board)
    goal = size * size
    seen = {1}
    queue = deque([1])
    steps = 0
    while queue:
        for _ in range(len(queue)):
            current = queue.popleft()
            if current == goal:
                return steps
            for move in range(current + 1, min(current + 6, goal) + 1):
                r, c = divmod(move - 1, size)
                if r % 2 == 1:
                    c = size - 1 - c
                r = size - 1 - r
                square = board[r][c] if board[r][c] != -1 else move
                if square not in seen:
                    seen.add(square)
                    queue.append(square)
        steps += 1
    return -1