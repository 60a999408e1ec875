"""Graph drills: path enumeration in a DAG and island counting on a grid."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, MutableSequence, Sequence

_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def all_paths(graph: Sequence[Sequence[int]], n: int) -> list[list[int]]:
    """Every path from node 1 to node ``n`` in a directed acyclic graph.

    ``graph`` is an adjacency matrix indexed by node number (row and column
    0 unused), where ``graph[s][t] == 1`` marks an edge from ``s`` to ``t``.
    Paths are listed in the order a depth-first search finds them.
    """

    def walk(node: int, path: list[int]) -> Iterator[list[int]]:
        if node == n:
            yield list(path)
            return
        for nxt in range(n + 1):
            if graph[node][nxt] == 1:
                path.append(nxt)
                yield from walk(nxt, path)
                path.pop()

    return list(walk(1, [1]))


def _neighbours(x: int, y: int, width: int, height: int) -> Iterator[tuple[int, int]]:
    for dx, dy in _DIRECTIONS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height:
            yield nx, ny


def _flood_depth_first(
    x: int, y: int, grid: Sequence[Sequence[str]], visited: list[list[bool]]
) -> None:
    width, height = len(grid[0]), len(grid)
    pending = [(x, y)]
    while pending:
        cx, cy = pending.pop()
        if grid[cy][cx] == "0" or visited[cy][cx]:
            continue
        visited[cy][cx] = True
        pending.extend(_neighbours(cx, cy, width, height))


def _flood_breadth_first(
    x: int, y: int, grid: Sequence[Sequence[str]], visited: list[list[bool]]
) -> None:
    width, height = len(grid[0]), len(grid)
    visited[y][x] = True
    queue = deque([(x, y)])
    while queue:
        cx, cy = queue.popleft()
        for nx, ny in _neighbours(cx, cy, width, height):
            if grid[ny][nx] == "0" or visited[ny][nx]:
                continue
            # Mark on enqueue so no cell is queued twice.
            visited[ny][nx] = True
            queue.append((nx, ny))


def num_islands(
    grid: Sequence[Sequence[str] | MutableSequence[str]], breadth_first: bool = False
) -> int:
    """Count groups of ``"1"`` cells joined horizontally or vertically.

    ``grid`` is a sequence of rows, each a string or a sequence of
    ``"0"``/``"1"`` characters. The flood fill is depth-first unless
    ``breadth_first`` is set; both give the same count.
    """
    if not grid:
        return 0
    flood = _flood_breadth_first if breadth_first else _flood_depth_first
    visited = [[False] * len(grid[0]) for _ in grid]
    count = 0
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell == "1" and not visited[y][x]:
                count += 1
                flood(x, y, grid, visited)
    return count