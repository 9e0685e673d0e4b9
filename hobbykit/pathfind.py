"""Shortest paths on a small blocked grid by distance flooding and backtracking."""

from __future__ import annotations

import heapq
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

Position = tuple[int, int]

_STEPS: tuple[Position, ...] = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, -1),
    (1, -1),
    (-1, 1),
    (1, 1),
)

DEFAULT_MAP = (
    "........",
    "........",
    ".######.",
    ".#....#.",
    ".#......",
    ".##.#...",
    "..###...",
    "........",
)


class Grid:
    """Rectangular map given as rows of text; '#' marks a blocked cell, '.' an open one."""

    def __init__(self, rows: Sequence[str]) -> None:
        if not rows:
            raise ValueError("grid needs at least one row")
        width = len(rows[0])
        if width == 0:
            raise ValueError("grid rows must not be empty")
        blocked: set[Position] = set()
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {y} has width {len(row)}, expected {width}")
            for x, cell in enumerate(row):
                if cell == "#":
                    blocked.add((x, y))
                elif cell != ".":
                    raise ValueError(f"unknown cell {cell!r} at {x}:{y}")
        self.width = width
        self.height = len(rows)
        self._blocked = frozenset(blocked)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_blocked(self, x: int, y: int) -> bool:
        """Cells outside the grid count as blocked."""
        return not self.is_inside(x, y) or (x, y) in self._blocked


@dataclass(frozen=True)
class Waypoint:
    x: int
    y: int
    distance: int


@dataclass
class PathResult:
    grid: Grid
    distances: dict[Position, int]
    waypoints: list[Waypoint] = field(default_factory=list)

    def render(self) -> str:
        """Draw the grid: '#' for walls, 'X' for the path, otherwise the distance."""
        marked = {(w.x, w.y) for w in self.waypoints[1:]}
        lines = []
        for y in range(self.grid.height):
            cells = []
            for x in range(self.grid.width):
                if self.grid.is_blocked(x, y):
                    cells.append("  #")
                elif (x, y) in marked:
                    cells.append("  X")
                else:
                    cells.append(f"{self.distances.get((x, y), 0):3d}")
            lines.append("".join(cells))
        return "\n".join(lines) + "\n"


def _steps(directions: int) -> tuple[Position, ...]:
    if directions not in (4, 8):
        raise ValueError(f"directions must be 4 or 8, got {directions}")
    return _STEPS[:directions]


def distance_map(grid: Grid, start: Position, directions: int = 4) -> dict[Position, int]:
    """Step count from ``start`` to every reachable open cell."""
    steps = _steps(directions)
    done: dict[Position, int] = {start: 0}
    pending: dict[Position, int] = {start: 0}
    queue: list[Position] = [start]
    while queue:
        current = heapq.heappop(queue)
        dist = pending.pop(current)
        for dx, dy in steps:
            nxt = (current[0] + dx, current[1] + dy)
            if grid.is_blocked(*nxt):
                continue
            if nxt not in done or done[nxt] > dist + 1:
                done[nxt] = dist + 1
                if nxt in pending:
                    pending[nxt] = min(pending[nxt], dist + 1)
                else:
                    pending[nxt] = dist + 1
                    heapq.heappush(queue, nxt)
    return done


def find_path(
    grid: Grid, start: Position, target: Position, directions: int = 4
) -> PathResult:
    """Shortest path from ``start`` to ``target``; waypoints run from start to target."""
    steps = _steps(directions)
    done = distance_map(grid, start, directions)
    if target not in done:
        raise ValueError(f"target {target[0]}:{target[1]} is not reachable")
    reversed_path = [Waypoint(target[0], target[1], done[target])]
    current = target
    while current != start:
        wanted = done[current] - 1
        for dx, dy in steps:
            nxt = (current[0] + dx, current[1] + dy)
            if grid.is_inside(*nxt) and done.get(nxt) == wanted:
                current = nxt
                reversed_path.append(Waypoint(nxt[0], nxt[1], wanted))
                break
        else:
            raise RuntimeError(f"no predecessor for {current[0]}:{current[1]}")
    return PathResult(grid, done, reversed_path[::-1])


def main(argv: list[str] | None = None) -> int:
    result = find_path(Grid(DEFAULT_MAP), (4, 4), (0, 7))
    print()
    sys.stdout.write(result.render())
    for waypoint in result.waypoints:
        print(f"node: {waypoint.x}:{waypoint.y} distance: {waypoint.distance}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())