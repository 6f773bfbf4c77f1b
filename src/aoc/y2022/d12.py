"""Day 12: Hill Climbing Algorithm."""

from collections import deque
from typing import Callable, Dict, TextIO

from ..common import Grid, Position, lines


def _elevation(char: str) -> int:
    if char == "S":
        return ord("a")
    if char == "E":
        return ord("z")
    return ord(char)


def _climb_from_summit(grid: Grid, is_goal: Callable[[Position], bool]) -> int:
    """
    Breadth-first search walking down from E, so a single pass answers
    "shortest path from any matching start".
    """
    summit = grid.find("E")
    if summit is None:
        raise ValueError("heightmap has no E")

    distances: Dict[Position, int] = {summit: 0}
    queue = deque([summit])
    while queue:
        pos = queue.popleft()
        if is_goal(pos):
            return distances[pos]
        for nxt in grid.neighbours(pos):
            if nxt in distances:
                continue
            if _elevation(grid[pos]) - _elevation(grid[nxt]) > 1:
                continue
            distances[nxt] = distances[pos] + 1
            queue.append(nxt)

    raise ValueError("no path to the summit")


def part_one(stream: TextIO) -> str:
    grid = Grid.from_lines(lines(stream))
    return str(_climb_from_summit(grid, lambda pos: grid[pos] == "S"))


def part_two(stream: TextIO) -> str:
    grid = Grid.from_lines(lines(stream))
    return str(_climb_from_summit(grid, lambda pos: _elevation(grid[pos]) == ord("a")))
