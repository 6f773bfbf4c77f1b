"""Day 8: Treetop Tree House."""

from typing import TextIO

from ..common import Grid, lines
from ..common.grid import DIRECTIONS


def part_one(stream: TextIO) -> str:
    grid = Grid.from_lines(lines(stream))
    visible = 0
    for pos in grid.positions():
        height = grid[pos]
        if any(all(grid[other] < height for other in grid.ray(pos, d)) for d in DIRECTIONS):
            visible += 1
    return str(visible)


def part_two(stream: TextIO) -> str:
    grid = Grid.from_lines(lines(stream))
    best = 0
    for pos in grid.positions():
        height = grid[pos]
        score = 1
        for direction in DIRECTIONS:
            seen = 0
            for other in grid.ray(pos, direction):
                seen += 1
                if grid[other] >= height:
                    break
            score *= seen
        best = max(best, score)
    return str(best)
