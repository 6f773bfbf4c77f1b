"""Day 14: Regolith Reservoir."""

from typing import Set, TextIO, Tuple

from ..common import ints, lines

SOURCE = (500, 0)

Point = Tuple[int, int]


def parse_rocks(stream: TextIO) -> Set[Point]:
    rocks: Set[Point] = set()
    for line in lines(stream):
        if not line:
            continue
        coords = ints(line)
        points = list(zip(coords[::2], coords[1::2]))
        for (x1, y1), (x2, y2) in zip(points, points[1:]):
            for x in range(min(x1, x2), max(x1, x2) + 1):
                for y in range(min(y1, y2), max(y1, y2) + 1):
                    rocks.add((x, y))
    return rocks


def pour(rocks: Set[Point], floor: bool) -> int:
    """
    Drop sand units from SOURCE until one falls into the abyss or, with a
    floor two below the lowest rock, until the source itself is covered.
    """
    blocked = set(rocks)
    lowest = max(y for _, y in rocks)
    rested = 0

    while SOURCE not in blocked:
        x, y = SOURCE
        while True:
            if y == lowest + 1:
                if not floor:
                    return rested
                break
            for dx in (0, -1, 1):
                if (x + dx, y + 1) not in blocked:
                    x, y = x + dx, y + 1
                    break
            else:
                break
        blocked.add((x, y))
        rested += 1

    return rested


def part_one(stream: TextIO) -> str:
    return str(pour(parse_rocks(stream), floor=False))


def part_two(stream: TextIO) -> str:
    return str(pour(parse_rocks(stream), floor=True))
