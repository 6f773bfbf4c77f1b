"""Day 9: Rope Bridge."""

from typing import Iterator, List, Set, TextIO, Tuple

from ..common import lines

Knot = Tuple[int, int]

_STEPS = {"U": (0, 1), "D": (0, -1), "L": (-1, 0), "R": (1, 0)}


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def _follow(head: Knot, tail: Knot) -> Knot:
    dx, dy = head[0] - tail[0], head[1] - tail[1]
    if abs(dx) <= 1 and abs(dy) <= 1:
        return tail
    return tail[0] + _sign(dx), tail[1] + _sign(dy)


def _motions(stream: TextIO) -> Iterator[Tuple[int, int]]:
    for line in lines(stream):
        if not line:
            continue
        direction, count = line.split()
        if direction not in _STEPS:
            raise ValueError(f"invalid motion: {line!r}")
        for _ in range(int(count)):
            yield _STEPS[direction]


def tail_positions(stream: TextIO, knots: int) -> int:
    rope: List[Knot] = [(0, 0)] * knots
    visited: Set[Knot] = {rope[-1]}

    for dx, dy in _motions(stream):
        rope[0] = (rope[0][0] + dx, rope[0][1] + dy)
        for idx in range(1, knots):
            rope[idx] = _follow(rope[idx - 1], rope[idx])
        visited.add(rope[-1])

    return len(visited)


def part_one(stream: TextIO) -> str:
    return str(tail_positions(stream, 2))


def part_two(stream: TextIO) -> str:
    return str(tail_positions(stream, 10))
