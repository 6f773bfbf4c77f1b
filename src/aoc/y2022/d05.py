"""
Day 5: Supply Stacks.

The input is a drawing of crate stacks, a blank line, then one move
command per line. Part one's crane moves crates one at a time, part two's
lifts a whole slice at once and keeps its order.
"""

import re
from typing import List, TextIO, Tuple

from ..common import lines

_MOVE = re.compile(r"^move (?P<amount>\d+) from (?P<source>\d+) to (?P<target>\d+)$")

Stacks = List[List[str]]
Move = Tuple[int, int, int]


def _parse(stream: TextIO) -> Tuple[Stacks, List[Move]]:
    drawing: List[str] = []
    moves: List[Move] = []

    rows = lines(stream)
    for line in rows:
        if not line.strip():
            break
        drawing.append(line)

    for line in rows:
        if not line:
            continue
        match = _MOVE.match(line)
        if not match:
            raise ValueError(f"invalid move: {line!r}")
        moves.append((
            int(match.group("amount")),
            int(match.group("source")) - 1,
            int(match.group("target")) - 1,
        ))

    if not drawing:
        raise ValueError("missing crate drawing")

    # Last drawing row holds the stack numbers; crate letters sit at 1, 5, 9, ...
    count = len(drawing[-1].split())
    stacks: Stacks = [[] for _ in range(count)]
    for row in reversed(drawing[:-1]):
        for idx in range(count):
            col = 1 + 4 * idx
            if col < len(row) and row[col].strip():
                stacks[idx].append(row[col])

    return stacks, moves


def _tops(stacks: Stacks) -> str:
    return "".join(stack[-1] for stack in stacks if stack)


def part_one(stream: TextIO) -> str:
    stacks, moves = _parse(stream)
    for amount, source, target in moves:
        for _ in range(amount):
            stacks[target].append(stacks[source].pop())
    return _tops(stacks)


def part_two(stream: TextIO) -> str:
    stacks, moves = _parse(stream)
    for amount, source, target in moves:
        lifted = stacks[source][-amount:]
        del stacks[source][-amount:]
        stacks[target].extend(lifted)
    return _tops(stacks)
