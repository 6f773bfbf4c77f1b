"""Day 4: Camp Cleanup."""

import re
from typing import Iterator, TextIO, Tuple

from ..common import lines

_PAIR = re.compile(r"^(?P<a>\d+)-(?P<b>\d+),(?P<c>\d+)-(?P<d>\d+)$")

Section = Tuple[int, int]


def _pairs(stream: TextIO) -> Iterator[Tuple[Section, Section]]:
    for line in lines(stream):
        if not line:
            continue
        match = _PAIR.match(line)
        if not match:
            raise ValueError(f"invalid assignment pair: {line!r}")
        a, b, c, d = (int(match.group(k)) for k in "abcd")
        yield (a, b), (c, d)


def _contains(outer: Section, inner: Section) -> bool:
    return outer[0] <= inner[0] and outer[1] >= inner[1]


def _overlaps(first: Section, second: Section) -> bool:
    return first[0] <= second[1] and second[0] <= first[1]


def part_one(stream: TextIO) -> str:
    return str(sum(
        1 for first, second in _pairs(stream)
        if _contains(first, second) or _contains(second, first)
    ))


def part_two(stream: TextIO) -> str:
    return str(sum(1 for first, second in _pairs(stream) if _overlaps(first, second)))
