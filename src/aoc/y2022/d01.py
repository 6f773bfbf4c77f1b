"""Day 1: Calorie Counting."""

from typing import List, TextIO

from ..common import ints, paragraphs


def _totals(stream: TextIO) -> List[int]:
    return [sum(ints(" ".join(group))) for group in paragraphs(stream)]


def part_one(stream: TextIO) -> str:
    return str(max(_totals(stream), default=0))


def part_two(stream: TextIO) -> str:
    return str(sum(sorted(_totals(stream), reverse=True)[:3]))
