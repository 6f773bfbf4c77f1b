"""Day 13: Distress Signal."""

import json
from functools import cmp_to_key
from typing import Any, List, TextIO

from ..common import paragraphs

DIVIDERS = ([[2]], [[6]])


def compare(left: Any, right: Any) -> int:
    """Negative when `left` is in the right order before `right`."""
    if isinstance(left, int) and isinstance(right, int):
        return (left > right) - (left < right)
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]

    for a, b in zip(left, right):
        result = compare(a, b)
        if result:
            return result
    return (len(left) > len(right)) - (len(left) < len(right))


def _packets(stream: TextIO) -> List[List[Any]]:
    return [[json.loads(line) for line in pair] for pair in paragraphs(stream)]


def part_one(stream: TextIO) -> str:
    return str(sum(
        idx
        for idx, (left, right) in enumerate(_packets(stream), start=1)
        if compare(left, right) < 0
    ))


def part_two(stream: TextIO) -> str:
    packets = [packet for pair in _packets(stream) for packet in pair]
    packets.extend(DIVIDERS)
    packets.sort(key=cmp_to_key(compare))

    key = 1
    for idx, packet in enumerate(packets, start=1):
        if packet in DIVIDERS:
            key *= idx
    return str(key)
