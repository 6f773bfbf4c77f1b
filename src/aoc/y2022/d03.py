"""Day 3: Rucksack Reorganization."""

from typing import Iterable, Set, TextIO

from ..common import chunks, lines


def priority(item: str) -> int:
    if item.islower():
        return ord(item) - ord("a") + 1
    return ord(item) - ord("A") + 27


def _shared(groups: Iterable[str]) -> str:
    common: Set[str] = set()
    for idx, group in enumerate(groups):
        common = set(group) if idx == 0 else common & set(group)
    if len(common) != 1:
        raise ValueError(f"expected exactly one shared item, got {sorted(common)}")
    return common.pop()


def part_one(stream: TextIO) -> str:
    total = 0
    for line in lines(stream):
        if not line:
            continue
        half = len(line) // 2
        total += priority(_shared([line[:half], line[half:]]))
    return str(total)


def part_two(stream: TextIO) -> str:
    rucksacks = (line for line in lines(stream) if line)
    return str(sum(priority(_shared(group)) for group in chunks(rucksacks, 3)))
