"""Day 6: Tuning Trouble."""

from collections import Counter
from typing import TextIO


def marker(message: str, size: int) -> int:
    """Number of characters read once the last `size` of them are all distinct."""
    window: Counter = Counter()
    for idx, char in enumerate(message):
        window[char] += 1
        if idx >= size:
            dropped = message[idx - size]
            window[dropped] -= 1
            if not window[dropped]:
                del window[dropped]
        if len(window) == size:
            return idx + 1
    raise ValueError(f"no marker of size {size} found")


def part_one(stream: TextIO) -> str:
    return str(marker(stream.read().strip(), 4))


def part_two(stream: TextIO) -> str:
    return str(marker(stream.read().strip(), 14))
