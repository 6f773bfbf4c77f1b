"""Day 10: Cathode-Ray Tube."""

from typing import Iterator, TextIO

from ..common import lines

SAMPLED_CYCLES = (20, 60, 100, 140, 180, 220)
SCREEN_WIDTH = 40
SCREEN_HEIGHT = 6


def register_values(stream: TextIO) -> Iterator[int]:
    """Value of X during each cycle, starting at cycle 1."""
    x = 1
    for line in lines(stream):
        if not line:
            continue
        parts = line.split()
        if parts[0] == "noop":
            yield x
        elif parts[0] == "addx":
            yield x
            yield x
            x += int(parts[1])
        else:
            raise ValueError(f"invalid instruction: {line!r}")


def part_one(stream: TextIO) -> str:
    return str(sum(
        cycle * x
        for cycle, x in enumerate(register_values(stream), start=1)
        if cycle in SAMPLED_CYCLES
    ))


def part_two(stream: TextIO) -> str:
    pixels = []
    for idx, x in enumerate(register_values(stream)):
        if idx >= SCREEN_WIDTH * SCREEN_HEIGHT:
            break
        pixels.append("#" if abs(idx % SCREEN_WIDTH - x) <= 1 else ".")

    return "\n".join(
        "".join(pixels[row:row + SCREEN_WIDTH])
        for row in range(0, len(pixels), SCREEN_WIDTH)
    )
