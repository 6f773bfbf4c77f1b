"""Day 7: No Space Left On Device."""

from collections import defaultdict
from typing import Dict, TextIO, Tuple

from ..common import lines

DISK_SIZE = 70_000_000
REQUIRED_FREE = 30_000_000
SMALL_DIR_LIMIT = 100_000

Path = Tuple[str, ...]


def directory_sizes(stream: TextIO) -> Dict[Path, int]:
    """Total size of every directory seen in the terminal session, keyed by path."""
    sizes: Dict[Path, int] = defaultdict(int)
    cwd: Path = ()
    sizes[cwd] = 0

    for line in lines(stream):
        if not line:
            continue
        parts = line.split()
        if parts[0] == "$":
            if parts[1] != "cd":
                continue
            target = parts[2]
            if target == "/":
                cwd = ()
            elif target == "..":
                cwd = cwd[:-1]
            else:
                cwd = cwd + (target,)
            continue
        if parts[0] == "dir":
            sizes[cwd + (parts[1],)] += 0
            continue

        size = int(parts[0])
        for depth in range(len(cwd) + 1):
            sizes[cwd[:depth]] += size

    return dict(sizes)


def part_one(stream: TextIO) -> str:
    sizes = directory_sizes(stream)
    return str(sum(size for size in sizes.values() if size <= SMALL_DIR_LIMIT))


def part_two(stream: TextIO) -> str:
    sizes = directory_sizes(stream)
    needed = REQUIRED_FREE - (DISK_SIZE - sizes[()])
    return str(min(size for size in sizes.values() if size >= needed))
