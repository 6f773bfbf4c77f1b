import re
from typing import Iterable, Iterator, List, TextIO, TypeVar

T = TypeVar("T")

_INT = re.compile(r"-?\d+")


def lines(stream: TextIO) -> Iterator[str]:
    """Yield each line of the stream without its trailing newline."""
    for line in stream:
        yield line.rstrip("\r\n")


def paragraphs(stream: TextIO) -> Iterator[List[str]]:
    """Yield groups of lines separated by blank lines."""
    group: List[str] = []
    for line in lines(stream):
        if not line.strip():
            if group:
                yield group
            group = []
            continue
        group.append(line)
    if group:
        yield group


def ints(text: str) -> List[int]:
    return [int(m) for m in _INT.findall(text)]


def chunks(items: Iterable[T], size: int) -> Iterator[List[T]]:
    batch: List[T] = []
    for item in items:
        batch.append(item)
        if len(batch) == size:
            yield batch
            batch = []
    if batch:
        yield batch
