"""Rectangular character grid addressed by (row, col)."""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

Position = Tuple[int, int]

# Up, right, down, left
DIRECTIONS: List[Position] = [(-1, 0), (0, 1), (1, 0), (0, -1)]


@dataclass
class Grid:
    cells: List[str]

    @classmethod
    def from_lines(cls, rows: Iterable[str]) -> "Grid":
        cells = [row for row in rows if row]
        if any(len(row) != len(cells[0]) for row in cells):
            raise ValueError("Grid rows must have the same width")
        return cls(cells=cells)

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def __contains__(self, pos: Position) -> bool:
        row, col = pos
        return 0 <= row < self.height and 0 <= col < self.width

    def __getitem__(self, pos: Position) -> str:
        row, col = pos
        return self.cells[row][col]

    def positions(self) -> Iterator[Position]:
        for row in range(self.height):
            for col in range(self.width):
                yield row, col

    def find(self, char: str) -> Optional[Position]:
        for pos in self.positions():
            if self[pos] == char:
                return pos
        return None

    def neighbours(self, pos: Position) -> Iterator[Position]:
        row, col = pos
        for d_row, d_col in DIRECTIONS:
            nxt = (row + d_row, col + d_col)
            if nxt in self:
                yield nxt

    def ray(self, pos: Position, direction: Position) -> Iterator[Position]:
        """Positions walking from `pos` (exclusive) towards the edge."""
        row, col = pos
        d_row, d_col = direction
        row, col = row + d_row, col + d_col
        while (row, col) in self:
            yield row, col
            row, col = row + d_row, col + d_col
