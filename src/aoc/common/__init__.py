"""Parsing and geometry helpers shared by the daily solutions."""

from .grid import Grid, Position
from .parse import chunks, ints, lines, paragraphs

__all__ = [
    "Grid",
    "Position",
    "chunks",
    "ints",
    "lines",
    "paragraphs",
]
