"""Puzzle identifiers, solution registry, and input lookup for Advent of Code solutions."""

from .inputs import InputNotFoundError, open_input
from .puzzle import (
    PuzzleError,
    PuzzleId,
    PuzzleParseError,
    PuzzleValidationError,
    default_puzzle,
    parse_puzzle,
)
from .registry import DuplicateSolutionError, SolutionNotFoundError, Solutions, load_solutions

__all__ = [
    "DuplicateSolutionError",
    "InputNotFoundError",
    "PuzzleError",
    "PuzzleId",
    "PuzzleParseError",
    "PuzzleValidationError",
    "SolutionNotFoundError",
    "Solutions",
    "default_puzzle",
    "load_solutions",
    "open_input",
    "parse_puzzle",
]
