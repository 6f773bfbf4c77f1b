"""Top-level solve interface.

Expose `solve_puzzle(puzzle, solutions, ...)` that accepts either a resolved
PuzzleId or a short puzzle spec compatible with `src.aoc.puzzle.parse_puzzle`.
"""

from pathlib import Path
from typing import Optional, TextIO, Union

from src.aoc.inputs import open_input
from src.aoc.puzzle import MAX_PHASE, PuzzleId, parse_puzzle
from src.aoc.registry import SolutionNotFoundError, Solutions


def solve_puzzle(
    puzzle: Union[PuzzleId, str],
    solutions: Solutions,
    *,
    input_dir: Path = Path("in"),
    stream: Optional[TextIO] = None,
    max_phase: int = MAX_PHASE,
) -> str:
    """
    Solve a puzzle and return its answer.
    Accepts:
      - PuzzleId instances (used directly)
      - Puzzle spec strings (parsed via `parse_puzzle`)
    Reads `stream` when given, otherwise the input file located under `input_dir`.
    """
    if isinstance(puzzle, PuzzleId):
        puzzle_id = puzzle
    elif isinstance(puzzle, str):
        puzzle_id = parse_puzzle(puzzle, max_phase=max_phase)
    else:
        raise TypeError("solve_puzzle expects a PuzzleId or puzzle spec string")

    if stream is not None:
        return solutions.run(puzzle_id, stream)

    # Not-found is checked before touching the filesystem.
    if puzzle_id not in solutions:
        raise SolutionNotFoundError(puzzle_id)

    with open_input(puzzle_id, input_dir) as handle:
        return solutions.run(puzzle_id, handle)


__all__ = ["solve_puzzle"]
