"""Locate and open puzzle input files under an input root directory."""

import logging
from pathlib import Path
from typing import List, TextIO

from .puzzle import PuzzleId

logger = logging.getLogger(__name__)


class InputNotFoundError(FileNotFoundError):
    """None of the candidate input files exist."""


def input_candidates(puzzle: PuzzleId, root: Path) -> List[Path]:
    """
    Candidate files for a puzzle, most specific first:
      <root>/<year>/<DD>.<phase>.txt
      <root>/<year>/<DD>.<phase - 1>.txt
      <root>/<year>/<DD>.txt
    """
    folder = Path(root) / str(puzzle.year)
    day = f"{puzzle.day:02d}"

    candidates = [folder / f"{day}.{puzzle.phase}.txt"]
    if puzzle.phase - 1 >= 1:
        candidates.append(folder / f"{day}.{puzzle.phase - 1}.txt")
    candidates.append(folder / f"{day}.txt")
    return candidates


def open_input(puzzle: PuzzleId, root: Path) -> TextIO:
    """Open the first existing candidate for reading; the caller closes it."""
    for path in input_candidates(puzzle, root):
        if path.is_file():
            logger.debug("Reading input for %s from %s", puzzle, path)
            return open(path, "r", encoding="utf-8")

    raise InputNotFoundError("input not found")
