"""Solution registry: bind PuzzleIds to solving functions and dispatch runs."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional, TextIO, Tuple

from .puzzle import PuzzleId

logger = logging.getLogger(__name__)

Solution = Callable[[TextIO], str]
Binding = Tuple[str, Solution]


class DuplicateSolutionError(RuntimeError):
    """Two bindings resolve to the same puzzle; the static table is broken."""


class SolutionNotFoundError(LookupError):
    """No solution is registered for the requested puzzle."""

    def __init__(self, puzzle: PuzzleId):
        super().__init__("solution not found")
        self.puzzle = puzzle


class Solutions:
    """
    Write-once mapping from PuzzleId to a pure solving function.
    Build it with `Solutions.build(bindings)` and pass the instance to
    whatever needs to run puzzles.
    """

    def __init__(self, register: Mapping[PuzzleId, Solution]):
        self._register: Mapping[PuzzleId, Solution] = MappingProxyType(dict(register))

    @classmethod
    def build(cls, bindings: Iterable[Binding]) -> "Solutions":
        register: Dict[PuzzleId, Solution] = {}
        for literal, solution in bindings:
            puzzle = PuzzleId.from_literal(literal)
            if puzzle in register:
                raise DuplicateSolutionError(
                    f"there can't be multiple solutions for the same puzzle ({puzzle})"
                )
            register[puzzle] = solution

        logger.debug("Registered %d solutions", len(register))
        return cls(register)

    def __contains__(self, puzzle: object) -> bool:
        return puzzle in self._register

    def __len__(self) -> int:
        return len(self._register)

    def __iter__(self) -> Iterator[PuzzleId]:
        return iter(self.puzzles())

    def get(self, puzzle: PuzzleId) -> Optional[Solution]:
        return self._register.get(puzzle)

    def puzzles(self) -> List[PuzzleId]:
        return sorted(self._register)

    def run(self, puzzle: PuzzleId, stream: TextIO) -> str:
        """Invoke the solution bound to `puzzle` on `stream` and return its answer as-is."""
        solution = self._register.get(puzzle)
        if solution is None:
            raise SolutionNotFoundError(puzzle)

        logger.debug("Running %s with %s", puzzle, getattr(solution, "__qualname__", solution))
        return solution(stream)


def load_solutions() -> Solutions:
    """Build the registry from every statically known binding."""
    from .y2022 import BINDINGS

    return Solutions.build(BINDINGS)


__all__ = [
    "Binding",
    "DuplicateSolutionError",
    "Solution",
    "SolutionNotFoundError",
    "Solutions",
    "load_solutions",
]
