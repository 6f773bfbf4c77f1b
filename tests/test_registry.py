"""Unit tests for the solution registry and dispatch."""

import io

import pytest

from src.aoc.puzzle import PuzzleId
from src.aoc.registry import (
    DuplicateSolutionError,
    SolutionNotFoundError,
    Solutions,
    load_solutions,
)


def _constant(answer):
    calls = []

    def _solution(stream):
        calls.append(stream)
        return answer

    _solution.calls = calls
    return _solution


def test_run_returns_bound_output_verbatim():
    solution = _constant("24000")
    solutions = Solutions.build([("2022.1.1", solution)])

    stream = io.StringIO("ignored")
    assert solutions.run(PuzzleId(2022, 1, 1), stream) == "24000"
    assert solution.calls == [stream]


def test_run_does_not_strip_or_convert_output():
    solutions = Solutions.build([("2022.1.1", lambda stream: "  a\nb  \n")])
    assert solutions.run(PuzzleId(2022, 1, 1), io.StringIO()) == "  a\nb  \n"


def test_run_missing_puzzle_never_invokes_a_solution():
    solution = _constant("nope")
    solutions = Solutions.build([("2022.1.1", solution)])

    with pytest.raises(SolutionNotFoundError, match="solution not found") as excinfo:
        solutions.run(PuzzleId(2022, 1, 2), io.StringIO())
    assert excinfo.value.puzzle == PuzzleId(2022, 1, 2)
    assert solution.calls == []


def test_duplicate_literal_fails_at_build_time():
    with pytest.raises(DuplicateSolutionError):
        Solutions.build([("2022.1.1", _constant("a")), ("2022.1.1", _constant("b"))])


def test_equivalent_literals_are_duplicates():
    with pytest.raises(DuplicateSolutionError):
        Solutions.build([("2022.5.1", _constant("a")), ("y2022d05p1", _constant("b"))])


def test_solution_errors_propagate():
    def _broken(stream):
        raise RuntimeError("boom")

    solutions = Solutions.build([("2022.1.1", _broken)])
    with pytest.raises(RuntimeError, match="boom"):
        solutions.run(PuzzleId(2022, 1, 1), io.StringIO())


def test_registry_is_read_only_and_sorted():
    solutions = Solutions.build([
        ("2022.2.1", _constant("b")),
        ("2021.9.2", _constant("a")),
        ("2022.1.1", _constant("c")),
    ])

    assert len(solutions) == 3
    assert list(solutions) == [PuzzleId(2021, 9, 2), PuzzleId(2022, 1, 1), PuzzleId(2022, 2, 1)]
    assert PuzzleId(2022, 1, 1) in solutions
    assert solutions.get(PuzzleId(2015, 1, 1)) is None
    with pytest.raises(TypeError):
        solutions._register[PuzzleId(2015, 1, 1)] = _constant("x")


def test_load_solutions_registers_every_2022_phase():
    solutions = load_solutions()
    expected = {PuzzleId(2022, day, phase) for day in range(1, 15) for phase in (1, 2)}
    assert set(solutions.puzzles()) == expected
