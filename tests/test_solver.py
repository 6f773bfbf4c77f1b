"""Integration-style tests for the top-level solve interface."""

import io

import pytest

from solver import solve_puzzle
from src.aoc.inputs import InputNotFoundError
from src.aoc.puzzle import PuzzleId, PuzzleValidationError
from src.aoc.registry import SolutionNotFoundError, Solutions, load_solutions


def _demo_solutions():
    return Solutions.build([("2022.1.1", lambda stream: "24000")])


def test_solve_puzzle_from_spec_string():
    assert solve_puzzle("2022.1.1", _demo_solutions(), stream=io.StringIO("")) == "24000"


def test_solve_puzzle_reads_located_input(tmp_path):
    folder = tmp_path / "2022"
    folder.mkdir()
    (folder / "04.txt").write_text("2-4,6-8\n2-8,3-7\n6-6,4-6\n")

    answer = solve_puzzle(PuzzleId(2022, 4, 2), load_solutions(), input_dir=tmp_path)
    assert answer == "2"


def test_solve_puzzle_not_found_before_input_lookup(tmp_path):
    with pytest.raises(SolutionNotFoundError):
        solve_puzzle(PuzzleId(2016, 1, 1), _demo_solutions(), input_dir=tmp_path)


def test_solve_puzzle_missing_input(tmp_path):
    with pytest.raises(InputNotFoundError):
        solve_puzzle(PuzzleId(2022, 1, 1), _demo_solutions(), input_dir=tmp_path)


def test_solve_puzzle_rejects_invalid_spec():
    with pytest.raises(PuzzleValidationError, match="day stops at 25"):
        solve_puzzle("2022.26.1", _demo_solutions(), stream=io.StringIO(""))


def test_solve_puzzle_rejects_other_types():
    with pytest.raises(TypeError):
        solve_puzzle(("2022", 1, 1), _demo_solutions())
