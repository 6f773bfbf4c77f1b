import csv
import io
import sys

import pytest

import run
from src.aoc.puzzle import PuzzleId
from src.aoc.registry import Solutions

CALORIES = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("AOC_INPUT_DIR", str(tmp_path / "in"))
    monkeypatch.delenv("AOC_MAX_PHASE", raising=False)
    monkeypatch.delenv("AOC_LOG_LEVEL", raising=False)
    return tmp_path


def _write_input(tmp_path, name, text):
    folder = tmp_path / "in" / "2022"
    folder.mkdir(parents=True, exist_ok=True)
    (folder / name).write_text(text)


def test_main_prints_answer_from_located_input(tmp_path, capsys):
    _write_input(tmp_path, "01.txt", CALORIES)

    assert run.main(["2022.1.1"]) == 0
    assert capsys.readouterr().out == "24000\n"


def test_main_second_phase_falls_back_to_first_phase_input(tmp_path, capsys):
    _write_input(tmp_path, "01.1.txt", CALORIES)

    assert run.main(["2022.1.2"]) == 0
    assert capsys.readouterr().out == "45000\n"


def test_main_uses_sys_argv(tmp_path, monkeypatch, capsys):
    _write_input(tmp_path, "01.txt", CALORIES)
    monkeypatch.setattr(sys, "argv", ["run.py", "2022.01.1"])

    assert run.main() == 0
    assert "24000" in capsys.readouterr().out


def test_main_explicit_input_file(tmp_path, capsys):
    path = tmp_path / "calories.txt"
    path.write_text(CALORIES)

    assert run.main(["2022.1.2", "--input", str(path)]) == 0
    assert capsys.readouterr().out == "45000\n"


def test_main_reads_standard_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("A Y\nB X\nC Z\n"))

    assert run.main(["2022.2.1", "--input", "-"]) == 0
    assert capsys.readouterr().out == "15\n"


@pytest.mark.parametrize(
    "spec, message",
    [
        ("2022.26.1", "day stops at 25"),
        ("2014.1.1", "year starts at 2015"),
        ("2022.1.3", "phase stops at 2"),
        ("nope", "invalid pattern"),
        ("2016.1.1", "solution not found"),
        ("2022.3.1", "input not found"),
    ],
)
def test_main_errors_go_to_stderr(spec, message, capsys):
    assert run.main([spec]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == message


def test_main_max_phase_override(tmp_path, capsys):
    assert run.main(["2022.1.3", "--max-phase", "3"]) == 1
    assert capsys.readouterr().err.strip() == "solution not found"


def test_main_without_puzzle_runs_default(monkeypatch, tmp_path, capsys):
    _write_input(tmp_path, "01.txt", CALORIES)
    monkeypatch.setattr(run, "default_puzzle", lambda: PuzzleId(2022, 1, 1))

    assert run.main([]) == 0
    assert capsys.readouterr().out == "24000\n"


def test_main_default_puzzle_without_solution(monkeypatch, capsys):
    monkeypatch.setattr(run, "default_puzzle", lambda: PuzzleId(2022, 31, 1))

    assert run.main([]) == 1
    assert capsys.readouterr().err.strip() == "solution not found"


@pytest.mark.parametrize("value", ["0", "-1"])
def test_main_rejects_max_phase_below_one(value, capsys):
    with pytest.raises(SystemExit) as excinfo:
        run.main(["2022.1.1", "--max-phase", value])
    assert excinfo.value.code == 2
    assert "--max-phase must be at least 1" in capsys.readouterr().err


def test_main_max_phase_one_is_honoured(capsys):
    assert run.main(["2022.1.2", "--max-phase", "1"]) == 1
    assert capsys.readouterr().err.strip() == "phase stops at 1"


def test_main_solution_failure_propagates(monkeypatch, tmp_path):
    def _broken(stream):
        raise ZeroDivisionError("bad puzzle")

    monkeypatch.setattr(run, "load_solutions", lambda: Solutions.build([("2022.1.1", _broken)]))
    _write_input(tmp_path, "01.txt", "")

    with pytest.raises(ZeroDivisionError):
        run.main(["2022.1.1"])


def test_main_list(capsys):
    assert run.main(["--list"]) == 0
    out = capsys.readouterr().out.split()
    assert out[0] == "2022.1.1"
    assert out[-1] == "2022.14.2"
    assert len(out) == 28


def test_main_all_writes_trace(tmp_path, capsys):
    _write_input(tmp_path, "01.txt", CALORIES)
    output = tmp_path / "runs.csv"

    assert run.main(["--all", "--output", str(output)]) == 0
    out = capsys.readouterr().out
    assert "2022.1.1: 24000" in out
    assert "2022.1.2: 45000" in out
    assert "2022.2.1: missing-input (input not found)" in out

    with open(output, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 28
    assert rows[0]["puzzle"] == "2022.1.1"
    assert rows[0]["status"] == "solved"


def test_main_all_reports_failures(monkeypatch, tmp_path, capsys):
    def _broken(stream):
        raise ValueError("bad input")

    monkeypatch.setattr(run, "load_solutions", lambda: Solutions.build([
        ("2022.1.1", lambda stream: "ok"),
        ("2022.1.2", _broken),
    ]))
    _write_input(tmp_path, "01.txt", "")

    assert run.main(["--all"]) == 1
    out = capsys.readouterr().out
    assert "2022.1.1: ok" in out
    assert "2022.1.2: error (ValueError: bad input)" in out
