"""CLI entrypoint: resolve a puzzle, locate its input, run the solution and print the answer."""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from solver import solve_puzzle
from src.aoc.inputs import InputNotFoundError, open_input
from src.aoc.puzzle import PuzzleError, default_puzzle, parse_puzzle
from src.aoc.registry import SolutionNotFoundError, Solutions, load_solutions
from src.aoc.settings import Settings, load_settings
from src.aoc.trace import SOLVED, get_tracer, reset_tracer

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(prog="advent-of-code", description="Solutions to Advent of Code puzzles")
    parser.add_argument(
        "puzzle",
        nargs="?",
        default=None,
        help="Which puzzle should I run? (`year.day.phase` - YYYY.DD.P | YYYY.DD | DD.P | DD)",
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Read this file instead of the located input ('-' for standard input).",
    )
    parser.add_argument("--input-dir", type=Path, default=None, help="Root directory of puzzle inputs")
    parser.add_argument("--max-phase", type=int, default=None, help="Highest accepted phase number")
    parser.add_argument("--all", action="store_true", help="Run every registered solution.")
    parser.add_argument("--list", action="store_true", help="List registered puzzles and exit.")
    parser.add_argument("--output", type=Path, default=None, help="Optional CSV path for the --all run trace")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    if args.max_phase is not None and args.max_phase < 1:
        parser.error("--max-phase must be at least 1")
    return args


def _error(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def run_one(args, settings: Settings, solutions: Solutions) -> int:
    try:
        if args.puzzle is None:
            puzzle = default_puzzle()
        else:
            puzzle = parse_puzzle(args.puzzle, max_phase=settings.max_phase)
    except PuzzleError as e:
        return _error(str(e))

    try:
        if args.input is None:
            answer = solve_puzzle(puzzle, solutions, input_dir=settings.input_dir)
        elif str(args.input) == "-":
            answer = solve_puzzle(puzzle, solutions, stream=sys.stdin)
        else:
            if not args.input.is_file():
                return _error("input not found")
            with open(args.input, "r", encoding="utf-8") as f:
                answer = solve_puzzle(puzzle, solutions, stream=f)
    except (SolutionNotFoundError, InputNotFoundError) as e:
        return _error(str(e))

    print(answer)
    return 0


def run_all(args, settings: Settings, solutions: Solutions) -> int:
    reset_tracer()
    tracer = get_tracer()

    for puzzle in tqdm(solutions.puzzles(), desc="Solving", unit="puzzle"):
        try:
            handle = open_input(puzzle, settings.input_dir)
        except InputNotFoundError as e:
            tracer.log_missing_input(puzzle, str(e))
            continue

        started = time.perf_counter()
        try:
            with handle:
                answer = solutions.run(puzzle, handle)
        except Exception as e:
            logger.exception("Solution for %s failed", puzzle)
            tracer.log_error(puzzle, f"{type(e).__name__}: {e}", time.perf_counter() - started)
            continue
        tracer.log_solved(puzzle, answer, time.perf_counter() - started)

    for record in tracer.records:
        if record.status == SOLVED:
            print(f"{record.puzzle}: {record.answer}")
        else:
            print(f"{record.puzzle}: {record.status} ({record.reason})")

    summary = tracer.summary()
    logger.info("Run summary: %s", summary)

    if args.output:
        tracer.to_csv(args.output)

    return 1 if summary["num_errors"] else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = load_settings()
    if args.input_dir is not None or args.max_phase is not None:
        settings = Settings(
            input_dir=args.input_dir if args.input_dir is not None else settings.input_dir,
            max_phase=args.max_phase if args.max_phase is not None else settings.max_phase,
            log_level=settings.log_level,
        )

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # A duplicate binding is a programming error and aborts here, before any run.
    solutions = load_solutions()

    if args.list:
        for puzzle in solutions.puzzles():
            print(puzzle)
        return 0

    if args.all:
        return run_all(args, settings, solutions)

    return run_one(args, settings, solutions)


if __name__ == "__main__":
    sys.exit(main())
