"""Day 2: Rock Paper Scissors."""

from typing import TextIO, Tuple

from ..common import lines

ROCK, PAPER, SCISSORS = 1, 2, 3
LOSE, DRAW, WIN = 0, 3, 6

_SHAPES = {"A": ROCK, "B": PAPER, "C": SCISSORS, "X": ROCK, "Y": PAPER, "Z": SCISSORS}
_OUTCOMES = {"X": LOSE, "Y": DRAW, "Z": WIN}

# shape -> the shape it beats
_BEATS = {ROCK: SCISSORS, PAPER: ROCK, SCISSORS: PAPER}
_LOSES_TO = {beaten: winner for winner, beaten in _BEATS.items()}


def _round(line: str) -> Tuple[str, str]:
    theirs, ours = line.split()
    if theirs not in "ABC" or ours not in "XYZ":
        raise ValueError(f"invalid round: {line!r}")
    return theirs, ours


def _outcome(theirs: int, ours: int) -> int:
    if theirs == ours:
        return DRAW
    return WIN if _BEATS[ours] == theirs else LOSE


def _shape_for(theirs: int, outcome: int) -> int:
    if outcome == DRAW:
        return theirs
    if outcome == WIN:
        return _LOSES_TO[theirs]
    return _BEATS[theirs]


def part_one(stream: TextIO) -> str:
    score = 0
    for line in lines(stream):
        if not line:
            continue
        theirs, ours = _round(line)
        theirs_shape, ours_shape = _SHAPES[theirs], _SHAPES[ours]
        score += ours_shape + _outcome(theirs_shape, ours_shape)
    return str(score)


def part_two(stream: TextIO) -> str:
    # The second column is the outcome to reach, not our shape.
    score = 0
    for line in lines(stream):
        if not line:
            continue
        theirs, wanted = _round(line)
        outcome = _OUTCOMES[wanted]
        score += _shape_for(_SHAPES[theirs], outcome) + outcome
    return str(score)
