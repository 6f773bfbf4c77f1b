"""Puzzle identifiers: parse `year.day.phase` specs into validated PuzzleIds.

Supports:
- Short user specs (YYYY.DD.P | YYYY.DD | DD.P | DD), defaulting missing
  fields from the puzzle unlocked "today"
- Fully specified registry literals ("2022.1.1" or "y2022d05p1")
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Optional

FIRST_YEAR = 2015
LAST_DAY = 25
MAX_PHASE = 2

# Matched against the whole string, most specific first; the first match wins.
_SHAPES = [
    re.compile(r"(?P<year>\d{4})\D(?P<day>\d{1,2})\D(?P<phase>\d)", re.ASCII),
    re.compile(r"(?P<year>\d{4})\D(?P<day>\d{1,2})", re.ASCII),
    re.compile(r"(?P<day>\d{1,2})\D(?P<phase>\d)", re.ASCII),
    re.compile(r"(?P<day>\d{1,2})", re.ASCII),
]

_LITERALS = [
    re.compile(r"(?P<year>\d{4})\.(?P<day>\d{1,2})\.(?P<phase>\d)", re.ASCII),
    re.compile(r"y(?P<year>\d{4})d(?P<day>\d{2})p(?P<phase>\d)", re.ASCII),
]


class PuzzleError(ValueError):
    """Base class for puzzle identifier failures."""


class PuzzleParseError(PuzzleError):
    """The text does not match any known puzzle shape."""


class PuzzleValidationError(PuzzleError):
    """A resolved field is outside its allowed range."""


@dataclass(frozen=True, order=True)
class PuzzleId:
    year: int
    day: int
    phase: int

    def __str__(self) -> str:
        return f"{self.year}.{self.day}.{self.phase}"

    @classmethod
    def default(cls, today: Optional[date] = None) -> "PuzzleId":
        return default_puzzle(today)

    @classmethod
    def parse(
        cls,
        text: str,
        *,
        today: Optional[date] = None,
        max_phase: int = MAX_PHASE,
    ) -> "PuzzleId":
        return parse_puzzle(text, today=today, max_phase=max_phase)

    @classmethod
    def from_literal(cls, text: str) -> "PuzzleId":
        """
        Parse a fully specified registry literal without defaulting.
        Only static ranges are checked; the current date plays no part.
        """
        fields = _match_fields(_LITERALS, text)
        if fields is None:
            raise PuzzleParseError(f"invalid puzzle literal: {text!r}")

        year, day, phase = fields["year"], fields["day"], fields["phase"]
        if year < FIRST_YEAR or not 1 <= day <= LAST_DAY or not 1 <= phase <= MAX_PHASE:
            raise PuzzleParseError(f"puzzle literal out of range: {text!r}")
        return cls(year=year, day=day, phase=phase)


def default_puzzle(today: Optional[date] = None) -> PuzzleId:
    """
    The puzzle unlocked on `today`: the current day while December runs,
    otherwise the last day of the previous year's series.

    The day of month is used as-is, so Dec 26-31 give a day past LAST_DAY
    that no solution is registered under.
    """
    today = today or datetime.now()
    if today.month == 12:
        return PuzzleId(year=today.year, day=today.day, phase=1)
    return PuzzleId(year=today.year - 1, day=LAST_DAY, phase=1)


def parse_puzzle(
    text: str,
    *,
    today: Optional[date] = None,
    max_phase: int = MAX_PHASE,
) -> PuzzleId:
    """
    Resolve a short puzzle spec against the default puzzle.

    Missing fields take the default puzzle's value and are not validated;
    explicit fields are checked year first, then day, then phase, and the
    first violated rule is raised.
    """
    fields = _match_fields(_SHAPES, text)
    if fields is None:
        raise PuzzleParseError("invalid pattern")

    current = default_puzzle(today)

    year = _resolve_year(fields.get("year"), current)
    day = _resolve_day(fields.get("day"), year, current)
    phase = _resolve_phase(fields.get("phase"), current, max_phase)

    return PuzzleId(year=year, day=day, phase=phase)


def _match_fields(patterns, text: str) -> Optional[Dict[str, int]]:
    for pattern in patterns:
        match = pattern.fullmatch(text)
        if match:
            return {
                name: int(value)
                for name, value in match.groupdict().items()
                if value is not None
            }
    return None


def _resolve_year(year: Optional[int], current: PuzzleId) -> int:
    if year is None:
        return current.year
    if year < FIRST_YEAR:
        raise PuzzleValidationError(f"year starts at {FIRST_YEAR}")
    if year > current.year:
        raise PuzzleValidationError("future puzzles are unknown")
    return year


def _resolve_day(day: Optional[int], year: int, current: PuzzleId) -> int:
    if day is None:
        return current.day
    if day == 0:
        raise PuzzleValidationError("day starts at 1")
    if day > LAST_DAY:
        raise PuzzleValidationError(f"day stops at {LAST_DAY}")
    if year >= current.year and day > current.day:
        raise PuzzleValidationError("future puzzles are unknown")
    return day


def _resolve_phase(phase: Optional[int], current: PuzzleId, max_phase: int) -> int:
    if phase is None:
        return current.phase
    if phase == 0:
        raise PuzzleValidationError("phase starts at 1")
    if phase > max_phase:
        raise PuzzleValidationError(f"phase stops at {max_phase}")
    return phase
