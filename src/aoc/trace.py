"""Run tracing: records each puzzle run and writes a CSV report."""

import csv
import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from .puzzle import PuzzleId

logger = logging.getLogger(__name__)

SOLVED = "solved"
MISSING_INPUT = "missing-input"
ERROR = "error"


@dataclass
class RunRecord:
    """A single puzzle run."""

    puzzle: str
    status: str  # 'solved', 'missing-input', 'error'
    answer: Optional[str] = None
    elapsed_seconds: Optional[float] = None
    reason: Optional[str] = None


class RunTracer:
    """Collects run records for a batch of puzzles."""

    def __init__(self):
        self.records: List[RunRecord] = []
        self.start_time = datetime.now().timestamp()

    def _get_timestamp(self) -> float:
        """Elapsed seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def log_solved(self, puzzle: PuzzleId, answer: str, elapsed_seconds: float):
        self.records.append(RunRecord(
            puzzle=str(puzzle),
            status=SOLVED,
            answer=answer,
            elapsed_seconds=elapsed_seconds,
        ))

    def log_missing_input(self, puzzle: PuzzleId, reason: str = "input not found"):
        self.records.append(RunRecord(
            puzzle=str(puzzle),
            status=MISSING_INPUT,
            reason=reason,
        ))

    def log_error(self, puzzle: PuzzleId, reason: str, elapsed_seconds: Optional[float] = None):
        self.records.append(RunRecord(
            puzzle=str(puzzle),
            status=ERROR,
            elapsed_seconds=elapsed_seconds,
            reason=reason,
        ))

    def to_csv(self, filepath: Path) -> None:
        """Write all records to a CSV file."""
        if not self.records:
            logger.info("No run records to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = ["puzzle", "status", "answer", "elapsed_seconds", "reason"]
        with open(filepath, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for record in self.records:
                writer.writerow(asdict(record))

        logger.info("Run trace written to %s (%d runs)", filepath, len(self.records))

    def summary(self) -> Dict[str, Any]:
        status_counts: Dict[str, int] = {}
        for record in self.records:
            status_counts[record.status] = status_counts.get(record.status, 0) + 1

        return {
            "total_runs": len(self.records),
            "elapsed_time_seconds": self._get_timestamp(),
            "status_counts": status_counts,
            "num_solved": status_counts.get(SOLVED, 0),
            "num_errors": status_counts.get(ERROR, 0),
        }


_global_tracer: Optional[RunTracer] = None


def get_tracer() -> RunTracer:
    """Get or create the global tracer."""
    global _global_tracer
    if _global_tracer is None:
        _global_tracer = RunTracer()
    return _global_tracer


def reset_tracer() -> None:
    global _global_tracer
    _global_tracer = None
