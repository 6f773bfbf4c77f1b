"""
Runtime settings read from the environment.

A `.env` file in the working directory is loaded first, so local overrides
like AOC_INPUT_DIR do not need to be exported in the shell.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from .puzzle import MAX_PHASE

logger = logging.getLogger(__name__)

DEFAULT_INPUT_DIR = Path("in")
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    input_dir: Path = field(default=DEFAULT_INPUT_DIR)
    max_phase: int = MAX_PHASE
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from `env` (defaults to os.environ after loading `.env`).

    Returns:
        Settings with defaults for anything missing or invalid.
    """
    if env is None:
        load_dotenv(Path.cwd() / ".env")
        env = os.environ

    input_dir = Path(env.get("AOC_INPUT_DIR") or DEFAULT_INPUT_DIR)
    log_level = (env.get("AOC_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()

    max_phase = MAX_PHASE
    raw_phase = env.get("AOC_MAX_PHASE")
    if raw_phase:
        try:
            max_phase = int(raw_phase)
        except ValueError:
            logger.warning("Ignoring AOC_MAX_PHASE=%r, using %d", raw_phase, MAX_PHASE)
        else:
            if max_phase < 1:
                logger.warning("Ignoring AOC_MAX_PHASE=%r, using %d", raw_phase, MAX_PHASE)
                max_phase = MAX_PHASE

    return Settings(input_dir=input_dir, max_phase=max_phase, log_level=log_level)
