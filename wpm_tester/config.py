# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: config.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: Session configuration passed explicitly through the test.
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_DURATION_SECONDS = 60
SECONDS_PER_MINUTE = 60


@dataclass(frozen=True)
class SessionConfig:
    """
    Settings for a single typing test.

    Built once by the CLI from its options and handed to the runner and the
    scorer, so nothing about a run lives in module globals.

    Attributes:
        duration: Length of the test in whole seconds.
        debug: Emit diagnostic log records while the test runs.
        strict: Bound every read by the time left before the deadline.
        seed: Seed for the word draw; None draws from system entropy.
        words_file: Custom word list; None uses the bundled list.
    """

    duration: int = DEFAULT_DURATION_SECONDS
    debug: bool = False
    strict: bool = False
    seed: Optional[int] = None
    words_file: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"duration must be >= 0, got {self.duration}")
