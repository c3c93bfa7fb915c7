# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: scorer.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: Scores a finished typing session.
# -----------------------------------------------------------------------------
import logging
from dataclasses import dataclass

from wpm_tester.config import SECONDS_PER_MINUTE
from wpm_tester.runner import TypingSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreResult:
    """Outcome of a typing test."""

    correct: int
    duration: int
    wpm: float
    attempted: int = 0
    correct_chars: int = 0
    total_chars: int = 0

    @property
    def accuracy(self) -> float:
        """Share of characters typed correctly, as a percentage."""
        if not self.total_chars:
            return 0.0
        return (self.correct_chars / self.total_chars) * 100.0

    def report_line(self) -> str:
        return (
            f"{self.correct} words correct in {self.duration} seconds "
            f"for a WPM of {self.wpm:.2f}"
        )


def words_per_minute(correct: int, duration: int) -> float:
    """Normalize a correct-word count to a one-minute rate."""
    if duration <= 0:
        return 0.0
    return correct / (duration / SECONDS_PER_MINUTE)


def _matching_chars(prompt: str, answer: str) -> int:
    return sum(1 for a, b in zip(prompt, answer) if a == b)


def score_session(
    session: TypingSession, duration: int, debug: bool = False
) -> ScoreResult:
    """
    Compare every answer to its prompt and compute the WPM.

    An answer counts only when it equals the prompt exactly, case and
    whitespace included. WPM uses the configured duration, not the time the
    test actually took. With ``debug`` every comparison is logged.
    """
    correct = 0
    correct_chars = 0
    total_chars = 0

    for prompt, answer in session.pairs():
        if debug:
            logger.debug("comparing %s to %s", prompt, answer)
        if prompt == answer:
            correct += 1
        correct_chars += _matching_chars(prompt, answer)
        total_chars += max(len(prompt), len(answer))

    return ScoreResult(
        correct=correct,
        duration=duration,
        wpm=words_per_minute(correct, duration),
        attempted=len(session),
        correct_chars=correct_chars,
        total_chars=total_chars,
    )
