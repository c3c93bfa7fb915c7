"""Pytest fixtures for WPM tester tests."""

from __future__ import annotations

from typing import Iterable, List, Optional

import pytest

from wpm_tester.errors import InputExhausted, ReadTimeout


class FakeClock:
    """Returns the scripted times in order, then keeps returning the last one."""

    def __init__(self, times: Iterable[float]) -> None:
        self._times = list(times)
        self.calls = 0

    def __call__(self) -> float:
        index = min(self.calls, len(self._times) - 1)
        self.calls += 1
        return self._times[index]


class ScriptedReader:
    """Stands in for LineReader, answering from a list.

    An answer of ``None`` raises ReadTimeout; running out of answers raises
    InputExhausted.
    """

    def __init__(self, answers: Iterable[Optional[str]]) -> None:
        self._answers = list(answers)
        self.timeouts: List[Optional[float]] = []

    def read_line(self, timeout: Optional[float] = None) -> str:
        self.timeouts.append(timeout)
        if not self._answers:
            raise InputExhausted("end of input reached")
        answer = self._answers.pop(0)
        if answer is None:
            raise ReadTimeout(timeout or 0.0)
        return answer


class ScriptedRandom:
    """Draws the scripted indices in order."""

    def __init__(self, indices: Iterable[int]) -> None:
        self._indices = list(indices)

    def randrange(self, stop: int) -> int:
        index = self._indices.pop(0)
        assert 0 <= index < stop
        return index


@pytest.fixture
def animal_words() -> tuple:
    return ("cat", "dog")


@pytest.fixture
def prompts() -> list:
    """Collects every word the runner displays."""
    return []


@pytest.fixture
def fake_clock():
    """Factory for scripted clocks."""
    return FakeClock


@pytest.fixture
def scripted_reader():
    """Factory for readers that answer from a list."""
    return ScriptedReader


@pytest.fixture
def scripted_random():
    """Factory for random sources that draw scripted indices."""
    return ScriptedRandom
