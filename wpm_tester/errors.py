# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: errors.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: Exception hierarchy for the WPM tester.
# -----------------------------------------------------------------------------


class WpmTesterError(Exception):
    """Base class for every error raised by the WPM tester."""


class DictionaryError(WpmTesterError):
    """The word list is missing, unreadable or contains no words."""


class InputExhausted(WpmTesterError):
    """Standard input reached end-of-file while waiting for an answer."""


class ReadTimeout(WpmTesterError):
    """A strict-deadline read ran out of time before a line arrived."""

    def __init__(self, timeout: float) -> None:
        super().__init__(f"no input within {timeout:.2f} seconds")
        self.timeout = timeout
