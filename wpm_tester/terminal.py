# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: terminal.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: Line-oriented input for the typing test.
# -----------------------------------------------------------------------------
import logging
import select
import sys
from typing import Optional, TextIO

from wpm_tester.errors import InputExhausted, ReadTimeout

logger = logging.getLogger(__name__)


def strip_terminator(line: str) -> str:
    """Remove one trailing line terminator, leaving all other whitespace."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


class LineReader:
    """
    Reads one answer per prompt from a text stream.

    Without a timeout a read blocks until a full line arrives. With a timeout
    the stream is polled first, which only works for a terminal backed by a
    file descriptor; any other stream falls back to a blocking read. Lines
    already held in the stream's own buffer (pasted multi-line input) are
    invisible to the poll, so such a read can time out with an answer waiting.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so a swapped sys.stdin is honoured.
        return self._stream if self._stream is not None else sys.stdin

    def read_line(self, timeout: Optional[float] = None) -> str:
        """
        Read a single line and strip its terminator.

        Raises:
            ReadTimeout: If ``timeout`` seconds pass with no input.
            InputExhausted: If the stream is at end-of-file.
        """
        if timeout is not None and not self._wait_readable(timeout):
            raise ReadTimeout(timeout)

        line = self.stream.readline()
        if not line:
            raise InputExhausted("end of input reached")
        return strip_terminator(line)

    def _wait_readable(self, timeout: float) -> bool:
        stream = self.stream
        if timeout <= 0:
            return False
        if not stream.isatty():
            return True
        try:
            ready, _, _ = select.select([stream], [], [], timeout)
        except (OSError, ValueError) as e:
            logger.debug("cannot poll %r (%s), reading without a timeout", stream, e)
            return True
        return bool(ready)
