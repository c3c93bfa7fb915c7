# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: runner.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: The timed prompt/answer loop of the typing test.
# -----------------------------------------------------------------------------
import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

import typer

from wpm_tester.config import SessionConfig
from wpm_tester.errors import InputExhausted, ReadTimeout
from wpm_tester.terminal import LineReader

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


@dataclass(frozen=True)
class TypingSession:
    """
    The words shown during a test and the answers typed for them.

    ``typed[i]`` is the answer given to ``prompted[i]``.
    """

    prompted: Tuple[str, ...] = ()
    typed: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if len(self.prompted) != len(self.typed):
            raise ValueError(
                f"{len(self.prompted)} prompts but {len(self.typed)} answers"
            )

    def __len__(self) -> int:
        return len(self.prompted)

    def pairs(self):
        """Yield (prompt, answer) in the order they were shown."""
        return zip(self.prompted, self.typed)


def run_session(
    words: Sequence[str],
    config: SessionConfig,
    *,
    clock: Clock = time.monotonic,
    rng: Optional[random.Random] = None,
    reader: Optional[LineReader] = None,
    emit: Callable[[str], None] = typer.echo,
) -> TypingSession:
    """
    Show random words and collect one typed line for each until time is up.

    The deadline is checked after every answer. By default a read never times
    out, so a slow final answer can run the test past its configured length.
    With ``config.strict`` each read is limited to the time left and an
    unanswered prompt is dropped when the deadline passes.

    End of input stops the test early; the unanswered prompt is dropped and
    everything recorded so far is returned.

    Args:
        words: Non-empty list to draw from; duplicates raise a word's odds.
        config: Duration and mode of the test.
        clock: Returns the current time in seconds.
        rng: Source of the word draw, seeded from ``config.seed`` if omitted.
        reader: Where answers come from, standard input if omitted.
        emit: Displays one prompt word.

    Returns:
        The completed session.
    """
    if not words:
        raise ValueError("cannot run a typing test with an empty word list")

    if rng is None:
        rng = random.Random(config.seed)
    if reader is None:
        reader = LineReader()

    prompted: List[str] = []
    typed: List[str] = []

    current_time = clock()
    end_time = current_time + config.duration

    debug = config.debug
    if debug:
        logger.debug("dictionary loaded: %d", len(words))
        logger.debug("current time: %s", current_time)
        logger.debug("test end time: %s", end_time)

    while end_time > current_time:
        index = rng.randrange(len(words))
        word = words[index]
        if debug:
            logger.debug("dictionary index: %d (%s)", index, word)
        emit(word)

        timeout = end_time - current_time if config.strict else None
        try:
            answer = reader.read_line(timeout=timeout)
        except InputExhausted:
            if debug:
                logger.debug("input exhausted after %d answers", len(typed))
            break
        except ReadTimeout as e:
            if debug:
                logger.debug("deadline passed while waiting for %r: %s", word, e)
            break

        prompted.append(word)
        typed.append(answer)
        current_time = clock()

    if debug:
        logger.debug("test finished at %s with %d prompts", current_time, len(prompted))
    return TypingSession(prompted=tuple(prompted), typed=tuple(typed))
