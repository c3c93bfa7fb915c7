# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: dictionary.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: Loads the list of words the typing test draws from.
# -----------------------------------------------------------------------------
from importlib import resources
from pathlib import Path
from typing import Iterable, Optional, Tuple

from wpm_tester.errors import DictionaryError

BUNDLED_WORDS = "words.txt"


def parse_words(lines: Iterable[str]) -> Tuple[str, ...]:
    """
    Turn raw lines into words, trimming whitespace and skipping blank lines.

    Duplicates are kept: a word listed twice is drawn twice as often.
    """
    return tuple(line.strip() for line in lines if line.strip())


def load_words(path: Optional[Path] = None) -> Tuple[str, ...]:
    """
    Load the word list, one word per line.

    Args:
        path: A custom word file. When omitted the list bundled with the
            package is used.

    Returns:
        The words in file order.

    Raises:
        DictionaryError: If the file cannot be read or holds no words.
    """
    if path is None:
        source = resources.files("wpm_tester").joinpath("data").joinpath(BUNDLED_WORDS)
        label = f"bundled {BUNDLED_WORDS}"
    else:
        source = Path(path)
        label = str(source)

    try:
        with source.open("r", encoding="utf-8") as f:
            words = parse_words(f)
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryError(f"cannot read word list {label}: {e}") from e

    if not words:
        raise DictionaryError(f"word list {label} contains no words")

    return words
