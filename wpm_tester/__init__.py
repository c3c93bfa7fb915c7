"""WPM Tester - a typing test to find your words-per-minute on the command line."""

__version__ = "1.0.0"

from .config import SessionConfig
from .dictionary import load_words
from .errors import DictionaryError, InputExhausted, ReadTimeout, WpmTesterError
from .runner import TypingSession, run_session
from .scorer import ScoreResult, score_session, words_per_minute
