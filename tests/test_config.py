"""Tests for SessionConfig, the manual and logging setup."""

from __future__ import annotations

import dataclasses
import logging

import pytest
from rich.logging import RichHandler

from wpm_tester.config import DEFAULT_DURATION_SECONDS, SessionConfig
from wpm_tester.logging_config import PACKAGE_LOGGER, setup_logging
from wpm_tester.manual import load_manual, usage_summary


class TestSessionConfig:
    def test_defaults(self):
        config = SessionConfig()
        assert config.duration == DEFAULT_DURATION_SECONDS == 60
        assert config.debug is False
        assert config.strict is False
        assert config.seed is None
        assert config.words_file is None

    def test_zero_duration_allowed(self):
        assert SessionConfig(duration=0).duration == 0

    def test_negative_duration_rejected(self):
        with pytest.raises(ValueError):
            SessionConfig(duration=-1)

    def test_frozen(self):
        config = SessionConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.duration = 30


class TestManual:
    def test_full_manual(self):
        manual = load_manual()
        assert manual.startswith("# wpm-tester")
        for section in ("## Description", "## Synopsis", "## Options", "## Timing"):
            assert section in manual

    def test_usage_summary_sections(self):
        summary = usage_summary(load_manual())
        assert summary.startswith("# wpm-tester\n")
        assert "## Synopsis" in summary
        assert "## Options" in summary
        assert "## Description" not in summary
        assert "## Timing" not in summary

    def test_timing_warns_about_pasted_input_in_strict_mode(self):
        manual = load_manual()
        timing = manual.split("## Timing", 1)[1].split("## Scoring", 1)[0]
        assert "--strict" in timing
        assert "pasted" in timing

    def test_usage_summary_of_plain_text(self):
        manual = "# tool\n\n## Intro\nhello\n## Synopsis\n    tool -x\n## Notes\nbye\n"
        assert usage_summary(manual) == "# tool\n\n## Synopsis\n    tool -x\n"


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def _restore(self):
        logger = logging.getLogger(PACKAGE_LOGGER)
        handlers, level = list(logger.handlers), logger.level
        yield
        logger.handlers[:] = handlers
        logger.setLevel(level)

    def test_debug_level(self):
        assert setup_logging(debug=True).level == logging.DEBUG

    def test_quiet_level(self):
        assert setup_logging(debug=False).level == logging.WARNING

    def test_single_handler_after_repeat_calls(self):
        setup_logging(debug=True)
        logger = setup_logging(debug=False)
        rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
