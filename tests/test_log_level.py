"""Tests for log levels and level presentation"""

import pytest

from prettylog import FormatterConfig, LevelCase, LogLevel
from prettylog.core.log_level import clamp_letters, level_style, level_text


class TestLogLevel:
    """Test log level functionality."""

    def test_log_levels(self):
        assert LogLevel.TRACE < LogLevel.DEBUG
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARN
        assert LogLevel.WARN < LogLevel.ERROR
        assert LogLevel.ERROR < LogLevel.FATAL
        assert LogLevel.FATAL < LogLevel.PANIC

    def test_from_string(self):
        assert LogLevel.from_string("DEBUG") == LogLevel.DEBUG
        assert LogLevel.from_string("info") == LogLevel.INFO
        assert LogLevel.from_string("warning") == LogLevel.WARN
        assert LogLevel.from_string("Critical") == LogLevel.FATAL

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            LogLevel.from_string("loud")


class TestLevelStyle:
    """Test level abbreviations and colors."""

    @pytest.mark.parametrize("level,short,long,color", [
        (LogLevel.DEBUG, "Dbg", "Debug", "blue"),
        (LogLevel.INFO, "Inf", "Info ", "green"),
        (LogLevel.WARN, "Wrn", "Warn ", "yellow"),
        (LogLevel.ERROR, "Err", "Error", "red"),
        (LogLevel.FATAL, "Ftl", "Fatal", "red"),
        (LogLevel.PANIC, "Pnc", "Panic", "red"),
    ])
    def test_styles(self, level, short, long, color):
        style = level_style(level)
        assert style.short == short
        assert style.long == long
        assert style.color == color

    def test_unknown_level_looks_like_debug(self):
        assert level_style(LogLevel.TRACE) == level_style(LogLevel.DEBUG)
        assert level_style(12345) == level_style(LogLevel.DEBUG)


class TestLevelText:
    """Test level text sizing and case folding."""

    @pytest.mark.parametrize("letters,expected", [
        (1, "I"),
        (2, "IN"),
        (3, "INF"),
        (4, "INFO"),
        (5, "INFO "),
    ])
    def test_widths(self, letters, expected):
        assert level_text(LogLevel.INFO, letters) == expected

    def test_long_form_is_used_above_three(self):
        assert level_text(LogLevel.ERROR, 4) == "ERRO"
        assert level_text(LogLevel.WARN, 5, LevelCase.AS_DEFINED) == "Warn "

    @pytest.mark.parametrize("letters,effective", [
        (0, 3),
        (-7, 3),
        (6, 5),
        (9, 5),
        (1, 1),
        (5, 5),
    ])
    def test_clamp(self, letters, effective):
        assert clamp_letters(letters) == effective
        assert level_text(LogLevel.FATAL, letters) == level_text(LogLevel.FATAL, effective)

    def test_case_folding(self):
        assert level_text(LogLevel.INFO, 3, LevelCase.UPPER) == "INF"
        assert level_text(LogLevel.INFO, 3, LevelCase.LOWER) == "inf"
        assert level_text(LogLevel.INFO, 3, LevelCase.AS_DEFINED) == "Inf"

    def test_trace_displays_as_debug(self):
        assert level_text(LogLevel.TRACE) == "DBG"

    def test_upper_wins_over_lower(self):
        config = FormatterConfig(level_upper=True, level_lower=True)
        assert config.level_case is LevelCase.UPPER

        config = FormatterConfig(level_upper=False, level_lower=True)
        assert config.level_case is LevelCase.LOWER

        config = FormatterConfig(level_upper=False, level_lower=False)
        assert config.level_case is LevelCase.AS_DEFINED
