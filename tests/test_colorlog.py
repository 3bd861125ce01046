"""
Tests for the line formatter
"""

import logging
import sys

import pytest

from dglog.colorlog import LEVEL_COLOR_SCHEME, LineFormatter
from dglog.colors import RESET, ColorScheme
from dglog.models import PANIC, TRACE, Caller, DglogError, LogEvent

WHITE = "\x1b[37m"
BLUE = "\x1b[34m"


class TestLevelTag:
    """Tests for the colored level letter"""

    @pytest.mark.parametrize(
        "level, letter",
        [
            ("debug", "D"),
            ("info", "I"),
            ("warning", "W"),
            ("error", "E"),
            ("fatal", "F"),
            ("panic", "P"),
            ("trace", "T"),
        ],
    )
    def test_first_letter_uppercase(self, formatter, level, letter):
        tag = formatter.level_tag(level)
        assert tag.startswith("\x1b[")
        assert tag.endswith(letter + RESET)

    def test_info_uses_level_scheme(self, formatter):
        assert formatter.level_tag("info") == WHITE + "I" + RESET

    @pytest.mark.parametrize("level", ["trace", "verbose"])
    def test_unknown_levels_use_debug_color(self, formatter, level):
        assert formatter.level_tag(level) == BLUE + level[0].upper() + RESET

    def test_empty_slot_falls_back_to_default(self):
        formatter = LineFormatter(scheme=ColorScheme(), base_dir="/")
        assert formatter.level_tag("info") == "\x1b[32mI" + RESET


class TestRender:
    """Tests for LineFormatter.render"""

    def test_timestamp(self, formatter, fixed_now):
        line = formatter.render(LogEvent("info", "x"), now=fixed_now)
        assert line.startswith(b"20240305.14:07:09 [")

    def test_full_line(self, formatter, fixed_now):
        event = LogEvent("info", "server started", Caller("/app/bin/server/main.go", 42))
        line = formatter.render(event, now=fixed_now)
        expected = (
            "20240305.14:07:09 [" + WHITE + "I" + RESET + "] "
            + "server started".ljust(120)
            + " [server/main.go:42]\n"
        )
        assert line == expected.encode("utf-8")

    def test_no_caller(self, formatter, fixed_now):
        line = formatter.render(LogEvent("debug", "no caller"), now=fixed_now)
        assert line.endswith(b" [:0]\n")

    def test_short_message_is_padded(self, formatter, fixed_now):
        line = formatter.render(LogEvent("info", "abc"), now=fixed_now).decode()
        message = line.split("] ", 1)[1].rsplit(" [", 1)[0]
        assert message == "abc" + " " * 117

    def test_long_message_is_not_truncated(self, formatter, fixed_now):
        long_message = "x" * 150
        line = formatter.render(LogEvent("warning", long_message), now=fixed_now).decode()
        assert "] " + long_message + " [:0]\n" in line

    def test_message_width(self, fixed_now):
        formatter = LineFormatter(base_dir="/app/bin", width=10)
        line = formatter.render(LogEvent("info", "abc"), now=fixed_now).decode()
        assert line.endswith("] " + "abc".ljust(10) + " [:0]\n")

    def test_caller_outside_base_dir(self, formatter, fixed_now):
        event = LogEvent("error", "boom", Caller("/srv/other/mod.py", 3))
        line = formatter.render(event, now=fixed_now)
        assert line.endswith(b" [/srv/other/mod.py:3]\n")

    def test_same_input_same_bytes(self, formatter, fixed_now):
        event = LogEvent("error", "boom", Caller("/app/bin/a.py", 1))
        assert formatter.render(event, now=fixed_now) == formatter.render(event, now=fixed_now)

    def test_utf8(self, formatter, fixed_now):
        line = formatter.render(LogEvent("info", "grüße"), now=fixed_now)
        assert "grüße".encode("utf-8") in line

    def test_default_scheme(self):
        assert LineFormatter(base_dir="/").scheme == LEVEL_COLOR_SCHEME

    def test_base_dir_is_resolved_once(self, mocker):
        resolve = mocker.patch("dglog.colorlog.resolve_base_dir", return_value="/opt/app")
        formatter = LineFormatter()
        formatter.render(LogEvent("info", "one", Caller("/opt/app/a.py", 1)))
        formatter.render(LogEvent("info", "two", Caller("/opt/app/b.py", 2)))
        assert formatter.base_dir == "/opt/app"
        resolve.assert_called_once_with(anchor=__file__)

    @pytest.mark.parametrize("width", [0, 1])
    def test_small_widths(self, fixed_now, width):
        formatter = LineFormatter(base_dir="/app/bin", width=width)
        line = formatter.render(LogEvent("info", "abc"), now=fixed_now)
        assert line.endswith(b"] abc [:0]\n")

    def test_negative_width(self):
        with pytest.raises(DglogError):
            LineFormatter(base_dir="/app/bin", width=-1)


class TestFormatRecord:
    """Tests for the logging.Formatter integration"""

    @staticmethod
    def make_record(level=logging.INFO, msg="hello %s", args=("world",), exc_info=None):
        return logging.LogRecord(
            "test", level, "/app/bin/pkg/mod.py", 7, msg, args, exc_info
        )

    def test_format(self, formatter, fixed_now, mocker):
        mocker.patch("dglog.colorlog.datetime").now.return_value = fixed_now
        text = formatter.format(self.make_record())
        assert text == (
            "20240305.14:07:09 [" + WHITE + "I" + RESET + "] "
            + "hello world".ljust(120)
            + " [pkg/mod.py:7]"
        )

    @pytest.mark.parametrize(
        "levelno, letter",
        [(TRACE, "T"), (logging.WARNING, "W"), (logging.CRITICAL, "F"), (PANIC, "P")],
    )
    def test_level_letters(self, formatter, levelno, letter):
        text = formatter.format(self.make_record(level=levelno))
        assert "[\x1b[" in text
        assert letter + RESET + "] hello world" in text

    def test_caller_disabled(self):
        formatter = LineFormatter(base_dir="/app/bin", report_caller=False)
        text = formatter.format(self.make_record())
        assert text.endswith(" [:0]")

    def test_exception_text(self, formatter):
        try:
            raise ValueError("bad value")
        except ValueError:
            record = self.make_record(level=logging.ERROR, exc_info=sys.exc_info())
        text = formatter.format(record)
        first, rest = text.split("\n", 1)
        assert first.endswith(" [pkg/mod.py:7]")
        assert "Traceback" in rest
        assert "ValueError: bad value" in rest
