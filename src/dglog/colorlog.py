"""
dglog Line Formatter - Fixed-Width, Color-Coded Log Lines

PURPOSE:
    Renders one human-readable line per log event: local timestamp, a single
    color-coded level letter, the message padded to a fixed width and the
    caller's file:line relative to the program directory.

WHO READS ME:
    - main.py: setup_logging() installs LineFormatter on the root handler

WHO I READ:
    - colors.py: ColorScheme, compile_color_scheme()
    - models.py: LogEvent, Caller, event_from_record()
    - paths.py: resolve_base_dir(), relative_caller_path(), caller_file()

DEPENDENCIES:
    - logging: Standard library logging.Formatter
    - datetime: Local wall-clock timestamp

KEY EXPORTS:
    - LineFormatter: logging.Formatter subclass rendering dglog lines
    - LEVEL_COLOR_SCHEME: Built-in scheme used for the level letter

LOG FORMAT:
    <YYYYMMDD.HH:MM:SS> [<L>] <message, padded to 120> [<file>:<line>]
    Example: "20240305.14:07:09 [I] server started ... [server/main.py:42]"

COLOR SCHEME:
    - DEBUG, TRACE and unknown levels: Blue
    - INFO: White
    - WARNING: Yellow
    - ERROR, FATAL, PANIC: Red
"""

import logging
from datetime import datetime

from dglog.colors import ColorScheme, CompiledColorScheme, compile_color_scheme
from dglog.models import Caller, DglogError, LogEvent, event_from_record
from dglog.paths import caller_file, relative_caller_path, resolve_base_dir

TIMESTAMP_FORMAT = "%Y%m%d.%H:%M:%S"
MESSAGE_WIDTH = 120

# differs from colors.DEFAULT_COLOR_SCHEME in the info style
LEVEL_COLOR_SCHEME = ColorScheme(
    info_level_style="white",
    warn_level_style="yellow",
    error_level_style="red",
    fatal_level_style="red",
    panic_level_style="red",
    debug_level_style="blue",
    prefix_style="cyan",
    timestamp_style="black+h",
)


def level_color(colors: CompiledColorScheme, level: str):
    """the color transform for a level name, debug color if unknown"""
    lookup = {
        "debug": colors.debug_level_color,
        "info": colors.info_level_color,
        "warn": colors.warn_level_color,
        "warning": colors.warn_level_color,
        "error": colors.error_level_color,
        "fatal": colors.fatal_level_color,
        "panic": colors.panic_level_color,
    }
    return lookup.get(level.lower(), colors.debug_level_color)


class LineFormatter(logging.Formatter):
    """return a formatter that prints fixed-width lines with a colored level"""

    def __init__(
        self,
        scheme: ColorScheme | None = None,
        base_dir: str | None = None,
        width: int = MESSAGE_WIDTH,
        report_caller: bool = True,
    ):
        super().__init__()
        self.scheme = scheme if scheme is not None else LEVEL_COLOR_SCHEME
        self.colors = compile_color_scheme(self.scheme)
        if width < 0:
            raise DglogError(f"message width must not be negative, got {width}")
        if base_dir is None:
            base_dir = resolve_base_dir(anchor=caller_file(1))
        self.base_dir = base_dir
        self.width = width
        self.report_caller = report_caller

    def level_tag(self, level: str) -> str:
        return level_color(self.colors, level)(level[:1].upper())

    def caller_path(self, caller: Caller | None) -> tuple[str, int]:
        if caller is None:
            return "", 0
        return relative_caller_path(caller.file, self.base_dir), caller.line

    def render_line(self, event: LogEvent, now: datetime | None = None) -> str:
        """the line for an event, without the trailing newline"""
        if now is None:
            now = datetime.now()
        timestamp = now.strftime(TIMESTAMP_FORMAT)
        file, line = self.caller_path(event.caller)
        level = self.level_tag(event.level)
        return f"{timestamp} [{level}] {event.message:<{self.width}} [{file}:{line}]"

    def render(self, event: LogEvent, now: datetime | None = None) -> bytes:
        """the complete line for an event as UTF-8 bytes"""
        return (self.render_line(event, now) + "\n").encode("utf-8")

    def format(self, record):
        event = event_from_record(record, self.report_caller)
        text = self.render_line(event)
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            text = text + "\n" + record.exc_text
        if record.stack_info:
            text = text + "\n" + self.formatStack(record.stack_info)
        return text
