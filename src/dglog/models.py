"""
dglog Data Models - Log Events and Level Names

PURPOSE:
    Defines the framework-independent event the line formatter renders and
    the adapter from standard library log records to it.

WHO READS ME:
    - colorlog.py: Renders LogEvent instances
    - main.py: Uses DglogError and the extra level numbers

WHO I READ:
    - None (leaf module, no internal dependencies)

DEPENDENCIES:
    - dataclasses: @dataclass decorator
    - logging: LogRecord and the standard level numbers

KEY EXPORTS:
    - DglogError: Base exception class for all dglog errors
    - Caller: Source file and line of a log call
    - LogEvent: Level name, message and optional caller
    - TRACE, PANIC: Level numbers below DEBUG and above CRITICAL
    - level_name(levelno, fallback): logging level number to dglog level name
    - event_from_record(record, report_caller): LogRecord to LogEvent

LEVELS:
    trace (5), debug (10), info (20), warning (30), error (40),
    fatal (50, logging.CRITICAL), panic (60)
"""

import logging
from dataclasses import dataclass

TRACE = 5
PANIC = 60

LEVEL_NAMES = {
    TRACE: "trace",
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "fatal",
    PANIC: "panic",
}


class DglogError(Exception):
    """Base class for all errors raised by dglog"""


@dataclass(frozen=True)
class Caller:
    """where a log call was issued, file is an absolute path"""

    file: str
    line: int


@dataclass(frozen=True)
class LogEvent:
    """a single log event as seen by the formatter"""

    level: str
    message: str
    caller: Caller | None = None


def level_name(levelno: int, fallback: str = "") -> str:
    """map a logging level number to its dglog level name"""
    if levelno in LEVEL_NAMES:
        return LEVEL_NAMES[levelno]
    return fallback.lower()


def event_from_record(record: logging.LogRecord, report_caller: bool = True) -> LogEvent:
    """adapt a standard library log record"""
    caller = None
    if report_caller and record.pathname:
        caller = Caller(record.pathname, record.lineno)
    return LogEvent(
        level=level_name(record.levelno, record.levelname),
        message=record.getMessage(),
        caller=caller,
    )
