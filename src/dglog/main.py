"""
dglog Main Entry Point - Logger Setup and CLI

PURPOSE:
    Provides setup_logging(), the one-time initialization that routes the
    root logger through LineFormatter, and the `dglog` command which logs a
    message (or one line per level with --demo) using that setup.

WHO READS ME:
    - Applications: call setup_logging(Config.load(...)) once at startup
    - Users: via CLI command `dglog` or `python -m dglog`

WHO I READ:
    - config.py: Configuration loading and defaults
    - colorlog.py: LineFormatter
    - models.py: DglogError, TRACE and PANIC level numbers
    - paths.py: resolve_base_dir(), caller_file()

DEPENDENCIES:
    - argparse: CLI argument parsing
    - logging: Root logger and stream handler
    - os, sys: LOG_LEVEL environment variable, output streams

KEY EXPORTS:
    - main(): Application entry point
    - create_argparser(): Creates and configures the argument parser
    - setup_logging(cfg): Installs LineFormatter on the root logger
    - get_log_level(name): Level name to logging level number
"""

import argparse
import logging
import os
import sys

import dglog
from dglog.colorlog import LineFormatter
from dglog.config import Config
from dglog.models import LEVEL_NAMES, PANIC, TRACE, DglogError
from dglog.paths import caller_file, resolve_base_dir

_LOGGER = logging.getLogger(__name__)

DEMO_LEVELS = (TRACE, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL, PANIC)


def create_argparser(parser_class=argparse.ArgumentParser):
    """create the argparser for dglog"""
    parser = parser_class(prog=dglog.__name__, description=dglog.__description__)
    config_settings = parser.add_argument_group("configuration")

    config_settings.add_argument(
        "-c",
        "--config",
        dest="configfile",
        help="Use the configuration from this file, defaults to %(default)s",
        default="dglog.toml",
    )
    config_settings.add_argument(
        "-w",
        "--write",
        dest="writeconfig",
        action="store_true",
        help="Write the default configuration to a file and exit",
        default=False,
    )
    config_settings.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s {dglog.__version__}"
    )
    config_settings.add_argument(
        "-l",
        "--loglevel",
        type=str,
        default=os.environ.get("LOG_LEVEL"),
        help="TRACE, DEBUG, INFO, WARN, ERROR, FATAL, PANIC, overrides the configuration",
    )

    parser.add_argument(
        "--at",
        dest="at_level",
        type=str,
        default="info",
        help='Level to log the message at, default "%(default)s"',
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        default=False,
        help="Log one line per level to show the color scheme",
    )
    parser.add_argument(
        "message",
        nargs="*",
        help="Message to log",
    )
    return parser


def get_log_level(level_name: str) -> tuple[int, bool]:
    log_levels = {
        "PANIC": PANIC,
        "FATAL": logging.CRITICAL,
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
        "TRACE": TRACE,
        "NOTSET": logging.NOTSET,
    }
    level_name = level_name.upper()
    if level_name in log_levels:
        return log_levels[level_name], False
    else:
        return logging.WARNING, True


def get_stream(name: str):
    streams = {"stdout": sys.stdout, "stderr": sys.stderr}
    try:
        return streams[name.lower()]
    except KeyError:
        raise DglogError(f"unknown stream {name!r}, use stdout or stderr") from None


def setup_logging(cfg: Config) -> LineFormatter:
    """sets up the logging, replaces the root handlers with one stream
    handler that uses the fixed-width line formatter. Call once at startup.
    """
    logging.addLevelName(TRACE, "TRACE")
    logging.addLevelName(PANIC, "PANIC")
    formatter = LineFormatter(
        scheme=cfg.color_scheme,
        base_dir=resolve_base_dir(cfg.base_dir, anchor=caller_file(1)),
        width=cfg.message_width,
        report_caller=cfg.report_caller,
    )
    handler = logging.StreamHandler(get_stream(cfg.stream))
    handler.setFormatter(formatter)
    logging.basicConfig(level=logging.WARN, handlers=[handler], force=True)
    level, unknown_loglevel = get_log_level(cfg.level)
    logging.root.setLevel(level)
    if unknown_loglevel:
        _LOGGER.warning("Unknown log level: %s", cfg.level.upper())
    return formatter


def main():
    """main function, returns 0 on success, 1 otherwise"""
    parser = create_argparser()
    args = parser.parse_args()

    cfg = Config.load(args.configfile)
    if args.writeconfig:
        cfg.save(args.configfile)
        return 0
    if args.loglevel:
        cfg.level = args.loglevel

    if not args.demo and not args.message:
        parser.error("nothing to log, provide a message or --demo")

    try:
        setup_logging(cfg)
        if args.demo:
            for level in DEMO_LEVELS:
                _LOGGER.log(level, "%s level", LEVEL_NAMES[level])
            return 0
        level, unknown_level = get_log_level(args.at_level)
        if unknown_level or level == logging.NOTSET:
            raise DglogError(f"unknown level {args.at_level!r}")
        _LOGGER.log(level, " ".join(args.message))
    except DglogError as exc:
        _LOGGER.error(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
