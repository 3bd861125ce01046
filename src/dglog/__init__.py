"""
dglog - fixed-width, color-coded log lines for the standard library logger

Package Structure:
    - main.py: setup_logging() and the CLI entry point
    - colorlog.py: LineFormatter, renders one line per log record
    - colors.py: Color scheme compilation to ANSI color transforms
    - paths.py: Program directory detection for relative caller paths
    - config.py: Configuration management
    - models.py: Log events, level names, DglogError

Usage:
    from dglog import Config, setup_logging
    setup_logging(Config.load("dglog.toml"))

Public API Exports:
    - Config: Configuration class
    - LineFormatter: logging.Formatter subclass
    - ColorScheme: Style names per level
    - setup_logging(): One-time root logger initialization
    - main(): CLI entry point
    - __version__: Package version from metadata
    - __description__: Package description from metadata
"""

import importlib.metadata as importlib_metadata

from .colors import ColorScheme
from .colorlog import LineFormatter
from .config import Config
from .main import main, setup_logging

_metadata = importlib_metadata.metadata("dglog")
__version__ = _metadata["Version"]
__description__ = _metadata["Summary"]


__all__ = ["ColorScheme", "Config", "LineFormatter", "main", "setup_logging"]
