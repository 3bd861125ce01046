"""
Pytest configuration and fixtures
"""

import logging
from datetime import datetime

import pytest

from dglog.colorlog import LineFormatter

BASE_DIR = "/app/bin"


@pytest.fixture
def fixed_now():
    """2024-03-05 14:07:09 local time"""
    return datetime(2024, 3, 5, 14, 7, 9)


@pytest.fixture
def formatter():
    """Formatter with a fixed base directory"""
    return LineFormatter(base_dir=BASE_DIR)


@pytest.fixture
def restore_logging():
    """Drop the handlers setup_logging installed, restore the root level"""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, LineFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
