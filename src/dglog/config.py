"""
dglog Configuration - Configuration Loading and Defaults Management

PURPOSE:
    Holds the settings setup_logging() applies to the root logger and loads
    them from a TOML file, falling back to defaults when the file is missing
    or unusable.

WHO READS ME:
    - main.py: Loads configuration via Config.load() during bootstrap

WHO I READ:
    - colors.py: ColorScheme for the color_scheme table
    - colorlog.py: LEVEL_COLOR_SCHEME and MESSAGE_WIDTH defaults

DEPENDENCIES:
    - serde: TOML serialization/deserialization (@deserialize, @serialize)
    - serde.toml: from_toml(), to_toml()
    - dataclasses: @dataclass decorator
    - logging: Configuration loading status messages

KEY EXPORTS:
    - Config: Dataclass containing all configuration parameters

CONFIG PARAMETERS:
    - level: minimum level name (default: DEBUG)
    - stream: stdout or stderr (default: stdout)
    - report_caller: print the caller's file:line (default: true)
    - message_width: message column width (default: 120)
    - base_dir: directory caller paths are relative to (default: detected)
    - color_scheme: style name per level, empty uses the default

FILE FORMAT:
    dglog.toml example:
    ```toml
    level = "INFO"
    stream = "stderr"
    report_caller = true
    message_width = 120
    base_dir = ""

    [color_scheme]
    info_level_style = "green+b"
    debug_level_style = "black+h"
    ```
"""

import logging
from dataclasses import dataclass, field

from serde import deserialize, serialize, SerdeError
from serde.toml import from_toml, to_toml

from dglog.colors import ColorScheme
from dglog.colorlog import LEVEL_COLOR_SCHEME, MESSAGE_WIDTH

_LOGGER = logging.getLogger(__name__)


@deserialize
@serialize
@dataclass
class Config:
    """logger configuration"""

    level: str = "DEBUG"
    stream: str = "stdout"
    report_caller: bool = True
    message_width: int = MESSAGE_WIDTH
    base_dir: str = ""
    color_scheme: ColorScheme = field(default_factory=lambda: LEVEL_COLOR_SCHEME)

    @classmethod
    def load(cls, filename: str) -> "Config":
        """load the configuration from the given file"""
        try:
            with open(filename, encoding="utf-8") as handle:
                cfg = from_toml(cls, handle.read())
            _LOGGER.info("Configuration loaded from file %s", filename)
        except (FileNotFoundError, TypeError, ValueError, SerdeError) as exc:
            if not isinstance(exc, FileNotFoundError):
                _LOGGER.error(exc)
            cfg = cls()
            _LOGGER.warning("using configuration defaults")
        return cfg

    def save(self, filename: str):
        """save the configuration to the given file"""
        with open(filename, "w+", encoding="utf-8") as handle:
            handle.write(to_toml(self))
