"""
dglog Color Schemes - Style Names to ANSI Color Transforms

PURPOSE:
    Compiles a declarative color scheme (one style name per log level plus
    prefix and timestamp) into callables that wrap text in ANSI escape codes.
    Empty style names fall back to DEFAULT_COLOR_SCHEME, unknown style names
    compile to a plain passthrough.

WHO READS ME:
    - colorlog.py: Compiles the level color scheme for LineFormatter
    - config.py: ColorScheme is part of the TOML configuration

WHO I READ:
    - None (leaf module, no internal dependencies)

DEPENDENCIES:
    - serde: @serialize/@deserialize so ColorScheme nests inside Config
    - dataclasses: @dataclass decorator, fields()

KEY EXPORTS:
    - ColorScheme: Style names per slot, "" means default
    - CompiledColorScheme: Color transform per slot
    - DEFAULT_COLOR_SCHEME: Fallback style names
    - color_func(style): Style name to color transform
    - compile_color_scheme(scheme): ColorScheme to CompiledColorScheme

STYLE SYNTAX:
    fg[+attrs][:bg[+attrs]]
    colors: black, red, green, yellow, blue, magenta, cyan, white, default,
            or a 256-color palette number 0-255
    attrs:  b bold, B blink, u underline, i inverse, h high intensity
    Examples: "red", "black+h", "white+b:red", "208"
"""

from dataclasses import dataclass, fields
from typing import Callable

from serde import deserialize, serialize

ColorFunc = Callable[[str], str]

START = "\x1b["
RESET = "\x1b[0m"

COLORS = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    "default": 9,
}

# attribute letter -> SGR code, in emitted order
ATTRIBUTES = (("b", 1), ("B", 5), ("u", 4), ("i", 7))


@deserialize
@serialize
@dataclass(frozen=True)
class ColorScheme:
    """style names for each slot, an empty string selects the default"""

    info_level_style: str = ""
    warn_level_style: str = ""
    error_level_style: str = ""
    fatal_level_style: str = ""
    panic_level_style: str = ""
    debug_level_style: str = ""
    prefix_style: str = ""
    timestamp_style: str = ""


@dataclass(frozen=True)
class CompiledColorScheme:
    """color transforms for each slot"""

    info_level_color: ColorFunc
    warn_level_color: ColorFunc
    error_level_color: ColorFunc
    fatal_level_color: ColorFunc
    panic_level_color: ColorFunc
    debug_level_color: ColorFunc
    prefix_color: ColorFunc
    timestamp_color: ColorFunc


DEFAULT_COLOR_SCHEME = ColorScheme(
    info_level_style="green",
    warn_level_style="yellow",
    error_level_style="red",
    fatal_level_style="red",
    panic_level_style="red",
    debug_level_style="blue",
    prefix_style="cyan",
    timestamp_style="black+h",
)


def _plain(text: str) -> str:
    return text


def _color_codes(name: str, attrs: str, normal: int, bright: int, extended: int) -> list[int] | None:
    """SGR codes for one color/attribute pair, None if the color is unknown"""
    if name.isdecimal():
        number = int(name)
        if number > 255:
            return None
        color = [extended, 5, number]
    elif name in COLORS:
        base = bright if "h" in attrs else normal
        color = [base + COLORS[name]]
    else:
        return None
    return [code for letter, code in ATTRIBUTES if letter in attrs] + color


def style_code(style: str) -> str:
    """the escape sequence for a style, empty for unknown styles"""
    if not style or style == "off":
        return ""
    foreground, _, background = style.partition(":")
    fg_name, _, fg_attrs = foreground.partition("+")
    bg_name, _, bg_attrs = background.partition("+")

    codes: list[int] = []
    if fg_name:
        fg_codes = _color_codes(fg_name, fg_attrs, 30, 90, 38)
        if fg_codes is None:
            return ""
        codes.extend(fg_codes)
    if bg_name:
        bg_codes = _color_codes(bg_name, bg_attrs, 40, 100, 48)
        if bg_codes is None:
            return ""
        codes.extend(bg_codes)
    if not codes:
        return ""
    return START + ";".join(str(code) for code in codes) + "m"


def color_func(style: str) -> ColorFunc:
    """return a function that wraps text in the given style"""
    code = style_code(style)
    if not code:
        return _plain

    def colorize(text: str) -> str:
        if not text:
            return text
        return code + text + RESET

    return colorize


def compile_color_scheme(scheme: ColorScheme) -> CompiledColorScheme:
    """compile every slot of the scheme, empty slots use DEFAULT_COLOR_SCHEME"""
    compiled = {}
    for field in fields(ColorScheme):
        style = getattr(scheme, field.name) or getattr(DEFAULT_COLOR_SCHEME, field.name)
        compiled[field.name.replace("_style", "_color")] = color_func(style)
    return CompiledColorScheme(**compiled)
