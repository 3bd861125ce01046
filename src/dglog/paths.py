"""
dglog Path Resolution - Base Directory for Caller Paths

PURPOSE:
    Finds the directory the running program lives in, so caller file paths
    can be printed relative to it. A program started from the system
    temporary directory (a one-file bundle unpacking itself, or a script run
    from a scratch location) falls back to the directory of a source file.

WHO READS ME:
    - colorlog.py: LineFormatter resolves its base directory once at construction

WHO I READ:
    - None (leaf module, no internal dependencies)

DEPENDENCIES:
    - os.path: realpath(), dirname(), join()
    - sys: sys.executable, sys.frozen, the __main__ module
    - tempfile: gettempdir() for the temporary directory heuristic

KEY EXPORTS:
    - executable_path(): Path of the running program, exits if unknown
    - ExecutableDirResolver, SourceDirResolver, FixedDirResolver: strategies
    - select_resolver(base_dir): Picks a strategy
    - resolve_base_dir(base_dir): Resolved base directory
    - relative_caller_path(file, base_dir): Caller path relative to base_dir
"""

import logging
import os
import sys
import tempfile

_LOGGER = logging.getLogger(__name__)


def executable_path() -> str:
    """path of the running program, terminates the process if unknown"""
    main_file = getattr(sys.modules.get("__main__"), "__file__", None)
    if getattr(sys, "frozen", False) or not main_file:
        path = sys.executable
    else:
        path = main_file
    if not path:
        print("dglog: unable to determine the executable path", file=sys.stderr)
        sys.exit(1)
    return path


def is_within(path: str, directory: str) -> bool:
    """true if path is directory or lies below it"""
    if not directory:
        return False
    if path == directory:
        return True
    return path.startswith(directory.rstrip(os.sep) + os.sep)


class ExecutableDirResolver:
    """directory of the running program"""

    def resolve(self) -> str:
        return os.path.realpath(os.path.dirname(os.path.abspath(executable_path())))


class SourceDirResolver:
    """directory of the source file that registered the formatter"""

    def __init__(self, anchor: str):
        self.anchor = anchor

    def resolve(self) -> str:
        # not realpath, caller paths in log records are not resolved either
        return os.path.dirname(os.path.abspath(self.anchor))


class FixedDirResolver:
    """a configured directory"""

    def __init__(self, path: str):
        self.path = path

    def resolve(self) -> str:
        return os.path.realpath(os.path.expanduser(self.path))


def caller_file(depth: int = 1) -> str:
    """source file of the frame depth levels above the function calling this"""
    return sys._getframe(depth + 1).f_code.co_filename


def select_resolver(base_dir: str = "", anchor: str | None = None):
    """pick the strategy for the base directory

    A configured base_dir wins. Otherwise the program's directory is used,
    unless it is inside the temporary directory. Then the directory of
    anchor (the registering source file) is used, or of the program itself
    without resolving symlinks when there is no anchor.
    """
    if base_dir:
        return FixedDirResolver(base_dir)
    exe_dir = ExecutableDirResolver().resolve()
    tmp_dir = os.path.realpath(tempfile.gettempdir())
    if is_within(exe_dir, tmp_dir):
        _LOGGER.debug("%s is inside %s, using the source directory", exe_dir, tmp_dir)
        return SourceDirResolver(anchor or executable_path())
    return FixedDirResolver(exe_dir)


def resolve_base_dir(base_dir: str = "", anchor: str | None = None) -> str:
    return select_resolver(base_dir, anchor).resolve()


def relative_caller_path(file: str, base_dir: str) -> str:
    """path of file relative to base_dir

    Files outside of base_dir keep their absolute path.
    """
    directory, name = os.path.split(file)
    if not is_within(directory, base_dir):
        return file
    rest = directory[len(base_dir.rstrip(os.sep)):]
    path = os.path.join(rest, name) if rest else name
    if path.startswith(os.sep):
        path = path[1:]
    return path
