"""Terminal Utilities Module."""

import os
import sys
from functools import lru_cache

import colorama

__all__ = ["supports_color"]

_WINDOWS_ANSI_HOSTS = ("ANSICON", "WT_SESSION")


@lru_cache(maxsize=1)
def supports_color() -> bool:
    """Check if log output to the console should carry ANSI color codes.

    `NO_COLOR` always disables color and `FORCE_COLOR` always enables it.
    Otherwise stdout must be a TTY, and on Windows the console must be one
    known to interpret ANSI escapes (Windows Terminal, ANSICON, VS Code, or a
    console already patched by colorama).

    Returns:
        bool: True if the terminal supports color, False otherwise
    """
    if "NO_COLOR" in os.environ:
        return False
    if "FORCE_COLOR" in os.environ:
        return True

    isatty = getattr(sys.stdout, "isatty", None)
    if isatty is None or not isatty():
        return False

    if sys.platform != "win32":
        return True

    return (
        getattr(colorama, "fixed_windows_console", False)
        or any(name in os.environ for name in _WINDOWS_ANSI_HOSTS)
        or os.environ.get("TERM_PROGRAM") == "vscode"
    )
