"""Terminal color utilities for build output.

ANSI color codes with TTY detection and NO_COLOR / FORCE_COLOR support.
Used by the console log formatter and by ``SiteBuildError.format_compact()``.
"""

from __future__ import annotations

import os
import re
import sys
from typing import Literal

# ANSI color codes
_COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
}

ColorName = Literal[
    "reset", "bold", "dim",
    "red", "green", "yellow",
    "bright_red", "bright_green", "bright_yellow",
]

_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def _should_use_colors() -> bool:
    """Check if terminal supports colors and user allows them.

    Respects:
        - NO_COLOR environment variable (https://no-color.org/)
        - FORCE_COLOR environment variable (overrides NO_COLOR)
        - sys.stderr.isatty() for TTY detection (build output goes to stderr)
    """
    if os.environ.get("FORCE_COLOR"):
        return True

    if os.environ.get("NO_COLOR"):
        return False

    return sys.stderr.isatty()


# Cache the color decision
_USE_COLORS = _should_use_colors()


def supports_color() -> bool:
    """Check if current terminal supports color output."""
    return _USE_COLORS


def colorize(text: str, *colors: ColorName) -> str:
    """Apply ANSI color codes to text.

    Args:
        text: Text to colorize
        *colors: One or more color names to apply

    Returns:
        Colorized text if colors are supported, otherwise plain text

    Example:
        >>> colorize("Warning", "yellow", "bold")
        '\033[33m\033[1mWarning\033[0m'  # if colors supported
        'Warning'  # if colors not supported
    """
    if not _USE_COLORS or not colors:
        return text

    prefix = "".join(_COLORS.get(color, "") for color in colors)
    if not prefix:
        return text

    return f"{prefix}{text}{_COLORS['reset']}"


def strip_colors(text: str) -> str:
    """Remove ANSI color codes from text.

    Example:
        >>> strip_colors("\033[31mError\033[0m")
        'Error'
    """
    return _ANSI_ESCAPE.sub("", text)


# Semantic color helpers
def error_code(text: str) -> str:
    """Color text as an error code (bright red + bold)."""
    return colorize(text, "bright_red", "bold")


def warning(text: str) -> str:
    """Color text as a warning (bright yellow)."""
    return colorize(text, "bright_yellow")


def success(text: str) -> str:
    """Color text as a success message (bright green)."""
    return colorize(text, "bright_green")


def dim_text(text: str) -> str:
    """Color text as dimmed/secondary (dim)."""
    return colorize(text, "dim")


def format_error_header(code: str | None, message: str) -> str:
    """Format error header with optional code.

    Example:
        >>> format_error_header("S-TPL-001", "Template 'home.html' not found")
        '\033[91m\033[1mS-TPL-001\033[0m: Template 'home.html' not found'
    """
    if code:
        return f"{error_code(code)}: {message}"
    return message
