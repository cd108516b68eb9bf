# -*- coding: utf-8 -*-
"""
Utility functions for ProjectMap, including formatting, option parsing,
logging, and error handling.
"""

import sys
from pathlib import Path
from datetime import datetime
from typing import Optional, Union

from .projectmap_styling import Colors

# --- Formatting ---
def format_bytes(size_bytes: Union[int, float]) -> str:
    """Helper function to format bytes into KB, MB, GB."""
    if not isinstance(size_bytes, (int, float)) or size_bytes < 0: return "N/A"
    if size_bytes < 1024: return f"{size_bytes:g} B"
    elif size_bytes < 1024**2: return f"{size_bytes / 1024:.1f} KB"
    elif size_bytes < 1024**3: return f"{size_bytes / 1024**2:.1f} MB"
    else: return f"{size_bytes / 1024**3:.2f} GB"

# --- Option Parsing ---
def parse_size_string(size_str: str) -> Union[int, float]:
    """
    Parses a content size limit into kilobytes.

    A bare number is already in KB ('50' -> 50). Suffixes 'b', 'k'/'kb',
    'm'/'mb' and 'g'/'gb' are also accepted ('512b' -> 0.5, '1m' -> 1024).

    Raises:
        ValueError: If the string is empty, malformed, or negative.
    """
    size_str_orig = size_str # Keep original for error message
    size_str = size_str.strip().lower()
    if not size_str:
        raise ValueError("Size limit must not be empty.")

    multiplier = 1.0
    if size_str.endswith('kb') or size_str.endswith('k'):
        size_str = size_str[:-2] if size_str.endswith('kb') else size_str[:-1]
    elif size_str.endswith('mb') or size_str.endswith('m'):
        multiplier = 1024.0
        size_str = size_str[:-2] if size_str.endswith('mb') else size_str[:-1]
    elif size_str.endswith('gb') or size_str.endswith('g'):
        multiplier = 1024.0 * 1024.0
        size_str = size_str[:-2] if size_str.endswith('gb') else size_str[:-1]
    elif size_str.endswith('b'): # Explicit bytes
        multiplier = 1 / 1024
        size_str = size_str[:-1]

    try:
        value = float(size_str) * multiplier
    except ValueError:
        raise ValueError(f"Invalid size limit '{size_str_orig}'. Use a number of KB, or e.g. 50k, 1m.") from None
    if value < 0:
        raise ValueError(f"Size limit must not be negative: '{size_str_orig}'.")
    return int(value) if value.is_integer() else value

def parse_depth_string(depth_str: Optional[str]) -> Optional[int]:
    """
    Parses a maximum depth. Empty, 'none', 'unlimited' and 'inf' mean no limit.

    Raises:
        ValueError: If the value is not a non-negative integer.
    """
    if depth_str is None:
        return None
    cleaned = depth_str.strip().lower()
    if cleaned in ("", "none", "unlimited", "inf", "infinity"):
        return None
    try:
        depth = int(cleaned)
    except ValueError:
        raise ValueError(f"Invalid max depth '{depth_str}'. Expected a non-negative integer.") from None
    if depth < 0:
        raise ValueError(f"Max depth must not be negative: '{depth_str}'.")
    return depth


# --- Logging ---
def log_message(message: str, level: str = "info", verbose: bool = False, colorize: bool = False):
    """Logs a message to stderr. 'info' and 'debug' only appear when verbose."""
    if not verbose and level in ("info", "debug"):
        return

    color_map = {
        "error": Colors.RED, "warning": Colors.YELLOW, "success": Colors.GREEN,
        "info": Colors.CYAN, "debug": Colors.GRAY
    }
    color = color_map.get(level.lower(), Colors.RESET) if colorize else ""
    reset = Colors.RESET if colorize else ""
    timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3] # Milliseconds

    message_str = str(message)
    log_prefix = f"[{timestamp}] {color}[{level.upper():<7}] {reset}" # Padded level

    lines = message_str.splitlines()
    if not lines: return

    print(f"{log_prefix}{lines[0]}", file=sys.stderr)
    indent = ' ' * (len(log_prefix) - len(color) - len(reset))
    for line in lines[1:]:
        print(f"{indent}{line}", file=sys.stderr) # Align continuation lines


# --- Error Handling ---
class RootNotFoundError(FileNotFoundError):
    """The traversal root does not exist or cannot be accessed."""

    def __init__(self, root: Union[str, Path], reason: Optional[str] = None):
        self.root = root
        self.reason = reason
        message = f"Root directory does not exist: {root}"
        if reason:
            message = f"Root directory is not accessible: {root} ({reason})"
        super().__init__(message)


def describe_error(path: Path, error: Exception, phase: str = "read") -> str:
    """
    Builds a one-line diagnostic for a non-fatal filesystem error,
    with a hint for the common causes.
    """
    error_name = error.__class__.__name__
    # OSError carries the path in str(); strerror is the bare reason
    error_details = getattr(error, "strerror", None) or str(error)
    message = f"Could not {phase} '{path}': {error_name}: {error_details}"

    if isinstance(error, PermissionError):
        message += " (check the file permissions)"
    elif isinstance(error, UnicodeDecodeError):
        message += " (not UTF-8 text; content omitted)"
    elif isinstance(error, FileNotFoundError):
        message += " (it may have been moved or deleted during the scan)"
    return message
