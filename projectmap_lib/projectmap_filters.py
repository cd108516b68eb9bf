# -*- coding: utf-8 -*-
"""
Filtering logic for ProjectMap. Determines which entries are dropped from
the map based on exclude patterns and the hidden-file setting.
"""

import re
from typing import Callable, Dict, List, Optional, Pattern

# Compiled exclude patterns, keyed by the raw pattern
_COMPILED_REGEX_CACHE: Dict[str, Pattern[str]] = {}

def _compile_pattern(pattern: str) -> Pattern[str]:
    """
    Compile an exclude pattern to an anchored regex.

    Only '*' is a wildcard (any run of characters, possibly empty); every
    other character, including '?', '[' and '.', is matched literally.
    """
    if pattern in _COMPILED_REGEX_CACHE:
        return _COMPILED_REGEX_CACHE[pattern]

    regex_pattern = ".*".join(re.escape(part) for part in pattern.split("*"))
    compiled = re.compile(regex_pattern, re.DOTALL)
    _COMPILED_REGEX_CACHE[pattern] = compiled
    return compiled

def matches_exclude_pattern(name: str, patterns_to_exclude: List[str]) -> Optional[str]:
    """
    Returns the first pattern that matches the whole of ``name``, or None.

    Patterns are compared with the entry's base name only, so a pattern
    containing a path separator never matches.
    """
    for pattern in patterns_to_exclude:
        if "*" in pattern:
            if _compile_pattern(pattern).fullmatch(name) is not None:
                return pattern
        elif name == pattern:
            return pattern
    return None

def is_hidden(name: str) -> bool:
    """Dot-files and dot-directories are hidden."""
    return name.startswith(".")

def passes_filters(
    name: str,
    patterns_to_exclude: List[str],
    show_hidden: bool,
    log_func: Optional[Callable] = None, # Optional logging function
    relative_path: Optional[str] = None # Only used in log messages
) -> bool:
    """
    Checks if an entry should appear in the map.

    Args:
        name: Base name of the entry.
        patterns_to_exclude: Exclude patterns ('*' wildcard or exact names).
        show_hidden: Whether to keep entries whose name starts with '.'.
        log_func: Optional function for logging filter decisions.
        relative_path: Path shown in log messages (defaults to the name).

    Returns:
        True if the entry is kept, False if it (and any subtree) is dropped.
    """
    shown_path = relative_path or name

    # 1. Exclude patterns
    matched = matches_exclude_pattern(name, patterns_to_exclude)
    if matched is not None:
        if log_func:
            log_func(f"Filter: Excluding '{shown_path}' (matches exclude pattern: '{matched}')", "debug")
        return False

    # 2. Hidden entries
    if not show_hidden and is_hidden(name):
        if log_func:
            log_func(f"Filter: Excluding hidden item '{shown_path}'", "debug")
        return False

    return True
