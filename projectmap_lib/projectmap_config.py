# -*- coding: utf-8 -*-
"""
Default option values and constants for ProjectMap.

There is no user configuration file: options come from CLI flags, the
interactive setup, or keyword arguments to ProjectMap.
"""

from typing import List

# --- Defaults ---

DEFAULT_ROOT_DIR: str = "."
DEFAULT_OUTPUT_PATH: str = "./project-map.txt"

# Entries removed from the map (with their whole subtree) unless overridden.
DEFAULT_EXCLUDES: List[str] = [
    "node_modules", ".git", "dist", "build", "coverage",
]

# Files larger than this (in KB) are listed but their content is not inlined.
DEFAULT_CONTENT_SIZE_LIMIT_KB: int = 100

# Sentinel relative path of the traversal root.
ROOT_RELATIVE_PATH: str = "."
