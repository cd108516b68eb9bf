# -*- coding: utf-8 -*-
"""
Styling definitions (colors, tree glyphs) for ProjectMap.
"""

from typing import Dict

# --- Styling ---

class Colors:
    """ANSI color codes for terminal diagnostics."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    GRAY = "\033[90m"

class TreeStyle:
    """
    Glyphs used to draw the project map.

    The map file is read by people and LLMs alike, so there is a single style:
    changing any of these strings changes the output format.
    """
    UNICODE: Dict[str, str] = {
        "branch": "│  ",    # one column per ancestor level
        "tee": "├─ ",       # connector for a mid-sibling
        "last_tee": "└─ ",  # connector for the last sibling
        "empty": "   ",     # final column of a content indent
        "rule": "─",
    }
    RULE_WIDTH: int = 40

    @staticmethod
    def content_rule() -> str:
        """The separator line framing inlined file content."""
        return TreeStyle.UNICODE["rule"] * TreeStyle.RULE_WIDTH
