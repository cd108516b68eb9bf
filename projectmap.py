#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ProjectMap - Generate a text file with your project structure

This script writes a tree of a directory, with file sizes and optionally
file contents, to a text file suitable for handing to a Large Language Model.
"""

import sys

try:
    from projectmap_lib.projectmap_cli import main
except ImportError as e:
    print("Error: Could not import ProjectMap components.", file=sys.stderr)
    print(f"Details: {e}", file=sys.stderr)
    print("Please ensure the package is correctly installed (e.g., 'pip install -e .') "
          "or run from the project root directory.", file=sys.stderr)
    sys.exit(1)

if __name__ == "__main__":
    main()
