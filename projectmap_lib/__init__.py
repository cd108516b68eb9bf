# -*- coding: utf-8 -*-
"""
ProjectMap Package - Generate a text map of a project's structure for LLMs

This package provides tools for:
- Walking a directory tree with exclude patterns, a depth limit and a hidden-file policy
- Rendering the tree with box-drawing characters and file sizes
- Inlining file contents up to a size limit

Usage:
    from projectmap_lib import generate_project_map
    generate_project_map("path/to/project", "project-map.txt", include_content=True)
"""

# Package version
__version__ = "1.0.0"

# Import public classes and functions for direct access
from .projectmap_nodes import FileNode, DirectoryNode, Node
from .projectmap_builder import TreeBuilder, build_tree
from .projectmap_formatter import format_tree
from .projectmap_core import ProjectMap, generate_project_map
from .projectmap_config import DEFAULT_EXCLUDES
from .projectmap_utils import RootNotFoundError
from .projectmap_cli import main

# Define what gets imported with 'from projectmap_lib import *'
__all__ = [
    'FileNode', 'DirectoryNode', 'Node',
    'TreeBuilder', 'build_tree', 'format_tree',
    'ProjectMap', 'generate_project_map',
    'DEFAULT_EXCLUDES', 'RootNotFoundError', 'main',
]
