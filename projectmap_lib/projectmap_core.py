# -*- coding: utf-8 -*-
"""
Core logic for ProjectMap: the class that validates options, builds the
tree, formats it, and writes the project map file.
"""

from pathlib import Path
from typing import Callable, List, Optional, Union

from .projectmap_builder import TreeBuilder, resolve_root
from .projectmap_config import DEFAULT_CONTENT_SIZE_LIMIT_KB, DEFAULT_EXCLUDES
from .projectmap_formatter import format_tree
from .projectmap_nodes import Node
from .projectmap_utils import format_bytes, log_message


# --- Main Class ---

class ProjectMap:
    """
    Generates a text map of a project's directory structure, optionally with
    file contents inlined, and saves it to a file.
    """

    def __init__(
            self,
            root_dir: Union[str, Path],
            output_path: Union[str, Path],
            # Filtering
            exclude: Optional[List[str]] = None, # None means DEFAULT_EXCLUDES
            show_hidden: bool = False,
            max_depth: Optional[int] = None,
            # Content
            include_content: bool = False,
            content_size_limit: Union[int, float] = DEFAULT_CONTENT_SIZE_LIMIT_KB, # In KB
            # Behavior
            verbose: bool = False,
            colorize: bool = False,
            log_func: Optional[Callable] = None
    ):
        if max_depth is not None and (isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 0):
            raise ValueError(f"max_depth must be a non-negative integer or None, got {max_depth!r}")
        if isinstance(content_size_limit, bool) or not isinstance(content_size_limit, (int, float)) or content_size_limit < 0:
            raise ValueError(f"content_size_limit must be a non-negative number of KB, got {content_size_limit!r}")

        # Raises RootNotFoundError before anything else happens
        self.root_dir = resolve_root(root_dir)
        self.output_path = Path(output_path).resolve()

        self.exclude_patterns = list(DEFAULT_EXCLUDES if exclude is None else exclude)
        self.show_hidden = show_hidden
        self.max_depth = max_depth
        self.include_content = include_content
        self.content_size_limit = content_size_limit
        self.verbose = verbose
        self.colorize = colorize

        # Configure logging function for this instance
        self._log = log_func or (lambda msg, level="info": log_message(msg, level, self.verbose, self.colorize))

        self._log(f"Initialized ProjectMap for: {self.root_dir}", "info")
        if self.verbose:
            self._log(f"  Output: {self.output_path}", "debug")
            self._log(f"  Exclude Patterns: {self.exclude_patterns}", "debug")
            self._log(f"  Show Hidden: {self.show_hidden}", "debug")
            self._log(f"  Max Depth: {self.max_depth if self.max_depth is not None else 'unlimited'}", "debug")
            self._log(f"  Include Content: {self.include_content}", "debug")
            if self.include_content:
                self._log(f"    Content Size Limit: {format_bytes(self.content_size_limit * 1024)}", "debug")

        self.builder: Optional[TreeBuilder] = None

    # --- Public Methods ---
    def build_tree(self) -> Optional[Node]:
        """Walks the root and returns the node tree (None if the root is filtered out)."""
        self.builder = TreeBuilder(
            self.root_dir,
            exclude_patterns=self.exclude_patterns,
            include_content=self.include_content,
            max_depth=self.max_depth,
            show_hidden=self.show_hidden,
            content_size_limit=self.content_size_limit,
            log_func=self._log,
        )
        return self.builder.build()

    def render(self) -> str:
        """Builds a fresh tree and returns the project map text without writing it."""
        return format_tree(self.build_tree())

    def run(self) -> Path:
        """
        Builds, formats and writes the project map.

        Returns:
            The path of the written file.

        Raises:
            RootNotFoundError: If the root disappears or becomes unreadable.
            OSError: If the output file cannot be written.
        """
        project_map_text = self.render()

        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text(project_map_text, encoding="utf-8")

        self._log(f"Project map saved to: {self.output_path}", "success")
        if self.builder and self.builder.unreadable_files:
            self._log(
                f"{len(self.builder.unreadable_files)} file(s) listed without content because they could not be read.",
                "warning"
            )
        return self.output_path


def generate_project_map(
        root_dir: Union[str, Path],
        output_path: Union[str, Path],
        exclude: Optional[List[str]] = None,
        include_content: bool = False,
        max_depth: Optional[int] = None,
        show_hidden: bool = False,
        content_size_limit: Union[int, float] = DEFAULT_CONTENT_SIZE_LIMIT_KB,
        verbose: bool = False,
        colorize: bool = False,
        log_func: Optional[Callable] = None
) -> Path:
    """
    Generates a map of the project structure and saves it to a text file.

    Args:
        root_dir: Directory to map.
        output_path: File to write (UTF-8, overwritten if present).
        exclude: Names or '*' patterns to leave out, with their subtrees.
            Defaults to node_modules, .git, dist, build, coverage.
        include_content: Inline the text of files within the size limit.
        max_depth: Deepest level to descend to (root is 0); None for no limit.
        show_hidden: Keep entries whose name starts with '.'.
        content_size_limit: Largest file, in KB, whose content is inlined.
        verbose: Log info/debug messages to stderr.
        colorize: Color the log messages.
        log_func: Replacement sink for diagnostics, called as log_func(msg, level).

    Returns:
        The resolved path of the written file.

    Raises:
        RootNotFoundError: If ``root_dir`` does not exist or is not accessible.
        ValueError: If ``max_depth`` or ``content_size_limit`` is invalid.
    """
    project_map = ProjectMap(
        root_dir, output_path,
        exclude=exclude, show_hidden=show_hidden, max_depth=max_depth,
        include_content=include_content, content_size_limit=content_size_limit,
        verbose=verbose, colorize=colorize, log_func=log_func,
    )
    return project_map.run()
