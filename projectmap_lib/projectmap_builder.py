# -*- coding: utf-8 -*-
"""
Tree building for ProjectMap: walks the filesystem from a root and produces
the in-memory node tree, applying exclude patterns, the hidden-file policy,
the depth limit, and content inlining.
"""

import math
import os
import stat
from pathlib import Path
from typing import Callable, List, Optional, Union

from .projectmap_config import DEFAULT_CONTENT_SIZE_LIMIT_KB, ROOT_RELATIVE_PATH
from .projectmap_filters import passes_filters
from .projectmap_nodes import DirectoryNode, FileNode, Node
from .projectmap_utils import RootNotFoundError, describe_error, format_bytes


def _discard_log(message: str, level: str = "info") -> None:
    pass


# --- Content Reading ---

def read_file_content(path: Path, log_func: Callable) -> Optional[str]:
    """
    Reads a whole file as UTF-8 text, line endings untouched.

    Failures are not fatal: a warning naming the file and the reason is
    logged and None is returned, so the file is still listed without content.
    """
    try:
        with path.open('r', encoding='utf-8', newline='') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        log_func(describe_error(path, e, phase="read content of"), "warning")
        return None


# --- Tree Builder ---

class TreeBuilder:
    """
    Builds a FileNode/DirectoryNode tree for one traversal root.

    Statistics about the last build are kept on the instance for the
    summary printed by the caller.
    """

    def __init__(
            self,
            root_dir: Union[str, Path],
            exclude_patterns: Optional[List[str]] = None,
            include_content: bool = False,
            max_depth: Optional[int] = None,
            show_hidden: bool = False,
            content_size_limit: Union[int, float] = DEFAULT_CONTENT_SIZE_LIMIT_KB, # In KB
            log_func: Optional[Callable] = None
    ):
        self.root_dir = resolve_root(root_dir)
        self.patterns_to_exclude = list(exclude_patterns or [])
        self.include_content = include_content
        self.max_depth = max_depth
        self.show_hidden = show_hidden
        self.content_size_limit_bytes = content_size_limit * 1024
        self._log = log_func or _discard_log

        self.files_listed = 0
        self.dirs_listed = 0
        self.contents_inlined = 0
        self.unreadable_files: List[str] = []

    def build(self) -> Optional[Node]:
        """
        Builds the tree from the root.

        Returns:
            The root node, or None when the root itself is filtered out
            or is neither a directory nor a regular file.

        Raises:
            RootNotFoundError: If the root cannot be read.
        """
        self.files_listed = 0
        self.dirs_listed = 0
        self.contents_inlined = 0
        self.unreadable_files = []

        self._log(f"Building tree for: {self.root_dir}", "info")
        root_node = self._build_node(self.root_dir, 0)
        if root_node is None:
            self._log(
                f"Nothing to map: '{self.root_dir}' is excluded, hidden, or not a regular file or directory.",
                "warning"
            )
        else:
            self._log(
                f"Tree built. Directories: {self.dirs_listed}, Files: {self.files_listed}, "
                f"Contents inlined: {self.contents_inlined}, Unreadable: {len(self.unreadable_files)}",
                "info"
            )
        return root_node

    def _relative_path(self, path: Path) -> str:
        if path == self.root_dir:
            return ROOT_RELATIVE_PATH
        return str(path.relative_to(self.root_dir))

    def _build_node(self, path: Path, depth: int) -> Optional[Node]:
        """Builds the node for one entry, or returns None if it is left out."""
        is_root = depth == 0
        # The filesystem root has an empty name
        name = path.name or str(path)
        relative_path = self._relative_path(path)

        if not passes_filters(name, self.patterns_to_exclude, self.show_hidden, self._log, relative_path):
            return None

        try:
            entry_stat = path.stat() # Follows symlinks
        except OSError as e:
            if is_root:
                raise RootNotFoundError(path, e.strerror or str(e)) from e
            self._log(describe_error(path, e, phase="stat"), "warning")
            return None

        if stat.S_ISDIR(entry_stat.st_mode):
            return self._build_directory(path, name, relative_path, depth)
        if stat.S_ISREG(entry_stat.st_mode):
            return self._build_file(path, name, relative_path, entry_stat.st_size)

        # Sockets, FIFOs, devices
        self._log(f"Skipping '{relative_path}' (not a regular file or directory)", "debug")
        return None

    def _build_directory(self, path: Path, name: str, relative_path: str, depth: int) -> DirectoryNode:
        self.dirs_listed += 1

        if self.max_depth is not None and depth >= self.max_depth:
            self._log(f"Max depth {self.max_depth} reached at '{relative_path}', not descending.", "debug")
            return DirectoryNode(name=name, relative_path=relative_path)

        try:
            with os.scandir(path) as it:
                entry_names = [entry.name for entry in it] # Enumeration order, unsorted
        except OSError as e:
            if depth == 0:
                raise RootNotFoundError(path, e.strerror or str(e)) from e
            self._log(describe_error(path, e, phase="list directory"), "warning")
            return DirectoryNode(name=name, relative_path=relative_path)

        children = []
        for entry_name in entry_names:
            child = self._build_node(path / entry_name, depth + 1)
            if child is not None:
                children.append(child)

        return DirectoryNode(name=name, relative_path=relative_path, children=tuple(children))

    def _build_file(self, path: Path, name: str, relative_path: str, size_bytes: int) -> FileNode:
        self.files_listed += 1
        size_kb = math.ceil(size_bytes / 1024)

        content = None
        if self.include_content:
            if size_bytes <= self.content_size_limit_bytes:
                content = read_file_content(path, self._log)
                if content is None:
                    self.unreadable_files.append(relative_path)
                else:
                    self.contents_inlined += 1
            else:
                self._log(
                    f"Skipping content for '{relative_path}' "
                    f"(size {format_bytes(size_bytes)} > max {format_bytes(self.content_size_limit_bytes)}).",
                    "debug"
                )

        return FileNode(name=name, relative_path=relative_path, size_kb=size_kb, content=content)


def resolve_root(root_dir: Union[str, Path]) -> Path:
    """
    Resolves the traversal root to an absolute path.

    Raises:
        RootNotFoundError: If the path does not exist or cannot be accessed.
    """
    try:
        return Path(root_dir).resolve(strict=True)
    except FileNotFoundError:
        raise RootNotFoundError(root_dir) from None
    except (OSError, RuntimeError) as e: # RuntimeError: symlink loop on older Pythons
        raise RootNotFoundError(root_dir, str(e)) from e


def build_tree(
        root_dir: Union[str, Path],
        exclude_patterns: Optional[List[str]] = None,
        include_content: bool = False,
        max_depth: Optional[int] = None,
        show_hidden: bool = False,
        content_size_limit: Union[int, float] = DEFAULT_CONTENT_SIZE_LIMIT_KB,
        log_func: Optional[Callable] = None
) -> Optional[Node]:
    """Builds the node tree for ``root_dir``. See TreeBuilder for the options."""
    builder = TreeBuilder(
        root_dir, exclude_patterns, include_content, max_depth,
        show_hidden, content_size_limit, log_func
    )
    return builder.build()
