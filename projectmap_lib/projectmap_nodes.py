# -*- coding: utf-8 -*-
"""
In-memory tree model produced by the builder and consumed by the formatter.

A node is either a FileNode or a DirectoryNode. Size and content only exist
on files and children only on directories, so there is no way to ask a
directory for its size.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class FileNode:
    """A regular file, with its size rounded up to whole KB."""

    name: str
    relative_path: str
    size_kb: int
    content: Optional[str] = None

    @property
    def kind(self) -> str:
        return "file"


@dataclass(frozen=True)
class DirectoryNode:
    """A directory and its listed entries, in filesystem enumeration order."""

    name: str
    relative_path: str
    children: Tuple["Node", ...] = ()

    @property
    def kind(self) -> str:
        return "directory"


Node = Union[FileNode, DirectoryNode]


def iter_nodes(node: Node, depth: int = 0):
    """Yields (node, depth) pairs depth-first, parents before children."""
    yield node, depth
    if isinstance(node, DirectoryNode):
        for child in node.children:
            yield from iter_nodes(child, depth + 1)


__all__ = [
    "FileNode",
    "DirectoryNode",
    "Node",
    "iter_nodes",
]
