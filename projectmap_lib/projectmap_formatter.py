# -*- coding: utf-8 -*-
"""
Text rendering for ProjectMap.

Turns a node tree into the project map text: one line per node drawn with
box characters, with inlined file content framed by rule lines underneath
its file. Rendering is a pure function of the tree.
"""

from typing import List, Optional

from .projectmap_nodes import DirectoryNode, FileNode, Node
from .projectmap_styling import TreeStyle


def node_label(node: Node) -> str:
    """Name plus ' (<n>KB)' for files."""
    if isinstance(node, FileNode):
        return f"{node.name} ({node.size_kb}KB)"
    return node.name


def _format_content(content: str, indent: str, lines: List[str]) -> None:
    rule = TreeStyle.content_rule()
    lines.append(f"{indent}{rule}")
    for content_line in content.split("\n"):
        lines.append(f"{indent}{content_line}")
    lines.append(f"{indent}{rule}")


def _format_node(node: Node, prefix: str, pointer: str, child_prefix: str, lines: List[str]) -> None:
    """
    Appends the lines for ``node`` and its subtree.

    Args:
        node: Node to render.
        prefix: Ancestor columns drawn before this node's connector.
        pointer: This node's connector ('' for the root).
        child_prefix: Ancestor columns for this node's children, one '│  '
            per level. Content is indented to this plus one blank column.
        lines: Output accumulator.
    """
    style = TreeStyle.UNICODE
    lines.append(f"{prefix}{pointer}{node_label(node)}")

    if isinstance(node, FileNode) and node.content:
        _format_content(node.content, child_prefix + style["empty"], lines)

    if isinstance(node, DirectoryNode):
        count = len(node.children)
        for i, child in enumerate(node.children):
            is_last = (i == count - 1)
            child_pointer = style["last_tee"] if is_last else style["tee"]
            # Every ancestor level draws a bar, last sibling or not
            grandchild_prefix = child_prefix + style["branch"]
            _format_node(child, child_prefix, child_pointer, grandchild_prefix, lines)


def format_tree(root: Optional[Node]) -> str:
    """
    Renders the whole tree. Each line, content lines included, ends with a
    newline; an empty tree (None) renders as ''.
    """
    if root is None:
        return ""
    lines: List[str] = []
    _format_node(root, "", "", "", lines)
    return "".join(f"{line}\n" for line in lines)
