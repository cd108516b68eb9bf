# tests/test_formatting.py
import pytest

from projectmap_lib.projectmap_formatter import format_tree, node_label
from projectmap_lib.projectmap_nodes import DirectoryNode, FileNode
from projectmap_lib.projectmap_styling import TreeStyle

RULE = "─" * 40


def file_node(name, size_kb=1, content=None, path=None):
    return FileNode(name=name, relative_path=path or name, size_kb=size_kb, content=content)

def dir_node(name, *children, path=None):
    return DirectoryNode(name=name, relative_path=path or name, children=tuple(children))


@pytest.fixture
def sample_tree():
    return dir_node(
        "proj",
        file_node("a.txt", content="hello\nworld"),
        dir_node(
            "src",
            file_node("index.ts", content="x", path="src/index.ts"),
            file_node("b.ts", size_kb=0, path="src/b.ts"),
            path="src",
        ),
        file_node("z.md", size_kb=2),
        path=".",
    )


def test_node_label():
    assert node_label(file_node("a.txt", size_kb=3)) == "a.txt (3KB)"
    assert node_label(file_node("empty", size_kb=0)) == "empty (0KB)"
    assert node_label(dir_node("src")) == "src"


def test_format_full_tree(sample_tree):
    expected = "\n".join([
        "proj",
        "├─ a.txt (1KB)",
        f"│     {RULE}",
        "│     hello",
        "│     world",
        f"│     {RULE}",
        "├─ src",
        "│  ├─ index.ts (1KB)",
        f"│  │     {RULE}",
        "│  │     x",
        f"│  │     {RULE}",
        "│  └─ b.ts (0KB)",
        "└─ z.md (2KB)",
    ]) + "\n"

    assert format_tree(sample_tree) == expected


def test_ancestor_columns_always_draw_bars():
    tree = dir_node(
        "root",
        file_node("first.py"),
        dir_node("lib", dir_node("core", file_node("x.py", content="pass")), file_node("y.py")),
    )

    assert format_tree(tree) == "\n".join([
        "root",
        "├─ first.py (1KB)",
        "└─ lib",
        "│  ├─ core",
        "│  │  └─ x.py (1KB)",
        f"│  │  │     {RULE}",
        "│  │  │     pass",
        f"│  │  │     {RULE}",
        "│  └─ y.py (1KB)",
    ]) + "\n"


def test_content_under_last_sibling_keeps_bars():
    tree = dir_node("root", dir_node("lib", file_node("x.py", content="pass")))

    assert format_tree(tree) == "\n".join([
        "root",
        "└─ lib",
        "│  └─ x.py (1KB)",
        f"│  │     {RULE}",
        "│  │     pass",
        f"│  │     {RULE}",
    ]) + "\n"


def test_single_directory():
    assert format_tree(dir_node("only")) == "only\n"


def test_single_file_root_with_content():
    root = FileNode(name="notes.txt", relative_path=".", size_kb=1, content="a\nb")
    assert format_tree(root) == f"notes.txt (1KB)\n   {RULE}\n   a\n   b\n   {RULE}\n"


def test_none_formats_to_empty_string():
    assert format_tree(None) == ""


def test_empty_content_has_no_frame():
    tree = dir_node("root", file_node("empty.txt", size_kb=0, content=""))
    assert format_tree(tree) == "root\n└─ empty.txt (0KB)\n"


def test_trailing_newline_in_content_keeps_blank_line():
    tree = dir_node("root", file_node("a.txt", content="line\n"))
    lines = format_tree(tree).split("\n")

    assert lines[3:7] == ["│     line", "│     ", f"│     {RULE}", ""]


def test_formatting_is_deterministic(sample_tree):
    assert format_tree(sample_tree) == format_tree(sample_tree)


def test_children_order_is_preserved():
    tree = dir_node("root", file_node("zeta"), file_node("alpha"), file_node("mid"))
    lines = format_tree(tree).splitlines()

    assert lines[1:] == ["├─ zeta (1KB)", "├─ alpha (1KB)", "└─ mid (1KB)"]


def test_tree_style_glyphs():
    assert TreeStyle.content_rule() == RULE
    assert TreeStyle.UNICODE == {"branch": "│  ", "tee": "├─ ", "last_tee": "└─ ", "empty": "   ", "rule": "─"}
