# tests/conftest.py
import pytest
from pathlib import Path
from typing import Any, Dict, List, Tuple


def create_test_structure(base_path: Path, structure: Dict[str, Any]):
    """Recursively creates a directory structure from a dictionary."""
    base_path.mkdir(parents=True, exist_ok=True)

    for name, content in structure.items():
        path = base_path / name
        if isinstance(content, dict):
            path.mkdir(parents=True, exist_ok=True)
            create_test_structure(path, content)
        elif isinstance(content, str): # File content
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding='utf-8')
        elif isinstance(content, bytes): # Raw file content
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        elif content is None: # Empty file
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch()
        else:
            raise TypeError(f"Unsupported structure type for {name}: {type(content)}")


@pytest.fixture
def scenario_structure(tmp_path):
    """The small project used by the end-to-end scenarios."""
    structure = {
        "file1.txt": "This is a text file!", # 20 bytes
        "node_modules": {
            "some-package": "module.exports = {};",
        },
        "src": {
            "index.ts": "export {};", # 10 bytes
            "utils": {
                "helpers.ts": "export const x = 1;",
            },
        },
    }
    root = tmp_path / "test_proj"
    create_test_structure(root, structure)
    return root


@pytest.fixture
def base_test_structure(tmp_path):
    """A broader structure with hidden entries, default excludes and patterns."""
    structure = {
        "src": {
            "main.py": "print('hello')",
            "utils": {
                "helpers.py": "# Utility functions",
                "data.json": '{"key": "value"}',
            },
            "feature": {
                "component.js": "// JS Component",
                "style.css": "body { color: blue; }",
            },
        },
        "tests": {
            "test_main.py": "import pytest",
        },
        "node_modules": {
            "package_a": {
                "index.js": "// Package A",
            },
        },
        ".git": {
            "config": "[core]\nrepositoryformatversion = 0",
            "HEAD": "ref: refs/heads/main",
        },
        ".env": "SECRET_KEY=12345",
        "docs": {
            "index.md": "# Documentation",
        },
        "data": {
            "input.csv": "col1,col2\n1,2",
            "temp_output.log": "Log line 1",
        },
        "build": {
            "report.txt": "Build report",
        },
        "coverage": {
            "lcov.info": "TN:",
        },
        "dist": {
            "bundle.js": "(()=>{})()",
        },
        "README.md": "# My Project",
        "empty.txt": None,
    }
    root = tmp_path / "proj_root"
    create_test_structure(root, structure)
    return root


@pytest.fixture
def log_sink():
    """A diagnostic sink that records (message, level) pairs instead of printing."""
    records: List[Tuple[str, str]] = []

    def _log(message: str, level: str = "info"):
        records.append((message, level))

    _log.records = records
    return _log
