from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for writing scripts to disk and minifying in memory.
"""

import os
import sys
from pathlib import Path
from typing import Callable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def write_script(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """
    Return a helper that writes raw script bytes under tmp_path.

    Returns:
        Callable[[str, bytes], Path]: Factory taking (file name, content).
    """
    def _write(name: str, content: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _write


@pytest.fixture
def sample_script() -> bytes:
    """A small script exercising comments, literals, regexes and newlines."""
    return (
        b"// Runtime helpers\n"
        b"/* Block\n   comment */\n"
        b"function greet(name) {\n"
        b"  var msg = 'Hello,  ' + name;   // trailing\n"
        b"  var tpl = `  ${msg}  // not a comment`;\n"
        b"  var re = /[/\"]+\\s*$/g;\n"
        b"  return msg.replace(re, \"\") + tpl;\n"
        b"}\n"
        b"\n"
        b"var total = a + +b - -c;\n"
    )
