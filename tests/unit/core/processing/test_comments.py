from __future__ import annotations

"""
Unit tests for Comment Elision.

Ensures line and block comments collapse into their replacement
character and that a lone slash is handed back untouched.
"""

import io

import pytest

from webui_jsmin.core.processing.comments import CommentSkipper
from webui_jsmin.core.processing.source import CharacterSource
from webui_jsmin.domain.constants import EOF
from webui_jsmin.domain.errors import UnterminatedComment


def _skipper(data: bytes) -> CommentSkipper:
    return CommentSkipper(CharacterSource(io.BytesIO(data)))


def test_line_comment_becomes_its_newline() -> None:
    skipper = _skipper(b"// note */ here\nx")
    assert skipper.next() == ord("\n")
    assert skipper.next() == ord("x")


def test_line_comment_at_end_of_input_becomes_eof() -> None:
    skipper = _skipper(b"// trailing")
    assert skipper.next() == EOF


def test_line_comment_ended_by_carriage_return() -> None:
    skipper = _skipper(b"// dos\r\nx")
    assert skipper.next() == ord("\n")
    assert skipper.next() == ord("\n")
    assert skipper.next() == ord("x")


@pytest.mark.parametrize("data", [
    b"/* a */x",
    b"/**/x",
    b"/* a **/x",
    b"/*\n * multi\n * line\n */x",
    b"/* // nested line marker */x",
])
def test_block_comment_becomes_one_space(data: bytes) -> None:
    skipper = _skipper(data)
    assert skipper.next() == ord(" ")
    assert skipper.next() == ord("x")


def test_unterminated_block_comment_raises() -> None:
    skipper = _skipper(b"/* never closed *")
    with pytest.raises(UnterminatedComment) as exc_info:
        skipper.next()
    assert exc_info.value.position == 17


def test_lone_slash_is_returned() -> None:
    skipper = _skipper(b"/x")
    assert skipper.next() == ord("/")
    assert skipper.next() == ord("x")
