from __future__ import annotations

"""
Comment Elision.

Wraps a CharacterSource so that a whole comment reads as a single
effective character: a line comment becomes the newline (or EOF) that
ends it, a block comment becomes one space.
"""

from webui_jsmin.core.processing.source import CharacterSource
from webui_jsmin.domain.constants import EOF, NEWLINE, SLASH, SPACE, STAR
from webui_jsmin.domain.errors import UnterminatedComment


class CommentSkipper:
    """Reads effective characters with comments collapsed."""

    def __init__(self, source: CharacterSource) -> None:
        self.source = source

    def next(self) -> int:
        """
        Return the next effective character, consuming any comment it opens.

        Raises:
            UnterminatedComment: If the input ends inside a block comment.
        """
        c = self.source.fetch()
        if c != SLASH:
            return c

        p = self.source.peek()
        if p == SLASH:
            return self._skip_line_comment()
        if p == STAR:
            self.source.fetch()
            return self._skip_block_comment()
        return c

    def _skip_line_comment(self) -> int:
        while True:
            c = self.source.fetch()
            if c <= NEWLINE:
                return c

    def _skip_block_comment(self) -> int:
        while True:
            c = self.source.fetch()
            if c == STAR:
                if self.source.peek() == SLASH:
                    self.source.fetch()
                    return SPACE
            elif c == EOF:
                raise UnterminatedComment(self.source.position)
