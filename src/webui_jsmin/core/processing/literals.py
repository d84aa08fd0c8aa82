from __future__ import annotations

"""
Opaque Literal Copying.

String, template and regular expression literals are copied to the
output byte for byte. Inside them whitespace and comment syntax are
significant, so the skipper reads the raw CharacterSource, bypassing
comment elision. A backslash always protects the character after it.

Both copy operations stop at the closing delimiter without writing it
and return it, so the automaton can treat it as its next significant
character.
"""

from webui_jsmin.core.processing.source import ByteSink, CharacterSource
from webui_jsmin.domain.constants import (
    BACKSLASH,
    CLOSE_BRACKET,
    EOF,
    OPEN_BRACKET,
    SLASH,
)
from webui_jsmin.domain.errors import (
    UnterminatedCharacterClass,
    UnterminatedRegexLiteral,
    UnterminatedStringLiteral,
)


class LiteralSkipper:
    """Copies quoted and regex literals from a source to a sink."""

    def __init__(self, source: CharacterSource, sink: ByteSink) -> None:
        self.source = source
        self.sink = sink

    def copy_quoted(self, quote: int) -> int:
        """
        Copy a quoted literal starting at its opening delimiter.

        Args:
            quote: The opening delimiter (', " or `), already consumed.

        Returns:
            int: The closing delimiter, consumed but not written.

        Raises:
            UnterminatedStringLiteral: If the input ends before the literal closes.
        """
        c = quote
        while True:
            self.sink.put(c)
            c = self.source.fetch()
            if c == quote:
                return c
            if c == BACKSLASH:
                self.sink.put(c)
                c = self.source.fetch()
            if c == EOF:
                raise UnterminatedStringLiteral(self.source.position)

    def copy_regex(self) -> int:
        """
        Copy the body of a regex literal whose opening '/' is already written.

        A '/' inside a [...] character class does not close the literal.

        Returns:
            int: The closing '/', consumed but not written.

        Raises:
            UnterminatedCharacterClass: If the input ends inside [...].
            UnterminatedRegexLiteral: If the input ends anywhere else in the body.
        """
        while True:
            c = self.source.fetch()
            if c == OPEN_BRACKET:
                c = self._copy_character_class(c)
            elif c == SLASH:
                return c
            elif c == BACKSLASH:
                self.sink.put(c)
                c = self.source.fetch()
            if c == EOF:
                raise UnterminatedRegexLiteral(self.source.position)
            self.sink.put(c)

    def _copy_character_class(self, c: int) -> int:
        # Writes everything up to the closing ']' and returns it unwritten.
        while True:
            self.sink.put(c)
            c = self.source.fetch()
            if c == CLOSE_BRACKET:
                return c
            if c == BACKSLASH:
                self.sink.put(c)
                c = self.source.fetch()
            if c == EOF:
                raise UnterminatedCharacterClass(self.source.position)
