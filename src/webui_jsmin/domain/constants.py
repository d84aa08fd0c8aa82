from __future__ import annotations

"""
Domain Constants and Character Classes.

Centralizes the byte-level vocabulary shared by the character source,
the skippers, and the decision automaton. All values are plain integers
(byte ordinals) so that the streaming engine never allocates per character.
"""

from typing import Final, FrozenSet

# -----------------------------------------------------------------------------
# SENTINELS
# -----------------------------------------------------------------------------

# End of input. Never a valid byte value.
EOF: Final[int] = -1

SPACE: Final[int] = ord(" ")
NEWLINE: Final[int] = ord("\n")
CARRIAGE_RETURN: Final[int] = ord("\r")
SLASH: Final[int] = ord("/")
STAR: Final[int] = ord("*")
BACKSLASH: Final[int] = ord("\\")
OPEN_BRACKET: Final[int] = ord("[")
CLOSE_BRACKET: Final[int] = ord("]")

# Highest printable ASCII byte; anything above is identifier-class.
MAX_PRINTABLE: Final[int] = 126


def _ords(chars: str) -> FrozenSet[int]:
    return frozenset(ord(c) for c in chars)


# -----------------------------------------------------------------------------
# CHARACTER CLASSES
# -----------------------------------------------------------------------------

QUOTES: Final[FrozenSet[int]] = _ords("'\"`")

# A '/' preceded by one of these opens a regex literal instead of dividing.
REGEX_PREFIXES: Final[FrozenSet[int]] = _ords("(,=:[!&|?+-~*/{};")

# After a newline, these tokens may continue the previous statement.
NEWLINE_KEEP_BEFORE: Final[FrozenSet[int]] = _ords("{[(+-!~")

# Before a newline, these tokens may end a statement.
NEWLINE_KEEP_AFTER: Final[FrozenSet[int]] = _ords("{}])+-\"'`")

# Adjacent operators that fuse into a different token when their separator is dropped.
SIGN_OPERATORS: Final[FrozenSet[int]] = _ords("+-")

_IDENTIFIER_PUNCTUATION: Final[FrozenSet[int]] = _ords("_$\\")


def is_alphanum(c: int) -> bool:
    """
    Check whether a character belongs to the identifier-like class.

    Letters, digits, '_', '$', backslash and every byte above the printable
    ASCII range qualify. EOF never does.
    """
    return (
        ord("a") <= c <= ord("z")
        or ord("0") <= c <= ord("9")
        or ord("A") <= c <= ord("Z")
        or c in _IDENTIFIER_PUNCTUATION
        or c > MAX_PRINTABLE
    )
