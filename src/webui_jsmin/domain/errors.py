from __future__ import annotations

"""
Minification Error Hierarchy.

Every failure the minifier can report is a subclass of JsminError. Errors
are fatal for the current run: the engine raises at the first fault and
never attempts to resynchronize. Interface layers translate the exception
into a diagnostic message and the carried process exit code.
"""

from typing import Optional


class JsminError(Exception):
    """Base class for all minifier failures."""

    message: str = "minification failed"
    exit_code: int = 1

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        text = self.message if not detail else f"{self.message}: {detail}"
        super().__init__(text)


class ArgumentCountError(JsminError):
    """Raised when the command line does not carry exactly two paths."""

    message = "usage: jsmin <input.js> <output.js>"
    exit_code = 2


# -----------------------------------------------------------------------------
# I/O FAULTS
# -----------------------------------------------------------------------------

class JsminIOError(JsminError):
    """Base class for failures opening or closing the files of a run."""


class InputOpenError(JsminIOError):
    message = "unable to open input"


class OutputOpenError(JsminIOError):
    message = "unable to open output"


class OutputCloseError(JsminIOError):
    message = "failed writing output"


# -----------------------------------------------------------------------------
# LEXICAL FAULTS
# -----------------------------------------------------------------------------

class LexicalError(JsminError):
    """
    Base class for input that ends inside a comment or literal.

    Attributes:
        position: Number of input bytes consumed when the fault was detected.
    """

    def __init__(self, position: int = 0) -> None:
        self.position = position
        super().__init__(None)


class UnterminatedComment(LexicalError):
    message = "unterminated comment"


class UnterminatedStringLiteral(LexicalError):
    message = "unterminated string literal"


class UnterminatedCharacterClass(LexicalError):
    message = "unterminated character class in regex"


class UnterminatedRegexLiteral(LexicalError):
    message = "unterminated regex literal"
