from __future__ import annotations

"""
JavaScript Minification Engine.

Single-pass streaming automaton in the JSMin tradition. Two effective
characters are held at a time: A, the last significant character decided
on, and B, the candidate that follows it. For each pair a decision from
the separator table either writes A, drops A, or drops B. Comments are
collapsed on every fetch of B; string, template and regex literals are
copied verbatim as soon as they are reached.

No syntax analysis is performed beyond what is needed to find the
boundaries of comments and literals.
"""

import contextlib
import io
import logging
from enum import Enum
from typing import BinaryIO

from webui_jsmin.core.processing.comments import CommentSkipper
from webui_jsmin.core.processing.literals import LiteralSkipper
from webui_jsmin.core.processing.source import ByteSink, CharacterSource
from webui_jsmin.domain.constants import (
    EOF,
    NEWLINE,
    NEWLINE_KEEP_AFTER,
    NEWLINE_KEEP_BEFORE,
    QUOTES,
    REGEX_PREFIXES,
    SIGN_OPERATORS,
    SLASH,
    SPACE,
    is_alphanum,
)
from webui_jsmin.domain.errors import JsminError, OutputCloseError
from webui_jsmin.domain.models import MinifyResult
from webui_jsmin.infra.fs import close_output, open_input, open_output

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SEPARATOR DECISIONS
# -----------------------------------------------------------------------------

class Decision(Enum):
    """Outcome of one step of the automaton."""
    KEEP = "keep"    # write A, then A := B and refetch B
    ELIDE = "elide"  # drop A, then A := B and refetch B
    DEFER = "defer"  # keep A pending, drop B and refetch B


def decide(a: int, b: int) -> Decision:
    """
    Select the action for the pair (A, B).

    Each branch corresponds to one row of the separator table:

        A        B                          decision
        space    alphanumeric               KEEP
        space    other                      ELIDE
        newline  { [ ( + - ! ~              KEEP
        newline  space                      DEFER
        newline  alphanumeric               KEEP
        newline  other                      ELIDE
        other    space                      KEEP if A alphanumeric else DEFER
        other    newline                    KEEP if A in { } ] ) + - " ' ` or
                                            alphanumeric else DEFER
        other    other                      KEEP
    """
    if a == SPACE:
        return Decision.KEEP if is_alphanum(b) else Decision.ELIDE

    if a == NEWLINE:
        if b in NEWLINE_KEEP_BEFORE:
            return Decision.KEEP
        if b == SPACE:
            return Decision.DEFER
        return Decision.KEEP if is_alphanum(b) else Decision.ELIDE

    if b == SPACE:
        return Decision.KEEP if is_alphanum(a) else Decision.DEFER

    if b == NEWLINE:
        if a in NEWLINE_KEEP_AFTER or is_alphanum(a):
            return Decision.KEEP
        return Decision.DEFER

    return Decision.KEEP

# -----------------------------------------------------------------------------
# AUTOMATON
# -----------------------------------------------------------------------------

class Minifier:
    """
    Owns the complete state of one minification run.

    Instances are single-use: create one per input stream and call run().
    """

    def __init__(self, source: BinaryIO, sink: BinaryIO) -> None:
        self.source = CharacterSource(source)
        self.sink = ByteSink(sink)
        self.comments = CommentSkipper(self.source)
        self.literals = LiteralSkipper(self.source, self.sink)

        self.a = NEWLINE
        self.b = EOF

        # The two most recent characters handed out by _next().
        self._last = EOF
        self._before_last = EOF

        # Last non-separator byte written by _emit().
        self._last_emitted = EOF

    def run(self) -> MinifyResult:
        """
        Minify the whole input into the sink.

        Returns:
            MinifyResult: Byte counts of the run.

        Raises:
            LexicalError: If the input ends inside a comment or literal.
        """
        try:
            # Behave as if the input were preceded by a line start.
            self.a = NEWLINE
            self._step(Decision.DEFER)

            while self.a != EOF:
                self._step(decide(self.a, self.b))
        finally:
            # Output produced before a fault is kept, never retracted.
            self.sink.flush()

        return MinifyResult(bytes_in=self.source.position, bytes_out=self.sink.written)

    def _step(self, decision: Decision) -> None:
        if decision is Decision.KEEP:
            self._emit(self.a)
            if (
                self.a in SIGN_OPERATORS
                and self.b in SIGN_OPERATORS
                and self._before_last in (SPACE, NEWLINE)
            ):
                # "a+ +b" must not become "a++b".
                self.sink.put(self._before_last)

        if decision is not Decision.DEFER:
            self.a = self.b
            if self.a in QUOTES:
                self.a = self.literals.copy_quoted(self.a)

        self.b = self._next()
        if self.b == SLASH and self._opens_regex():
            self._enter_regex()

    def _opens_regex(self) -> bool:
        if self.a in REGEX_PREFIXES:
            return True
        # A kept newline stands between the operator and the slash, as in "{\n/re/".
        return self.a == NEWLINE and self._last_emitted in REGEX_PREFIXES

    def _enter_regex(self) -> None:
        self._emit(self.a)
        if self.a == SLASH:
            # Division followed by a regex; keep the two slashes apart.
            self.sink.put(SPACE)
        self.sink.put(self.b)
        self.a = self.literals.copy_regex()
        self.b = self._next()

    def _emit(self, c: int) -> None:
        if self.sink.written == 0 and c in (SPACE, NEWLINE):
            return
        self.sink.put(c)
        if c not in (SPACE, NEWLINE):
            self._last_emitted = c

    def _next(self) -> int:
        c = self.comments.next()
        self._before_last = self._last
        self._last = c
        return c

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def minify_stream(source: BinaryIO, sink: BinaryIO) -> MinifyResult:
    """
    Minify a binary input stream into a binary output stream.

    Output written before a fault is not retracted.

    Args:
        source: Readable binary stream positioned at the start of the script.
        sink: Writable binary stream receiving the minified bytes.

    Returns:
        MinifyResult: Byte counts of the run.

    Raises:
        LexicalError: If the input ends inside a comment or literal.
    """
    result = Minifier(source, sink).run()
    logger.debug(
        f"Minified stream: {result.bytes_in} -> {result.bytes_out} bytes "
        f"({result.reduction:.1f}% reduction)"
    )
    return result


def minify_bytes(data: bytes) -> bytes:
    """
    Minify a complete script held in memory.

    Args:
        data: Raw script bytes.

    Returns:
        bytes: Minified script.
    """
    if not data:
        return b""
    out = io.BytesIO()
    minify_stream(io.BytesIO(data), out)
    return out.getvalue()


def minify_text(text: str, encoding: str = "utf-8") -> str:
    """
    Minify a script held as text.

    The text is encoded before minification, so non-ASCII characters are
    treated as identifier-class bytes.

    Args:
        text: Script source.
        encoding: Codec used to encode the input and decode the result.

    Returns:
        str: Minified script.
    """
    if not text:
        return ""
    return minify_bytes(text.encode(encoding)).decode(encoding)


def minify_file(input_path: str, output_path: str) -> MinifyResult:
    """
    Minify the file at input_path into output_path.

    The output file is truncated first and is left in place, possibly
    partial, when the run fails.

    Args:
        input_path: Script to read.
        output_path: Destination of the minified script.

    Returns:
        MinifyResult: Byte counts of the run.

    Raises:
        InputOpenError: If the input cannot be opened.
        OutputOpenError: If the output cannot be opened.
        OutputCloseError: If writing or closing the output fails.
        LexicalError: If the input ends inside a comment or literal.
    """
    with open_input(input_path) as infile:
        outfile = open_output(output_path)
        try:
            result = Minifier(infile, outfile).run()
        except JsminError:
            with contextlib.suppress(OSError):
                outfile.close()
            raise
        except OSError as e:
            with contextlib.suppress(OSError):
                outfile.close()
            raise OutputCloseError(output_path) from e
        close_output(outfile, output_path)

    logger.debug(
        f"Minified {input_path}: {result.bytes_in} -> {result.bytes_out} bytes "
        f"({result.reduction:.1f}% reduction)"
    )
    return result
