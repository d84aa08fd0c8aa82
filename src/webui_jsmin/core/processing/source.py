from __future__ import annotations

"""
Byte Stream Endpoints.

CharacterSource turns a binary input stream into effective characters:
carriage returns become newlines, other control bytes become spaces, and
the end of input is reported as the EOF sentinel. A single character of
pushback backs the peek operation. ByteSink is the matching append-only
writer for the output side.

Both endpoints buffer in fixed-size chunks, so memory use is independent
of the file size.
"""

from typing import BinaryIO, Optional

from webui_jsmin.domain.constants import CARRIAGE_RETURN, EOF, NEWLINE, SPACE

DEFAULT_CHUNK_SIZE: int = 64 * 1024


class CharacterSource:
    """
    Forward-only reader of effective characters.

    Attributes:
        position: Raw input bytes consumed so far.
    """

    def __init__(self, stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self._stream = stream
        self._chunk_size = chunk_size
        self._chunk = b""
        self._index = 0
        self._exhausted = False
        self._lookahead: Optional[int] = None
        self.position = 0

    def fetch(self) -> int:
        """Consume and return the next effective character."""
        c = self._lookahead
        self._lookahead = None
        if c is None:
            c = self._read_byte()
        if c >= SPACE or c == NEWLINE or c == EOF:
            return c
        if c == CARRIAGE_RETURN:
            return NEWLINE
        return SPACE

    def peek(self) -> int:
        """Return the next effective character without consuming it."""
        if self._lookahead is None:
            self._lookahead = self.fetch()
        return self._lookahead

    def _read_byte(self) -> int:
        if self._index >= len(self._chunk):
            if self._exhausted:
                return EOF
            self._chunk = self._stream.read(self._chunk_size)
            self._index = 0
            if not self._chunk:
                self._exhausted = True
                return EOF
        c = self._chunk[self._index]
        self._index += 1
        self.position += 1
        return c


class ByteSink:
    """
    Append-only buffered writer of output bytes.

    Attributes:
        written: Bytes accepted so far, flushed or not.
    """

    def __init__(self, stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self._stream = stream
        self._chunk_size = chunk_size
        self._buffer = bytearray()
        self.written = 0

    def put(self, c: int) -> None:
        self._buffer.append(c)
        self.written += 1
        if len(self._buffer) >= self._chunk_size:
            self.flush()

    def flush(self) -> None:
        if self._buffer:
            self._stream.write(bytes(self._buffer))
            self._buffer.clear()
