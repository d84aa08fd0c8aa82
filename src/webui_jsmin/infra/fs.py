from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Opens and closes the two files of a minification run, translating
operating system failures into the domain error hierarchy so that
interface layers only ever deal with JsminError.
"""

import logging
from typing import BinaryIO

from webui_jsmin.domain.errors import InputOpenError, OutputCloseError, OutputOpenError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# FILE ACCESS API
# -----------------------------------------------------------------------------

def open_input(path: str) -> BinaryIO:
    """
    Open a script for reading in binary mode.

    Args:
        path: Input file path.

    Returns:
        BinaryIO: The open stream.

    Raises:
        InputOpenError: If the file cannot be opened.
    """
    try:
        return open(path, "rb")
    except OSError as e:
        logger.debug(f"Cannot open input '{path}': {e}")
        raise InputOpenError(path) from e


def open_output(path: str) -> BinaryIO:
    """
    Open (and truncate) a destination file for writing in binary mode.

    Args:
        path: Output file path.

    Returns:
        BinaryIO: The open stream.

    Raises:
        OutputOpenError: If the file cannot be created or truncated.
    """
    try:
        return open(path, "wb")
    except OSError as e:
        logger.debug(f"Cannot open output '{path}': {e}")
        raise OutputOpenError(path) from e


def close_output(stream: BinaryIO, path: str) -> None:
    """
    Flush and close an output stream.

    A failed close means bytes may not have reached the disk, so it is
    reported as an error even when every byte was produced.

    Raises:
        OutputCloseError: If flushing or closing fails.
    """
    try:
        stream.close()
    except OSError as e:
        logger.debug(f"Cannot close output '{path}': {e}")
        raise OutputCloseError(path) from e
