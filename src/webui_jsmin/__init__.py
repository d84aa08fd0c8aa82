from __future__ import annotations

"""
webui-jsmin: streaming JavaScript minifier.

Removes comments and insignificant whitespace from JavaScript source while
copying string, template and regex literals verbatim.
"""

from webui_jsmin.core.processing.minifier import (
    Minifier,
    minify_bytes,
    minify_file,
    minify_stream,
    minify_text,
)
from webui_jsmin.domain.errors import (
    ArgumentCountError,
    InputOpenError,
    JsminError,
    JsminIOError,
    LexicalError,
    OutputCloseError,
    OutputOpenError,
    UnterminatedCharacterClass,
    UnterminatedComment,
    UnterminatedRegexLiteral,
    UnterminatedStringLiteral,
)
from webui_jsmin.domain.models import MinifyResult

__version__ = "1.0.0"

__all__ = [
    "Minifier",
    "MinifyResult",
    "minify_bytes",
    "minify_file",
    "minify_stream",
    "minify_text",
    "JsminError",
    "JsminIOError",
    "LexicalError",
    "ArgumentCountError",
    "InputOpenError",
    "OutputOpenError",
    "OutputCloseError",
    "UnterminatedComment",
    "UnterminatedStringLiteral",
    "UnterminatedCharacterClass",
    "UnterminatedRegexLiteral",
]
