from __future__ import annotations

"""
Logging Handler Tagging.

Lets the package tell its own handlers apart from ones installed by a
host application, so reconfiguration and shutdown never touch foreign
handlers.
"""

import logging

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_webui_jsmin_handler"


def _tag_handler(handler: logging.Handler) -> None:
    """Mark a handler as managed by this package."""
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """Return True if the handler carries our internal tag."""
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))
