from __future__ import annotations

"""
CLI Argument Definition.

The command line is fixed: an input path and an output path,
no options. Parse failures are raised as ArgumentCountError instead of
argparse's default print-and-exit, so the application controller decides
how to report them.
"""

import argparse
import sys
from typing import NoReturn, Optional, Sequence

from webui_jsmin.domain.errors import ArgumentCountError

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

class _StrictArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting on bad input."""

    def error(self, message: str) -> NoReturn:
        raise ArgumentCountError(message)


def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the webui-jsmin CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = _StrictArgumentParser(
        prog="jsmin",
        description="Minify a JavaScript file.",
        add_help=False,
    )
    p.add_argument("input_path", help="Script to minify.")
    p.add_argument("output_path", help="Destination of the minified script.")
    return p


def parse_command_line(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse the command line into input_path and output_path.

    Every argument is taken as a path, so a file named "-in.js" is
    accepted and option-looking words only count toward the total.

    Args:
        argv: Arguments without the program name. Defaults to sys.argv[1:].

    Returns:
        argparse.Namespace: Parsed paths.

    Raises:
        ArgumentCountError: If there are not exactly two arguments.
    """
    if argv is None:
        argv = sys.argv[1:]
    return build_parser().parse_args(["--", *argv])
