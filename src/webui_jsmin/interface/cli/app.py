from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, argument parsing,
execution of one file-to-file minification, and translation of failures
into diagnostics on stderr and process exit codes. Nothing is written to
stdout.
"""

import sys
from typing import List, Optional

from webui_jsmin.core.processing.minifier import minify_file
from webui_jsmin.domain.errors import ArgumentCountError, JsminError
from webui_jsmin.infra.logging import LoggingConfig, configure_logging, get_logger
from webui_jsmin.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 2 bad usage, 1 any other failure).
    """
    configure_logging(LoggingConfig())

    try:
        args = cli_args.parse_command_line(argv)
        logger.debug(f"Minifying {args.input_path} -> {args.output_path}")
        result = minify_file(args.input_path, args.output_path)
    except ArgumentCountError as e:
        logger.debug(f"Rejected command line: {e.detail}")
        print(e.message, file=sys.stderr)
        return e.exit_code
    except JsminError as e:
        logger.debug(f"Run aborted by {type(e).__name__}")
        print(f"jsmin: {e}", file=sys.stderr)
        return e.exit_code

    logger.debug(f"Done: {result.bytes_out} bytes written ({result.reduction:.1f}% reduction)")
    return 0

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
