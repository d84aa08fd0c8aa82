from __future__ import annotations

"""
Main Entry Point.

Routes process execution to the CLI controller and converts its return
value into the process exit status. Can be run directly as a script from
a source checkout.
"""

import os
import sys

# -----------------------------------------------------------------------------
# ENVIRONMENT INITIALIZATION
# -----------------------------------------------------------------------------

# Make the package importable when this file is executed as a script
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from webui_jsmin.interface.cli.app import main as cli_main  # noqa: E402


def main() -> None:
    """Run the CLI with the process arguments and exit with its status."""
    sys.exit(cli_main(sys.argv[1:]))


if __name__ == "__main__":
    main()
