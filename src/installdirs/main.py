from __future__ import annotations

"""
Main Entry Point.

Makes the package importable when this file is executed directly and
routes execution to the CLI controller, reporting unexpected crashes on
stderr.
"""

import logging
import os
import sys
import traceback
from typing import Any

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)


def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """Log unhandled exceptions and print the trace before exiting."""
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    logging.getLogger("installdirs.supervisor").critical(f"FATAL EXCEPTION: {value}")

    print("CRITICAL ERROR (INSTALLDIRS)", file=sys.stderr)
    print(stack_trace, file=sys.stderr)
    sys.exit(1)


def main() -> int:
    sys.excepthook = global_exception_handler

    from installdirs.interface.cli.app import main as cli_main

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
