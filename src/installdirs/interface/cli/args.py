from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict, List, Optional

from installdirs.domain.constants import (
    DEFAULT_CONFIG_FILE,
    OUTPUT_JSON,
    OUTPUT_SHELL,
    POINTER_WIDTH_ENV,
    __version__,
)
from installdirs.domain.schema import SCHEMA

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the installdirs CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="installdirs",
        description=(
            "Resolve GNU installation directories from PREFIX, EXEC_PREFIX and "
            "per-directory overrides."
        ),
        epilog=_variables_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # --- Resolver Inputs ---
    p.add_argument(
        "-w", "--pointer-width",
        dest="pointer_width",
        default=None,
        help=f"Target pointer width in bits (default: ${POINTER_WIDTH_ENV}).",
    )
    p.add_argument(
        "-s", "--set",
        dest="assignments",
        action="append",
        default=[],
        metavar="NAME=PATH",
        help="Override a directory; takes precedence over the environment. Repeatable.",
    )
    p.add_argument(
        "--ignore-env",
        action="store_true",
        help="Do not read overrides from the process environment.",
    )
    p.add_argument(
        "-c", "--config",
        dest="config_path",
        default=None,
        help=f"JSON configuration file (default: ./{DEFAULT_CONFIG_FILE} if present).",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore any configuration file.",
    )

    # --- Output Selection ---
    p.add_argument(
        "--only",
        dest="only",
        default=None,
        help="Comma-separated directories to print (e.g. bindir,libdir).",
    )
    fmt = p.add_mutually_exclusive_group()
    fmt.add_argument(
        "--json",
        dest="output_format",
        action="store_const",
        const=OUTPUT_JSON,
        help="Print a JSON object.",
    )
    fmt.add_argument(
        "--shell",
        dest="output_format",
        action="store_const",
        const=OUTPUT_SHELL,
        help="Print shell 'export' statements.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write log records to this file.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Raises:
        ValueError: If a '--set' assignment is not of the form NAME=PATH.
    """
    overrides: Dict[str, Any] = {}

    overrides["pointer_width"] = args.pointer_width
    overrides["output_format"] = args.output_format
    overrides["only"] = _split_csv(args.only)

    if args.ignore_env:
        overrides["use_environment"] = False
    if args.debug:
        overrides["log_level"] = "DEBUG"

    assignments = parse_assignments(args.assignments)
    if assignments:
        overrides["overrides"] = assignments

    return overrides


def parse_assignments(values: Optional[List[str]]) -> Dict[str, str]:
    """Parse 'NAME=PATH' strings; later assignments win."""
    out: Dict[str, str] = {}
    for item in values or []:
        name, sep, path = item.partition("=")
        if not sep or not name.strip():
            raise ValueError(f"Invalid assignment '{item}': expected NAME=PATH.")
        out[name.strip()] = path
    return out

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _variables_epilog() -> str:
    """List the recognised variables with the purpose of each directory."""
    width = max(len(spec.env_var) for spec in SCHEMA)
    lines = ["recognised variables:"]
    lines += [f"  {spec.env_var.ljust(width)}  {spec.description}" for spec in SCHEMA]
    return "\n".join(lines)


def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of sanitized strings."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
