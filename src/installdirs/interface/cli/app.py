from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of configuration
sources (defaults, JSON file, command-line overrides), directory resolution
and rendering of the result on stdout.
"""

import json
import os
import shlex
import sys
from typing import Any, Dict, List, Optional

from installdirs.core.lookup import chained_lookup, environ_lookup, mapping_lookup
from installdirs.core.resolver import resolve_directories
from installdirs.core.validator import validate_config
from installdirs.domain.config import get_default_config, load_config
from installdirs.domain.constants import OUTPUT_JSON, OUTPUT_SHELL, POINTER_WIDTH_ENV_VARS
from installdirs.domain.models import ConfigurationError, ResolvedDirectory
from installdirs.infra.logging import LoggingConfig, configure_logging, get_logger
from installdirs.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 2 configuration error, 1 failure).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr, stdout is reserved for results)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, log_file=args.log_file), force=True)

    try:
        overrides = cli_args.args_to_overrides(args)
    except ValueError as e:
        return _config_error(str(e))

    # 3. Resolve base configuration (defaults vs JSON file)
    if args.config_path and not os.path.exists(args.config_path):
        return _config_error(f"Configuration file not found: {args.config_path}")

    if args.use_defaults:
        base_conf = get_default_config()
    else:
        base_conf = load_config(args.config_path)

    # 4. Merge and validate
    raw_conf = _merge_config(base_conf, overrides)
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # A selection whose every entry was discarded must not widen to all directories
    if raw_conf.get("only") and not clean_conf["only"]:
        return _config_error(f"No known directory in selection: {raw_conf['only']}")

    if not args.debug and clean_conf["log_level"] != log_level:
        configure_logging(
            LoggingConfig(level=clean_conf["log_level"], log_file=args.log_file), force=True
        )

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 5. Resolution phase
    pointer_width = clean_conf["pointer_width"] or _pointer_width_from_environ()
    lookup = mapping_lookup(clean_conf["overrides"])
    if clean_conf["use_environment"]:
        lookup = chained_lookup(lookup, environ_lookup())

    try:
        resolved = resolve_directories(lookup, pointer_width)
    except ConfigurationError as e:
        return _config_error(str(e))
    except Exception as e:
        logger.critical(f"Directory resolution failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # 6. Output rendering phase
    selected = _select(resolved, clean_conf["only"])
    print(render(selected, clean_conf["output_format"]))
    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge command-line values into the base configuration.

    Directory overrides are merged key by key so a '--set' assignment only
    replaces the entry it names.
    """
    out = dict(base)
    for k in ("pointer_width", "use_environment", "output_format", "only", "log_level"):
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]

    base_dirs = out.get("overrides")
    merged_dirs: Dict[str, Any] = dict(base_dirs) if isinstance(base_dirs, dict) else {}
    merged_dirs.update(overrides.get("overrides") or {})
    out["overrides"] = merged_dirs
    return out


def _pointer_width_from_environ() -> Optional[str]:
    for name in POINTER_WIDTH_ENV_VARS:
        value = os.environ.get(name)
        if value:
            logger.debug(f"Pointer width taken from ${name}: {value}")
            return value
    return None


def _config_error(msg: str) -> int:
    logger.error(msg)
    print(f"ERROR: {msg}", file=sys.stderr)
    return EXIT_CONFIG_ERROR

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _select(resolved: List[ResolvedDirectory], only: List[str]) -> List[ResolvedDirectory]:
    if not only:
        return resolved
    wanted = set(only)
    return [r for r in resolved if r.key.value in wanted]


def render(resolved: List[ResolvedDirectory], output_format: str) -> str:
    """
    Format resolved directories for stdout.

    'env' prints NAME=value lines, 'shell' prints quoted export statements and
    'json' prints an object keyed by variable name. Schema order is kept.
    """
    if output_format == OUTPUT_JSON:
        return json.dumps({r.env_var: r.value for r in resolved}, ensure_ascii=False, indent=2)
    if output_format == OUTPUT_SHELL:
        return "\n".join(f"export {r.env_var}={shlex.quote(r.value)}" for r in resolved)
    return "\n".join(r.as_assignment() for r in resolved)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
