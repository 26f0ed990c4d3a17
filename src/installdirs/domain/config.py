from __future__ import annotations

"""
Configuration Domain Management.

Handles the runtime configuration of the resolver front-end: defaults, JSON
persistence and migration of flat override files.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from installdirs.domain.constants import DEFAULT_CONFIG_FILE, OUTPUT_ENV
from installdirs.domain.schema import env_var_names

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# DEFAULTS
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Return the default runtime configuration dictionary.
    Used by the CLI and the validator.
    """
    return {
        # Resolver inputs
        "pointer_width": None,
        "use_environment": True,
        "overrides": {},

        # Output
        "output_format": OUTPUT_ENV,
        "only": [],

        # Logging
        "log_level": "WARNING",
    }


# -----------------------------------------------------------------------------
# I/O OPERATIONS
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the runtime configuration from a JSON file.

    Missing or unreadable files fall back to the defaults. A flat file whose
    top level is a map of directory variables (e.g. {"PREFIX": "/opt"}) is
    migrated into the 'overrides' section.

    Args:
        path: JSON file to read. Defaults to 'installdirs.json' in the CWD.
    """
    config_file = path or os.path.join(os.getcwd(), DEFAULT_CONFIG_FILE)
    defaults = get_default_config()

    if not os.path.exists(config_file):
        logger.debug(f"No config file found at {config_file}. Using defaults.")
        return defaults

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config from {config_file}: {e}. Returning defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning("Invalid config format. Resetting to defaults.")
        return defaults

    known_vars = set(env_var_names())
    flat_vars = {k: v for k, v in data.items() if k in known_vars}
    if flat_vars:
        logger.info("Detected flat override file. Migrating to 'overrides' section...")
        data = {k: v for k, v in data.items() if k not in known_vars}
        existing = data.get("overrides")
        if existing is not None and not isinstance(existing, dict):
            logger.warning("Ignoring invalid 'overrides' section: expected an object.")
            existing = None
        overrides = dict(existing or {})
        overrides.update(flat_vars)
        data["overrides"] = overrides

    merged = dict(defaults)
    merged.update(data)
    return merged


def save_config(config: Dict[str, Any], path: str) -> None:
    """Save the runtime configuration to a JSON file."""
    try:
        parent = os.path.dirname(os.path.abspath(path))
        os.makedirs(parent, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config, f, ensure_ascii=False, indent=4)
        logger.debug(f"Config saved to {path}")
    except OSError as e:
        logger.error(f"Failed to save config: {e}")
