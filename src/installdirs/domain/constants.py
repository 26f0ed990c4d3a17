from __future__ import annotations

"""
Domain Constants.

Centralizes the literal defaults and variable names shared by the resolver,
the configuration layer and the command-line interface.
"""

from typing import Tuple

__version__ = "0.1.0"

# -----------------------------------------------------------------------------
# FIXED DEFAULTS
# -----------------------------------------------------------------------------
DEFAULT_PREFIX = "/usr/local"
DEFAULT_RUNSTATEDIR = "/run"

# Pointer widths at or above this value get a qualified library directory
# (e.g. 'lib64').
QUALIFIED_LIBDIR_MIN_WIDTH = 64

# -----------------------------------------------------------------------------
# POINTER WIDTH SOURCES
# -----------------------------------------------------------------------------
POINTER_WIDTH_ENV = "TARGET_POINTER_WIDTH"
CARGO_POINTER_WIDTH_ENV = "CARGO_CFG_TARGET_POINTER_WIDTH"
POINTER_WIDTH_ENV_VARS: Tuple[str, ...] = (POINTER_WIDTH_ENV, CARGO_POINTER_WIDTH_ENV)

# -----------------------------------------------------------------------------
# OUTPUT FORMATS
# -----------------------------------------------------------------------------
OUTPUT_ENV = "env"
OUTPUT_JSON = "json"
OUTPUT_SHELL = "shell"
OUTPUT_FORMATS: Tuple[str, ...] = (OUTPUT_ENV, OUTPUT_JSON, OUTPUT_SHELL)

DEFAULT_CONFIG_FILE = "installdirs.json"
