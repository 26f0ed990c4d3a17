from __future__ import annotations

"""
Configuration Validation Service.

Ensures the runtime configuration dictionary conforms to the expected schema
before it reaches the resolver. Handles type coercion, normalization of
directory names and default value injection.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from installdirs.domain.config import get_default_config
from installdirs.domain.constants import OUTPUT_FORMATS
from installdirs.domain.schema import DirectoryKey

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on invalid input instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and a
                                          list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Field Processing
    merged["pointer_width"] = _as_optional_str(
        merged.get("pointer_width"), "pointer_width", warnings, strict
    )
    merged["use_environment"] = _as_bool(
        merged.get("use_environment"), defaults["use_environment"], "use_environment", warnings, strict
    )
    merged["log_level"] = _as_str(
        merged.get("log_level"), defaults["log_level"], "log_level", warnings, strict
    ).upper()

    # 3. Domain-Specific Normalization
    merged["output_format"] = _normalize_output_format(
        merged.get("output_format"), defaults["output_format"], warnings, strict
    )
    merged["overrides"] = _normalize_overrides(merged.get("overrides"), warnings, strict)
    merged["only"] = _normalize_only(merged.get("only"), warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_optional_str(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[str]:
    """Accept a string or integer; anything else becomes None."""
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, str):
        v = value.strip()
        return v if v else None

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Ignored.")
    return None


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_output_format(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    fmt = _as_str(value, fallback, "output_format", warnings, strict).lower()
    if fmt in OUTPUT_FORMATS:
        return fmt

    msg = f"Invalid output format '{value}': expected one of {', '.join(OUTPUT_FORMATS)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback


def _normalize_overrides(value: Any, warnings: List[str], strict: bool) -> Dict[str, str]:
    """Map directory names to their variable names, dropping unknown entries."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"Invalid field 'overrides': expected dict, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Ignored.")
        return {}

    out: Dict[str, str] = {}
    for name, path in value.items():
        try:
            key = DirectoryKey.from_name(str(name))
        except ValueError as e:
            if strict:
                raise
            warnings.append(f"{e} Override discarded.")
            continue

        if not isinstance(path, str):
            msg = f"Invalid override '{name}': expected str, received {type(path).__name__}."
            if strict:
                raise TypeError(msg)
            warnings.append(f"{msg} Override discarded.")
            continue

        out[key.env_var] = path
    return out


def _normalize_only(value: Any, warnings: List[str], strict: bool) -> List[str]:
    """Ensure 'only' is a list of known directory key names, supporting CSV."""
    if value is None:
        return []

    if isinstance(value, str):
        items = [x.strip() for x in value.split(",") if x.strip()]
    elif isinstance(value, list):
        items = value
    else:
        msg = f"Invalid field 'only': expected list[str], received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Ignored.")
        return []

    out: List[str] = []
    for item in items:
        try:
            key = DirectoryKey.from_name(str(item))
        except ValueError as e:
            if strict:
                raise
            warnings.append(f"{e} Entry discarded.")
            continue
        if key.value not in out:
            out.append(key.value)
    return out
