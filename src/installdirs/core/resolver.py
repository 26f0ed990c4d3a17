from __future__ import annotations

"""
Installation Directory Resolver.

Computes the final value of every installation directory declared in the
schema. For each directory an explicit override obtained from the environment
lookup always wins; otherwise the default is either the fixed path of the
entry or the already-resolved value of its parent joined with the entry
suffix. Derivation never reads a parent's raw default, so overriding PREFIX
propagates to everything below it.

The resolver is a pure function of its inputs: it performs one lookup per
directory, in schema order, and keeps no state between calls.
"""

import logging
import re
from typing import Callable, Dict, List, Optional

from installdirs.domain.constants import QUALIFIED_LIBDIR_MIN_WIDTH
from installdirs.domain.models import ConfigurationError, ResolvedDirectory, to_mapping
from installdirs.domain.schema import SCHEMA, DirectoryKey, DirectorySpec

logger = logging.getLogger(__name__)

_POINTER_WIDTH_RE = re.compile(r"[+-]?[0-9]+")

EnvLookup = Callable[[str], Optional[str]]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve(env_lookup: EnvLookup, pointer_width: Optional[str]) -> Dict[DirectoryKey, str]:
    """
    Resolve every installation directory.

    Args:
        env_lookup: Callable returning the override for a variable name, or None.
        pointer_width: Target CPU pointer width in bits (e.g. '64').

    Returns:
        Dict[DirectoryKey, str]: Final path of every directory in the schema.

    Raises:
        ConfigurationError: If the pointer width is missing or not an integer.
    """
    return to_mapping(resolve_directories(env_lookup, pointer_width))


def resolve_directories(
        env_lookup: EnvLookup,
        pointer_width: Optional[str],
) -> List[ResolvedDirectory]:
    """
    Resolve every installation directory, keeping track of overrides.

    The pointer width is validated before the environment is consulted, so a
    configuration error never leaves a partial result behind.

    Returns:
        List[ResolvedDirectory]: One record per directory, in schema order.
    """
    qualifier = pointer_width_qualifier(pointer_width)

    resolved: Dict[DirectoryKey, str] = {}
    records: List[ResolvedDirectory] = []

    for spec in SCHEMA:
        record = _resolve_entry(spec, env_lookup, resolved, qualifier)
        resolved[spec.key] = record.value
        records.append(record)

    logger.debug(
        f"Resolved {len(records)} directories "
        f"({sum(1 for r in records if r.overridden)} overridden)."
    )
    return records


def parse_pointer_width(pointer_width: Optional[str]) -> int:
    """
    Interpret the pointer width as an integer number of bits.

    Raises:
        ConfigurationError: If the value is missing or not an integer.
    """
    if pointer_width is None:
        raise ConfigurationError(
            "Target pointer width is not set; it is required to resolve the library directory."
        )

    text = str(pointer_width).strip()
    if not _POINTER_WIDTH_RE.fullmatch(text):
        raise ConfigurationError(
            f"Invalid target pointer width '{pointer_width}': expected an integer number of bits."
        )
    return int(text)


def pointer_width_qualifier(pointer_width: Optional[str]) -> str:
    """
    Return the library directory qualifier for a pointer width.

    The qualifier is the pointer width itself on 64-bit (or wider) targets,
    giving 'lib64', and empty otherwise, giving 'lib'.
    """
    bits = parse_pointer_width(pointer_width)
    if bits >= QUALIFIED_LIBDIR_MIN_WIDTH:
        return str(pointer_width).strip()
    return ""


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _resolve_entry(
        spec: DirectorySpec,
        env_lookup: EnvLookup,
        resolved: Dict[DirectoryKey, str],
        qualifier: str,
) -> ResolvedDirectory:
    """Apply override, then fixed default, then parent derivation."""
    override = env_lookup(spec.env_var)
    if override is not None:
        logger.debug(f"{spec.env_var} overridden: {override}")
        return ResolvedDirectory(spec.key, override, overridden=True)

    if spec.parent is None:
        return ResolvedDirectory(spec.key, spec.fixed_default or "")

    value = resolved[spec.parent] + spec.suffix
    if spec.qualify_pointer_width:
        value += qualifier
    return ResolvedDirectory(spec.key, value)
