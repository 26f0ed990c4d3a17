from __future__ import annotations

"""
Environment Lookup Factories.

Builds the read-only lookup callables consumed by the resolver. A lookup maps
a variable name to its value, or None when the variable is not set. An empty
string is a set value.
"""

import os
from typing import Callable, Mapping, Optional

EnvLookup = Callable[[str], Optional[str]]


def environ_lookup(environ: Optional[Mapping[str, str]] = None) -> EnvLookup:
    """
    Create a lookup over the process environment.

    Args:
        environ: Mapping to read instead of os.environ (mainly for tests).
    """
    source = os.environ if environ is None else environ

    def _lookup(name: str) -> Optional[str]:
        return source.get(name)

    return _lookup


def mapping_lookup(mapping: Optional[Mapping[str, str]]) -> EnvLookup:
    """Create a lookup over a plain dictionary (copied at creation time)."""
    data = dict(mapping or {})

    def _lookup(name: str) -> Optional[str]:
        return data.get(name)

    return _lookup


def chained_lookup(*lookups: EnvLookup) -> EnvLookup:
    """Combine lookups; the first one returning a value wins."""

    def _lookup(name: str) -> Optional[str]:
        for lookup in lookups:
            value = lookup(name)
            if value is not None:
                return value
        return None

    return _lookup


def null_lookup(name: str) -> Optional[str]:
    """Lookup that never yields a value."""
    return None
