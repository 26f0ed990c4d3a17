from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation to ensure the 'src' directory is importable.
2. Shared lookup fixtures used across unit tests.
"""

import os
import sys
from typing import Callable, Dict, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def make_lookup() -> Callable[..., Callable[[str], Optional[str]]]:
    """
    Return a factory building lookups over keyword overrides.

    The returned lookups record every queried name in their 'calls' attribute.
    """
    def _factory(**overrides: str) -> Callable[[str], Optional[str]]:
        data: Dict[str, str] = dict(overrides)

        def _lookup(name: str) -> Optional[str]:
            _lookup.calls.append(name)
            return data.get(name)

        _lookup.calls = []
        return _lookup

    return _factory
