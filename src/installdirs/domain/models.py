from __future__ import annotations

"""
Resolution Domain Models.

Defines the result record produced for each installation directory and the
error raised when the resolver cannot be configured.
"""

from dataclasses import dataclass
from typing import Dict, List

from installdirs.domain.schema import DirectoryKey

# -----------------------------------------------------------------------------
# ERRORS
# -----------------------------------------------------------------------------

class ConfigurationError(ValueError):
    """Raised when the resolver inputs cannot be interpreted."""


# -----------------------------------------------------------------------------
# RESULT MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ResolvedDirectory:
    """
    Final value of one installation directory.

    Attributes:
        key: Directory identifier.
        value: Resolved path.
        overridden: True if the value was supplied by the environment lookup.
    """
    key: DirectoryKey
    value: str
    overridden: bool = False

    @property
    def env_var(self) -> str:
        return self.key.env_var

    def as_assignment(self) -> str:
        """Render as a 'NAME=value' assignment."""
        return f"{self.env_var}={self.value}"


def to_mapping(resolved: List[ResolvedDirectory]) -> Dict[DirectoryKey, str]:
    """Collapse resolved records into a key to value mapping."""
    return {item.key: item.value for item in resolved}
