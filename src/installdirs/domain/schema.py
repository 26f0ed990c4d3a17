from __future__ import annotations

"""
Installation Directory Schema.

Declares every recognised installation directory as a single static table.
Each entry names its environment variable and either a fixed default path or
the parent directory (and suffix) its default is derived from.

The directories follow the GNU Coding Standards variables for installation
directories, laid out according to the Filesystem Hierarchy Standard.
Entries appear in dependency order: a parent is always declared before the
directories derived from it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from installdirs.domain.constants import DEFAULT_PREFIX, DEFAULT_RUNSTATEDIR


class DirectoryKey(str, Enum):
    """Identifier of a recognised installation directory."""

    PREFIX = "prefix"
    EXEC_PREFIX = "exec_prefix"
    BINDIR = "bindir"
    SBINDIR = "sbindir"
    LIBEXECDIR = "libexecdir"
    DATAROOTDIR = "datarootdir"
    DATADIR = "datadir"
    SYSCONFDIR = "sysconfdir"
    SHAREDSTATEDIR = "sharedstatedir"
    LOCALSTATEDIR = "localstatedir"
    RUNSTATEDIR = "runstatedir"
    INCLUDEDIR = "includedir"
    DOCDIR = "docdir"
    INFODIR = "infodir"
    MANDIR = "mandir"
    LIBDIR = "libdir"

    @property
    def env_var(self) -> str:
        """Name of the environment variable overriding this directory."""
        return self.value.upper()

    @classmethod
    def from_name(cls, name: str) -> DirectoryKey:
        """
        Look up a key by its key name or variable name (case-insensitive).

        Raises:
            ValueError: If the name matches no directory.
        """
        normalized = (name or "").strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown installation directory: '{name}'.") from None


@dataclass(frozen=True)
class DirectorySpec:
    """
    Declaration of one installation directory.

    Attributes:
        key: Directory identifier.
        description: Purpose of the directory.
        fixed_default: Literal default path, for directories without a parent.
        parent: Directory whose resolved value the default is derived from.
        suffix: Path appended to the parent value.
        qualify_pointer_width: Append the pointer-width qualifier to the
                               derived default (library directories only).
    """
    key: DirectoryKey
    description: str
    fixed_default: Optional[str] = None
    parent: Optional[DirectoryKey] = None
    suffix: str = ""
    qualify_pointer_width: bool = False

    @property
    def env_var(self) -> str:
        return self.key.env_var


# -----------------------------------------------------------------------------
# SCHEMA TABLE (dependency order)
# -----------------------------------------------------------------------------
SCHEMA: Tuple[DirectorySpec, ...] = (
    DirectorySpec(
        DirectoryKey.PREFIX,
        "Prefix used to construct the default values of the other directories.",
        fixed_default=DEFAULT_PREFIX,
    ),
    DirectorySpec(
        DirectoryKey.EXEC_PREFIX,
        "Prefix used to construct the default values of executable directories.",
        parent=DirectoryKey.PREFIX,
    ),
    DirectorySpec(
        DirectoryKey.RUNSTATEDIR,
        "Machine-specific data modified at run time that need not persist.",
        fixed_default=DEFAULT_RUNSTATEDIR,
    ),
    DirectorySpec(
        DirectoryKey.DATAROOTDIR,
        "Root of the read-only architecture-independent data tree.",
        parent=DirectoryKey.PREFIX,
        suffix="/share",
    ),
    DirectorySpec(
        DirectoryKey.INCLUDEDIR,
        "Header files included by user programs.",
        parent=DirectoryKey.PREFIX,
        suffix="/include",
    ),
    DirectorySpec(
        DirectoryKey.LOCALSTATEDIR,
        "Machine-specific data files modified at run time.",
        parent=DirectoryKey.PREFIX,
        suffix="/var",
    ),
    DirectorySpec(
        DirectoryKey.SHAREDSTATEDIR,
        "Architecture-independent data files modified at run time.",
        parent=DirectoryKey.PREFIX,
        suffix="/var/lib",
    ),
    DirectorySpec(
        DirectoryKey.SYSCONFDIR,
        "Read-only host configuration files.",
        parent=DirectoryKey.PREFIX,
        suffix="/etc",
    ),
    DirectorySpec(
        DirectoryKey.DATADIR,
        "Read-only architecture-independent data files of this package.",
        parent=DirectoryKey.DATAROOTDIR,
    ),
    DirectorySpec(
        DirectoryKey.DOCDIR,
        "Documentation files other than Info and man pages.",
        parent=DirectoryKey.DATAROOTDIR,
        suffix="/doc",
    ),
    DirectorySpec(
        DirectoryKey.INFODIR,
        "Info files.",
        parent=DirectoryKey.DATAROOTDIR,
        suffix="/info",
    ),
    DirectorySpec(
        DirectoryKey.MANDIR,
        "Top-level directory of the man pages.",
        parent=DirectoryKey.DATAROOTDIR,
        suffix="/man",
    ),
    DirectorySpec(
        DirectoryKey.BINDIR,
        "Executable programs that users can run.",
        parent=DirectoryKey.EXEC_PREFIX,
        suffix="/bin",
    ),
    DirectorySpec(
        DirectoryKey.LIBEXECDIR,
        "Executable programs run by other programs rather than by users.",
        parent=DirectoryKey.EXEC_PREFIX,
        suffix="/libexec",
    ),
    DirectorySpec(
        DirectoryKey.SBINDIR,
        "Executable programs mainly useful to system administrators.",
        parent=DirectoryKey.EXEC_PREFIX,
        suffix="/sbin",
    ),
    DirectorySpec(
        DirectoryKey.LIBDIR,
        "Object files and libraries of object code.",
        parent=DirectoryKey.EXEC_PREFIX,
        suffix="/lib",
        qualify_pointer_width=True,
    ),
)

SCHEMA_BY_KEY: Dict[DirectoryKey, DirectorySpec] = {spec.key: spec for spec in SCHEMA}


def env_var_names() -> List[str]:
    """Return the recognised environment variable names in schema order."""
    return [spec.env_var for spec in SCHEMA]
