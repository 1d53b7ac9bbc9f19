"""Permission domain entities for field-access.

A field can grant four operations. Sets of them are written compactly as
a shorthand of up to four letters (``"CRUD"``, ``"R"``, ``""``) and held
internally as a 4-bit flag so merging is a bitwise OR.
"""

from enum import Enum, IntFlag
from typing import Collection, Dict, Final, Tuple, Union


class PermissionFlag(IntFlag):
    """Bit representation of a permission set."""
    NONE = 0
    CREATE = 1
    READ = 2
    UPDATE = 4
    DELETE = 8


class Permission(str, Enum):
    """Operations a client may perform on a single field."""
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"

    @property
    def letter(self) -> str:
        """Shorthand letter for this permission."""
        return PERMISSION_LETTERS[self]

    @property
    def flag(self) -> PermissionFlag:
        """Bit for this permission."""
        return PermissionFlag[self.name]


# Shorthand letters are always emitted in this order
CANONICAL_ORDER: Final[Tuple[Permission, ...]] = (
    Permission.CREATE,
    Permission.READ,
    Permission.UPDATE,
    Permission.DELETE,
)

PERMISSION_LETTERS: Final[Dict[Permission, str]] = {
    Permission.CREATE: "C",
    Permission.READ: "R",
    Permission.UPDATE: "U",
    Permission.DELETE: "D",
}

SHORTHAND_LETTERS: Final[Dict[str, Permission]] = {
    letter: permission for permission, letter in PERMISSION_LETTERS.items()
}

FULL_ACCESS: Final[str] = "CRUD"
NO_ACCESS: Final[str] = ""

# A shorthand string drawn from C, R, U, D
PermissionShorthand = str

# Anything accepted where a field's permissions are expected
PermissionInput = Union[PermissionShorthand, Collection[Union[Permission, str]]]
