"""Shorthand permission codec.

Converts between permission collections and the compact ``CRUD`` notation.
Shorthands carry set semantics only: letters are always emitted in the
order C, R, U, D and merging is a union.
"""

import logging
from functools import reduce
from typing import Any, Iterable, List, Optional, Union

from ....core.exceptions import InvalidShorthandError
from ..entities.permission import (
    CANONICAL_ORDER,
    SHORTHAND_LETTERS,
    Permission,
    PermissionFlag,
    PermissionInput,
    PermissionShorthand,
)

logger = logging.getLogger(__name__)


def coerce_permission(value: Union[Permission, str]) -> Permission:
    """Coerce a permission name such as ``"read"`` into a Permission."""
    if isinstance(value, Permission):
        return value
    try:
        return Permission(value)
    except ValueError:
        raise InvalidShorthandError(value, value) from None


def to_flags(permissions: Optional[PermissionInput]) -> PermissionFlag:
    """Fold a shorthand or permission collection into its bit representation.

    ``None`` stands for a field with no permission entry and grants nothing.
    """
    if permissions is None:
        return PermissionFlag.NONE
    if isinstance(permissions, str):
        flags = PermissionFlag.NONE
        for letter in permissions:
            try:
                flags |= SHORTHAND_LETTERS[letter].flag
            except KeyError:
                raise InvalidShorthandError(permissions, letter) from None
        return flags
    return reduce(
        lambda flags, permission: flags | coerce_permission(permission).flag,
        permissions,
        PermissionFlag.NONE,
    )


def from_flags(flags: PermissionFlag) -> PermissionShorthand:
    """Encode a flag set as a canonical shorthand."""
    return "".join(p.letter for p in CANONICAL_ORDER if flags & p.flag)


def to_shorthand(permissions: Iterable[Union[Permission, str]]) -> PermissionShorthand:
    """Encode a permission collection as a shorthand in C, R, U, D order."""
    return from_flags(to_flags(list(permissions)))


def parse_shorthand(shorthand: PermissionShorthand) -> List[Permission]:
    """Decode a shorthand into the permissions it grants, in canonical order.

    Raises:
        InvalidShorthandError: If a letter is not one of C, R, U, D
    """
    flags = to_flags(shorthand)
    return [p for p in CANONICAL_ORDER if flags & p.flag]


def expand(permissions: PermissionInput) -> Any:
    """Expand a shorthand into a permission list.

    Collections are returned unchanged so call sites can accept either
    representation.
    """
    if isinstance(permissions, str):
        return parse_shorthand(permissions)
    return permissions


def permission_list(permissions: Optional[PermissionInput]) -> List[Permission]:
    """Resolve any permission input into a canonical, de-duplicated list."""
    flags = to_flags(permissions)
    return [p for p in CANONICAL_ORDER if flags & p.flag]


def merge(*shorthands: PermissionInput) -> PermissionShorthand:
    """Union any number of shorthands into one canonical shorthand.

    Merging nothing yields the empty shorthand. The result is independent
    of argument order and repeated inputs.
    """
    flags = reduce(lambda acc, sh: acc | to_flags(sh), shorthands, PermissionFlag.NONE)
    return from_flags(flags)
