"""
Permission mask <-> symbolic permission translation.

A mask is a plain integer using the POSIX layout (0o400 owner-read down to
0o001 other-exec). Masks are never validated: each predicate only looks at
its own bit, so higher bits such as the file-type field of a tar mode are
ignored.

Every predicate is wired through `PERMISSION_BITS`, a single table keyed by
(tier, access), so the owner, group and other predicates cannot drift apart.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from file_utils.common.constants import (
    FILE_PERM_GEXEC,
    FILE_PERM_GREAD,
    FILE_PERM_GWRITE,
    FILE_PERM_OEXEC,
    FILE_PERM_OREAD,
    FILE_PERM_OWRITE,
    FILE_PERM_UEXEC,
    FILE_PERM_UREAD,
    FILE_PERM_UWRITE,
)


class Tier(str, Enum):
    """Who a permission bit applies to."""

    OWNER = "owner"
    GROUP = "group"
    OTHER = "other"


class Access(str, Enum):
    """Kind of access a permission bit grants, with its symbolic character."""

    READ = "r"
    WRITE = "w"
    EXEC = "x"


PERMISSION_BITS: Dict[Tuple[Tier, Access], int] = {
    (Tier.OWNER, Access.READ): FILE_PERM_UREAD,
    (Tier.OWNER, Access.WRITE): FILE_PERM_UWRITE,
    (Tier.OWNER, Access.EXEC): FILE_PERM_UEXEC,
    (Tier.GROUP, Access.READ): FILE_PERM_GREAD,
    (Tier.GROUP, Access.WRITE): FILE_PERM_GWRITE,
    (Tier.GROUP, Access.EXEC): FILE_PERM_GEXEC,
    (Tier.OTHER, Access.READ): FILE_PERM_OREAD,
    (Tier.OTHER, Access.WRITE): FILE_PERM_OWRITE,
    (Tier.OTHER, Access.EXEC): FILE_PERM_OEXEC,
}

# Order of the nine characters in a symbolic permission string.
SYMBOLIC_ORDER: Tuple[Tuple[Tier, Access], ...] = tuple(
    (tier, access) for tier in Tier for access in Access
)


def has_permission(mask: int, tier: Tier, access: Access) -> bool:
    """Return True if the bit for `tier`/`access` is set in `mask`."""
    return bool(mask & PERMISSION_BITS[(tier, access)])


def u_can_read(mask: int) -> bool:
    return has_permission(mask, Tier.OWNER, Access.READ)


def u_can_write(mask: int) -> bool:
    return has_permission(mask, Tier.OWNER, Access.WRITE)


def u_can_exec(mask: int) -> bool:
    return has_permission(mask, Tier.OWNER, Access.EXEC)


def g_can_read(mask: int) -> bool:
    return has_permission(mask, Tier.GROUP, Access.READ)


def g_can_write(mask: int) -> bool:
    return has_permission(mask, Tier.GROUP, Access.WRITE)


def g_can_exec(mask: int) -> bool:
    return has_permission(mask, Tier.GROUP, Access.EXEC)


def o_can_read(mask: int) -> bool:
    return has_permission(mask, Tier.OTHER, Access.READ)


def o_can_write(mask: int) -> bool:
    return has_permission(mask, Tier.OTHER, Access.WRITE)


def o_can_exec(mask: int) -> bool:
    return has_permission(mask, Tier.OTHER, Access.EXEC)


def to_symbolic_permission(mask: int) -> str:
    """
    Render `mask` as a 9-character `rwxrwxrwx` string.

    Args:
        mask: Permission mask, e.g. a tar entry mode

    Returns:
        The symbolic form, '-' marking each absent bit
    """
    return "".join(
        access.value if has_permission(mask, tier, access) else "-"
        for tier, access in SYMBOLIC_ORDER
    )


def from_symbolic_permission(symbolic: str) -> int:
    """
    Parse a 9-character `rwxrwxrwx` string back into a mask.

    Raises:
        ValueError: If `symbolic` does not follow the grammar exactly
    """
    if not isinstance(symbolic, str) or len(symbolic) != len(SYMBOLIC_ORDER):
        raise ValueError(f"Invalid symbolic permission: {symbolic!r}")

    mask = 0
    for char, (tier, access) in zip(symbolic, SYMBOLIC_ORDER):
        if char == access.value:
            mask |= PERMISSION_BITS[(tier, access)]
        elif char != "-":
            raise ValueError(f"Invalid symbolic permission: {symbolic!r}")
    return mask


__all__ = [
    "Tier",
    "Access",
    "PERMISSION_BITS",
    "has_permission",
    "u_can_read",
    "u_can_write",
    "u_can_exec",
    "g_can_read",
    "g_can_write",
    "g_can_exec",
    "o_can_read",
    "o_can_write",
    "o_can_exec",
    "to_symbolic_permission",
    "from_symbolic_permission",
]
