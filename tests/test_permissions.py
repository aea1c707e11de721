from __future__ import annotations

import stat

import pytest

from file_utils.common.constants import FILE_PERM_MASK
from file_utils.core import permissions
from file_utils.core.permissions import (
    PERMISSION_BITS,
    Access,
    Tier,
    from_symbolic_permission,
    has_permission,
    to_symbolic_permission,
)

PREDICATES = [
    (permissions.u_can_read, 0o400),
    (permissions.u_can_write, 0o200),
    (permissions.u_can_exec, 0o100),
    (permissions.g_can_read, 0o040),
    (permissions.g_can_write, 0o020),
    (permissions.g_can_exec, 0o010),
    (permissions.o_can_read, 0o004),
    (permissions.o_can_write, 0o002),
    (permissions.o_can_exec, 0o001),
]


@pytest.mark.parametrize("predicate,bit", PREDICATES, ids=[p.__name__ for p, _ in PREDICATES])
def test_each_predicate_depends_only_on_its_bit(predicate, bit):
    for mask in range(512):
        assert predicate(mask) is bool(mask & bit)


def test_other_predicates_ignore_group_bits():
    group_only = 0o070
    assert not permissions.o_can_read(group_only)
    assert not permissions.o_can_write(group_only)
    assert not permissions.o_can_exec(group_only)
    assert permissions.o_can_read(0o004)
    assert permissions.o_can_write(0o002)
    assert permissions.o_can_exec(0o001)


def test_permission_table_is_one_bit_per_slot():
    bits = list(PERMISSION_BITS.values())
    assert len(PERMISSION_BITS) == 9
    assert sorted(bits) == [1 << shift for shift in range(9)]


def test_symbolic_matches_predicate_concatenation_for_all_masks():
    for mask in range(512):
        expected = "".join(
            char if predicate(mask) else "-"
            for (predicate, _), char in zip(PREDICATES, "rwxrwxrwx")
        )
        assert to_symbolic_permission(mask) == expected
        assert to_symbolic_permission(mask) == stat.filemode(stat.S_IFREG | mask)[1:]


@pytest.mark.parametrize(
    "mask,symbolic",
    [
        (0o400, "r--------"),
        (0o644, "rw-r--r--"),
        (0o755, "rwxr-xr-x"),
        (0o000, "---------"),
        (0o777, "rwxrwxrwx"),
        (0o007, "------rwx"),
    ],
)
def test_known_masks(mask, symbolic):
    assert to_symbolic_permission(mask) == symbolic


def test_permission_table_covers_the_mask():
    combined = 0
    for bit in PERMISSION_BITS.values():
        combined |= bit
    assert combined == FILE_PERM_MASK


def test_high_bits_are_ignored():
    assert to_symbolic_permission(stat.S_IFREG | 0o644) == "rw-r--r--"
    assert to_symbolic_permission(0o4755) == "rwxr-xr-x"
    assert has_permission(0o1000, Tier.OWNER, Access.READ) is False


def test_from_symbolic_inverts_to_symbolic():
    for mask in range(512):
        assert from_symbolic_permission(to_symbolic_permission(mask)) == mask


@pytest.mark.parametrize("bad", ["", "rw-r--r", "rw-r--r--x", "wr-r--r--", "rw-r--r-?", None])
def test_from_symbolic_rejects_bad_strings(bad):
    with pytest.raises(ValueError):
        from_symbolic_permission(bad)
