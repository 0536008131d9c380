"""Tests for group shell validation."""

import pytest

from groupsort.exceptions import DuplicateGroupError, InvalidGroupShellError
from groupsort.models import GroupShell
from groupsort.validators import (
    ensure_valid_group_shells,
    validate_group_shell,
    validate_group_shells,
)


class TestValidateGroupShell:
    """Tests for validate_group_shell."""

    def test_valid_finite(self):
        assert validate_group_shell(GroupShell("g1", "Red", 3)) == (True, None)

    def test_valid_unlimited(self):
        assert validate_group_shell(GroupShell("g1", "Red")) == (True, None)

    @pytest.mark.parametrize("capacity", [0, -2])
    def test_non_positive_capacity(self, capacity):
        is_valid, error = validate_group_shell(GroupShell("g1", "Red", capacity))
        assert not is_valid
        assert "positive" in error

    def test_empty_name(self):
        is_valid, error = validate_group_shell(GroupShell("g1", "  "))
        assert not is_valid
        assert "empty name" in error

    def test_empty_id(self):
        is_valid, _ = validate_group_shell(GroupShell("", "Red"))
        assert not is_valid


class TestValidateGroupShells:
    """Tests for validate_group_shells and ensure_valid_group_shells."""

    def test_all_valid(self):
        groups = [GroupShell("g1", "Red", 3), GroupShell("g2", "Blue")]
        assert validate_group_shells(groups) == []
        ensure_valid_group_shells(groups)

    def test_duplicate_names_and_ids(self):
        groups = [
            GroupShell("g1", "Red", 3),
            GroupShell("g1", "Blue", 3),
            GroupShell("g3", "Red", 3),
        ]
        errors = validate_group_shells(groups)
        assert "Duplicate group id: 'g1'" in errors
        assert "Duplicate group name: 'Red'" in errors

    def test_ensure_raises_on_duplicate(self):
        groups = [GroupShell("g1", "Red", 3), GroupShell("g2", "Red", 3)]
        with pytest.raises(DuplicateGroupError) as excinfo:
            ensure_valid_group_shells(groups)
        assert excinfo.value.field == "name"

    def test_ensure_raises_on_bad_capacity(self):
        with pytest.raises(InvalidGroupShellError) as excinfo:
            ensure_valid_group_shells([GroupShell("g1", "Red", 0)])
        assert excinfo.value.group_id == "g1"
