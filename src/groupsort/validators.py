"""Validation of group shells before they reach the engine.

The engine trusts its inputs; callers that build shells from user data
run these checks first.
"""

from collections.abc import Iterable

from .exceptions import DuplicateGroupError, InvalidGroupShellError
from .models import GroupShell


def validate_group_shell(group: GroupShell) -> tuple[bool, str | None]:
    """Validate a single group shell.

    Args:
        group: Shell to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not str(group.id).strip():
        return False, "Group id is empty"

    if not str(group.name).strip():
        return False, f"Group '{group.id}' has an empty name"

    if group.capacity is not None:
        if isinstance(group.capacity, bool) or not isinstance(group.capacity, int):
            return False, f"Group '{group.id}' capacity is not an integer: {group.capacity!r}"
        if group.capacity <= 0:
            return False, f"Group '{group.id}' capacity must be positive, got {group.capacity}"

    return True, None


def validate_group_shells(groups: Iterable[GroupShell]) -> list[str]:
    """Validate a set of shells, including id and name uniqueness.

    Returns:
        List of error messages (empty when all shells are usable)
    """
    errors: list[str] = []
    seen_ids: set[str] = set()
    seen_names: set[str] = set()

    for group in groups:
        is_valid, error = validate_group_shell(group)
        if not is_valid:
            errors.append(error)

        if group.id in seen_ids:
            errors.append(f"Duplicate group id: '{group.id}'")
        seen_ids.add(group.id)

        if group.name in seen_names:
            errors.append(f"Duplicate group name: '{group.name}'")
        seen_names.add(group.name)

    return errors


def ensure_valid_group_shells(groups: Iterable[GroupShell]) -> None:
    """Raise on the first problem found in the shells.

    Raises:
        InvalidGroupShellError: A shell is malformed
        DuplicateGroupError: Two shells share an id or a name
    """
    seen_ids: set[str] = set()
    seen_names: set[str] = set()

    for group in groups:
        is_valid, error = validate_group_shell(group)
        if not is_valid:
            raise InvalidGroupShellError(group.id, error)
        if group.id in seen_ids:
            raise DuplicateGroupError(group.id, "id", group.id)
        if group.name in seen_names:
            raise DuplicateGroupError(group.id, "name", group.name)
        seen_ids.add(group.id)
        seen_names.add(group.name)
