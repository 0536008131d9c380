"""Custom exceptions for groupsort."""


class GroupsortError(Exception):
    """Base exception for groupsort errors."""

    pass


class InvalidGroupShellError(GroupsortError):
    """A group shell is not usable by the assignment engine."""

    def __init__(self, group_id: str, reason: str):
        self.group_id = group_id
        self.reason = reason
        super().__init__(f"Invalid group '{group_id}': {reason}")


class DuplicateGroupError(InvalidGroupShellError):
    """Two group shells share an id or a name."""

    def __init__(self, group_id: str, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(group_id, f"duplicate {field} '{value}'")


class RosterFileError(GroupsortError):
    """Roster document could not be read or has the wrong shape."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load roster '{path}': {reason}")


class AssignmentError(GroupsortError):
    """Illegal operation on an assignment."""

    pass


class CapacityExceededError(AssignmentError):
    """Placement would push a group over its capacity."""

    def __init__(self, group_id: str, capacity: int):
        self.group_id = group_id
        self.capacity = capacity
        super().__init__(f"Group '{group_id}' is full (capacity {capacity})")
