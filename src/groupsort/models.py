"""Data models for the group assignment engine."""

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from .exceptions import AssignmentError, CapacityExceededError


class SeedMode(str, Enum):
    """How the initial partition is produced."""

    RANDOM = "random"
    GREEDY = "greedy"


class UnassignedReason(str, Enum):
    """Reasons why a student could not be placed in any group."""

    NO_GROUPS = "no_groups"
    NO_CAPACITY = "no_capacity"
    ATTEMPT_BUDGET_EXHAUSTED = "attempt_budget_exhausted"


@dataclass(frozen=True)
class GroupShell:
    """A named group with an optional capacity limit.

    A capacity of None means the group is unlimited.
    """

    id: str
    name: str
    capacity: int | None = None

    @property
    def is_unlimited(self) -> bool:
        return self.capacity is None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GroupShell":
        """Create a GroupShell from a dictionary."""
        name = str(data["name"])
        capacity = data.get("capacity")
        return cls(
            id=str(data.get("id") or name),
            name=name,
            capacity=None if capacity is None else int(capacity),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "capacity": self.capacity}


@dataclass
class UnassignedStudent:
    """A student left out of every group, with the reason."""

    student_id: str
    reason: UnassignedReason
    details: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "student_id": self.student_id,
            "reason": self.reason.value,
            "details": self.details,
        }


@dataclass(frozen=True)
class SwapRecord:
    """An accepted swap made by the local search."""

    iteration: int
    student_a: str
    student_b: str
    gain: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "iteration": self.iteration,
            "student_a": self.student_a,
            "student_b": self.student_b,
            "gain": self.gain,
        }


@dataclass
class OptimizationReport:
    """Outcome of one local search run."""

    iterations: int = 0
    accepted_swaps: int = 0
    total_gain: int = 0
    history: list[SwapRecord] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "iterations": self.iterations,
            "accepted_swaps": self.accepted_swaps,
            "total_gain": self.total_gain,
            "history": [record.to_dict() for record in self.history],
        }


@dataclass
class AssignmentStatistics:
    """Statistics about a finished assignment."""

    total_students: int = 0
    total_assigned: int = 0
    total_unassigned: int = 0
    total_happiness: int = 0
    happy_students: int = 0
    students_with_mutual_friends: int = 0
    mutual_pairs: int = 0
    by_group: dict[str, int] = field(default_factory=dict)
    unassigned_by_reason: dict[str, int] = field(default_factory=dict)
    iterations: int = 0
    accepted_swaps: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "total_students": self.total_students,
            "total_assigned": self.total_assigned,
            "total_unassigned": self.total_unassigned,
            "assignment_rate": (
                self.total_assigned / self.total_students
                if self.total_students > 0
                else 0.0
            ),
            "total_happiness": self.total_happiness,
            "happy_students": self.happy_students,
            "students_with_mutual_friends": self.students_with_mutual_friends,
            "mutual_pairs": self.mutual_pairs,
            "by_group": self.by_group,
            "unassigned_by_reason": self.unassigned_by_reason,
            "iterations": self.iterations,
            "accepted_swaps": self.accepted_swaps,
        }


@dataclass
class Assignment:
    """Partition of a roster into groups plus an unassigned list.

    Every student lives in exactly one place: one group's member list or
    the unassigned list. Member lists keep placement order, and a swap
    puts each student into the other's slot.
    """

    groups: list[GroupShell]
    memberships: dict[str, list[str]] = field(default_factory=dict)
    unassigned: list[str] = field(default_factory=list)
    unassigned_details: list[UnassignedStudent] = field(default_factory=list)
    statistics: AssignmentStatistics | None = None
    generation_date: str = field(default_factory=lambda: datetime.now().isoformat())

    def __post_init__(self) -> None:
        self._groups_by_id: dict[str, GroupShell] = {}
        for group in self.groups:
            self._groups_by_id[group.id] = group
            self.memberships.setdefault(group.id, [])

        self._location: dict[str, str] = {}
        for group_id, members in self.memberships.items():
            if group_id not in self._groups_by_id:
                raise AssignmentError(f"Members given for unknown group '{group_id}'")
            for student_id in members:
                self._location[student_id] = group_id
        self._unassigned_ids: set[str] = set(self.unassigned)

    @classmethod
    def empty(cls, groups: list[GroupShell]) -> "Assignment":
        """Start a fresh assignment with no members over copies of the shells."""
        return cls(groups=list(groups))

    @property
    def group_ids(self) -> list[str]:
        return [group.id for group in self.groups]

    def get_group(self, group_id: str) -> GroupShell:
        try:
            return self._groups_by_id[group_id]
        except KeyError:
            raise AssignmentError(f"Unknown group '{group_id}'") from None

    def members(self, group_id: str) -> list[str]:
        """Members of a group in placement order (a copy)."""
        self.get_group(group_id)
        return list(self.memberships[group_id])

    def size(self, group_id: str) -> int:
        self.get_group(group_id)
        return len(self.memberships[group_id])

    def remaining_capacity(self, group_id: str) -> float:
        """Free seats in a group; math.inf for unlimited groups."""
        group = self.get_group(group_id)
        if group.capacity is None:
            return math.inf
        return group.capacity - len(self.memberships[group_id])

    def has_room(self, group_id: str) -> bool:
        return self.remaining_capacity(group_id) > 0

    def group_of(self, student_id: str) -> str | None:
        """Group id holding the student, or None if unassigned or unknown."""
        return self._location.get(student_id)

    def is_assigned(self, student_id: str) -> bool:
        return student_id in self._location

    def contains(self, student_id: str) -> bool:
        return student_id in self._location or student_id in self._unassigned_ids

    def place(self, student_id: str, group_id: str) -> None:
        """Append a not-yet-placed student to a group."""
        if self.contains(student_id):
            raise AssignmentError(f"Student '{student_id}' is already placed")
        group = self.get_group(group_id)
        if not self.has_room(group_id):
            raise CapacityExceededError(group_id, group.capacity)
        self.memberships[group_id].append(student_id)
        self._location[student_id] = group_id

    def mark_unassigned(
        self, student_id: str, reason: UnassignedReason, details: str = ""
    ) -> None:
        """Record a not-yet-placed student as unassigned."""
        if self.contains(student_id):
            raise AssignmentError(f"Student '{student_id}' is already placed")
        self.unassigned.append(student_id)
        self._unassigned_ids.add(student_id)
        self.unassigned_details.append(UnassignedStudent(student_id, reason, details))

    def swap(self, student_a: str, student_b: str) -> None:
        """Exchange the groups of two assigned students in different groups.

        Group sizes do not change, so capacities stay respected.
        """
        group_a = self._location.get(student_a)
        group_b = self._location.get(student_b)
        if group_a is None or group_b is None:
            raise AssignmentError("Only assigned students can be swapped")
        if group_a == group_b:
            raise AssignmentError(
                f"Students '{student_a}' and '{student_b}' share group '{group_a}'"
            )

        members_a = self.memberships[group_a]
        members_b = self.memberships[group_b]
        members_a[members_a.index(student_a)] = student_b
        members_b[members_b.index(student_b)] = student_a
        self._location[student_a] = group_b
        self._location[student_b] = group_a

    def assigned_students(self) -> list[str]:
        """All placed students, group by group in input order."""
        return [
            student_id
            for group in self.groups
            for student_id in self.memberships[group.id]
        ]

    def students(self) -> list[str]:
        """Every student the assignment knows about."""
        return self.assigned_students() + list(self.unassigned)

    @property
    def total_assigned(self) -> int:
        return len(self._location)

    @property
    def total_unassigned(self) -> int:
        return len(self.unassigned)

    def copy(self) -> "Assignment":
        """Independent copy; shells are immutable and shared."""
        return Assignment(
            groups=list(self.groups),
            memberships={gid: list(members) for gid, members in self.memberships.items()},
            unassigned=list(self.unassigned),
            unassigned_details=[
                UnassignedStudent(u.student_id, u.reason, u.details)
                for u in self.unassigned_details
            ],
            statistics=self.statistics,
            generation_date=self.generation_date,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "generation_date": self.generation_date,
            "groups": [
                {**group.to_dict(), "member_ids": list(self.memberships[group.id])}
                for group in self.groups
            ],
            "unassigned_student_ids": list(self.unassigned),
            "unassigned_students": [u.to_dict() for u in self.unassigned_details],
            "statistics": self.statistics.to_dict() if self.statistics else None,
        }
