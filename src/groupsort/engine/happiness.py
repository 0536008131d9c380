"""Happiness scoring: co-located mutual friends."""

from collections.abc import Callable

from ..models import Assignment
from .graph import MutualAdjacency

Locator = Callable[[str], str | None]


def _happiness_at(student_id: str, locate: Locator, adjacency: MutualAdjacency) -> int:
    group_id = locate(student_id)
    if group_id is None:
        return 0
    return sum(1 for friend_id in adjacency.get(student_id, ()) if locate(friend_id) == group_id)


def happiness(student_id: str, assignment: Assignment, adjacency: MutualAdjacency) -> int:
    """Count the student's mutual friends sharing the student's group.

    Unassigned students and students without mutual friends score 0.
    """
    return _happiness_at(student_id, assignment.group_of, adjacency)


def happiness_by_student(
    assignment: Assignment, adjacency: MutualAdjacency
) -> dict[str, int]:
    return {
        student_id: happiness(student_id, assignment, adjacency)
        for student_id in assignment.students()
    }


def total_happiness(assignment: Assignment, adjacency: MutualAdjacency) -> int:
    """Sum of every student's happiness."""
    return sum(happiness_by_student(assignment, adjacency).values())


def swap_gain(
    student_a: str,
    student_b: str,
    assignment: Assignment,
    adjacency: MutualAdjacency,
) -> int:
    """Net change in happiness if two students exchanged groups.

    The affected students are a, b and every member of either group who
    counts a or b as a mutual friend; nobody else can gain or lose. Their
    happiness is summed under the current placement and under the swapped
    one, and the difference (swapped - current) is returned, so a
    positive value is an improvement.

    The swapped placement is evaluated through a lookup override; the
    assignment itself is never touched.

    Returns 0 when a and b are the same student, share a group, or either
    one is unassigned.
    """
    group_a = assignment.group_of(student_a)
    group_b = assignment.group_of(student_b)
    if student_a == student_b or group_a is None or group_b is None or group_a == group_b:
        return 0

    friends_a = adjacency.get(student_a, set())
    friends_b = adjacency.get(student_b, set())
    affected = {student_a, student_b}
    for group_id in (group_a, group_b):
        for member_id in assignment.memberships[group_id]:
            if member_id in friends_a or member_id in friends_b:
                affected.add(member_id)

    current = assignment.group_of

    def swapped(student_id: str) -> str | None:
        if student_id == student_a:
            return group_b
        if student_id == student_b:
            return group_a
        return current(student_id)

    before = sum(_happiness_at(s, current, adjacency) for s in affected)
    after = sum(_happiness_at(s, swapped, adjacency) for s in affected)
    return after - before
