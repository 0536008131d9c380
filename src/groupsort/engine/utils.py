"""Utility functions for group assignment."""

import math
from collections import Counter

from ..constants import (
    DEFAULT_GROUP_ID_TEMPLATE,
    DEFAULT_GROUP_NAME_TEMPLATE,
    DEFAULT_MAX_GROUP_SIZE,
    DEFAULT_MIN_GROUP_SIZE,
    IDEAL_GROUP_SIZE,
)
from ..models import Assignment, AssignmentStatistics, GroupShell, OptimizationReport
from .graph import MutualAdjacency, mutual_pairs
from .happiness import happiness_by_student


def unique_roster(roster: list[str]) -> list[str]:
    """Drop repeated student ids, keeping the first occurrence."""
    return list(dict.fromkeys(roster))


def build_default_groups(
    student_count: int,
    *,
    target_group_count: int | None = None,
    min_group_size: int = DEFAULT_MIN_GROUP_SIZE,
    max_group_size: int = DEFAULT_MAX_GROUP_SIZE,
) -> list[GroupShell]:
    """Generate "Group 1".."Group N" shells sized for the roster.

    Aims for groups between min_group_size and max_group_size students.
    The group count is target_group_count when given, otherwise the
    roster size divided by the ideal size; it is then reduced while the
    average group would be too small and increased while it would be
    too large.

    Args:
        student_count: Number of students to cover
        target_group_count: Desired number of groups
        min_group_size: Smallest capacity handed out
        max_group_size: Largest capacity handed out

    Returns:
        List of GroupShell with finite capacities
    """
    min_size = max(1, min_group_size)
    max_size = max(max_group_size, min_size)
    ideal_size = min(max(IDEAL_GROUP_SIZE, min_size), max_size)

    if target_group_count is not None:
        group_count = target_group_count
    else:
        group_count = math.floor(student_count / ideal_size + 0.5)
    if group_count <= 0:
        group_count = 1

    average = student_count / group_count
    while average < min_size and group_count > 1:
        group_count -= 1
        average = student_count / group_count
    while average > max_size:
        group_count += 1
        average = student_count / group_count

    groups: list[GroupShell] = []
    remaining = student_count
    for index in range(1, group_count + 1):
        groups_left = group_count - index + 1
        base = math.ceil(max(remaining, 0) / groups_left)
        capacity = max(min(base, max_size), min_size)
        groups.append(
            GroupShell(
                id=DEFAULT_GROUP_ID_TEMPLATE.format(index=index),
                name=DEFAULT_GROUP_NAME_TEMPLATE.format(index=index),
                capacity=capacity,
            )
        )
        remaining -= capacity

    return groups


def compute_statistics(
    assignment: Assignment,
    adjacency: MutualAdjacency,
    report: OptimizationReport | None = None,
) -> AssignmentStatistics:
    """Summarize an assignment.

    Args:
        assignment: Finished assignment
        adjacency: Mutual adjacency used for happiness
        report: Local search report, if one ran

    Returns:
        AssignmentStatistics
    """
    scores = happiness_by_student(assignment, adjacency)
    reasons = Counter(u.reason.value for u in assignment.unassigned_details)

    statistics = AssignmentStatistics(
        total_students=len(scores),
        total_assigned=assignment.total_assigned,
        total_unassigned=assignment.total_unassigned,
        total_happiness=sum(scores.values()),
        happy_students=sum(1 for value in scores.values() if value > 0),
        students_with_mutual_friends=sum(
            1 for student_id in scores if adjacency.get(student_id)
        ),
        mutual_pairs=len(mutual_pairs(adjacency)),
        by_group={group.name: assignment.size(group.id) for group in assignment.groups},
        unassigned_by_reason=dict(reasons),
    )
    if report is not None:
        statistics.iterations = report.iterations
        statistics.accepted_swaps = report.accepted_swaps
    return statistics
