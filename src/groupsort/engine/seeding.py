"""Initial partition: random round-robin or adjacency-aware greedy."""

import logging
import random
from collections import Counter
from collections.abc import Sequence

from ..constants import DEFAULT_ATTEMPT_FACTOR
from ..models import Assignment, GroupShell, SeedMode, UnassignedReason
from .graph import MutualAdjacency, degree
from .utils import unique_roster

logger = logging.getLogger(__name__)


def _reject_without_groups(assignment: Assignment, roster: Sequence[str]) -> None:
    for student_id in roster:
        assignment.mark_unassigned(
            student_id, UnassignedReason.NO_GROUPS, "No groups were provided"
        )


def seed_random(
    groups: Sequence[GroupShell],
    roster: Sequence[str],
    *,
    rng: random.Random,
    attempt_factor: int = DEFAULT_ATTEMPT_FACTOR,
) -> Assignment:
    """Shuffle the roster and deal it out round-robin.

    The group cursor persists across students. Each student may try up to
    attempt_factor x len(groups) groups, skipping full ones, and stays
    unassigned if none of them had room.

    Args:
        groups: Group shells in display order
        roster: Student ids; repeats after the first are ignored
        rng: Source of randomness for the shuffle
        attempt_factor: Round-robin budget multiplier, at least 1

    Returns:
        Fresh Assignment
    """
    if attempt_factor < 1:
        raise ValueError("attempt_factor must be >= 1")

    roster = unique_roster(list(roster))
    assignment = Assignment.empty(list(groups))
    if not assignment.groups:
        _reject_without_groups(assignment, roster)
        return assignment

    order = list(roster)
    rng.shuffle(order)

    group_ids = assignment.group_ids
    max_attempts = attempt_factor * len(group_ids)
    cursor = 0

    for student_id in order:
        placed = False
        for _ in range(max_attempts):
            group_id = group_ids[cursor % len(group_ids)]
            cursor += 1
            if assignment.has_room(group_id):
                assignment.place(student_id, group_id)
                placed = True
                break

        if not placed:
            logger.debug(f"No room for {student_id} after {max_attempts} attempts")
            assignment.mark_unassigned(
                student_id,
                UnassignedReason.ATTEMPT_BUDGET_EXHAUSTED,
                f"No group with room found in {max_attempts} round-robin attempts",
            )

    return assignment


def seed_greedy(
    groups: Sequence[GroupShell],
    roster: Sequence[str],
    adjacency: MutualAdjacency,
) -> Assignment:
    """Place well-connected students first, next to their mutual friends.

    Students go in descending mutual degree (ties keep roster order). Each
    one joins the open group already holding most of its mutual friends;
    ties go to the earliest group. With every group full the student is
    left unassigned. Repeated roster ids count once.
    """
    roster = unique_roster(list(roster))
    assignment = Assignment.empty(list(groups))
    if not assignment.groups:
        _reject_without_groups(assignment, roster)
        return assignment

    # sorted() is stable, so equal degrees keep roster order
    order = sorted(roster, key=lambda student_id: -degree(adjacency, student_id))

    for student_id in order:
        friends_here = Counter(
            assignment.group_of(friend_id)
            for friend_id in adjacency.get(student_id, ())
            if assignment.is_assigned(friend_id)
        )

        best_group: str | None = None
        best_score = -1
        for group_id in assignment.group_ids:
            if not assignment.has_room(group_id):
                continue
            score = friends_here.get(group_id, 0)
            if score > best_score:
                best_score = score
                best_group = group_id

        if best_group is None:
            logger.debug(f"All groups full, {student_id} left unassigned")
            assignment.mark_unassigned(
                student_id, UnassignedReason.NO_CAPACITY, "All groups are at capacity"
            )
        else:
            assignment.place(student_id, best_group)

    return assignment


class CapacityAwareSeeder:
    """Produces initial partitions in either seeding mode."""

    def __init__(
        self,
        adjacency: MutualAdjacency | None = None,
        *,
        rng: random.Random | None = None,
        attempt_factor: int = DEFAULT_ATTEMPT_FACTOR,
    ) -> None:
        if attempt_factor < 1:
            raise ValueError("attempt_factor must be >= 1")
        self.adjacency = adjacency or {}
        self.rng = rng or random.Random()
        self.attempt_factor = attempt_factor

    def seed(
        self,
        mode: SeedMode,
        groups: Sequence[GroupShell],
        roster: Sequence[str],
    ) -> Assignment:
        """Seed an assignment with the given mode."""
        if mode == SeedMode.RANDOM:
            assignment = seed_random(
                groups, roster, rng=self.rng, attempt_factor=self.attempt_factor
            )
        else:
            assignment = seed_greedy(groups, roster, self.adjacency)

        logger.info(
            f"Seeded ({mode.value}) {assignment.total_assigned} of "
            f"{len(assignment.students())} "
            f"students into {len(assignment.groups)} groups"
        )
        return assignment
