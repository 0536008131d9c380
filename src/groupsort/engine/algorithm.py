"""Assignment entry points: random reset and balanced assignment."""

import logging
import random
from collections.abc import Iterable, Mapping, Sequence

from ..config import EngineConfig
from ..constants import DEFAULT_ATTEMPT_FACTOR, DEFAULT_SWAP_BUDGET
from ..models import Assignment, GroupShell, SeedMode
from .graph import build_mutual_adjacency
from .optimizer import LocalSearchOptimizer
from .seeding import CapacityAwareSeeder
from .utils import compute_statistics, unique_roster

logger = logging.getLogger(__name__)


def _resolve_rng(rng: random.Random | None, seed: int | None) -> random.Random:
    if rng is not None:
        return rng
    return random.Random(seed)


def reset_and_random_assign(
    groups: Sequence[GroupShell],
    roster: Iterable[str],
    preferences: Mapping[str, Iterable[str]] | None = None,
    *,
    rng: random.Random | None = None,
    seed: int | None = None,
    attempt_factor: int = DEFAULT_ATTEMPT_FACTOR,
) -> Assignment:
    """Clear all groups and deal the roster out at random.

    Placement ignores preferences and no optimization runs. When
    preferences are given they only feed the happiness statistics.

    Args:
        groups: Group shells
        roster: Student ids
        preferences: Student id -> liked student ids, for statistics only
        rng: Random generator to use (takes precedence over seed)
        seed: Seed for a private generator
        attempt_factor: Round-robin attempts per student, per group

    Returns:
        Assignment with statistics attached
    """
    students = unique_roster(list(roster))
    seeder = CapacityAwareSeeder(rng=_resolve_rng(rng, seed), attempt_factor=attempt_factor)
    assignment = seeder.seed(SeedMode.RANDOM, groups, students)
    adjacency = build_mutual_adjacency(students, preferences)
    assignment.statistics = compute_statistics(assignment, adjacency)
    return assignment


def balanced_assign(
    groups: Sequence[GroupShell],
    roster: Iterable[str],
    preferences: Mapping[str, Iterable[str]] | None,
    *,
    rng: random.Random | None = None,
    seed: int | None = None,
    swap_budget: int = DEFAULT_SWAP_BUDGET,
) -> Assignment:
    """Assign students so that mutual friends end up together.

    1. Build the mutual adjacency from the preference lists
    2. Seed greedily (most-connected students first)
    3. Hill-climb with random swaps for swap_budget iterations

    Args:
        groups: Group shells
        roster: Student ids
        preferences: Student id -> liked student ids
        rng: Random generator to use (takes precedence over seed)
        seed: Seed for a private generator
        swap_budget: Local search iterations

    Returns:
        Assignment with statistics attached
    """
    students = unique_roster(list(roster))
    adjacency = build_mutual_adjacency(students, preferences)

    seeder = CapacityAwareSeeder(adjacency)
    assignment = seeder.seed(SeedMode.GREEDY, groups, students)

    optimizer = LocalSearchOptimizer(
        adjacency, iterations=swap_budget, rng=_resolve_rng(rng, seed)
    )
    report = optimizer.optimize(assignment)

    assignment.statistics = compute_statistics(assignment, adjacency, report)
    logger.info(
        f"Balanced assignment: {assignment.total_assigned} assigned, "
        f"{assignment.total_unassigned} unassigned, "
        f"happiness {assignment.statistics.total_happiness}"
    )
    return assignment


class GroupAssigner:
    """Runs the assignment entry points with settings from an EngineConfig."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    def random_assign(
        self,
        groups: Sequence[GroupShell],
        roster: Iterable[str],
        preferences: Mapping[str, Iterable[str]] | None = None,
        *,
        rng: random.Random | None = None,
    ) -> Assignment:
        return reset_and_random_assign(
            groups,
            roster,
            preferences,
            rng=rng,
            seed=self.config.seed,
            attempt_factor=self.config.attempt_factor,
        )

    def balanced_assign(
        self,
        groups: Sequence[GroupShell],
        roster: Iterable[str],
        preferences: Mapping[str, Iterable[str]] | None,
        *,
        rng: random.Random | None = None,
    ) -> Assignment:
        return balanced_assign(
            groups,
            roster,
            preferences,
            rng=rng,
            seed=self.config.seed,
            swap_budget=self.config.swap_budget,
        )


def create_assigner(config: EngineConfig | None = None) -> GroupAssigner:
    """Factory function to create a GroupAssigner.

    Args:
        config: Engine settings; defaults when omitted

    Returns:
        GroupAssigner instance
    """
    return GroupAssigner(config)
