"""Tests for the assignment entry points."""

import random

import pytest

from groupsort.config import EngineConfig
from groupsort.engine.algorithm import (
    GroupAssigner,
    balanced_assign,
    create_assigner,
    reset_and_random_assign,
)
from groupsort.engine.graph import build_mutual_adjacency
from groupsort.engine.happiness import total_happiness
from groupsort.engine.seeding import seed_greedy
from groupsort.models import GroupShell, UnassignedReason


def assert_partition(assignment, roster):
    seen = assignment.assigned_students() + assignment.unassigned
    assert sorted(seen) == sorted(set(roster))
    assert len(seen) == len(set(seen))


class TestBalancedAssign:
    """Tests for balanced_assign."""

    def test_mutual_pairs_end_up_together(
        self, two_groups_of_three, six_students, two_pairs_preferences
    ):
        result = balanced_assign(
            two_groups_of_three, six_students, two_pairs_preferences, seed=1
        )
        assert result.group_of("S1") == result.group_of("S2")
        assert result.group_of("S3") == result.group_of("S4")
        assert result.unassigned == []
        assert result.statistics.total_happiness == 4
        assert_partition(result, six_students)

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_mutual_pairs_for_several_seeds(
        self, seed, two_groups_of_three, six_students, two_pairs_preferences
    ):
        result = balanced_assign(
            two_groups_of_three, six_students, two_pairs_preferences, seed=seed
        )
        assert result.group_of("S3") == result.group_of("S4")

    def test_single_seat_leaves_one_unassigned(self):
        groups = [GroupShell("g1", "Only Group", 1)]
        result = balanced_assign(groups, ["a", "b"], {}, seed=3)
        assert result.total_assigned == 1
        assert len(result.unassigned) == 1
        assert result.unassigned_details[0].reason == UnassignedReason.NO_CAPACITY
        assert_partition(result, ["a", "b"])

    def test_triangle_in_pairs(self):
        groups = [GroupShell("g1", "Group 1", 2), GroupShell("g2", "Group 2", 2)]
        preferences = {"A": ["B", "C"], "B": ["A", "C"], "C": ["A", "B"]}
        result = balanced_assign(groups, ["A", "B", "C"], preferences, seed=5)
        sizes = [
            sum(1 for s in result.members(g) if s in {"A", "B", "C"}) for g in result.group_ids
        ]
        assert max(sizes) >= 2
        assert_partition(result, ["A", "B", "C"])

    def test_never_worse_than_greedy_seed(self, random_class):
        groups, roster, preferences = random_class
        adjacency = build_mutual_adjacency(roster, preferences)
        seeded = total_happiness(seed_greedy(groups, roster, adjacency), adjacency)
        result = balanced_assign(groups, roster, preferences, seed=10)
        assert result.statistics.total_happiness >= seeded
        assert_partition(result, roster)

    def test_capacities_respected(self, random_class):
        groups, roster, preferences = random_class
        small_groups = [GroupShell(g.id, g.name, 4) for g in groups]
        result = balanced_assign(small_groups, roster, preferences, seed=6)
        for group in result.groups:
            assert result.size(group.id) <= 4
        assert result.total_unassigned == 8
        assert_partition(result, roster)

    def test_same_seed_same_result(self, random_class):
        groups, roster, preferences = random_class
        first = balanced_assign(groups, roster, preferences, seed=77)
        second = balanced_assign(groups, roster, preferences, rng=random.Random(77))
        assert first.memberships == second.memberships

    def test_zero_groups(self):
        result = balanced_assign([], ["a", "b"], {"a": ["b"], "b": ["a"]}, seed=0)
        assert result.unassigned == ["a", "b"]
        assert result.statistics.unassigned_by_reason == {"no_groups": 2}

    def test_zero_students(self, two_groups_of_three):
        result = balanced_assign(two_groups_of_three, [], {}, seed=0)
        assert result.memberships == {"g1": [], "g2": []}
        assert result.unassigned == []

    def test_duplicate_roster_ids_collapse(self, two_groups_of_three):
        result = balanced_assign(two_groups_of_three, ["a", "b", "a"], {}, seed=0)
        assert_partition(result, ["a", "b"])
        assert result.total_assigned == 2

    def test_does_not_modify_input_shells(self, two_groups_of_three, six_students):
        shells = list(two_groups_of_three)
        balanced_assign(two_groups_of_three, six_students, {}, seed=0)
        assert two_groups_of_three == shells

    def test_statistics_attached(self, two_groups_of_three, six_students, two_pairs_preferences):
        result = balanced_assign(
            two_groups_of_three, six_students, two_pairs_preferences, seed=1, swap_budget=40
        )
        stats = result.statistics
        assert stats.total_students == 6
        assert stats.mutual_pairs == 2
        assert stats.iterations == 40
        assert stats.by_group == {"Group 1": 3, "Group 2": 3}


class TestResetAndRandomAssign:
    """Tests for reset_and_random_assign."""

    def test_unlimited_groups_leave_nobody_out(self):
        groups = [GroupShell("g1", "Group 1"), GroupShell("g2", "Group 2")]
        roster = [f"s{i}" for i in range(10)]
        result = reset_and_random_assign(groups, roster, seed=12)
        assert result.unassigned == []
        assert_partition(result, roster)

    def test_ignores_preferences_and_does_not_optimize(self, two_groups_of_three, six_students):
        result = reset_and_random_assign(two_groups_of_three, six_students, seed=2)
        assert result.statistics.iterations == 0
        assert result.statistics.total_happiness == 0

    def test_preferences_feed_statistics_only(
        self, two_groups_of_three, six_students, two_pairs_preferences
    ):
        plain = reset_and_random_assign(two_groups_of_three, six_students, seed=5)
        scored = reset_and_random_assign(
            two_groups_of_three, six_students, two_pairs_preferences, seed=5
        )
        adjacency = build_mutual_adjacency(six_students, two_pairs_preferences)

        assert scored.memberships == plain.memberships
        assert scored.statistics.mutual_pairs == 2
        assert scored.statistics.total_happiness == total_happiness(scored, adjacency)
        assert scored.statistics.iterations == 0

    def test_capacity_shortage(self):
        groups = [GroupShell("g1", "Group 1", 2), GroupShell("g2", "Group 2", 1)]
        roster = ["a", "b", "c", "d", "e"]
        result = reset_and_random_assign(groups, roster, seed=0)
        assert result.total_assigned == 3
        assert result.total_unassigned == 2
        assert_partition(result, roster)

    def test_zero_groups_and_students(self):
        result = reset_and_random_assign([], [], seed=0)
        assert result.memberships == {}
        assert result.unassigned == []

    def test_same_seed_same_result(self, two_groups_of_three, six_students):
        first = reset_and_random_assign(two_groups_of_three, six_students, seed=8)
        second = reset_and_random_assign(two_groups_of_three, six_students, seed=8)
        assert first.memberships == second.memberships


class TestGroupAssigner:
    """Tests for GroupAssigner and create_assigner."""

    def test_uses_config_budget_and_seed(
        self, two_groups_of_three, six_students, two_pairs_preferences
    ):
        assigner = create_assigner(EngineConfig(swap_budget=25, seed=3))
        assert isinstance(assigner, GroupAssigner)
        result = assigner.balanced_assign(two_groups_of_three, six_students, two_pairs_preferences)
        expected = balanced_assign(
            two_groups_of_three, six_students, two_pairs_preferences, seed=3, swap_budget=25
        )
        assert result.statistics.iterations == 25
        assert result.memberships == expected.memberships

    def test_random_assign_uses_attempt_factor(self):
        groups = [GroupShell("g1", "Group 1", 1), GroupShell("g2", "Group 2", 3)]
        assigner = GroupAssigner(EngineConfig(attempt_factor=1, seed=0))
        result = assigner.random_assign(groups, ["a", "b", "c", "d"])
        assert result.total_assigned == 4

    def test_random_assign_passes_preferences_to_statistics(self):
        groups = [GroupShell("g1", "Group 1")]
        assigner = GroupAssigner(EngineConfig(seed=0))
        result = assigner.random_assign(groups, ["a", "b"], {"a": ["b"], "b": ["a"]})
        assert result.statistics.mutual_pairs == 1
        assert result.statistics.total_happiness == 2

    def test_default_config(self):
        assert GroupAssigner().config == EngineConfig()
