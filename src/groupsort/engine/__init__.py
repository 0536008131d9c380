"""Group assignment engine.

Builds the mutual-friend graph, seeds an initial partition under group
capacities, and improves it with a randomized hill-climbing search over
pairwise swaps.

Main entry points:
- reset_and_random_assign: Random round-robin fill, preferences ignored
- balanced_assign: Greedy seeding followed by local search
- GroupAssigner: Both entry points driven by an EngineConfig

Usage:
    from groupsort.engine import balanced_assign
    from groupsort.models import GroupShell

    groups = [GroupShell("g1", "Red", 3), GroupShell("g2", "Blue", 3)]
    result = balanced_assign(groups, roster, preferences, seed=7)
"""

from .algorithm import (
    GroupAssigner,
    balanced_assign,
    create_assigner,
    reset_and_random_assign,
)
from .graph import MutualAdjacency, build_mutual_adjacency, degree, mutual_pairs
from .happiness import happiness, happiness_by_student, swap_gain, total_happiness
from .optimizer import LocalSearchOptimizer
from .seeding import CapacityAwareSeeder, seed_greedy, seed_random
from .utils import build_default_groups, compute_statistics, unique_roster

__all__ = [
    # Entry points
    "GroupAssigner",
    "balanced_assign",
    "create_assigner",
    "reset_and_random_assign",
    # Graph
    "MutualAdjacency",
    "build_mutual_adjacency",
    "degree",
    "mutual_pairs",
    # Scoring
    "happiness",
    "happiness_by_student",
    "swap_gain",
    "total_happiness",
    # Seeding and search
    "CapacityAwareSeeder",
    "LocalSearchOptimizer",
    "seed_greedy",
    "seed_random",
    # Utilities
    "build_default_groups",
    "compute_statistics",
    "unique_roster",
]
