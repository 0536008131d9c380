#!/usr/bin/env python3
"""Time balanced assignment on synthetic classes."""

from __future__ import annotations

import argparse
import random
import time

from groupsort.engine import balanced_assign, build_default_groups, reset_and_random_assign
from groupsort.engine.graph import build_mutual_adjacency
from groupsort.engine.happiness import total_happiness


def _synthetic_class(
    size: int, likes_per_student: int, rng: random.Random
) -> tuple[list[str], dict[str, list[str]]]:
    roster = [f"s{i:04d}" for i in range(size)]
    preferences = {}
    for student_id in roster:
        others = [s for s in roster if s != student_id]
        preferences[student_id] = rng.sample(others, min(likes_per_student, len(others)))
    return roster, preferences


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Benchmark balanced assignment against random shuffling."
    )
    parser.add_argument("--students", type=int, default=30, help="Class size (default: 30)")
    parser.add_argument("--likes", type=int, default=4, help="Likes per student (default: 4)")
    parser.add_argument("--budget", type=int, default=300, help="Swap budget (default: 300)")
    parser.add_argument("--runs", type=int, default=20, help="Runs to average (default: 20)")
    parser.add_argument("--seed", type=int, default=0, help="Base random seed (default: 0)")
    args = parser.parse_args()

    rng = random.Random(args.seed)
    roster, preferences = _synthetic_class(args.students, args.likes, rng)
    groups = build_default_groups(len(roster))
    adjacency = build_mutual_adjacency(roster, preferences)

    print(f"Students: {len(roster)}  Groups: {len(groups)}  Budget: {args.budget}")

    balanced_scores = []
    random_scores = []
    elapsed = 0.0
    for run in range(args.runs):
        started = time.perf_counter()
        result = balanced_assign(
            groups, roster, preferences, seed=args.seed + run, swap_budget=args.budget
        )
        elapsed += time.perf_counter() - started
        balanced_scores.append(total_happiness(result, adjacency))

        shuffled = reset_and_random_assign(groups, roster, seed=args.seed + run)
        random_scores.append(total_happiness(shuffled, adjacency))

    print(f"Mean time per balanced run: {elapsed / args.runs * 1000:.2f} ms")
    print(f"Mean happiness (balanced): {sum(balanced_scores) / args.runs:.2f}")
    print(f"Mean happiness (random):   {sum(random_scores) / args.runs:.2f}")


if __name__ == "__main__":
    main()
