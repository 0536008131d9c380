"""Hill-climbing over pairwise swaps."""

import logging
import random

from ..constants import DEFAULT_SWAP_BUDGET
from ..models import Assignment, OptimizationReport, SwapRecord
from .graph import MutualAdjacency
from .happiness import swap_gain

logger = logging.getLogger(__name__)


class LocalSearchOptimizer:
    """Randomized local search that only accepts strictly improving swaps.

    Every iteration draws two placed students uniformly at random. Pairs
    that are the same student or already share a group are skipped; other
    pairs are swapped only when swap_gain is positive. The loop always
    spends its whole budget: there is no early exit, restart, or
    sideways move, so a local optimum is simply kept.
    """

    def __init__(
        self,
        adjacency: MutualAdjacency,
        *,
        iterations: int = DEFAULT_SWAP_BUDGET,
        rng: random.Random | None = None,
    ) -> None:
        if iterations < 0:
            raise ValueError("iterations must be >= 0")
        self.adjacency = adjacency
        self.iterations = iterations
        self.rng = rng or random.Random()

    def optimize(self, assignment: Assignment) -> OptimizationReport:
        """Improve the assignment in place.

        Args:
            assignment: Seeded assignment; mutated by accepted swaps

        Returns:
            OptimizationReport listing the accepted swaps
        """
        report = OptimizationReport(iterations=self.iterations)

        # Swaps never change who is placed, so the candidate pool is fixed
        placed = assignment.assigned_students()

        for iteration in range(self.iterations):
            if not placed:
                continue

            student_a = self.rng.choice(placed)
            student_b = self.rng.choice(placed)
            if student_a == student_b:
                continue
            if assignment.group_of(student_a) == assignment.group_of(student_b):
                continue

            gain = swap_gain(student_a, student_b, assignment, self.adjacency)
            if gain <= 0:
                continue

            assignment.swap(student_a, student_b)
            report.accepted_swaps += 1
            report.total_gain += gain
            report.history.append(SwapRecord(iteration, student_a, student_b, gain))
            logger.debug(f"Iteration {iteration}: swapped {student_a} <-> {student_b} (+{gain})")

        logger.info(
            f"Local search: {report.accepted_swaps} swaps accepted in "
            f"{report.iterations} iterations (+{report.total_gain} happiness)"
        )
        return report
