"""groupsort - capacity-aware group assignment with mutual friend preferences.

Students are split into named groups with optional capacity limits while
keeping as many mutual friends (pairs who both listed each other) together
as possible.

Example usage:
    from groupsort import GroupShell, balanced_assign

    groups = [GroupShell("g1", "Group 1", 3), GroupShell("g2", "Group 2", 3)]
    result = balanced_assign(
        groups,
        ["s1", "s2", "s3", "s4"],
        {"s1": ["s2"], "s2": ["s1"]},
        seed=42,
    )

    for group in result.groups:
        print(group.name, result.members(group.id))
    print("Unassigned:", result.unassigned)
"""

from .config import ConfigLoader, EngineConfig
from .engine import (
    GroupAssigner,
    balanced_assign,
    build_mutual_adjacency,
    create_assigner,
    happiness,
    reset_and_random_assign,
    swap_gain,
)
from .exceptions import (
    AssignmentError,
    CapacityExceededError,
    DuplicateGroupError,
    GroupsortError,
    InvalidGroupShellError,
    RosterFileError,
)
from .exporters import export_assignment_json
from .loader import RosterData, load_roster
from .models import (
    Assignment,
    AssignmentStatistics,
    GroupShell,
    OptimizationReport,
    SeedMode,
    SwapRecord,
    UnassignedReason,
    UnassignedStudent,
)

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "balanced_assign",
    "reset_and_random_assign",
    "GroupAssigner",
    "create_assigner",
    "build_mutual_adjacency",
    "happiness",
    "swap_gain",
    # Models
    "Assignment",
    "AssignmentStatistics",
    "GroupShell",
    "OptimizationReport",
    "SeedMode",
    "SwapRecord",
    "UnassignedReason",
    "UnassignedStudent",
    # Configuration and I/O
    "ConfigLoader",
    "EngineConfig",
    "RosterData",
    "load_roster",
    "export_assignment_json",
    # Exceptions
    "GroupsortError",
    "InvalidGroupShellError",
    "DuplicateGroupError",
    "RosterFileError",
    "AssignmentError",
    "CapacityExceededError",
]
