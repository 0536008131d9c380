"""Export functions for assignment results."""

import json
from pathlib import Path

from .models import Assignment


def export_assignment_json(assignment: Assignment, output_path: Path | str) -> None:
    """Export an assignment to a JSON file.

    Args:
        assignment: Assignment to export
        output_path: Path to output JSON file
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with open(output, "w", encoding="utf-8") as f:
        json.dump(assignment.to_dict(), f, ensure_ascii=False, indent=2)
