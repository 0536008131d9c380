"""Roster document loading."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .config import EngineConfig
from .engine.utils import build_default_groups, unique_roster
from .exceptions import RosterFileError
from .models import GroupShell


@dataclass
class RosterData:
    """Students, group shells and like-lists read from a roster document."""

    students: list[str] = field(default_factory=list)
    groups: list[GroupShell] = field(default_factory=list)
    preferences: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RosterData":
        """Create RosterData from a parsed roster document.

        Students may be plain ids or objects with "id" and "likes". Likes
        given on student objects are merged with the "preferences" map.
        """
        students: list[str] = []
        preferences: dict[str, list[str]] = {}

        for entry in data.get("students", []):
            if isinstance(entry, dict):
                student_id = str(entry["id"])
                likes = entry.get("likes") or []
                if likes:
                    preferences.setdefault(student_id, []).extend(str(x) for x in likes)
            else:
                student_id = str(entry)
            students.append(student_id)

        for student_id, likes in (data.get("preferences") or {}).items():
            preferences.setdefault(str(student_id), []).extend(str(x) for x in likes or [])

        groups = [GroupShell.from_dict(group) for group in data.get("groups") or []]

        return cls(
            students=unique_roster(students),
            groups=groups,
            preferences=preferences,
        )

    def resolve_groups(self, config: EngineConfig | None = None) -> list[GroupShell]:
        """Group shells from the document, or generated defaults if it has none."""
        if self.groups:
            return list(self.groups)
        config = config or EngineConfig()
        return build_default_groups(
            len(self.students),
            target_group_count=config.target_group_count,
            min_group_size=config.min_group_size,
            max_group_size=config.max_group_size,
        )


def load_roster(input_path: Path | str) -> RosterData:
    """Load a roster JSON document.

    Args:
        input_path: Path to the roster file

    Returns:
        RosterData

    Raises:
        RosterFileError: File missing, not JSON, or wrongly shaped
    """
    path = Path(input_path)
    if not path.exists():
        raise RosterFileError(str(path), "file not found")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise RosterFileError(str(path), f"invalid JSON ({e.msg} at line {e.lineno})") from e

    if not isinstance(data, dict):
        raise RosterFileError(str(path), "top level must be a JSON object")

    try:
        return RosterData.from_dict(data)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise RosterFileError(str(path), f"unexpected structure: {e}") from e
