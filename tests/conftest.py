"""Test fixtures for groupsort tests."""

import json
import random

import pytest

from groupsort.models import GroupShell


@pytest.fixture
def two_groups_of_three():
    """Two groups with capacity 3 each."""
    return [GroupShell("g1", "Group 1", 3), GroupShell("g2", "Group 2", 3)]


@pytest.fixture
def two_pairs_preferences():
    """S1<->S2 and S3<->S4 are mutual; S5 and S6 list nobody."""
    return {
        "S1": ["S2"],
        "S2": ["S1"],
        "S3": ["S4"],
        "S4": ["S3"],
    }


@pytest.fixture
def six_students():
    return ["S1", "S2", "S3", "S4", "S5", "S6"]


@pytest.fixture
def random_class():
    """A 24-student class with random like-lists and four groups of six."""
    rng = random.Random(2024)
    roster = [f"st{i:02d}" for i in range(24)]
    preferences = {
        student_id: rng.sample([s for s in roster if s != student_id], 4)
        for student_id in roster
    }
    groups = [GroupShell(f"g{i}", f"Group {i}", 6) for i in range(1, 5)]
    return groups, roster, preferences


@pytest.fixture
def roster_file(tmp_path):
    """Write a small roster document and return its path."""
    data = {
        "students": ["S1", "S2", "S3", {"id": "S4", "likes": ["S3"]}, "S5", "S6"],
        "groups": [
            {"id": "g1", "name": "Red", "capacity": 3},
            {"id": "g2", "name": "Blue", "capacity": 3},
        ],
        "preferences": {"S1": ["S2"], "S2": ["S1"], "S3": ["S4"]},
    }
    path = tmp_path / "roster.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
