"""Mutual-preference graph construction."""

from collections.abc import Iterable, Mapping

MutualAdjacency = dict[str, set[str]]


def build_mutual_adjacency(
    roster: Iterable[str],
    preferences: Mapping[str, Iterable[str]] | None,
) -> MutualAdjacency:
    """Turn directed "I like X" lists into undirected mutual edges.

    An edge a-b exists only when a lists b and b lists a. Self references
    and ids that are not on the roster are dropped without complaint.

    Args:
        roster: Student ids taking part in the run
        preferences: Student id -> ids that student likes (directed)

    Returns:
        Student id -> set of mutual friends, with an entry for every
        roster student
    """
    adjacency: MutualAdjacency = {student_id: set() for student_id in roster}
    if not preferences:
        return adjacency

    # One set per roster student so each reverse-edge check is O(1)
    likes: dict[str, set[str]] = {}
    for student_id, liked in preferences.items():
        if student_id not in adjacency or liked is None:
            continue
        likes[student_id] = {
            friend_id
            for friend_id in liked
            if friend_id != student_id and friend_id in adjacency
        }

    for student_id, liked in likes.items():
        for friend_id in liked:
            if student_id in likes.get(friend_id, ()):
                adjacency[student_id].add(friend_id)
                adjacency[friend_id].add(student_id)

    return adjacency


def degree(adjacency: MutualAdjacency, student_id: str) -> int:
    """Number of mutual friends of a student (0 if unknown)."""
    return len(adjacency.get(student_id, ()))


def mutual_pairs(adjacency: MutualAdjacency) -> list[tuple[str, str]]:
    """Each undirected edge once, as a sorted pair, in sorted order."""
    pairs = {
        tuple(sorted((student_id, friend_id)))
        for student_id, friends in adjacency.items()
        for friend_id in friends
    }
    return sorted(pairs)
