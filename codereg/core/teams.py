"""
Team partitioning: Fisher-Yates shuffle followed by fixed-size chunking
"""
import random
from typing import List, Sequence

from codereg.models import Hackathon, Student, Team, TeamMember


DEFAULT_TEAM_SIZE = 4


def fisher_yates_shuffle(items: Sequence, rng=None) -> list:
    """
    Return a uniformly shuffled copy of items

    For i from the last index down to 1, draw j uniformly in [0, i]
    and swap positions i and j. The input sequence is left untouched.

    Args:
        items: Sequence to shuffle
        rng: Object with randint(a, b) (defaults to the random module)

    Returns:
        New shuffled list
    """
    rng = rng or random
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def chunk(items: Sequence, size: int) -> List[list]:
    """
    Split items into consecutive chunks of at most size elements

    Example:
        >>> chunk([1, 2, 3, 4, 5], 4)
        [[1, 2, 3, 4], [5]]
    """
    if size < 1:
        raise ValueError(f"Chunk size must be positive, got {size}")

    chunks = []
    for i in range(0, len(items), size):
        chunks.append(list(items[i:i + size]))
    return chunks


def make_team_id(hackathon_id: str, sequence: int) -> str:
    """T + hackathon id without its H prefix + 1-based sequence"""
    return f"T{hackathon_id[1:]}-{sequence}"


def to_member(student: Student) -> TeamMember:
    return TeamMember(id=student.id, name=student.name, email=student.email)


def build_teams(hackathon: Hackathon, team_size: int = DEFAULT_TEAM_SIZE, rng=None) -> List[Team]:
    """
    Partition a hackathon's registered students into teams

    Args:
        hackathon: Hackathon whose roster is partitioned
        team_size: Maximum members per team (the last team holds the remainder)
        rng: Random source for the shuffle

    Returns:
        ceil(len(roster) / team_size) teams in generation order
    """
    shuffled = fisher_yates_shuffle(hackathon.registered_students, rng)

    teams = []
    for sequence, members in enumerate(chunk(shuffled, team_size), start=1):
        teams.append(Team(
            team_id=make_team_id(hackathon.hackathon_id, sequence),
            hackathon_id=hackathon.hackathon_id,
            members=[to_member(s) for s in members]
        ))

    return teams
