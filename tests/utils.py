"""Shared helpers for the test suite."""

import random
from functools import lru_cache
from itertools import combinations
from typing import Callable, Dict, List, Tuple

from rotationpairing.models import MeetingLedger, Person


def make_roster(*names: str) -> List[Person]:
    return [Person(id=name.lower(), name=name) for name in names]


def numbered_roster(count: int) -> List[Person]:
    return [Person(id=str(i), name=f"Person {i}") for i in range(count)]


def random_ledger(
    roster: List[Person], rng: random.Random, max_count: int = 4
) -> MeetingLedger:
    counts: Dict[frozenset, int] = {}
    for a, b in combinations(roster, 2):
        counts[frozenset({a.id, b.id})] = rng.randint(0, max_count)
    return MeetingLedger(counts)


def brute_force_min_cost(num_vertices: int, weight: Callable[[int, int], int]) -> int:
    """Cheapest maximum-cardinality matching on a complete graph, by enumeration."""

    @lru_cache(maxsize=None)
    def best(remaining: Tuple[int, ...], skips_left: int) -> int:
        if not remaining:
            return 0
        first, rest = remaining[0], remaining[1:]
        options = []
        if skips_left:
            options.append(best(rest, skips_left - 1))
        for index, partner in enumerate(rest):
            others = rest[:index] + rest[index + 1 :]
            options.append(weight(first, partner) + best(others, skips_left))
        return min(options) if options else float("inf")

    return best(tuple(range(num_vertices)), num_vertices % 2)


def group_ids(groups) -> List[List[str]]:
    return [sorted(group.member_ids()) for group in groups]
