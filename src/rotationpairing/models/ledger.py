"""Meeting ledger: how often each pair of people has already met."""

# Rotation Pairing
# Copyright (C) 2026  Rotation Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from itertools import combinations
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from rotationpairing.exceptions import InvalidLedgerDataException
from rotationpairing.type_hints import PairIDs, PairKey


def pair_key(person1_id: str, person2_id: str) -> PairKey:
    """Return the unordered key used for a pair of person ids."""
    if person1_id == person2_id:
        raise InvalidLedgerDataException(
            f"A person cannot meet themselves: {person1_id!r}"
        )
    return frozenset({person1_id, person2_id})


def _sorted_pair(key: PairKey) -> PairIDs:
    first, second = sorted(key)
    return first, second


class MeetingLedger:
    """
    Immutable record of past meetings between pairs of people.

    Every mutating operation returns a new ledger; the receiver is never
    changed, so a ledger can be shared freely as a snapshot.

    Attributes
    ----------
    counts : mapping of frozenset of str to int
        Read-only view of the non-zero meeting counts. Absent pairs
        have met zero times.
    """

    __slots__ = ("_counts",)

    def __init__(self, counts: Optional[Mapping[PairKey, int]] = None):
        cleaned: Dict[PairKey, int] = {}
        for key, count in (counts or {}).items():
            key = frozenset(key)
            if len(key) != 2:
                raise InvalidLedgerDataException(
                    f"Ledger keys must name two distinct people, got {sorted(key)!r}"
                )
            if isinstance(count, bool) or not isinstance(count, int):
                raise InvalidLedgerDataException(
                    f"Meeting count for {sorted(key)!r} must be an integer, got {count!r}"
                )
            if count < 0:
                raise InvalidLedgerDataException(
                    f"Meeting count for {sorted(key)!r} cannot be negative: {count}"
                )
            if count:
                cleaned[key] = count
        self._counts: Mapping[PairKey, int] = MappingProxyType(cleaned)

    @property
    def counts(self) -> Mapping[PairKey, int]:
        return self._counts

    def count(self, person1_id: str, person2_id: str) -> int:
        """Number of times two people have met (0 for a self-pair)."""
        if person1_id == person2_id:
            return 0
        return self._counts.get(frozenset({person1_id, person2_id}), 0)

    def have_met(self, person1_id: str, person2_id: str) -> bool:
        return self.count(person1_id, person2_id) > 0

    def pairs(self) -> Iterator[Tuple[PairIDs, int]]:
        """Yield ``((id_a, id_b), count)`` in a stable, sorted order."""
        for ids in sorted(_sorted_pair(key) for key in self._counts):
            yield ids, self._counts[frozenset(ids)]

    def people(self) -> List[str]:
        """Sorted ids of everyone who appears in the ledger."""
        return sorted({person_id for key in self._counts for person_id in key})

    def meetings_for(self, person_id: str) -> int:
        """Total number of meetings a person has taken part in."""
        return sum(count for key, count in self._counts.items() if person_id in key)

    def total_meetings(self) -> int:
        return sum(self._counts.values())

    # ----- copy-on-write updates -----

    def record(
        self, person1_id: str, person2_id: str, times: int = 1
    ) -> "MeetingLedger":
        """Return a new ledger with one pair's count increased by *times*."""
        if times < 0:
            raise InvalidLedgerDataException("Meeting counts can only grow")
        key = pair_key(person1_id, person2_id)
        counts = dict(self._counts)
        counts[key] = counts.get(key, 0) + times
        return MeetingLedger(counts)

    def record_group(self, person_ids: Iterable[str]) -> "MeetingLedger":
        """Return a new ledger with every pair inside the group incremented once."""
        counts = dict(self._counts)
        for person1_id, person2_id in combinations(list(person_ids), 2):
            key = pair_key(person1_id, person2_id)
            counts[key] = counts.get(key, 0) + 1
        return MeetingLedger(counts)

    def without_people(self, person_ids: Iterable[str]) -> "MeetingLedger":
        """Return a new ledger with every entry mentioning *person_ids* pruned.

        Roster managers call this when people are removed from the roster.
        """
        removed = set(person_ids)
        return MeetingLedger(
            {key: count for key, count in self._counts.items() if not key & removed}
        )

    # ----- conversions -----

    @classmethod
    def from_pairs(cls, pairs: Iterable[PairIDs]) -> "MeetingLedger":
        """Build a ledger from a raw meeting log (one entry per meeting)."""
        counts: Dict[PairKey, int] = {}
        for person1_id, person2_id in pairs:
            key = pair_key(person1_id, person2_id)
            counts[key] = counts.get(key, 0) + 1
        return cls(counts)

    def to_pairs(self) -> List[PairIDs]:
        """Expand the ledger back into a meeting log (one entry per meeting)."""
        log: List[PairIDs] = []
        for ids, count in self.pairs():
            log.extend([ids] * count)
        return log

    def to_dict(self) -> Dict[str, Any]:
        """Serialize ledger to dictionary."""
        return {
            "meetings": [
                {"people": list(ids), "count": count} for ids, count in self.pairs()
            ]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MeetingLedger":
        """Deserialize ledger from dictionary."""
        counts: Dict[PairKey, int] = {}
        for entry in data.get("meetings", []):
            people = entry.get("people", [])
            if len(people) != 2:
                raise InvalidLedgerDataException(
                    f"Ledger entry must name exactly two people: {entry!r}"
                )
            count = entry.get("count", 0)
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise InvalidLedgerDataException(
                    f"Ledger entry has an invalid count: {entry!r}"
                )
            key = pair_key(str(people[0]), str(people[1]))
            counts[key] = counts.get(key, 0) + count
        return cls(counts)

    # ----- value semantics -----

    def __len__(self) -> int:
        return len(self._counts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MeetingLedger):
            return NotImplemented
        return dict(self._counts) == dict(other._counts)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        entries = ", ".join(f"{a}-{b}: {count}" for (a, b), count in self.pairs())
        return f"MeetingLedger({{{entries}}})"
