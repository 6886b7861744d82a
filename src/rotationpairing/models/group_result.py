"""Group result data classes: the report produced for one round."""

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

from dataclasses import dataclass, field
from itertools import combinations
from typing import Any, Dict, List, Tuple, Union

from rotationpairing.constants import GROUP_PAIR, GROUP_TRIPLE
from rotationpairing.exceptions import InvalidPairingException
from rotationpairing.models.person import Person
from rotationpairing.type_hints import GroupKind, PairIDs


class _GroupMixin:
    """Behaviour shared by pairs and triples."""

    people: Tuple[Person, ...]
    score: int
    kind: GroupKind

    def member_ids(self) -> List[str]:
        return [person.id for person in self.people]

    def pair_ids(self) -> List[PairIDs]:
        """Every unordered pair of member ids inside the group."""
        return [(a.id, b.id) for a, b in combinations(self.people, 2)]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize group to dictionary."""
        return {
            "type": self.kind,
            "people": [person.to_dict() for person in self.people],
            "score": self.score,
        }


@dataclass(frozen=True)
class PairResult(_GroupMixin):
    """Two people meeting this round.

    ``score`` is how often they have met before.
    """

    people: Tuple[Person, Person]
    score: int
    kind: GroupKind = field(default=GROUP_PAIR, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "people", tuple(self.people))
        if len(self.people) != 2:
            raise InvalidPairingException(
                f"A pair needs exactly two people, got {len(self.people)}"
            )


@dataclass(frozen=True)
class TripleResult(_GroupMixin):
    """Three people meeting this round (only produced for odd rosters).

    ``score`` is the sum of the three pairwise past-meeting counts.
    """

    people: Tuple[Person, Person, Person]
    score: int
    kind: GroupKind = field(default=GROUP_TRIPLE, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "people", tuple(self.people))
        if len(self.people) != 3:
            raise InvalidPairingException(
                f"A triple needs exactly three people, got {len(self.people)}"
            )


GroupResult = Union[PairResult, TripleResult]


def group_from_dict(data: Dict[str, Any]) -> GroupResult:
    """Deserialize a pair or triple from dictionary."""
    people = tuple(Person.from_dict(p) for p in data.get("people", []))
    score = int(data.get("score", 0))
    kind = data.get("type")
    if kind == GROUP_PAIR:
        return PairResult(people=people, score=score)
    if kind == GROUP_TRIPLE:
        return TripleResult(people=people, score=score)
    raise InvalidPairingException(f"Unknown group type: {kind!r}")


def total_score(groups: List[GroupResult]) -> int:
    """Total number of repeat meetings across a round."""
    return sum(group.score for group in groups)
