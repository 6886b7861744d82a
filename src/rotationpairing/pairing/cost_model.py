"""Edge weights for the matching graph."""

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
from typing import List, Sequence

from rotationpairing.exceptions import NegativeWeightException
from rotationpairing.models.ledger import MeetingLedger
from rotationpairing.models.person import Person


class CostModel:
    """Past-meeting counts between roster positions.

    ``weight(i, j)`` is the number of times roster[i] and roster[j] have
    already met. It is symmetric, total and never negative.
    """

    def __init__(self, roster: Sequence[Person], ledger: MeetingLedger):
        self.roster: List[Person] = list(roster)
        self.ledger = ledger

    def weight(self, i: int, j: int) -> int:
        if i == j:
            return 0
        count = self.ledger.count(self.roster[i].id, self.roster[j].id)
        if count < 0:
            raise NegativeWeightException(
                f"Negative meeting count between {self.roster[i].id!r} "
                f"and {self.roster[j].id!r}: {count}"
            )
        return count

    def group_cost(self, indices: Sequence[int]) -> int:
        """Sum of pairwise weights among a group of roster positions."""
        return sum(self.weight(i, j) for i, j in combinations(indices, 2))

