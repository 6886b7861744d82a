"""Fold the leftover person of an odd roster into one of the pairs."""

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

from typing import List, Sequence, Tuple

from rotationpairing.exceptions import MatchingInvariantException
from rotationpairing.pairing.cost_model import CostModel
from rotationpairing.type_hints import VertexPair
from rotationpairing.utils import setup_logger

logger = setup_logger(__name__)


def choose_host_pair(
    pairs: Sequence[VertexPair], leftover: int, cost_model: CostModel
) -> Tuple[int, int]:
    """Pick the pair that should absorb ``leftover``.

    The added cost of a pair ``(a, b)`` is ``weight(a, leftover) +
    weight(b, leftover)``. Ties go to the earliest pair in ``pairs``.

    Returns
    -------
    tuple of int
        ``(index into pairs, added cost)``
    """
    if not pairs:
        raise MatchingInvariantException("no pair available for leftover", (leftover,))

    best_index = 0
    best_cost = None
    for index, (a, b) in enumerate(pairs):
        if leftover in (a, b):
            raise MatchingInvariantException(
                "leftover vertex is also matched", (leftover,)
            )
        cost = cost_model.weight(a, leftover) + cost_model.weight(b, leftover)
        if best_cost is None or cost < best_cost:
            best_index, best_cost = index, cost
    return best_index, best_cost


def resolve_leftover(
    pairs: Sequence[VertexPair], leftover: int, cost_model: CostModel
) -> List[Tuple[int, ...]]:
    """Return the groups (as roster indices) with ``leftover`` folded in.

    This is a greedy step on top of a fixed matching: only the choice of
    host pair is optimised, the pairs themselves are not re-solved.
    """
    host, added_cost = choose_host_pair(pairs, leftover, cost_model)
    logger.debug(
        f"Leftover vertex {leftover} joins pair {pairs[host]} (added cost {added_cost})"
    )
    groups: List[Tuple[int, ...]] = []
    for index, (a, b) in enumerate(pairs):
        if index == host:
            groups.append((a, b, leftover))
        else:
            groups.append((a, b))
    return groups
