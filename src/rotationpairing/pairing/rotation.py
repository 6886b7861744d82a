"""Round generation and history updates for the rotation."""

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

from typing import List, Optional, Sequence, Tuple

from rotationpairing.constants import DIRECT_PAIR_SIZE
from rotationpairing.models.group_result import (
    GroupResult,
    PairResult,
    TripleResult,
    total_score,
)
from rotationpairing.models.ledger import MeetingLedger
from rotationpairing.models.person import Person
from rotationpairing.models.rotation_config import RotationConfig
from rotationpairing.pairing.blossom import (
    minimum_cost_matching,
    pairs_from_mate,
    unmatched_vertices,
)
from rotationpairing.pairing.cost_model import CostModel
from rotationpairing.pairing.odd_vertex import resolve_leftover
from rotationpairing.utils import setup_logger
from rotationpairing.utils.validation import validate_groups, validate_roster

logger = setup_logger(__name__)


def _build_group(indices: Tuple[int, ...], cost_model: CostModel) -> GroupResult:
    people = tuple(cost_model.roster[i] for i in indices)
    score = cost_model.group_cost(indices)
    if len(indices) == 3:
        return TripleResult(people=people, score=score)
    return PairResult(people=people, score=score)


def generate_matching(
    roster: Sequence[Person],
    ledger: MeetingLedger,
    config: Optional[RotationConfig] = None,
) -> List[GroupResult]:
    """Split the roster into pairs (plus one triple for odd sizes).

    The pairing repeats as few past meetings as possible. Rosters of zero
    or one person produce no groups. The result only depends on the roster
    order and the ledger contents.

    Args:
        roster: People to group; ids must be unique
        ledger: Past meeting counts (read only)
        config: Engine settings, defaults to ``RotationConfig()``

    Returns:
        List of PairResult / TripleResult, every person in exactly one group

    Raises:
        DuplicatePersonException: If the roster repeats an id
        MatchingInvariantException: If the solver produced an inconsistent result
    """
    config = config or RotationConfig()
    roster = list(roster)
    if config.check_preconditions:
        validate_roster(roster)

    n = len(roster)
    if n < DIRECT_PAIR_SIZE:
        logger.info(f"Roster of {n} cannot be paired; no groups generated")
        return []

    cost_model = CostModel(roster, ledger)
    if n == DIRECT_PAIR_SIZE:
        groups = [_build_group((0, 1), cost_model)]
    else:
        mate = minimum_cost_matching(
            n, cost_model.weight, verify=config.verify_optimality
        )
        pairs = pairs_from_mate(mate)
        leftover = unmatched_vertices(mate)
        if leftover:
            indices = resolve_leftover(pairs, leftover[0], cost_model)
        else:
            indices = list(pairs)
        groups = [_build_group(group, cost_model) for group in indices]

    logger.info(
        f"Generated {len(groups)} groups for {n} people "
        f"(total repeat score {total_score(groups)})"
    )
    return groups


def update_history(
    ledger: MeetingLedger, groups: Sequence[GroupResult]
) -> MeetingLedger:
    """Return a new ledger with every pair inside every group counted once more.

    A triple adds three pair meetings. The input ledger is left untouched,
    and applying the same groups twice counts them twice.

    Raises:
        InvalidPairingException: If a group is malformed
    """
    validate_groups(groups)
    updated = MeetingLedger(ledger.counts)
    for group in groups:
        updated = updated.record_group(group.member_ids())
    logger.debug(f"Recorded {len(groups)} groups into ledger")
    return updated
