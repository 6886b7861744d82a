import pytest

from rotationpairing.exceptions import MatchingInvariantException
from rotationpairing.models import MeetingLedger
from rotationpairing.pairing import CostModel, choose_host_pair, resolve_leftover
from tests.utils import make_roster


@pytest.fixture
def cost_model():
    # a b c d e -> 0 1 2 3 4
    roster = make_roster("A", "B", "C", "D", "E")
    ledger = MeetingLedger.from_pairs(
        [("a", "e"), ("a", "e"), ("b", "e"), ("c", "e"), ("d", "a")]
    )
    return CostModel(roster, ledger)


def test_host_pair_has_lowest_added_cost(cost_model):
    # (0, 1) adds 2 + 1, (2, 3) adds 1 + 0
    index, added = choose_host_pair([(0, 1), (2, 3)], 4, cost_model)
    assert (index, added) == (1, 1)


def test_first_pair_wins_ties():
    roster = make_roster("A", "B", "C", "D", "E")
    model = CostModel(roster, MeetingLedger())
    assert choose_host_pair([(0, 1), (2, 3)], 4, model) == (0, 0)
    assert choose_host_pair([(2, 3), (0, 1)], 4, model) == (0, 0)


def test_resolve_leftover_appends_to_host(cost_model):
    groups = resolve_leftover([(0, 1), (2, 3)], 4, cost_model)
    assert groups == [(0, 1), (2, 3, 4)]


def test_resolve_leftover_with_single_pair():
    model = CostModel(make_roster("A", "B", "C"), MeetingLedger())
    assert resolve_leftover([(0, 2)], 1, model) == [(0, 2, 1)]


def test_no_pairs_is_an_invariant_violation(cost_model):
    with pytest.raises(MatchingInvariantException):
        choose_host_pair([], 4, cost_model)


def test_matched_leftover_is_an_invariant_violation(cost_model):
    with pytest.raises(MatchingInvariantException) as excinfo:
        choose_host_pair([(0, 1), (2, 4)], 4, cost_model)
    assert excinfo.value.vertices == (4,)
