import random
from collections import Counter
from itertools import combinations

import pytest

from rotationpairing.constants import GROUP_PAIR, GROUP_TRIPLE
from rotationpairing.exceptions import DuplicatePersonException
from rotationpairing.models import (
    MeetingLedger,
    PairResult,
    Person,
    RotationConfig,
    TripleResult,
)
from rotationpairing.pairing import generate_matching, update_history
from tests.utils import (
    brute_force_min_cost,
    group_ids,
    make_roster,
    numbered_roster,
    random_ledger,
)


def _ledger(**counts):
    """Build a ledger from keyword pairs like ``a_b=3``."""
    return MeetingLedger(
        {frozenset(key.split("_")): count for key, count in counts.items()}
    )


def test_empty_roster_has_no_groups():
    assert generate_matching([], MeetingLedger()) == []


def test_single_person_has_no_groups():
    assert generate_matching(make_roster("Alice"), MeetingLedger()) == []


def test_two_people_form_one_pair_with_their_history():
    roster = make_roster("Alice", "Bob")
    groups = generate_matching(roster, _ledger(alice_bob=4))
    assert groups == [PairResult(people=(roster[0], roster[1]), score=4)]


@pytest.mark.parametrize("n", range(2, 12))
def test_every_person_in_exactly_one_group(n):
    roster = numbered_roster(n)
    ledger = random_ledger(roster, random.Random(n))
    groups = generate_matching(roster, ledger)

    seen = Counter(person_id for group in groups for person_id in group.member_ids())
    assert set(seen) == {person.id for person in roster}
    assert all(count == 1 for count in seen.values())
    # the leftover joins a pair, so odd rosters still give n // 2 groups
    assert len(groups) == n // 2

    triples = [g for g in groups if g.kind == GROUP_TRIPLE]
    pairs = [g for g in groups if g.kind == GROUP_PAIR]
    assert len(triples) == (1 if n % 2 == 1 else 0)
    assert len(pairs) == n // 2 - len(triples)


def test_scores_are_pairwise_history_sums():
    roster = numbered_roster(7)
    ledger = random_ledger(roster, random.Random(3))
    for group in generate_matching(roster, ledger):
        pairs = combinations(group.member_ids(), 2)
        assert group.score == sum(ledger.count(a, b) for a, b in pairs)


@pytest.mark.parametrize("n", [4, 6, 8])
def test_even_roster_total_score_is_optimal(n):
    rng = random.Random(42 + n)
    roster = numbered_roster(n)
    for _ in range(10):
        ledger = random_ledger(roster, rng, max_count=6)
        groups = generate_matching(roster, ledger)
        best = brute_force_min_cost(
            n, lambda i, j: ledger.count(roster[i].id, roster[j].id)
        )
        assert sum(group.score for group in groups) == best


def test_output_is_deterministic():
    roster = numbered_roster(9)
    ledger = random_ledger(roster, random.Random(9), max_count=2)
    assert generate_matching(roster, ledger) == generate_matching(roster, ledger)


def test_duplicate_ids_are_rejected():
    roster = [Person("1", "Ann"), Person("2", "Bob"), Person("1", "Ann again")]
    with pytest.raises(DuplicatePersonException) as excinfo:
        generate_matching(roster, MeetingLedger())
    assert excinfo.value.person_id == "1"


def test_unchecked_roster_skips_duplicate_check():
    ann = Person("1", "Ann")
    roster = [ann, ann, Person("2", "Bob"), Person("3", "Cy")]
    config = RotationConfig(check_preconditions=False)
    assert len(generate_matching(roster, MeetingLedger(), config)) == 2


def test_ledger_is_not_modified():
    roster = numbered_roster(6)
    ledger = random_ledger(roster, random.Random(1))
    before = dict(ledger.counts)
    generate_matching(roster, ledger)
    assert dict(ledger.counts) == before


def test_config_without_verification_gives_same_groups():
    roster = numbered_roster(10)
    ledger = random_ledger(roster, random.Random(10))
    quick = RotationConfig(verify_optimality=False)
    assert generate_matching(roster, ledger, quick) == generate_matching(roster, ledger)


# ========== Scenarios ==========


def test_five_people_without_history():
    roster = make_roster("Alice", "Bob", "Charlie", "Diana", "Eve")
    groups = generate_matching(roster, MeetingLedger())

    assert len(groups) == 2
    assert sorted(group.kind for group in groups) == [GROUP_PAIR, GROUP_TRIPLE]
    assert all(group.score == 0 for group in groups)


def test_four_people_avoid_repeated_pair():
    roster = make_roster("A", "B", "C", "D")
    groups = generate_matching(roster, _ledger(a_b=3))

    assert sorted(group_ids(groups)) in (
        [["a", "c"], ["b", "d"]],
        [["a", "d"], ["b", "c"]],
    )
    assert sum(group.score for group in groups) == 0


def test_three_people_with_equal_history_form_a_triple():
    roster = make_roster("A", "B", "C")
    groups = generate_matching(roster, _ledger(a_b=2, a_c=2, b_c=2))

    assert len(groups) == 1
    assert isinstance(groups[0], TripleResult)
    assert groups[0].score == 6


def test_repeated_rounds_spread_meetings():
    roster = make_roster("Alice", "Bob", "Charlie", "Diana", "Eve")
    ledger = MeetingLedger()
    totals = {person.id: 0 for person in roster}

    for round_number in range(1, 7):
        groups = generate_matching(roster, ledger)
        ledger = update_history(ledger, groups)

        for person in roster:
            current = ledger.meetings_for(person.id)
            assert current > totals[person.id]
            totals[person.id] = current

        # one pair and one triple per round: four pair meetings
        assert ledger.total_meetings() == 4 * round_number
        assert all(count <= round_number for _ids, count in ledger.pairs())

    # Nobody should be stuck meeting the same partner every week
    assert max(count for _ids, count in ledger.pairs()) < 6
