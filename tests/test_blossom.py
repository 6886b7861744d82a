import random
from itertools import combinations

import pytest

from rotationpairing.constants import UNMATCHED
from rotationpairing.exceptions import (
    InvalidPairingException,
    MatchingInvariantException,
    NegativeWeightException,
)
from rotationpairing.pairing.blossom import (
    maximum_weight_matching,
    minimum_cost_matching,
    pairs_from_mate,
    unmatched_vertices,
)
from tests.utils import brute_force_min_cost


def _matrix_weight(matrix):
    return lambda i, j: matrix[min(i, j)][max(i, j)]


def _random_matrix(n, rng, max_weight):
    matrix = [[0] * n for _ in range(n)]
    for i, j in combinations(range(n), 2):
        matrix[i][j] = rng.randint(0, max_weight)
    return matrix


def _cost(mate, weight):
    return sum(weight(i, j) for i, j in pairs_from_mate(mate))


def _assert_consistent(mate):
    for v, partner in enumerate(mate):
        if partner != UNMATCHED:
            assert partner != v
            assert mate[partner] == v


def test_empty_and_single_vertex_have_no_pairs():
    assert minimum_cost_matching(0, lambda i, j: 0) == []
    assert minimum_cost_matching(1, lambda i, j: 0) == [UNMATCHED]


def test_two_vertices_are_matched():
    assert minimum_cost_matching(2, lambda i, j: 7) == [1, 0]


def test_avoids_expensive_edge():
    # 0-1 has met three times, everything else is fresh
    matrix = [[0, 3, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]
    mate = minimum_cost_matching(4, _matrix_weight(matrix))
    assert mate[0] != 1
    assert _cost(mate, _matrix_weight(matrix)) == 0


def test_prefers_cardinality_over_cost():
    # Cheapest would be to leave vertices unmatched; every vertex must still be paired
    matrix = [[0, 9, 9, 9], [0, 0, 9, 9], [0, 0, 0, 9], [0, 0, 0, 0]]
    mate = minimum_cost_matching(4, _matrix_weight(matrix))
    assert unmatched_vertices(mate) == []
    assert _cost(mate, _matrix_weight(matrix)) == 18


def test_odd_vertex_count_leaves_exactly_one_unmatched():
    for n in (3, 5, 7, 9):
        mate = minimum_cost_matching(n, lambda i, j: (i * 7 + j * 3) % 5)
        _assert_consistent(mate)
        assert len(unmatched_vertices(mate)) == 1


@pytest.mark.parametrize("n", [4, 5, 6, 7, 8])
def test_matches_brute_force_optimum(n):
    rng = random.Random(1000 + n)
    for _ in range(25):
        matrix = _random_matrix(n, rng, max_weight=5)
        weight = _matrix_weight(matrix)
        mate = minimum_cost_matching(n, weight)
        _assert_consistent(mate)
        assert len(unmatched_vertices(mate)) == n % 2
        assert _cost(mate, weight) == brute_force_min_cost(n, weight)


def test_wide_weight_range_matches_brute_force():
    rng = random.Random(77)
    for _ in range(20):
        matrix = _random_matrix(8, rng, max_weight=1000)
        weight = _matrix_weight(matrix)
        mate = minimum_cost_matching(8, weight)
        assert _cost(mate, weight) == brute_force_min_cost(8, weight)


def test_larger_graph_is_perfect_and_consistent():
    rng = random.Random(5)
    n = 40
    matrix = _random_matrix(n, rng, max_weight=10)
    mate = minimum_cost_matching(n, _matrix_weight(matrix))
    _assert_consistent(mate)
    assert unmatched_vertices(mate) == []
    assert len(pairs_from_mate(mate)) == n // 2


def test_deterministic_for_identical_input():
    rng = random.Random(11)
    matrix = _random_matrix(12, rng, max_weight=3)
    weight = _matrix_weight(matrix)
    assert minimum_cost_matching(12, weight) == minimum_cost_matching(12, weight)


def test_rejects_negative_weight():
    with pytest.raises(NegativeWeightException):
        minimum_cost_matching(3, lambda i, j: -1 if (i, j) == (0, 2) else 0)


def test_rejects_non_integer_weight():
    with pytest.raises(InvalidPairingException):
        minimum_cost_matching(3, lambda i, j: 0.5)


def test_maximum_weight_matching_on_sparse_graph():
    # Classic example where a blossom must be shrunk and expanded
    edges = [(0, 1, 6), (0, 2, 9), (1, 2, 5), (2, 3, 4), (3, 4, 3), (4, 5, 8)]
    mate = maximum_weight_matching(6, edges)
    _assert_consistent(mate)
    assert sorted(pairs_from_mate(mate)) == [(0, 1), (2, 3), (4, 5)]


def test_maximum_weight_matching_may_leave_vertices_unmatched():
    # The heavy middle edge beats two light outer edges
    edges = [(0, 1, 1), (1, 2, 10), (2, 3, 1)]
    mate = maximum_weight_matching(4, edges)
    assert pairs_from_mate(mate) == [(1, 2)]
    assert unmatched_vertices(mate) == [0, 3]


def test_maximum_weight_matching_without_edges():
    assert maximum_weight_matching(3, []) == [UNMATCHED] * 3


def test_invalid_edge_endpoints_are_rejected():
    with pytest.raises(MatchingInvariantException):
        maximum_weight_matching(2, [(0, 0, 1)])


def test_pairs_from_mate_detects_double_matching():
    with pytest.raises(MatchingInvariantException) as excinfo:
        pairs_from_mate([2, 2, 0])
    assert excinfo.value.vertices == (1, 2)


@pytest.mark.parametrize(
    "edges, expected",
    [
        # outer blossom
        (
            [(1, 2, 8), (1, 3, 9), (2, 3, 10), (3, 4, 7), (1, 6, 5), (4, 5, 6)],
            [UNMATCHED, 6, 3, 2, 5, 4, 1],
        ),
        # inner blossom
        (
            [(1, 2, 9), (1, 3, 8), (2, 3, 10), (1, 4, 5), (4, 5, 4), (1, 6, 3)],
            [UNMATCHED, 6, 3, 2, 5, 4, 1],
        ),
        # nested outer blossom
        (
            [
                (1, 2, 9),
                (1, 3, 9),
                (2, 3, 10),
                (2, 4, 8),
                (3, 5, 8),
                (4, 5, 10),
                (5, 6, 6),
            ],
            [UNMATCHED, 3, 4, 1, 2, 6, 5],
        ),
        # nested blossom relabelled as inner
        (
            [
                (1, 2, 10),
                (1, 7, 10),
                (2, 3, 12),
                (3, 4, 20),
                (3, 5, 20),
                (4, 5, 25),
                (5, 6, 10),
                (6, 7, 10),
                (7, 8, 8),
            ],
            [UNMATCHED, 2, 1, 4, 3, 6, 5, 8, 7],
        ),
    ],
)
def test_maximum_weight_matching_blossom_cases(edges, expected):
    # Vertex 0 has no edges and stays unmatched
    assert maximum_weight_matching(len(expected), edges) == expected
