"""Weighted matching on general graphs (primal-dual blossom method).

The rotation needs a matching of maximum cardinality that, among all such
matchings, repeats as few past meetings as possible. This is solved by
turning the past-meeting counts into positive weights for which every
maximum-weight matching is also of maximum cardinality, and running an
Edmonds blossom solver on the result.

The solver keeps a dual value for every vertex and every blossom. Only
edges with zero slack ("tight" edges) may join an alternating tree. Each
stage grows alternating trees from the unmatched vertices, shrinking odd
cycles into blossoms, until it finds an augmenting path. When it gets
stuck it changes the duals by the smallest amount that either tightens a
new edge, lets a blossom dual reach zero, or proves that no augmenting
path remains. A stage takes O(n**2), and there are at most n/2 stages.

Vertex duals are stored doubled so that integer weights keep every
quantity integral.
"""

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
from typing import Iterator, List, Optional, Sequence, Tuple

from rotationpairing.constants import UNMATCHED
from rotationpairing.exceptions import (
    InvalidPairingException,
    MatchingInvariantException,
    NegativeWeightException,
)
from rotationpairing.type_hints import Edge, Mate, VertexPair, WeightFunction
from rotationpairing.utils import setup_logger

logger = setup_logger(__name__)

# Vertex / blossom labels
_FREE = 0
_OUTER = 1  # "S" label: even distance from a tree root
_INNER = 2  # "T" label: odd distance from a tree root
_BREADCRUMB = 4  # temporary mark while tracing two tree paths

# Delta step kinds
_DELTA_DONE = 1  # a vertex dual hit zero: no augmenting path left
_DELTA_GROW = 2  # edge from an outer vertex to a free vertex became tight
_DELTA_SHRINK = 3  # edge between two outer blossoms became tight
_DELTA_EXPAND = 4  # dual of an inner blossom hit zero


class _BlossomMatcher:
    """State of one maximum-weight matching computation.

    Edges are addressed by index ``k``; the two ends of edge ``k`` are the
    endpoints ``2k`` and ``2k + 1`` and ``endpoint[p]`` is the vertex at
    endpoint ``p``. While solving, ``mate[v]`` is the remote endpoint of the
    matched edge at ``v``, so ``p ^ 1`` flips to the other end.

    Blossoms are numbered ``n .. 2n-1``; numbers ``0 .. n-1`` stand for
    the trivial blossom made of a single vertex.
    """

    def __init__(self, num_vertices: int, edges: Sequence[Edge]):
        n = num_vertices
        self.num_vertices = n
        self.edges: List[Edge] = list(edges)

        max_weight = max([0] + [w for _i, _j, w in self.edges])

        self.endpoint: List[int] = [
            self.edges[p // 2][p % 2] for p in range(2 * len(self.edges))
        ]
        self.neighbour_ends: List[List[int]] = [[] for _ in range(n)]
        for k, (i, j, _w) in enumerate(self.edges):
            self.neighbour_ends[i].append(2 * k + 1)
            self.neighbour_ends[j].append(2 * k)

        self.mate: List[int] = [UNMATCHED] * n
        self.label: List[int] = [_FREE] * (2 * n)
        # Endpoint through which a labelled blossom got its label
        self.label_end: List[int] = [-1] * (2 * n)
        # Top-level blossom containing each vertex
        self.in_blossom: List[int] = list(range(n))
        self.blossom_parent: List[int] = [-1] * (2 * n)
        self.blossom_children: List[Optional[List[int]]] = [None] * (2 * n)
        self.blossom_base: List[int] = list(range(n)) + [-1] * n
        # blossom_endpoints[b][i] connects blossom_children[b][i] to [i + 1]
        self.blossom_endpoints: List[Optional[List[int]]] = [None] * (2 * n)
        # Least-slack edge to a different outer blossom (or, for a free
        # vertex, from any outer vertex)
        self.best_edge: List[int] = [-1] * (2 * n)
        self.blossom_best_edges: List[Optional[List[int]]] = [None] * (2 * n)
        self.unused_blossoms: List[int] = list(range(n, 2 * n))
        self.dual: List[int] = [max_weight] * n + [0] * n
        self.allowed: List[bool] = [False] * len(self.edges)
        self.queue: List[int] = []

        self.stages = 0
        self.dual_updates = 0

    # ----- helpers -----

    def _require(self, condition: bool, message: str, *vertices: int) -> None:
        if not condition:
            logger.error(f"Matching invariant broken: {message} {vertices}")
            raise MatchingInvariantException(message, vertices)

    def _slack(self, k: int) -> int:
        i, j, w = self.edges[k]
        return self.dual[i] + self.dual[j] - 2 * w

    def _leaves(self, b: int) -> Iterator[int]:
        """Yield the vertices inside (possibly nested) blossom ``b``."""
        if b < self.num_vertices:
            yield b
            return
        for child in self.blossom_children[b]:
            if child < self.num_vertices:
                yield child
            else:
                yield from self._leaves(child)

    # ----- tree growth -----

    def _assign_label(self, w: int, t: int, p: int) -> None:
        """Label vertex ``w`` and its top-level blossom, reached via endpoint ``p``."""
        b = self.in_blossom[w]
        self._require(
            self.label[w] == _FREE and self.label[b] == _FREE,
            "labelling an already labelled vertex",
            w,
        )
        self.label[w] = self.label[b] = t
        self.label_end[w] = self.label_end[b] = p
        self.best_edge[w] = self.best_edge[b] = -1
        if t == _OUTER:
            self.queue.extend(self._leaves(b))
        elif t == _INNER:
            # The mate of an inner blossom's base becomes outer
            base = self.blossom_base[b]
            self._require(self.mate[base] >= 0, "inner blossom base is unmatched", base)
            self._assign_label(
                self.endpoint[self.mate[base]], _OUTER, self.mate[base] ^ 1
            )

    def _scan_blossom(self, v: int, w: int) -> int:
        """Trace back from ``v`` and ``w`` to find a new blossom or an augmenting path.

        Returns the base vertex of the new blossom, or -1 when the two
        paths reach different roots.
        """
        path: List[int] = []
        base = -1
        while v != -1 or w != -1:
            b = self.in_blossom[v]
            if self.label[b] & _BREADCRUMB:
                base = self.blossom_base[b]
                break
            self._require(
                self.label[b] == _OUTER, "tracing through a non-outer blossom", v
            )
            path.append(b)
            self.label[b] = _OUTER | _BREADCRUMB
            self._require(
                self.label_end[b] == self.mate[self.blossom_base[b]],
                "outer blossom not reached through its base mate",
                v,
            )
            if self.label_end[b] == -1:
                # Reached a root
                v = -1
            else:
                v = self.endpoint[self.label_end[b]]
                b = self.in_blossom[v]
                self._require(self.label[b] == _INNER, "expected an inner blossom", v)
                v = self.endpoint[self.label_end[b]]
            # Alternate between the two paths
            if w != -1:
                v, w = w, v
        for b in path:
            self.label[b] = _OUTER
        return base

    def _add_blossom(self, base: int, k: int) -> None:
        """Shrink the odd cycle closed by edge ``k`` into a new blossom."""
        v, w, _wt = self.edges[k]
        bb = self.in_blossom[base]
        bv = self.in_blossom[v]
        bw = self.in_blossom[w]

        b = self.unused_blossoms.pop()
        self.blossom_base[b] = base
        self.blossom_parent[b] = -1
        self.blossom_parent[bb] = b
        self.blossom_children[b] = path = []
        self.blossom_endpoints[b] = endps = []

        # Walk from v back to the base
        while bv != bb:
            self.blossom_parent[bv] = b
            path.append(bv)
            endps.append(self.label_end[bv])
            self._require(self.label_end[bv] >= 0, "blossom path leaves the tree", v)
            v = self.endpoint[self.label_end[bv]]
            bv = self.in_blossom[v]
        path.append(bb)
        path.reverse()
        endps.reverse()
        endps.append(2 * k)

        # Walk from w back to the base
        while bw != bb:
            self.blossom_parent[bw] = b
            path.append(bw)
            endps.append(self.label_end[bw] ^ 1)
            self._require(self.label_end[bw] >= 0, "blossom path leaves the tree", w)
            w = self.endpoint[self.label_end[bw]]
            bw = self.in_blossom[w]

        self._require(self.label[bb] == _OUTER, "blossom base is not outer", base)
        self.label[b] = _OUTER
        self.label_end[b] = self.label_end[bb]
        self.dual[b] = 0

        for leaf in self._leaves(b):
            if self.label[self.in_blossom[leaf]] == _INNER:
                # Former inner vertices become outer and must be scanned
                self.queue.append(leaf)
            self.in_blossom[leaf] = b

        # Merge least-slack edges of the sub-blossoms
        best_edge_to = [-1] * (2 * self.num_vertices)
        for child in path:
            if self.blossom_best_edges[child] is None:
                edge_lists = [
                    [p // 2 for p in self.neighbour_ends[leaf]]
                    for leaf in self._leaves(child)
                ]
            else:
                edge_lists = [self.blossom_best_edges[child]]
            for edge_list in edge_lists:
                for e in edge_list:
                    i, j, _w = self.edges[e]
                    if self.in_blossom[j] == b:
                        i, j = j, i
                    bj = self.in_blossom[j]
                    if (
                        bj != b
                        and self.label[bj] == _OUTER
                        and (
                            best_edge_to[bj] == -1
                            or self._slack(e) < self._slack(best_edge_to[bj])
                        )
                    ):
                        best_edge_to[bj] = e
            self.blossom_best_edges[child] = None
            self.best_edge[child] = -1

        self.blossom_best_edges[b] = [e for e in best_edge_to if e != -1]
        self.best_edge[b] = -1
        for e in self.blossom_best_edges[b]:
            current = self.best_edge[b]
            if current == -1 or self._slack(e) < self._slack(current):
                self.best_edge[b] = e

        logger.debug(f"Shrank blossom {b} with base {base} ({len(path)} children)")

    def _expand_blossom(self, b: int, end_of_stage: bool) -> None:
        """Dissolve blossom ``b`` back into its children."""
        n = self.num_vertices
        children = self.blossom_children[b]
        for child in children:
            self.blossom_parent[child] = -1
            if child < n:
                self.in_blossom[child] = child
            elif end_of_stage and self.dual[child] == 0:
                self._expand_blossom(child, end_of_stage)
            else:
                for leaf in self._leaves(child):
                    self.in_blossom[leaf] = child

        if not end_of_stage and self.label[b] == _INNER:
            # Relabel the children that lie on the even path from the
            # entry child to the base; the others become free again.
            self._require(self.label_end[b] >= 0, "inner blossom without entry edge")
            entry_child = self.in_blossom[self.endpoint[self.label_end[b] ^ 1]]
            j = children.index(entry_child)
            if j & 1:
                j -= len(children)
                j_step = 1
                endp_trick = 0
            else:
                j_step = -1
                endp_trick = 1
            endps = self.blossom_endpoints[b]
            p = self.label_end[b]
            while j != 0:
                self.label[self.endpoint[p ^ 1]] = _FREE
                q = endps[j - endp_trick] ^ endp_trick
                self.label[self.endpoint[q ^ 1]] = _FREE
                self._assign_label(self.endpoint[p ^ 1], _INNER, p)
                self.allowed[endps[j - endp_trick] // 2] = True
                j += j_step
                p = endps[j - endp_trick] ^ endp_trick
                self.allowed[p // 2] = True
                j += j_step
            # The base child becomes inner without relabelling its mate
            bv = children[j]
            self.label[self.endpoint[p ^ 1]] = self.label[bv] = _INNER
            self.label_end[self.endpoint[p ^ 1]] = self.label_end[bv] = p
            self.best_edge[bv] = -1
            j += j_step
            while children[j] != entry_child:
                bv = children[j]
                if self.label[bv] == _OUTER:
                    j += j_step
                    continue
                reached = -1
                for leaf in self._leaves(bv):
                    if self.label[leaf] != _FREE:
                        reached = leaf
                        break
                if reached != -1:
                    self._require(
                        self.label[reached] == _INNER
                        and self.in_blossom[reached] == bv,
                        "unexpected label inside expanded blossom",
                        reached,
                    )
                    self.label[reached] = _FREE
                    self.label[self.endpoint[self.mate[self.blossom_base[bv]]]] = _FREE
                    self._assign_label(reached, _INNER, self.label_end[reached])
                j += j_step

        self.label[b] = self.label_end[b] = -1
        self.blossom_children[b] = self.blossom_endpoints[b] = None
        self.blossom_base[b] = -1
        self.blossom_best_edges[b] = None
        self.best_edge[b] = -1
        self.unused_blossoms.append(b)

    # ----- augmentation -----

    def _augment_blossom(self, b: int, v: int) -> None:
        """Rotate blossom ``b`` so that vertex ``v`` becomes its base."""
        t = v
        while self.blossom_parent[t] != b:
            t = self.blossom_parent[t]
        if t >= self.num_vertices:
            self._augment_blossom(t, v)

        children = self.blossom_children[b]
        endps = self.blossom_endpoints[b]
        i = j = children.index(t)
        if i & 1:
            j -= len(children)
            j_step = 1
            endp_trick = 0
        else:
            j_step = -1
            endp_trick = 1
        while j != 0:
            j += j_step
            t = children[j]
            p = endps[j - endp_trick] ^ endp_trick
            if t >= self.num_vertices:
                self._augment_blossom(t, self.endpoint[p])
            j += j_step
            t = children[j]
            if t >= self.num_vertices:
                self._augment_blossom(t, self.endpoint[p ^ 1])
            self.mate[self.endpoint[p]] = p ^ 1
            self.mate[self.endpoint[p ^ 1]] = p

        self.blossom_children[b] = children[i:] + children[:i]
        self.blossom_endpoints[b] = endps[i:] + endps[:i]
        self.blossom_base[b] = self.blossom_base[self.blossom_children[b][0]]
        self._require(self.blossom_base[b] == v, "blossom rotation missed new base", v)

    def _augment_matching(self, k: int) -> None:
        """Flip the augmenting path that runs through edge ``k``."""
        v, w, _wt = self.edges[k]
        logger.debug(f"Augmenting through edge ({v}, {w})")
        for s, p in ((v, 2 * k + 1), (w, 2 * k)):
            while True:
                bs = self.in_blossom[s]
                self._require(
                    self.label[bs] == _OUTER, "augmenting path left outer side", s
                )
                self._require(
                    self.label_end[bs] == self.mate[self.blossom_base[bs]],
                    "augmenting path does not follow matched edge",
                    s,
                )
                if bs >= self.num_vertices:
                    self._augment_blossom(bs, s)
                self.mate[s] = p
                if self.label_end[bs] == -1:
                    # Reached the root
                    break
                t = self.endpoint[self.label_end[bs]]
                bt = self.in_blossom[t]
                self._require(self.label[bt] == _INNER, "augmenting path broken", t)
                s = self.endpoint[self.label_end[bt]]
                j = self.endpoint[self.label_end[bt] ^ 1]
                self._require(
                    self.blossom_base[bt] == t, "inner blossom entered off base", t
                )
                if bt >= self.num_vertices:
                    self._augment_blossom(bt, j)
                self.mate[j] = self.label_end[bt]
                p = self.label_end[bt] ^ 1

    # ----- stages -----

    def _reset_stage(self) -> None:
        n = self.num_vertices
        self.label[:] = [_FREE] * (2 * n)
        self.best_edge[:] = [-1] * (2 * n)
        self.blossom_best_edges[n:] = [None] * n
        self.allowed[:] = [False] * len(self.edges)
        self.queue[:] = []

    def _scan_queue(self) -> bool:
        """Grow the alternating forest from queued outer vertices.

        Returns True once the matching has been augmented.
        """
        while self.queue:
            v = self.queue.pop()
            self._require(
                self.label[self.in_blossom[v]] == _OUTER, "queued vertex not outer", v
            )
            for p in self.neighbour_ends[v]:
                k = p // 2
                w = self.endpoint[p]
                if self.in_blossom[v] == self.in_blossom[w]:
                    continue
                k_slack = 0
                if not self.allowed[k]:
                    k_slack = self._slack(k)
                    if k_slack <= 0:
                        self.allowed[k] = True
                if self.allowed[k]:
                    if self.label[self.in_blossom[w]] == _FREE:
                        self._assign_label(w, _INNER, p ^ 1)
                    elif self.label[self.in_blossom[w]] == _OUTER:
                        base = self._scan_blossom(v, w)
                        if base >= 0:
                            self._add_blossom(base, k)
                        else:
                            self._augment_matching(k)
                            return True
                    elif self.label[w] == _FREE:
                        # w is inside an inner blossom but not yet reached
                        self.label[w] = _INNER
                        self.label_end[w] = p ^ 1
                elif self.label[self.in_blossom[w]] == _OUTER:
                    b = self.in_blossom[v]
                    current = self.best_edge[b]
                    if current == -1 or k_slack < self._slack(current):
                        self.best_edge[b] = k
                elif self.label[w] == _FREE:
                    current = self.best_edge[w]
                    if current == -1 or k_slack < self._slack(current):
                        self.best_edge[w] = k
        return False

    def _compute_delta(self) -> Tuple[int, int, int, int]:
        """Smallest dual change that unblocks the search.

        Returns ``(kind, delta, edge, blossom)``.
        """
        n = self.num_vertices
        kind = _DELTA_DONE
        delta = min(self.dual[:n])
        delta_edge = -1
        delta_blossom = -1

        for v in range(n):
            if self.label[self.in_blossom[v]] == _FREE and self.best_edge[v] != -1:
                d = self._slack(self.best_edge[v])
                if d < delta:
                    kind, delta, delta_edge = _DELTA_GROW, d, self.best_edge[v]

        for b in range(2 * n):
            if (
                self.blossom_parent[b] == -1
                and self.label[b] == _OUTER
                and self.best_edge[b] != -1
            ):
                k_slack = self._slack(self.best_edge[b])
                self._require(k_slack % 2 == 0, "odd slack between outer blossoms", b)
                d = k_slack // 2
                if d < delta:
                    kind, delta, delta_edge = _DELTA_SHRINK, d, self.best_edge[b]

        for b in range(n, 2 * n):
            if (
                self.blossom_base[b] >= 0
                and self.blossom_parent[b] == -1
                and self.label[b] == _INNER
                and self.dual[b] < delta
            ):
                kind, delta, delta_blossom = _DELTA_EXPAND, self.dual[b], b

        return kind, delta, delta_edge, delta_blossom

    def _apply_delta(self, delta: int) -> None:
        n = self.num_vertices
        for v in range(n):
            if self.label[self.in_blossom[v]] == _OUTER:
                self.dual[v] -= delta
            elif self.label[self.in_blossom[v]] == _INNER:
                self.dual[v] += delta
        for b in range(n, 2 * n):
            if self.blossom_base[b] >= 0 and self.blossom_parent[b] == -1:
                if self.label[b] == _OUTER:
                    self.dual[b] += delta
                elif self.label[b] == _INNER:
                    self.dual[b] -= delta
        self.dual_updates += 1

    def _run_stage(self) -> bool:
        """Search for one augmenting path. Returns True if one was applied."""
        self.stages += 1
        self._reset_stage()
        for v in range(self.num_vertices):
            if self.mate[v] == UNMATCHED and self.label[self.in_blossom[v]] == _FREE:
                self._assign_label(v, _OUTER, -1)

        while True:
            if self._scan_queue():
                return True

            kind, delta, delta_edge, delta_blossom = self._compute_delta()
            self._apply_delta(delta)

            if kind == _DELTA_DONE:
                return False
            if kind == _DELTA_GROW:
                self.allowed[delta_edge] = True
                i, j, _w = self.edges[delta_edge]
                if self.label[self.in_blossom[i]] == _FREE:
                    i, j = j, i
                self._require(
                    self.label[self.in_blossom[i]] == _OUTER,
                    "grow edge lost its outer end",
                    i,
                )
                self.queue.append(i)
            elif kind == _DELTA_SHRINK:
                self.allowed[delta_edge] = True
                i, _j, _w = self.edges[delta_edge]
                self._require(
                    self.label[self.in_blossom[i]] == _OUTER,
                    "shrink edge lost its outer end",
                    i,
                )
                self.queue.append(i)
            else:
                self._expand_blossom(delta_blossom, False)

    def solve(self) -> Mate:
        """Run all stages and return ``mate`` indexed by vertex."""
        n = self.num_vertices
        for _ in range(n):
            if not self._run_stage():
                break
            # Outer blossoms whose dual dropped to zero are no longer needed
            for b in range(n, 2 * n):
                if (
                    self.blossom_parent[b] == -1
                    and self.blossom_base[b] >= 0
                    and self.label[b] == _OUTER
                    and self.dual[b] == 0
                ):
                    self._expand_blossom(b, True)

        mate = [self.endpoint[p] if p >= 0 else UNMATCHED for p in self.mate]
        logger.debug(
            f"Solved {n} vertices in {self.stages} stages "
            f"with {self.dual_updates} dual updates"
        )
        return mate

    # ----- certificate -----

    def verify_optimum(self, mate: Mate) -> None:
        """Check complementary slackness between ``mate`` and the final duals.

        Raises MatchingInvariantException if the matching is not provably
        optimal.
        """
        n = self.num_vertices
        for v in range(n):
            if mate[v] != UNMATCHED:
                self._require(
                    mate[mate[v]] == v, "mate array is not symmetric", v, mate[v]
                )

        self._require(min(self.dual[:n]) >= 0, "negative vertex dual")
        for b in range(n, 2 * n):
            if self.blossom_base[b] >= 0:
                self._require(
                    self.dual[b] >= 0, "negative blossom dual", self.blossom_base[b]
                )

        for i, j, w in self.edges:
            s = self.dual[i] + self.dual[j] - 2 * w
            i_blossoms = [i]
            j_blossoms = [j]
            while self.blossom_parent[i_blossoms[-1]] != -1:
                i_blossoms.append(self.blossom_parent[i_blossoms[-1]])
            while self.blossom_parent[j_blossoms[-1]] != -1:
                j_blossoms.append(self.blossom_parent[j_blossoms[-1]])
            for bi, bj in zip(reversed(i_blossoms), reversed(j_blossoms)):
                if bi != bj:
                    break
                s += 2 * self.dual[bi]
            self._require(s >= 0, "edge with negative slack", i, j)
            if mate[i] == j:
                self._require(s == 0, "matched edge is not tight", i, j)

        for v in range(n):
            if mate[v] == UNMATCHED:
                self._require(
                    self.dual[v] == 0, "unmatched vertex with positive dual", v
                )

        for b in range(n, 2 * n):
            if self.blossom_base[b] >= 0 and self.dual[b] > 0:
                endps = self.blossom_endpoints[b]
                self._require(
                    len(endps) % 2 == 1, "blossom of even length", self.blossom_base[b]
                )
                for p in endps[1::2]:
                    self._require(
                        mate[self.endpoint[p]] == self.endpoint[p ^ 1],
                        "blossom with positive dual is not full",
                        self.endpoint[p],
                        self.endpoint[p ^ 1],
                    )


def maximum_weight_matching(
    num_vertices: int, edges: Sequence[Edge], verify: bool = True
) -> Mate:
    """Compute a maximum-weight matching of a general graph.

    Parameters
    ----------
    num_vertices : int
        Vertices are ``0 .. num_vertices - 1``.
    edges : sequence of (int, int, int)
        ``(u, v, weight)`` with ``u != v``; at most one edge per pair.
    verify : bool
        Check the dual certificate before returning.

    Returns
    -------
    list of int
        ``mate[v]`` is the partner of ``v`` or ``UNMATCHED``.
    """
    if not edges:
        return [UNMATCHED] * num_vertices
    for u, v, _w in edges:
        if u == v or not (0 <= u < num_vertices and 0 <= v < num_vertices):
            raise MatchingInvariantException("edge has invalid endpoints", (u, v))

    matcher = _BlossomMatcher(num_vertices, edges)
    mate = matcher.solve()
    if verify:
        matcher.verify_optimum(mate)
    return mate


def _cardinality_weights(num_vertices: int, costs: Sequence[Edge]) -> List[Edge]:
    """Turn costs into weights whose maximum-weight matchings are exactly the
    maximum-cardinality matchings of minimum total cost.

    Every weight ends up at least ``num_vertices`` times the spread between
    the largest and smallest weight, so adding one more matched edge always
    beats any rearrangement of the costs.
    """
    max_cost = max(c for _u, _v, c in costs)
    min_cost = min(c for _u, _v, c in costs)
    offset = max_cost + max(1, num_vertices * (max_cost - min_cost))
    return [(u, v, offset - c) for u, v, c in costs]


def minimum_cost_matching(
    num_vertices: int, weight: WeightFunction, verify: bool = True
) -> Mate:
    """Maximum-cardinality matching of minimum total weight on a complete graph.

    ``weight(i, j)`` must be a non-negative integer for every ``i < j``.
    At most one vertex is left unmatched (when ``num_vertices`` is odd).
    """
    if num_vertices < 2:
        return [UNMATCHED] * num_vertices

    costs: List[Edge] = []
    for i, j in combinations(range(num_vertices), 2):
        w = weight(i, j)
        if isinstance(w, bool) or not isinstance(w, int):
            raise InvalidPairingException(
                f"Weight of ({i}, {j}) is not an integer: {w!r}"
            )
        if w < 0:
            raise NegativeWeightException(f"Weight of ({i}, {j}) is negative: {w}")
        costs.append((i, j, w))

    edges = _cardinality_weights(num_vertices, costs)
    mate = maximum_weight_matching(num_vertices, edges, verify)

    unmatched = [v for v in range(num_vertices) if mate[v] == UNMATCHED]
    if len(unmatched) != num_vertices % 2:
        raise MatchingInvariantException(
            "complete graph matching is not of maximum cardinality", unmatched
        )
    return mate


def pairs_from_mate(mate: Mate) -> List[VertexPair]:
    """List matched pairs ``(i, j)`` with ``i < j`` in ascending order of ``i``."""
    pairs: List[VertexPair] = []
    matched = set()
    for i, j in enumerate(mate):
        if j == UNMATCHED or j < i:
            continue
        if i in matched or j in matched or mate[j] != i:
            raise MatchingInvariantException("vertex matched more than once", (i, j))
        pairs.append((i, j))
        matched.update((i, j))
    return pairs


def unmatched_vertices(mate: Mate) -> List[int]:
    return [v for v, partner in enumerate(mate) if partner == UNMATCHED]
