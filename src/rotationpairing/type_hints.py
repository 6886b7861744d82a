"""Type hints used in Rotation Pairing."""

from typing import Callable, List, Literal, Tuple

# Group kind literals (for type hints)
GroupKind = Literal["pair", "triple"]

# Unordered pair of person ids, stored as a frozenset
PairKey = frozenset
# Ordered pair of person ids (as read from a history file)
PairIDs = Tuple[str, str]

# Vertex indices into the roster
VertexPair = Tuple[int, int]
# (u, v, weight) edge of the matching graph
Edge = Tuple[int, int, int]
# mate[v] is the partner of v, or UNMATCHED
Mate = List[int]
# Past-meeting count between two roster indices
WeightFunction = Callable[[int, int], int]

#  LocalWords:  VertexPair WeightFunction
