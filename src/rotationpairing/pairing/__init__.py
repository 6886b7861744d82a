"""Matching engine for the rotation.

The public entry points are :func:`generate_matching` and
:func:`update_history`; the solver lives in :mod:`.blossom`.
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

from rotationpairing.pairing.blossom import (
    maximum_weight_matching,
    minimum_cost_matching,
    pairs_from_mate,
)
from rotationpairing.pairing.cost_model import CostModel
from rotationpairing.pairing.odd_vertex import choose_host_pair, resolve_leftover
from rotationpairing.pairing.rotation import generate_matching, update_history

__all__ = [
    "CostModel",
    "maximum_weight_matching",
    "minimum_cost_matching",
    "pairs_from_mate",
    "choose_host_pair",
    "resolve_leftover",
    "generate_matching",
    "update_history",
]
