"""Rotation Pairing: pairs people for a recurring rotation.

Groupings prefer people who have met least often before. Odd rosters get
one triple.
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

from rotationpairing.models import (
    GroupResult,
    MeetingLedger,
    PairResult,
    Person,
    RotationConfig,
    TripleResult,
)
from rotationpairing.pairing import generate_matching, update_history

__version__ = "0.1.0"

__all__ = [
    "Person",
    "MeetingLedger",
    "GroupResult",
    "PairResult",
    "TripleResult",
    "RotationConfig",
    "generate_matching",
    "update_history",
]
