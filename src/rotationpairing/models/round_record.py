"""Data model for a confirmed rotation round."""

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

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from dateutil.relativedelta import relativedelta

from rotationpairing.models.group_result import GroupResult, group_from_dict
from rotationpairing.utils import setup_logger

logger = setup_logger(__name__)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'} ago"


@dataclass
class RoundRecord:
    """Container for the groups of a single confirmed round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    groups : list of GroupResult
        Pairs and triples that met in this round.
    held_on : date, optional
        Day the round was confirmed.
    """

    round_number: int
    groups: List[GroupResult] = field(default_factory=list)
    held_on: Optional[date] = None

    @property
    def total_score(self) -> int:
        return sum(group.score for group in self.groups)

    def time_since(self, today: Optional[date] = None) -> Optional[str]:
        """Describe how long ago the round was held, e.g. ``"3 weeks ago"``.

        Returns None when the round has no date.
        """
        if self.held_on is None:
            return None
        elapsed = relativedelta(today or date.today(), self.held_on)
        if elapsed.years:
            return _plural(elapsed.years, "year")
        if elapsed.months:
            return _plural(elapsed.months, "month")
        if elapsed.days >= 7:
            return _plural(elapsed.days // 7, "week")
        if elapsed.days:
            return _plural(elapsed.days, "day")
        return "today"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round record to dictionary."""
        return {
            "round_number": self.round_number,
            "groups": [group.to_dict() for group in self.groups],
            "held_on": self.held_on.isoformat() if self.held_on else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundRecord":
        """Deserialize round record from dictionary."""
        held_on = None
        value = data.get("held_on")
        if value:
            try:
                held_on = date.fromisoformat(value)
            except (ValueError, TypeError):
                logger.warning(
                    f"Invalid date for round {data.get('round_number')}: {value}"
                )
        return cls(
            round_number=data["round_number"],
            groups=[group_from_dict(g) for g in data.get("groups", [])],
            held_on=held_on,
        )
