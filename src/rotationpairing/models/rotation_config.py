"""RotationConfig data class."""

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

from dataclasses import dataclass
from typing import Any, Dict

from rotationpairing.exceptions import InvalidConfigurationException


@dataclass(frozen=True)
class RotationConfig:
    """Matching engine settings.

    Attributes
    ----------
    verify_optimality : bool
        Check the solver's dual certificate after every run and raise
        if complementary slackness does not hold.
    check_preconditions : bool
        Reject duplicate person ids before solving. Negative weights are
        always rejected.
    """

    verify_optimality: bool = True
    check_preconditions: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "verify_optimality": self.verify_optimality,
            "check_preconditions": self.check_preconditions,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RotationConfig":
        """Deserialize configuration from dictionary."""
        unknown = set(data) - {"verify_optimality", "check_preconditions"}
        if unknown:
            raise InvalidConfigurationException(
                f"Unknown configuration keys: {', '.join(sorted(unknown))}"
            )
        values = {}
        for key in ("verify_optimality", "check_preconditions"):
            if key in data:
                if not isinstance(data[key], bool):
                    raise InvalidConfigurationException(
                        f"Configuration value {key!r} must be true or false"
                    )
                values[key] = data[key]
        return cls(**values)
