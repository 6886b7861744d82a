"""Person data class."""

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

from rotationpairing.exceptions import InvalidPersonDataException


@dataclass(frozen=True)
class Person:
    """A participant in the rotation.

    Attributes
    ----------
    id : str
        Stable, unique identifier. Identity is by id only.
    name : str
        Display name. Cosmetic, may repeat across people.
    """

    id: str
    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise InvalidPersonDataException(
                f"Person id must be a non-empty string, got {self.id!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize person to dictionary."""
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Person":
        """Deserialize person from dictionary."""
        if "id" not in data:
            raise InvalidPersonDataException(f"Person data is missing an id: {data!r}")
        person_id = str(data["id"])
        return cls(id=person_id, name=str(data.get("name", person_id)))
