"""Round management for a recurring rotation.

This module handles the roster, the proposal/confirmation cycle for each
round, and keeps the meeting ledger in step with confirmed rounds.
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

from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Tuple

from rotationpairing.exceptions import (
    DuplicatePersonException,
    InvalidPersonDataException,
    RosterException,
)
from rotationpairing.models import (
    GroupResult,
    MeetingLedger,
    Person,
    RotationConfig,
    RoundRecord,
)
from rotationpairing.pairing import generate_matching, update_history
from rotationpairing.utils import setup_logger

logger = setup_logger(__name__)


class RotationManager:
    """Manages the roster and round progression for a rotation.

    This class is responsible for:
    - Keeping person ids unique and stable
    - Proposing a round and confirming or discarding it
    - Replacing the ledger with the updated one on confirmation
    - Pruning ledger entries when a person leaves
    """

    def __init__(
        self,
        roster: Optional[List[Person]] = None,
        ledger: Optional[MeetingLedger] = None,
        config: Optional[RotationConfig] = None,
    ):
        """Initialize the rotation manager.

        Args:
            roster: Initial people, in the order used for matching
            ledger: Past meetings, empty if not given
            config: Matching engine settings
        """
        self.roster: List[Person] = []
        self.ledger = ledger if ledger is not None else MeetingLedger()
        self.config = config or RotationConfig()
        self.rounds: List[RoundRecord] = []
        self.pending: Optional[List[GroupResult]] = None
        self._next_id = 1
        for person in roster or []:
            self._add(person)

    # ----- roster -----

    def _add(self, person: Person) -> Person:
        if self.find_person(person.id) is not None:
            raise DuplicatePersonException(person.id)
        self.roster.append(person)
        if person.id.isdigit():
            self._next_id = max(self._next_id, int(person.id) + 1)
        return person

    def find_person(self, person_id: str) -> Optional[Person]:
        for person in self.roster:
            if person.id == person_id:
                return person
        return None

    def add_person(self, name: str, person_id: Optional[str] = None) -> Person:
        """Add a person, generating an id when none is given.

        Raises:
            InvalidPersonDataException: If the name is blank
            DuplicatePersonException: If the id is already in use
        """
        name = name.strip()
        if not name:
            raise InvalidPersonDataException("Person name cannot be empty")
        if person_id is None:
            person_id = str(self._next_id)
        person = self._add(Person(id=person_id, name=name))
        self.pending = None
        logger.info(f"Added {person.name} ({person.id})")
        return person

    def rename_person(self, person_id: str, name: str) -> Person:
        """Change a display name; the id and meeting history are kept."""
        name = name.strip()
        if not name:
            raise InvalidPersonDataException("Person name cannot be empty")
        for index, person in enumerate(self.roster):
            if person.id == person_id:
                renamed = Person(id=person_id, name=name)
                self.roster[index] = renamed
                self.pending = None
                logger.info(f"Renamed {person.name} ({person_id}) to {name}")
                return renamed
        raise RosterException(f"No person with id {person_id!r}")

    def remove_person(self, person_id: str) -> Person:
        """Remove a person and every ledger entry that mentions them."""
        person = self.find_person(person_id)
        if person is None:
            raise RosterException(f"No person with id {person_id!r}")
        self.roster.remove(person)
        self.ledger = self.ledger.without_people([person_id])
        self.pending = None
        logger.info(f"Removed {person.name} ({person.id}) and pruned their history")
        return person

    def import_roster(self, names: Iterable[str]) -> List[Person]:
        """Replace the roster with freshly numbered people.

        The old ids mean nothing to the new roster, so meeting history and
        confirmed rounds are cleared as well. Blank names are skipped.
        """
        self.roster = []
        self._next_id = 1
        self.clear_history()
        for name in names:
            if name.strip():
                self.add_person(name)
        logger.info(f"Imported roster of {len(self.roster)} people")
        return list(self.roster)

    # ----- rounds -----

    @property
    def current_round_number(self) -> int:
        """Number of confirmed rounds so far."""
        return len(self.rounds)

    def propose_round(self) -> List[GroupResult]:
        """Generate groups for the next round without recording them."""
        self.pending = generate_matching(self.roster, self.ledger, self.config)
        logger.info(
            f"Proposed round {self.current_round_number + 1} "
            f"with {len(self.pending)} groups"
        )
        return self.pending

    def confirm_round(self) -> RoundRecord:
        """Record the pending proposal as a round that took place.

        Raises:
            RosterException: If there is no pending proposal
        """
        if self.pending is None:
            raise RosterException("No proposed round to confirm")
        self.ledger = update_history(self.ledger, self.pending)
        record = RoundRecord(
            round_number=self.current_round_number + 1,
            groups=list(self.pending),
            held_on=date.today(),
        )
        self.rounds.append(record)
        self.pending = None
        logger.info(f"Confirmed round {record.round_number}")
        return record

    def discard_round(self) -> bool:
        """Drop the pending proposal. Returns False if there was none."""
        if self.pending is None:
            logger.warning("Cannot discard: no round has been proposed")
            return False
        self.pending = None
        return True

    def clear_history(self) -> None:
        """Forget every past meeting and round."""
        self.ledger = MeetingLedger()
        self.rounds = []
        self.pending = None
        logger.info("Cleared meeting history")

    def meeting_summary(self) -> List[Tuple[Person, Person, int]]:
        """Meetings between people on the roster, most frequent first."""
        people = {person.id: person for person in self.roster}
        summary = [
            (people[a], people[b], count)
            for (a, b), count in self.ledger.pairs()
            if a in people and b in people
        ]
        summary.sort(key=lambda entry: -entry[2])
        return summary

    # ----- persistence -----

    def to_dict(self) -> Dict[str, Any]:
        """Serialize roster, ledger and rounds to dictionary."""
        return {
            "people": [person.to_dict() for person in self.roster],
            "ledger": self.ledger.to_dict(),
            "rounds": [record.to_dict() for record in self.rounds],
            "config": self.config.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RotationManager":
        """Deserialize a rotation from dictionary."""
        manager = cls(
            roster=[Person.from_dict(p) for p in data.get("people", [])],
            ledger=MeetingLedger.from_dict(data.get("ledger", {})),
            config=RotationConfig.from_dict(data.get("config", {})),
        )
        manager.rounds = [RoundRecord.from_dict(r) for r in data.get("rounds", [])]
        return manager
