"""CSV import/export for rosters and meeting history.

History files hold one meeting per row under a ``Left,Right`` header.
Roster files hold one name per line.
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

import csv
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from rotationpairing.constants import (
    HANDLE_PREFIX,
    HISTORY_CSV_HEADER,
    ROSTER_HEADER_NAMES,
)
from rotationpairing.exceptions import FileLoadException, FileSaveException
from rotationpairing.models.ledger import MeetingLedger
from rotationpairing.models.person import Person
from rotationpairing.type_hints import PairIDs
from rotationpairing.utils import setup_logger

logger = setup_logger(__name__)

PathLike = Union[str, Path]


def _clean_name(value: str) -> str:
    value = value.strip().strip("\"'").strip()
    if value.startswith(HANDLE_PREFIX):
        value = value[len(HANDLE_PREFIX) :]
    return value


def parse_history_rows(rows: Iterable[Sequence[str]]) -> List[PairIDs]:
    """Turn CSV rows into a meeting log, skipping the header and bad rows."""
    meetings: List[PairIDs] = []
    for line_number, row in enumerate(rows, start=1):
        cells = [cell.strip() for cell in row]
        if not any(cells):
            continue
        if tuple(cells[:2]) == HISTORY_CSV_HEADER:
            continue
        if len(cells) < 2:
            logger.warning(f"Skipping history row {line_number}: expected two names")
            continue
        left, right = _clean_name(cells[0]), _clean_name(cells[1])
        if not left or not right:
            logger.warning(f"Skipping history row {line_number}: empty name")
            continue
        if left == right:
            logger.warning(
                f"Skipping history row {line_number}: {left} paired with self"
            )
            continue
        meetings.append((left, right))
    return meetings


def read_history_csv(path: PathLike) -> MeetingLedger:
    """Load a ``Left,Right`` meeting log into a ledger keyed by name."""
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            meetings = parse_history_rows(csv.reader(f))
    except OSError as e:
        raise FileLoadException(f"Could not read history file {path}: {e}") from e
    logger.info(f"Loaded {len(meetings)} historical meetings from {path}")
    return MeetingLedger.from_pairs(meetings)


def write_history_csv(path: PathLike, ledger: MeetingLedger) -> None:
    """Write a ledger back out as a ``Left,Right`` meeting log."""
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(HISTORY_CSV_HEADER)
            writer.writerows(ledger.to_pairs())
    except OSError as e:
        raise FileSaveException(f"Could not write history file {path}: {e}") from e


def roster_from_names(names: Iterable[str]) -> List[Person]:
    """Build a roster where each name is also the person's id."""
    roster: List[Person] = []
    seen = set()
    for name in names:
        name = _clean_name(name)
        if not name or name in seen:
            continue
        seen.add(name)
        roster.append(Person(id=name, name=name))
    return roster


def read_roster_file(path: PathLike) -> List[Person]:
    """Load one name per line.

    A leading ``Name`` header, blank lines and repeated names are skipped.
    """
    try:
        lines = Path(path).read_text(encoding="utf-8").splitlines()
    except OSError as e:
        raise FileLoadException(f"Could not read roster file {path}: {e}") from e
    if lines and _clean_name(lines[0]).lower() in ROSTER_HEADER_NAMES:
        lines = lines[1:]
    return roster_from_names(lines)


def write_roster_file(path: PathLike, roster: Iterable[Person]) -> None:
    try:
        Path(path).write_text(
            "".join(f"{person.name}\n" for person in roster), encoding="utf-8"
        )
    except OSError as e:
        raise FileSaveException(f"Could not write roster file {path}: {e}") from e
