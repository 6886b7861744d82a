"""Validation utilities for Rotation Pairing.

This module provides reusable precondition checks with consistent error handling.
"""

from collections import Counter
from typing import Iterable, Optional, Sequence

from rotationpairing.constants import GROUP_SIZES
from rotationpairing.exceptions import (
    DuplicatePersonException,
    InvalidPairingException,
    InvalidPersonDataException,
)
from rotationpairing.models.group_result import GroupResult
from rotationpairing.models.person import Person


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        offending_value: The value that caused the failure, if any
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        offending_value: Optional[str] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.offending_value = offending_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return "ValidationResult(VALID)"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Roster Validation ==========


def check_roster(roster: Sequence[Person]) -> ValidationResult:
    """Check that every person is a Person and that ids are unique.

    Args:
        roster: People taking part in one matching run

    Returns:
        ValidationResult naming the first duplicate id, if any

    Example:
        >>> check_roster([Person("1", "Ann"), Person("1", "Bob")]).offending_value
        '1'
    """
    seen = set()
    for person in roster:
        if not isinstance(person, Person):
            return ValidationResult(
                is_valid=False,
                error_message=f"Roster entries must be Person objects, got {person!r}",
            )
        if person.id in seen:
            return ValidationResult(
                is_valid=False,
                error_message=f"Duplicate person id in roster: {person.id!r}",
                offending_value=person.id,
            )
        seen.add(person.id)
    return ValidationResult(is_valid=True)


def validate_roster(roster: Sequence[Person]) -> None:
    """Validate a roster and raise if it is unusable.

    Raises:
        DuplicatePersonException: If an id appears twice
        InvalidPersonDataException: If an entry is not a Person
    """
    result = check_roster(roster)
    if result:
        return
    if result.offending_value is not None:
        raise DuplicatePersonException(result.offending_value)
    raise InvalidPersonDataException(result.error_message)


# ========== Group Validation ==========


def validate_group_members(person_ids: Iterable[str], kind: str) -> None:
    """Validate that a group has the right size and no repeated member.

    Raises:
        InvalidPairingException: If the group is malformed
    """
    ids = list(person_ids)
    expected = GROUP_SIZES.get(kind)
    if expected is None:
        raise InvalidPairingException(f"Unknown group type: {kind!r}")
    if len(ids) != expected:
        raise InvalidPairingException(
            f"A {kind} must have {expected} members, got {len(ids)}"
        )
    repeated = [person_id for person_id, n in Counter(ids).items() if n > 1]
    if repeated:
        raise InvalidPairingException(
            f"Group lists the same person more than once: {', '.join(repeated)}"
        )


def validate_groups(groups: Sequence[GroupResult]) -> None:
    """Validate every group of a round before it is written to a ledger."""
    for group in groups:
        validate_group_members(group.member_ids(), group.kind)
