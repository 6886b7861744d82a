"""Exceptions for use in Rotation Pairing"""

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

from typing import Optional, Sequence, Tuple

# ========== Base Application Exception ==========


class RotationPairingException(Exception):
    """Base exception for all Rotation Pairing errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(RotationPairingException):
    """Base exception for pairing-related errors."""

    pass


class InvalidPairingException(PairingException):
    """Raised when a group of people is not a valid pair or triple."""

    pass


class NegativeWeightException(PairingException):
    """Raised when a meeting count or edge weight is below zero."""

    pass


class MatchingInvariantException(PairingException):
    """Raised when the matching solver breaks one of its own invariants.

    This always indicates a defect in the solver, never bad input.

    Attributes
    ----------
    vertices : tuple of int
        Vertex indices involved in the breach (may be empty).
    """

    def __init__(self, message: str, vertices: Optional[Sequence[int]] = None):
        self.vertices: Tuple[int, ...] = tuple(vertices or ())
        if self.vertices:
            message = f"{message} (vertices: {', '.join(map(str, self.vertices))})"
        super().__init__(message)


# ========== Roster Exceptions ==========


class RosterException(RotationPairingException):
    """Base exception for roster-related errors."""

    pass


class DuplicatePersonException(RosterException):
    """Raised when a roster contains the same person id twice."""

    def __init__(self, person_id: str):
        self.person_id = person_id
        super().__init__(f"Duplicate person id in roster: {person_id!r}")


class InvalidPersonDataException(RosterException):
    """Raised when person data is invalid or incomplete."""

    pass


# ========== Ledger Exceptions ==========


class LedgerException(RotationPairingException):
    """Base exception for meeting ledger errors."""

    pass


class InvalidLedgerDataException(LedgerException):
    """Raised when ledger data contains self-pairs or bad counts."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(RotationPairingException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(RotationPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
