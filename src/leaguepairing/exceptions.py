"""Exceptions for use in League Pairing"""

# League Pairing
# Copyright (C) 2025  League Pairing developers
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


# ========== Base Application Exception ==========


class LeaguePairingException(Exception):
    """Base exception for all League Pairing errors.

    All custom exceptions in the package inherit from this class.
    This enables catching all package-specific errors with a single except clause.
    """

    pass


# ========== Argument Exceptions ==========


class InvalidArgumentException(LeaguePairingException, ValueError):
    """Raised when an operation receives an argument outside its domain.

    The bracket generator raises this for fewer than two participants.
    """

    pass


# ========== Result Exceptions ==========


class ResultException(LeaguePairingException):
    """Base exception for match record errors."""

    pass


class InvalidMatchRecordException(ResultException, ValueError):
    """Raised in strict mode when a match record is malformed or dangling."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(LeaguePairingException):
    """Base exception for round validation errors."""

    pass


class RoundValidationException(ValidationException):
    """Raised when a round breaks an absolute pairing criterion."""

    def __init__(self, message: str, report=None):
        super().__init__(message)
        self.report = report


# ========== File/Resource Exceptions ==========


class ResourceException(LeaguePairingException):
    """Base exception for resource-related errors."""

    pass


class TournamentFileException(ResourceException):
    """Raised when a tournament file cannot be loaded or saved."""

    pass
