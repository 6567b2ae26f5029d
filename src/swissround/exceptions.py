"""Exceptions for use in Swiss Round"""

# Swiss Round
# Copyright (C) 2025  Swiss Round developers
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

from typing import List, Optional, Sequence


# ========== Base Application Exception ==========


class SwissRoundException(Exception):
    """Base exception for all Swiss Round errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Validation Exceptions ==========


class ValidationError(SwissRoundException):
    """Raised when caller supplied data is invalid (blank field, bad code...)."""

    pass


class UnknownResultCodeError(ValidationError):
    """Raised when a result code is outside the accepted vocabulary."""

    def __init__(self, code: object):
        self.code = code
        super().__init__(
            f"Unknown result code {code!r}; expected one of A_WIN, B_WIN, DRAW, BYE_A"
        )


class DuplicateCompetitorError(ValidationError):
    """Raised when two competitors share the same id."""

    pass


# ========== State Exceptions ==========


class StateError(SwissRoundException):
    """Raised when the tournament is in an invalid state for the requested operation."""

    pass


class IncompleteRoundError(StateError):
    """Raised when advancing while the current round still has open tables.

    Attributes:
        round_number: The round that blocks the advance
        unresolved_tables: Table numbers that have no recorded result
    """

    def __init__(
        self,
        round_number: int,
        unresolved_tables: Sequence[int],
        total_matches: int,
        details: Optional[List[str]] = None,
    ):
        self.round_number = round_number
        self.unresolved_tables = list(unresolved_tables)
        finished = total_matches - len(self.unresolved_tables)
        message = (
            f"Cannot advance: Round {round_number} is not complete "
            f"({finished}/{total_matches} matches finished)."
        )
        if details:
            message += "\nIncomplete matches:\n" + "\n".join(f"- {d}" for d in details)
        super().__init__(message)


class ResultAlreadyRecordedError(StateError):
    """Raised when re-recording a resolved match under the reject policy."""

    pass


# ========== Lookup Exceptions ==========


class NotFoundError(SwissRoundException):
    """Base exception for references to rounds, tables or competitors that do not exist."""

    pass


class RoundNotFoundError(NotFoundError):
    """Raised when a requested round does not exist."""

    def __init__(self, round_number: int):
        self.round_number = round_number
        super().__init__(f"Round {round_number} not found")


class MatchNotFoundError(NotFoundError):
    """Raised when a requested table does not exist in a round."""

    def __init__(self, round_number: int, table_number: int):
        self.round_number = round_number
        self.table_number = table_number
        super().__init__(
            f"Match not found for round {round_number}, table {table_number}"
        )


# ========== Pairing Exceptions ==========


class ConstraintUnsatisfiable(SwissRoundException):
    """Raised when no complete pairing satisfies the hard constraints.

    The constraints are: no rematches and a score gap of at most 1.0 between
    paired competitors. Nothing is committed when this is raised.
    """

    def __init__(self, round_number: int, unpaired_ids: Sequence[str]):
        self.round_number = round_number
        self.unpaired_ids = list(unpaired_ids)
        super().__init__(
            f"Unable to generate pairings for round {round_number}: no rematches and "
            f"max score difference 1.0 constraints cannot be satisfied "
            f"({len(self.unpaired_ids)} competitors to pair)"
        )


# ========== File/Resource Exceptions ==========


class ResourceException(SwissRoundException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass
