"""Swiss Round: the core of a Swiss-system tournament manager.

Pairs competitors round by round, records results, rebuilds scores from the
round history and ranks competitors by score and Buchholz.

Example:
    >>> from swissround import RoundLifecycle
    >>> lifecycle = RoundLifecycle()
    >>> t = lifecycle.initialize_tournament("Club night", "Weekly", ["Ana", "Bo"])
    >>> first = lifecycle.advance_to_next_round(t)
    >>> lifecycle.record_match_result(t, 1, 1, "A_WIN").score_a
    1.0
"""

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

from swissround.controllers.tournament import (
    AggregateRecomputer,
    AuditLog,
    StandingsCalculator,
)
from swissround.controllers.tournament.round_lifecycle import RoundLifecycle
from swissround.exceptions import (
    ConstraintUnsatisfiable,
    IncompleteRoundError,
    NotFoundError,
    StateError,
    SwissRoundException,
    ValidationError,
)
from swissround.models import (
    Competitor,
    Event,
    Match,
    ResultCode,
    RoundData,
    Tournament,
    TournamentConfig,
    create_competitor,
)
from swissround.pairing import ShufflePairingStrategy, SwissPairingEngine

__version__ = "0.1.0"

__all__ = [
    "AggregateRecomputer",
    "AuditLog",
    "Competitor",
    "ConstraintUnsatisfiable",
    "Event",
    "IncompleteRoundError",
    "Match",
    "NotFoundError",
    "ResultCode",
    "RoundData",
    "RoundLifecycle",
    "ShufflePairingStrategy",
    "StandingsCalculator",
    "StateError",
    "SwissPairingEngine",
    "SwissRoundException",
    "Tournament",
    "TournamentConfig",
    "ValidationError",
    "create_competitor",
]
