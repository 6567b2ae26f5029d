"""Append-only audit trail of tournament operations."""

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

from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from swissround.constants import EVENT_MATCH_RESULT_RECORDED
from swissround.models.tournament import Event, Match, Tournament
from swissround.utils import generate_id, setup_logger

logger = setup_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AuditLog:
    """Writes events into ``tournament.events``.

    Events are only ever appended, with one exception: recording a result
    for a (round, table) slot first drops the previous
    ``MATCH_RESULT_RECORDED`` event for that slot, so there is at most one
    live record per match-result slot.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        """Initialize the audit log.

        Args:
            clock: Returns the timestamp for new events (defaults to UTC now)
        """
        self.clock = clock or utc_now

    def append(
        self,
        tournament: Tournament,
        event_type: str,
        round_number: int = 0,
        table_number: int = 0,
        details: Optional[Dict[str, Any]] = None,
    ) -> Event:
        """Append one event and return it."""
        event = Event(
            event_id=generate_id(),
            type=event_type,
            timestamp=self.clock(),
            round_number=round_number,
            table_number=table_number,
            details=dict(details or {}),
        )
        tournament.events.append(event)
        logger.debug(
            f"Logged {event_type} (round {round_number}, table {table_number})"
        )
        return event

    def record_match_result(self, tournament: Tournament, match: Match) -> Event:
        """Log a recorded result, replacing any earlier record for the same slot."""
        tournament.events = [
            e
            for e in tournament.events
            if not (
                e.type == EVENT_MATCH_RESULT_RECORDED
                and e.refers_to(match.round_number, match.table_number)
            )
        ]
        return self.append(
            tournament,
            EVENT_MATCH_RESULT_RECORDED,
            round_number=match.round_number,
            table_number=match.table_number,
            details={"match": match.to_dict()},
        )

    def events_for(
        self,
        tournament: Tournament,
        event_type: Optional[str] = None,
        round_number: Optional[int] = None,
    ) -> List[Event]:
        """Filter the trail by type and/or round."""
        return [
            e
            for e in tournament.events
            if (event_type is None or e.type == event_type)
            and (round_number is None or e.round_number == round_number)
        ]
