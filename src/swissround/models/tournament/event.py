"""Audit event data class."""

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

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from dateutil.parser import isoparse


@dataclass
class Event:
    """A single entry of the tournament audit trail.

    Attributes
    ----------
    event_id : str
        Unique id of the event.
    type : str
        Event type tag, e.g. ``"MATCH_RESULT_RECORDED"``.
    timestamp : datetime
        When the event was logged (timezone aware).
    round_number : int
        Round the event refers to (0 when not applicable).
    table_number : int
        Table the event refers to (0 for round-level events).
    details : dict
        Opaque snapshot of the affected data.
    """

    event_id: str
    type: str
    timestamp: datetime
    round_number: int = 0
    table_number: int = 0
    details: Dict[str, Any] = field(default_factory=dict)

    def refers_to(self, round_number: int, table_number: Optional[int] = None) -> bool:
        if self.round_number != round_number:
            return False
        return table_number is None or self.table_number == table_number

    def to_dict(self) -> Dict[str, Any]:
        """Serialize event to dictionary."""
        return {
            "event_id": self.event_id,
            "type": self.type,
            "timestamp": self.timestamp.isoformat(),
            "round_number": self.round_number,
            "table_number": self.table_number,
            "details": self.details,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Event":
        """Deserialize event from dictionary."""
        return cls(
            event_id=data["event_id"],
            type=data["type"],
            timestamp=isoparse(data["timestamp"]),
            round_number=data.get("round_number", 0),
            table_number=data.get("table_number", 0),
            details=dict(data.get("details") or {}),
        )
