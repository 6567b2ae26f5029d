"""The Tournament aggregate: plain owned values, no behaviour beyond lookups.

All state transitions live in the round lifecycle controller, which receives
the aggregate explicitly on every call.
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

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from dateutil.parser import isoparse

from swissround.constants import STATUS_SETUP
from swissround.exceptions import MatchNotFoundError, RoundNotFoundError
from swissround.models.competitor import Competitor
from swissround.models.tournament.event import Event
from swissround.models.tournament.match import Match
from swissround.models.tournament.round_data import RoundData
from swissround.models.tournament.tournament_config import TournamentConfig
from swissround.utils import generate_id


@dataclass
class Tournament:
    """State and history of a Swiss-system event.

    Attributes
    ----------
    title : str
        Tournament title (required, non-blank).
    description : str
        Free-text description (required, non-blank).
    status : str
        ``"SETUP"``, ``"ACTIVE"`` or ``"COMPLETE"``.
    current_round : int
        Round currently being played; 0 means not started.
    total_competitors : int
        Number of registered competitors.
    config : TournamentConfig
        Scoring and policy settings.
    rounds : list of RoundData
        Round history, contiguous from round 1.
    competitors : list of Competitor
        Registered competitors, in registration order.
    events : list of Event
        Append-only audit trail.
    """

    title: str
    description: str = ""
    status: str = STATUS_SETUP
    current_round: int = 0
    total_competitors: int = 0
    config: TournamentConfig = field(default_factory=TournamentConfig)
    rounds: List[RoundData] = field(default_factory=list)
    competitors: List[Competitor] = field(default_factory=list)
    events: List[Event] = field(default_factory=list)
    id: str = field(default_factory=generate_id)
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    # ========== Lookups ==========

    @property
    def bye_score(self) -> float:
        return self.config.bye_score

    @property
    def highest_round_number(self) -> int:
        return max((r.round_number for r in self.rounds), default=0)

    @property
    def has_started(self) -> bool:
        return self.current_round > 0 or bool(self.rounds)

    def get_round(self, round_number: int) -> Optional[RoundData]:
        """Get a round by number, or None if it does not exist."""
        for round_data in self.rounds:
            if round_data.round_number == round_number:
                return round_data
        return None

    def require_round(self, round_number: int) -> RoundData:
        """Get a round by number, raising RoundNotFoundError if absent."""
        round_data = self.get_round(round_number)
        if round_data is None:
            raise RoundNotFoundError(round_number)
        return round_data

    def require_match(self, round_number: int, table_number: int) -> Match:
        """Get the match at (round, table), raising a NotFoundError if absent."""
        match = self.require_round(round_number).get_match(table_number)
        if match is None:
            raise MatchNotFoundError(round_number, table_number)
        return match

    def get_current_round(self) -> Optional[RoundData]:
        return self.get_round(self.current_round)

    def competitor_index(self) -> Dict[str, Competitor]:
        return {c.id: c for c in self.competitors}

    def get_competitor(self, competitor_id: str) -> Optional[Competitor]:
        for competitor in self.competitors:
            if competitor.id == competitor_id:
                return competitor
        return None

    def competitor_name(self, competitor_id: Optional[str]) -> str:
        """Display name for an id; falls back to the id itself."""
        if competitor_id is None:
            return ""
        competitor = self.get_competitor(competitor_id)
        return competitor.name if competitor else competitor_id

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary.

        Returns:
            Dictionary containing all tournament data
        """
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "current_round": self.current_round,
            "total_competitors": self.total_competitors,
            "config": self.config.to_dict(),
            "rounds": [r.to_dict() for r in self.rounds],
            "competitors": [c.to_dict() for c in self.competitors],
            "events": [e.to_dict() for e in self.events],
            "start_time": self.start_time.isoformat() if self.start_time else None,
            "end_time": self.end_time.isoformat() if self.end_time else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary.

        Args:
            data: Dictionary containing tournament data

        Returns:
            Reconstructed Tournament object
        """
        start_time = data.get("start_time")
        end_time = data.get("end_time")
        competitors = [Competitor.from_dict(c) for c in data.get("competitors", [])]
        return cls(
            id=data.get("id") or generate_id(),
            title=data["title"],
            description=data.get("description", ""),
            status=data.get("status", STATUS_SETUP),
            current_round=data.get("current_round", 0),
            total_competitors=data.get("total_competitors", len(competitors)),
            config=TournamentConfig.from_dict(data.get("config", {})),
            rounds=[RoundData.from_dict(r) for r in data.get("rounds", [])],
            competitors=competitors,
            events=[Event.from_dict(e) for e in data.get("events", [])],
            start_time=isoparse(start_time) if start_time else None,
            end_time=isoparse(end_time) if end_time else None,
        )
