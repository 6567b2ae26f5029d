"""Data model for tournament round."""

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
from typing import Any, Dict, List, Optional

from swissround.models.tournament.match import Match


@dataclass
class RoundData:
    """Container for all matches of a single tournament round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    matches : list of Match
        Matches in table order. Fixed once the round is created; only their
        result fields change afterwards.
    is_completed : bool
        True iff every match has a recorded result. Maintained by
        :meth:`refresh_completion`.
    """

    round_number: int
    matches: List[Match] = field(default_factory=list)
    is_completed: bool = False

    def get_match(self, table_number: int) -> Optional[Match]:
        for match in self.matches:
            if match.table_number == table_number:
                return match
        return None

    @property
    def unresolved_matches(self) -> List[Match]:
        return [m for m in self.matches if not m.has_result]

    @property
    def recorded_count(self) -> int:
        return sum(1 for m in self.matches if m.has_result)

    @property
    def bye_match(self) -> Optional[Match]:
        for match in self.matches:
            if match.is_bye:
                return match
        return None

    def refresh_completion(self) -> bool:
        """Recompute the completion flag from the match results."""
        self.is_completed = all(m.has_result for m in self.matches)
        return self.is_completed

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round_number": self.round_number,
            "matches": [m.to_dict() for m in self.matches],
            "is_completed": self.is_completed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundData":
        """Deserialize round data from dictionary."""
        round_data = cls(
            round_number=data["round_number"],
            matches=[Match.from_dict(m) for m in data.get("matches", [])],
        )
        round_data.refresh_completion()
        return round_data
