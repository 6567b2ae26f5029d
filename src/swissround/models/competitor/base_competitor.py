"""A competitor in a Swiss tournament."""

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
from typing import Any, Dict, List

from swissround.type_hints import WHITE


@dataclass
class Competitor:
    """
    A participant together with the aggregates derived from round history.

    Only ``id`` and ``name`` are supplied by the caller. Everything else is
    rebuilt from scratch by the aggregate recomputer whenever a result changes,
    and ``buchholz`` is refreshed by the standings calculator.

    Attributes
    ----------
    id : str
        Unique identifier. Never equal to the ``BYE`` sentinel.
    name : str
        Display name, also the last standings tie-break.
    score : float
        Cumulative score over the rounds counted so far.
    opponent_ids : list of str
        Distinct opponents faced, in the order first met. Never contains
        the ``BYE`` sentinel.
    buchholz : float
        Sum of the current scores of all opponents.
    color_history : str
        One letter per game played, ``"W"`` or ``"B"``. Byes add nothing.
    has_bye : bool
        Whether the competitor has received a bye.
    """

    id: str
    name: str
    score: float = 0.0
    opponent_ids: List[str] = field(default_factory=list)
    buchholz: float = 0.0
    color_history: str = ""
    has_bye: bool = False

    @property
    def played_white_last(self) -> bool:
        """Check whether the most recent game was played with White."""
        return self.color_history.endswith(WHITE)

    def has_played(self, opponent_id: str) -> bool:
        """Check whether this competitor already faced ``opponent_id``."""
        return opponent_id in self.opponent_ids

    def add_opponent(self, opponent_id: str) -> None:
        """Record an opponent once; repeats are ignored."""
        if opponent_id not in self.opponent_ids:
            self.opponent_ids.append(opponent_id)

    def reset_aggregates(self) -> None:
        """Forget everything derived from round history."""
        self.score = 0.0
        self.opponent_ids = []
        self.buchholz = 0.0
        self.color_history = ""
        self.has_bye = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize competitor to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "score": self.score,
            "opponent_ids": list(self.opponent_ids),
            "buchholz": self.buchholz,
            "color_history": self.color_history,
            "has_bye": self.has_bye,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Competitor":
        """Deserialize competitor from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            score=data.get("score", 0.0),
            opponent_ids=list(data.get("opponent_ids", [])),
            buchholz=data.get("buchholz", 0.0),
            color_history=data.get("color_history", ""),
            has_bye=data.get("has_bye", False),
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.score})"
