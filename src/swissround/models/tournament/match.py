"""Match data class and result codes."""

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

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from swissround.constants import (
    BYE_ID,
    DRAW_SCORE,
    LOSS_SCORE,
    WIN_SCORE,
)
from swissround.exceptions import UnknownResultCodeError
from swissround.type_hints import BLACK, WHITE, Colour


class ResultCode(str, Enum):
    """Outcome of a match, always from competitor A's point of view."""

    A_WIN = "A_WIN"
    B_WIN = "B_WIN"
    DRAW = "DRAW"
    BYE_A = "BYE_A"

    @classmethod
    def parse(cls, value: Any) -> "ResultCode":
        """Coerce a code or its string name, raising UnknownResultCodeError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownResultCodeError(value) from None


@dataclass
class Match:
    """A single pairing inside a round.

    Attributes
    ----------
    round_number : int
        Round the match belongs to.
    table_number : int
        Table, unique within the round, numbered from 1.
    competitor_a_id : str
        First competitor.
    competitor_b_id : str
        Second competitor, or ``BYE`` when A receives a bye.
    white_id : str or None
        Competitor playing White (competitor A for a bye).
    black_id : str or None
        Competitor playing Black (None for a bye).
    result : ResultCode or None
        Recorded outcome; None while the game is unresolved.
    score_a : float
        Points awarded to competitor A.
    score_b : float
        Points awarded to competitor B.
    """

    round_number: int
    table_number: int
    competitor_a_id: str
    competitor_b_id: str
    white_id: Optional[str] = None
    black_id: Optional[str] = None
    result: Optional[ResultCode] = None
    score_a: float = 0.0
    score_b: float = 0.0

    @property
    def is_bye(self) -> bool:
        return self.competitor_b_id == BYE_ID

    @property
    def has_result(self) -> bool:
        return self.result is not None

    @property
    def participant_ids(self) -> List[str]:
        """Real competitor ids in this match (the BYE sentinel excluded)."""
        if self.is_bye:
            return [self.competitor_a_id]
        return [self.competitor_a_id, self.competitor_b_id]

    def involves(self, competitor_id: Optional[str]) -> bool:
        return bool(competitor_id) and competitor_id in (
            self.competitor_a_id,
            self.competitor_b_id,
        )

    @property
    def winner_id(self) -> Optional[str]:
        """Winning competitor, or None for draws and unresolved games."""
        if self.result in (ResultCode.A_WIN, ResultCode.BYE_A):
            return self.competitor_a_id
        if self.result == ResultCode.B_WIN:
            return self.competitor_b_id
        return None

    def colour_of(self, competitor_id: str) -> Optional[Colour]:
        """Colour letter played by ``competitor_id`` in this match."""
        if self.is_bye:
            return None
        if competitor_id == self.white_id:
            return WHITE
        if competitor_id == self.black_id:
            return BLACK
        return None

    def apply_result(self, code: ResultCode, bye_score: float) -> None:
        """Write the result code and the matching scores."""
        scores: Dict[ResultCode, Tuple[float, float]] = {
            ResultCode.A_WIN: (WIN_SCORE, LOSS_SCORE),
            ResultCode.B_WIN: (LOSS_SCORE, WIN_SCORE),
            ResultCode.DRAW: (DRAW_SCORE, DRAW_SCORE),
            ResultCode.BYE_A: (bye_score, LOSS_SCORE),
        }
        self.result = code
        self.score_a, self.score_b = scores[code]

    def clear_result(self) -> None:
        """Reset result and scores to unset."""
        self.result = None
        self.score_a = 0.0
        self.score_b = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "round_number": self.round_number,
            "table_number": self.table_number,
            "competitor_a_id": self.competitor_a_id,
            "competitor_b_id": self.competitor_b_id,
            "white_id": self.white_id,
            "black_id": self.black_id,
            "result": self.result.value if self.result else "",
            "score_a": self.score_a,
            "score_b": self.score_b,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        raw_result = data.get("result") or None
        return cls(
            round_number=data["round_number"],
            table_number=data["table_number"],
            competitor_a_id=data["competitor_a_id"],
            competitor_b_id=data["competitor_b_id"],
            white_id=data.get("white_id"),
            black_id=data.get("black_id"),
            result=ResultCode.parse(raw_result) if raw_result else None,
            score_a=data.get("score_a", 0.0),
            score_b=data.get("score_b", 0.0),
        )
