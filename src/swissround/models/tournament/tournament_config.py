"""TournamentConfig data class."""

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
from typing import Any, Dict, Optional

from swissround.constants import (
    BYE_SCORE,
    DEFAULT_PAIRING_SYSTEM,
    RESULT_OVERWRITE,
)
from swissround.utils.validation import validate_bye_score, validate_overwrite_policy


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    bye_score : float
        Points awarded to a competitor receiving a bye.
    pairing_system : str
        Pairing system label. Only ``"SWISS"`` is implemented.
    rounds_total : int or None
        Planned number of rounds. None means open-ended.
    result_overwrite : str
        What to do when a result is recorded for an already resolved match:
        ``"overwrite"`` replaces it, ``"reject"`` raises an error.
    """

    bye_score: float = BYE_SCORE
    pairing_system: str = DEFAULT_PAIRING_SYSTEM
    rounds_total: Optional[int] = None
    result_overwrite: str = RESULT_OVERWRITE

    def __post_init__(self) -> None:
        validate_bye_score(self.bye_score)
        validate_overwrite_policy(self.result_overwrite)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "bye_score": self.bye_score,
            "pairing_system": self.pairing_system,
            "rounds_total": self.rounds_total,
            "result_overwrite": self.result_overwrite,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            bye_score=data.get("bye_score", BYE_SCORE),
            pairing_system=data.get("pairing_system", DEFAULT_PAIRING_SYSTEM),
            rounds_total=data.get("rounds_total"),
            result_overwrite=data.get("result_overwrite", RESULT_OVERWRITE),
        )
