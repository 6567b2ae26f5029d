"""Interfaces for pairing engines and round-1 pairing strategies."""

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

from abc import ABC, abstractmethod
from typing import List, Sequence

from swissround.models.competitor import Competitor
from swissround.models.tournament import Match, Tournament
from swissround.type_hints import PairingPlan


class PairingEngine(ABC):
    """Produces the matches of one round.

    Implementations must not modify the round list of the tournament; the
    lifecycle commits the returned matches only if generation succeeds.
    """

    @abstractmethod
    def generate(
        self,
        tournament: Tournament,
        competitors: Sequence[Competitor],
        round_number: int,
    ) -> List[Match]:
        """Generate the matches for ``round_number``.

        Raises:
            ConstraintUnsatisfiable: If no complete pairing exists
        """


class RandomPairingStrategy(ABC):
    """Pairs a field of competitors without any history (round 1)."""

    @abstractmethod
    def pair(self, competitor_ids: Sequence[str]) -> PairingPlan:
        """Return pairs covering every id exactly once.

        The first id of a pair plays White. With an odd field exactly one
        entry is ``(id, None)``, meaning that competitor receives the bye.
        """
