"""Standings and tie-break calculation.

The only tie-break is Buchholz: the sum of the current scores of every
distinct opponent a competitor has faced. It depends on the opponents' latest
scores, so it is refreshed immediately before any ranked list is produced.
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

from typing import Dict, Iterable, List, Sequence, Tuple

from swissround.constants import BYE_ID
from swissround.models.competitor import Competitor
from swissround.utils import setup_logger

logger = setup_logger(__name__)


def standings_key(competitor: Competitor) -> Tuple[float, float, str]:
    """Sort key for score desc, Buchholz desc, name asc."""
    return (-competitor.score, -competitor.buchholz, competitor.name)


def bye_priority_key(competitor: Competitor) -> Tuple[float, float, str]:
    """Sort key for bye selection: lowest score, then lower Buchholz, then name."""
    return (competitor.score, competitor.buchholz, competitor.name)


class StandingsCalculator:
    """Calculates Buchholz and the standings order.

    The order is total: score descending, Buchholz descending, name
    ascending, with the original list order as the final (stable) fallback.
    """

    def calculate_buchholz(self, competitors: Sequence[Competitor]) -> None:
        """Refresh Buchholz for every competitor, in place.

        Args:
            competitors: All competitors of the tournament
        """
        score_index: Dict[str, float] = {c.id: c.score for c in competitors}
        for competitor in competitors:
            competitor.buchholz = sum(
                score_index.get(opponent_id, 0.0)
                for opponent_id in set(competitor.opponent_ids)
                if opponent_id != BYE_ID
            )

    def standings(self, competitors: Sequence[Competitor]) -> List[Competitor]:
        """Recompute tie-breaks and return competitors best first.

        Args:
            competitors: All competitors of the tournament

        Returns:
            New list of the same Competitor objects, sorted by rank
        """
        self.calculate_buchholz(competitors)
        return sorted(competitors, key=standings_key)

    def standings_table(
        self, competitors: Iterable[Competitor]
    ) -> List[Dict[str, object]]:
        """Standings as plain rows (rank, id, name, score, buchholz)."""
        rows = []
        for rank, competitor in enumerate(self.standings(list(competitors)), start=1):
            rows.append(
                {
                    "rank": rank,
                    "id": competitor.id,
                    "name": competitor.name,
                    "score": competitor.score,
                    "buchholz": competitor.buchholz,
                }
            )
        return rows
