"""Rebuilding competitor aggregates from round history.

Aggregates are never patched incrementally. Every result change triggers a
full rebuild, which makes edits, clears and round reversion idempotent.
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

from typing import Dict, Iterable, List

from swissround.models.competitor import Competitor
from swissround.models.tournament import Match, RoundData
from swissround.utils import setup_logger

logger = setup_logger(__name__)


class AggregateRecomputer:
    """Derives score, opponents, colour history and bye flag for every competitor.

    Only matches with a recorded result in rounds up to and including the
    current round number contribute.
    """

    def recompute(
        self,
        competitors: Iterable[Competitor],
        rounds: Iterable[RoundData],
        current_round: int,
    ) -> None:
        """Reset and rebuild the aggregates of ``competitors`` in place.

        Args:
            competitors: Competitors to rebuild
            rounds: Full round history (rounds past ``current_round`` are ignored)
            current_round: Highest round number that counts
        """
        index: Dict[str, Competitor] = {}
        for competitor in competitors:
            competitor.reset_aggregates()
            index[competitor.id] = competitor

        counted = 0
        for round_data in self._rounds_in_play(rounds, current_round):
            for match in sorted(round_data.matches, key=lambda m: m.table_number):
                if not match.has_result:
                    continue
                self._apply_match(match, index)
                counted += 1

        logger.debug(
            f"Recomputed {len(index)} competitors from {counted} results "
            f"(rounds <= {current_round})"
        )

    def _rounds_in_play(
        self, rounds: Iterable[RoundData], current_round: int
    ) -> List[RoundData]:
        in_play = [r for r in rounds if r.round_number <= current_round]
        return sorted(in_play, key=lambda r: r.round_number)

    def _apply_match(self, match: Match, index: Dict[str, Competitor]) -> None:
        competitor_a = index.get(match.competitor_a_id)

        if match.is_bye:
            if competitor_a is not None:
                competitor_a.score += match.score_a
                competitor_a.has_bye = True
            return

        competitor_b = index.get(match.competitor_b_id)
        for competitor, opponent_id, points in (
            (competitor_a, match.competitor_b_id, match.score_a),
            (competitor_b, match.competitor_a_id, match.score_b),
        ):
            if competitor is None:
                # Unknown id: score the other side only
                continue
            competitor.score += points
            competitor.add_opponent(opponent_id)
            colour = match.colour_of(competitor.id)
            if colour:
                competitor.color_history += colour
