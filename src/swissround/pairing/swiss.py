"""Swiss pairing with hard constraints.

Round 1 is delegated to a random pairing strategy. Later rounds run an
exhaustive, deterministic depth-first search over the seed order:

- no competitor meets the same opponent twice
- paired competitors differ by at most 1.0 points
- with an odd field, the bye goes to the lowest-ranked competitor without a
  previous bye for whom the rest of the field can still be paired

If the search is exhausted the round is reported as unsatisfiable; the
constraints are never relaxed.
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

from typing import Dict, FrozenSet, List, Optional, Sequence, Set, Tuple

from swissround.constants import BYE_ID, MAX_SCORE_DIFFERENCE
from swissround.controllers.tournament.standings_calculator import (
    StandingsCalculator,
    bye_priority_key,
)
from swissround.exceptions import ConstraintUnsatisfiable, ValidationError
from swissround.models.competitor import Competitor
from swissround.models.tournament import Match, RoundData, Tournament
from swissround.pairing.base import PairingEngine, RandomPairingStrategy
from swissround.pairing.random_pairing import ShufflePairingStrategy
from swissround.type_hints import PairingPlan
from swissround.utils import setup_logger

logger = setup_logger(__name__)

# Proximity used when either competitor has no table in the previous round
UNKNOWN_TABLE_PROXIMITY = 1 << 30
SCORE_EPSILON = 1e-9

Pair = Tuple[Competitor, Optional[Competitor]]


class _SearchState:
    """Bookkeeping shared by one search: failed pools and node count."""

    def __init__(self, last_table: Dict[str, int]):
        self.last_table = last_table
        self.failed_pools: Set[FrozenSet[str]] = set()
        self.nodes = 0


def _table_proximity(a: Competitor, b: Competitor, last_table: Dict[str, int]) -> int:
    a_table = last_table.get(a.id, 0)
    b_table = last_table.get(b.id, 0)
    if a_table > 0 and b_table > 0:
        return abs(a_table - b_table)
    return UNKNOWN_TABLE_PROXIMITY


def _are_compatible(a: Competitor, b: Competitor) -> bool:
    """Check the absolute constraints: no rematch, score gap at most 1.0."""
    if a.has_played(b.id) or b.has_played(a.id):
        return False
    return abs(a.score - b.score) <= MAX_SCORE_DIFFERENCE + SCORE_EPSILON


def _has_odd_component(pool: Sequence[Competitor]) -> bool:
    """Check whether some group of mutually reachable competitors is odd.

    Competitors are linked when they may legally meet. A group of odd size
    can never be paired off completely, whatever the rest of the pool does.
    """
    unvisited = set(range(len(pool)))
    while unvisited:
        stack = [unvisited.pop()]
        size = 0
        while stack:
            i = stack.pop()
            size += 1
            linked = [j for j in unvisited if _are_compatible(pool[i], pool[j])]
            unvisited.difference_update(linked)
            stack.extend(linked)
        if size % 2:
            return True
    return False


def _assign_colours(a: Competitor, b: Competitor) -> Tuple[Competitor, Competitor]:
    """A takes White unless A played White last round (one ply, no lookahead)."""
    if a.played_white_last:
        return b, a
    return a, b


class SwissPairingEngine(PairingEngine):
    """Pairing engine: random first round, constrained backtracking afterwards."""

    def __init__(
        self,
        round_one_strategy: Optional[RandomPairingStrategy] = None,
        standings_calculator: Optional[StandingsCalculator] = None,
    ):
        """Initialize the engine.

        Args:
            round_one_strategy: Pairs round 1 (defaults to a random shuffle)
            standings_calculator: Provides the seed order for later rounds
        """
        self.round_one_strategy = round_one_strategy or ShufflePairingStrategy()
        self.standings_calculator = standings_calculator or StandingsCalculator()

    def generate(
        self,
        tournament: Tournament,
        competitors: Sequence[Competitor],
        round_number: int,
    ) -> List[Match]:
        if round_number == 1:
            return self._pair_round_one(competitors)
        return self._pair_later_round(tournament, competitors, round_number)

    # ========== Round 1 ==========

    def _pair_round_one(self, competitors: Sequence[Competitor]) -> List[Match]:
        ids = [c.id for c in competitors]
        plan = self.round_one_strategy.pair(ids)
        self._check_plan(plan, ids)

        # Bye always sits at the last table
        plan = [p for p in plan if p[1] is not None] + [p for p in plan if p[1] is None]
        matches = [
            self._build_match(1, table, a_id, b_id, a_id, b_id)
            for table, (a_id, b_id) in enumerate(plan, start=1)
        ]
        logger.info(f"Paired round 1 randomly: {len(matches)} tables")
        return matches

    def _check_plan(self, plan: PairingPlan, ids: Sequence[str]) -> None:
        seen: List[str] = []
        byes = 0
        for a_id, b_id in plan:
            seen.append(a_id)
            if b_id is None:
                byes += 1
            else:
                seen.append(b_id)
        if sorted(seen) != sorted(ids) or byes != len(ids) % 2:
            raise ValidationError(
                "Round 1 pairing strategy must pair every competitor exactly once"
            )

    # ========== Rounds 2+ ==========

    def _pair_later_round(
        self,
        tournament: Tournament,
        competitors: Sequence[Competitor],
        round_number: int,
    ) -> List[Match]:
        seeded = self.standings_calculator.standings(competitors)
        previous_round = tournament.get_round(round_number - 1)
        state = _SearchState(self._previous_tables(previous_round))

        pairs = self._search_round(tuple(seeded), state)
        if pairs is None:
            logger.warning(
                f"Round {round_number}: pairing search exhausted after "
                f"{state.nodes} nodes"
            )
            raise ConstraintUnsatisfiable(round_number, [c.id for c in seeded])

        logger.debug(f"Round {round_number}: pairing found after {state.nodes} nodes")

        matches = []
        for table, (a, b) in enumerate(pairs, start=1):
            if b is None:
                matches.append(
                    self._build_match(round_number, table, a.id, None, a.id, None)
                )
                continue
            white, black = _assign_colours(a, b)
            matches.append(
                self._build_match(round_number, table, a.id, b.id, white.id, black.id)
            )

        anchor_id = self._table_one_winner(previous_round)
        rank = {c.id: pos for pos, c in enumerate(seeded)}
        ordered = self._order_tables(matches, anchor_id, rank)

        logger.info(
            f"Paired round {round_number}: {len(ordered)} tables"
            + (f", table 1 anchored on {anchor_id}" if anchor_id else "")
        )
        return ordered

    def _table_one_winner(self, previous_round: Optional[RoundData]) -> Optional[str]:
        """Winner at table 1 last round; draws and open games do not anchor."""
        if previous_round is None:
            return None
        table_one = previous_round.get_match(1)
        return table_one.winner_id if table_one else None

    def _previous_tables(self, previous_round: Optional[RoundData]) -> Dict[str, int]:
        last_table: Dict[str, int] = {}
        if previous_round is None:
            return last_table
        for match in previous_round.matches:
            for competitor_id in match.participant_ids:
                last_table[competitor_id] = match.table_number
        return last_table

    def _search_round(
        self, seeded: Tuple[Competitor, ...], state: _SearchState
    ) -> Optional[List[Pair]]:
        if len(seeded) % 2 == 0:
            pairs = self._search(seeded, state)
            return list(pairs) if pairs is not None else None

        for bye_competitor in self._bye_candidates(seeded):
            rest = tuple(c for c in seeded if c.id != bye_competitor.id)
            pairs = self._search(rest, state)
            if pairs is not None:
                logger.debug(f"Bye assigned to {bye_competitor.name}")
                return list(pairs) + [(bye_competitor, None)]
            logger.debug(f"Bye to {bye_competitor.name} leaves no complete pairing")
        return None

    def _bye_candidates(self, seeded: Sequence[Competitor]) -> List[Competitor]:
        """Lowest-ranked first; a second bye only when everyone already had one."""
        eligible = [c for c in seeded if not c.has_bye]
        if not eligible:
            logger.warning(
                "All competitors have already received a bye. "
                "Assigning second bye as last resort."
            )
            eligible = list(seeded)
        return sorted(eligible, key=bye_priority_key)

    def _search(
        self, pool: Tuple[Competitor, ...], state: _SearchState
    ) -> Optional[Tuple[Pair, ...]]:
        """Pair ``pool`` completely, or return None.

        ``pool`` is immutable and kept in seed order; each branch builds its
        own smaller pool. Pools that failed once are remembered, since the
        outcome depends only on which competitors remain. A pool whose
        compatibility graph has an odd component fails without branching.
        """
        if not pool:
            return ()
        key = frozenset(c.id for c in pool)
        if key in state.failed_pools:
            return None
        state.nodes += 1
        if _has_odd_component(pool):
            state.failed_pools.add(key)
            return None

        a, rest = pool[0], pool[1:]
        for b in self._candidates(a, rest, state.last_table):
            remaining = tuple(c for c in rest if c.id != b.id)
            tail = self._search(remaining, state)
            if tail is not None:
                return ((a, b),) + tail

        state.failed_pools.add(key)
        return None

    def _candidates(
        self,
        a: Competitor,
        rest: Sequence[Competitor],
        last_table: Dict[str, int],
    ) -> List[Competitor]:
        """Legal opponents for ``a``: closest score first, then nearest table."""
        ranked = []
        for position, b in enumerate(rest):
            if not _are_compatible(a, b):
                continue
            ranked.append(
                (
                    abs(a.score - b.score),
                    _table_proximity(a, b, last_table),
                    position,
                    b,
                )
            )
        ranked.sort(key=lambda item: item[:3])
        return [item[3] for item in ranked]

    # ========== Table ordering ==========

    def _order_tables(
        self,
        matches: List[Match],
        anchor_id: Optional[str],
        rank: Dict[str, int],
    ) -> List[Match]:
        """Previous table-1 winner first, bye last, the rest by best standing.

        Table numbers are reassigned 1..N in the final order.
        """
        worst = len(rank) + 1

        def best_rank(match: Match) -> int:
            if match.is_bye:
                return worst
            return min(rank.get(cid, worst) for cid in match.participant_ids)

        ordered = sorted(
            matches,
            key=lambda m: (m.is_bye, not m.involves(anchor_id), best_rank(m)),
        )
        for table, match in enumerate(ordered, start=1):
            match.table_number = table
        return ordered

    def _build_match(
        self,
        round_number: int,
        table_number: int,
        a_id: str,
        b_id: Optional[str],
        white_id: Optional[str],
        black_id: Optional[str],
    ) -> Match:
        return Match(
            round_number=round_number,
            table_number=table_number,
            competitor_a_id=a_id,
            competitor_b_id=b_id if b_id is not None else BYE_ID,
            white_id=white_id,
            black_id=black_id,
        )
