"""Round lifecycle management for tournaments.

This module is the operation surface of the package: initializing a
tournament, advancing rounds, recording and clearing results, cancelling and
reverting rounds, and producing standings.

The Tournament aggregate is passed explicitly to every call and owned by the
caller. Each operation validates everything before its first mutation, so
a raised exception leaves the aggregate exactly as it was.
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

from typing import Iterable, List, Optional, Union

from swissround.constants import (
    EVENT_COMPETITOR_ADDED,
    EVENT_MATCH_RESULT_CLEARED,
    EVENT_ROUND_CANCELLED,
    EVENT_ROUND_RESULTS_CLEARED,
    EVENT_ROUND_REVERTED,
    EVENT_ROUND_STARTED,
    EVENT_TOURNAMENT_INITIALIZED,
    RESULT_REJECT,
    STATUS_ACTIVE,
    STATUS_COMPLETE,
)
from swissround.controllers.tournament.aggregate_recomputer import AggregateRecomputer
from swissround.controllers.tournament.audit_log import AuditLog
from swissround.controllers.tournament.standings_calculator import StandingsCalculator
from swissround.exceptions import (
    DuplicateCompetitorError,
    IncompleteRoundError,
    ResultAlreadyRecordedError,
    RoundNotFoundError,
    StateError,
    ValidationError,
)
from swissround.models.competitor import Competitor, create_competitor
from swissround.models.tournament import (
    Match,
    ResultCode,
    RoundData,
    Tournament,
    TournamentConfig,
)
from swissround.pairing.base import PairingEngine
from swissround.pairing.swiss import SwissPairingEngine
from swissround.type_hints import ResultCodeValue
from swissround.utils import setup_logger
from swissround.utils.validation import validate_required_text

logger = setup_logger(__name__)

CompetitorInput = Union[Competitor, str]


class RoundLifecycle:
    """Orchestrates the round state machine of a tournament.

    States: not started (round 0), round n open (results missing), round n
    complete, then round n+1 opens on advance.

    This class coordinates:
    - SwissPairingEngine (or any PairingEngine): generates the next round
    - AggregateRecomputer: rebuilds competitor aggregates from round history
    - StandingsCalculator: Buchholz and standings order
    - AuditLog: append-only event trail
    """

    def __init__(
        self,
        pairing_engine: Optional[PairingEngine] = None,
        recomputer: Optional[AggregateRecomputer] = None,
        standings_calculator: Optional[StandingsCalculator] = None,
        audit_log: Optional[AuditLog] = None,
    ):
        """Initialize the lifecycle manager.

        Args:
            pairing_engine: Engine used by advance (defaults to SwissPairingEngine)
            recomputer: Aggregate recomputer
            standings_calculator: Standings/tie-break calculator
            audit_log: Audit log writer (its clock also stamps start/end times)
        """
        self.standings_calculator = standings_calculator or StandingsCalculator()
        self.pairing_engine = pairing_engine or SwissPairingEngine(
            standings_calculator=self.standings_calculator
        )
        self.recomputer = recomputer or AggregateRecomputer()
        self.audit_log = audit_log or AuditLog()

    # ========== Setup ==========

    def initialize_tournament(
        self,
        title: str,
        description: str,
        competitors: Iterable[CompetitorInput],
        config: Optional[TournamentConfig] = None,
    ) -> Tournament:
        """Create a tournament ready for round 1.

        Args:
            title: Tournament title (required)
            description: Tournament description (required)
            competitors: Competitor objects, or names to create competitors from
            config: Scoring and policy settings

        Returns:
            A new Tournament owned by the caller

        Raises:
            ValidationError: Blank title/description/name, reserved or duplicate id
        """
        clean_title = validate_required_text(title, "Title").raise_if_invalid()
        clean_description = validate_required_text(
            description, "Description"
        ).raise_if_invalid()

        roster = [self._fresh_competitor(c) for c in competitors]
        seen = set()
        for competitor in roster:
            if competitor.id in seen:
                raise DuplicateCompetitorError(
                    f"Duplicate competitor id: {competitor.id}"
                )
            seen.add(competitor.id)

        tournament = Tournament(
            title=clean_title,
            description=clean_description,
            status=STATUS_ACTIVE,
            current_round=0,
            total_competitors=len(roster),
            config=config or TournamentConfig(),
            competitors=roster,
            start_time=self.audit_log.clock(),
        )
        self.audit_log.append(
            tournament,
            EVENT_TOURNAMENT_INITIALIZED,
            details={
                "title": tournament.title,
                "competitor_ids": [c.id for c in roster],
                "config": tournament.config.to_dict(),
            },
        )
        logger.info(
            f"Initialized tournament '{tournament.title}' "
            f"with {len(roster)} competitors"
        )
        return tournament

    def add_competitor(
        self,
        tournament: Tournament,
        name: str,
        competitor_id: Optional[str] = None,
    ) -> Competitor:
        """Register one more competitor before round 1 is created.

        Raises:
            StateError: If the tournament has already started
            ValidationError: Blank name, reserved or duplicate id
        """
        tournament = self._require(tournament)
        if tournament.has_started:
            logger.warning("Refused to add competitor after the tournament started")
            raise StateError(
                "cannot add competitors after tournament has started "
                f"(current round: {tournament.current_round})"
            )
        competitor = create_competitor(name, competitor_id)
        if tournament.get_competitor(competitor.id) is not None:
            raise DuplicateCompetitorError(f"Duplicate competitor id: {competitor.id}")

        tournament.competitors.append(competitor)
        tournament.total_competitors = len(tournament.competitors)
        self.audit_log.append(
            tournament,
            EVENT_COMPETITOR_ADDED,
            details={"competitor": competitor.to_dict()},
        )
        logger.info(f"Added competitor: {competitor.name} ({competitor.id})")
        return competitor

    # ========== Round progression ==========

    def advance_to_next_round(self, tournament: Tournament) -> RoundData:
        """Pair and open the next round.

        Rounds numbered above the current round (kept after going back) are
        replaced by the newly generated round.

        Returns:
            The new round

        Raises:
            IncompleteRoundError: The current round still has unresolved tables
            StateError: Fewer than two competitors, or all planned rounds played
            ConstraintUnsatisfiable: No complete pairing exists
        """
        tournament = self._require(tournament)
        if len(tournament.competitors) < 2:
            raise StateError("cannot pair a round with fewer than two competitors")

        rounds_total = tournament.config.rounds_total
        if rounds_total and tournament.current_round >= rounds_total:
            raise StateError(
                f"Cannot create more rounds: already at {rounds_total} rounds"
            )

        if tournament.current_round > 0:
            self._ensure_current_round_complete(tournament)

        self._recompute(tournament)
        next_round = tournament.current_round + 1
        matches = self.pairing_engine.generate(
            tournament, tournament.competitors, next_round
        )

        new_round = RoundData(round_number=next_round, matches=matches)
        new_round.refresh_completion()
        discarded = [
            r.round_number
            for r in tournament.rounds
            if r.round_number > tournament.current_round
        ]
        tournament.rounds = [
            r for r in tournament.rounds if r.round_number <= tournament.current_round
        ] + [new_round]
        tournament.current_round = next_round
        tournament.total_competitors = len(tournament.competitors)
        self._refresh(tournament)

        self.audit_log.append(
            tournament,
            EVENT_ROUND_STARTED,
            round_number=next_round,
            details={
                "matches": [m.to_dict() for m in matches],
                "discarded_rounds": discarded,
            },
        )
        logger.info(f"Advanced to round {next_round} ({len(matches)} tables)")
        return new_round

    def _ensure_current_round_complete(self, tournament: Tournament) -> None:
        current = tournament.get_round(tournament.current_round)
        if current is None:
            raise StateError(
                f"current round {tournament.current_round} not found in rounds data"
            )
        unresolved = current.unresolved_matches
        if not unresolved:
            return

        details = []
        for match in unresolved:
            name_a = tournament.competitor_name(match.competitor_a_id)
            if match.is_bye:
                details.append(f"Table {match.table_number}: {name_a} (BYE)")
            else:
                name_b = tournament.competitor_name(match.competitor_b_id)
                details.append(f"Table {match.table_number}: {name_a} vs {name_b}")
        logger.warning(
            f"Refused to advance: round {current.round_number} has "
            f"{len(unresolved)} unresolved tables"
        )
        raise IncompleteRoundError(
            current.round_number,
            [m.table_number for m in unresolved],
            len(current.matches),
            details,
        )

    def cancel_current_round(self, tournament: Tournament) -> RoundData:
        """Remove the current round if nothing has been recorded in it.

        Returns:
            The removed round

        Raises:
            StateError: No round to cancel, or results recorded in this round or in
                a retained later round
        """
        tournament = self._require(tournament)
        if tournament.current_round <= 0:
            raise StateError(
                "cannot cancel: no rounds to cancel "
                f"(current round: {tournament.current_round})"
            )
        current = tournament.get_round(tournament.current_round)
        if current is None:
            raise RoundNotFoundError(tournament.current_round)
        if current.recorded_count > 0:
            logger.warning(
                f"Refused to cancel round {current.round_number}: "
                f"{current.recorded_count} results recorded"
            )
            raise StateError(
                f"cannot cancel round {current.round_number}: matches have recorded "
                "results. Please clear all results first"
            )

        later = [r for r in tournament.rounds if r.round_number > current.round_number]
        played_later = [r.round_number for r in later if r.recorded_count > 0]
        if played_later:
            logger.warning(
                f"Refused to cancel round {current.round_number}: later rounds "
                f"{played_later} have recorded results"
            )
            raise StateError(
                f"cannot cancel round {current.round_number}: rounds {played_later} "
                "after it have recorded results. Please clear them first"
            )

        discarded = [r.round_number for r in later]
        tournament.rounds = [
            r for r in tournament.rounds if r.round_number < current.round_number
        ]
        tournament.current_round -= 1
        self._refresh(tournament)

        self.audit_log.append(
            tournament,
            EVENT_ROUND_CANCELLED,
            round_number=current.round_number,
            details={
                "cancelled_round": current.round_number,
                "discarded_rounds": discarded,
                "reason": "Round cancelled and reverted",
            },
        )
        logger.info(f"Cancelled round {current.round_number}")
        return current

    def go_back_to_previous_round(self, tournament: Tournament) -> int:
        """Step the current-round pointer back by one, keeping all round data.

        Aggregates are rebuilt from rounds up to the new current round only.

        Returns:
            The new current round number

        Raises:
            StateError: Already at round 1 or not started
        """
        tournament = self._require(tournament)
        if tournament.current_round <= 1:
            logger.warning("Refused to go back: already at round 1 or not started")
            raise StateError(
                "cannot go back: already at round 1 or no rounds exist "
                f"(current round: {tournament.current_round})"
            )
        previous = tournament.current_round - 1
        if tournament.get_round(previous) is None:
            raise RoundNotFoundError(previous)

        tournament.current_round = previous
        self._refresh(tournament)

        self.audit_log.append(
            tournament,
            EVENT_ROUND_REVERTED,
            round_number=previous,
            details={
                "previous_round": previous + 1,
                "new_round": previous,
                "reason": "Went back to previous round",
            },
        )
        logger.info(f"Went back from round {previous + 1} to round {previous}")
        return previous

    # ========== Results ==========

    def record_match_result(
        self,
        tournament: Tournament,
        round_number: int,
        table_number: int,
        result_code: Union[ResultCode, ResultCodeValue],
    ) -> Match:
        """Record the result of one match.

        Args:
            tournament: The tournament
            round_number: Round of the match
            table_number: Table of the match
            result_code: One of A_WIN, B_WIN, DRAW, BYE_A

        Returns:
            The updated match

        Raises:
            ValidationError: Unknown code, or a code that does not fit the match
            NotFoundError: No such round/table
            ResultAlreadyRecordedError: Match resolved and policy is "reject"
        """
        tournament = self._require(tournament)
        code = ResultCode.parse(result_code)
        round_data = tournament.require_round(round_number)
        match = tournament.require_match(round_number, table_number)

        if code == ResultCode.BYE_A and not match.is_bye:
            raise ValidationError(
                f"invalid result BYE_A for non-bye match at round {round_number}, "
                f"table {table_number}"
            )
        if match.is_bye and code != ResultCode.BYE_A:
            raise ValidationError(
                f"bye match at round {round_number}, table {table_number} "
                "only accepts BYE_A"
            )
        if match.has_result and tournament.config.result_overwrite == RESULT_REJECT:
            logger.warning(
                f"Refused to overwrite result at round {round_number}, "
                f"table {table_number}"
            )
            raise ResultAlreadyRecordedError(
                f"result already recorded for round {round_number}, "
                f"table {table_number} ({match.result.value})"
            )

        if match.has_result:
            logger.info(
                f"Overwriting result {match.result.value} -> {code.value} "
                f"at round {round_number}, table {table_number}"
            )
        match.apply_result(code, tournament.bye_score)
        round_data.refresh_completion()
        self._refresh(tournament)
        self.audit_log.record_match_result(tournament, match)

        logger.debug(
            f"Recorded round {round_number} table {table_number}: {code.value} "
            f"({match.score_a}-{match.score_b})"
        )
        return match

    def clear_match_result(
        self, tournament: Tournament, round_number: int, table_number: int
    ) -> Match:
        """Reset one match to unresolved and rebuild aggregates."""
        tournament = self._require(tournament)
        round_data = tournament.require_round(round_number)
        match = tournament.require_match(round_number, table_number)

        previous = match.result.value if match.result else ""
        match.clear_result()
        round_data.refresh_completion()
        self._refresh(tournament)

        self.audit_log.append(
            tournament,
            EVENT_MATCH_RESULT_CLEARED,
            round_number=round_number,
            table_number=table_number,
            details={"previous_result": previous, "match": match.to_dict()},
        )
        logger.info(f"Cleared result at round {round_number}, table {table_number}")
        return match

    def clear_all_results_in_round(
        self, tournament: Tournament, round_number: int
    ) -> RoundData:
        """Reset every match of a round to unresolved and rebuild aggregates."""
        tournament = self._require(tournament)
        round_data = tournament.require_round(round_number)

        cleared = [m.table_number for m in round_data.matches if m.has_result]
        for match in round_data.matches:
            match.clear_result()
        round_data.refresh_completion()
        self._refresh(tournament)

        self.audit_log.append(
            tournament,
            EVENT_ROUND_RESULTS_CLEARED,
            round_number=round_number,
            details={"cleared_tables": cleared},
        )
        logger.info(f"Cleared {len(cleared)} results in round {round_number}")
        return round_data

    # ========== Queries ==========

    def get_standings(self, tournament: Tournament) -> List[Competitor]:
        """Competitors best first (score, Buchholz, name), tie-breaks refreshed."""
        tournament = self._require(tournament)
        self.recomputer.recompute(
            tournament.competitors, tournament.rounds, tournament.current_round
        )
        return self.standings_calculator.standings(tournament.competitors)

    def get_current_round(self, tournament: Tournament) -> Optional[RoundData]:
        """The round being played, or None before round 1."""
        return self._require(tournament).get_current_round()

    def get_round(self, tournament: Tournament, round_number: int) -> RoundData:
        return self._require(tournament).require_round(round_number)

    def get_competitors(self, tournament: Tournament) -> List[Competitor]:
        return list(self._require(tournament).competitors)

    # ========== Internals ==========

    def _require(self, tournament: Optional[Tournament]) -> Tournament:
        if tournament is None:
            raise StateError("No active tournament")
        return tournament

    def _fresh_competitor(self, competitor: CompetitorInput) -> Competitor:
        if isinstance(competitor, Competitor):
            return create_competitor(competitor.name, competitor.id)
        return create_competitor(competitor)

    def _recompute(self, tournament: Tournament) -> None:
        self.recomputer.recompute(
            tournament.competitors, tournament.rounds, tournament.current_round
        )
        self.standings_calculator.calculate_buchholz(tournament.competitors)

    def _refresh(self, tournament: Tournament) -> None:
        self._recompute(tournament)
        self._refresh_status(tournament)

    def _refresh_status(self, tournament: Tournament) -> None:
        rounds_total = tournament.config.rounds_total
        current = tournament.get_current_round()
        finished = (
            bool(rounds_total)
            and tournament.current_round >= rounds_total
            and current is not None
            and current.is_completed
        )
        if finished and tournament.status != STATUS_COMPLETE:
            tournament.status = STATUS_COMPLETE
            tournament.end_time = self.audit_log.clock()
            logger.info(f"Tournament '{tournament.title}' complete")
        elif not finished and tournament.status == STATUS_COMPLETE:
            tournament.status = STATUS_ACTIVE
            tournament.end_time = None
