"""Example script running a small club tournament end to end.

Shows the round lifecycle used programmatically: pairing rounds, recording
and correcting results, going back a round, and saving to disk.
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

import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from swissround import (
    IncompleteRoundError,
    RoundLifecycle,
    ShufflePairingStrategy,
    SwissPairingEngine,
    TournamentConfig,
)
from swissround.constants import HALF_POINT_BYE_SCORE
from swissround.storage import JsonTournamentStore


def print_round(tournament, round_data):
    print(f"\nRound {round_data.round_number}")
    for match in round_data.matches:
        white = tournament.competitor_name(match.white_id)
        if match.is_bye:
            print(f"  Table {match.table_number}: {white} has the bye")
            continue
        black = tournament.competitor_name(match.black_id)
        result = match.result.value if match.result else "..."
        print(f"  Table {match.table_number}: {white} - {black}  {result}")


def print_standings(lifecycle, tournament):
    print("\nStandings")
    for rank, competitor in enumerate(lifecycle.get_standings(tournament), start=1):
        print(
            f"  {rank}. {competitor.name:10} {competitor.score:4.1f} "
            f"(Buchholz {competitor.buchholz:.1f})"
        )


def main():
    lifecycle = RoundLifecycle(
        pairing_engine=SwissPairingEngine(ShufflePairingStrategy(seed=2025))
    )
    tournament = lifecycle.initialize_tournament(
        "Thursday Rapid",
        "Club night, 3 rounds",
        ["Ana", "Bo", "Cy", "Di", "Ed"],
        TournamentConfig(bye_score=HALF_POINT_BYE_SCORE, rounds_total=3),
    )

    round_one = lifecycle.advance_to_next_round(tournament)
    for match in round_one.matches:
        code = "BYE_A" if match.is_bye else "A_WIN"
        lifecycle.record_match_result(tournament, 1, match.table_number, code)
    print_round(tournament, round_one)

    round_two = lifecycle.advance_to_next_round(tournament)
    lifecycle.record_match_result(tournament, 2, 1, "DRAW")
    try:
        lifecycle.advance_to_next_round(tournament)
    except IncompleteRoundError as e:
        print(f"\n{e}")

    for match in round_two.matches[1:]:
        code = "BYE_A" if match.is_bye else "B_WIN"
        lifecycle.record_match_result(tournament, 2, match.table_number, code)
    # Correct a typo on table 1
    lifecycle.record_match_result(tournament, 2, 1, "A_WIN")
    print_round(tournament, round_two)
    print_standings(lifecycle, tournament)

    lifecycle.go_back_to_previous_round(tournament)
    print(f"\nWent back to round {tournament.current_round}")
    print_standings(lifecycle, tournament)

    store = JsonTournamentStore(Path("thursday_rapid.json"))
    store.save(tournament)
    print(f"\nSaved {len(tournament.events)} events to {store.path}")


if __name__ == "__main__":
    main()
