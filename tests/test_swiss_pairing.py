import time

import pytest

from swissround.constants import BYE_ID
from swissround.controllers.tournament import AggregateRecomputer
from swissround.exceptions import ConstraintUnsatisfiable, ValidationError
from swissround.models.competitor import Competitor
from swissround.models.tournament import ResultCode, RoundData, Tournament
from swissround.pairing import (
    FixedPairingStrategy,
    RandomPairingStrategy,
    ShufflePairingStrategy,
    SwissPairingEngine,
)


def _field(names):
    return [Competitor(id=f"p{i}", name=name) for i, name in enumerate(names, 1)]


def _engine():
    return SwissPairingEngine(round_one_strategy=FixedPairingStrategy())


def _play_round_one(names, codes):
    """Pair round 1 in list order, apply ``codes`` table by table, rebuild."""
    competitors = _field(names)
    tournament = Tournament(title="Test", competitors=competitors)
    matches = _engine().generate(tournament, competitors, 1)
    for match, code in zip(matches, codes):
        match.apply_result(ResultCode(code), tournament.bye_score)
    round_one = RoundData(1, matches)
    round_one.refresh_completion()
    tournament.rounds.append(round_one)
    tournament.current_round = 1
    AggregateRecomputer().recompute(competitors, tournament.rounds, 1)
    return tournament, competitors


def _pairs(matches):
    return [(m.competitor_a_id, m.competitor_b_id) for m in matches]


# ========== Round 1 ==========


def test_round_one_fixed_order_puts_bye_last():
    competitors = _field(["Ana", "Bo", "Cy", "Di", "Ed"])
    tournament = Tournament(title="Test", competitors=competitors)
    matches = _engine().generate(tournament, competitors, 1)

    assert _pairs(matches) == [("p1", "p2"), ("p3", "p4"), ("p5", BYE_ID)]
    assert [m.table_number for m in matches] == [1, 2, 3]
    assert matches[0].white_id == "p1" and matches[0].black_id == "p2"
    assert matches[2].is_bye and matches[2].black_id is None


def test_round_one_shuffle_is_reproducible_with_seed():
    competitors = _field(["Ana", "Bo", "Cy", "Di", "Ed", "Fy", "Gus"])
    tournament = Tournament(title="Test", competitors=competitors)

    first = SwissPairingEngine(ShufflePairingStrategy(seed=42)).generate(
        tournament, competitors, 1
    )
    second = SwissPairingEngine(ShufflePairingStrategy(seed=42)).generate(
        tournament, competitors, 1
    )

    assert _pairs(first) == _pairs(second)
    seated = [cid for m in first for cid in m.participant_ids]
    assert sorted(seated) == sorted(c.id for c in competitors)
    assert sum(1 for m in first if m.is_bye) == 1
    assert first[-1].is_bye


def test_round_one_rejects_incomplete_strategy_plan():
    class DropsOne(RandomPairingStrategy):
        def pair(self, competitor_ids):
            return [(competitor_ids[0], competitor_ids[1])]

    competitors = _field(["Ana", "Bo", "Cy", "Di"])
    tournament = Tournament(title="Test", competitors=competitors)

    with pytest.raises(ValidationError):
        SwissPairingEngine(DropsOne()).generate(tournament, competitors, 1)


# ========== Later rounds ==========


def test_pairs_closest_score_then_nearest_previous_table():
    tournament, competitors = _play_round_one(
        ["Ana", "Bo", "Cy", "Di", "Ed", "Fy"], ["A_WIN", "A_WIN", "A_WIN"]
    )
    matches = _engine().generate(tournament, competitors, 2)

    assert _pairs(matches) == [("p1", "p3"), ("p5", "p4"), ("p2", "p6")]
    assert [m.table_number for m in matches] == [1, 2, 3]


def test_colour_swaps_when_first_competitor_had_white():
    tournament, competitors = _play_round_one(
        ["Ana", "Bo", "Cy", "Di", "Ed", "Fy"], ["A_WIN", "A_WIN", "A_WIN"]
    )
    matches = _engine().generate(tournament, competitors, 2)
    by_pair = {(m.competitor_a_id, m.competitor_b_id): m for m in matches}

    # p1 and p5 played White in round 1, p2 played Black
    assert by_pair[("p1", "p3")].white_id == "p3"
    assert by_pair[("p5", "p4")].white_id == "p4"
    assert by_pair[("p2", "p6")].white_id == "p2"
    for match in matches:
        assert {match.white_id, match.black_id} == {
            match.competitor_a_id,
            match.competitor_b_id,
        }


def test_previous_table_one_winner_is_seated_first():
    tournament, competitors = _play_round_one(
        ["Zed", "Bo", "Cy", "Di", "Ed", "Fy"], ["A_WIN", "A_WIN", "A_WIN"]
    )
    matches = _engine().generate(tournament, competitors, 2)

    # Zed ranks last among the winners but won table 1
    assert _pairs(matches) == [("p1", "p4"), ("p3", "p5"), ("p2", "p6")]


def test_draw_on_table_one_does_not_anchor():
    tournament, competitors = _play_round_one(
        ["Zed", "Bo", "Cy", "Di", "Ed", "Fy"], ["DRAW", "A_WIN", "A_WIN"]
    )
    matches = _engine().generate(tournament, competitors, 2)

    assert _pairs(matches) == [("p3", "p5"), ("p2", "p4"), ("p1", "p6")]


def test_odd_field_gives_bye_to_lowest_ranked_without_bye():
    tournament, competitors = _play_round_one(
        ["Ana", "Bo", "Cy", "Di", "Ed"], ["A_WIN", "A_WIN", "BYE_A"]
    )
    matches = _engine().generate(tournament, competitors, 2)

    byes = [m for m in matches if m.is_bye]
    assert len(byes) == 1
    assert byes[0] is matches[-1]
    assert byes[0].competitor_a_id == "p2"
    assert _pairs(matches[:-1]) == [("p1", "p3"), ("p5", "p4")]


def test_bye_skips_competitor_who_already_had_one():
    ana = Competitor(id="p1", name="Ana", score=1.0, opponent_ids=["p2"])
    bo = Competitor(id="p2", name="Bo", score=0.0, opponent_ids=["p1"])
    # Al would be chosen on score, Buchholz and name, but already had a bye
    al = Competitor(id="p3", name="Al", score=0.0, has_bye=True)
    tournament = Tournament(title="Test", competitors=[ana, bo, al])

    matches = _engine().generate(tournament, [ana, bo, al], 2)

    assert matches[-1].is_bye
    assert matches[-1].competitor_a_id == "p2"
    assert _pairs(matches[:-1]) == [("p1", "p3")]


def test_bye_moves_up_when_lowest_choice_leaves_no_pairing():
    ana = Competitor(id="p1", name="Ana", score=1.0, opponent_ids=["p2", "p3"])
    bo = Competitor(id="p2", name="Bo", score=0.0, opponent_ids=["p1"])
    cy = Competitor(id="p3", name="Cy", score=1.0, opponent_ids=["p1"])
    tournament = Tournament(title="Test", competitors=[ana, bo, cy])

    matches = _engine().generate(tournament, [ana, bo, cy], 3)

    assert matches[-1].competitor_a_id == "p1"
    assert _pairs(matches[:-1]) == [("p3", "p2")]


def test_everyone_played_everyone_is_unsatisfiable():
    ids = ["p1", "p2", "p3", "p4"]
    competitors = [
        Competitor(
            id=cid,
            name=name,
            score=1.5,
            opponent_ids=[other for other in ids if other != cid],
        )
        for cid, name in zip(ids, ["Ana", "Bo", "Cy", "Di"])
    ]
    tournament = Tournament(title="Test", competitors=competitors)

    with pytest.raises(ConstraintUnsatisfiable) as excinfo:
        _engine().generate(tournament, competitors, 4)

    assert excinfo.value.round_number == 4
    assert tournament.rounds == []


def test_score_gap_above_one_point_is_never_paired():
    competitors = [
        Competitor(id="p1", name="Ana", score=2.0, opponent_ids=["p2"]),
        Competitor(id="p2", name="Bo", score=2.0, opponent_ids=["p1"]),
        Competitor(id="p3", name="Cy", score=0.0, opponent_ids=["p4"]),
        Competitor(id="p4", name="Di", score=0.0, opponent_ids=["p3"]),
    ]
    tournament = Tournament(title="Test", competitors=competitors)

    with pytest.raises(ConstraintUnsatisfiable):
        _engine().generate(tournament, competitors, 3)


def test_later_rounds_are_deterministic():
    tournament, competitors = _play_round_one(
        ["Ana", "Bo", "Cy", "Di", "Ed", "Fy", "Gus"],
        ["A_WIN", "DRAW", "B_WIN", "BYE_A"],
    )
    first = _engine().generate(tournament, competitors, 2)
    second = _engine().generate(tournament, competitors, 2)

    assert [m.to_dict() for m in first] == [m.to_dict() for m in second]


def _leaders_and_stranded_pair(leader_count):
    """``leader_count`` fresh competitors on 2.0 and two on 0.0 who already met."""
    leaders = [
        Competitor(id=f"p{i}", name=f"Leader {i:02d}", score=2.0)
        for i in range(1, leader_count + 1)
    ]
    stranded = [
        Competitor(id="x1", name="Xia", score=0.0, opponent_ids=["x2"]),
        Competitor(id="x2", name="Xu", score=0.0, opponent_ids=["x1"]),
    ]
    return leaders + stranded


@pytest.mark.parametrize("leader_count", [40, 41])
def test_isolated_competitors_fail_fast(leader_count):
    competitors = _leaders_and_stranded_pair(leader_count)
    tournament = Tournament(title="Test", competitors=competitors)

    started = time.perf_counter()
    with pytest.raises(ConstraintUnsatisfiable):
        _engine().generate(tournament, competitors, 3)
    assert time.perf_counter() - started < 2.0


def test_odd_group_within_even_field_is_unsatisfiable():
    # Three 1.0 players who all met each other, three 3.0 players fresh:
    # the 3.0 group is odd and cut off from the rest by the score gap.
    low = [
        Competitor(
            id=cid,
            name=name,
            score=1.0,
            opponent_ids=[o for o in ("p1", "p2", "p3") if o != cid],
        )
        for cid, name in [("p1", "Ana"), ("p2", "Bo"), ("p3", "Cy")]
    ]
    high = [
        Competitor(id=cid, name=name, score=3.0)
        for cid, name in [("p4", "Di"), ("p5", "Ed"), ("p6", "Fy")]
    ]
    tournament = Tournament(title="Test", competitors=low + high)

    with pytest.raises(ConstraintUnsatisfiable):
        _engine().generate(tournament, low + high, 4)
