import logging

import pytest

from bowlrank.config import DEFAULT_RULES, LeagueRules
from bowlrank.models import PlayerScore
from bowlrank.scoring import compute_roster_stats
from bowlrank.standings import (
    assign_ranks_and_points,
    rank_lookup,
    resolve_standings,
    select_finalists,
    sort_players,
)


def _rules(finalists: int = 12, max_points: int = 24) -> LeagueRules:
    return LeagueRules(name="T", handicap_bonus=8, finalists_count=finalists, max_ranking_points=max_points)


def _player(pid: str, name: str, games=(0, 0, 0), final=None, *, handicap=False) -> PlayerScore:
    g1, g2, g3 = games
    return PlayerScore(
        player_id=pid,
        name=name,
        g1=g1,
        g2=g2,
        g3=g3,
        final_game=final,
        is_handicap_eligible=handicap,
    )


def _sample_roster() -> list[PlayerScore]:
    return [
        _player("a", "Adam", (150, 150, 150), 160),
        _player("b", "Beata", (180, 170, 160), 150, handicap=True),
        _player("c", "Cezary", (120, 130, 140)),
        _player("d", "Dorota", (200, 190, 210), 220),
        _player("e", "Edward", (100, 110, 90)),
    ]


def _ids(players) -> list[str]:
    return [player.player_id for player in players]


def test_select_finalists_takes_top_by_elimination_total():
    roster = compute_roster_stats(_sample_roster())

    assert select_finalists(roster, _rules(finalists=2)) == {"d", "b"}


@pytest.mark.parametrize("count, expected", [(0, 0), (3, 3), (5, 5), (12, 5)])
def test_finalist_cap(count, expected):
    roster = compute_roster_stats(_sample_roster())

    assert len(select_finalists(roster, _rules(finalists=count))) == expected


def test_finalist_ties_broken_by_case_sensitive_name():
    roster = compute_roster_stats(
        [
            _player("x", "alice", (150, 150, 150)),
            _player("y", "Bob", (150, 150, 150)),
        ]
    )

    # Uppercase sorts before lowercase.
    assert select_finalists(roster, _rules(finalists=1)) == {"y"}
    assert select_finalists(list(reversed(roster)), _rules(finalists=1)) == {"y"}


def test_resolve_standings_finalists_first_then_final_total():
    roster = compute_roster_stats(_sample_roster())
    order = resolve_standings(roster, _rules(finalists=3))

    # Finalists d, b, a ordered by final total; then c, e by elimination total.
    assert _ids(order) == ["d", "b", "a", "c", "e"]


def test_final_totals_within_epsilon_fall_back_to_elimination_average():
    roster = [
        PlayerScore(
            player_id="a",
            name="A",
            elimination_total=450,
            elimination_avg=150.0,
            final_total=300.005,
        ),
        PlayerScore(
            player_id="b",
            name="B",
            elimination_total=480,
            elimination_avg=160.0,
            final_total=300.00,
        ),
    ]

    order = resolve_standings(roster, _rules(), finalists={"a", "b"})
    assert _ids(order) == ["b", "a"]


def test_final_totals_beyond_epsilon_are_decisive():
    roster = [
        PlayerScore(player_id="a", name="A", elimination_avg=150.0, final_total=300.02),
        PlayerScore(player_id="b", name="B", elimination_avg=160.0, final_total=300.00),
    ]

    order = resolve_standings(roster, _rules(), finalists={"a", "b"})
    assert _ids(order) == ["a", "b"]


def test_missing_final_ranks_below_any_played_final():
    roster = [
        PlayerScore(player_id="absent", name="A", elimination_avg=200.0, final_total=None),
        PlayerScore(player_id="played", name="B", elimination_avg=100.0, final_total=0.005),
    ]

    order = resolve_standings(roster, _rules(), finalists={"absent", "played"})
    assert _ids(order) == ["played", "absent"]


def test_zero_finalists_degenerates_to_elimination_order():
    roster = compute_roster_stats(_sample_roster())
    order = resolve_standings(roster, _rules(finalists=0))

    assert _ids(order) == ["d", "b", "a", "c", "e"]
    totals = [player.elimination_total for player in order]
    assert totals == sorted(totals, reverse=True)


def test_assign_ranks_and_points_preserves_input_order():
    roster = _sample_roster()
    ranked = assign_ranks_and_points(roster, _rules(finalists=3))

    assert _ids(ranked) == _ids(roster)
    ranks = {player.player_id: player.rank for player in ranked}
    assert ranks == {"d": 1, "b": 2, "a": 3, "c": 4, "e": 5}
    points = {player.player_id: player.ranking_points for player in ranked}
    assert points == {"d": 24, "b": 23, "a": 22, "c": 21, "e": 20}


def test_assign_ranks_recomputes_stale_derived_fields():
    stale = _player("a", "Adam", (200, 200, 200), 200).model_copy(
        update={"elimination_total": 1, "elimination_avg": 0.3, "final_total": None}
    )
    ranked = assign_ranks_and_points([stale, _player("b", "Beata", (100, 100, 100), 100)], _rules())

    assert ranked[0].elimination_total == 600
    assert ranked[0].final_total == pytest.approx(400.0)
    assert ranked[0].rank == 1


def test_points_floor_at_zero_and_decrease_monotonically():
    roster = _sample_roster()
    ranked = assign_ranks_and_points(roster, _rules(finalists=2, max_points=2))

    by_rank = sorted(ranked, key=lambda player: player.rank)
    points = [player.ranking_points for player in by_rank]
    assert points == [2, 1, 0, 0, 0]
    assert all(0 <= value <= 2 for value in points)
    assert points == sorted(points, reverse=True)


def test_assign_ranks_is_deterministic():
    roster = _sample_roster()

    assert assign_ranks_and_points(roster, DEFAULT_RULES) == assign_ranks_and_points(roster, DEFAULT_RULES)


def test_rank_lookup_covers_every_player():
    roster = compute_roster_stats(_sample_roster())
    lookup = rank_lookup(roster, _rules(finalists=3))

    assert set(lookup) == {"a", "b", "c", "d", "e"}
    assert lookup["d"].rank == 1
    assert lookup["d"].points == 24


def test_empty_roster():
    assert assign_ranks_and_points([]) == ()
    assert select_finalists([]) == frozenset()


def test_sort_players_elimination_phase():
    roster = compute_roster_stats(
        [
            _player("a", "Zofia", (150, 150, 150)),
            _player("b", "Adam", (150, 150, 150)),
            _player("c", "Marek", (200, 200, 200)),
        ]
    )

    assert _ids(sort_players(roster, "ELIMINATION")) == ["c", "b", "a"]


def test_sort_players_final_phase_matches_classification():
    roster = compute_roster_stats(_sample_roster())
    rules = _rules(finalists=3)

    assert _ids(sort_players(roster, "FINAL", rules)) == _ids(resolve_standings(roster, rules))


def test_sort_players_does_not_touch_input():
    roster = compute_roster_stats(_sample_roster())
    before = _ids(roster)
    sort_players(roster, "FINAL")

    assert _ids(roster) == before


def test_sort_players_rejects_unknown_phase():
    with pytest.raises(ValueError):
        sort_players([], "SEMIFINAL")  # type: ignore[arg-type]


def test_ranking_pass_logs_summary(caplog):
    with caplog.at_level(logging.INFO, logger="bowlrank.standings.resolver"):
        assign_ranks_and_points(_sample_roster(), _rules(finalists=3))

    assert "Ranked 5 players" in caplog.text
