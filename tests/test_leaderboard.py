import pytest

from pitchrate.leaderboard import LeaderboardCriteria, LeaderboardEntry, build_leaderboard
from pitchrate.models import AnalysisMetrics


def _entry(player_id: str, name: str, position: str = "FW", **metrics) -> LeaderboardEntry:
    base = {"speed": 25, "stamina": 50, "dribbling": 50, "passing": 50, "shooting": 50}
    base.update(metrics)
    return LeaderboardEntry(player_id=player_id, name=name, position=position, metrics=AnalysisMetrics(**base))


@pytest.fixture
def entries() -> list[LeaderboardEntry]:
    return [
        _entry("p1", "Ada", position="MF", passing=90, overall_accuracy=70),
        _entry("p2", "Ben", speed=34, shooting=85, overall_accuracy=95),
        _entry("p3", "Cy", position="DF", stamina=95, overall_accuracy=60),
        _entry("p4", "Dee", position="FW"),
    ]


def test_default_sorts_by_rating(entries):
    result = build_leaderboard(entries)

    assert result.total_players == 4
    assert [player.rank for player in result.players] == [1, 2, 3, 4]
    ratings = [player.rating for player in result.players]
    assert ratings == sorted(ratings, reverse=True)
    assert result.players[0].entry.player_id == "p2"
    assert result.players[-1].entry.player_id == "p4"


def test_sort_by_accuracy(entries):
    result = build_leaderboard(entries, LeaderboardCriteria(sort_by="accuracy"))
    assert [player.entry.player_id for player in result.players] == ["p2", "p1", "p3", "p4"]


def test_sort_by_stamina(entries):
    result = build_leaderboard(entries, LeaderboardCriteria(sort_by="stamina"))
    assert result.players[0].entry.player_id == "p3"


def test_limit_keeps_total(entries):
    result = build_leaderboard(entries, LeaderboardCriteria(limit=2))
    assert result.total_players == 4
    assert len(result.players) == 2


def test_position_filter_is_case_insensitive(entries):
    result = build_leaderboard(entries, LeaderboardCriteria(position="fw"))
    assert result.total_players == 2
    assert {player.entry.player_id for player in result.players} == {"p2", "p4"}


def test_ties_break_by_name():
    tied = [_entry("b", "Zed"), _entry("a", "Abe")]
    result = build_leaderboard(tied)
    assert [player.entry.name for player in result.players] == ["Abe", "Zed"]


def test_empty_leaderboard():
    result = build_leaderboard([])
    assert result.total_players == 0
    assert result.players == []


def test_nan_metric_ranks_after_finite_players():
    entries = [
        _entry("a", "Ada", speed=20),
        _entry("n", "Nan", speed=float("nan")),
        _entry("b", "Ben", speed=30),
        _entry("c", "Cy", speed=25),
    ]

    result = build_leaderboard(entries, LeaderboardCriteria(sort_by="speed"))
    assert [player.entry.player_id for player in result.players] == ["b", "c", "a", "n"]
    assert [player.rank for player in result.players] == [1, 2, 3, 4]
