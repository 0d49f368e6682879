import pytest

from config import PLAYER_RANKING_TYPES
from data.fetch_player_rankings import (
    PlayerRankingsFetcher, build_leaderboard_requests, team_players, format_ranking_type,
)


def _leaderboard(*players):
    return {"data": {"playersLeaderboard": list(players)}}


def test_batch_has_one_operation_per_ranking_type() -> None:
    requests_ = build_leaderboard_requests(["190", "191"])
    assert len(requests_) == len(PLAYER_RANKING_TYPES)
    first = requests_[0]
    assert first["operationName"] == "PlayersLeaderboard"
    assert first["variables"] == {
        "seasonIds": ["190", "191"],
        "searchParam": "goals",
        "language": "en",
        "age": {"min": 16, "max": 45},
    }
    assert "limit: 30" in first["query"]


def test_results_pair_with_ranking_types_by_position(fake_session, api_cache) -> None:
    payload = [_leaderboard({"name": f"P{i}", "club": "Shelbourne", "value": i})
               for i in range(len(PLAYER_RANKING_TYPES))]
    session = fake_session({"/graphql": payload})
    fetcher = PlayerRankingsFetcher(token="tok", cache=api_cache, session=session)

    results = fetcher.fetch_all_player_rankings(["190"])

    assert [r["ranking_type"] for r in results] == PLAYER_RANKING_TYPES
    assert results[3]["players"][0]["name"] == "P3"
    method, url, _, body = session.calls[0]
    assert method == "POST"
    assert url.endswith("/api/v1/graphql")
    assert len(body) == len(PLAYER_RANKING_TYPES)


def test_player_rankings_cached_per_season_set(fake_session, api_cache) -> None:
    session = fake_session({"/graphql": [_leaderboard()]})
    fetcher = PlayerRankingsFetcher(token="tok", cache=api_cache, session=session)

    fetcher.fetch_all_player_rankings(["190", "191"])
    fetcher.fetch_all_player_rankings(["190", "191"])
    assert len(session.calls) == 1
    assert api_cache.get("player_rankings_190_191_all") is not None


def test_empty_response_raises(fake_session, api_cache) -> None:
    session = fake_session({"/graphql": []})
    fetcher = PlayerRankingsFetcher(token="tok", cache=api_cache, session=session)
    with pytest.raises(RuntimeError, match="No player rankings"):
        fetcher.fetch_all_player_rankings(["190"])


def test_error_object_response_raises(fake_session, api_cache) -> None:
    session = fake_session({"/graphql": {"errors": [{"message": "Unknown season"}]}})
    fetcher = PlayerRankingsFetcher(token="tok", cache=api_cache, session=session)
    with pytest.raises(RuntimeError, match="No player rankings"):
        fetcher.fetch_all_player_rankings(["190"])
    assert api_cache.get("player_rankings_190_all") is None


def test_team_players_keeps_leaderboard_rank() -> None:
    result = {
        "ranking_type": "goals",
        "players": [
            {"name": "A", "club": "Derry City", "value": 12},
            {"name": "B", "club": "Shelbourne", "value": 10},
            {"name": "C", "club": "Derry City", "value": 9},
        ],
    }
    players = team_players(result, "Derry City")
    assert [(p["name"], p["rank"]) for p in players] == [("A", 1), ("C", 3)]
    assert team_players(result, "Bohemians") == []


def test_format_ranking_type() -> None:
    assert format_ranking_type("key_passes") == "Key Passes"
    assert format_ranking_type("goals") == "Goals"
    assert format_ranking_type("aerial_duels_won") == "Aerial Duels Won"
