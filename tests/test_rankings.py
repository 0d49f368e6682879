import pandas as pd
import pytest

from features.rankings import (
    stat_key, is_reversed, rank_teams, merge_rankings, team_rankings, category_rankings,
)


def _table(*rows):
    return [{"name": name, "value": value} for name, value in rows]


def test_stat_key_suffixes_opponent_averages() -> None:
    assert stat_key("shots", "opp/avg") == "shots_opp_avg"
    assert stat_key("shots", "avg") == "shots"
    assert stat_key("goals") == "goals"


def test_reversed_stats() -> None:
    assert is_reversed("conceded_goals")
    assert is_reversed("shots", "opp/avg")
    assert not is_reversed("shots", "avg")
    assert is_reversed("losses", "avg")
    assert not is_reversed("substitution")


def test_rank_descending_by_default() -> None:
    df = rank_teams(_table(("A", 1.0), ("B", 3.0), ("C", 2.0)), ("goals", None, "Attack", "Goals"))
    assert df["team"].tolist() == ["B", "C", "A"]
    assert df["rank"].tolist() == [1, 2, 3]
    assert set(df["category"]) == {"Attack"}
    assert set(df["subcategory"]) == {"Goals"}
    assert set(df["type"]) == {"goals"}


def test_rank_ascending_for_reversed_stat() -> None:
    stat = ("conceded_goals", None, "Defence", "Goals against")
    df = rank_teams(_table(("A", 10), ("B", 4), ("C", 7)), stat)
    assert df["team"].tolist() == ["B", "C", "A"]


def test_opp_avg_reverses_but_avg_does_not() -> None:
    table = _table(("A", 12.0), ("B", 9.0))
    against = rank_teams(table, ("shots", "opp/avg", "Defence", "Shots against"))
    made = rank_teams(table, ("shots", "avg", "Attack", "Shots"))
    assert against["team"].tolist() == ["B", "A"]
    assert made["team"].tolist() == ["A", "B"]


def test_ties_keep_input_order() -> None:
    table = _table(("A", 5), ("B", 7), ("C", 5), ("D", 7))
    df = rank_teams(table, ("goals", None, "Attack", "Goals"))
    assert df["team"].tolist() == ["B", "D", "A", "C"]

    df = rank_teams(table, ("ppda", None, "Defence", "PPDA"))
    assert df["team"].tolist() == ["A", "C", "B", "D"]


def test_missing_value_counts_as_zero() -> None:
    table = [{"name": "A", "value": 2.0}, {"name": "B"}, {"name": "C", "value": None}]
    df = rank_teams(table, ("goals", None, "Attack", "Goals"))
    assert df["team"].tolist() == ["A", "B", "C"]
    assert df["value"].tolist() == [2.0, 0.0, 0.0]


def test_overview_ranks_by_expected_points() -> None:
    table = [
        {"name": "A", "value": 99, "xpoints": 30.5},
        {"name": "B", "value": 1, "xpoints": 41.0},
        {"name": "C", "value": 50},
    ]
    df = rank_teams(table, ("overview", None, "General", "Expected points"))
    assert df["team"].tolist() == ["B", "A", "C"]
    assert df["value"].tolist() == [41.0, 30.5, 0.0]


def test_merge_groups_by_team_in_stat_order() -> None:
    goals = rank_teams(_table(("A", 1), ("B", 2)), ("goals", None, "Attack", "Goals"))
    xga = rank_teams(_table(("A", 1), ("B", 2), ("C", 0)), ("xg_against", None, "Defence", "XGA"))

    merged = merge_rankings([goals, xga])

    assert merged["team"].tolist() == ["B", "B", "A", "A", "C"]
    assert merged[merged["team"] == "B"]["type"].tolist() == ["goals", "xg_against"]
    # C was missing from the goals table, so it only has one row
    c_rows = merged[merged["team"] == "C"]
    assert c_rows["type"].tolist() == ["xg_against"]
    assert c_rows["rank"].tolist() == [1]


def test_merge_empty() -> None:
    merged = merge_rankings([])
    assert merged.empty
    assert "rank" in merged.columns


def test_team_rankings_requires_fetched_team() -> None:
    goals = rank_teams(_table(("A", 1), ("B", 2)), ("goals", None, "Attack", "Goals"))
    merged = merge_rankings([goals])

    assert team_rankings(merged, "A")["rank"].tolist() == [2]
    with pytest.raises(ValueError):
        team_rankings(merged, "Z")
    with pytest.raises(ValueError):
        team_rankings(merged, "")
    with pytest.raises(ValueError):
        team_rankings(pd.DataFrame(columns=merged.columns), "A")


def test_category_rankings_filters() -> None:
    merged = merge_rankings([
        rank_teams(_table(("A", 1)), ("goals", None, "Attack", "Goals")),
        rank_teams(_table(("A", 1)), ("age", None, "General", "Age")),
    ])
    assert category_rankings(merged, "General")["type"].tolist() == ["age"]


def test_duplicate_team_keeps_lower_placed_row() -> None:
    df = rank_teams(_table(("A", 5.0), ("B", 7.0), ("A", 3.0)), ("goals", None, "Attack", "Goals"))
    assert df["team"].tolist() == ["B", "A"]
    assert df["rank"].tolist() == [1, 3]
    assert df["value"].tolist() == [7.0, 3.0]
