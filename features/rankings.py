"""Rank league tables per statistic and merge them per team."""

import pandas as pd

from config import REVERSED_RANK_STATS

RANKING_COLUMNS = ["team", "category", "subcategory", "type", "rank", "value"]


def stat_key(stat_type: str, entity: str | None = None) -> str:
    """Key used to look a stat up in REVERSED_RANK_STATS.

    Opponent averages get an ``_opp_avg`` suffix so "shots" and "shots
    against" can rank in opposite directions.
    """
    if entity == "opp/avg":
        return f"{stat_type}_opp_avg"
    return stat_type


def is_reversed(stat_type: str, entity: str | None = None) -> bool:
    """True when a lower value is better for this stat."""
    return stat_key(stat_type, entity) in REVERSED_RANK_STATS


def rank_teams(teams: list[dict], stat: tuple) -> pd.DataFrame:
    """Rank one league table.

    Args:
        teams: API rows, each with at least ``name`` and ``value``
            (``xpoints`` for the expected-points overview).
        stat: (type, entity, category, subcategory) from TEAM_RANKING_STATS.

    Returns:
        DataFrame with RANKING_COLUMNS, best team first. Ties keep input order.
        Ranks are assigned before duplicate team names collapse, so a gap can
        remain where the dropped row sat.
    """
    stat_type, entity, category, subcategory = stat

    value_field = "xpoints" if stat_type == "overview" else "value"
    ascending = stat_type != "overview" and is_reversed(stat_type, entity)

    df = pd.DataFrame({
        "team": [t.get("name") for t in teams],
        "value": [t.get(value_field) for t in teams],
    })
    df["value"] = pd.to_numeric(df["value"], errors="coerce").fillna(0.0).astype(float)

    df = df.sort_values("value", ascending=ascending, kind="stable").reset_index(drop=True)
    df["rank"] = range(1, len(df) + 1)
    # a team listed twice keeps its lower-placed row
    df = df.drop_duplicates("team", keep="last").reset_index(drop=True)
    df["category"] = category
    df["subcategory"] = subcategory
    df["type"] = stat_type

    return df[RANKING_COLUMNS]


def merge_rankings(frames: list[pd.DataFrame]) -> pd.DataFrame:
    """Combine per-stat rankings into one table grouped by team.

    Teams appear in the order they were first seen; within a team, stats keep
    the order of ``frames``. A team missing from a table has no row for it.
    """
    frames = [f for f in frames if not f.empty]
    if not frames:
        return pd.DataFrame(columns=RANKING_COLUMNS)

    df = pd.concat(frames, ignore_index=True)
    team_order = {team: i for i, team in enumerate(pd.unique(df["team"]))}
    df["_team_order"] = df["team"].map(team_order)
    df = df.sort_values("_team_order", kind="stable").drop(columns="_team_order")
    return df.reset_index(drop=True)


def team_rankings(rankings: pd.DataFrame, team_name: str | None) -> pd.DataFrame:
    """Rows for a single team. Raises ValueError if rankings were never fetched for it."""
    if not team_name or rankings.empty or team_name not in set(rankings["team"]):
        raise ValueError(
            "Team name must be set and rankings must be fetched before getting rankings"
        )
    return rankings[rankings["team"] == team_name].reset_index(drop=True)


def category_rankings(rankings: pd.DataFrame, category: str) -> pd.DataFrame:
    return rankings[rankings["category"] == category].reset_index(drop=True)
