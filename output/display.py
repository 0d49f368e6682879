"""Display team and player rankings in the console."""

import pandas as pd

from config import CATEGORIES
from data.fetch_player_rankings import team_players, format_ranking_type
from features.rankings import category_rankings, team_rankings


def display_team_rankings(rankings: pd.DataFrame, team_name: str):
    """Print one table per category: subcategory, value and league rank."""
    df = team_rankings(rankings, team_name)

    print(f"\n{'='*60}")
    print(f"  {team_name} - League Rankings")
    print(f"{'='*60}")

    for category in CATEGORIES:
        rows = category_rankings(df, category)
        if rows.empty:
            continue
        print(f"\n  {category}:")
        print(f"  {'Stat':<22} {'Value':>10} {'Rank':>5}")
        print(f"  {'----':<22} {'-----':>10} {'----':>5}")
        for _, r in rows.iterrows():
            print(f"  {r['subcategory']:<22} {r['value']:>10.2f} {int(r['rank']):>5d}")


def display_player_rankings(results: list[dict], team_name: str):
    """Print the team's players in each top-30 leaderboard they appear in."""
    print(f"\n{'='*60}")
    print(f"  {team_name} - Player Leaderboards")
    print(f"{'='*60}")

    shown = 0
    for result in results:
        players = team_players(result, team_name)
        if not players:
            continue
        shown += 1
        print(f"\n  {format_ranking_type(result['ranking_type'])}:")
        print(f"  {'#':>3}  {'Player':<28} {'Value':>8}")
        for p in players:
            print(f"  {p['rank']:3d}  {str(p.get('name', '')):<28} {float(p.get('value') or 0):>8.2f}")

    if shown == 0:
        print(f"\n  No {team_name} players in any top-30 leaderboard.")


def display_team_stats(stats: dict, team_id: str):
    """Print the per-game summary returned by fetch_team_stats."""
    print(f"\n  Team {team_id} stats (per game):")
    for metric, entry in stats.items():
        label = metric.replace("_", " ").capitalize()
        print(f"    {label:<16} {float(entry['per_game']):>8.2f}")
