"""CLI entry point for wyscout-rankings: league rankings from the Wyscout API."""

import argparse
import os
import sys

import pandas as pd
import requests

from config import (
    DEFAULT_LEAGUE_ID, DEFAULT_TEAM, TEAMS, PROCESSED_DIR, RANKINGS_PATH,
)
from debug_log import write_log


def cmd_login(args):
    """Store an access token for later commands."""
    from data.api_base import ApiBase

    ApiBase(token=args.token).set_token(args.token)
    print("Token saved (valid for 24 hours).")


def cmd_logout(args):
    """Forget the stored access token."""
    from data.auth import clear_token

    clear_token()
    print("Token cleared.")


def cmd_fetch(args):
    """Fetch every team ranking table and save the merged rankings."""
    from data.fetch_team_rankings import TeamRankingsFetcher

    fetcher = TeamRankingsFetcher(league_id=args.league_id, force_refresh=args.refresh)
    _require_token(fetcher)

    write_log(f"Fetching rankings for league {args.league_id}...")
    df = fetcher.fetch_all_rankings()

    os.makedirs(PROCESSED_DIR, exist_ok=True)
    df.to_parquet(RANKINGS_PATH, index=False)
    print(f"  Saved {len(df)} rows for {df['team'].nunique()} teams to {RANKINGS_PATH}")


def cmd_teams(args):
    """Show the rankings of one team."""
    from output.display import display_team_rankings

    rankings = _load_rankings()
    display_team_rankings(rankings, _team_name(args.team))


def cmd_players(args):
    """Show where a team's players sit in the player leaderboards."""
    from data.fetch_player_rankings import PlayerRankingsFetcher
    from output.display import display_player_rankings

    fetcher = PlayerRankingsFetcher(force_refresh=args.refresh)
    _require_token(fetcher)

    results = fetcher.fetch_all_player_rankings(args.season_ids)
    display_player_rankings(results, _team_name(args.team))


def cmd_team_stats(args):
    """Show per-game stats for a team id."""
    from data.fetch_team_stats import TeamStatsFetcher
    from output.display import display_team_stats

    fetcher = TeamStatsFetcher(force_refresh=args.refresh)
    _require_token(fetcher)

    stats = fetcher.fetch_team_stats(args.team_id, column_type=args.columns)
    display_team_stats(stats, args.team_id)


def cmd_site(args):
    """Build the tabbed HTML rankings page."""
    from output.build_site import build

    rankings = _load_rankings()
    player_results = None
    if args.season_ids:
        from data.fetch_player_rankings import PlayerRankingsFetcher

        fetcher = PlayerRankingsFetcher()
        _require_token(fetcher)
        player_results = fetcher.fetch_all_player_rankings(args.season_ids)

    path = build(rankings, player_results)
    print(f"  Site written to {path}")


def cmd_clear_cache(args):
    """Remove every cached API response."""
    from data.cache import ExpiringCache

    removed = ExpiringCache().clear()
    print(f"  Removed {removed} cache entries")


def _require_token(fetcher):
    if not fetcher.token:
        raise ValueError("No access token. Run 'login --token ...' or set WYSCOUT_TOKEN.")


def _team_name(team: str) -> str:
    """Accept either a team key (DroghedaUnited) or its display name."""
    if team in TEAMS:
        return TEAMS[team]
    if team in TEAMS.values():
        return team
    raise ValueError(f"Unknown team {team!r}. Choose from: {', '.join(TEAMS)}")


def _load_rankings() -> pd.DataFrame:
    """Load the merged rankings written by 'fetch'."""
    if not os.path.exists(RANKINGS_PATH):
        raise ValueError("Rankings must be fetched first. Run 'fetch'.")
    return pd.read_parquet(RANKINGS_PATH)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="wyscout-rankings: league-wide team and player rankings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  login        Store a Wyscout access token
  logout       Forget the stored token
  fetch        Fetch and rank every team stat for the league
  teams        Show one team's rankings
  players      Show a team's players in the leaderboards
  team-stats   Show per-game stats for a team id
  site         Build the tabbed HTML rankings page
  clear-cache  Remove cached API responses
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    login_parser = subparsers.add_parser("login", help="Store a Wyscout access token")
    login_parser.add_argument("--token", required=True, help="x-wyscout-access-token value")

    subparsers.add_parser("logout", help="Forget the stored token")

    fetch_parser = subparsers.add_parser("fetch", help="Fetch all team rankings")
    fetch_parser.add_argument("--league-id", default=DEFAULT_LEAGUE_ID,
                              help=f"League id (default: {DEFAULT_LEAGUE_ID})")
    fetch_parser.add_argument("--refresh", action="store_true",
                              help="Ignore cached responses")

    teams_parser = subparsers.add_parser("teams", help="Show one team's rankings")
    teams_parser.add_argument("--team", default=DEFAULT_TEAM,
                              help=f"Team key or name (default: {DEFAULT_TEAM})")

    players_parser = subparsers.add_parser("players", help="Show player leaderboards for a team")
    players_parser.add_argument("--season-ids", nargs="+", required=True,
                                help="Season ids to rank players over")
    players_parser.add_argument("--team", default=DEFAULT_TEAM,
                                help=f"Team key or name (default: {DEFAULT_TEAM})")
    players_parser.add_argument("--refresh", action="store_true",
                                help="Ignore cached responses")

    stats_parser = subparsers.add_parser("team-stats", help="Show per-game stats for a team id")
    stats_parser.add_argument("--team-id", required=True, help="Wyscout team id")
    stats_parser.add_argument("--columns", default="General",
                              choices=["General", "Indexes", "Attacking"],
                              help="Column set to request")
    stats_parser.add_argument("--refresh", action="store_true",
                              help="Ignore cached responses")

    site_parser = subparsers.add_parser("site", help="Build the HTML rankings page")
    site_parser.add_argument("--season-ids", nargs="*", default=None,
                             help="Also include player leaderboards for these seasons")

    subparsers.add_parser("clear-cache", help="Remove cached API responses")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    commands = {
        "login": cmd_login,
        "logout": cmd_logout,
        "fetch": cmd_fetch,
        "teams": cmd_teams,
        "players": cmd_players,
        "team-stats": cmd_team_stats,
        "site": cmd_site,
        "clear-cache": cmd_clear_cache,
    }

    try:
        commands[args.command](args)
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        if status == 401:
            write_log("Error: token expired or invalid. Run 'login --token ...' again.")
        else:
            write_log(f"Error: request failed: {e}")
        sys.exit(1)
    except requests.RequestException as e:
        write_log(f"Error: request failed: {e}")
        sys.exit(1)
    except (ValueError, RuntimeError) as e:
        write_log(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
