"""Fetch every league-wide team ranking table and merge them per team."""

from concurrent.futures import ThreadPoolExecutor

import pandas as pd
from tqdm import tqdm

from config import DEFAULT_LEAGUE_ID, MAX_WORKERS, TEAM_RANKING_STATS
from data.api_base import ApiBase
from features.rankings import rank_teams, merge_rankings


class TeamRankingsFetcher(ApiBase):
    """Fetch, rank and merge the team ranking tables for one league."""

    def __init__(self, league_id: str = DEFAULT_LEAGUE_ID, max_workers: int = MAX_WORKERS, **kwargs):
        super().__init__(**kwargs)
        self.league_id = league_id
        self.max_workers = max_workers

    def _stat_path(self, stat: tuple) -> str:
        stat_type, entity = stat[0], stat[1]
        if entity is None:
            return f"team_rankings/{self.league_id}/{stat_type}.json"
        return f"team_rankings/{self.league_id}/{entity}/{stat_type}.json"

    def fetch_stat_table(self, stat: tuple) -> list[dict]:
        """Fetch the raw league table for one stat.

        Raises RuntimeError when the payload is not an object or has no teams.
        """
        stat_type, entity = stat[0], stat[1]

        def load():
            data = self.get_json(self._stat_path(stat), params=self.base_params())
            if not isinstance(data, dict):
                raise RuntimeError(f"Invalid response data for {stat_type}")

            teams = data.get("results") or []
            if not teams:
                raise RuntimeError(f"No team data found for {stat_type}")
            return teams

        key = f"team_rankings_{self.league_id}_{entity or 'total'}_{stat_type}"
        return self.cached(key, load)

    def fetch_ranking(self, stat: tuple) -> pd.DataFrame:
        """Fetch one stat and rank every team in it."""
        return rank_teams(self.fetch_stat_table(stat), stat)

    def fetch_all_rankings(self, stats: list[tuple] | None = None) -> pd.DataFrame:
        """Fetch all stats in parallel and merge them per team.

        Any failing request aborts the whole fetch.
        """
        if not self.league_id:
            raise ValueError("League ID must be set before fetching rankings")

        if stats is None:
            stats = TEAM_RANKING_STATS

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            frames = list(tqdm(
                pool.map(self.fetch_ranking, stats),
                total=len(stats),
                desc="Fetching team rankings",
            ))

        return merge_rankings(frames)
