"""Fetch the per-team stat summary from the team_stats endpoint."""

from datetime import date

from config import (
    LANGUAGE, GROUP_ID, SUBGROUP_ID, VENUE, SCORE, STATS_FROM_DATE, TEAM_STATS_COLUMNS,
)
from data.api_base import ApiBase

# summary metric -> field in teamStats
SUMMARY_FIELDS = {
    "possession": "possession",
    "passes": "pass",
    "pass_accuracy": "passSuccessPercentage",
    "through_passes": "forwardPass",
    "key_passes": "passToFinalThird",
    "smart_passes": "smartPass",
}


class TeamStatsFetcher(ApiBase):
    """Fetch a team's season stats and reduce them to the summary metrics."""

    def fetch_team_stats(self, team_id: str, column_type: str = "General",
                         to_date: date | None = None) -> dict:
        """Fetch stats for one team.

        Returns {metric: {"rank": 0, "per_game": value}} for SUMMARY_FIELDS.
        Raises RuntimeError when the response carries no match stats.
        """
        if column_type not in TEAM_STATS_COLUMNS:
            raise ValueError(
                f"Unknown column type {column_type!r}, expected one of {sorted(TEAM_STATS_COLUMNS)}"
            )
        to_date = to_date or date.today()

        def load():
            params = {
                "language": LANGUAGE,
                "token": self.token,
                "groupId": GROUP_ID,
                "subgroupId": SUBGROUP_ID,
                "venue": VENUE,
                "from": STATS_FROM_DATE,
                "to": to_date.isoformat(),
                "score": SCORE,
                "columns": TEAM_STATS_COLUMNS[column_type],
            }
            data = self.get_json(f"team_stats/teams/{team_id}/stats", params=params)

            matches = (data.get("matches") if isinstance(data, dict) else None) or []
            stats = matches[0].get("teamStats") if matches else None
            if not stats:
                raise RuntimeError("No team stats data available")

            return {
                metric: {"rank": 0, "per_game": stats.get(field) or 0}
                for metric, field in SUMMARY_FIELDS.items()
            }

        return self.cached(f"team_stats_{team_id}_{column_type}", load)
