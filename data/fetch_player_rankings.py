"""Fetch player leaderboards for every ranking type in one GraphQL batch."""

from config import (
    PLAYER_RANKING_TYPES, PLAYER_LEADERBOARD_LIMIT, LANGUAGE, AGE_MIN, AGE_MAX,
)
from data.api_base import ApiBase

LEADERBOARD_QUERY = """
query PlayersLeaderboard($seasonIds: [ID!]!, $age: AgeRangeInput, $searchParam: PlayerStatsEnum!, $language: String, $roundId: Int, $gameweek: Int) {
    playersLeaderboard(seasonIds: $seasonIds, age: $age, param: $searchParam, language: $language, limit: %d, roundId: $roundId, gameweek: $gameweek) {
        name
        age
        image
        birthCountryCode
        birthCountryName
        value
        club
        passportCountryCodes
        passportCountryNames
        assists
        foot
        goals
        goalsAndAssists
        goalsTagged
        height
        marketValue
        minutesOnField
        playerId
        positions
        positionPercents {
            position
            percent
        }
        totalMatches
        weight
        player {
            fullName
            currentTeam {
                logoUrl
            }
        }
        teams {
            name
            logoUrl
            readableColor
        }
    }
}
""" % PLAYER_LEADERBOARD_LIMIT


def build_leaderboard_requests(season_ids: list[str],
                               ranking_types: list[str] = PLAYER_RANKING_TYPES) -> list[dict]:
    """One GraphQL operation per ranking type, in ranking_types order."""
    return [
        {
            "query": LEADERBOARD_QUERY,
            "variables": {
                "seasonIds": list(season_ids),
                "searchParam": ranking_type,
                "language": LANGUAGE,
                "age": {"min": int(AGE_MIN), "max": int(AGE_MAX)},
            },
            "operationName": "PlayersLeaderboard",
        }
        for ranking_type in ranking_types
    ]


class PlayerRankingsFetcher(ApiBase):
    """Fetch the top-30 player leaderboards for a set of seasons."""

    def fetch_all_player_rankings(self, season_ids: list[str]) -> list[dict]:
        """Return [{"ranking_type": ..., "players": [...]}] for every ranking type.

        Responses are matched to ranking types by position in the batch.
        """
        ranking_types = list(PLAYER_RANKING_TYPES)

        def load():
            data = self.post_json("graphql", build_leaderboard_requests(season_ids, ranking_types))
            if not isinstance(data, list) or not data:
                raise RuntimeError("No player rankings data available")

            return [
                {
                    "ranking_type": ranking_types[i],
                    "players": (result.get("data") or {}).get("playersLeaderboard") or [],
                }
                for i, result in enumerate(data[:len(ranking_types)])
            ]

        key = f"player_rankings_{'_'.join(str(s) for s in season_ids)}_all"
        return self.cached(key, load)


def team_players(result: dict, team_name: str) -> list[dict]:
    """Players from one leaderboard who play for team_name, with 1-based rank."""
    return [
        {**player, "rank": i + 1}
        for i, player in enumerate(result["players"])
        if player.get("club") == team_name
    ]


def format_ranking_type(ranking_type: str) -> str:
    """'key_passes' -> 'Key Passes'."""
    return " ".join(word[:1].upper() + word[1:] for word in ranking_type.split("_"))
