"""Configuration constants for wyscout-rankings."""

import os

# Project paths
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = os.path.join(PROJECT_ROOT, "data")
RAW_DIR = os.path.join(DATA_DIR, "raw")
PROCESSED_DIR = os.path.join(DATA_DIR, "processed")
SITE_DIR = os.path.join(PROJECT_ROOT, "_site")
DEBUG_LOG_PATH = os.path.join(DATA_DIR, "debug.log")
TOKEN_PATH = os.path.join(DATA_DIR, "wyscout_token.json")
RANKINGS_PATH = os.path.join(PROCESSED_DIR, "team_rankings.parquet")

# Wyscout endpoints
SEARCH_API_BASE = "https://searchapi.wyscout.com/api/v1"
TOKEN_HEADER = "x-wyscout-access-token"
TOKEN_ENV_VAR = "WYSCOUT_TOKEN"

# Query constants shared by every search API call
GROUP_ID = "1233520"
SUBGROUP_ID = "288646"
LANGUAGE = "en"
VENUE = "home,away"
SCORE = "winning,draw,losing"
AGE_MIN = "16"
AGE_MAX = "45"
STATS_FROM_DATE = "2024-02-01"
DEFAULT_LEAGUE_ID = "-4856"

# Request settings
REQUEST_TIMEOUT = 30  # seconds
MAX_RETRIES = 4
RETRY_BACKOFF = 2.0  # seconds, doubled per 429 retry
MAX_WORKERS = 8  # parallel stat table requests
USER_AGENT = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"

# Cache settings
CACHE_PREFIX = "wyscout_cache_"
CACHE_EXPIRY_HOURS = 24
DEBUG_LOG_MAX_ENTRIES = 100

# League of Ireland Premier Division, keyed the way the CLI accepts them
TEAMS = {
    "BohemianFC": "Bohemians",
    "DerryCity": "Derry City",
    "DroghedaUnited": "Drogheda United",
    "GalwayUnited": "Galway United",
    "ShamrockRovers": "Shamrock Rovers",
    "Shelbourne": "Shelbourne",
    "SligoRovers": "Sligo Rovers",
    "StPatricksAth": "St. Patrick's Ath.",
    "WaterfordFC": "Waterford FC",
}
DEFAULT_TEAM = "DroghedaUnited"

CATEGORIES = ["Construction", "Attack", "Defence", "General"]

# (type, entity, category, subcategory). entity None means the "total" endpoint.
TEAM_RANKING_STATS = [
    # Construction
    ("possession", None, "Construction", "Possession"),
    ("passes", "avg", "Construction", "Passes"),
    ("passes", "accuracy", "Construction", "% accurate"),
    ("through_passes", "avg", "Construction", "Through passes"),
    ("through_passes", "accuracy", "Construction", "% accurate"),
    ("key_passes", "avg", "Construction", "Key passes"),
    ("long_passes", "avg", "Construction", "Long passes"),
    ("long_passes", "accuracy", "Construction", "% accurate"),
    ("pass_to_final_third", "avg", "Construction", "To final 3rd"),
    ("pass_to_final_third", "accuracy", "Construction", "% accurate"),
    ("speed_of_accurate_passes", None, "Construction", "Passing rate"),
    ("smart_passes", "avg", "Construction", "Smart"),
    ("smart_passes", "accuracy", "Construction", "% accurate"),
    ("progressive_pass", "avg", "Construction", "Progressive"),
    ("progressive_pass", "accuracy", "Construction", "% accurate"),
    ("progressive_run", "avg", "Construction", "Progressive runs"),
    ("deep_completed_pass", "avg", "Construction", "Deep completions"),
    ("ppda_opp", None, "Construction", "PPDA against"),
    # Attack
    ("goals", None, "Attack", "Goals"),
    ("xg", None, "Attack", "XG"),
    ("shots", "avg", "Attack", "Shots"),
    ("shots", "accuracy", "Attack", "% on target"),
    ("crosses", "avg", "Attack", "Crosses"),
    ("crosses", "accuracy", "Attack", "% accurate"),
    ("dribbles", "avg", "Attack", "1v1 dribbles"),
    ("dribbles", "accuracy", "Attack", "Dribbles success%"),
    ("touch_in_box", "avg", "Attack", "Touches in box"),
    ("foul_suffered", "avg", "Attack", "Fouls suffered"),
    ("offsides", "avg", "Attack", "Offsides"),
    ("corners", "avg", "Attack", "Corners"),
    ("penalties", None, "Attack", "Penos"),
    # Defence
    ("conceded_goals", None, "Defence", "Goals against"),
    ("xg_against", None, "Defence", "XGA"),
    ("shots", "opp/avg", "Defence", "Shots against"),
    ("defensive_duels", "avg", "Defence", "Defensive Duels"),
    ("defensive_duels", "accuracy", "Defence", "% success"),
    ("interceptions", "avg", "Defence", "Interceptions"),
    ("aerial_duels", "avg", "Defence", "Aerial Duels"),
    ("aerial_duels", "accuracy", "Defence", "AD Success %"),
    ("losses", "avg", "Defence", "Ball losses"),
    ("challenges_intensity", None, "Defence", "Challenge Intensity"),
    ("ppda", None, "Defence", "PPDA"),
    ("fouls", "avg", "Defence", "Fouls"),
    ("yellow_cards", None, "Defence", "Yellow Cards"),
    ("red_cards", None, "Defence", "Red Cards"),
    ("corners", "opp/avg", "Defence", "Corners against"),
    # General
    ("age", None, "General", "Age"),
    ("overview", None, "General", "Expected points"),
    ("substitution", None, "General", "Subs made"),
]

# Stat keys where a lower value ranks higher
REVERSED_RANK_STATS = {
    "conceded_goals",
    "xg_against",
    "shots_opp_avg",
    "losses",
    "ppda",
    "fouls",
    "yellow_cards",
    "red_cards",
    "corners_opp_avg",
}

# Player leaderboards
PLAYER_RANKING_TYPES = [
    "goals", "assists", "shots", "crosses", "dribbles",
    "touch_in_box", "foul_suffered", "passes", "through_passes",
    "key_passes", "pass_to_final_third", "smart_passes",
    "progressive_pass", "progressive_run", "defensive_duels",
    "defensive_duels_won", "interceptions", "aerial_duels",
    "aerial_duels_won", "fouls",
]
PLAYER_LEADERBOARD_LIMIT = 30

# Column lists for the per-team stats endpoint
GENERAL_COLUMNS = (
    "minutesOnField,goal,xgShot,shot,shotSuccess,shotSuccessPercentage,pass,passSuccess,"
    "passSuccessPercentage,possession,loss,lossLow,lossMedium,lossHigh,recovery,recoveryLow,"
    "recoveryMedium,recoveryHigh,duel,duelSuccess,duelSuccessPercentage"
)
INDEXES_COLUMNS = (
    "minutesOnField,passesPerPossessionMinute,passesPerPossessionCount,longPassPercentage,"
    "ppda,averageShotDistance,averagePassLength"
)
ATTACKING_COLUMNS = (
    "name,team," + GENERAL_COLUMNS + ","
    "shotFromOutsideArea,shotFromOutsideAreaSuccess,shotFromOutsideAreaSuccessPercentage,"
    "positionalAttacks,positionalAttacksWithShot,positionalAttacksWithShotPercentage,"
    "counterattacks,counterattacksWithShot,counterattacksWithShotPercentage,"
    "setPieces,setPiecesWithShot,setPiecesWithShotPercentage,"
    "corner,cornerWithShot,cornerWithShotPercentage,freeKick,shotAfterFreeKick,"
    "shotAfterFreeKickPercentage,penalty,penaltyGoal,penaltyGoalPercentage,"
    "cross,crossSuccess,crossSuccessPercentage,deepCompletedCross,deepCompletedPass,"
    "ballDeliveryToPenaltyArea,controlledPenaltyAreaEntry,crossToPenaltyArea,touchInBox,"
    "offensiveDuel,offensiveDuelSuccess,offensiveDuelSuccessPercentage,offside,"
    "concededGoal,shotAgainst,shotAgainstSuccess,shotAgainstSuccessPercentage,"
    "defensiveDuel,defensiveDuelSuccess,defensiveDuelSuccessPercentage,"
    "aerialDuel,aerialDuelSuccess,aerialDuelSuccessPercentage,"
    "tackle,tackleSuccess,tackleSuccessPercentage,interception,clearance,foul,"
    "yellowCard,redCard,forwardPass,forwardPassSuccess,forwardPassSuccessPercentage,"
    "backPass,backPassSuccess,backPassSuccessPercentage,"
    "verticalPass,verticalPassSuccess,verticalPassSuccessPercentage,"
    "longPass,longPassSuccess,longPassSuccessPercentage,"
    "passToFinalThird,passToFinalThirdSuccess,passToFinalThirdSuccessPercentage,"
    "progressivePass,progressivePassSuccess,progressivePassSuccessPercentage,"
    "smartPass,smartPassSuccess,smartPassSuccessPercentage,"
    "throwIn,throwInSuccess,throwInSuccessPercentage,goalKick,"
    "passesPerPossessionMinute,passesPerPossessionCount,longPassPercentage,"
    "averageShotDistance,averagePassLength,ppda"
)
TEAM_STATS_COLUMNS = {
    "General": GENERAL_COLUMNS,
    "Indexes": INDEXES_COLUMNS,
    "Attacking": ATTACKING_COLUMNS,
}

# Rank colour scale, index 0 is rank 1 (best)
RANK_COLORS = [
    ("#2e7d32", "#ffffff"),  # dark green
    ("#4caf50", "#ffffff"),
    ("#8bc34a", "#000000"),
    ("#cddc39", "#000000"),  # lime
    ("#ffeb3b", "#000000"),  # yellow
    ("#ffc107", "#000000"),  # amber
    ("#ff9800", "#000000"),  # orange
    ("#f44336", "#ffffff"),
    ("#e53935", "#ffffff"),
    ("#d32f2f", "#ffffff"),  # bright red
]
UNRANKED_COLOR = ("#757575", "#ffffff")
