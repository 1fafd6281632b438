from .handicap import (
    ScoreToPar,
    format_shots_received,
    net_score,
    score_relative_to_par,
    shots_received,
    total_net_score,
)
from .course_data import (
    BACK_9_PAR,
    COURSE,
    COURSE_HOLES,
    COURSE_PAR,
    FRONT_9_PAR,
    course_with_handicap,
    get_hole_data,
    hole_info,
    hole_par_and_index,
)
from .leaderboard import (
    LeaderboardEntry,
    ScorecardRow,
    TeamStanding,
    TeamTotals,
    aggregate_scores,
    build_leaderboard,
    build_scorecard,
    build_team_standings,
    rank_by_gross,
    rank_leaderboard,
)
from .events import approval_events, sabotage_event

__all__ = [
    "shots_received",
    "net_score",
    "total_net_score",
    "score_relative_to_par",
    "format_shots_received",
    "ScoreToPar",
    "COURSE",
    "COURSE_HOLES",
    "COURSE_PAR",
    "FRONT_9_PAR",
    "BACK_9_PAR",
    "get_hole_data",
    "hole_par_and_index",
    "hole_info",
    "course_with_handicap",
    "TeamTotals",
    "LeaderboardEntry",
    "TeamStanding",
    "ScorecardRow",
    "build_leaderboard",
    "build_team_standings",
    "build_scorecard",
    "aggregate_scores",
    "rank_leaderboard",
    "rank_by_gross",
    "approval_events",
    "sabotage_event",
]
