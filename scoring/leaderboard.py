"""Team aggregation and leaderboard ranking.

Only approved scores count. Lower is better, and a team that has not played a
hole yet always ranks after every team that has, since its zero total would
otherwise put it first.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field
from typing import Dict, Iterable, List, Optional, Sequence, TypeVar

from models import Score, ScoreStatus, Team, User
from scoring.course_data import DEFAULT_PAR


class TeamTotals(BaseModel):
    """Aggregates over a team's approved scores."""
    gross_total: int = 0
    net_total: int = 0
    par_total: int = 0
    shots_total: int = 0
    holes_played: int = 0

    @computed_field
    @property
    def net_relative_to_par(self) -> int:
        return self.net_total - self.par_total

    @computed_field
    @property
    def gross_relative_to_par(self) -> int:
        return self.gross_total - self.par_total


T = TypeVar("T", bound=TeamTotals)


def aggregate_scores(scores: Iterable[Score]) -> TeamTotals:
    """Sum approved scores. Legacy rows without net/par/shots fall back to strokes/4/0."""
    totals = TeamTotals()
    for s in scores:
        if s.status != ScoreStatus.APPROVED:
            continue
        totals.gross_total += s.strokes
        totals.net_total += s.net_score if s.net_score is not None else s.strokes
        totals.par_total += s.par if s.par is not None else DEFAULT_PAR
        totals.shots_total += s.shots_received or 0
        totals.holes_played += 1
    return totals


def _rank(entries: Sequence[T], key_name: str) -> List[T]:
    # sorted() is stable, so teams that tie keep their input order.
    return sorted(
        entries,
        key=lambda e: (e.holes_played == 0, getattr(e, key_name) if e.holes_played else 0),
    )


def rank_leaderboard(entries: Sequence[T]) -> List[T]:
    """Order by net total ascending; teams with no holes played go last."""
    return _rank(entries, "net_total")


def rank_by_gross(entries: Sequence[T]) -> List[T]:
    """Order by gross total ascending; teams with no holes played go last."""
    return _rank(entries, "gross_total")


# ================================================================
# Read models
# ================================================================

class LeaderboardEntry(TeamTotals):
    """One team's row on the net leaderboard."""
    team_id: str
    name: str
    color: str
    member_count: int = 0
    avatars: List[Optional[str]] = Field(default_factory=list)


class TeamStanding(TeamTotals):
    """A team with its members and gross totals, for the team listing."""
    team: Team
    members: List[User] = Field(default_factory=list)


class ScorecardRow(BaseModel):
    """One member's hole-by-hole approved strokes."""
    player: User
    scores: Dict[int, int] = Field(default_factory=dict)
    total_strokes: int = 0
    holes_played: int = 0


def _totals_fields(totals: TeamTotals) -> Dict[str, int]:
    return {name: getattr(totals, name) for name in TeamTotals.model_fields}


def _group(items, attr: str) -> Dict[str, list]:
    grouped: Dict[str, list] = {}
    for item in items:
        grouped.setdefault(getattr(item, attr), []).append(item)
    return grouped


def build_leaderboard(
    teams: Iterable[Team], members: Iterable[User], scores: Iterable[Score]
) -> List[LeaderboardEntry]:
    """Ranked net leaderboard from teams, their members and all scores."""
    members_by_team = _group(members, "team_id")
    scores_by_team = _group(scores, "team_id")

    entries = []
    for team in teams:
        team_members = members_by_team.get(team.id, [])
        totals = aggregate_scores(scores_by_team.get(team.id, []))
        entries.append(LeaderboardEntry(
            team_id=team.id,
            name=team.name,
            color=team.color,
            member_count=len(team_members),
            avatars=[m.avatar_url for m in team_members[:4]],
            **_totals_fields(totals),
        ))
    return rank_leaderboard(entries)


def build_team_standings(
    teams: Iterable[Team], members: Iterable[User], scores: Iterable[Score]
) -> List[TeamStanding]:
    """Teams ranked by gross strokes, each with its member list."""
    members_by_team = _group(members, "team_id")
    scores_by_team = _group(scores, "team_id")

    standings = [
        TeamStanding(
            team=team,
            members=members_by_team.get(team.id, []),
            **_totals_fields(aggregate_scores(scores_by_team.get(team.id, []))),
        )
        for team in teams
    ]
    return rank_by_gross(standings)


def build_scorecard(members: Iterable[User], scores: Iterable[Score]) -> List[ScorecardRow]:
    """Per-member map of hole -> strokes over approved scores."""
    approved = [s for s in scores if s.status == ScoreStatus.APPROVED]
    scores_by_player = _group(approved, "player_id")

    rows = []
    for member in members:
        player_scores = scores_by_player.get(member.id, [])
        rows.append(ScorecardRow(
            player=member,
            scores={s.hole: s.strokes for s in player_scores},
            total_strokes=sum(s.strokes for s in player_scores),
            holes_played=len(player_scores),
        ))
    return rows
