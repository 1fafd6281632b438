"""Teams plus the team-level reads that aggregate approved scores."""

import logging
from typing import List, Optional, Tuple

import asyncpg

from models import InfoEvent, Team
from database.converters import (
    parse_id,
    score_from_row,
    team_from_row,
    user_from_row,
)
from database.exceptions import DuplicateError
from database.repositories.feed_repo import insert_feed_item
from scoring.events import WELCOME_MESSAGE, team_entered_event
from scoring.leaderboard import (
    LeaderboardEntry,
    ScorecardRow,
    TeamStanding,
    build_leaderboard,
    build_scorecard,
    build_team_standings,
)

logger = logging.getLogger(__name__)

DEFAULT_TEAMS = [
    ("Sales Sleigh", "#d63384"),
    ("Marketing Elves", "#0f5132"),
    ("Engineering Reindeer", "#ffd700"),
    ("Support Snowmen", "#0dcaf0"),
    ("Leadership Legends", "#6f42c1"),
    ("Product Penguins", "#fd7e14"),
]


class TeamRepositoryDB:
    """Async CRUD for teams and leaderboard reads."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    # ================================================================
    # Private helpers
    # ================================================================

    async def _load_standings_inputs(self, conn, team_id: Optional[str] = None) -> tuple:
        """Load teams, members and approved scores (one query each, no N+1).

        Returns (teams, members, scores), optionally restricted to one team.
        """
        if team_id:
            tid = parse_id(team_id, "Team")
            team_rows = await conn.fetch("SELECT * FROM game.teams WHERE id = $1", tid)
            member_rows = await conn.fetch(
                "SELECT * FROM game.users WHERE team_id = $1 ORDER BY created_at", tid
            )
            score_rows = await conn.fetch(
                """SELECT * FROM game.scores
                   WHERE team_id = $1 AND status = 'approved'""",
                tid,
            )
        else:
            team_rows = await conn.fetch("SELECT * FROM game.teams ORDER BY created_at, name")
            member_rows = await conn.fetch("SELECT * FROM game.users ORDER BY created_at")
            score_rows = await conn.fetch(
                "SELECT * FROM game.scores WHERE status = 'approved'"
            )
        return (
            [team_from_row(r) for r in team_rows],
            [user_from_row(r) for r in member_rows],
            [score_from_row(r) for r in score_rows],
        )

    # ================================================================
    # Read
    # ================================================================

    async def get_team(self, team_id: str) -> Optional[Team]:
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM game.teams WHERE id = $1", parse_id(team_id, "Team")
            )
            return team_from_row(row) if row else None

    async def get_leaderboard(self) -> List[LeaderboardEntry]:
        """All teams ranked by net score; teams yet to play sort last."""
        async with self._pool.acquire() as conn:
            teams, members, scores = await self._load_standings_inputs(conn)
        return build_leaderboard(teams, members, scores)

    async def get_all_teams(self) -> List[TeamStanding]:
        """All teams with members, ranked by gross strokes."""
        async with self._pool.acquire() as conn:
            teams, members, scores = await self._load_standings_inputs(conn)
        return build_team_standings(teams, members, scores)

    async def get_team_standing(self, team_id: str) -> Optional[TeamStanding]:
        """One team with its members and gross totals."""
        async with self._pool.acquire() as conn:
            teams, members, scores = await self._load_standings_inputs(conn, team_id)
        if not teams:
            return None
        return build_team_standings(teams, members, scores)[0]

    async def get_team_scorecard(self, team_id: str) -> List[ScorecardRow]:
        """Hole-by-hole approved strokes for each member of a team."""
        async with self._pool.acquire() as conn:
            _, members, scores = await self._load_standings_inputs(conn, team_id)
        return build_scorecard(members, scores)

    # ================================================================
    # Create
    # ================================================================

    async def create_team(self, name: str, color: str) -> Team:
        """Create a team and announce it on the feed."""
        try:
            async with self._pool.acquire() as conn:
                async with conn.transaction():
                    row = await conn.fetchrow(
                        """INSERT INTO game.teams (name, color)
                           VALUES ($1, $2) RETURNING *""",
                        name, color,
                    )
                    team = team_from_row(row)
                    await insert_feed_item(conn, team_entered_event(team.id, team.name))
        except asyncpg.UniqueViolationError as e:
            raise DuplicateError(f'Team "{name}" already exists') from e
        logger.info("Team created: %s (%s)", team.name, team.id)
        return team

    async def seed_teams(self) -> Tuple[bool, List[Team]]:
        """Create the default teams once.

        Returns (created, teams): created is False when teams already existed.
        """
        async with self._pool.acquire() as conn:
            async with conn.transaction():
                # Serialize concurrent seeders.
                await conn.execute("LOCK TABLE game.teams IN SHARE ROW EXCLUSIVE MODE")
                existing = await conn.fetch("SELECT * FROM game.teams ORDER BY created_at, name")
                if existing:
                    return False, [team_from_row(r) for r in existing]

                teams = []
                for name, color in DEFAULT_TEAMS:
                    row = await conn.fetchrow(
                        """INSERT INTO game.teams (name, color)
                           VALUES ($1, $2) RETURNING *""",
                        name, color,
                    )
                    teams.append(team_from_row(row))
                await insert_feed_item(conn, InfoEvent(message=WELCOME_MESSAGE))
        logger.info("Seeded %d teams", len(teams))
        return True, teams
