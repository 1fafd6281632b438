"""Score submission and the captain approval workflow."""

import logging
from typing import List

import asyncpg

from models import Score, ScoreStatus, ScoreWithPlayer, SnakeEvent, User
from database.converters import (
    parse_id,
    score_from_row,
    score_with_player_from_row,
    user_from_row,
)
from database.exceptions import (
    AuthorizationError,
    IntegrityError,
    InvalidStateError,
    NotFoundError,
)
from database.repositories.feed_repo import insert_feed_item
from database.repositories.user_repo import move_snake
from scoring.course_data import get_hole_data, hole_par_and_index
from scoring.events import approval_events
from scoring.handicap import net_score, shots_received

logger = logging.getLogger(__name__)


def _check_captain(captain: User, score: Score, action: str) -> None:
    if not captain.is_captain:
        raise AuthorizationError(f"Only captains can {action} scores")
    if captain.team_id != score.team_id:
        raise AuthorizationError(f"Can only {action} scores for your own team")


class ScoreRepositoryDB:
    """Async CRUD for game.scores and the approve/reject transitions."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    # ================================================================
    # Private helpers
    # ================================================================

    async def _lock_for_review(self, conn, score_id: str, reviewer_id: str, action: str) -> Score:
        """Lock the score row and check the reviewer may act on it."""
        score_row = await conn.fetchrow(
            "SELECT * FROM game.scores WHERE id = $1 FOR UPDATE",
            parse_id(score_id, "Score"),
        )
        if not score_row:
            raise NotFoundError(f"Score {score_id} not found")

        reviewer_row = await conn.fetchrow(
            "SELECT * FROM game.users WHERE id = $1", parse_id(reviewer_id, "User")
        )
        if not reviewer_row:
            raise NotFoundError(f"Captain {reviewer_id} not found")

        score = score_from_row(score_row)
        _check_captain(user_from_row(reviewer_row), score, action)
        if score.status != ScoreStatus.PENDING:
            raise InvalidStateError(f"Score {score_id} is already {score.status.value}")
        return score

    # ================================================================
    # Read
    # ================================================================

    async def get_player_scores(self, player_id: str) -> List[Score]:
        """Every score a player has submitted, in hole order."""
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                "SELECT * FROM game.scores WHERE player_id = $1 ORDER BY hole",
                parse_id(player_id, "User"),
            )
            return [score_from_row(r) for r in rows]

    async def get_team_scores(
        self, team_id: str, status: ScoreStatus = ScoreStatus.APPROVED
    ) -> List[ScoreWithPlayer]:
        """A team's scores in one status, with player and input-by names."""
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """SELECT s.*, p.name AS player_name, i.name AS input_by_name
                   FROM game.scores s
                   JOIN game.users p ON p.id = s.player_id
                   LEFT JOIN game.users i ON i.id = s.input_by
                   WHERE s.team_id = $1 AND s.status = $2
                   ORDER BY s.hole, p.name""",
                parse_id(team_id, "Team"), status.value,
            )
            return [score_with_player_from_row(r) for r in rows]

    async def get_pending_scores(self, team_id: str) -> List[ScoreWithPlayer]:
        """The captain's review queue."""
        return await self.get_team_scores(team_id, ScoreStatus.PENDING)

    # ================================================================
    # Submit
    # ================================================================

    async def submit_score(
        self, player_id: str, hole: int, strokes: int, putts: int, input_by: str
    ) -> str:
        """Record a player's hole score as pending. Returns the score id.

        Resubmitting the same player/hole overwrites the row in place and sends
        it back to pending, dropping any earlier approval. Holes that are not on
        the course are refused.
        """
        if get_hole_data(hole) is None:
            raise IntegrityError(f"Hole {hole} is not on the course")
        par, hole_index = hole_par_and_index(hole)
        try:
            async with self._pool.acquire() as conn:
                player_row = await conn.fetchrow(
                    "SELECT * FROM game.users WHERE id = $1", parse_id(player_id, "Player")
                )
                if not player_row:
                    raise NotFoundError(f"Player {player_id} not found")

                handicap = player_row["handicap"]
                shots = shots_received(handicap, hole_index)
                net = net_score(strokes, handicap, hole_index)

                score_id = await conn.fetchval(
                    """INSERT INTO game.scores
                       (player_id, team_id, hole, strokes, putts, par, hole_index,
                        net_score, shots_received, status, input_by)
                       VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, 'pending', $10)
                       ON CONFLICT (player_id, hole)
                       DO UPDATE SET
                           strokes = EXCLUDED.strokes,
                           putts = EXCLUDED.putts,
                           par = EXCLUDED.par,
                           hole_index = EXCLUDED.hole_index,
                           net_score = EXCLUDED.net_score,
                           shots_received = EXCLUDED.shots_received,
                           status = 'pending',
                           input_by = EXCLUDED.input_by,
                           approved_by = NULL,
                           approved_at = NULL,
                           updated_at = NOW()
                       RETURNING id""",
                    player_row["id"], player_row["team_id"], hole, strokes, putts,
                    par, hole_index, net, shots, parse_id(input_by, "User"),
                )
        except asyncpg.ForeignKeyViolationError as e:
            raise IntegrityError(f"Score references a missing user: {e}") from e
        except asyncpg.CheckViolationError as e:
            raise IntegrityError(f"Score rejected by a table constraint: {e}") from e

        logger.info(
            "Score submitted: player=%s hole=%d strokes=%d net=%d", player_id, hole, strokes, net
        )
        return str(score_id)

    # ================================================================
    # Review
    # ================================================================

    async def approve_score(self, score_id: str, approved_by: str) -> Score:
        """Approve a pending or rejected score and post its feed events.

        Runs in one transaction: the status change, the snake handover on a
        3-putt and every feed event commit together.
        """
        async with self._pool.acquire() as conn:
            async with conn.transaction():
                await self._lock_for_review(conn, score_id, approved_by, "approve")

                row = await conn.fetchrow(
                    """UPDATE game.scores
                       SET status = 'approved', approved_by = $2,
                           approved_at = NOW(), updated_at = NOW()
                       WHERE id = $1
                       RETURNING *""",
                    parse_id(score_id, "Score"), parse_id(approved_by, "User"),
                )
                score = score_from_row(row)

                names = await conn.fetchrow(
                    """SELECT (SELECT name FROM game.users WHERE id = $1) AS player_name,
                              (SELECT name FROM game.teams WHERE id = $2) AS team_name""",
                    row["player_id"], row["team_id"],
                )
                for event in approval_events(score, names["player_name"], names["team_name"]):
                    if isinstance(event, SnakeEvent):
                        await move_snake(conn, row["player_id"])
                    await insert_feed_item(conn, event)

        logger.info("Score %s approved by %s", score_id, approved_by)
        return score

    async def reject_score(self, score_id: str, rejected_by: str) -> Score:
        """Reject a score. The player may resubmit it; no feed event."""
        async with self._pool.acquire() as conn:
            async with conn.transaction():
                await self._lock_for_review(conn, score_id, rejected_by, "reject")
                row = await conn.fetchrow(
                    """UPDATE game.scores
                       SET status = 'rejected', updated_at = NOW()
                       WHERE id = $1
                       RETURNING *""",
                    parse_id(score_id, "Score"),
                )

        logger.info("Score %s rejected by %s", score_id, rejected_by)
        return score_from_row(row)
