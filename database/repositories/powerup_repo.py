"""Power-ups: one-shot sabotage actions against another team."""

import logging
from typing import List

import asyncpg

from models import InfoEvent, Powerup, PowerupStatus, PowerupWithOwner
from database.converters import (
    parse_id,
    powerup_from_row,
    powerup_with_owner_from_row,
)
from database.exceptions import InvalidStateError, NotFoundError
from database.repositories.feed_repo import insert_feed_item
from scoring.events import POWERUPS_RESET_MESSAGE, sabotage_event

logger = logging.getLogger(__name__)


class PowerupRepositoryDB:
    """Async CRUD for game.powerups."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    # ================================================================
    # Read
    # ================================================================

    async def get_user_powerups(self, user_id: str) -> List[Powerup]:
        """A player's power-ups that are still available."""
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """SELECT * FROM game.powerups
                   WHERE user_id = $1 AND status = 'available'
                   ORDER BY type""",
                parse_id(user_id, "User"),
            )
            return [powerup_from_row(r) for r in rows]

    async def get_all_powerups(self) -> List[PowerupWithOwner]:
        """Every power-up with its owner's name and team (admin view)."""
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """SELECT p.*, u.name AS user_name, t.name AS team_name
                   FROM game.powerups p
                   LEFT JOIN game.users u ON u.id = p.user_id
                   LEFT JOIN game.teams t ON t.id = u.team_id
                   ORDER BY t.name, u.name, p.type"""
            )
            return [powerup_with_owner_from_row(r) for r in rows]

    # ================================================================
    # Update
    # ================================================================

    async def use_powerup(self, powerup_id: str, target_team_id: str) -> str:
        """Play a power-up against another team. Returns the feed message.

        Every check runs before the first write, so a failure leaves the
        power-up available and posts nothing.
        """
        async with self._pool.acquire() as conn:
            async with conn.transaction():
                row = await conn.fetchrow(
                    "SELECT * FROM game.powerups WHERE id = $1 FOR UPDATE",
                    parse_id(powerup_id, "Power-up"),
                )
                if not row:
                    raise NotFoundError(f"Power-up {powerup_id} not found")
                powerup = powerup_from_row(row)
                if powerup.status != PowerupStatus.AVAILABLE:
                    raise InvalidStateError("Power-up already used")

                user_row = await conn.fetchrow(
                    """SELECT u.id, u.name, u.team_id, t.name AS team_name
                       FROM game.users u
                       LEFT JOIN game.teams t ON t.id = u.team_id
                       WHERE u.id = $1""",
                    row["user_id"],
                )
                if not user_row:
                    raise NotFoundError("User not found")
                if user_row["team_name"] is None:
                    raise NotFoundError("User's team not found")

                target_row = await conn.fetchrow(
                    "SELECT * FROM game.teams WHERE id = $1",
                    parse_id(target_team_id, "Team"),
                )
                if not target_row:
                    raise NotFoundError("Target team not found")
                if target_row["id"] == user_row["team_id"]:
                    raise InvalidStateError("Cannot target your own team!")

                await conn.execute(
                    """UPDATE game.powerups
                       SET status = 'played', used_at = NOW(), target_team_id = $2
                       WHERE id = $1""",
                    row["id"], target_row["id"],
                )
                event = sabotage_event(
                    powerup.type,
                    user_id=str(user_row["id"]),
                    user_name=user_row["name"],
                    team_id=str(user_row["team_id"]),
                    team_name=user_row["team_name"],
                    target_team_id=str(target_row["id"]),
                    target_team_name=target_row["name"],
                )
                await insert_feed_item(conn, event)

        logger.info(
            "Power-up %s (%s) played against team %s", powerup_id, powerup.type.value, target_team_id
        )
        return event.message

    async def reset_all_powerups(self) -> int:
        """Make every power-up available again. Returns how many were reset."""
        async with self._pool.acquire() as conn:
            async with conn.transaction():
                result = await conn.execute(
                    """UPDATE game.powerups
                       SET status = 'available', used_at = NULL, target_team_id = NULL"""
                )
                await insert_feed_item(conn, InfoEvent(message=POWERUPS_RESET_MESSAGE))
        count = int(result.split()[-1])
        logger.info("Reset %d power-ups", count)
        return count
