"""Players: registration, captaincy, avatars and the snake."""

import logging
from typing import List, Optional, Tuple
from uuid import UUID

import asyncpg

from models import PowerupType, Role, User
from database.converters import parse_id, user_from_row, user_to_row
from database.exceptions import AuthorizationError, IntegrityError, NotFoundError
from database.repositories.feed_repo import insert_feed_item
from scoring.events import joined_event, snake_event

logger = logging.getLogger(__name__)


async def move_snake(conn, new_holder_id: UUID) -> Optional[UUID]:
    """Hand the snake to ``new_holder_id`` inside the caller's transaction.

    The single snake_holder row is locked first so concurrent transfers run one
    after another; afterwards exactly one user has has_snake set. Returns the
    previous holder's id, if any.
    """
    await conn.execute(
        "INSERT INTO game.snake_holder (id) VALUES (1) ON CONFLICT (id) DO NOTHING"
    )
    previous = await conn.fetchval(
        "SELECT user_id FROM game.snake_holder WHERE id = 1 FOR UPDATE"
    )
    await conn.execute(
        "UPDATE game.users SET has_snake = FALSE WHERE has_snake AND id <> $1",
        new_holder_id,
    )
    await conn.execute(
        "UPDATE game.users SET has_snake = TRUE WHERE id = $1", new_holder_id
    )
    await conn.execute(
        "UPDATE game.snake_holder SET user_id = $1, updated_at = NOW() WHERE id = 1",
        new_holder_id,
    )
    return previous


class UserRepositoryDB:
    """Async CRUD for game.users."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    # ================================================================
    # Read
    # ================================================================

    async def get_user(self, user_id: str) -> Optional[User]:
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM game.users WHERE id = $1", parse_id(user_id, "User")
            )
            return user_from_row(row) if row else None

    async def get_team_members(self, team_id: str) -> List[User]:
        """Members of a team in join order."""
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                "SELECT * FROM game.users WHERE team_id = $1 ORDER BY created_at",
                parse_id(team_id, "Team"),
            )
            return [user_from_row(r) for r in rows]

    async def get_snake_holder(self) -> Optional[User]:
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM game.users WHERE has_snake LIMIT 1"
            )
            return user_from_row(row) if row else None

    # ================================================================
    # Create
    # ================================================================

    async def create_user(self, user: User) -> User:
        """Register a player on a team.

        The first member of a team becomes its captain. Every new player gets
        one of each power-up, and the join is posted to the feed.
        """
        data = user_to_row(user)
        try:
            async with self._pool.acquire() as conn:
                async with conn.transaction():
                    # Lock the team so two simultaneous first joins can't both be captain.
                    team_row = await conn.fetchrow(
                        "SELECT * FROM game.teams WHERE id = $1 FOR UPDATE",
                        data["team_id"],
                    )
                    if not team_row:
                        raise NotFoundError(f"Team {user.team_id} not found")

                    member_count = await conn.fetchval(
                        "SELECT COUNT(*) FROM game.users WHERE team_id = $1",
                        data["team_id"],
                    )
                    role = Role.CAPTAIN if member_count == 0 else Role.PLAYER

                    row = await conn.fetchrow(
                        """INSERT INTO game.users (name, handicap, team_id, avatar_url, role, has_snake)
                           VALUES ($1, $2, $3, $4, $5, FALSE) RETURNING *""",
                        data["name"], data["handicap"], data["team_id"],
                        data["avatar_url"], role.value,
                    )
                    created = user_from_row(row)

                    await conn.executemany(
                        """INSERT INTO game.powerups (user_id, type, status)
                           VALUES ($1, $2, 'available')""",
                        [(row["id"], t.value) for t in PowerupType],
                    )
                    await insert_feed_item(conn, joined_event(
                        created.id, created.name, created.team_id,
                        team_row["name"], role == Role.CAPTAIN,
                    ))
        except (asyncpg.ForeignKeyViolationError, asyncpg.CheckViolationError) as e:
            raise IntegrityError(str(e)) from e

        logger.info("Player %s joined team %s as %s", created.id, created.team_id, role.value)
        return created

    # ================================================================
    # Update
    # ================================================================

    async def update_avatar(self, user_id: str, avatar_url: str) -> User:
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "UPDATE game.users SET avatar_url = $2 WHERE id = $1 RETURNING *",
                parse_id(user_id, "User"), avatar_url,
            )
            if not row:
                raise NotFoundError(f"User {user_id} not found")
            return user_from_row(row)

    async def promote_to_captain(self, user_id: str, promoted_by: str) -> User:
        """Make a teammate a captain. Only a captain of the same team may do this."""
        async with self._pool.acquire() as conn:
            async with conn.transaction():
                user_row = await conn.fetchrow(
                    "SELECT * FROM game.users WHERE id = $1 FOR UPDATE",
                    parse_id(user_id, "User"),
                )
                promoter_row = await conn.fetchrow(
                    "SELECT * FROM game.users WHERE id = $1",
                    parse_id(promoted_by, "User"),
                )
                if not user_row or not promoter_row:
                    raise NotFoundError("User not found")

                user, promoter = user_from_row(user_row), user_from_row(promoter_row)
                if not promoter.is_captain:
                    raise AuthorizationError("Only captains can promote other players")
                if user.team_id != promoter.team_id:
                    raise AuthorizationError("Can only promote players on your team")

                row = await conn.fetchrow(
                    "UPDATE game.users SET role = 'captain' WHERE id = $1 RETURNING *",
                    user_row["id"],
                )
        logger.info("Player %s promoted to captain by %s", user_id, promoted_by)
        return user_from_row(row)

    async def transfer_snake(self, new_holder_id: str) -> Tuple[Optional[str], User]:
        """Give the snake to a player directly and post it to the feed.

        Returns (previous holder id, new holder).
        """
        async with self._pool.acquire() as conn:
            async with conn.transaction():
                row = await conn.fetchrow(
                    "SELECT * FROM game.users WHERE id = $1",
                    parse_id(new_holder_id, "User"),
                )
                if not row:
                    raise NotFoundError(f"User {new_holder_id} not found")

                previous = await move_snake(conn, row["id"])
                holder = user_from_row(row).model_copy(update={"has_snake": True})
                await insert_feed_item(
                    conn, snake_event(holder.id, holder.team_id, holder.name)
                )
        logger.info("Snake moved from %s to %s", previous, holder.id)
        return (str(previous) if previous else None), holder
