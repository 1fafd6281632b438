"""Append-only access to game.feed_items."""

import asyncpg
from typing import List

from models import FeedEntry, FeedItem, FeedType
from database.converters import feed_entry_from_row, feed_item_from_row, feed_item_to_row
from database.exceptions import IntegrityError

INSERT_FEED_ITEM = """INSERT INTO game.feed_items
       (type, message, player_id, team_id, target_team_id, media_url)
       VALUES ($1, $2, $3, $4, $5, $6)"""


async def insert_feed_item(conn, event: FeedItem) -> None:
    """Append an event on an open connection, inside the caller's transaction."""
    await conn.execute(INSERT_FEED_ITEM, *feed_item_to_row(event))


class FeedRepositoryDB:
    """Reads and direct posts for the social feed."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    # ================================================================
    # Read
    # ================================================================

    async def get_latest_feed(self, limit: int = 50) -> List[FeedEntry]:
        """Newest events first, with player and team names resolved."""
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """SELECT f.*,
                          p.name AS player_name,
                          t.name AS team_name,
                          tt.name AS target_team_name
                   FROM game.feed_items f
                   LEFT JOIN game.users p ON p.id = f.player_id
                   LEFT JOIN game.teams t ON t.id = f.team_id
                   LEFT JOIN game.teams tt ON tt.id = f.target_team_id
                   ORDER BY f.posted_at DESC
                   LIMIT $1""",
                limit,
            )
            return [feed_entry_from_row(r) for r in rows]

    async def get_feed_by_type(self, feed_type: FeedType, limit: int = 20) -> List[FeedItem]:
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """SELECT * FROM game.feed_items
                   WHERE type = $1
                   ORDER BY posted_at DESC
                   LIMIT $2""",
                feed_type, limit,
            )
            return [feed_item_from_row(r) for r in rows]

    # ================================================================
    # Create
    # ================================================================

    async def post_feed_item(self, event: FeedItem) -> FeedItem:
        """Post an event directly. Returns it with DB-generated id and timestamp."""
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    INSERT_FEED_ITEM + " RETURNING *", *feed_item_to_row(event)
                )
                return feed_item_from_row(row)
        except asyncpg.ForeignKeyViolationError as e:
            raise IntegrityError(f"Feed item references a missing record: {e}") from e
