import asyncpg

from database.repositories import (
    FeedRepositoryDB,
    PowerupRepositoryDB,
    ScoreRepositoryDB,
    TeamRepositoryDB,
    UserRepositoryDB,
)


class DatabaseManager:
    """Bundles the repositories that share one asyncpg pool.

    Usage:
        db = DatabaseManager(pool)
        score_id = await db.scores.submit_score(player_id, 8, 4, 2, player_id)
        leaderboard = await db.teams.get_leaderboard()
    """

    def __init__(self, pool: asyncpg.Pool):
        self.pool = pool
        self.teams = TeamRepositoryDB(pool)
        self.users = UserRepositoryDB(pool)
        self.scores = ScoreRepositoryDB(pool)
        self.powerups = PowerupRepositoryDB(pool)
        self.feed = FeedRepositoryDB(pool)
