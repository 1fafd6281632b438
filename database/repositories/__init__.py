from .feed_repo import FeedRepositoryDB
from .powerup_repo import PowerupRepositoryDB
from .score_repo import ScoreRepositoryDB
from .team_repo import TeamRepositoryDB
from .user_repo import UserRepositoryDB

__all__ = [
    "FeedRepositoryDB",
    "PowerupRepositoryDB",
    "ScoreRepositoryDB",
    "TeamRepositoryDB",
    "UserRepositoryDB",
]
