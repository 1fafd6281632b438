from .base import BaseGameModel
from .course import Course
from .feed import (
    BirdieEvent,
    EagleEvent,
    FeedEntry,
    FeedEvent,
    FeedItem,
    FeedType,
    InfoEvent,
    PowerupEvent,
    SabotageEvent,
    ScoreEvent,
    SnakeEvent,
    feed_item_adapter,
)
from .hole import Hole
from .powerup import Powerup, PowerupStatus, PowerupType, PowerupWithOwner
from .score import Score, ScoreStatus, ScoreWithPlayer
from .team import Team
from .user import Role, User

__all__ = [
    "BaseGameModel",
    "Course",
    "Hole",
    "Team",
    "User",
    "Role",
    "Score",
    "ScoreStatus",
    "ScoreWithPlayer",
    "Powerup",
    "PowerupStatus",
    "PowerupType",
    "PowerupWithOwner",
    "FeedEntry",
    "FeedEvent",
    "FeedItem",
    "FeedType",
    "BirdieEvent",
    "EagleEvent",
    "SnakeEvent",
    "ScoreEvent",
    "SabotageEvent",
    "InfoEvent",
    "PowerupEvent",
    "feed_item_adapter",
]
