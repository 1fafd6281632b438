"""Feed events.

The feed is an append-only log. Each event kind is its own model carrying only
the references it needs; ``FeedItem`` is the tagged union over all of them,
discriminated by ``type``.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from typing import Annotated, Literal, Optional, Union


FeedType = Literal["birdie", "eagle", "snake", "sabotage", "info", "powerup", "score"]


class FeedEvent(BaseModel):
    """Fields shared by every feed event."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    message: str
    timestamp: Optional[datetime] = None


class BirdieEvent(FeedEvent):
    type: Literal["birdie"] = "birdie"
    player_id: str
    team_id: str


class EagleEvent(FeedEvent):
    type: Literal["eagle"] = "eagle"
    player_id: str
    team_id: str


class SnakeEvent(FeedEvent):
    type: Literal["snake"] = "snake"
    player_id: str
    team_id: str


class ScoreEvent(FeedEvent):
    type: Literal["score"] = "score"
    player_id: str
    team_id: str


class SabotageEvent(FeedEvent):
    type: Literal["sabotage"] = "sabotage"
    player_id: str
    team_id: str
    target_team_id: str


class InfoEvent(FeedEvent):
    type: Literal["info"] = "info"
    player_id: Optional[str] = None
    team_id: Optional[str] = None


class PowerupEvent(FeedEvent):
    type: Literal["powerup"] = "powerup"
    player_id: str
    team_id: str
    media_url: Optional[str] = None


FeedItem = Annotated[
    Union[
        BirdieEvent,
        EagleEvent,
        SnakeEvent,
        ScoreEvent,
        SabotageEvent,
        InfoEvent,
        PowerupEvent,
    ],
    Field(discriminator="type"),
]

feed_item_adapter: TypeAdapter = TypeAdapter(FeedItem)


class FeedEntry(BaseModel):
    """A feed event with its references resolved to display names."""
    item: FeedItem
    player_name: Optional[str] = None
    team_name: Optional[str] = None
    target_team_name: Optional[str] = None
