"""Conversion between asyncpg database rows and Pydantic domain models.

Rows are accessed by column name only, so plain dicts work in tests.
"""

from typing import Optional, Tuple
from uuid import UUID

from models import (
    FeedEntry,
    FeedItem,
    Powerup,
    PowerupWithOwner,
    Score,
    ScoreWithPlayer,
    Team,
    User,
    feed_item_adapter,
)
from database.exceptions import NotFoundError


def _str_id(value) -> Optional[str]:
    return str(value) if value is not None else None


def parse_id(value: str, entity: str = "Record") -> UUID:
    """String id -> UUID. A malformed id cannot match any row, so it is not found."""
    try:
        return UUID(str(value))
    except ValueError as e:
        raise NotFoundError(f"{entity} {value} not found") from e


def optional_id(value: Optional[str], entity: str = "Record") -> Optional[UUID]:
    return parse_id(value, entity) if value is not None else None


# ================================================================
# Row -> Model (reads)
# ================================================================

def team_from_row(row) -> Team:
    """game.teams row -> Team model."""
    return Team(id=str(row["id"]), name=row["name"], color=row["color"])


def user_from_row(row) -> User:
    """game.users row -> User model."""
    return User(
        id=str(row["id"]),
        name=row["name"],
        handicap=row["handicap"],
        team_id=str(row["team_id"]),
        avatar_url=row["avatar_url"],
        role=row["role"],
        has_snake=row["has_snake"],
    )


def score_from_row(row) -> Score:
    """game.scores row -> Score model."""
    return Score(**_score_fields(row))


def score_with_player_from_row(row) -> ScoreWithPlayer:
    """game.scores row joined with player_name / input_by_name columns."""
    return ScoreWithPlayer(
        **_score_fields(row),
        player_name=row.get("player_name"),
        input_by_name=row.get("input_by_name"),
    )


def _score_fields(row) -> dict:
    return {
        "id": str(row["id"]),
        "player_id": str(row["player_id"]),
        "team_id": str(row["team_id"]),
        "hole": row["hole"],
        "strokes": row["strokes"],
        "putts": row["putts"],
        "par": row["par"],
        "hole_index": row["hole_index"],
        "net_score": row["net_score"],
        "shots_received": row["shots_received"],
        "status": row["status"],
        "input_by": str(row["input_by"]),
        "approved_by": _str_id(row["approved_by"]),
        "approved_at": row["approved_at"],
    }


def powerup_from_row(row) -> Powerup:
    """game.powerups row -> Powerup model."""
    return Powerup(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        type=row["type"],
        status=row["status"],
        used_at=row["used_at"],
        target_team_id=_str_id(row["target_team_id"]),
    )


def powerup_with_owner_from_row(row) -> PowerupWithOwner:
    return PowerupWithOwner(
        **powerup_from_row(row).model_dump(),
        user_name=row["user_name"],
        team_name=row["team_name"],
    )


def feed_item_from_row(row) -> FeedItem:
    """game.feed_items row -> the FeedItem variant named by its type column."""
    data = {
        "id": str(row["id"]),
        "type": row["type"],
        "message": row["message"],
        "timestamp": row["posted_at"],
        "player_id": _str_id(row["player_id"]),
        "team_id": _str_id(row["team_id"]),
        "target_team_id": _str_id(row["target_team_id"]),
        "media_url": row["media_url"],
    }
    return feed_item_adapter.validate_python({k: v for k, v in data.items() if v is not None})


def feed_entry_from_row(row) -> FeedEntry:
    """Feed row joined with player_name / team_name / target_team_name."""
    return FeedEntry(
        item=feed_item_from_row(row),
        player_name=row["player_name"],
        team_name=row["team_name"],
        target_team_name=row["target_team_name"],
    )


# ================================================================
# Model -> Row (writes)
# ================================================================

def feed_item_to_row(event: FeedItem) -> Tuple:
    """FeedItem -> (type, message, player_id, team_id, target_team_id, media_url)."""
    return (
        event.type,
        event.message,
        optional_id(getattr(event, "player_id", None), "User"),
        optional_id(getattr(event, "team_id", None), "Team"),
        optional_id(getattr(event, "target_team_id", None), "Team"),
        getattr(event, "media_url", None),
    )


def user_to_row(user: User) -> dict:
    """User -> dict for game.users INSERT."""
    return {
        "name": user.name,
        "handicap": user.handicap,
        "team_id": parse_id(user.team_id, "Team"),
        "avatar_url": user.avatar_url,
        "role": user.role.value,
        "has_snake": user.has_snake,
    }
