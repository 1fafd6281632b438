"""Social feed endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError
from typing import List

from database.db_manager import DatabaseManager
from database.exceptions import DatabaseError
from api.dependencies import get_db, http_error
from api.schemas import PostFeedItemRequest
from models import FeedEntry, FeedItem, FeedType, feed_item_adapter

router = APIRouter()


@router.get("", response_model=List[FeedEntry])
async def get_latest_feed(
    limit: int = Query(50, ge=1, le=200),
    db: DatabaseManager = Depends(get_db),
):
    return await db.feed.get_latest_feed(limit)


@router.get("/{feed_type}", response_model=List[FeedItem])
async def get_feed_by_type(
    feed_type: FeedType,
    limit: int = Query(20, ge=1, le=200),
    db: DatabaseManager = Depends(get_db),
):
    return await db.feed.get_feed_by_type(feed_type, limit)


@router.post("", response_model=FeedItem, status_code=201)
async def post_feed_item(req: PostFeedItemRequest, db: DatabaseManager = Depends(get_db)):
    """Post an event directly; the fields required depend on its type."""
    try:
        event = feed_item_adapter.validate_python(req.model_dump(exclude_none=True))
    except ValidationError as e:
        raise HTTPException(422, e.errors(include_url=False))
    try:
        return await db.feed.post_feed_item(event)
    except DatabaseError as e:
        raise http_error(e)
