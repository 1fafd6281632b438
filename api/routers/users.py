"""Player endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from typing import Optional

from database.db_manager import DatabaseManager
from database.exceptions import DatabaseError
from api.dependencies import get_db, http_error
from api.schemas import (
    CreateUserRequest,
    CreatedResponse,
    PromoteRequest,
    SnakeTransferResponse,
    SuccessResponse,
    TransferSnakeRequest,
    UpdateAvatarRequest,
    UserWithTeamResponse,
)
from models import User

router = APIRouter()


@router.post("", response_model=CreatedResponse, status_code=201)
async def create_user(req: CreateUserRequest, db: DatabaseManager = Depends(get_db)):
    """Join a team. The first player on a team becomes its captain."""
    user = User(
        name=req.name,
        handicap=req.handicap,
        team_id=req.team_id,
        avatar_url=req.avatar_url,
    )
    try:
        created = await db.users.create_user(user)
    except DatabaseError as e:
        raise http_error(e)
    return CreatedResponse(id=created.id)


@router.get("/snake", response_model=Optional[UserWithTeamResponse])
async def get_snake_holder(db: DatabaseManager = Depends(get_db)):
    holder = await db.users.get_snake_holder()
    if not holder:
        return None
    team = await db.teams.get_team(holder.team_id)
    return UserWithTeamResponse(**holder.model_dump(), team=team)


@router.post("/snake", response_model=SnakeTransferResponse)
async def transfer_snake(req: TransferSnakeRequest, db: DatabaseManager = Depends(get_db)):
    try:
        previous, holder = await db.users.transfer_snake(req.new_holder_id)
    except DatabaseError as e:
        raise http_error(e)
    return SnakeTransferResponse(previous_holder_id=previous, new_holder=holder)


@router.get("/{user_id}", response_model=UserWithTeamResponse)
async def get_user(user_id: str, db: DatabaseManager = Depends(get_db)):
    try:
        user = await db.users.get_user(user_id)
    except DatabaseError as e:
        raise http_error(e)
    if not user:
        raise HTTPException(404, "User not found")
    team = await db.teams.get_team(user.team_id)
    return UserWithTeamResponse(**user.model_dump(), team=team)


@router.put("/{user_id}/avatar", response_model=User)
async def update_avatar(
    user_id: str, req: UpdateAvatarRequest, db: DatabaseManager = Depends(get_db)
):
    try:
        return await db.users.update_avatar(user_id, req.avatar_url)
    except DatabaseError as e:
        raise http_error(e)


@router.post("/{user_id}/promote", response_model=SuccessResponse)
async def promote_to_captain(
    user_id: str, req: PromoteRequest, db: DatabaseManager = Depends(get_db)
):
    try:
        await db.users.promote_to_captain(user_id, req.promoted_by)
    except DatabaseError as e:
        raise http_error(e)
    return SuccessResponse()
