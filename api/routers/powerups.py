"""Power-up endpoints."""

from fastapi import APIRouter, Depends
from typing import List

from database.db_manager import DatabaseManager
from database.exceptions import DatabaseError
from api.dependencies import get_db, http_error
from api.schemas import ResetPowerupsResponse, UsePowerupRequest, UsePowerupResponse
from models import Powerup, PowerupWithOwner

router = APIRouter()


@router.get("", response_model=List[PowerupWithOwner])
async def get_all_powerups(db: DatabaseManager = Depends(get_db)):
    return await db.powerups.get_all_powerups()


@router.get("/user/{user_id}", response_model=List[Powerup])
async def get_user_powerups(user_id: str, db: DatabaseManager = Depends(get_db)):
    """A player's unused power-ups."""
    try:
        return await db.powerups.get_user_powerups(user_id)
    except DatabaseError as e:
        raise http_error(e)


@router.post("/reset", response_model=ResetPowerupsResponse)
async def reset_all_powerups(db: DatabaseManager = Depends(get_db)):
    count = await db.powerups.reset_all_powerups()
    return ResetPowerupsResponse(count=count)


@router.post("/{powerup_id}/use", response_model=UsePowerupResponse)
async def use_powerup(
    powerup_id: str, req: UsePowerupRequest, db: DatabaseManager = Depends(get_db)
):
    try:
        message = await db.powerups.use_powerup(powerup_id, req.target_team_id)
    except DatabaseError as e:
        raise http_error(e)
    return UsePowerupResponse(message=message)
