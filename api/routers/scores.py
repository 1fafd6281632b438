"""Score submission and captain review endpoints."""

from fastapi import APIRouter, Depends
from typing import List

from database.db_manager import DatabaseManager
from database.exceptions import DatabaseError
from api.dependencies import get_db, http_error
from api.schemas import (
    ApproveScoreRequest,
    CreatedResponse,
    RejectScoreRequest,
    SubmitScoreRequest,
    SuccessResponse,
)
from models import Score, ScoreWithPlayer

router = APIRouter()


@router.post("", response_model=CreatedResponse, status_code=201)
async def submit_score(req: SubmitScoreRequest, db: DatabaseManager = Depends(get_db)):
    """Submit (or resubmit) a hole score. It waits for captain approval."""
    try:
        score_id = await db.scores.submit_score(
            req.player_id, req.hole, req.strokes, req.putts, req.input_by
        )
    except DatabaseError as e:
        raise http_error(e)
    return CreatedResponse(id=score_id)


@router.post("/{score_id}/approve", response_model=SuccessResponse)
async def approve_score(
    score_id: str, req: ApproveScoreRequest, db: DatabaseManager = Depends(get_db)
):
    try:
        await db.scores.approve_score(score_id, req.approved_by)
    except DatabaseError as e:
        raise http_error(e)
    return SuccessResponse()


@router.post("/{score_id}/reject", response_model=SuccessResponse)
async def reject_score(
    score_id: str, req: RejectScoreRequest, db: DatabaseManager = Depends(get_db)
):
    try:
        await db.scores.reject_score(score_id, req.rejected_by)
    except DatabaseError as e:
        raise http_error(e)
    return SuccessResponse()


@router.get("/pending/{team_id}", response_model=List[ScoreWithPlayer])
async def get_pending_scores(team_id: str, db: DatabaseManager = Depends(get_db)):
    try:
        return await db.scores.get_pending_scores(team_id)
    except DatabaseError as e:
        raise http_error(e)


@router.get("/player/{player_id}", response_model=List[Score])
async def get_player_scores(player_id: str, db: DatabaseManager = Depends(get_db)):
    try:
        return await db.scores.get_player_scores(player_id)
    except DatabaseError as e:
        raise http_error(e)


@router.get("/team/{team_id}", response_model=List[ScoreWithPlayer])
async def get_team_scores(team_id: str, db: DatabaseManager = Depends(get_db)):
    """A team's approved scores."""
    try:
        return await db.scores.get_team_scores(team_id)
    except DatabaseError as e:
        raise http_error(e)
