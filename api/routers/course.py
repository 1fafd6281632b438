"""Course table and handicap calculator endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from typing import Optional

from database.db_manager import DatabaseManager
from database.exceptions import DatabaseError
from api.dependencies import get_db, http_error
from api.schemas import NetScoreResponse, ShotsReceivedResponse
from scoring import (
    COURSE,
    course_with_handicap,
    format_shots_received,
    hole_info,
    net_score,
    score_relative_to_par,
    shots_received,
)

router = APIRouter()


@router.get("")
async def get_course():
    return {
        "name": COURSE.name,
        "par": COURSE.total_par,
        "front_nine_par": COURSE.front_nine_par,
        "back_nine_par": COURSE.back_nine_par,
        "holes": COURSE.holes,
    }


@router.get("/shots", response_model=ShotsReceivedResponse)
async def get_shots_received(
    handicap: int = Query(..., ge=0, le=54),
    hole_index: int = Query(..., ge=1, le=18),
):
    shots = shots_received(handicap, hole_index)
    return ShotsReceivedResponse(
        handicap=handicap,
        hole_index=hole_index,
        shots_received=shots,
        display=format_shots_received(shots),
    )


@router.get("/net", response_model=NetScoreResponse)
async def get_net_score(
    strokes: int = Query(..., ge=1),
    handicap: int = Query(..., ge=0, le=54),
    hole_index: int = Query(..., ge=1, le=18),
    par: Optional[int] = Query(None, ge=3, le=6),
):
    """Net score for a hole, with its name against par when par is given."""
    net = net_score(strokes, handicap, hole_index)
    relative = score_relative_to_par(net, par) if par is not None else None
    return NetScoreResponse(
        strokes=strokes,
        handicap=handicap,
        hole_index=hole_index,
        shots_received=shots_received(handicap, hole_index),
        net_score=net,
        par=par,
        label=relative.label if relative else None,
        to_par=relative.display if relative else None,
    )


async def _player_handicap(db: DatabaseManager, player_id: str) -> int:
    try:
        user = await db.users.get_user(player_id)
    except DatabaseError as e:
        raise http_error(e)
    if not user:
        raise HTTPException(404, "Player not found")
    return user.handicap


@router.get("/players/{player_id}")
async def get_course_with_handicap(player_id: str, db: DatabaseManager = Depends(get_db)):
    """Every hole with the shots this player receives on it."""
    return course_with_handicap(await _player_handicap(db, player_id))


@router.get("/players/{player_id}/holes/{hole_number}")
async def get_hole_info(
    player_id: str,
    hole_number: int = Path(..., ge=1, le=18),
    db: DatabaseManager = Depends(get_db),
):
    info = hole_info(await _player_handicap(db, player_id), hole_number)
    if info is None:
        raise HTTPException(404, "Hole not found")
    return info
