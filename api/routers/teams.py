"""Team, leaderboard and scorecard endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from typing import List

from database.db_manager import DatabaseManager
from database.exceptions import DatabaseError
from api.dependencies import get_db, http_error
from api.schemas import CreateTeamRequest, CreatedResponse, SeedTeamsResponse
from models import User
from scoring import LeaderboardEntry, ScorecardRow, TeamStanding

router = APIRouter()


@router.get("", response_model=List[TeamStanding])
async def get_all_teams(db: DatabaseManager = Depends(get_db)):
    """Teams with members, ranked by gross strokes."""
    return await db.teams.get_all_teams()


@router.get("/leaderboard", response_model=List[LeaderboardEntry])
async def get_leaderboard(db: DatabaseManager = Depends(get_db)):
    """Teams ranked by net score. This decides the winner."""
    return await db.teams.get_leaderboard()


@router.post("", response_model=CreatedResponse, status_code=201)
async def create_team(req: CreateTeamRequest, db: DatabaseManager = Depends(get_db)):
    try:
        team = await db.teams.create_team(req.name, req.color)
    except DatabaseError as e:
        raise http_error(e)
    return CreatedResponse(id=team.id)


@router.post("/seed", response_model=SeedTeamsResponse)
async def seed_teams(db: DatabaseManager = Depends(get_db)):
    created, teams = await db.teams.seed_teams()
    message = "Teams seeded successfully" if created else "Teams already seeded"
    return SeedTeamsResponse(message=message, teams=teams)


@router.get("/{team_id}", response_model=TeamStanding)
async def get_team(team_id: str, db: DatabaseManager = Depends(get_db)):
    try:
        team = await db.teams.get_team_standing(team_id)
    except DatabaseError as e:
        raise http_error(e)
    if not team:
        raise HTTPException(404, "Team not found")
    return team


@router.get("/{team_id}/scorecard", response_model=List[ScorecardRow])
async def get_team_scorecard(team_id: str, db: DatabaseManager = Depends(get_db)):
    try:
        return await db.teams.get_team_scorecard(team_id)
    except DatabaseError as e:
        raise http_error(e)


@router.get("/{team_id}/members", response_model=List[User])
async def get_team_members(team_id: str, db: DatabaseManager = Depends(get_db)):
    try:
        return await db.users.get_team_members(team_id)
    except DatabaseError as e:
        raise http_error(e)
