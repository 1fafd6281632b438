"""API request bodies and response models that aren't domain models."""

from pydantic import BaseModel, Field
from typing import List, Optional

from models import FeedType, Team, User


class SuccessResponse(BaseModel):
    success: bool = True


class CreatedResponse(BaseModel):
    id: str


# ================================================================
# Teams
# ================================================================

class CreateTeamRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    color: str = Field(..., min_length=1, max_length=32)


class SeedTeamsResponse(BaseModel):
    message: str
    teams: List[Team]


# ================================================================
# Users
# ================================================================

class CreateUserRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    handicap: int = Field(..., ge=0, le=54)
    team_id: str
    avatar_url: Optional[str] = None


class UserWithTeamResponse(User):
    team: Optional[Team] = None


class UpdateAvatarRequest(BaseModel):
    avatar_url: str


class PromoteRequest(BaseModel):
    promoted_by: str


class TransferSnakeRequest(BaseModel):
    new_holder_id: str


class SnakeTransferResponse(BaseModel):
    previous_holder_id: Optional[str] = None
    new_holder: User


# ================================================================
# Scores
# ================================================================

class SubmitScoreRequest(BaseModel):
    player_id: str
    hole: int = Field(..., ge=1, le=18)
    strokes: int = Field(..., ge=1)
    putts: int = Field(..., ge=0)
    input_by: str


class ApproveScoreRequest(BaseModel):
    approved_by: str


class RejectScoreRequest(BaseModel):
    rejected_by: str


# ================================================================
# Power-ups
# ================================================================

class UsePowerupRequest(BaseModel):
    target_team_id: str


class UsePowerupResponse(BaseModel):
    success: bool = True
    message: str


class ResetPowerupsResponse(BaseModel):
    success: bool = True
    count: int


# ================================================================
# Feed
# ================================================================

class PostFeedItemRequest(BaseModel):
    type: FeedType
    message: str = Field(..., min_length=1, max_length=500)
    player_id: Optional[str] = None
    team_id: Optional[str] = None
    target_team_id: Optional[str] = None
    media_url: Optional[str] = None


# ================================================================
# Course / handicap
# ================================================================

class ShotsReceivedResponse(BaseModel):
    handicap: int
    hole_index: int
    shots_received: int
    display: str


class NetScoreResponse(BaseModel):
    strokes: int
    handicap: int
    hole_index: int
    shots_received: int
    net_score: int
    par: Optional[int] = None
    label: Optional[str] = None
    to_par: Optional[str] = None
