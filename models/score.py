from datetime import datetime
from enum import Enum
from pydantic import Field
from typing import Optional

from .base import BaseGameModel


class ScoreStatus(str, Enum):
    """Approval state of a submitted hole score.

    pending -> approved | rejected; a rejected (or approved) score goes back
    to pending only when the same player/hole is resubmitted.
    """
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Score(BaseGameModel):
    """A player's score on one hole, with the handicap maths frozen at submission."""
    player_id: str
    team_id: str
    hole: int = Field(..., ge=1, le=18)
    strokes: int = Field(..., ge=1)
    putts: int = Field(0, ge=0)
    par: Optional[int] = Field(None, ge=3, le=6)
    hole_index: Optional[int] = Field(None, ge=1, le=18)
    net_score: Optional[int] = None  # None on legacy rows
    shots_received: Optional[int] = Field(None, ge=0)
    status: ScoreStatus = ScoreStatus.PENDING
    input_by: str
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None

    @property
    def is_approved(self) -> bool:
        return self.status == ScoreStatus.APPROVED


class ScoreWithPlayer(Score):
    """A score joined with the names a captain needs to review it."""
    player_name: Optional[str] = None
    input_by_name: Optional[str] = None
