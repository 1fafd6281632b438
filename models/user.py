from enum import Enum
from pydantic import Field
from typing import Optional

from .base import BaseGameModel


class Role(str, Enum):
    """What a team member is allowed to do."""
    CAPTAIN = "captain"
    PLAYER = "player"


class User(BaseGameModel):
    """A registered player. Captains approve or reject their team's scores."""
    name: str = Field(..., min_length=1, max_length=100)
    handicap: int = Field(0, ge=0, le=54)
    team_id: str
    avatar_url: Optional[str] = None
    role: Role = Role.PLAYER
    has_snake: bool = False

    @property
    def is_captain(self) -> bool:
        return self.role == Role.CAPTAIN
