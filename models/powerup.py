from datetime import datetime
from enum import Enum
from typing import Optional

from .base import BaseGameModel


class PowerupType(str, Enum):
    MULLIGAN = "mulligan"
    GRENADE = "grenade"
    CLUB_THEFT = "club_theft"


class PowerupStatus(str, Enum):
    AVAILABLE = "available"
    PLAYED = "played"


class Powerup(BaseGameModel):
    """A one-shot consumable owned by a player. available -> played, once."""
    user_id: str
    type: PowerupType
    status: PowerupStatus = PowerupStatus.AVAILABLE
    used_at: Optional[datetime] = None
    target_team_id: Optional[str] = None


class PowerupWithOwner(Powerup):
    user_name: Optional[str] = None
    team_name: Optional[str] = None
