from pydantic import Field

from .base import BaseGameModel


class Team(BaseGameModel):
    """A team competing in the outing."""
    name: str = Field(..., min_length=1, max_length=100)
    color: str = "#0f5132"
