from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class Hole(BaseModel):
    """Represents a single hole on the outing course."""
    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=1, le=18)
    par: int = Field(..., ge=3, le=6)
    index: int = Field(..., ge=1, le=18)  # stroke index, 1 = hardest
    name: Optional[str] = None
