from pydantic import BaseModel, ConfigDict
from typing import Optional

class BaseGameModel(BaseModel):
    """Shared configuration for persisted game records."""
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = None
