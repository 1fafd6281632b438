from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional

from .hole import Hole


class Course(BaseModel):
    """The course being played: an ordered table of holes."""
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    holes: List[Hole] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_hole_table(self):
        """Hole numbers must be unique and a full course must use each index exactly once."""
        numbers = [h.number for h in self.holes]
        if len(numbers) != len(set(numbers)):
            raise ValueError("Duplicate hole numbers in course table")

        indexes = sorted(h.index for h in self.holes)
        if len(self.holes) == 18 and indexes != list(range(1, 19)):
            raise ValueError("Stroke indexes must be a permutation of 1-18")
        if len(indexes) != len(set(indexes)):
            raise ValueError("Duplicate stroke indexes in course table")
        return self

    def get_hole(self, number: int) -> Optional[Hole]:
        """Get a hole by its number, or None when the course has no such hole."""
        for hole in self.holes:
            if hole.number == number:
                return hole
        return None

    @property
    def total_par(self) -> int:
        return sum(h.par for h in self.holes)

    @property
    def front_nine_par(self) -> int:
        """Par for holes 1-9."""
        return sum(h.par for h in self.holes if 1 <= h.number <= 9)

    @property
    def back_nine_par(self) -> int:
        """Par for holes 10-18."""
        return sum(h.par for h in self.holes if 10 <= h.number <= 18)
