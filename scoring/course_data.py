"""The outing course and hole lookups.

Stroke index ranks difficulty: 1 is the hardest hole, 18 the easiest.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from models import Course, Hole
from scoring.handicap import shots_received

# Policy for hole numbers the course table does not know about.
DEFAULT_PAR = 4
DEFAULT_INDEX = 9

COURSE = Course(
    name="Merry Mulligan Links",
    holes=[
        Hole(number=1, par=4, index=18),
        Hole(number=2, par=4, index=8),
        Hole(number=3, par=4, index=12),
        Hole(number=4, par=5, index=3),
        Hole(number=5, par=3, index=14),
        Hole(number=6, par=4, index=5),
        Hole(number=7, par=4, index=11),
        Hole(number=8, par=5, index=1),
        Hole(number=9, par=3, index=15),
        Hole(number=10, par=4, index=10),
        Hole(number=11, par=3, index=17),
        Hole(number=12, par=5, index=4),
        Hole(number=13, par=4, index=9),
        Hole(number=14, par=3, index=16),
        Hole(number=15, par=5, index=2),
        Hole(number=16, par=4, index=7),
        Hole(number=17, par=4, index=13),
        Hole(number=18, par=4, index=6),
    ],
)

COURSE_HOLES: List[Hole] = list(COURSE.holes)
COURSE_PAR = COURSE.total_par
FRONT_9_PAR = COURSE.front_nine_par
BACK_9_PAR = COURSE.back_nine_par


def get_hole_data(hole_number: int) -> Optional[Hole]:
    return COURSE.get_hole(hole_number)


def hole_par_and_index(hole_number: int) -> Tuple[int, int]:
    """(par, stroke index) for a hole, falling back to DEFAULT_PAR/DEFAULT_INDEX.

    The fallback keeps score submission possible for holes missing from the
    table; callers that can reject bad hole numbers should do so first.
    """
    hole = get_hole_data(hole_number)
    if hole is None:
        return DEFAULT_PAR, DEFAULT_INDEX
    return hole.par, hole.index


def hole_info(handicap: int, hole_number: int) -> Optional[Dict[str, Any]]:
    """A single hole plus the shots this handicap receives on it."""
    hole = get_hole_data(hole_number)
    if hole is None:
        return None
    return {
        **hole.model_dump(),
        "player_handicap": handicap,
        "shots_received": shots_received(handicap, hole.index),
    }


def course_with_handicap(handicap: int) -> List[Dict[str, Any]]:
    """Every hole with the shots this handicap receives on it."""
    return [
        {**hole.model_dump(), "shots_received": shots_received(handicap, hole.index)}
        for hole in COURSE_HOLES
    ]
