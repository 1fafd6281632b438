"""Handicap stroke allocation and net scoring.

A player's handicap is spread over the 18 holes by stroke index: every full
18 points gives one shot on every hole, and the remaining points give one
extra shot on the hardest holes first (index 1, then 2, ...).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

HOLES_PER_ROUND = 18


def _check_inputs(handicap: int, hole_index: int) -> None:
    if handicap < 0:
        raise ValueError(f"Handicap {handicap} cannot be negative")
    if not 1 <= hole_index <= HOLES_PER_ROUND:
        raise ValueError(f"Hole index {hole_index} must be 1-{HOLES_PER_ROUND}")


def shots_received(handicap: int, hole_index: int) -> int:
    """Handicap strokes a player receives on a hole with the given stroke index.

    >>> shots_received(20, 5)
    2
    >>> shots_received(10, 5)
    1
    >>> shots_received(18, 18)
    1
    """
    _check_inputs(handicap, hole_index)
    base, remainder = divmod(handicap, HOLES_PER_ROUND)
    return base + (1 if hole_index <= remainder else 0)


def net_score(gross_strokes: int, handicap: int, hole_index: int) -> int:
    """Gross strokes minus shots received. Can go negative; never clamped."""
    return gross_strokes - shots_received(handicap, hole_index)


def total_net_score(scores: Iterable[Tuple[int, int]], handicap: int) -> int:
    """Sum of net scores over (gross_strokes, hole_index) pairs."""
    return sum(net_score(gross, handicap, index) for gross, index in scores)


@dataclass(frozen=True)
class ScoreToPar:
    relative: int
    label: str
    display: str


def score_relative_to_par(net: int, par: int) -> ScoreToPar:
    """Classify a hole result against par (Albatross ... Double Bogey, then +n)."""
    relative = net - par

    if relative <= -3:
        label = "Albatross"
    elif relative == -2:
        label = "Eagle"
    elif relative == -1:
        label = "Birdie"
    elif relative == 0:
        label = "Par"
    elif relative == 1:
        label = "Bogey"
    elif relative == 2:
        label = "Double Bogey"
    else:
        label = f"+{relative}"

    if relative == 0:
        display = "E"
    elif relative > 0:
        display = f"+{relative}"
    else:
        display = str(relative)

    return ScoreToPar(relative=relative, label=label, display=display)


def format_shots_received(shots: int) -> str:
    if shots == 0:
        return "No shots"
    if shots == 1:
        return "1 shot"
    return f"{shots} shots"
