"""Feed events produced as side effects of game actions."""

from __future__ import annotations

from typing import Dict, List, Optional

from models import (
    BirdieEvent,
    EagleEvent,
    FeedItem,
    InfoEvent,
    PowerupType,
    SabotageEvent,
    Score,
    ScoreEvent,
    SnakeEvent,
)
from scoring.course_data import DEFAULT_PAR

SNAKE_PUTTS = 3

WELCOME_MESSAGE = "Welcome to Merry Mulligan! May the best team win!"
POWERUPS_RESET_MESSAGE = "⚡ All power-ups have been reset! Chaos incoming!"

SABOTAGE_TEMPLATES: Dict[PowerupType, str] = {
    PowerupType.MULLIGAN: "🔄 MULLIGAN! {user} ({team}) gave {target} a do-over nightmare!",
    PowerupType.GRENADE: "💣 GRENADE! {user} ({team}) lobbed chaos at {target}!",
    PowerupType.CLUB_THEFT: "🏌️ CLUB THEFT! {user} ({team}) swiped a club from {target}!",
}


def is_snake(putts: int) -> bool:
    return putts >= SNAKE_PUTTS


def approval_events(score: Score, player_name: str, team_name: str) -> List[FeedItem]:
    """Feed events posted when a captain approves ``score``, in posting order.

    Each condition is checked on its own, so an eagle also counts as a birdie,
    and every approval ends with a plain score event.
    """
    par = score.par or DEFAULT_PAR
    refs = {"player_id": score.player_id, "team_id": score.team_id}
    events: List[FeedItem] = []

    if score.strokes <= par - 1:
        events.append(BirdieEvent(
            message=f"🐦 BIRDIE! {player_name} crushed hole {score.hole}!", **refs,
        ))
    if score.strokes <= par - 2:
        events.append(EagleEvent(
            message=f"🦅 EAGLE!! {player_name} is on fire at hole {score.hole}!", **refs,
        ))
    if is_snake(score.putts):
        events.append(snake_event(score.player_id, score.team_id, player_name, score.hole))

    events.append(ScoreEvent(
        message=f"{player_name} ({team_name}) scored {score.strokes} on hole {score.hole}",
        **refs,
    ))
    return events


def snake_event(
    player_id: str, team_id: str, player_name: str, hole: Optional[int] = None
) -> SnakeEvent:
    """Snake handover event; ``hole`` is None for a manual transfer."""
    if hole is None:
        message = f"🐍 {player_name} got the SNAKE! 3-putt shame incoming..."
    else:
        message = f"🐍 THE SNAKE! {player_name} 3-putted on hole {hole}! Shame!"
    return SnakeEvent(message=message, player_id=player_id, team_id=team_id)


def sabotage_event(
    powerup_type: PowerupType,
    *,
    user_id: str,
    user_name: str,
    team_id: str,
    team_name: Optional[str],
    target_team_id: str,
    target_team_name: str,
) -> SabotageEvent:
    message = SABOTAGE_TEMPLATES[powerup_type].format(
        user=user_name, team=team_name, target=target_team_name,
    )
    return SabotageEvent(
        message=message,
        player_id=user_id,
        team_id=team_id,
        target_team_id=target_team_id,
    )


def joined_event(user_id: str, name: str, team_id: str, team_name: Optional[str], captain: bool) -> InfoEvent:
    message = f"{name} joined {team_name or 'the game'}!"
    if captain:
        message += " They're the team captain!"
    return InfoEvent(message=message, player_id=user_id, team_id=team_id)


def team_entered_event(team_id: str, name: str) -> InfoEvent:
    return InfoEvent(message=f'Team "{name}" has entered the game!', team_id=team_id)
