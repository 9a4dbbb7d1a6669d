"""
Command preconditions.

Each check returns the FailureKind that blocks a command, or None when the
command may proceed. GameSession's boolean commands are defined in terms of
these checks, and the HTTP surface uses them to say why a command was
refused.
"""

from typing import TYPE_CHECKING

from herotrumps.engine.roster import find_by_id
from herotrumps.models.failure import FailureKind
from herotrumps.models.game import Player

if TYPE_CHECKING:
    from herotrumps.engine.session import GameSession


def assignment_rejection(
    session: "GameSession", character_id: int, player: Player
) -> FailureKind | None:
    """Why a character cannot be added to a roster, if it cannot."""
    if session.is_game_started:
        return FailureKind.MATCH_ALREADY_STARTED
    if find_by_id(session.roster_for(player), character_id) is not None:
        return FailureKind.DUPLICATE_CARD
    if find_by_id(session.available_characters(), character_id) is None:
        return FailureKind.CARD_UNAVAILABLE
    return None


def unassignment_rejection(
    session: "GameSession", character_id: int, player: Player
) -> FailureKind | None:
    """Why a character cannot be removed from a roster, if it cannot."""
    if session.is_game_started:
        return FailureKind.MATCH_ALREADY_STARTED
    if find_by_id(session.roster_for(player), character_id) is None:
        return FailureKind.NOT_FOUND
    return None


def draw_rejection(session: "GameSession") -> FailureKind | None:
    """Why a draw phase cannot run, if it cannot."""
    if not session.is_game_started:
        return FailureKind.MATCH_NOT_STARTED
    if session.is_game_over:
        return FailureKind.MATCH_OVER
    return None


def surrender_rejection(session: "GameSession") -> FailureKind | None:
    """Why a surrender is ignored, if it is."""
    if not session.is_game_started:
        return FailureKind.MATCH_NOT_STARTED
    if session.is_game_over:
        return FailureKind.MATCH_OVER
    return None
