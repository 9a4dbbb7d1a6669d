"""
Game endpoints.

The HTTP driving surface for the battle engine. Each command maps to one
GameSession operation; refused commands come back as a refusal envelope
naming the precondition that blocked them.
"""

from typing import Annotated, Any, Literal

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel

from herotrumps.api.schemas import (
    BattleResultResponse,
    CharacterResponse,
    GameStateResponse,
    HistoryResponse,
    StatsResponse,
    character_list,
    history_response,
)
from herotrumps.config import settings
from herotrumps.engine.roster import find_by_id
from herotrumps.engine.rules import (
    assignment_rejection,
    draw_rejection,
    surrender_rejection,
    unassignment_rejection,
)
from herotrumps.engine.session import GameSession
from herotrumps.models.character import Alignment, Character, PowerStat
from herotrumps.models.failure import (
    ApiResponse,
    FailureKind,
    create_refusal,
    create_success,
)
from herotrumps.models.game import GameMode, Player
from herotrumps.services.sample_roster import get_sample_roster
from herotrumps.services.session_registry import SessionRegistry
from herotrumps.services.superhero_client import fetch_characters

router = APIRouter(prefix="/games", tags=["games"])

CharacterSource = Literal["sample", "feed"]


def get_registry(request: Request) -> SessionRegistry:
    """Dependency that provides the app's session registry."""
    registry: SessionRegistry = request.app.state.registry
    return registry


Registry = Annotated[SessionRegistry, Depends(get_registry)]


class CreateGameRequest(BaseModel):
    """Request model for creating a game."""

    mode: GameMode = GameMode.PVP
    source: CharacterSource = "sample"
    publisher: str | None = None


class ModeRequest(BaseModel):
    """Request model for switching game mode."""

    mode: GameMode


class AssignRequest(BaseModel):
    """Request model for adding a character to a roster."""

    character_id: int


class SurrenderRequest(BaseModel):
    """Request model for conceding a match."""

    player: Player


class PoolResponse(BaseModel):
    """Available characters, filtered and sorted as requested."""

    alignment: str | None = None
    sort_by: str | None = None
    characters: list[CharacterResponse]
    count: int


class BattleResponse(BaseModel):
    """Result of a resolved battle plus the state it left behind."""

    result: BattleResultResponse
    state: GameStateResponse


def _refuse(response: Response, kind: FailureKind, command: str) -> ApiResponse[Any]:
    response.status_code = status.HTTP_409_CONFLICT
    return create_refusal(kind, command)


def _state(game_id: str, session: GameSession) -> ApiResponse[GameStateResponse]:
    return create_success(GameStateResponse.from_session(game_id, session))


async def _load_characters(request: CreateGameRequest) -> list[Character]:
    if request.source == "feed":
        return await fetch_characters(publisher=request.publisher or settings.default_publisher)
    return get_sample_roster()


@router.post("", response_model=GameStateResponse, status_code=status.HTTP_201_CREATED)
async def create_game(request: CreateGameRequest, registry: Registry) -> GameStateResponse:
    """
    Create a game session seeded with characters.

    Characters come from the bundled sample roster or the live feed.
    Returns 502 if the feed is requested but unavailable.
    """
    characters = await _load_characters(request)
    game_id, session = registry.create(characters, request.mode)
    return GameStateResponse.from_session(game_id, session)


@router.get("/{game_id}", response_model=GameStateResponse)
async def get_game(game_id: str, registry: Registry) -> GameStateResponse:
    """Get the full state of a game. Returns 404 if not found."""
    return GameStateResponse.from_session(game_id, registry.get(game_id))


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_game(game_id: str, registry: Registry) -> None:
    """End a game and discard its session."""
    registry.delete(game_id)


@router.get("/{game_id}/characters", response_model=PoolResponse)
async def get_available_characters(
    game_id: str,
    registry: Registry,
    alignment: Alignment | None = None,
    sort_by: PowerStat | None = None,
) -> PoolResponse:
    """
    List the available pool.

    Optionally filtered by alignment and sorted by a stat, highest first.
    """
    session = registry.get(game_id)
    characters = session.available_characters(alignment=alignment, sort_by=sort_by)
    return PoolResponse(
        alignment=alignment.value if alignment else None,
        sort_by=sort_by.value if sort_by else None,
        characters=character_list(characters),
        count=len(characters),
    )


@router.put("/{game_id}/mode", response_model=ApiResponse[GameStateResponse])
async def set_mode(game_id: str, request: ModeRequest, registry: Registry) -> ApiResponse[Any]:
    """Switch game mode. Resets the match."""
    session = registry.get(game_id)
    session.set_game_mode(request.mode)
    return _state(game_id, session)


@router.post("/{game_id}/roster/{player}", response_model=ApiResponse[GameStateResponse])
async def assign_character(
    game_id: str,
    player: Player,
    request: AssignRequest,
    registry: Registry,
    response: Response,
) -> ApiResponse[Any]:
    """Add an available character to a side's roster."""
    session = registry.get(game_id)

    rejection = assignment_rejection(session, request.character_id, player)
    character = find_by_id(session.available_characters(), request.character_id)
    if rejection is not None or character is None:
        return _refuse(response, rejection or FailureKind.CARD_UNAVAILABLE, "assign")

    session.assign_to_roster(character, player)
    return _state(game_id, session)


@router.delete(
    "/{game_id}/roster/{player}/{character_id}",
    response_model=ApiResponse[GameStateResponse],
)
async def unassign_character(
    game_id: str,
    player: Player,
    character_id: int,
    registry: Registry,
    response: Response,
) -> ApiResponse[Any]:
    """Return a character from a side's roster to the pool."""
    session = registry.get(game_id)

    rejection = unassignment_rejection(session, character_id, player)
    if rejection is not None:
        return _refuse(response, rejection, "unassign")

    session.unassign_from_roster(character_id, player)
    return _state(game_id, session)


@router.post("/{game_id}/start", response_model=ApiResponse[GameStateResponse])
async def start_match(game_id: str, registry: Registry) -> ApiResponse[Any]:
    """
    Shuffle both decks and start the match.

    Returns 409 if either roster is empty.
    """
    session = registry.get(game_id)
    session.start_match()
    return _state(game_id, session)


@router.post("/{game_id}/draw", response_model=ApiResponse[GameStateResponse])
async def draw(game_id: str, registry: Registry, response: Response) -> ApiResponse[Any]:
    """Run one draw phase. Succeeds only when both hands end up populated."""
    session = registry.get(game_id)

    rejection = draw_rejection(session)
    if rejection is not None:
        return _refuse(response, rejection, "draw")

    if not session.draw_phase():
        return _refuse(response, FailureKind.HAND_NOT_READY, "draw")

    return _state(game_id, session)


@router.post("/{game_id}/resolve", response_model=ApiResponse[BattleResponse])
async def resolve(game_id: str, registry: Registry) -> ApiResponse[Any]:
    """
    Resolve the battle between the held cards.

    Returns 409 if either hand is empty or the match is over.
    """
    session = registry.get(game_id)
    result = session.resolve_battle()
    return create_success(
        BattleResponse(
            result=BattleResultResponse.from_result(result),
            state=GameStateResponse.from_session(game_id, session),
        )
    )


@router.post("/{game_id}/surrender", response_model=ApiResponse[GameStateResponse])
async def surrender(
    game_id: str,
    request: SurrenderRequest,
    registry: Registry,
    response: Response,
) -> ApiResponse[Any]:
    """Concede the match on behalf of a side; the other side wins."""
    session = registry.get(game_id)

    rejection = surrender_rejection(session)
    if rejection is not None:
        return _refuse(response, rejection, "surrender")

    session.surrender(request.player)
    return _state(game_id, session)


@router.post("/{game_id}/reset", response_model=ApiResponse[GameStateResponse])
async def reset_match(game_id: str, registry: Registry) -> ApiResponse[Any]:
    """Return every card to the pool and restore pre-start defaults."""
    session = registry.get(game_id)
    session.reset_match()
    return _state(game_id, session)


@router.get("/{game_id}/history", response_model=HistoryResponse)
async def get_history(game_id: str, registry: Registry) -> HistoryResponse:
    """Get the round ledger."""
    return history_response(registry.get(game_id))


@router.get("/{game_id}/stats", response_model=StatsResponse)
async def get_stats(game_id: str, registry: Registry) -> StatsResponse:
    """Get win/draw counts derived from the ledger."""
    return StatsResponse.from_stats(registry.get(game_id).stats())


@router.get("/{game_id}/export")
async def export_game(game_id: str, registry: Registry) -> dict[str, Any]:
    """Get a compact serialisable snapshot of the match."""
    return registry.get(game_id).export_state()
