"""
Character endpoints.

Read-only proxy of the superhero feed for browsing before a game.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from herotrumps.api.schemas import CharacterResponse, character_list
from herotrumps.services.superhero_client import fetch_characters

router = APIRouter(prefix="/characters", tags=["characters"])


class CharacterListResponse(BaseModel):
    """Response model for a list of characters."""

    publisher: str | None = None
    characters: list[CharacterResponse]
    count: int


@router.get("", response_model=CharacterListResponse)
async def list_characters(publisher: str | None = None) -> CharacterListResponse:
    """
    List characters from the feed.

    Returns 502 if the feed is unavailable.
    """
    characters = await fetch_characters(publisher=publisher)
    return CharacterListResponse(
        publisher=publisher,
        characters=character_list(characters),
        count=len(characters),
    )
