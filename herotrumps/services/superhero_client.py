"""
Superhero feed client.

Fetches the full character list from the superhero-api JSON feed. The feed
is a single static file, so one GET returns everything; publisher
filtering happens locally. No retries and no caching: a failed fetch is
reported to the caller, who decides whether to try again.
"""

import logging

import httpx

from herotrumps.config import settings
from herotrumps.models.character import Character
from herotrumps.models.failure import FailureKind, KnownError
from herotrumps.parsers.superhero import matches_publisher, parse_characters

logger = logging.getLogger(__name__)

USER_AGENT = "HeroTrumps/1.0"


class FeedError(KnownError):
    """Raised when the character feed cannot be fetched or decoded."""

    def __init__(self, detail: str):
        super().__init__(
            kind=FailureKind.EXTERNAL_API_ERROR,
            message="Failed to fetch characters",
            detail=detail,
            suggestion="Try again later, or start a game from the sample roster.",
            status_code=502,
        )


async def fetch_characters(
    publisher: str | None = None,
    url: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[Character]:
    """
    Fetch all characters, optionally filtered by publisher.

    Args:
        publisher: Case-insensitive publisher name (e.g., "Marvel Comics")
        url: Feed URL. Defaults to the configured superhero_api_url
        client: Optional httpx client for connection reuse

    Returns:
        Parsed characters in feed order

    Raises:
        FeedError: If the request fails or the payload is not a record list
    """
    url = url or settings.superhero_api_url

    try:
        if client:
            response = await client.get(url)
        else:
            async with httpx.AsyncClient(
                headers={"User-Agent": USER_AGENT},
                follow_redirects=True,
                timeout=settings.feed_timeout,
            ) as owned_client:
                response = await owned_client.get(url)
        response.raise_for_status()
        records = response.json()
    except httpx.HTTPStatusError as e:
        logger.error("Character feed returned HTTP %d", e.response.status_code)
        raise FeedError(f"HTTP {e.response.status_code}") from e
    except httpx.RequestError as e:
        logger.error("Character feed request failed: %s", e)
        raise FeedError(str(e)) from e
    except ValueError as e:
        logger.error("Character feed returned invalid JSON: %s", e)
        raise FeedError("Invalid JSON payload") from e

    if not isinstance(records, list):
        raise FeedError("Expected a list of character records")

    characters = parse_characters(r for r in records if isinstance(r, dict))

    if publisher:
        characters = [c for c in characters if matches_publisher(c, publisher)]

    logger.info("Fetched %d characters from feed", len(characters))
    return characters
