from herotrumps.api.characters import router as characters_router
from herotrumps.api.games import router as games_router
from herotrumps.api.health import router as health_router

__all__ = [
    "characters_router",
    "games_router",
    "health_router",
]
