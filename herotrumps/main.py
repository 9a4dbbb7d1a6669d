import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from herotrumps.api import characters_router, games_router, health_router
from herotrumps.config import LOG_FORMAT, settings
from herotrumps.models.failure import KnownError, create_unknown_failure
from herotrumps.services.session_registry import SessionRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    app.state.registry = SessionRegistry()
    yield
    logger.info("Shutting down with %d live games", len(app.state.registry))


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("herotrumps"),
    lifespan=lifespan,
)


@app.exception_handler(KnownError)
async def known_error_handler(_request: Request, exc: KnownError) -> JSONResponse:
    """Return known failures as a finalized envelope instead of a raw error."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(mode="json"),
    )


@app.exception_handler(Exception)
async def unknown_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Anything unclassified still leaves as an envelope, never a raw 500 body."""
    logger.exception("Unhandled error")
    return JSONResponse(
        status_code=500,
        content=create_unknown_failure(exc).model_dump(mode="json"),
    )


app.include_router(characters_router)
app.include_router(games_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
