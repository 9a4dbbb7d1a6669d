"""
In-memory game session registry.

Owns every live GameSession for the HTTP surface. Sessions are not
persisted; restarting the process ends all games.
"""

import logging
import random
import uuid
from collections.abc import Iterable

from herotrumps.engine.session import GameSession
from herotrumps.models.character import Character
from herotrumps.models.failure import FailureKind, KnownError
from herotrumps.models.game import GameMode

logger = logging.getLogger(__name__)


class SessionNotFoundError(KnownError):
    """Raised when a session id does not exist."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message=f"Game '{session_id}' not found",
            suggestion="Create a new game.",
            status_code=404,
        )


class SessionRegistry:
    """Map of session id to GameSession."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._sessions: dict[str, GameSession] = {}
        self._rng = rng

    def create(self, characters: Iterable[Character], mode: GameMode) -> tuple[str, GameSession]:
        """Create and register a new session."""
        session_id = uuid.uuid4().hex
        session = GameSession(characters, mode=mode, rng=self._rng)
        self._sessions[session_id] = session
        logger.info(
            "Created %s game %s with %d characters",
            mode.value,
            session_id,
            session.total_cards(),
        )
        return session_id, session

    def get(self, session_id: str) -> GameSession:
        """
        Look up a session.

        Raises:
            SessionNotFoundError: If the id is unknown
        """
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None

    def delete(self, session_id: str) -> None:
        """Remove a session. Raises SessionNotFoundError if the id is unknown."""
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)
        logger.info("Deleted game %s", session_id)

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions
