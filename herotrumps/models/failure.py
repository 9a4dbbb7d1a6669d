"""
Failure Envelope — Unified Outcome Classification.

Every command the driving caller issues ends in one of four outcomes.
Engine operations that cannot proceed raise a KnownError or return a
refusal reason; the HTTP surface turns either into an ApiResponse.

Response types:
- Success: Command completed
- Refusal: The match state does not allow the command (expected, explainable)
- KnownFailure: The system knows why it failed
- UnknownFailure: The system does not know why it failed

AUTHORITY BOUNDARY:
All user-visible responses MUST pass through `finalize_response()`.
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_INPUT = "invalid_input"

    # Resource failures
    NOT_FOUND = "not_found"
    CARD_UNAVAILABLE = "card_unavailable"
    DUPLICATE_CARD = "duplicate_card"

    # Match state preconditions
    MATCH_NOT_STARTED = "match_not_started"
    MATCH_ALREADY_STARTED = "match_already_started"
    MATCH_OVER = "match_over"
    EMPTY_DECK = "empty_deck"
    HAND_NOT_READY = "hand_not_ready"

    # Service failures
    EXTERNAL_API_ERROR = "external_api_error"

    # Unknown
    UNKNOWN = "unknown"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    SUCCESS = "success"
    REFUSAL = "refusal"
    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


T = TypeVar("T")


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class ApiResponse(BaseModel, Generic[T]):
    """
    Universal response envelope for game commands.

    Every response is classified into one of four outcome types,
    so a refused command always says which precondition it hit.
    """

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    data: T | None = Field(
        default=None,
        description="Response data (present on success)",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details (present on non-success)",
    )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse[Any]:
        """Convert to a finalized known-failure ApiResponse."""
        response: ApiResponse[Any] = ApiResponse(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=self.kind,
                message=self.message,
                detail=self.detail,
                suggestion=self.suggestion,
            ),
        )
        return finalize_response(response)


class MatchValidationError(KnownError):
    """
    Raised when a match cannot start.

    Both rosters need at least one card; there is no partial start.
    """

    def __init__(self, empty_roster: str):
        self.empty_roster = empty_roster
        super().__init__(
            kind=FailureKind.EMPTY_DECK,
            message="Both players need at least one card to start!",
            detail=f"Roster is empty: {empty_roster}",
            suggestion="Assign at least one character to each side.",
            status_code=409,
        )


MATCH_STATE_SUGGESTIONS: dict[FailureKind, str] = {
    FailureKind.HAND_NOT_READY: "Run a draw phase before resolving the battle.",
    FailureKind.MATCH_OVER: "Reset the match to play again.",
}


class MatchStateError(KnownError):
    """Raised when a battle is resolved in a state that has no sensible outcome."""

    def __init__(self, kind: FailureKind, message: str):
        super().__init__(
            kind=kind,
            message=message,
            suggestion=MATCH_STATE_SUGGESTIONS.get(kind),
            status_code=409,
        )


# =============================================================================
# FAILURE AUTHORITY BOUNDARY
# =============================================================================

# Standard messages: fixed wording per outcome

STANDARD_MESSAGES: dict[OutcomeType, str] = {
    OutcomeType.REFUSAL: "The match state does not allow this command.",
    OutcomeType.KNOWN_FAILURE: "The operation failed due to a known issue.",
    OutcomeType.UNKNOWN_FAILURE: (
        "I failed and I don't know why. Try resetting the match or retrying."
    ),
}

STANDARD_SUGGESTIONS: dict[OutcomeType, str] = {
    OutcomeType.REFUSAL: "Check the match state and try a different command.",
    OutcomeType.KNOWN_FAILURE: "Check the error details and adjust your request.",
    OutcomeType.UNKNOWN_FAILURE: "If this persists, please report the issue.",
}

# Track finalized responses (weak reference would be ideal, but set is simpler)
_finalized_responses: set[int] = set()


def finalize_response(response: ApiResponse[Any]) -> ApiResponse[Any]:
    """
    Finalize a response through the authority boundary.

    Every response that passes through this function is guaranteed to
    have a valid outcome classification and failure details when it is
    not a success.

    Raises:
        ValueError: If response structure is invalid
    """
    if response.outcome == OutcomeType.SUCCESS:
        if response.failure is not None:
            raise ValueError("Success response must not have failure details")
    else:
        if response.failure is None:
            raise ValueError(f"{response.outcome.value} response must have failure details")

    _finalized_responses.add(id(response))

    return response


def create_unknown_failure(
    exception: Exception,
    include_type: bool = True,
) -> ApiResponse[Any]:
    """
    Create an unknown failure response from an exception.

    The message is fixed and cannot be customized.
    """
    detail = None
    if include_type:
        detail = f"{type(exception).__name__}"

    response: ApiResponse[Any] = ApiResponse(
        outcome=OutcomeType.UNKNOWN_FAILURE,
        failure=FailureDetail(
            kind=FailureKind.UNKNOWN,
            message=STANDARD_MESSAGES[OutcomeType.UNKNOWN_FAILURE],
            detail=detail,
            suggestion=STANDARD_SUGGESTIONS[OutcomeType.UNKNOWN_FAILURE],
        ),
    )

    return finalize_response(response)


def create_refusal(
    kind: FailureKind,
    command: str,
) -> ApiResponse[Any]:
    """
    Create a refusal response for a command the match state rejected.

    Args:
        kind: The precondition that was not met
        command: Name of the refused command (not prose)
    """
    response: ApiResponse[Any] = ApiResponse(
        outcome=OutcomeType.REFUSAL,
        failure=FailureDetail(
            kind=kind,
            message=STANDARD_MESSAGES[OutcomeType.REFUSAL],
            detail=f"Command refused: {command} ({kind.value})",
            suggestion=STANDARD_SUGGESTIONS[OutcomeType.REFUSAL],
        ),
    )

    return finalize_response(response)


def create_success(data: T) -> ApiResponse[T]:
    """Create a finalized success response."""
    response = ApiResponse[T](outcome=OutcomeType.SUCCESS, data=data)
    finalize_response(response)
    return response
