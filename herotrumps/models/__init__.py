from herotrumps.models.character import (
    ALIGNMENT_LABELS,
    MAX_STAT_VALUE,
    MIN_STAT_VALUE,
    Alignment,
    Character,
    PowerStat,
    PowerStats,
)
from herotrumps.models.failure import (
    MATCH_STATE_SUGGESTIONS,
    STANDARD_MESSAGES,
    STANDARD_SUGGESTIONS,
    ApiResponse,
    FailureDetail,
    FailureKind,
    KnownError,
    MatchStateError,
    MatchValidationError,
    OutcomeType,
    create_refusal,
    create_success,
    create_unknown_failure,
    finalize_response,
)
from herotrumps.models.game import (
    DRAW,
    BattleResult,
    BattleWinner,
    GameHistory,
    GameMode,
    GameRound,
    GameStats,
    Player,
    opponent_role,
    winner_label,
)

__all__ = [
    "ALIGNMENT_LABELS",
    "Alignment",
    "ApiResponse",
    "BattleResult",
    "BattleWinner",
    "Character",
    "DRAW",
    "FailureDetail",
    "FailureKind",
    "GameHistory",
    "GameMode",
    "GameRound",
    "GameStats",
    "KnownError",
    "MATCH_STATE_SUGGESTIONS",
    "MAX_STAT_VALUE",
    "MIN_STAT_VALUE",
    "MatchStateError",
    "MatchValidationError",
    "OutcomeType",
    "Player",
    "PowerStat",
    "PowerStats",
    "STANDARD_MESSAGES",
    "STANDARD_SUGGESTIONS",
    "create_refusal",
    "create_success",
    "create_unknown_failure",
    "finalize_response",
    "opponent_role",
    "winner_label",
]
