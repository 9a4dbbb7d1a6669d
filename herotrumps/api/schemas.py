"""Response models shared by the character and game endpoints."""

from pydantic import BaseModel, Field

from herotrumps.engine.session import GameSession
from herotrumps.models.character import Character
from herotrumps.models.game import BattleResult, GameRound, GameStats, winner_label


class CharacterResponse(BaseModel):
    """A character card."""

    id: int
    name: str
    alignment: str
    alignment_label: str
    powerstats: dict[str, int]
    total_power: int
    publisher: str | None = None
    full_name: str | None = None
    image_url: str | None = None

    @classmethod
    def from_character(cls, character: Character) -> "CharacterResponse":
        return cls(
            id=character.id,
            name=character.name,
            alignment=character.alignment.value,
            alignment_label=character.alignment.label,
            powerstats={stat.value: v for stat, v in character.powerstats.as_dict().items()},
            total_power=character.total_power(),
            publisher=character.publisher,
            full_name=character.full_name,
            image_url=character.image_url,
        )


def _cards(characters: list[Character]) -> list[CharacterResponse]:
    return [CharacterResponse.from_character(c) for c in characters]


def _card(character: Character | None) -> CharacterResponse | None:
    return CharacterResponse.from_character(character) if character else None


class BattleResultResponse(BaseModel):
    """Outcome of one battle."""

    winner: str
    winning_stat: str
    winning_value: int
    player1_stats: dict[str, int]
    player2_stats: dict[str, int]

    @classmethod
    def from_result(cls, result: BattleResult) -> "BattleResultResponse":
        return cls(
            winner=winner_label(result.winner),
            winning_stat=result.winning_stat.value,
            winning_value=result.winning_value,
            player1_stats={s.value: v for s, v in result.player1_stats.items()},
            player2_stats={s.value: v for s, v in result.player2_stats.items()},
        )


class RoundResponse(BaseModel):
    """A recorded round."""

    round: int
    player1_card: CharacterResponse
    player2_card: CharacterResponse
    result: BattleResultResponse

    @classmethod
    def from_round(cls, game_round: GameRound) -> "RoundResponse":
        return cls(
            round=game_round.round,
            player1_card=CharacterResponse.from_character(game_round.player1_card),
            player2_card=CharacterResponse.from_character(game_round.player2_card),
            result=BattleResultResponse.from_result(game_round.result),
        )


class StatsResponse(BaseModel):
    """Aggregate statistics derived from the round ledger."""

    total_rounds: int = 0
    player1_wins: int = 0
    player2_wins: int = 0
    draws: int = 0

    @classmethod
    def from_stats(cls, stats: GameStats) -> "StatsResponse":
        return cls(
            total_rounds=stats.total_rounds,
            player1_wins=stats.player1_wins,
            player2_wins=stats.player2_wins,
            draws=stats.draws,
        )


class HistoryResponse(BaseModel):
    """The round ledger."""

    rounds: list[RoundResponse] = Field(default_factory=list)
    winner: str | None = None
    total_rounds: int = 0


class GameStateResponse(BaseModel):
    """Full snapshot of a game session."""

    game_id: str
    game_mode: str
    current_round: int
    current_player: str
    winner: str | None = None
    is_game_started: bool
    is_game_over: bool
    available_count: int
    player1_deck: list[CharacterResponse] = Field(default_factory=list)
    player2_deck: list[CharacterResponse] = Field(default_factory=list)
    computer_deck: list[CharacterResponse] = Field(default_factory=list)
    player1_hand: CharacterResponse | None = None
    player2_hand: CharacterResponse | None = None
    player1_score: int = 0
    player2_score: int = 0
    stats: StatsResponse

    @classmethod
    def from_session(cls, game_id: str, session: GameSession) -> "GameStateResponse":
        return cls(
            game_id=game_id,
            game_mode=session.game_mode.value,
            current_round=session.current_round,
            current_player=session.current_player.value,
            winner=session.winner.value if session.winner else None,
            is_game_started=session.is_game_started,
            is_game_over=session.is_game_over,
            available_count=session.total_cards(),
            player1_deck=_cards(session.player1_deck),
            player2_deck=_cards(session.player2_deck),
            computer_deck=_cards(session.computer_deck),
            player1_hand=_card(session.player1_hand),
            player2_hand=_card(session.player2_hand),
            player1_score=session.player1_score,
            player2_score=session.player2_score,
            stats=StatsResponse.from_stats(session.stats()),
        )


def history_response(session: GameSession) -> HistoryResponse:
    """Build the ledger response for a session."""
    history = session.history
    return HistoryResponse(
        rounds=[RoundResponse.from_round(r) for r in history.rounds],
        winner=history.winner.value if history.winner else None,
        total_rounds=history.total_rounds,
    )


def character_list(characters: list[Character]) -> list[CharacterResponse]:
    """Build character responses in order."""
    return _cards(characters)
