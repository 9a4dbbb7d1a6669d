from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Literal

from herotrumps.models.character import Character, PowerStat


class GameMode(str, Enum):
    """Who controls the second side."""

    PVP = "pvp"
    PVC = "pvc"


class Player(str, Enum):
    """Combatant roles. The second role is player2 in pvp, computer in pvc."""

    PLAYER1 = "player1"
    PLAYER2 = "player2"
    COMPUTER = "computer"


DRAW: Final = "draw"

BattleWinner = Player | Literal["draw"]


def opponent_role(mode: GameMode) -> Player:
    """The role name of player1's opponent under a game mode."""
    return Player.PLAYER2 if mode == GameMode.PVP else Player.COMPUTER


@dataclass(frozen=True)
class BattleResult:
    """
    Outcome of one battle.

    Attributes:
        winner: Winning role, or "draw" on equal totals
        winning_stat: Stat with the largest absolute difference (display only)
        winning_value: Winner's six-stat total (player1's total on a draw)
        player1_stats: player1's statistics at time of battle
        player2_stats: Opponent's statistics at time of battle
    """

    winner: BattleWinner
    winning_stat: PowerStat
    winning_value: int
    player1_stats: dict[PowerStat, int] = field(default_factory=dict)
    player2_stats: dict[PowerStat, int] = field(default_factory=dict)

    @property
    def is_draw(self) -> bool:
        return self.winner == DRAW


@dataclass(frozen=True)
class GameRound:
    """Immutable ledger entry for one resolved battle."""

    round: int
    player1_card: Character
    player2_card: Character
    result: BattleResult


@dataclass(frozen=True)
class GameStats:
    """Aggregate statistics derived from the round ledger."""

    total_rounds: int = 0
    player1_wins: int = 0
    player2_wins: int = 0
    draws: int = 0


class GameHistory:
    """
    Append-only ledger of resolved rounds.

    Entries are frozen and the ledger only exposes them as a tuple, so
    nothing can be rewritten after it is recorded.
    """

    def __init__(self) -> None:
        self._rounds: list[GameRound] = []
        self.winner: Player | None = None

    def append(self, game_round: GameRound) -> None:
        self._rounds.append(game_round)

    @property
    def rounds(self) -> tuple[GameRound, ...]:
        return tuple(self._rounds)

    @property
    def total_rounds(self) -> int:
        return len(self._rounds)

    def last_round(self) -> GameRound | None:
        return self._rounds[-1] if self._rounds else None

    def __len__(self) -> int:
        return len(self._rounds)

    def stats(self, mode: GameMode) -> GameStats:
        """Derive win/draw counts. The opponent's wins count under its mode role."""
        opponent = opponent_role(mode)
        winners = [r.result.winner for r in self._rounds]
        return GameStats(
            total_rounds=len(winners),
            player1_wins=sum(1 for w in winners if w == Player.PLAYER1),
            player2_wins=sum(1 for w in winners if w == opponent),
            draws=sum(1 for w in winners if w == DRAW),
        )


def winner_label(winner: BattleWinner) -> str:
    """Plain string for a battle winner ("player1", "computer", "draw", ...)."""
    return winner.value if isinstance(winner, Player) else winner
