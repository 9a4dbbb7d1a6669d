"""
Battle resolution.

Pure comparison of two cards. The deciding stat (largest absolute
difference) is informational; the outcome is decided by six-stat totals.
"""

from herotrumps.models.character import Character, PowerStat
from herotrumps.models.game import (
    DRAW,
    BattleResult,
    BattleWinner,
    GameMode,
    Player,
    opponent_role,
)

# Reported when every stat difference is zero
DEFAULT_WINNING_STAT = PowerStat.COMBAT


def find_deciding_stat(player1_card: Character, player2_card: Character) -> PowerStat:
    """
    Stat with the largest absolute difference between the two cards.

    Ties keep the first stat in enumeration order. If all differences are
    zero the default stat is reported.
    """
    winning_stat = DEFAULT_WINNING_STAT
    max_diff = 0

    for stat in PowerStat:
        diff = abs(player1_card.powerstats.value(stat) - player2_card.powerstats.value(stat))
        if diff > max_diff:
            max_diff = diff
            winning_stat = stat

    return winning_stat


def compare_cards(
    player1_card: Character,
    player2_card: Character,
    mode: GameMode,
) -> BattleResult:
    """
    Compare two cards and build the battle result.

    Higher six-stat total wins; equal totals are a draw. The winning value
    is the winner's total, or player1's total on a draw.
    """
    player1_total = player1_card.total_power()
    player2_total = player2_card.total_power()

    winner: BattleWinner
    if player1_total > player2_total:
        winner = Player.PLAYER1
        winning_value = player1_total
    elif player2_total > player1_total:
        winner = opponent_role(mode)
        winning_value = player2_total
    else:
        winner = DRAW
        winning_value = player1_total

    return BattleResult(
        winner=winner,
        winning_stat=find_deciding_stat(player1_card, player2_card),
        winning_value=winning_value,
        player1_stats=player1_card.powerstats.as_dict(),
        player2_stats=player2_card.powerstats.as_dict(),
    )
