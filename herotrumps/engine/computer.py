"""
Computer opponent decision policy.

Deterministic given deck order, the last recorded round and the human's
held card. No randomness is involved.

Strategy:
1. Counter: if a previous round exists and the human has drawn, look at
   that round's deciding stat and play the FIRST card in deck order whose
   value on it strictly beats the human card. First match wins, not the
   best match.
2. Strongest: otherwise play the card with the highest six-stat total,
   earliest card on ties.
"""

import logging
from collections.abc import Sequence

from herotrumps.models.character import Character
from herotrumps.models.game import GameRound

logger = logging.getLogger(__name__)


def find_counter_card(
    deck: Sequence[Character],
    last_round: GameRound,
    human_card: Character,
) -> int | None:
    """Index of the first card beating human_card on last round's deciding stat."""
    stat = last_round.result.winning_stat
    target = human_card.powerstats.value(stat)

    for index, card in enumerate(deck):
        if card.powerstats.value(stat) > target:
            return index
    return None


def find_strongest_card(deck: Sequence[Character]) -> int | None:
    """Index of the card with the highest total; earliest wins ties."""
    if not deck:
        return None

    best_index = 0
    best_total = deck[0].total_power()
    for index, card in enumerate(deck[1:], start=1):
        total = card.total_power()
        if total > best_total:
            best_index = index
            best_total = total
    return best_index


def choose_computer_card(
    deck: Sequence[Character],
    last_round: GameRound | None,
    human_card: Character | None,
) -> int | None:
    """
    Pick the index of the card the computer plays next.

    Args:
        deck: Computer's deck in order
        last_round: Most recent ledger entry, or None before the first battle
        human_card: Card the human currently holds, if drawn

    Returns:
        Index into deck, or None if the deck is empty
    """
    if not deck:
        return None

    if last_round is not None and human_card is not None:
        counter = find_counter_card(deck, last_round, human_card)
        if counter is not None:
            logger.debug(
                "Computer counters on %s with %s",
                last_round.result.winning_stat.value,
                deck[counter].name,
            )
            return counter

    return find_strongest_card(deck)
