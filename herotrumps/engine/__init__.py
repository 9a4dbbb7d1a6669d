from herotrumps.engine.computer import choose_computer_card, find_counter_card, find_strongest_card
from herotrumps.engine.resolver import compare_cards, find_deciding_stat
from herotrumps.engine.roster import filter_characters, find_by_id
from herotrumps.engine.rules import (
    assignment_rejection,
    draw_rejection,
    surrender_rejection,
    unassignment_rejection,
)
from herotrumps.engine.session import GameSession
from herotrumps.engine.shuffle import fisher_yates_shuffle

__all__ = [
    "GameSession",
    "assignment_rejection",
    "choose_computer_card",
    "compare_cards",
    "draw_rejection",
    "filter_characters",
    "find_by_id",
    "find_counter_card",
    "find_deciding_stat",
    "find_strongest_card",
    "fisher_yates_shuffle",
    "surrender_rejection",
    "unassignment_rejection",
]
