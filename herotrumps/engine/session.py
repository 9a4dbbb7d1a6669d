"""
Game session — the battle engine's state container.

One GameSession holds a whole duel: the available pool, both rosters/decks,
hands, the discard pile and the round ledger. Commands run to completion
synchronously; the caller re-queries state after each one.

Card flow:
    pool -> roster (assign) -> deck (start) -> hand (draw) -> deck (resolve)

INVARIANT: Every character is in exactly one place (pool, a deck, a hand,
or the discard pile). The multiset of ids never changes between
initialize() calls.
"""

import logging
import random
from collections.abc import Iterable
from typing import Any

from herotrumps.engine.computer import choose_computer_card
from herotrumps.engine.resolver import compare_cards
from herotrumps.engine.roster import filter_characters, find_by_id
from herotrumps.engine.rules import (
    assignment_rejection,
    draw_rejection,
    surrender_rejection,
    unassignment_rejection,
)
from herotrumps.engine.shuffle import fisher_yates_shuffle
from herotrumps.models.character import Alignment, Character, PowerStat
from herotrumps.models.failure import FailureKind, MatchStateError, MatchValidationError
from herotrumps.models.game import (
    BattleResult,
    GameHistory,
    GameMode,
    GameRound,
    GameStats,
    Player,
    opponent_role,
    winner_label,
)

logger = logging.getLogger(__name__)


class GameSession:
    """
    Turn-based duel between player1 and a second side.

    The second side is player2 in pvp mode and the computer in pvc mode.
    Before the match starts both humans build rosters from the shared pool;
    in pvc the opponent roster is built the same way and becomes the
    computer's deck on start.
    """

    def __init__(
        self,
        characters: Iterable[Character] = (),
        mode: GameMode = GameMode.PVP,
        rng: random.Random | None = None,
    ) -> None:
        self.game_mode = mode
        self._rng = rng or random.Random()

        self.current_round = 1
        self.current_player = Player.PLAYER1
        self.winner: Player | None = None
        self.is_game_started = False
        self.is_game_over = False

        self._available: list[Character] = []
        self.player1_deck: list[Character] = []
        self.player2_deck: list[Character] = []
        self.computer_deck: list[Character] = []
        self.player1_hand: Character | None = None
        self.player2_hand: Character | None = None
        self.discard_pile: list[Character] = []

        self.history = GameHistory()

        self.initialize(characters)

    # ------------------------------------------------------------------
    # Deck/Roster Manager
    # ------------------------------------------------------------------

    def initialize(self, characters: Iterable[Character]) -> None:
        """Replace the card universe and return to pre-start defaults."""
        pool: list[Character] = []
        seen: set[int] = set()
        for character in characters:
            if character.id in seen:
                logger.warning(
                    "Dropping duplicate character id %d (%s)", character.id, character.name
                )
                continue
            seen.add(character.id)
            pool.append(character)

        self.player1_deck = []
        self.player2_deck = []
        self.computer_deck = []
        self.player1_hand = None
        self.player2_hand = None
        self.discard_pile = []
        self._available = pool
        self._restore_defaults()

    def set_game_mode(self, mode: GameMode) -> None:
        """Switch game mode. Any match in progress is reset."""
        self.game_mode = mode
        self.reset_match()

    def roster_for(self, player: Player) -> list[Character]:
        """Pre-start roster for a side. Every non-player1 role maps to player2's roster."""
        return self.player1_deck if player == Player.PLAYER1 else self.player2_deck

    def assign_to_roster(self, character: Character, player: Player) -> bool:
        """
        Move a character from the pool to the end of a side's roster.

        Returns False if the match has started, the character is already in
        that roster, or it is not in the available pool.
        """
        pooled = find_by_id(self._available, character.id)
        if pooled is None or assignment_rejection(self, character.id, player) is not None:
            return False

        self._available.remove(pooled)
        self.roster_for(player).append(pooled)

        if self.game_mode == GameMode.PVP:
            self.current_player = Player.PLAYER2 if player == Player.PLAYER1 else Player.PLAYER1

        return True

    def unassign_from_roster(self, character_id: int, player: Player) -> bool:
        """Return a character from a side's roster to the pool."""
        roster = self.roster_for(player)
        character = find_by_id(roster, character_id)
        if character is None or unassignment_rejection(self, character_id, player) is not None:
            return False

        roster.remove(character)
        self._available.append(character)
        return True

    def start_match(self) -> None:
        """
        Shuffle both rosters and begin play.

        Raises:
            MatchValidationError: If player1's or the opponent's roster is empty
        """
        if not self.player1_deck:
            raise MatchValidationError(Player.PLAYER1.value)
        if not self.player2_deck:
            raise MatchValidationError(opponent_role(self.game_mode).value)

        self.player1_deck = fisher_yates_shuffle(self.player1_deck, self._rng)
        self.player2_deck = fisher_yates_shuffle(self.player2_deck, self._rng)

        if self.game_mode == GameMode.PVC:
            # The computer takes over the opponent roster; cards move, never copy
            self.computer_deck = self.player2_deck
            self.player2_deck = []

        self.is_game_started = True
        self.is_game_over = False
        self.winner = None
        self.current_round = 1
        self.current_player = Player.PLAYER1
        self.history = GameHistory()

        logger.info(
            "Match started (%s): %d vs %d cards",
            self.game_mode.value,
            len(self.player1_deck),
            len(self.opponent_deck),
        )

    def reset_match(self) -> None:
        """
        Return every card to the pool and restore pre-start defaults.

        Safe to call at any time, including on a fresh session.
        """
        returned: list[Character] = [
            *self.player1_deck,
            *self.player2_deck,
            *self.computer_deck,
            *self.discard_pile,
        ]
        if self.player1_hand is not None:
            returned.append(self.player1_hand)
        if self.player2_hand is not None:
            returned.append(self.player2_hand)

        self._available.extend(returned)
        self.player1_deck = []
        self.player2_deck = []
        self.computer_deck = []
        self.player1_hand = None
        self.player2_hand = None
        self.discard_pile = []

        if returned or self.is_game_started:
            logger.info("Match reset: %d cards returned to pool", len(returned))

        self._restore_defaults()

    def _restore_defaults(self) -> None:
        self.current_round = 1
        self.current_player = Player.PLAYER1
        self.winner = None
        self.is_game_started = False
        self.is_game_over = False
        self.history = GameHistory()

    # ------------------------------------------------------------------
    # Turn Sequencer
    # ------------------------------------------------------------------

    def draw_phase(self) -> bool:
        """
        Draw one card for each side whose hand is empty.

        player1 and a pvp player2 take the front card of their deck; the
        computer picks with its decision policy. A side with an empty deck
        keeps an empty hand.

        Returns:
            True if both hands are populated and a battle can be resolved
        """
        if draw_rejection(self) is not None:
            return False

        if self.player1_hand is None and self.player1_deck:
            self.player1_hand = self.player1_deck.pop(0)

        if self.player2_hand is None:
            if self.game_mode == GameMode.PVP:
                if self.player2_deck:
                    self.player2_hand = self.player2_deck.pop(0)
            else:
                self.player2_hand = self._computer_draw()

        return self.player1_hand is not None and self.player2_hand is not None

    def _computer_draw(self) -> Character | None:
        index = choose_computer_card(
            self.computer_deck,
            self.history.last_round(),
            self.player1_hand,
        )
        if index is None:
            return None
        return self.computer_deck.pop(index)

    # ------------------------------------------------------------------
    # Battle Resolver
    # ------------------------------------------------------------------

    def resolve_battle(self) -> BattleResult:
        """
        Settle the battle between the two held cards.

        Raises:
            MatchStateError: If the match is over or either hand is empty
        """
        if self.is_game_over:
            raise MatchStateError(FailureKind.MATCH_OVER, "The match is already over!")
        if self.player1_hand is None or self.player2_hand is None:
            raise MatchStateError(
                FailureKind.HAND_NOT_READY, "Both players must have cards to battle!"
            )

        player1_card = self.player1_hand
        player2_card = self.player2_hand
        result = compare_cards(player1_card, player2_card, self.game_mode)

        self._transfer_cards(result, player1_card, player2_card)

        self.history.append(
            GameRound(
                round=self.current_round,
                player1_card=player1_card,
                player2_card=player2_card,
                result=result,
            )
        )
        logger.debug(
            "Round %d: %s vs %s -> %s (%s)",
            self.current_round,
            player1_card.name,
            player2_card.name,
            winner_label(result.winner),
            result.winning_stat.value,
        )

        self.player1_hand = None
        self.player2_hand = None

        self._check_game_over()

        if not self.is_game_over:
            self.current_round += 1
            if self.game_mode == GameMode.PVP:
                self.current_player = (
                    Player.PLAYER1 if self.current_round % 2 == 1 else Player.PLAYER2
                )
            else:
                self.current_player = Player.PLAYER1

        return result

    def _transfer_cards(
        self,
        result: BattleResult,
        player1_card: Character,
        player2_card: Character,
    ) -> None:
        # Played cards already left their decks on draw; settlement only appends
        opponent_deck = self.opponent_deck
        if result.winner == Player.PLAYER1:
            self.player1_deck.append(player2_card)
            self.player1_deck.append(player1_card)
        elif result.is_draw:
            self.player1_deck.append(player1_card)
            opponent_deck.append(player2_card)
        else:
            opponent_deck.append(player1_card)
            opponent_deck.append(player2_card)

    # ------------------------------------------------------------------
    # Game-Over & History Tracker
    # ------------------------------------------------------------------

    def _check_game_over(self) -> None:
        if not self.player1_deck:
            self._declare_winner(opponent_role(self.game_mode))
        elif not self.opponent_deck:
            self._declare_winner(Player.PLAYER1)

    def _declare_winner(self, winner: Player) -> None:
        self.winner = winner
        self.is_game_over = True
        self.history.winner = winner
        logger.info("Match over after %d rounds: %s wins", len(self.history), winner.value)

    def surrender(self, player: Player) -> bool:
        """
        Concede the match; the other side wins.

        Ignored (returns False) if the match has not started or is already
        over. No round is recorded and no cards move.
        """
        if surrender_rejection(self) is not None:
            return False

        winner = opponent_role(self.game_mode) if player == Player.PLAYER1 else Player.PLAYER1
        logger.info("%s surrendered", player.value)
        self._declare_winner(winner)
        return True

    def stats(self) -> GameStats:
        """Win/draw counts derived from the ledger."""
        return self.history.stats(self.game_mode)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def opponent_deck(self) -> list[Character]:
        """player1's opponent's deck under the current mode."""
        return self.player2_deck if self.game_mode == GameMode.PVP else self.computer_deck

    def available_characters(
        self,
        alignment: Alignment | None = None,
        sort_by: PowerStat | None = None,
    ) -> list[Character]:
        """Pool projection, optionally filtered and sorted. Never mutates the pool."""
        return filter_characters(self._available, alignment=alignment, sort_by=sort_by)

    def total_cards(self) -> int:
        """Number of characters left in the available pool."""
        return len(self._available)

    @property
    def player1_score(self) -> int:
        return len(self.player1_deck)

    @property
    def player2_score(self) -> int:
        return len(self.opponent_deck)

    def current_battle(self) -> dict[str, Any]:
        """Cards currently held and the round they will be played in."""
        return {
            "player1_card": self.player1_hand,
            "player2_card": self.player2_hand,
            "round": self.current_round,
        }

    def all_card_ids(self) -> list[int]:
        """Ids of every character the session owns, wherever it is."""
        cards = [
            *self._available,
            *self.player1_deck,
            *self.player2_deck,
            *self.computer_deck,
            *self.discard_pile,
        ]
        cards.extend(hand for hand in (self.player1_hand, self.player2_hand) if hand is not None)
        return [c.id for c in cards]

    def export_state(self) -> dict[str, Any]:
        """Serialisable snapshot of the match for display or debugging."""
        stats = self.stats()
        return {
            "game_mode": self.game_mode.value,
            "current_round": self.current_round,
            "current_player": self.current_player.value,
            "winner": self.winner.value if self.winner else None,
            "is_game_started": self.is_game_started,
            "is_game_over": self.is_game_over,
            "player1_score": self.player1_score,
            "player2_score": self.player2_score,
            "game_stats": {
                "total_rounds": stats.total_rounds,
                "player1_wins": stats.player1_wins,
                "player2_wins": stats.player2_wins,
                "draws": stats.draws,
            },
            "game_history": {
                "rounds": [
                    {
                        "round": r.round,
                        "player1_card": r.player1_card.id,
                        "player2_card": r.player2_card.id,
                        "winner": winner_label(r.result.winner),
                        "winning_stat": r.result.winning_stat.value,
                        "winning_value": r.result.winning_value,
                    }
                    for r in self.history.rounds
                ],
                "winner": self.history.winner.value if self.history.winner else None,
                "total_rounds": self.history.total_rounds,
            },
        }
