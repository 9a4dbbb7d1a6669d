from herotrumps.engine.computer import (
    choose_computer_card,
    find_counter_card,
    find_strongest_card,
)
from herotrumps.models.character import PowerStat
from herotrumps.models.game import BattleResult, GameRound, Player


def _round_decided_on(stat: PowerStat, card) -> GameRound:
    return GameRound(
        round=1,
        player1_card=card,
        player2_card=card,
        result=BattleResult(winner=Player.PLAYER1, winning_stat=stat, winning_value=0),
    )


class TestStrongestCard:
    def test_highest_total(self, make_character) -> None:
        deck = [
            make_character(1, (10, 10, 10, 10, 10, 10)),
            make_character(2, (90, 90, 90, 90, 90, 90)),
            make_character(3, (50, 50, 50, 50, 50, 50)),
        ]
        assert find_strongest_card(deck) == 1

    def test_tie_goes_to_earliest(self, make_character) -> None:
        deck = [
            make_character(1, (10, 10, 10, 10, 10, 10)),
            make_character(2, (60, 0, 0, 0, 0, 0)),
            make_character(3, (0, 0, 0, 0, 0, 60)),
        ]
        assert find_strongest_card(deck) == 0

    def test_empty_deck(self) -> None:
        assert find_strongest_card([]) is None


class TestCounterCard:
    def test_first_match_not_best(self, make_character) -> None:
        """The first card beating the human on the stat is played, not the best one."""
        human = make_character(100, (0, 0, 40, 0, 0, 0))
        deck = [
            make_character(1, (0, 0, 30, 0, 0, 0)),
            make_character(2, (0, 0, 41, 0, 0, 0)),
            make_character(3, (0, 0, 99, 0, 0, 0)),
        ]
        last = _round_decided_on(PowerStat.SPEED, human)

        assert find_counter_card(deck, last, human) == 1

    def test_requires_strictly_greater(self, make_character) -> None:
        human = make_character(100, (0, 0, 40, 0, 0, 0))
        deck = [make_character(1, (0, 0, 40, 0, 0, 0))]
        last = _round_decided_on(PowerStat.SPEED, human)

        assert find_counter_card(deck, last, human) is None


class TestChooseComputerCard:
    def test_no_history_plays_strongest(self, make_character) -> None:
        human = make_character(100, (100, 100, 100, 100, 100, 100))
        deck = [
            make_character(1, (10, 10, 10, 10, 10, 10)),
            make_character(2, (20, 20, 20, 20, 20, 20)),
        ]
        assert choose_computer_card(deck, None, human) == 1

    def test_no_human_hand_plays_strongest(self, make_character) -> None:
        deck = [
            make_character(1, (90, 10, 10, 10, 10, 10)),
            make_character(2, (20, 20, 20, 20, 20, 20)),
        ]
        last = _round_decided_on(PowerStat.INTELLIGENCE, deck[0])

        assert choose_computer_card(deck, last, None) == 1

    def test_counters_last_deciding_stat(self, make_character) -> None:
        human = make_character(100, (0, 0, 0, 0, 0, 70))
        deck = [
            make_character(1, (99, 99, 99, 99, 99, 10)),
            make_character(2, (0, 0, 0, 0, 0, 71)),
        ]
        last = _round_decided_on(PowerStat.COMBAT, human)

        assert choose_computer_card(deck, last, human) == 1

    def test_falls_back_when_no_counter(self, make_character) -> None:
        human = make_character(100, (0, 0, 0, 0, 0, 100))
        deck = [
            make_character(1, (10, 10, 10, 10, 10, 10)),
            make_character(2, (30, 30, 30, 30, 30, 30)),
        ]
        last = _round_decided_on(PowerStat.COMBAT, human)

        assert choose_computer_card(deck, last, human) == 1

    def test_empty_deck_yields_nothing(self, make_character) -> None:
        assert choose_computer_card([], None, make_character(1)) is None

    def test_deterministic(self, make_character) -> None:
        human = make_character(100, (50, 50, 50, 50, 50, 50))
        deck = [make_character(i, (i * 10, 50, 50, 50, 50, 50)) for i in range(10)]
        last = _round_decided_on(PowerStat.INTELLIGENCE, human)

        picks = {choose_computer_card(deck, last, human) for _ in range(20)}

        assert picks == {6}
