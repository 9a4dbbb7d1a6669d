import dataclasses

import pytest

from herotrumps.models.character import Alignment, Character, PowerStat, PowerStats
from herotrumps.models.game import (
    DRAW,
    BattleResult,
    GameHistory,
    GameMode,
    GameRound,
    Player,
    opponent_role,
    winner_label,
)


class TestPowerStats:
    def test_total(self) -> None:
        stats = PowerStats(
            intelligence=10, strength=20, speed=30, durability=40, power=50, combat=60
        )
        assert stats.total() == 210

    def test_value_by_stat(self) -> None:
        stats = PowerStats(speed=77)
        assert stats.value(PowerStat.SPEED) == 77
        assert stats.value(PowerStat.COMBAT) == 0

    def test_as_dict_keeps_enumeration_order(self) -> None:
        stats = PowerStats(intelligence=1, strength=2, speed=3, durability=4, power=5, combat=6)
        assert list(stats.as_dict()) == list(PowerStat)
        assert list(stats.as_dict().values()) == [1, 2, 3, 4, 5, 6]

    def test_immutable(self) -> None:
        stats = PowerStats()
        with pytest.raises(dataclasses.FrozenInstanceError):
            stats.speed = 10  # type: ignore[misc]


class TestCharacter:
    def test_defaults(self) -> None:
        character = Character(id=1, name="A-Bomb", powerstats=PowerStats())
        assert character.alignment == Alignment.NEUTRAL
        assert character.publisher is None
        assert character.total_power() == 0

    def test_immutable(self) -> None:
        character = Character(id=1, name="A-Bomb", powerstats=PowerStats())
        with pytest.raises(dataclasses.FrozenInstanceError):
            character.name = "B-Bomb"  # type: ignore[misc]

    def test_alignment_labels(self) -> None:
        assert Alignment.GOOD.label == "Hero"
        assert Alignment.BAD.label == "Villain"
        assert Alignment.NEUTRAL.label == "Neutral"


class TestRoles:
    def test_opponent_role_per_mode(self) -> None:
        assert opponent_role(GameMode.PVP) == Player.PLAYER2
        assert opponent_role(GameMode.PVC) == Player.COMPUTER

    def test_winner_label(self) -> None:
        assert winner_label(Player.COMPUTER) == "computer"
        assert winner_label(DRAW) == "draw"


class TestGameHistory:
    def _round(self, number: int, winner, make_character) -> GameRound:
        return GameRound(
            round=number,
            player1_card=make_character(1),
            player2_card=make_character(2),
            result=BattleResult(
                winner=winner, winning_stat=PowerStat.COMBAT, winning_value=300
            ),
        )

    def test_empty_history(self) -> None:
        history = GameHistory()
        assert history.rounds == ()
        assert history.last_round() is None
        assert history.winner is None
        assert history.stats(GameMode.PVP).total_rounds == 0

    def test_rounds_are_read_only(self, make_character) -> None:
        history = GameHistory()
        history.append(self._round(1, Player.PLAYER1, make_character))

        assert isinstance(history.rounds, tuple)
        with pytest.raises(dataclasses.FrozenInstanceError):
            history.rounds[0].round = 5  # type: ignore[misc]

    def test_stats_derived_from_ledger(self, make_character) -> None:
        history = GameHistory()
        history.append(self._round(1, Player.PLAYER1, make_character))
        history.append(self._round(2, Player.COMPUTER, make_character))
        history.append(self._round(3, DRAW, make_character))
        history.append(self._round(4, Player.PLAYER1, make_character))

        stats = history.stats(GameMode.PVC)

        assert stats.total_rounds == 4
        assert stats.player1_wins == 2
        assert stats.player2_wins == 1
        assert stats.draws == 1

    def test_stats_count_opponent_by_mode_role(self, make_character) -> None:
        history = GameHistory()
        history.append(self._round(1, Player.PLAYER2, make_character))

        assert history.stats(GameMode.PVP).player2_wins == 1
        assert history.stats(GameMode.PVC).player2_wins == 0
