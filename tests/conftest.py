import random

import pytest

from herotrumps.engine.session import GameSession
from herotrumps.models import failure as failure_module
from herotrumps.models.character import Alignment, Character, PowerStats
from herotrumps.models.game import GameMode


@pytest.fixture(autouse=True)
def clear_finalized_responses():
    """Clear the finalized responses set between tests.

    This prevents test isolation issues where Python reuses memory
    addresses for new objects, causing id() collisions with previously
    finalized responses.
    """
    failure_module._finalized_responses.clear()
    yield
    failure_module._finalized_responses.clear()


def _build_character(
    character_id: int,
    stats: tuple[int, int, int, int, int, int] = (50, 50, 50, 50, 50, 50),
    name: str | None = None,
    alignment: Alignment = Alignment.GOOD,
) -> Character:
    """Build a character with stats in enumeration order."""
    intelligence, strength, speed, durability, power, combat = stats
    return Character(
        id=character_id,
        name=name or f"Hero {character_id}",
        powerstats=PowerStats(
            intelligence=intelligence,
            strength=strength,
            speed=speed,
            durability=durability,
            power=power,
            combat=combat,
        ),
        alignment=alignment,
    )


@pytest.fixture
def make_character():
    """Factory for characters with stats given in enumeration order."""
    return _build_character


@pytest.fixture
def characters() -> list[Character]:
    """Six characters with distinct totals (300..350 step 10)."""
    return [_build_character(i, (50 + i * 10, 50, 50, 50, 50, 50)) for i in range(6)]


@pytest.fixture
def pvp_session(characters: list[Character]) -> GameSession:
    return GameSession(characters, mode=GameMode.PVP, rng=random.Random(7))


@pytest.fixture
def pvc_session(characters: list[Character]) -> GameSession:
    return GameSession(characters, mode=GameMode.PVC, rng=random.Random(7))
