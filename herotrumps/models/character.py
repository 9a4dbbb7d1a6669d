from dataclasses import dataclass
from enum import Enum


class PowerStat(str, Enum):
    """The six power statistics, in battle enumeration order."""

    INTELLIGENCE = "intelligence"
    STRENGTH = "strength"
    SPEED = "speed"
    DURABILITY = "durability"
    POWER = "power"
    COMBAT = "combat"


class Alignment(str, Enum):
    """Alignment classification from the character feed."""

    GOOD = "good"
    BAD = "bad"
    NEUTRAL = "neutral"

    @property
    def label(self) -> str:
        return ALIGNMENT_LABELS[self]


ALIGNMENT_LABELS: dict[Alignment, str] = {
    Alignment.GOOD: "Hero",
    Alignment.BAD: "Villain",
    Alignment.NEUTRAL: "Neutral",
}

MIN_STAT_VALUE = 0
MAX_STAT_VALUE = 100


@dataclass(frozen=True, slots=True)
class PowerStats:
    """
    A character's six power statistics.

    Each value is a score between MIN_STAT_VALUE and MAX_STAT_VALUE.
    """

    intelligence: int = 0
    strength: int = 0
    speed: int = 0
    durability: int = 0
    power: int = 0
    combat: int = 0

    def value(self, stat: PowerStat) -> int:
        """Value of a single statistic."""
        value: int = getattr(self, PowerStat(stat).value)
        return value

    def total(self) -> int:
        """Sum of all six statistics."""
        return sum(self.value(stat) for stat in PowerStat)

    def as_dict(self) -> dict[PowerStat, int]:
        """Statistics keyed by stat, in enumeration order."""
        return {stat: self.value(stat) for stat in PowerStat}


@dataclass(frozen=True, slots=True)
class Character:
    """
    A playable card.

    Only id and powerstats matter to battle resolution. Alignment is used
    for filtering; the remaining fields are display metadata.

    Attributes:
        id: Unique numeric id from the feed
        name: Display name
        powerstats: The six battle statistics
        alignment: Hero/villain/neutral classification
        slug: Feed slug (e.g., "1-a-bomb")
        publisher: Publisher name (e.g., "Marvel Comics")
        full_name: Civilian name, if any
        image_url: Medium-size portrait URL
    """

    id: int
    name: str
    powerstats: PowerStats
    alignment: Alignment = Alignment.NEUTRAL
    slug: str = ""
    publisher: str | None = None
    full_name: str | None = None
    image_url: str | None = None

    def total_power(self) -> int:
        """Sum of all six statistics."""
        return self.powerstats.total()
