"""
Superhero feed record parser.

Turns raw records from the akabab superhero-api feed into Character
objects. Feed data is loose: stats may be null or strings, and alignment
is sometimes "-".

Feed: https://github.com/akabab/superhero-api
"""

import logging
import math
from collections.abc import Iterable
from typing import Any

from herotrumps.models.character import (
    MAX_STAT_VALUE,
    MIN_STAT_VALUE,
    Alignment,
    Character,
    PowerStat,
    PowerStats,
)

logger = logging.getLogger(__name__)

VALID_ALIGNMENTS = frozenset(a.value for a in Alignment)


def _normalize_alignment(alignment: Any) -> Alignment:
    """Normalize alignment to one of: good, bad, neutral."""
    value = str(alignment).strip().lower() if alignment is not None else ""
    return Alignment(value) if value in VALID_ALIGNMENTS else Alignment.NEUTRAL


def _parse_stat(raw: Any) -> int:
    """Coerce a feed stat to an int in range. Anything but a finite number becomes 0."""
    try:
        number = float(raw)
    except (TypeError, ValueError):
        return MIN_STAT_VALUE
    if not math.isfinite(number):
        return MIN_STAT_VALUE
    return max(MIN_STAT_VALUE, min(MAX_STAT_VALUE, int(number)))


def parse_powerstats(raw: dict[str, Any] | None) -> PowerStats:
    """Build PowerStats from a feed "powerstats" object."""
    raw = raw or {}
    return PowerStats(**{stat.value: _parse_stat(raw.get(stat.value)) for stat in PowerStat})


def parse_character(record: dict[str, Any]) -> Character | None:
    """
    Parse one feed record.

    Args:
        record: Raw feed record

    Returns:
        Character, or None if the record has no usable id or name
    """
    raw_id = record.get("id")
    name = record.get("name")
    if isinstance(raw_id, bool) or not isinstance(raw_id, int) or not name:
        return None

    biography = record.get("biography") or {}
    images = record.get("images") or {}

    return Character(
        id=raw_id,
        name=str(name),
        powerstats=parse_powerstats(record.get("powerstats")),
        alignment=_normalize_alignment(biography.get("alignment")),
        slug=str(record.get("slug") or ""),
        publisher=biography.get("publisher") or None,
        full_name=biography.get("fullName") or None,
        image_url=images.get("md") or None,
    )


def parse_characters(records: Iterable[dict[str, Any]]) -> list[Character]:
    """Parse feed records, skipping (and logging) unusable ones."""
    characters: list[Character] = []
    skipped = 0

    for record in records:
        character = parse_character(record)
        if character is None:
            skipped += 1
            continue
        characters.append(character)

    if skipped:
        logger.warning("Skipped %d feed records without an id or name", skipped)

    return characters


def matches_publisher(character: Character, publisher: str) -> bool:
    """Case-insensitive publisher match."""
    return (character.publisher or "").lower() == publisher.lower()

