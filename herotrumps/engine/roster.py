"""Pure projections over the available character pool."""

from collections.abc import Iterable

from herotrumps.models.character import Alignment, Character, PowerStat


def filter_characters(
    characters: Iterable[Character],
    alignment: Alignment | None = None,
    sort_by: PowerStat | None = None,
) -> list[Character]:
    """
    Filter by alignment and order by a stat, highest first.

    Returns a new list; the input is never reordered. Sorting is stable, so
    characters with equal values keep their pool order.
    """
    filtered = list(characters)

    if alignment is not None:
        filtered = [c for c in filtered if c.alignment == alignment]

    if sort_by is not None:
        filtered.sort(key=lambda c: c.powerstats.value(sort_by), reverse=True)

    return filtered


def find_by_id(characters: Iterable[Character], character_id: int) -> Character | None:
    """First character with the given id, or None."""
    return next((c for c in characters if c.id == character_id), None)
