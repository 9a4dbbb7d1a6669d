from herotrumps.parsers.superhero import (
    matches_publisher,
    parse_character,
    parse_characters,
    parse_powerstats,
)

__all__ = [
    "matches_publisher",
    "parse_character",
    "parse_characters",
    "parse_powerstats",
]
