"""
Sample roster for offline play.

A handful of records in the feed's own shape, so a game can start without
network access. They pass through the same parser as live feed data.
"""

from typing import Any

from herotrumps.models.character import Character
from herotrumps.parsers.superhero import parse_characters

SAMPLE_RECORDS: list[dict[str, Any]] = [
    {
        "id": 70,
        "name": "Batman",
        "slug": "70-batman",
        "powerstats": {
            "intelligence": 100,
            "strength": 26,
            "speed": 27,
            "durability": 50,
            "power": 47,
            "combat": 100,
        },
        "biography": {
            "fullName": "Bruce Wayne",
            "publisher": "DC Comics",
            "alignment": "good",
        },
    },
    {
        "id": 644,
        "name": "Superman",
        "slug": "644-superman",
        "powerstats": {
            "intelligence": 94,
            "strength": 100,
            "speed": 100,
            "durability": 100,
            "power": 100,
            "combat": 85,
        },
        "biography": {
            "fullName": "Clark Kent",
            "publisher": "DC Comics",
            "alignment": "good",
        },
    },
    {
        "id": 370,
        "name": "Joker",
        "slug": "370-joker",
        "powerstats": {
            "intelligence": 100,
            "strength": 10,
            "speed": 12,
            "durability": 60,
            "power": 43,
            "combat": 70,
        },
        "biography": {
            "fullName": "Jack Napier",
            "publisher": "DC Comics",
            "alignment": "bad",
        },
    },
    {
        "id": 346,
        "name": "Iron Man",
        "slug": "346-iron-man",
        "powerstats": {
            "intelligence": 100,
            "strength": 85,
            "speed": 58,
            "durability": 85,
            "power": 100,
            "combat": 64,
        },
        "biography": {
            "fullName": "Tony Stark",
            "publisher": "Marvel Comics",
            "alignment": "good",
        },
    },
    {
        "id": 659,
        "name": "Thor",
        "slug": "659-thor",
        "powerstats": {
            "intelligence": 69,
            "strength": 100,
            "speed": 83,
            "durability": 100,
            "power": 100,
            "combat": 100,
        },
        "biography": {
            "fullName": "Thor Odinson",
            "publisher": "Marvel Comics",
            "alignment": "good",
        },
    },
    {
        "id": 423,
        "name": "Magneto",
        "slug": "423-magneto",
        "powerstats": {
            "intelligence": 88,
            "strength": 80,
            "speed": 27,
            "durability": 84,
            "power": 91,
            "combat": 28,
        },
        "biography": {
            "fullName": "Max Eisenhardt",
            "publisher": "Marvel Comics",
            "alignment": "bad",
        },
    },
    {
        "id": 213,
        "name": "Deadpool",
        "slug": "213-deadpool",
        "powerstats": {
            "intelligence": 69,
            "strength": 32,
            "speed": 50,
            "durability": 100,
            "power": 100,
            "combat": 100,
        },
        "biography": {
            "fullName": "Wade Wilson",
            "publisher": "Marvel Comics",
            "alignment": "neutral",
        },
    },
    {
        "id": 655,
        "name": "Thanos",
        "slug": "655-thanos",
        "powerstats": {
            "intelligence": 100,
            "strength": 100,
            "speed": 33,
            "durability": 100,
            "power": 100,
            "combat": 80,
        },
        "biography": {
            "fullName": "",
            "publisher": "Marvel Comics",
            "alignment": "bad",
        },
    },
]


def get_sample_roster() -> list[Character]:
    """
    Get the sample roster.

    Parses fresh on every call; Character objects are immutable so
    sharing them between sessions is safe.
    """
    return parse_characters(SAMPLE_RECORDS)
