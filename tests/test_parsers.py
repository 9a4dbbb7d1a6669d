import json

from herotrumps.models.character import Alignment, PowerStat
from herotrumps.parsers.superhero import (
    parse_character,
    parse_characters,
    parse_powerstats,
)
from herotrumps.services.sample_roster import SAMPLE_RECORDS, get_sample_roster

A_BOMB = {
    "id": 1,
    "name": "A-Bomb",
    "slug": "1-a-bomb",
    "powerstats": {
        "intelligence": 38,
        "strength": 100,
        "speed": 17,
        "durability": 80,
        "power": 24,
        "combat": 64,
    },
    "biography": {
        "fullName": "Richard Milhouse Jones",
        "publisher": "Marvel Comics",
        "alignment": "good",
    },
    "images": {"md": "https://example.com/md/1-a-bomb.jpg"},
}


class TestParseCharacter:
    def test_parses_feed_record(self) -> None:
        character = parse_character(A_BOMB)

        assert character is not None
        assert character.id == 1
        assert character.name == "A-Bomb"
        assert character.slug == "1-a-bomb"
        assert character.powerstats.value(PowerStat.STRENGTH) == 100
        assert character.total_power() == 323
        assert character.alignment == Alignment.GOOD
        assert character.publisher == "Marvel Comics"
        assert character.full_name == "Richard Milhouse Jones"
        assert character.image_url == "https://example.com/md/1-a-bomb.jpg"

    def test_unknown_alignment_is_neutral(self) -> None:
        record = {**A_BOMB, "biography": {"alignment": "-"}}
        character = parse_character(record)

        assert character is not None
        assert character.alignment == Alignment.NEUTRAL

    def test_missing_id_or_name_skipped(self) -> None:
        assert parse_character({"name": "No Id"}) is None
        assert parse_character({"id": 5}) is None
        assert parse_character({"id": "5", "name": "String Id"}) is None

    def test_missing_sections_default(self) -> None:
        character = parse_character({"id": 9, "name": "Bare"})

        assert character is not None
        assert character.total_power() == 0
        assert character.publisher is None


class TestParsePowerstats:
    def test_null_and_strings(self) -> None:
        stats = parse_powerstats({"intelligence": None, "strength": "55", "speed": "fast"})

        assert stats.intelligence == 0
        assert stats.strength == 55
        assert stats.speed == 0

    def test_clamped_to_range(self) -> None:
        stats = parse_powerstats({"power": 250, "combat": -4})

        assert stats.power == 100
        assert stats.combat == 0

    def test_none(self) -> None:
        assert parse_powerstats(None).total() == 0

    def test_non_finite_values_become_zero(self) -> None:
        stats = parse_powerstats({"strength": "inf", "speed": "nan", "power": float("inf")})

        assert stats.strength == 0
        assert stats.speed == 0
        assert stats.power == 0

    def test_overflowing_json_number(self) -> None:
        record = json.loads('{"id": 1, "name": "X", "powerstats": {"combat": 1e999}}')

        character = parse_character(record)

        assert character is not None
        assert character.powerstats.combat == 0


class TestParseCharacters:
    def test_skips_bad_records(self) -> None:
        characters = parse_characters([A_BOMB, {"name": "Broken"}])
        assert [c.id for c in characters] == [1]


class TestSampleRoster:
    def test_all_records_parse(self) -> None:
        roster = get_sample_roster()
        assert len(roster) == len(SAMPLE_RECORDS)

    def test_unique_ids(self) -> None:
        ids = [c.id for c in get_sample_roster()]
        assert len(ids) == len(set(ids))

    def test_has_both_alignments(self) -> None:
        alignments = {c.alignment for c in get_sample_roster()}
        assert Alignment.GOOD in alignments
        assert Alignment.BAD in alignments
