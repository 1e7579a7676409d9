"""Tests for hero catalog parsing, grouping and search."""
import pytest

from dota_drafter.exceptions import DatasetError
from dota_drafter.models.hero import HeroRecord, HeroRole, PrimaryAttribute
from dota_drafter.services.hero_catalog import (
    HeroCatalog,
    group_heroes,
    parse_hero,
    parse_role,
)


@pytest.fixture
def raw_heroes():
    return [
        {"HeroId": 14, "name": "Pudge", "primaryAttribute": "str",
         "roles": ["Disabler", "Initiator", "Durable", "Nuker"], "aliases": ["butcher"]},
        {"HeroId": 1, "name": "Anti-Mage", "primaryAttribute": "agi",
         "roles": ["Carry", "Escape", "Nuker"], "aliases": ["am", "magina"]},
        {"HeroId": 2, "name": "Axe", "primaryAttribute": "str",
         "roles": ["Initiator", "Durable", "Disabler", "Carry"]},
        {"HeroId": 5, "name": "Crystal Maiden", "primaryAttribute": "int",
         "roles": ["Support", "Disabler", "Nuker"], "aliases": ["cm", "rylai"],
         "icon_url": "/icons/cm.png"},
        {"HeroId": 129, "name": "Mars", "primaryAttribute": "str",
         "roles": ["Carry", "Initiator", "Disabler", "Durable"]},
        {"HeroId": 19, "name": "Tiny", "primaryAttribute": "str",
         "roles": ["Carry", "Nuker", "Pusher", "Initiator", "Durable", "Disabler"]},
        {"HeroId": 74, "name": "Invoker", "primaryAttribute": "all",
         "roles": ["Carry", "Nuker", "Disabler", "Escape", "Pusher"]},
        {"HeroId": 6, "name": "Drow Ranger", "primaryAttribute": "agi",
         "roles": ["Carry", "Disabler", "Pusher"]},
        {"HeroId": 123, "name": "Hoodwink", "primaryAttribute": "agi", "roles": []},
        {"HeroId": 126, "name": "Void Spirit", "primaryAttribute": "universal",
         "roles": ["Carry", "Escape", "Nuker", "Disabler"]},
        {"HeroId": 84, "name": "ogre Magi", "primaryAttribute": "strength",
         "roles": ["Support", "Nuker", "Disabler", "Durable", "Initiator"]},
    ]


@pytest.fixture
def catalog(raw_heroes):
    return HeroCatalog.from_raw(raw_heroes)


def test_parse_hero(raw_heroes):
    hero = parse_hero(raw_heroes[3])
    assert hero.hero_id == 5
    assert hero.name == "Crystal Maiden"
    assert hero.primary_attribute == PrimaryAttribute.INTELLIGENCE
    assert hero.roles == frozenset({HeroRole.SUPPORT, HeroRole.DISABLER, HeroRole.NUKER})
    assert hero.icon_url == "/icons/cm.png"
    assert hero.aliases == ("cm", "rylai")


def test_parse_role_is_case_insensitive():
    assert parse_role("initiator") == HeroRole.INITIATOR
    assert parse_role(" PUSHER ") == HeroRole.PUSHER


def test_unknown_role_fails_at_load():
    with pytest.raises(DatasetError, match="Unknown hero role"):
        parse_hero({"HeroId": 1, "name": "X", "primaryAttribute": "str", "roles": ["Tank"]})


def test_unknown_attribute_fails_at_load():
    with pytest.raises(DatasetError, match="primary attribute"):
        parse_hero({"HeroId": 1, "name": "X", "primaryAttribute": "luck"})


@pytest.mark.parametrize("hero_id", [None, 0, -3, "12", True])
def test_invalid_hero_id(hero_id):
    with pytest.raises(DatasetError):
        parse_hero({"HeroId": hero_id, "name": "X", "primaryAttribute": "str"})


def test_duplicate_hero_id_rejected():
    heroes = [
        HeroRecord(1, "Axe", PrimaryAttribute.STRENGTH),
        HeroRecord(1, "Other Axe", PrimaryAttribute.STRENGTH),
    ]
    with pytest.raises(DatasetError, match="Duplicate HeroId"):
        HeroCatalog(heroes)


def test_duplicate_name_rejected():
    heroes = [
        HeroRecord(1, "Axe", PrimaryAttribute.STRENGTH),
        HeroRecord(2, "Axe", PrimaryAttribute.AGILITY),
    ]
    with pytest.raises(DatasetError, match="Duplicate hero name"):
        HeroCatalog(heroes)


def test_catalog_must_be_list():
    with pytest.raises(DatasetError):
        HeroCatalog.from_raw({"1": {}})


def test_group_heroes_partitions_and_sorts(catalog):
    grouped = catalog.grouped()
    assert list(grouped) == [
        PrimaryAttribute.STRENGTH,
        PrimaryAttribute.AGILITY,
        PrimaryAttribute.INTELLIGENCE,
        PrimaryAttribute.UNIVERSAL,
    ]
    # Case-insensitive: "ogre Magi" sorts between Mars and Pudge
    assert [h.name for h in grouped[PrimaryAttribute.STRENGTH]] == [
        "Axe", "Mars", "ogre Magi", "Pudge", "Tiny",
    ]
    assert [h.name for h in grouped[PrimaryAttribute.AGILITY]] == [
        "Anti-Mage", "Drow Ranger", "Hoodwink",
    ]
    assert [h.name for h in grouped[PrimaryAttribute.INTELLIGENCE]] == ["Crystal Maiden"]
    assert [h.name for h in grouped[PrimaryAttribute.UNIVERSAL]] == ["Invoker", "Void Spirit"]


def test_group_heroes_empty_buckets():
    grouped = group_heroes([HeroRecord(1, "Axe", PrimaryAttribute.STRENGTH)])
    assert grouped[PrimaryAttribute.AGILITY] == []
    assert grouped[PrimaryAttribute.UNIVERSAL] == []


def test_catalog_iterates_in_grouped_order(catalog):
    assert [h.hero_id for h in catalog] == [2, 129, 84, 14, 19, 1, 6, 123, 5, 74, 126]


def test_catalog_lookup(catalog):
    assert catalog.get(5).name == "Crystal Maiden"
    assert catalog.get(9999) is None
    assert 5 in catalog
    assert 9999 not in catalog
    assert len(catalog) == 11


def test_grouped_returns_copies(catalog):
    catalog.grouped()[PrimaryAttribute.STRENGTH].clear()
    assert len(catalog.grouped()[PrimaryAttribute.STRENGTH]) == 5


def test_search_by_name_and_alias(catalog):
    assert [h.name for h in catalog.search("maiden")] == ["Crystal Maiden"]
    assert [h.name for h in catalog.search("CM")] == ["Crystal Maiden"]
    assert [h.name for h in catalog.search("butch")] == ["Pudge"]


def test_search_keeps_catalog_order(catalog):
    # "ma" hits Mars, ogre Magi, Anti-Mage, Crystal Maiden (by name) and magina alias
    assert [h.name for h in catalog.search("ma")] == [
        "Mars", "ogre Magi", "Anti-Mage", "Crystal Maiden",
    ]


def test_empty_search_matches_all(catalog):
    assert len(catalog.search("   ")) == len(catalog)


@pytest.mark.parametrize("record", [
    "oops",
    None,
    {"HeroId": 1, "name": 42, "primaryAttribute": "str"},
    {"HeroId": 1, "name": "  ", "primaryAttribute": "str"},
    {"HeroId": 1, "name": "Axe", "primaryAttribute": "str", "roles": "Initiator"},
    {"HeroId": 1, "name": "Axe", "primaryAttribute": "str", "aliases": "mogul"},
    {"HeroId": 1, "name": "Axe", "primaryAttribute": "str", "aliases": [7]},
])
def test_malformed_records_raise_dataset_error(raw_heroes, record):
    with pytest.raises(DatasetError):
        HeroCatalog.from_raw([raw_heroes[0], record])
