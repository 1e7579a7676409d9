"""Hero catalog: parsing, grouping by attribute, and lookup by id."""
from typing import Iterable, Iterator, Optional

from dota_drafter.exceptions import DatasetError
from dota_drafter.models.hero import HeroRecord, HeroRole, PrimaryAttribute
from dota_drafter.utils.hero_search import search_heroes

ATTRIBUTE_ALIASES = {
    "str": PrimaryAttribute.STRENGTH,
    "strength": PrimaryAttribute.STRENGTH,
    "agi": PrimaryAttribute.AGILITY,
    "agility": PrimaryAttribute.AGILITY,
    "int": PrimaryAttribute.INTELLIGENCE,
    "intelligence": PrimaryAttribute.INTELLIGENCE,
    "all": PrimaryAttribute.UNIVERSAL,
    "uni": PrimaryAttribute.UNIVERSAL,
    "universal": PrimaryAttribute.UNIVERSAL,
}

_ROLES_BY_NAME = {role.value.lower(): role for role in HeroRole}


def parse_attribute(value: str) -> PrimaryAttribute:
    attribute = ATTRIBUTE_ALIASES.get(str(value).strip().lower())
    if attribute is None:
        raise DatasetError(f"Unknown primary attribute: {value!r}")
    return attribute


def parse_role(value: str) -> HeroRole:
    """Parse a role tag case-insensitively, raising DatasetError if unknown."""
    role = _ROLES_BY_NAME.get(str(value).strip().lower())
    if role is None:
        raise DatasetError(f"Unknown hero role: {value!r}")
    return role


def parse_hero(raw: dict) -> HeroRecord:
    """Build a HeroRecord from a heroes.json entry."""
    if not isinstance(raw, dict):
        raise DatasetError(f"Invalid hero record: {raw!r}")
    hero_id = raw.get("HeroId", raw.get("hero_id"))
    name = raw.get("name")
    if not isinstance(hero_id, int) or isinstance(hero_id, bool) or hero_id <= 0:
        raise DatasetError(f"Invalid HeroId in hero record: {raw!r}")
    if not isinstance(name, str) or not name.strip():
        raise DatasetError(f"Hero {hero_id} has no name")

    attribute = raw.get("primaryAttribute", raw.get("primary_attribute"))
    if attribute is None:
        raise DatasetError(f"Hero {name} has no primary attribute")

    roles = raw.get("roles") or []
    aliases = raw.get("aliases") or []
    if not isinstance(roles, list):
        raise DatasetError(f"Hero {name} roles must be a list")
    if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
        raise DatasetError(f"Hero {name} aliases must be a list of strings")

    return HeroRecord(
        hero_id=hero_id,
        name=name,
        primary_attribute=parse_attribute(attribute),
        roles=frozenset(parse_role(r) for r in roles),
        icon_url=raw.get("icon_url"),
        aliases=tuple(aliases),
    )


def group_heroes(heroes: Iterable[HeroRecord]) -> dict[PrimaryAttribute, list[HeroRecord]]:
    """Partition heroes by primary attribute, each bucket sorted by name.

    Every attribute gets a bucket, even when empty. Name sort is
    case-insensitive.
    """
    grouped: dict[PrimaryAttribute, list[HeroRecord]] = {attr: [] for attr in PrimaryAttribute}
    for hero in heroes:
        grouped[hero.primary_attribute].append(hero)

    for bucket in grouped.values():
        bucket.sort(key=lambda h: (h.name.casefold(), h.name))
    return grouped


class HeroCatalog:
    """Immutable collection of heroes, iterated in grouped display order."""

    def __init__(self, heroes: Iterable[HeroRecord] = ()):
        by_id: dict[int, HeroRecord] = {}
        by_name: set[str] = set()
        for hero in heroes:
            if hero.hero_id in by_id:
                raise DatasetError(f"Duplicate HeroId: {hero.hero_id}")
            if hero.name in by_name:
                raise DatasetError(f"Duplicate hero name: {hero.name}")
            by_id[hero.hero_id] = hero
            by_name.add(hero.name)

        self._grouped = group_heroes(by_id.values())
        self._heroes = tuple(h for bucket in self._grouped.values() for h in bucket)
        self._by_id = by_id

    @classmethod
    def from_raw(cls, records: list[dict]) -> "HeroCatalog":
        """Parse a heroes.json list."""
        if not isinstance(records, list):
            raise DatasetError("Hero catalog must be a list of hero records")
        return cls(parse_hero(raw) for raw in records)

    def get(self, hero_id: int) -> Optional[HeroRecord]:
        return self._by_id.get(hero_id)

    @property
    def heroes(self) -> tuple[HeroRecord, ...]:
        return self._heroes

    def grouped(self) -> dict[PrimaryAttribute, list[HeroRecord]]:
        """Heroes bucketed by attribute (copies, safe to mutate)."""
        return {attr: list(bucket) for attr, bucket in self._grouped.items()}

    def search(self, query: str) -> list[HeroRecord]:
        return search_heroes(self._heroes, query)

    def __contains__(self, hero_id: object) -> bool:
        return hero_id in self._by_id

    def __iter__(self) -> Iterator[HeroRecord]:
        return iter(self._heroes)

    def __len__(self) -> int:
        return len(self._heroes)
