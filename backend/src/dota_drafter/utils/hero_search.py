"""Hero name and alias search."""
from typing import Iterable

from dota_drafter.models.hero import HeroRecord


def matches_query(hero: HeroRecord, query: str) -> bool:
    """True if the query is empty or a substring of the name or any alias."""
    query = query.strip().lower()
    if not query:
        return True
    if query in hero.name.lower():
        return True
    return any(query in alias.lower() for alias in hero.aliases)


def search_heroes(heroes: Iterable[HeroRecord], query: str) -> list[HeroRecord]:
    """Filter heroes by query, keeping input order."""
    return [hero for hero in heroes if matches_query(hero, query)]
