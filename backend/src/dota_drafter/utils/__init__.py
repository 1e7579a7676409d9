"""Utility modules for dota_drafter."""

from dota_drafter.utils.hero_search import matches_query, search_heroes
from dota_drafter.utils.position_normalizer import (
    POSITION_ALIASES,
    POSITION_ORDER,
    normalize_position,
    normalize_position_strict,
    sort_by_position,
)

__all__ = [
    "POSITION_ALIASES",
    "POSITION_ORDER",
    "matches_query",
    "normalize_position",
    "normalize_position_strict",
    "search_heroes",
    "sort_by_position",
]
