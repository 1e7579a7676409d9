"""Enemy lane position prediction."""
from typing import Any

from dota_drafter.exceptions import DatasetError
from dota_drafter.models.hero import HeroPositions
from dota_drafter.utils.position_normalizer import normalize_position_strict

UNASSIGNED = "?"


def _parse_position_list(hero_id: int, values: Any) -> tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        values = [values]
    if not isinstance(values, list):
        raise DatasetError(f"Invalid position list for hero {hero_id}: {values!r}")
    positions = []
    for value in values:
        try:
            positions.append(normalize_position_strict(value))
        except ValueError:
            raise DatasetError(f"Unknown position {value!r} for hero {hero_id}") from None
    return tuple(positions)


def parse_hero_positions(data: Any) -> dict[int, HeroPositions]:
    """Parse a hero-roles.json payload: {hero_id: {primary, secondary, fallback}}."""
    if not isinstance(data, dict):
        raise DatasetError("Hero position data must be an object keyed by hero id")

    positions: dict[int, HeroPositions] = {}
    for key, entry in data.items():
        try:
            hero_id = int(key)
        except (TypeError, ValueError):
            raise DatasetError(f"Invalid hero id in position data: {key!r}") from None
        if not isinstance(entry, dict):
            raise DatasetError(f"Invalid position entry for hero {hero_id}")

        primary = _parse_position_list(hero_id, entry.get("primary"))
        if not primary:
            raise DatasetError(f"Hero {hero_id} has no primary position")
        fallback = _parse_position_list(hero_id, entry.get("fallback"))
        positions[hero_id] = HeroPositions(
            primary=primary,
            secondary=_parse_position_list(hero_id, entry.get("secondary")),
            fallback=fallback[0] if fallback else None,
        )
    return positions


def predict_enemy_positions(
    enemy_ids: list[int], hero_positions: dict[int, HeroPositions]
) -> dict[int, str]:
    """Assign each enemy hero to a distinct lane position.

    Greedy, most-constrained first: heroes with fewer primary positions are
    placed before flexible ones (ties by hero id). Each hero takes the first
    free slot from its primary, then secondary, then fallback positions, or
    UNASSIGNED if all are taken. No backtracking.
    """
    if not enemy_ids:
        return {}

    ordered = sorted(
        enemy_ids,
        key=lambda hero_id: (len(hero_positions.get(hero_id, HeroPositions()).primary), hero_id),
    )

    taken: set[str] = set()
    assignments: dict[int, str] = {}
    for hero_id in ordered:
        options = hero_positions.get(hero_id, HeroPositions()).options
        position = next((p for p in options if p not in taken), None)
        if position is None:
            assignments[hero_id] = UNASSIGNED
        else:
            assignments[hero_id] = position
            taken.add(position)
    return assignments
