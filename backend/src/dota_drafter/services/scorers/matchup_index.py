"""Pairwise synergy/counter index built from the matchup matrix."""
import math
from typing import Any, Optional

from dota_drafter.exceptions import DatasetError


def _parse_hero_key(key: Any) -> int:
    try:
        return int(key)
    except (TypeError, ValueError):
        raise DatasetError(f"Invalid hero id in matchup matrix: {key!r}") from None


def _parse_values(raw: Any) -> dict[int, float]:
    """Index one side of a matchup entry.

    Accepts either a list of {"heroId2": id, "synergy": value} pairs or a
    mapping of id -> value.
    """
    if raw is None:
        return {}
    if isinstance(raw, dict):
        pairs = raw.items()
    elif isinstance(raw, list):
        pairs = []
        for item in raw:
            if not isinstance(item, dict):
                raise DatasetError(f"Invalid matchup pair: {item!r}")
            pairs.append((item.get("heroId2"), item.get("synergy", 0)))
    else:
        raise DatasetError(f"Invalid matchup values: {raw!r}")

    values: dict[int, float] = {}
    for other, value in pairs:
        other_id = _parse_hero_key(other)
        try:
            number = float(value)
        except (TypeError, ValueError):
            number = math.nan
        if not math.isfinite(number):
            raise DatasetError(f"Invalid matchup value for hero {other_id}: {value!r}")
        values[other_id] = number
    return values


class MatchupIndex:
    """O(1) synergy and counter lookups keyed by hero id.

    Values are directional: synergy(a, b) is read from a's entry and need not
    equal synergy(b, a). Missing heroes and missing pairs resolve to 0.0.
    """

    def __init__(
        self,
        synergies: Optional[dict[int, dict[int, float]]] = None,
        counters: Optional[dict[int, dict[int, float]]] = None,
    ):
        self._with = synergies or {}
        self._vs = counters or {}

    @classmethod
    def from_raw(cls, data: Any) -> "MatchupIndex":
        """Index a synergyMatrix.json payload: {hero_id: {"with": ..., "vs": ...}}."""
        if not isinstance(data, dict):
            raise DatasetError("Matchup matrix must be an object keyed by hero id")

        synergies: dict[int, dict[int, float]] = {}
        counters: dict[int, dict[int, float]] = {}
        for key, entry in data.items():
            hero_id = _parse_hero_key(key)
            if not isinstance(entry, dict):
                raise DatasetError(f"Invalid matchup entry for hero {hero_id}")
            synergies[hero_id] = _parse_values(entry.get("with"))
            counters[hero_id] = _parse_values(entry.get("vs"))
        return cls(synergies, counters)

    def lookup_synergy(self, hero_id: int, ally_id: int) -> float:
        """Win-rate effect of hero_id playing alongside ally_id."""
        return self._with.get(hero_id, {}).get(ally_id, 0.0)

    def lookup_counter(self, hero_id: int, enemy_id: int) -> float:
        """Win-rate effect of hero_id facing enemy_id."""
        return self._vs.get(hero_id, {}).get(enemy_id, 0.0)

    def __contains__(self, hero_id: object) -> bool:
        return hero_id in self._with or hero_id in self._vs

    def __len__(self) -> int:
        return len(self._with.keys() | self._vs.keys())

    @property
    def is_empty(self) -> bool:
        return not self._with and not self._vs
