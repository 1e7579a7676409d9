"""Centralized lane position normalization.

Position data comes from hand-maintained files that mix community names
("carry", "pos 4", "mid"). Everything is normalized to the five canonical
slots: safelane, midlane, offlane, support, hard support.
"""

from typing import Optional

# Canonical positions, in position-number order (1-5)
POSITION_ORDER = ["safelane", "midlane", "offlane", "support", "hard support"]

# Mapping from any known position format to canonical lowercase
POSITION_ALIASES: dict[str, str] = {
    # Position 1
    "safelane": "safelane",
    "safe lane": "safelane",
    "safe": "safelane",
    "carry": "safelane",
    "hard carry": "safelane",
    "pos1": "safelane",
    "pos 1": "safelane",
    "1": "safelane",

    # Position 2
    "midlane": "midlane",
    "mid lane": "midlane",
    "mid": "midlane",
    "middle": "midlane",
    "pos2": "midlane",
    "pos 2": "midlane",
    "2": "midlane",

    # Position 3
    "offlane": "offlane",
    "off lane": "offlane",
    "off": "offlane",
    "offlaner": "offlane",
    "pos3": "offlane",
    "pos 3": "offlane",
    "3": "offlane",

    # Position 4
    "support": "support",
    "soft support": "support",
    "roamer": "support",
    "pos4": "support",
    "pos 4": "support",
    "4": "support",

    # Position 5
    "hard support": "hard support",
    "hardsupport": "hard support",
    "hard_support": "hard support",
    "pos5": "hard support",
    "pos 5": "hard support",
    "5": "hard support",
}


def normalize_position(position: Optional[str]) -> Optional[str]:
    """Normalize a position string to its canonical slot name.

    Args:
        position: Position string in any known format (e.g., "Carry", "pos 4")

    Returns:
        Canonical position or None if unknown/None

    Examples:
        >>> normalize_position("Carry")
        'safelane'
        >>> normalize_position("pos 5")
        'hard support'
    """
    if position is None:
        return None

    key = " ".join(str(position).strip().lower().split())
    return POSITION_ALIASES.get(key)


def normalize_position_strict(position: str) -> str:
    """Normalize a position string, raising ValueError if unknown."""
    normalized = normalize_position(position)
    if normalized is None:
        raise ValueError(f"Unknown position: {position}")
    return normalized


def sort_by_position(assignments: dict[int, str]) -> list[tuple[int, str]]:
    """Order (hero_id, position) pairs by position number.

    Unassigned heroes sort last, by hero id.
    """
    def position_sort_key(item: tuple[int, str]) -> tuple[int, int]:
        hero_id, position = item
        try:
            return POSITION_ORDER.index(position), hero_id
        except ValueError:
            return len(POSITION_ORDER), hero_id

    return sorted(assignments.items(), key=position_sort_key)
