"""Draft state models."""

from dataclasses import dataclass, field

TEAM_SIZE = 5


@dataclass
class DraftState:
    """Picks and bans for both teams at a point in time.

    Ally and enemy picks are kept in pick order. The three lists are expected
    to be disjoint; overlapping ids are treated literally.
    """

    ally_picks: list[int] = field(default_factory=list)
    enemy_picks: list[int] = field(default_factory=list)
    bans: list[int] = field(default_factory=list)

    @property
    def unavailable(self) -> set[int]:
        """Hero ids that can no longer be picked."""
        return set(self.ally_picks) | set(self.enemy_picks) | set(self.bans)

    @property
    def is_complete(self) -> bool:
        """Both teams have picked a full lineup."""
        return len(self.ally_picks) == TEAM_SIZE and len(self.enemy_picks) == TEAM_SIZE
