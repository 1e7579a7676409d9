"""Draft-need bonuses for heroes that fill a missing archetype."""
from dataclasses import dataclass
from typing import Iterable

from dota_drafter.models.hero import HeroRecord, HeroRole
from dota_drafter.models.scoring import Bonus
from dota_drafter.services.hero_catalog import HeroCatalog

DRAFT_NEED_BONUS = 2.0
CRUCIAL_TRIGGER_PICKS = 2
SECONDARY_TRIGGER_PICKS = 3


@dataclass(frozen=True)
class DraftNeed:
    """An archetype the allied lineup should contain once it has min_picks heroes."""

    kind: str
    role: HeroRole
    label: str
    min_picks: int


DRAFT_NEEDS = (
    DraftNeed("needs_disabler", HeroRole.DISABLER, "No disablers in team", SECONDARY_TRIGGER_PICKS),
    DraftNeed("needs_pusher", HeroRole.PUSHER, "No pushers in team", SECONDARY_TRIGGER_PICKS),
    DraftNeed("needs_initiator", HeroRole.INITIATOR, "No initiator in team", CRUCIAL_TRIGGER_PICKS),
)


class RoleHeuristic:
    """Detects missing archetypes among allies and grants flat synergy bonuses.

    A need is open when the ally lineup has at least ``min_picks`` heroes and
    none of them carries the role. Every open need a candidate covers adds
    ``bonus`` to its synergy score; needs stack independently.
    """

    def __init__(self, bonus: float = DRAFT_NEED_BONUS, needs: tuple[DraftNeed, ...] = DRAFT_NEEDS):
        self.bonus = bonus
        self.needs = needs

    def open_needs(self, ally_picks: list[int], catalog: HeroCatalog) -> list[DraftNeed]:
        """Needs currently unmet by the ally lineup.

        The pick count includes ids missing from the catalog; those heroes
        simply contribute no roles.
        """
        allies = [catalog.get(hero_id) for hero_id in ally_picks]
        ally_roles = {role for hero in allies if hero is not None for role in hero.roles}
        return [
            need for need in self.needs
            if len(ally_picks) >= need.min_picks and need.role not in ally_roles
        ]

    def bonuses_for(self, hero: HeroRecord, needs: Iterable[DraftNeed]) -> list[Bonus]:
        return [
            Bonus(kind=need.kind, label=need.label, amount=self.bonus)
            for need in needs
            if hero.has_role(need.role)
        ]
