"""Hero catalog models."""

from dataclasses import dataclass, field
from enum import Enum


class PrimaryAttribute(str, Enum):
    """Primary attribute buckets, in display order."""

    STRENGTH = "str"
    AGILITY = "agi"
    INTELLIGENCE = "int"
    UNIVERSAL = "all"


class HeroRole(str, Enum):
    """Archetype tags a hero can carry."""

    CARRY = "Carry"
    SUPPORT = "Support"
    NUKER = "Nuker"
    DISABLER = "Disabler"
    JUNGLER = "Jungler"
    DURABLE = "Durable"
    ESCAPE = "Escape"
    PUSHER = "Pusher"
    INITIATOR = "Initiator"


@dataclass(frozen=True)
class HeroRecord:
    """Static identity and metadata for one hero."""

    hero_id: int
    name: str
    primary_attribute: PrimaryAttribute
    roles: frozenset[HeroRole] = frozenset()
    icon_url: str | None = None  # Presentation only
    aliases: tuple[str, ...] = ()  # Alternate search strings

    def has_role(self, role: HeroRole) -> bool:
        return role in self.roles


@dataclass(frozen=True)
class HeroPositions:
    """Lane positions a hero can play, most likely first."""

    primary: tuple[str, ...] = ()
    secondary: tuple[str, ...] = ()
    fallback: str | None = None
    options: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self):
        options = self.primary + self.secondary
        if self.fallback:
            options += (self.fallback,)
        object.__setattr__(self, "options", options)
