"""Score records produced by the scoring engine."""

from dataclasses import dataclass, field
from enum import Enum


class DraftMode(str, Enum):
    SUGGESTION = "suggestion"
    FULL_DRAFT = "full_draft"


@dataclass(frozen=True)
class Bonus:
    """An additive adjustment applied to a hero's synergy score."""

    kind: str  # e.g. "needs_initiator"
    label: str
    amount: float


@dataclass
class ScoreRecord:
    """Synergy and counter scores for one hero."""

    hero_id: int
    name: str
    icon_url: str | None
    synergy_score: float  # Includes bonuses
    counter_score: float
    total_score: float
    bonuses: list[Bonus] = field(default_factory=list)

    @property
    def synergy_bonus(self) -> float:
        return sum(b.amount for b in self.bonuses)

    @property
    def synergy_base(self) -> float:
        return self.synergy_score - self.synergy_bonus


@dataclass
class SuggestionResult:
    """Ranked pick suggestions for an incomplete draft."""

    in_pool: list[ScoreRecord] = field(default_factory=list)
    out_pool: list[ScoreRecord] = field(default_factory=list)
    mode: DraftMode = field(default=DraftMode.SUGGESTION, init=False)


@dataclass
class FullDraftResult:
    """Per-hero breakdown of two complete lineups, in pick order."""

    ally: list[ScoreRecord]
    enemy: list[ScoreRecord]
    ally_total: float
    enemy_total: float
    ally_win_probability: float
    enemy_win_probability: float
    mode: DraftMode = field(default=DraftMode.FULL_DRAFT, init=False)

    @property
    def delta(self) -> float:
        return self.ally_total - self.enemy_total


DraftResult = SuggestionResult | FullDraftResult


@dataclass(frozen=True)
class PairScore:
    """Matchup value of one hero against a single other hero."""

    hero_id: int
    name: str
    value: float


@dataclass
class HeroBreakdown:
    """Per-pair synergy and counter values for a single hero."""

    hero_id: int
    synergies: list[PairScore] = field(default_factory=list)
    counters: list[PairScore] = field(default_factory=list)
