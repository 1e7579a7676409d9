"""Data models for the Dota 2 drafting assistant."""

from dota_drafter.models.draft import TEAM_SIZE, DraftState
from dota_drafter.models.hero import (
    HeroPositions,
    HeroRecord,
    HeroRole,
    PrimaryAttribute,
)
from dota_drafter.models.scoring import (
    Bonus,
    DraftMode,
    DraftResult,
    FullDraftResult,
    HeroBreakdown,
    PairScore,
    ScoreRecord,
    SuggestionResult,
)

__all__ = [
    "TEAM_SIZE",
    "DraftState",
    "HeroPositions",
    "HeroRecord",
    "HeroRole",
    "PrimaryAttribute",
    "Bonus",
    "DraftMode",
    "DraftResult",
    "FullDraftResult",
    "HeroBreakdown",
    "PairScore",
    "ScoreRecord",
    "SuggestionResult",
]
