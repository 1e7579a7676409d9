"""REST endpoints for draft scoring."""

from typing import Literal

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from dota_drafter.api.state import get_dataset_store, get_engine, get_ready_dataset
from dota_drafter.models.draft import DraftState
from dota_drafter.models.hero import HeroRole
from dota_drafter.models.scoring import (
    FullDraftResult,
    PairScore,
    ScoreRecord,
    SuggestionResult,
)
from dota_drafter.services.role_prediction import predict_enemy_positions
from dota_drafter.services.scoring_engine import round_score
from dota_drafter.utils.position_normalizer import sort_by_position

router = APIRouter(prefix="/api/draft", tags=["draft"])


class DraftRequest(BaseModel):
    """Current picks and bans. Picks are in pick order."""

    ally_picks: list[int] = Field(default_factory=list)
    enemy_picks: list[int] = Field(default_factory=list)
    bans: list[int] = Field(default_factory=list)

    def to_state(self) -> DraftState:
        return DraftState(
            ally_picks=list(self.ally_picks),
            enemy_picks=list(self.enemy_picks),
            bans=list(self.bans),
        )


class ScoreRequest(DraftRequest):
    role_filter: HeroRole | None = None
    hero_pool: list[int] = Field(default_factory=list)


class PoolRequest(DraftRequest):
    hero_pool: list[int] = Field(default_factory=list)


class RolesRequest(BaseModel):
    enemy_picks: list[int] = Field(default_factory=list)


class BreakdownRequest(BaseModel):
    hero_id: int
    teammates: list[int] = Field(default_factory=list)
    opponents: list[int] = Field(default_factory=list)


class BonusResponse(BaseModel):
    kind: str
    label: str
    amount: float


class ScoreRecordResponse(BaseModel):
    """Per-hero scores rounded for display."""

    hero_id: int
    name: str
    icon_url: str | None
    synergy_score: float
    counter_score: float
    total_score: float
    bonuses: list[BonusResponse]

    @classmethod
    def from_record(cls, record: ScoreRecord) -> "ScoreRecordResponse":
        return cls(
            hero_id=record.hero_id,
            name=record.name,
            icon_url=record.icon_url,
            synergy_score=round_score(record.synergy_score),
            counter_score=round_score(record.counter_score),
            total_score=round_score(record.total_score),
            bonuses=[BonusResponse(kind=b.kind, label=b.label, amount=b.amount) for b in record.bonuses],
        )


class SuggestionResponse(BaseModel):
    mode: Literal["suggestion"] = "suggestion"
    in_pool: list[ScoreRecordResponse]
    out_pool: list[ScoreRecordResponse]


class FullDraftResponse(BaseModel):
    mode: Literal["full_draft"] = "full_draft"
    ally: list[ScoreRecordResponse]
    enemy: list[ScoreRecordResponse]
    ally_total: float
    enemy_total: float
    ally_win_probability: float
    enemy_win_probability: float


class PositionAssignment(BaseModel):
    hero_id: int
    position: str


class RolesResponse(BaseModel):
    assignments: list[PositionAssignment]  # Ordered by position number


class PairScoreResponse(BaseModel):
    hero_id: int
    name: str
    value: float


class BreakdownResponse(BaseModel):
    hero_id: int
    synergies: list[PairScoreResponse]
    counters: list[PairScoreResponse]


def _pair_response(pair: PairScore) -> PairScoreResponse:
    return PairScoreResponse(hero_id=pair.hero_id, name=pair.name, value=round_score(pair.value))


def _suggestion_response(result: SuggestionResult) -> SuggestionResponse:
    return SuggestionResponse(
        in_pool=[ScoreRecordResponse.from_record(r) for r in result.in_pool],
        out_pool=[ScoreRecordResponse.from_record(r) for r in result.out_pool],
    )


def _full_draft_response(result: FullDraftResult) -> FullDraftResponse:
    ally_probability = round_score(result.ally_win_probability)
    return FullDraftResponse(
        ally=[ScoreRecordResponse.from_record(r) for r in result.ally],
        enemy=[ScoreRecordResponse.from_record(r) for r in result.enemy],
        ally_total=round_score(result.ally_total),
        enemy_total=round_score(result.enemy_total),
        ally_win_probability=ally_probability,
        enemy_win_probability=round_score(100.0 - ally_probability),
    )


@router.post("/score", response_model=SuggestionResponse | FullDraftResponse)
def score_draft(request: Request, body: ScoreRequest):
    """Score the draft: pick suggestions mid-draft, team breakdown once both teams have 5 picks."""
    dataset = get_ready_dataset(request)
    result = get_engine(request).score_draft(
        dataset,
        body.to_state(),
        role_filter=body.role_filter,
        hero_pool=body.hero_pool,
    )
    if result is None:
        raise HTTPException(status_code=503, detail="Hero data not loaded")

    if isinstance(result, FullDraftResult):
        return _full_draft_response(result)
    return _suggestion_response(result)


@router.post("/pool", response_model=list[ScoreRecordResponse])
def score_pool(request: Request, body: PoolRequest):
    """Score the user's hero pool against the current draft."""
    dataset = get_ready_dataset(request)
    records = get_engine(request).score_pool(dataset, body.to_state(), body.hero_pool)
    if records is None:
        raise HTTPException(status_code=503, detail="Hero data not loaded")
    return [ScoreRecordResponse.from_record(r) for r in records]


@router.post("/roles", response_model=RolesResponse)
def predict_roles(request: Request, body: RolesRequest):
    """Guess which lane position each enemy hero will play."""
    positions = get_dataset_store(request).dataset.positions
    if not positions:
        raise HTTPException(status_code=503, detail="Hero position data not loaded")
    assignments = predict_enemy_positions(body.enemy_picks, positions)
    return RolesResponse(
        assignments=[
            PositionAssignment(hero_id=hero_id, position=position)
            for hero_id, position in sort_by_position(assignments)
        ]
    )


@router.post("/breakdown", response_model=BreakdownResponse)
def hero_breakdown(request: Request, body: BreakdownRequest):
    """Synergy with each teammate and counter value against each opponent for one hero."""
    dataset = get_ready_dataset(request)
    if body.hero_id not in dataset.catalog:
        raise HTTPException(status_code=404, detail=f"Hero not found: {body.hero_id}")

    breakdown = get_engine(request).breakdown(dataset, body.hero_id, body.teammates, body.opponents)
    if breakdown is None:
        raise HTTPException(status_code=503, detail="Hero data not loaded")

    return BreakdownResponse(
        hero_id=breakdown.hero_id,
        synergies=[_pair_response(p) for p in breakdown.synergies],
        counters=[_pair_response(p) for p in breakdown.counters],
    )
