"""Synergy and counter scoring across a draft."""
from typing import Callable, Iterable, Optional

from dota_drafter.models.draft import DraftState
from dota_drafter.models.hero import HeroRecord, HeroRole
from dota_drafter.models.scoring import (
    DraftResult,
    FullDraftResult,
    HeroBreakdown,
    PairScore,
    ScoreRecord,
    SuggestionResult,
)
from dota_drafter.services.dataset_service import Dataset
from dota_drafter.services.scorers import (
    DraftNeed,
    MatchupIndex,
    RoleHeuristic,
    win_probability_pair,
)

# A hero pool smaller than this does not split suggestions
MIN_POOL_SIZE = 3
DISPLAY_PRECISION = 2


def round_score(value: float) -> float:
    """Round a score for display. Scoring itself keeps full precision."""
    return round(value, DISPLAY_PRECISION)


class ScoringEngine:
    """Scores heroes against a draft state.

    Two modes, chosen by one rule in ``score_draft``: when both teams have
    five picks the draft is scored as two complete lineups, otherwise the
    remaining heroes are ranked as pick suggestions.

    Every call reads the Dataset it is handed and keeps nothing between
    calls. An unloaded dataset yields None rather than zero scores.
    """

    def __init__(
        self,
        role_heuristic: Optional[RoleHeuristic] = None,
        min_pool_size: int = MIN_POOL_SIZE,
    ):
        self.role_heuristic = role_heuristic or RoleHeuristic()
        self.min_pool_size = min_pool_size

    def score_draft(
        self,
        dataset: Dataset,
        draft: DraftState,
        role_filter: Optional[HeroRole] = None,
        hero_pool: Iterable[int] = (),
    ) -> Optional[DraftResult]:
        """Score a draft in whichever mode its team sizes call for."""
        if draft.is_complete:
            return self.score_full_draft(dataset, draft)
        return self.suggest(dataset, draft, role_filter, hero_pool)

    def suggest(
        self,
        dataset: Dataset,
        draft: DraftState,
        role_filter: Optional[HeroRole] = None,
        hero_pool: Iterable[int] = (),
    ) -> Optional[SuggestionResult]:
        """Rank every available hero by total score.

        Heroes outside ``role_filter`` are left out entirely. Ranked heroes are
        split into pool and non-pool lists, each keeping rank order; ties keep
        catalog order.
        """
        if not dataset.is_ready:
            return None

        unavailable = draft.unavailable
        needs = self._open_needs(dataset, draft)

        ranked = []
        for hero in dataset.catalog:
            if hero.hero_id in unavailable:
                continue
            if role_filter is not None and not hero.has_role(role_filter):
                continue
            ranked.append(self._score_candidate(dataset.matchups, hero, draft, needs))
        ranked.sort(key=lambda r: r.total_score, reverse=True)

        pool = self._effective_pool(hero_pool)
        result = SuggestionResult()
        for record in ranked:
            if record.hero_id in pool:
                result.in_pool.append(record)
            else:
                result.out_pool.append(record)
        return result

    def score_full_draft(self, dataset: Dataset, draft: DraftState) -> Optional[FullDraftResult]:
        """Score both lineups hero by hero, in pick order, without role bonuses."""
        if not dataset.is_ready:
            return None

        ally = self._score_team(dataset, draft.ally_picks, draft.enemy_picks)
        enemy = self._score_team(dataset, draft.enemy_picks, draft.ally_picks)
        ally_total = sum((r.total_score for r in ally), 0.0)
        enemy_total = sum((r.total_score for r in enemy), 0.0)
        ally_probability, enemy_probability = win_probability_pair(ally_total - enemy_total)

        return FullDraftResult(
            ally=ally,
            enemy=enemy,
            ally_total=ally_total,
            enemy_total=enemy_total,
            ally_win_probability=ally_probability,
            enemy_win_probability=enemy_probability,
        )

    def score_pool(
        self,
        dataset: Dataset,
        draft: DraftState,
        hero_pool: Iterable[int],
    ) -> Optional[list[ScoreRecord]]:
        """Score only the user's hero pool, ignoring any role filter.

        Heroes already picked or banned are skipped. Sorted by total score.
        """
        if not dataset.is_ready:
            return None

        pool = set(hero_pool)
        if not pool:
            return []

        unavailable = draft.unavailable
        needs = self._open_needs(dataset, draft)
        records = [
            self._score_candidate(dataset.matchups, hero, draft, needs)
            for hero in dataset.catalog
            if hero.hero_id in pool and hero.hero_id not in unavailable
        ]
        records.sort(key=lambda r: r.total_score, reverse=True)
        return records

    def breakdown(
        self,
        dataset: Dataset,
        hero_id: int,
        teammates: Iterable[int],
        opponents: Iterable[int],
    ) -> Optional[HeroBreakdown]:
        """Per-pair values for one hero: synergy with each teammate, counter vs each opponent."""
        if not dataset.is_ready:
            return None

        def pairs(others: Iterable[int], lookup: Callable[[int, int], float]) -> list[PairScore]:
            scores = []
            for other_id in others:
                other = dataset.catalog.get(other_id)
                if other_id == hero_id or other is None:
                    continue
                scores.append(PairScore(other_id, other.name, lookup(hero_id, other_id)))
            return scores

        return HeroBreakdown(
            hero_id=hero_id,
            synergies=pairs(teammates, dataset.matchups.lookup_synergy),
            counters=pairs(opponents, dataset.matchups.lookup_counter),
        )

    def _open_needs(self, dataset: Dataset, draft: DraftState) -> list[DraftNeed]:
        # Draft-need bonuses only steer picks while the draft is in progress
        if draft.is_complete:
            return []
        return self.role_heuristic.open_needs(draft.ally_picks, dataset.catalog)

    def _effective_pool(self, hero_pool: Iterable[int]) -> set[int]:
        pool = set(hero_pool or ())
        if len(pool) < self.min_pool_size:
            return set()
        return pool

    def _score_candidate(
        self,
        matchups: MatchupIndex,
        hero: HeroRecord,
        draft: DraftState,
        needs: list[DraftNeed],
    ) -> ScoreRecord:
        synergy_base = sum((matchups.lookup_synergy(hero.hero_id, a) for a in draft.ally_picks), 0.0)
        counter = sum((matchups.lookup_counter(hero.hero_id, e) for e in draft.enemy_picks), 0.0)
        bonuses = self.role_heuristic.bonuses_for(hero, needs)
        synergy = synergy_base + sum((b.amount for b in bonuses), 0.0)

        return ScoreRecord(
            hero_id=hero.hero_id,
            name=hero.name,
            icon_url=hero.icon_url,
            synergy_score=synergy,
            counter_score=counter,
            total_score=synergy + counter,
            bonuses=bonuses,
        )

    def _score_team(
        self, dataset: Dataset, team: list[int], opponents: list[int]
    ) -> list[ScoreRecord]:
        matchups = dataset.matchups
        records = []
        for hero_id in team:
            hero = dataset.catalog.get(hero_id)
            if hero is None:
                continue
            synergy = sum(
                (matchups.lookup_synergy(hero_id, mate) for mate in team if mate != hero_id), 0.0
            )
            counter = sum((matchups.lookup_counter(hero_id, opp) for opp in opponents), 0.0)
            records.append(ScoreRecord(
                hero_id=hero.hero_id,
                name=hero.name,
                icon_url=hero.icon_url,
                synergy_score=synergy,
                counter_score=counter,
                total_score=synergy + counter,
            ))
        return records
