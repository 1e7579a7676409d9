"""REST endpoints for the hero catalog."""

from typing import Annotated

from fastapi import APIRouter, Query, Request
from pydantic import BaseModel

from dota_drafter.api.state import get_ready_dataset
from dota_drafter.models.hero import HeroRecord, HeroRole

router = APIRouter(prefix="/api", tags=["heroes"])


class HeroResponse(BaseModel):
    """Hero record as sent to the client."""

    hero_id: int
    name: str
    primary_attribute: str
    roles: list[str]
    icon_url: str | None
    aliases: list[str]

    @classmethod
    def from_record(cls, hero: HeroRecord) -> "HeroResponse":
        return cls(
            hero_id=hero.hero_id,
            name=hero.name,
            primary_attribute=hero.primary_attribute.value,
            roles=[role.value for role in HeroRole if role in hero.roles],
            icon_url=hero.icon_url,
            aliases=list(hero.aliases),
        )


class GroupedHeroesResponse(BaseModel):
    """Heroes bucketed by primary attribute (str, agi, int, all)."""

    groups: dict[str, list[HeroResponse]]


@router.get("/heroes", response_model=GroupedHeroesResponse)
def list_heroes(request: Request):
    """List all heroes grouped by attribute, sorted by name."""
    dataset = get_ready_dataset(request)
    return GroupedHeroesResponse(
        groups={
            attr.value: [HeroResponse.from_record(h) for h in heroes]
            for attr, heroes in dataset.catalog.grouped().items()
        }
    )


@router.get("/heroes/search", response_model=list[HeroResponse])
def search_heroes(
    request: Request,
    q: Annotated[str, Query(max_length=64)] = "",
):
    """Find heroes whose name or alias contains the query."""
    dataset = get_ready_dataset(request)
    return [HeroResponse.from_record(h) for h in dataset.catalog.search(q)]
