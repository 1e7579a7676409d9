"""REST endpoints for dataset status, reload and refresh."""

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from dota_drafter.api.state import get_dataset_store
from dota_drafter.exceptions import DatasetError, DatasetRefreshError
from dota_drafter.services.dataset_service import Dataset

router = APIRouter(prefix="/api/dataset", tags=["dataset"])


class DatasetStatusResponse(BaseModel):
    ready: bool
    heroes: int
    matchup_entries: int
    position_entries: int

    @classmethod
    def from_dataset(cls, dataset: Dataset) -> "DatasetStatusResponse":
        return cls(
            ready=dataset.is_ready,
            heroes=len(dataset.catalog),
            matchup_entries=len(dataset.matchups),
            position_entries=len(dataset.positions),
        )


@router.get("", response_model=DatasetStatusResponse)
def dataset_status(request: Request):
    """Report what is currently loaded."""
    return DatasetStatusResponse.from_dataset(get_dataset_store(request).dataset)


@router.post("/reload", response_model=DatasetStatusResponse)
def reload_dataset(request: Request):
    """Re-read the knowledge directory."""
    try:
        dataset = get_dataset_store(request).reload()
    except DatasetError as e:
        raise HTTPException(status_code=422, detail=f"Invalid dataset: {e}")
    return DatasetStatusResponse.from_dataset(dataset)


@router.post("/refresh", response_model=DatasetStatusResponse)
async def refresh_dataset(request: Request):
    """Fetch the matchup matrix from the configured URL and swap it in."""
    store = get_dataset_store(request)
    if not store.dataset_url:
        raise HTTPException(status_code=400, detail="No dataset URL configured")
    try:
        dataset = await store.refresh_matchups()
    except DatasetRefreshError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return DatasetStatusResponse.from_dataset(dataset)
