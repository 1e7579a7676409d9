"""Accessors for services stored on app.state."""

from fastapi import HTTPException, Request

from dota_drafter.services.dataset_service import Dataset, DatasetStore
from dota_drafter.services.scoring_engine import ScoringEngine


def get_dataset_store(request: Request) -> DatasetStore:
    return request.app.state.dataset_store


def get_engine(request: Request) -> ScoringEngine:
    return request.app.state.engine


def get_ready_dataset(request: Request) -> Dataset:
    """Snapshot the current dataset, or 503 if heroes/matchups aren't loaded."""
    dataset = get_dataset_store(request).dataset
    if not dataset.is_ready:
        raise HTTPException(status_code=503, detail="Hero data not loaded")
    return dataset
