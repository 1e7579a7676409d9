"""Business logic services."""

from dota_drafter.services.hero_catalog import HeroCatalog, group_heroes
from dota_drafter.services.dataset_service import Dataset, DatasetStore, load_dataset
from dota_drafter.services.role_prediction import predict_enemy_positions
from dota_drafter.services.scoring_engine import ScoringEngine

__all__ = [
    "HeroCatalog",
    "group_heroes",
    "Dataset",
    "DatasetStore",
    "load_dataset",
    "predict_enemy_positions",
    "ScoringEngine",
]
