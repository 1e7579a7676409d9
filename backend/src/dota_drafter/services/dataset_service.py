"""Loading and hot-swapping the hero catalog and matchup index."""
import json
import logging
import threading
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Optional

import httpx

from dota_drafter.exceptions import DatasetRefreshError
from dota_drafter.models.hero import HeroPositions
from dota_drafter.services.hero_catalog import HeroCatalog
from dota_drafter.services.role_prediction import parse_hero_positions
from dota_drafter.services.scorers.matchup_index import MatchupIndex

logger = logging.getLogger(__name__)

HEROES_FILE = "heroes.json"
MATCHUPS_FILE = "synergyMatrix.json"
POSITIONS_FILE = "hero-roles.json"


@dataclass(frozen=True)
class Dataset:
    """Everything the scoring engine reads. Replaced wholesale, never mutated."""

    catalog: HeroCatalog = field(default_factory=HeroCatalog)
    matchups: MatchupIndex = field(default_factory=MatchupIndex)
    positions: dict[int, HeroPositions] = field(default_factory=dict)

    @property
    def is_ready(self) -> bool:
        """Catalog and matchup index are both loaded."""
        return len(self.catalog) > 0 and not self.matchups.is_empty


def _read_json(path: Path) -> Optional[Any]:
    """Read a knowledge file, returning None if missing or unreadable."""
    if not path.exists():
        logger.warning(f"{path.name} not found at {path}")
        return None
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Failed to load {path.name}: {e}")
        return None


def load_dataset(knowledge_dir: Path) -> Dataset:
    """Load heroes, matchup matrix and position data from a directory.

    Missing files leave that part empty. Malformed records raise DatasetError.
    """
    knowledge_dir = Path(knowledge_dir)
    heroes = _read_json(knowledge_dir / HEROES_FILE)
    matchups = _read_json(knowledge_dir / MATCHUPS_FILE)
    positions = _read_json(knowledge_dir / POSITIONS_FILE)

    dataset = Dataset(
        catalog=HeroCatalog.from_raw(heroes) if heroes is not None else HeroCatalog(),
        matchups=MatchupIndex.from_raw(matchups) if matchups is not None else MatchupIndex(),
        positions=parse_hero_positions(positions) if positions is not None else {},
    )
    logger.info(
        f"Loaded dataset from {knowledge_dir}: {len(dataset.catalog)} heroes, "
        f"{len(dataset.matchups)} matchup entries, {len(dataset.positions)} position entries"
    )
    return dataset


class DatasetStore:
    """Holds the current Dataset and replaces it atomically.

    Readers take ``store.dataset`` once per request and score against that
    snapshot; a concurrent swap never affects a call already in progress.
    """

    def __init__(
        self,
        knowledge_dir: Path,
        dataset_url: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.knowledge_dir = Path(knowledge_dir)
        self.dataset_url = dataset_url
        self.timeout = timeout
        self._transport = transport
        self._lock = threading.Lock()
        self._dataset = Dataset()

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    def swap(self, dataset: Dataset) -> Dataset:
        """Install a new dataset, returning the previous one."""
        with self._lock:
            previous, self._dataset = self._dataset, dataset
        return previous

    def reload(self) -> Dataset:
        """Re-read the knowledge directory and install the result."""
        dataset = load_dataset(self.knowledge_dir)
        self.swap(dataset)
        return dataset

    async def refresh_matchups(self, url: Optional[str] = None) -> Dataset:
        """Fetch a new matchup matrix and swap in only the index.

        The current dataset stays installed if the fetch or parse fails.
        """
        url = url or self.dataset_url
        if not url:
            raise DatasetRefreshError("No dataset URL configured")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url)
                response.raise_for_status()
                matchups = MatchupIndex.from_raw(response.json())
        except httpx.HTTPError as e:
            logger.error(f"Matchup refresh from {url} failed: {e}")
            raise DatasetRefreshError(f"Failed to fetch matchup matrix: {e}") from e
        except ValueError as e:  # DatasetError or a non-JSON body
            logger.error(f"Matchup refresh from {url} returned invalid data: {e}")
            raise DatasetRefreshError(f"Invalid matchup matrix: {e}") from e

        with self._lock:
            self._dataset = replace(self._dataset, matchups=matchups)
            dataset = self._dataset
        logger.info(f"Refreshed matchup index from {url}: {len(matchups)} entries")
        return dataset
