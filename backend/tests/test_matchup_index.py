"""Tests for the matchup index."""
import pytest

from dota_drafter.exceptions import DatasetError
from dota_drafter.services.scorers.matchup_index import MatchupIndex


@pytest.fixture
def index():
    return MatchupIndex.from_raw({
        "1": {"with": {"2": 1.5, "3": -0.5}, "vs": {"4": 2.25}},
        "2": {"with": {"1": -3.0}, "vs": {}},
    })


def test_lookup_synergy(index):
    assert index.lookup_synergy(1, 2) == 1.5
    assert index.lookup_synergy(1, 3) == -0.5


def test_lookup_counter(index):
    assert index.lookup_counter(1, 4) == 2.25


def test_lookups_are_directional(index):
    """Values are read from the scored hero's own entry, never mirrored."""
    assert index.lookup_synergy(1, 2) == 1.5
    assert index.lookup_synergy(2, 1) == -3.0
    assert index.lookup_counter(4, 1) == 0.0


def test_missing_pair_returns_zero(index):
    assert index.lookup_synergy(2, 3) == 0.0
    assert index.lookup_counter(2, 1) == 0.0


def test_unknown_hero_returns_zero(index):
    assert index.lookup_synergy(999, 1) == 0.0
    assert index.lookup_counter(999, 1) == 0.0


def test_list_form_is_indexed():
    """Per-pair list entries are indexed the same as the map form."""
    index = MatchupIndex.from_raw({
        "7": {
            "with": [{"heroId2": 8, "synergy": 0.8}, {"heroId2": 9, "synergy": -1.2}],
            "vs": [{"heroId2": 10, "synergy": 3}],
        }
    })
    assert index.lookup_synergy(7, 8) == 0.8
    assert index.lookup_synergy(7, 9) == -1.2
    assert index.lookup_counter(7, 10) == 3.0


def test_entry_without_sides():
    index = MatchupIndex.from_raw({"5": {}})
    assert 5 in index
    assert index.lookup_synergy(5, 1) == 0.0
    assert not index.is_empty


def test_empty_index():
    index = MatchupIndex()
    assert index.is_empty
    assert len(index) == 0
    assert index.lookup_synergy(1, 2) == 0.0


def test_len_counts_heroes(index):
    assert len(index) == 2


@pytest.mark.parametrize("payload", [
    [],
    {"abc": {"with": {}}},
    {"1": {"with": {"x": 1.0}}},
    {"1": {"with": {"2": "lots"}}},
    {"1": {"with": "nope"}},
    {"1": 5},
])
def test_invalid_payload_raises(payload):
    with pytest.raises(DatasetError):
        MatchupIndex.from_raw(payload)


@pytest.mark.parametrize("value", ["nan", "inf", "-Infinity", float("nan"), float("inf")])
def test_non_finite_values_rejected(value):
    with pytest.raises(DatasetError, match="Invalid matchup value for hero 2"):
        MatchupIndex.from_raw({"1": {"with": {"2": value}, "vs": {}}})


def test_pair_without_hero_id_reports_bad_id():
    with pytest.raises(DatasetError, match="Invalid hero id"):
        MatchupIndex.from_raw({"1": {"with": [{"synergy": 1.0}]}})
