"""Core scoring components for the scoring engine."""
from dota_drafter.services.scorers.matchup_index import MatchupIndex
from dota_drafter.services.scorers.role_heuristic import DraftNeed, RoleHeuristic
from dota_drafter.services.scorers.win_probability import win_probability, win_probability_pair

__all__ = [
    "MatchupIndex",
    "DraftNeed",
    "RoleHeuristic",
    "win_probability",
    "win_probability_pair",
]
