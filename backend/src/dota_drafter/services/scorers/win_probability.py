"""Bounded win probability from a team score delta."""
import math

MIN_WIN_PROBABILITY = 20.0
MAX_WIN_PROBABILITY = 80.0
GROWTH_RATE = 0.025


def win_probability(delta: float) -> float:
    """Map ally-minus-enemy score delta to an ally win percentage.

    p = 50 + 30 * tanh(delta * 0.025), clamped to [20, 80]. Synergy data alone
    never claims more than an 80/20 edge.
    """
    if math.isnan(delta):
        return 50.0
    probability = 50.0 + (MAX_WIN_PROBABILITY - 50.0) * math.tanh(delta * GROWTH_RATE)
    return max(MIN_WIN_PROBABILITY, min(MAX_WIN_PROBABILITY, probability))


def win_probability_pair(delta: float) -> tuple[float, float]:
    """(ally, enemy) win percentages; enemy is derived so the pair sums to 100."""
    ally = win_probability(delta)
    return ally, 100.0 - ally
