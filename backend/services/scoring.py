"""Score helpers shared by the coverage scorer and the match aggregator."""

import math

from models.schemas.match_result import ScoreBand

# Band thresholds are fixed across every view that color-codes a score
STRONG_THRESHOLD = 0.8
PARTIAL_THRESHOLD = 0.6


def score_band(score: float) -> ScoreBand:
    """Classify a 0.0-1.0 score as strong (>= 0.8), partial (>= 0.6) or weak."""
    if score >= STRONG_THRESHOLD:
        return ScoreBand.STRONG
    if score >= PARTIAL_THRESHOLD:
        return ScoreBand.PARTIAL
    return ScoreBand.WEAK


def clamp_score(value) -> float:
    """Coerce an untrusted score to a float in [0.0, 1.0]. Garbage becomes 0.0."""
    if isinstance(value, bool):
        return 0.0
    try:
        score = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(score):
        return 0.0
    return min(1.0, max(0.0, score))


def to_percent(score: float, digits: int = 2) -> float:
    """0.6667 -> 66.67"""
    return round(score * 100, digits)
