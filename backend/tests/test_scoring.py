import pytest

from models.schemas.match_result import ScoreBand
from services.scoring import clamp_score, score_band, to_percent


@pytest.mark.parametrize(
    "score, band",
    [
        (1.0, ScoreBand.STRONG),
        (0.8, ScoreBand.STRONG),
        (0.79999, ScoreBand.PARTIAL),
        (0.6, ScoreBand.PARTIAL),
        (0.5999, ScoreBand.WEAK),
        (0.0, ScoreBand.WEAK),
    ],
)
def test_score_band_thresholds(score, band):
    assert score_band(score) == band


def test_clamp_score():
    assert clamp_score(0.42) == 0.42
    assert clamp_score("0.5") == 0.5
    assert clamp_score(1.7) == 1.0
    assert clamp_score(-3) == 0.0
    assert clamp_score(None) == 0.0
    assert clamp_score("high") == 0.0
    assert clamp_score(float("nan")) == 0.0
    assert clamp_score(True) == 0.0


def test_to_percent():
    assert to_percent(2 / 3) == 66.67
    assert to_percent(0.5, digits=0) == 50
    assert to_percent(0.0) == 0.0
