"""Tests for scoring module."""

import pytest

from consistencygrader.core.models import (
    KeywordResult,
    SentimentResult,
    SimilarityResult,
    ToneResult,
)
from consistencygrader.core.scoring import compute_overall_score, score_band, sub_scores


def _results(variance, keyword_score, tone_score, similarity):
    return (
        SentimentResult(platforms={}, variance=variance, is_consistent=variance < 0.2),
        KeywordResult(platforms={}, keyword_presence={}, consistent_keywords=(),
                      consistency_score=keyword_score),
        ToneResult(platforms={}, consistency_score=tone_score, is_consistent=tone_score == 1.0),
        SimilarityResult(matrix={}, average_similarity=similarity),
    )


def test_perfect_consistency():
    assert compute_overall_score(*_results(0.0, 1.0, 1.0, 1.0)) == 100


def test_no_consistency():
    """Variance above 1 floors the sentiment sub-score at 0."""
    assert compute_overall_score(*_results(2.0, 0.0, 0.0, 0.0)) == 0


def test_weighted_mix():
    # 0.2 * 0.5 + 0.3 * 0.5 + 0.25 * 1.0 + 0.25 * 0.2 = 0.55
    assert compute_overall_score(*_results(0.5, 0.5, 1.0, 0.2)) == 55


def test_sentiment_sub_score():
    scores = sub_scores(*_results(0.25, 0.0, 0.0, 0.0))
    assert scores["sentiment"] == pytest.approx(0.75)
    assert sub_scores(*_results(3.0, 0.0, 0.0, 0.0))["sentiment"] == 0.0


def test_overall_score_is_bounded_integer():
    for args in [(0.0, 0.3, 0.66, 0.12), (0.9, 1.0, 0.0, 0.5), (10.0, 0.1, 0.33, 0.99)]:
        score = compute_overall_score(*_results(*args))
        assert isinstance(score, int)
        assert 0 <= score <= 100


def test_score_band():
    assert score_band(100) == "excellent"
    assert score_band(80) == "excellent"
    assert score_band(60) == "good"
    assert score_band(59) == "fair"
    assert score_band(40) == "fair"
    assert score_band(39) == "poor"
    assert score_band(0) == "poor"
