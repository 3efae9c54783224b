"""Overall consistency scoring."""

import logging
from typing import Dict

from .constants import ScoringConstants
from .models import SentimentResult, KeywordResult, ToneResult, SimilarityResult

logger = logging.getLogger(__name__)


def _clamp_unit(x: float) -> float:
    """Clamp value to range [0, 1]."""
    return max(0.0, min(1.0, float(x)))


def sub_scores(
    sentiment: SentimentResult,
    keywords: KeywordResult,
    tone: ToneResult,
    similarity: SimilarityResult
) -> Dict[str, float]:
    """Convert each analysis into a 0-1 sub-score (higher is more consistent)."""
    return {
        # Lower variance is better
        "sentiment": max(0.0, 1.0 - sentiment.variance),
        "keywords": keywords.consistency_score,
        "tone": tone.consistency_score,
        "similarity": similarity.average_similarity,
    }


def compute_overall_score(
    sentiment: SentimentResult,
    keywords: KeywordResult,
    tone: ToneResult,
    similarity: SimilarityResult
) -> int:
    """Weighted combination of the four sub-scores on a 0-100 scale."""
    scores = sub_scores(sentiment, keywords, tone, similarity)
    weighted = sum(
        ScoringConstants.WEIGHTS[name] * _clamp_unit(score)
        for name, score in scores.items()
    )
    overall = int(round(weighted * 100))
    logger.debug(f"Sub-scores {scores} -> overall {overall}")
    return max(0, min(100, overall))


def score_band(score: int) -> str:
    """Map a 0-100 score to a qualitative band."""
    for floor, band in ScoringConstants.SCORE_BANDS:
        if score >= floor:
            return band
    return ScoringConstants.SCORE_BANDS[-1][1]
