"""Rule-based recommendations derived from the four analyses."""

import logging
from typing import List, Optional

from ..core.constants import RecommendationConstants, SimilarityConstants
from ..core.models import (
    KeywordResult,
    Recommendation,
    RecommendationCategory,
    SentimentResult,
    SimilarityResult,
    ToneResult,
)

logger = logging.getLogger(__name__)


def _sentiment_recommendation(sentiment: SentimentResult) -> Optional[Recommendation]:
    if sentiment.is_consistent:
        return None

    items = list(sentiment.platforms.items())
    lowest = min(items, key=lambda item: item[1].comparative_score)[0]
    highest = max(items, key=lambda item: item[1].comparative_score)[0]
    return Recommendation(
        category=RecommendationCategory.SENTIMENT,
        title="Align emotional tone across platforms",
        description=(
            f"Your content on {highest} has a more positive tone compared to {lowest}. "
            "Consider adjusting the emotional tone to be more consistent."
        ),
    )


def _keyword_recommendation(keywords: KeywordResult) -> Optional[Recommendation]:
    labels = list(keywords.platforms)
    partial = [
        (kw, presence) for kw, presence in keywords.keyword_presence.items()
        if 0 < presence.count < len(labels)
    ]
    if not partial:
        return None

    # Stable sort keeps first-encountered order among equal counts
    partial = sorted(partial, key=lambda item: -item[1].count)
    partial = partial[:RecommendationConstants.MAX_KEYWORD_SUGGESTIONS]

    suggestions = []
    for kw, presence in partial:
        missing = ", ".join(label for label in labels if label not in presence.platforms)
        suggestions.append(f'"{kw}" (missing from {missing})')

    return Recommendation(
        category=RecommendationCategory.KEYWORDS,
        title="Include key terms consistently across platforms",
        description=(
            "These important terms appear inconsistently across your platforms: "
            + "; ".join(suggestions)
        ),
    )


def _tone_recommendation(tone: ToneResult) -> Optional[Recommendation]:
    if tone.is_consistent:
        return None

    tones = ", ".join(f"{label} ({t.dominant.value})" for label, t in tone.platforms.items())
    return Recommendation(
        category=RecommendationCategory.TONE,
        title="Standardize your communication style",
        description=(
            f"Your tone varies across platforms: {tones}. "
            "Choose one consistent voice for your brand."
        ),
    )


def _similarity_recommendation(similarity: SimilarityResult) -> Optional[Recommendation]:
    pairs = similarity.pairs()
    if not pairs:
        return None

    # min() returns the first pair among equal values
    first, second = min(pairs, key=lambda pair: similarity.matrix[pair[0]][pair[1]])
    if similarity.matrix[first][second] >= SimilarityConstants.LOW_SIMILARITY_THRESHOLD:
        return None

    return Recommendation(
        category=RecommendationCategory.SIMILARITY,
        title="Align messaging between platforms",
        description=(
            f"Your content on {first} and {second} differs significantly. "
            "Try to maintain more consistent messaging."
        ),
    )


def generate_recommendations(
    sentiment: SentimentResult,
    keywords: KeywordResult,
    tone: ToneResult,
    similarity: SimilarityResult
) -> List[Recommendation]:
    """Evaluate every rule in order and collect the ones that fire."""
    candidates = [
        _sentiment_recommendation(sentiment),
        _keyword_recommendation(keywords),
        _tone_recommendation(tone),
        _similarity_recommendation(similarity),
    ]
    recommendations = [r for r in candidates if r is not None]
    logger.debug(f"{len(recommendations)} recommendations fired")
    return recommendations
