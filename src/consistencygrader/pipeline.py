"""Content consistency analysis pipeline."""

import logging
from types import MappingProxyType
from typing import Any, Mapping

from .analysis.keywords import analyze_keywords
from .analysis.recommendations import generate_recommendations
from .analysis.sentiment import analyze_sentiment, get_analyzer
from .analysis.similarity import build_similarity_matrix
from .analysis.tone import analyze_tone
from .core.constants import InputConstants
from .core.errors import InputValidationError, InternalComputationError
from .core.models import AnalysisReport
from .core.scoring import compute_overall_score
from .core.text import ensure_nltk_data

logger = logging.getLogger(__name__)


def warm_up() -> None:
    """Load the tagger data and sentiment lexicon ahead of the first request.

    Any download happens here, so a later analysis only reads local data.
    """
    ensure_nltk_data()
    get_analyzer()
    logger.debug("NLTK data and sentiment lexicon loaded")


def validate_content_set(content_set: Any) -> Mapping[str, str]:
    """Check the input and return a read-only copy without blank samples."""
    if not isinstance(content_set, Mapping):
        raise InputValidationError("Content must be a mapping of platform label to text")

    usable = {}
    for label, text in content_set.items():
        if not isinstance(label, str) or not label.strip():
            raise InputValidationError(f"Invalid platform label: {label!r}")
        if not isinstance(text, str):
            raise InputValidationError(f"Content for '{label}' must be a string")
        if not text.strip():
            logger.warning(f"Skipping '{label}': no content")
            continue
        usable[label] = text

    if len(usable) < InputConstants.MIN_PLATFORMS:
        raise InputValidationError(
            f"At least {InputConstants.MIN_PLATFORMS} content samples are required "
            f"for consistency analysis (got {len(usable)})"
        )
    return MappingProxyType(usable)


def analyze_consistency(content_set: Mapping[str, str]) -> AnalysisReport:
    """Score how consistently the same message is expressed across platforms.

    Args:
        content_set: platform label -> raw text. At least two samples must
            contain non-blank text.

    Returns:
        A fresh AnalysisReport.

    Raises:
        InputValidationError: the input has fewer than two usable samples.
        InternalComputationError: an analysis stage failed.
    """
    platforms = validate_content_set(content_set)
    logger.debug(f"Analyzing {len(platforms)} platforms: {', '.join(platforms)}")

    try:
        sentiment = analyze_sentiment(platforms)
        keywords = analyze_keywords(platforms)
        tone = analyze_tone(platforms)
        similarity = build_similarity_matrix(platforms)

        overall = compute_overall_score(sentiment, keywords, tone, similarity)
        recommendations = generate_recommendations(sentiment, keywords, tone, similarity)
    except Exception as e:
        logger.error(f"Consistency analysis failed: {e}")
        raise InternalComputationError("Failed to analyze content") from e

    logger.info(f"Consistency score {overall}/100 with {len(recommendations)} recommendations")
    return AnalysisReport(
        overall_score=overall,
        sentiment=sentiment,
        keywords=keywords,
        tone=tone,
        similarity=similarity,
        recommendations=tuple(recommendations),
    )
