"""Marker-based tone classification."""

import logging
import re
from typing import Dict, Mapping

from ..core.constants import ToneConstants
from ..core.models import PlatformTone, ToneCategory, ToneResult
from ..core.text import tokenize

logger = logging.getLogger(__name__)

# Compiled once; each marker is matched as a whole word, ignoring case
_MARKER_PATTERNS = {
    tone: tuple(
        re.compile(rf"\b{re.escape(marker)}\b", re.IGNORECASE)
        for marker in ToneConstants.MARKERS[tone.value]
    )
    for tone in ToneCategory
}


def tone_scores(text: str) -> Dict[ToneCategory, float]:
    """Marker hits per 100 words for each tone category."""
    word_count = len(tokenize(text))
    scores = {}
    for tone in ToneCategory:
        if word_count == 0:
            scores[tone] = 0.0
            continue
        hits = sum(len(pattern.findall(text)) for pattern in _MARKER_PATTERNS[tone])
        scores[tone] = hits / word_count * ToneConstants.SCORE_SCALE
    return scores


def dominant_tone(scores: Dict[ToneCategory, float]) -> ToneCategory:
    """Highest-scoring category; ties go to the earliest category."""
    best = None
    for tone in ToneCategory:
        if best is None or scores[tone] > scores[best]:
            best = tone
    return best


def analyze_tone(content_set: Mapping[str, str]) -> ToneResult:
    """Classify each platform's tone and check that they agree."""
    platforms = {}
    for label, text in content_set.items():
        scores = tone_scores(text)
        platforms[label] = PlatformTone(scores=scores, dominant=dominant_tone(scores))

    distinct = {t.dominant for t in platforms.values()}
    categories = len(ToneCategory)
    score = 1.0 - (len(distinct) - 1) / max(categories - 1, 1) if distinct else 1.0
    logger.debug(f"Dominant tones: {sorted(t.value for t in distinct)}")

    return ToneResult(
        platforms=platforms,
        consistency_score=score,
        is_consistent=len(distinct) == 1,
    )
