"""Sentiment analysis modules."""

import logging
from functools import lru_cache
from typing import Dict, List, Mapping

import numpy as np
from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer, negated

from ..core.constants import SentimentConstants
from ..core.models import PlatformSentiment, SentimentResult
from ..core.text import tokenize

logger = logging.getLogger(__name__)


def compound_to_label(compound: float) -> str:
    """Convert VADER compound score to a POSITIVE/NEGATIVE/NEUTRAL label."""
    if compound >= SentimentConstants.POSITIVE_COMPOUND:
        return "POSITIVE"
    if compound <= SentimentConstants.NEGATIVE_COMPOUND:
        return "NEGATIVE"
    return "NEUTRAL"


def population_variance(values: List[float]) -> float:
    """Mean squared deviation (divisor N); 0 for empty or uniform input."""
    if len(set(values)) <= 1:
        return 0.0
    return float(np.var(values))


def follows_negator(tokens: List[str], index: int) -> bool:
    """True when the token before `index` negates it."""
    if index == 0:
        return False
    previous = tokens[index - 1]
    # Contractions are split by the tokenizer: "isn't" -> "isn", "t"
    if previous == "t" and index >= 2:
        previous = tokens[index - 2] + "'t"
    return negated([previous])


class VADERSentimentAnalyzer:
    """Lexicon polarity scorer built on the VADER valence lexicon.

    Each lexicon valence is rounded to an integer word weight. The raw score
    of a text is the sum of the weights of its tokens, with the sign flipped
    for a token that directly follows a negator ("not good"). The comparative
    score divides that by the token count.
    """

    def __init__(self):
        self.analyzer = SentimentIntensityAnalyzer()
        self.weights: Dict[str, int] = {}
        for word, valence in self.analyzer.lexicon.items():
            weight = int(round(valence))
            if weight:
                self.weights[word] = weight

    def analyze(self, text: str) -> PlatformSentiment:
        """Analyze sentiment of text."""
        tokens = tokenize(text)
        raw_score = 0
        positive, negative = [], []
        for index, token in enumerate(tokens):
            weight = self.weights.get(token)
            if weight is None:
                continue
            if follows_negator(tokens, index):
                weight = -weight
            raw_score += weight
            if weight > 0:
                positive.append(token)
            else:
                negative.append(token)

        comparative = raw_score / len(tokens) if tokens else 0.0
        compound = self.analyzer.polarity_scores(text)["compound"] if text else 0.0

        return PlatformSentiment(
            raw_score=raw_score,
            comparative_score=comparative,
            positive_words=tuple(positive),
            negative_words=tuple(negative),
            compound=compound,
            label=compound_to_label(compound),
        )


@lru_cache(maxsize=1)
def get_analyzer() -> VADERSentimentAnalyzer:
    """Shared analyzer; the lexicon is loaded once and only read afterwards."""
    return VADERSentimentAnalyzer()


def analyze_sentiment(content_set: Mapping[str, str]) -> SentimentResult:
    """Score every platform and measure how much their polarity differs."""
    analyzer = get_analyzer()
    platforms = {label: analyzer.analyze(text) for label, text in content_set.items()}

    variance = population_variance([s.comparative_score for s in platforms.values()])
    logger.debug(f"Sentiment variance across {len(platforms)} platforms: {variance:.4f}")

    return SentimentResult(
        platforms=platforms,
        variance=variance,
        is_consistent=variance < SentimentConstants.CONSISTENCY_VARIANCE_THRESHOLD,
    )
