"""Constants and configuration values for the Content Consistency Grader."""

from types import MappingProxyType


# Input Constants
class InputConstants:
    """Constants related to the submitted content set."""

    MIN_PLATFORMS = 2  # minimum non-blank samples needed for a comparison
    WRAPPER_KEY = "platformContent"  # request body key used by the web client


# Sentiment Constants
class SentimentConstants:
    """Constants for sentiment scoring."""

    CONSISTENCY_VARIANCE_THRESHOLD = 0.2  # variance below this is consistent
    POSITIVE_COMPOUND = 0.05  # VADER compound at or above this is POSITIVE
    NEGATIVE_COMPOUND = -0.05  # VADER compound at or below this is NEGATIVE


# Keyword Constants
class KeywordConstants:
    """Constants for keyword extraction."""

    MAX_NOUN_PHRASES = 5  # noun phrases kept per platform
    MAX_VERB_PHRASES = 5  # verb phrases kept per platform
    MAX_KEYWORDS = 10  # keywords kept per platform
    MIN_KEYWORD_LENGTH = 3  # shorter tokens are not keywords
    MAX_WEIGHTED_TERMS = 10  # TF-IDF terms kept per platform
    SCORE_DENOMINATOR_CAP = 10  # consistency = shared / min(cap, distinct)

    # Chunk grammar for the NLTK RegexpParser
    CHUNK_GRAMMAR = r"""
        NP: {<JJ.*>*<NN.*>+}
        VP: {<MD>?<VB.*>+}
    """


# Tone Constants
class ToneConstants:
    """Constants for tone classification."""

    # Keyed by ToneCategory value, in category order
    MARKERS = MappingProxyType({
        "formal": ("therefore", "consequently", "furthermore", "thus", "hence", "regarding"),
        "casual": ("awesome", "cool", "yeah", "super", "totally", "btw", "lol"),
        "professional": ("accordingly", "additionally", "significantly", "importantly", "notably"),
        "promotional": ("amazing", "incredible", "exclusive", "limited", "opportunity", "best"),
    })
    SCORE_SCALE = 100.0  # marker hits per 100 words


# Similarity Constants
class SimilarityConstants:
    """Constants for the similarity matrix."""

    LOW_SIMILARITY_THRESHOLD = 0.5  # pairs below this get a recommendation


# Scoring Constants
class ScoringConstants:
    """Constants for the overall consistency score."""

    WEIGHTS = MappingProxyType({
        "sentiment": 0.20,
        "keywords": 0.30,
        "tone": 0.25,
        "similarity": 0.25,
    })

    # Score bands (0-100), checked top-down
    SCORE_BANDS = (
        (80, "excellent"),
        (60, "good"),
        (40, "fair"),
        (0, "poor"),
    )


# Recommendation Constants
class RecommendationConstants:
    """Constants for recommendation generation."""

    MAX_KEYWORD_SUGGESTIONS = 3  # partially-present keywords to mention
    ALREADY_CONSISTENT_MESSAGE = "Great job! Your content is already highly consistent."


# Summary Constants
class SummaryConstants:
    """Thresholds for the per-dimension summary sentences."""

    KEYWORD_CONSISTENT = 0.7
    TONE_CONSISTENT = 0.7
    SIMILARITY_CONSISTENT = 0.6


# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    YAML_SUFFIXES = (".yaml", ".yml")
