"""Core modules for the Content Consistency Grader."""

from .models import *
from .config import settings
from .errors import *
from .scoring import *

__all__ = [
    "settings",
    "ToneCategory",
    "RecommendationCategory",
    "PlatformSentiment",
    "SentimentResult",
    "WeightedTerm",
    "PlatformKeywords",
    "KeywordPresence",
    "KeywordResult",
    "PlatformTone",
    "ToneResult",
    "SimilarityResult",
    "Recommendation",
    "AnalysisReport",
    "ConsistencyGraderError",
    "InputValidationError",
    "InternalComputationError",
    "compute_overall_score",
    "score_band",
]
