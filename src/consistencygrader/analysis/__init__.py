"""Analysis stages of the consistency pipeline."""

from .sentiment import analyze_sentiment
from .keywords import analyze_keywords
from .tone import analyze_tone
from .similarity import build_similarity_matrix
from .recommendations import generate_recommendations

__all__ = [
    "analyze_sentiment",
    "analyze_keywords",
    "analyze_tone",
    "build_similarity_matrix",
    "generate_recommendations",
]
