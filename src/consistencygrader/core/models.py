"""Data models for the Content Consistency Grader."""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Any


class ToneCategory(Enum):
    """Tone categories, in tie-breaking order."""
    FORMAL = "formal"
    CASUAL = "casual"
    PROFESSIONAL = "professional"
    PROMOTIONAL = "promotional"


class RecommendationCategory(Enum):
    SENTIMENT = "sentiment"
    KEYWORDS = "keywords"
    TONE = "tone"
    SIMILARITY = "similarity"


@dataclass(frozen=True)
class PlatformSentiment:
    """Lexicon polarity for one platform's content."""
    raw_score: int
    comparative_score: float
    positive_words: Tuple[str, ...] = ()
    negative_words: Tuple[str, ...] = ()
    compound: float = 0.0
    label: str = "NEUTRAL"

    @property
    def positive_count(self) -> int:
        return len(self.positive_words)

    @property
    def negative_count(self) -> int:
        return len(self.negative_words)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.raw_score,
            "comparative": self.comparative_score,
            "positive": self.positive_count,
            "negative": self.negative_count,
            "positiveWords": list(self.positive_words),
            "negativeWords": list(self.negative_words),
            "compound": self.compound,
            "label": self.label,
        }


@dataclass(frozen=True)
class SentimentResult:
    """Sentiment for every platform plus cross-platform variance."""
    platforms: Dict[str, PlatformSentiment]
    variance: float
    is_consistent: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "platformSentiments": {p: s.to_dict() for p, s in self.platforms.items()},
            "variance": self.variance,
            "consistent": self.is_consistent,
        }


@dataclass(frozen=True)
class WeightedTerm:
    """A TF-IDF term and its weight."""
    term: str
    weight: float

    def to_dict(self) -> Dict[str, Any]:
        return {"term": self.term, "tfidf": self.weight}


@dataclass(frozen=True)
class PlatformKeywords:
    """Keywords, phrases and weighted terms for one platform."""
    top_nouns: Tuple[str, ...]
    top_verbs: Tuple[str, ...]
    keywords: Tuple[str, ...]
    top_weighted_terms: Tuple[WeightedTerm, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "topNouns": list(self.top_nouns),
            "topVerbs": list(self.top_verbs),
            "keywords": list(self.keywords),
            "topTerms": [t.to_dict() for t in self.top_weighted_terms],
        }


@dataclass(frozen=True)
class KeywordPresence:
    """How many platforms use a keyword, and which."""
    count: int
    platforms: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"count": self.count, "platforms": list(self.platforms)}


@dataclass(frozen=True)
class KeywordResult:
    """Keyword analysis across all platforms."""
    platforms: Dict[str, PlatformKeywords]
    keyword_presence: Dict[str, KeywordPresence]
    consistent_keywords: Tuple[str, ...]
    consistency_score: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "platformKeywords": {p: k.to_dict() for p, k in self.platforms.items()},
            "consistentKeywords": list(self.consistent_keywords),
            "keywordPresence": {kw: pr.to_dict() for kw, pr in self.keyword_presence.items()},
            "consistencyScore": self.consistency_score,
        }


@dataclass(frozen=True)
class PlatformTone:
    """Tone marker rates for one platform."""
    scores: Dict[ToneCategory, float]
    dominant: ToneCategory

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scores": {tone.value: score for tone, score in self.scores.items()},
            "dominantTone": self.dominant.value,
        }


@dataclass(frozen=True)
class ToneResult:
    """Tone analysis across all platforms."""
    platforms: Dict[str, PlatformTone]
    consistency_score: float
    is_consistent: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "platformTones": {p: t.to_dict() for p, t in self.platforms.items()},
            "consistencyScore": self.consistency_score,
            "consistent": self.is_consistent,
        }


@dataclass(frozen=True)
class SimilarityResult:
    """Symmetric pairwise similarity between platforms."""
    matrix: Dict[str, Dict[str, float]]
    average_similarity: float

    def pairs(self) -> List[Tuple[str, str]]:
        """Unordered platform pairs in input order."""
        labels = list(self.matrix)
        return [
            (labels[i], labels[j])
            for i in range(len(labels))
            for j in range(i + 1, len(labels))
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matrix": {a: dict(row) for a, row in self.matrix.items()},
            "averageSimilarity": self.average_similarity,
        }


@dataclass(frozen=True)
class Recommendation:
    """A single actionable finding."""
    category: RecommendationCategory
    title: str
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "title": self.title,
            "description": self.description,
        }


@dataclass(frozen=True)
class AnalysisReport:
    """Complete result of one consistency analysis."""
    overall_score: int
    sentiment: SentimentResult
    keywords: KeywordResult
    tone: ToneResult
    similarity: SimilarityResult
    recommendations: Tuple[Recommendation, ...] = field(default_factory=tuple)

    @property
    def is_already_consistent(self) -> bool:
        """True when no recommendation fired."""
        return not self.recommendations

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overallConsistencyScore": self.overall_score,
            "sentimentAnalysis": self.sentiment.to_dict(),
            "keywordAnalysis": self.keywords.to_dict(),
            "toneAnalysis": self.tone.to_dict(),
            "similarityMatrix": self.similarity.to_dict(),
            "recommendations": [r.to_dict() for r in self.recommendations],
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
