"""Tests for rule-based recommendations."""

from consistencygrader.analysis.recommendations import generate_recommendations
from consistencygrader.core.models import (
    KeywordPresence,
    KeywordResult,
    PlatformKeywords,
    PlatformSentiment,
    PlatformTone,
    RecommendationCategory,
    SentimentResult,
    SimilarityResult,
    ToneCategory,
    ToneResult,
)

LABELS = ("website", "twitter", "email")


def _sentiment(comparatives, consistent=True):
    return SentimentResult(
        platforms={label: PlatformSentiment(raw_score=0, comparative_score=value)
                   for label, value in zip(LABELS, comparatives)},
        variance=0.0 if consistent else 0.5,
        is_consistent=consistent,
    )


def _keywords(presence):
    empty = PlatformKeywords(top_nouns=(), top_verbs=(), keywords=())
    return KeywordResult(
        platforms={label: empty for label in LABELS},
        keyword_presence={kw: KeywordPresence(len(p), tuple(p)) for kw, p in presence.items()},
        consistent_keywords=(),
        consistency_score=0.0,
    )


def _tone(dominants):
    platforms = {
        label: PlatformTone(scores={t: 0.0 for t in ToneCategory}, dominant=tone)
        for label, tone in zip(LABELS, dominants)
    }
    distinct = len(set(dominants))
    return ToneResult(platforms=platforms, consistency_score=1 - (distinct - 1) / 3,
                      is_consistent=distinct == 1)


def _similarity(ab, ac, bc):
    a, b, c = LABELS
    matrix = {
        a: {a: 1.0, b: ab, c: ac},
        b: {a: ab, b: 1.0, c: bc},
        c: {a: ac, b: bc, c: 1.0},
    }
    return SimilarityResult(matrix=matrix, average_similarity=(ab + ac + bc) / 3)


def _consistent_inputs():
    return dict(
        sentiment=_sentiment([0.1, 0.1, 0.1]),
        keywords=_keywords({"coffee": LABELS}),
        tone=_tone([ToneCategory.FORMAL] * 3),
        similarity=_similarity(0.8, 0.7, 0.9),
    )


def test_consistent_content_has_no_recommendations():
    assert generate_recommendations(**_consistent_inputs()) == []


def test_sentiment_names_most_and_least_positive():
    inputs = _consistent_inputs()
    inputs["sentiment"] = _sentiment([0.4, -0.3, 0.1], consistent=False)
    [rec] = generate_recommendations(**inputs)
    assert rec.category is RecommendationCategory.SENTIMENT
    assert rec.title == "Align emotional tone across platforms"
    assert rec.description.startswith("Your content on website has a more positive tone compared to twitter.")


class TestKeywordRule:
    """Partially present keywords only."""

    def test_lists_missing_platforms(self):
        inputs = _consistent_inputs()
        inputs["keywords"] = _keywords({
            "coffee": LABELS,
            "beans": ("website",),
            "roast": ("website", "email"),
        })
        [rec] = generate_recommendations(**inputs)
        assert rec.category is RecommendationCategory.KEYWORDS
        assert '"roast" (missing from twitter)' in rec.description
        assert '"beans" (missing from twitter, email)' in rec.description
        assert '"coffee"' not in rec.description

    def test_orders_by_count_then_first_seen(self):
        inputs = _consistent_inputs()
        inputs["keywords"] = _keywords({
            "alpha": ("website",),
            "bravo": ("twitter",),
            "charlie": ("website", "twitter"),
            "delta": ("email",),
        })
        [rec] = generate_recommendations(**inputs)
        body = rec.description
        assert body.index('"charlie"') < body.index('"alpha"') < body.index('"bravo"')
        assert '"delta"' not in body

    def test_never_lists_absent_keywords(self):
        inputs = _consistent_inputs()
        inputs["keywords"] = _keywords({"ghost": (), "coffee": LABELS})
        assert generate_recommendations(**inputs) == []


def test_tone_lists_every_platform():
    inputs = _consistent_inputs()
    inputs["tone"] = _tone([ToneCategory.FORMAL, ToneCategory.CASUAL, ToneCategory.FORMAL])
    [rec] = generate_recommendations(**inputs)
    assert rec.category is RecommendationCategory.TONE
    assert "website (formal), twitter (casual), email (formal)" in rec.description


class TestSimilarityRule:
    """Lowest-similarity pair below 0.5."""

    def test_names_lowest_pair(self):
        inputs = _consistent_inputs()
        inputs["similarity"] = _similarity(0.6, 0.2, 0.4)
        [rec] = generate_recommendations(**inputs)
        assert rec.title == "Align messaging between platforms"
        assert "website and email" in rec.description

    def test_threshold_is_exclusive(self):
        inputs = _consistent_inputs()
        inputs["similarity"] = _similarity(0.5, 0.5, 0.5)
        assert generate_recommendations(**inputs) == []

    def test_first_pair_wins_ties(self):
        inputs = _consistent_inputs()
        inputs["similarity"] = _similarity(0.9, 0.1, 0.1)
        [rec] = generate_recommendations(**inputs)
        assert "website and email" in rec.description


def test_rules_fire_in_fixed_order():
    recs = generate_recommendations(
        sentiment=_sentiment([1.0, -1.0, 0.0], consistent=False),
        keywords=_keywords({"beans": ("website",)}),
        tone=_tone([ToneCategory.FORMAL, ToneCategory.PROMOTIONAL, ToneCategory.CASUAL]),
        similarity=_similarity(0.1, 0.2, 0.3),
    )
    assert [r.category for r in recs] == [
        RecommendationCategory.SENTIMENT,
        RecommendationCategory.KEYWORDS,
        RecommendationCategory.TONE,
        RecommendationCategory.SIMILARITY,
    ]
