"""Keyword, phrase and weighted-term extraction across platforms."""

import logging
import re
from typing import Dict, List, Mapping, Tuple

import nltk
from nltk.tokenize import TreebankWordTokenizer
from sklearn.feature_extraction.text import TfidfVectorizer

from ..core.constants import KeywordConstants
from ..core.models import KeywordPresence, KeywordResult, PlatformKeywords, WeightedTerm
from ..core.text import (
    content_terms,
    ensure_nltk_data,
    filter_keywords,
    tokenize,
    unique_in_order,
)

logger = logging.getLogger(__name__)

_SENTENCE_BREAK = re.compile(r"(?<=[.!?])\s+|\n+")
_WORD_SPLITTER = TreebankWordTokenizer()
_CHUNKER = nltk.RegexpParser(KeywordConstants.CHUNK_GRAMMAR)


def _split_sentences(text: str) -> List[List[str]]:
    sentences = []
    for chunk in _SENTENCE_BREAK.split(text):
        words = _WORD_SPLITTER.tokenize(chunk)
        if words:
            sentences.append(words)
    return sentences


def extract_phrases(text: str) -> Tuple[List[str], List[str]]:
    """Noun and verb phrases in source order, first few of each."""
    sentences = _split_sentences(text)
    if not sentences:
        return [], []

    ensure_nltk_data()
    nouns, verbs = [], []
    for tagged in nltk.pos_tag_sents(sentences):
        tree = _CHUNKER.parse(tagged)
        for subtree in tree.subtrees(filter=lambda t: t.label() in ("NP", "VP")):
            phrase = " ".join(word for word, _ in subtree.leaves())
            if subtree.label() == "NP":
                nouns.append(phrase)
            else:
                verbs.append(phrase)

    return nouns[:KeywordConstants.MAX_NOUN_PHRASES], verbs[:KeywordConstants.MAX_VERB_PHRASES]


def keyword_vocabulary(text: str) -> List[str]:
    """Every distinct non-stop-word token, in first-seen order."""
    return unique_in_order(filter_keywords(tokenize(text)))


def extract_keywords(text: str) -> List[str]:
    """The first few keywords of the vocabulary."""
    return keyword_vocabulary(text)[:KeywordConstants.MAX_KEYWORDS]


def _identity(terms):
    return terms


def weighted_terms(content_set: Mapping[str, str]) -> Dict[str, List[WeightedTerm]]:
    """Top TF-IDF terms per platform, treating each platform as one document."""
    labels = list(content_set)
    documents = [content_terms(tokenize(content_set[label])) for label in labels]
    if not any(documents):
        return {label: [] for label in labels}

    vectorizer = TfidfVectorizer(analyzer=_identity, norm=None)
    matrix = vectorizer.fit_transform(documents)
    vocabulary = vectorizer.vocabulary_

    results = {}
    for row, label in enumerate(labels):
        terms = unique_in_order(documents[row])
        scored = [WeightedTerm(term, float(matrix[row, vocabulary[term]])) for term in terms]
        # sorted() is stable, so equal weights keep first-occurrence order
        scored = sorted(scored, key=lambda t: -t.weight)
        results[label] = scored[:KeywordConstants.MAX_WEIGHTED_TERMS]
    return results


def keyword_presence(
    platform_keywords: Mapping[str, PlatformKeywords],
    vocabularies: Mapping[str, List[str]]
) -> Dict[str, KeywordPresence]:
    """Which platforms list each keyword.

    The terms come from every platform's full vocabulary, in platform order,
    but a platform only counts when the term made its capped keyword list,
    so a term can have a count of 0.
    """
    all_keywords = unique_in_order(
        kw for vocabulary in vocabularies.values() for kw in vocabulary
    )
    presence = {}
    for kw in all_keywords:
        found = tuple(label for label, keywords in platform_keywords.items() if kw in keywords.keywords)
        presence[kw] = KeywordPresence(count=len(found), platforms=found)
    return presence


def keyword_consistency(consistent: List[str], distinct_count: int) -> float:
    """Shared keywords over min(cap, distinct keywords); 0 with no keywords."""
    if distinct_count == 0:
        return 0.0
    return len(consistent) / min(KeywordConstants.SCORE_DENOMINATOR_CAP, distinct_count)


def analyze_keywords(content_set: Mapping[str, str]) -> KeywordResult:
    """Extract keywords per platform and measure how widely they are shared."""
    tfidf = weighted_terms(content_set)

    platforms, vocabularies = {}, {}
    for label, text in content_set.items():
        vocabularies[label] = keyword_vocabulary(text)
        nouns, verbs = extract_phrases(text)
        platforms[label] = PlatformKeywords(
            top_nouns=tuple(nouns),
            top_verbs=tuple(verbs),
            keywords=tuple(vocabularies[label][:KeywordConstants.MAX_KEYWORDS]),
            top_weighted_terms=tuple(tfidf[label]),
        )

    presence = keyword_presence(platforms, vocabularies)
    consistent = [kw for kw, pr in presence.items() if pr.count == len(platforms)]
    score = keyword_consistency(consistent, len(presence))
    logger.debug(f"{len(consistent)} of {len(presence)} keywords shared by all platforms")

    return KeywordResult(
        platforms=platforms,
        keyword_presence=presence,
        consistent_keywords=tuple(consistent),
        consistency_score=score,
    )
