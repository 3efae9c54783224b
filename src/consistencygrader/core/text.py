"""Tokenization and lexical helpers shared by every analysis."""

import logging
import threading
from typing import Iterable, List

import nltk
from nltk.tokenize import RegexpTokenizer
from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

from .config import settings
from .constants import KeywordConstants

logger = logging.getLogger(__name__)

# Unicode-aware word characters; punctuation never forms a token
_WORD_TOKENIZER = RegexpTokenizer(r"\w+")

STOP_WORDS = frozenset(ENGLISH_STOP_WORDS)

# NLTK resources needed for part-of-speech tagging: (search path, package id)
NLTK_RESOURCES = (
    ("taggers/averaged_perceptron_tagger_eng", "averaged_perceptron_tagger_eng"),
)

_nltk_ready = False
_nltk_lock = threading.Lock()


def tokenize(text: str) -> List[str]:
    """Split text into lowercase word tokens."""
    if not text:
        return []
    return _WORD_TOKENIZER.tokenize(text.lower())


def is_stop_word(token: str) -> bool:
    return token.lower() in STOP_WORDS


def content_terms(tokens: Iterable[str]) -> List[str]:
    """Drop stop words, keeping order and duplicates."""
    return [t for t in tokens if t not in STOP_WORDS]


def filter_keywords(tokens: Iterable[str]) -> List[str]:
    """Keep tokens long enough to be keywords and not stop words."""
    return [
        t for t in tokens
        if len(t) >= KeywordConstants.MIN_KEYWORD_LENGTH and t not in STOP_WORDS
    ]


def unique_in_order(items: Iterable[str]) -> List[str]:
    """Deduplicate, preserving first-seen order."""
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def ensure_nltk_data() -> None:
    """Make sure the NLTK tagger data is available, downloading it if allowed."""
    global _nltk_ready
    if _nltk_ready:
        return

    with _nltk_lock:
        if _nltk_ready:
            return
        _load_nltk_resources()
        _nltk_ready = True


def _load_nltk_resources() -> None:
    if settings.nltk_data_dir and settings.nltk_data_dir not in nltk.data.path:
        nltk.data.path.append(settings.nltk_data_dir)

    for resource_path, package in NLTK_RESOURCES:
        try:
            nltk.data.find(resource_path)
        except LookupError:
            if not settings.nltk_auto_download:
                raise
            logger.info(f"Downloading NLTK resource '{package}'")
            download_dir = settings.nltk_data_dir or None
            if not nltk.download(package, download_dir=download_dir, quiet=True):
                raise LookupError(f"NLTK resource '{package}' could not be downloaded")
            nltk.data.find(resource_path)
