"""Pairwise lexical similarity between platforms."""

import logging
from typing import AbstractSet, Dict, Mapping

from ..core.models import SimilarityResult
from ..core.text import tokenize

logger = logging.getLogger(__name__)


def jaccard(a: AbstractSet[str], b: AbstractSet[str]) -> float:
    """|a & b| / |a | b|; two empty sets count as identical."""
    if not a and not b:
        return 1.0
    return len(a & b) / len(a | b)


def build_similarity_matrix(content_set: Mapping[str, str]) -> SimilarityResult:
    """Jaccard similarity for every platform pair, mirrored across the diagonal."""
    labels = list(content_set)
    token_sets = {label: set(tokenize(content_set[label])) for label in labels}

    matrix: Dict[str, Dict[str, float]] = {label: {} for label in labels}
    pair_scores = []
    for i, first in enumerate(labels):
        matrix[first][first] = 1.0
        for second in labels[i + 1:]:
            value = jaccard(token_sets[first], token_sets[second])
            matrix[first][second] = value
            matrix[second][first] = value
            pair_scores.append(value)

    # Re-key rows so every row lists platforms in input order
    matrix = {a: {b: matrix[a][b] for b in labels} for a in labels}

    average = sum(pair_scores) / len(pair_scores) if pair_scores else 0.0
    logger.debug(f"Average similarity over {len(pair_scores)} pairs: {average:.4f}")
    return SimilarityResult(matrix=matrix, average_similarity=average)
