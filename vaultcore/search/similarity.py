# Path: vaultcore/search/similarity.py
# Purpose: Score vectors by cosine similarity and select the top-K matches.
# Layer: core/search.
# Details: Sorting is stable, so equal scores keep their input order.

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from vaultcore.embedders.base import Embedder
from vaultcore.errors import DimensionMismatchError
from vaultcore.models.domain import Document, SimilarityResult


def cosine_similarity(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    """
    Compute cosine similarity between two vectors.

    Args:
        vec_a: First vector
        vec_b: Second vector

    Returns:
        Score between -1 and 1; 0.0 if either vector has zero magnitude

    Raises:
        DimensionMismatchError: If the vectors have different lengths
    """

    a = np.asarray(vec_a, dtype=np.float64).ravel()
    b = np.asarray(vec_b, dtype=np.float64).ravel()
    if a.shape[0] != b.shape[0]:
        raise DimensionMismatchError(a.shape[0], b.shape[0])

    magnitude_a = np.linalg.norm(a)
    magnitude_b = np.linalg.norm(b)
    if magnitude_a == 0 or magnitude_b == 0:
        return 0.0

    score = float(np.dot(a, b) / (magnitude_a * magnitude_b))
    return max(-1.0, min(1.0, score))


def rank_vectors(query: np.ndarray, matrix: np.ndarray, k: int) -> List[Tuple[int, float]]:
    """Return ``(row, score)`` pairs for the ``k`` rows of ``matrix`` most similar to ``query``."""

    if k <= 0 or matrix.shape[0] == 0:
        return []
    if matrix.shape[1] != query.shape[0]:
        raise DimensionMismatchError(matrix.shape[1], query.shape[0])

    rows = matrix.astype(np.float64)
    q = query.astype(np.float64)
    norms = np.linalg.norm(rows, axis=1) * np.linalg.norm(q)
    dots = rows @ q
    scores = np.divide(dots, norms, out=np.zeros_like(dots), where=norms > 0)
    scores = np.clip(scores, -1.0, 1.0)

    order = np.argsort(-scores, kind="stable")[:k]
    return [(int(row), float(scores[row])) for row in order]


def find_similar(
    embedder: Embedder,
    query: str,
    items: Sequence[Document],
    top_k: int = 5,
) -> List[SimilarityResult]:
    """
    Rank ``items`` against ``query`` and return the best ``top_k``.

    The query is embedded once; items reuse their precomputed embedding when
    present and are embedded on the fly otherwise.
    """

    if top_k <= 0:
        return []

    query_embedding = embedder.embed_text(query)
    results: List[SimilarityResult] = []
    for item in items:
        embedding = item.embedding if item.embedding is not None else embedder.embed_text(item.text)
        score = cosine_similarity(query_embedding, embedding)
        results.append(SimilarityResult(id=item.id, text=item.text, score=score))

    results.sort(key=lambda result: -result.score)
    return results[:top_k]
