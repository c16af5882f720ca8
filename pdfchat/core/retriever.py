"""
Cosine-similarity ranking over a document's stored chunk embeddings.

Selects the single best chunk for a query vector. Vectors are validated
before division so a zero-norm or mismatched vector surfaces as
SimilarityError instead of NaN.

Dependencies: numpy, pdfchat.core.exceptions
System role: RAG retrieval business logic
"""

from dataclasses import dataclass
from collections.abc import Sequence

import numpy as np

from pdfchat.core.exceptions import SimilarityError


@dataclass(frozen=True)
class RankedMatch:
    """Candidate position and its cosine similarity to the query."""

    index: int
    score: float


def _as_vector(values: Sequence[float], label: str) -> np.ndarray:
    vector = np.asarray(values, dtype=np.float64)
    if vector.ndim != 1 or vector.size == 0:
        raise SimilarityError(
            f"{label} must be a non-empty one-dimensional vector",
            details={"shape": list(vector.shape)},
        )
    return vector


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity of two vectors.

    Args:
        a: First vector
        b: Second vector

    Returns:
        float: dot(a, b) / (|a| * |b|), in [-1, 1]

    Raises:
        SimilarityError: Dimension mismatch or zero-magnitude vector
    """
    va = _as_vector(a, "first vector")
    vb = _as_vector(b, "second vector")
    if va.shape != vb.shape:
        raise SimilarityError(
            f"Vector dimensions differ: {va.size} != {vb.size}",
        )
    norm_a = np.linalg.norm(va)
    norm_b = np.linalg.norm(vb)
    if norm_a == 0 or norm_b == 0:
        raise SimilarityError("Cannot compute cosine similarity of a zero-magnitude vector")
    return float(np.dot(va, vb) / (norm_a * norm_b))


def rank_by_similarity(
    query: Sequence[float],
    candidates: Sequence[Sequence[float]],
) -> list[RankedMatch]:
    """
    Score every candidate against the query and sort best first.

    Ties keep the lower index first.

    Args:
        query: Query vector
        candidates: Candidate vectors (stored chunk embeddings)

    Returns:
        list[RankedMatch]: All candidates, descending by score

    Raises:
        SimilarityError: No candidates, zero-magnitude vector, or dimension mismatch
    """
    if len(candidates) == 0:
        raise SimilarityError("No candidate vectors to rank")

    q = _as_vector(query, "query vector")
    q_norm = np.linalg.norm(q)
    if q_norm == 0:
        raise SimilarityError("Query vector has zero magnitude")

    try:
        matrix = np.asarray(candidates, dtype=np.float64)
    except ValueError as e:
        raise SimilarityError(f"Candidate vectors have inconsistent dimensions: {e}") from e

    if matrix.ndim != 2 or matrix.shape[1] != q.size:
        raise SimilarityError(
            "Candidate vector dimensions do not match the query",
            details={"query_dim": int(q.size), "candidate_shape": list(matrix.shape)},
        )

    norms = np.linalg.norm(matrix, axis=1)
    zero_rows = np.flatnonzero(norms == 0)
    if zero_rows.size:
        raise SimilarityError(
            "Candidate vector has zero magnitude",
            details={"index": int(zero_rows[0])},
        )

    scores = (matrix @ q) / (norms * q_norm)
    # stable sort on negated scores keeps lower index first on ties
    order = np.argsort(-scores, kind="stable")
    return [RankedMatch(index=int(i), score=float(scores[i])) for i in order]


def select_best_match(
    query: Sequence[float],
    candidates: Sequence[Sequence[float]],
) -> RankedMatch:
    """
    Return the top-1 candidate for the query.

    Args:
        query: Query vector
        candidates: Candidate vectors

    Returns:
        RankedMatch: Highest-scoring candidate (lowest index on ties)
    """
    return rank_by_similarity(query, candidates)[0]
