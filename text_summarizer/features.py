from __future__ import annotations
from typing import Dict, List, Sequence
from collections import Counter
import math
import numpy as np
from .datatypes import Document, TermVector


def compute_tf(tokens: Sequence[str]) -> Dict[str, int]:
    """TF = raw count of the term inside one sentence."""
    return dict(Counter(tokens))


def compute_idf(doc: Document) -> Dict[str, float]:
    """
    Smoothed IDF, each sentence counted as one 'document':
      idf(t) = ln((N + 1) / (DF(t) + 1)) + 1
    """
    n = len(doc.sentences)
    df: Counter = Counter()
    for s in doc.sentences:
        df.update(set(s.tokens))
    return {term: math.log((n + 1.0) / (count + 1.0)) + 1.0 for term, count in df.items()}


def compute_tfidf_vector(tokens: Sequence[str], idf_scores: Dict[str, float]) -> TermVector:
    """TF-IDF(t, s) = TF(t, s) * IDF(t)"""
    return {t: c * idf_scores.get(t, 0.0) for t, c in compute_tf(tokens).items()}


def compute_tfidf_vectors(doc: Document) -> List[TermVector]:
    idf_scores = compute_idf(doc)
    return [compute_tfidf_vector(s.tokens, idf_scores) for s in doc.sentences]


def _norm(v: TermVector) -> float:
    return math.sqrt(sum(w * w for w in v.values()))


def cosine_similarity(v1: TermVector, v2: TermVector) -> float:
    """Cosine similarity for sparse vectors (dict term -> weight)."""
    n1, n2 = _norm(v1), _norm(v2)
    if n1 == 0.0 or n2 == 0.0:
        return 0.0
    if len(v2) < len(v1):
        v1, v2 = v2, v1
    dot = sum(w * v2[t] for t, w in v1.items() if t in v2)
    return dot / (n1 * n2)


def compute_similarity_matrix(vectors: Sequence[TermVector], threshold: float = 0.0) -> np.ndarray:
    """
    Symmetric N x N cosine similarity matrix with a zero diagonal.

    Entries below ``threshold`` are zeroed when threshold > 0; the remaining
    weights are left as they are.
    """
    n = len(vectors)
    M = np.zeros((n, n), dtype=float)
    for i in range(n):
        for j in range(i + 1, n):
            M[i, j] = M[j, i] = cosine_similarity(vectors[i], vectors[j])
    if threshold > 0:
        M[M < threshold] = 0.0
    return M
