from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Tuple
import numpy as np
from .datatypes import ScoreVector

logger = logging.getLogger(__name__)

@dataclass
class RankResult:
    scores: ScoreVector
    iterations: int
    converged: bool

def _transition_matrix(simM: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Row-normalize the similarity matrix by each row's outgoing weight.

    Rows with no outgoing weight (isolated sentences) are flagged as dangling;
    their score is spread evenly over all N nodes instead.
    """
    out_sum = simM.sum(axis=1)
    dangling = out_sum == 0
    denom = np.where(dangling, 1.0, out_sum)
    return simM / denom[:, None], dangling

def rank_sentences(simM, damping: float = 0.85, max_iter: int = 100, tolerance: float = 1e-6) -> RankResult:
    """
    PageRank over the sentence similarity graph.

    PageRank Formula: PR(Si) = (1-d)/N + d × Σ_j (w_ji / C(Sj)) × PR(Sj)
    where C(Sj) is the total outgoing weight of Sj. A sentence with no
    outgoing weight links to all N sentences with weight 1 (C = N).

    Args:
        simM: N x N non-negative similarity matrix
        damping: Damping factor (typically 0.85)
        max_iter: Maximum number of iterations
        tolerance: L1 convergence tolerance

    Returns:
        RankResult; when the iteration cap is hit first the last vector is
        returned with converged=False.
    """
    M = np.asarray(simM, dtype=float)
    n = M.shape[0] if M.ndim == 2 else 0
    if n == 0:
        return RankResult(scores=[], iterations=0, converged=True)

    T, dangling = _transition_matrix(M)
    teleport = (1.0 - damping) / n
    pr_scores = np.full(n, 1.0 / n)

    converged = False
    iteration = 0
    for iteration in range(1, max_iter + 1):
        spread = pr_scores[dangling].sum() / n
        new_pr_scores = (teleport + damping * spread) + damping * (T.T @ pr_scores)
        diff = float(np.abs(new_pr_scores - pr_scores).sum())
        pr_scores = new_pr_scores
        if diff < tolerance:
            converged = True
            break

    if converged:
        logger.debug("PageRank converged after %d iteration(s)", iteration)
    else:
        logger.debug("PageRank stopped at max_iter=%d without converging", max_iter)
    return RankResult(scores=pr_scores.tolist(), iterations=iteration, converged=converged)

def pagerank_scores(simM, damping: float = 0.85, max_iter: int = 100, tolerance: float = 1e-6) -> List[float]:
    return rank_sentences(simM, damping=damping, max_iter=max_iter, tolerance=tolerance).scores
