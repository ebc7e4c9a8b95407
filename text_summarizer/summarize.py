from __future__ import annotations
import logging
import math
from dataclasses import asdict
from typing import Any, List, Mapping, Sequence, Union
from .config import SummaryConfig
from .datatypes import Document
from .preprocessing import preprocess_text
from .features import compute_tfidf_vectors, compute_similarity_matrix
from .scoring import pagerank_scores

logger = logging.getLogger(__name__)

def _resolve_config(config, options: Mapping[str, Any]) -> SummaryConfig:
    if config is None:
        return SummaryConfig.from_options(options)
    if isinstance(config, Mapping):
        return SummaryConfig.from_options({**config, **options})
    if options:
        merged = asdict(config)
        merged.update(options)
        return SummaryConfig.from_options(merged)
    return config.normalized()

def target_sentence_count(n: int, config: SummaryConfig) -> int:
    if n <= 0:
        return 0
    if config.ratio is not None and 0.0 < config.ratio < 1.0:
        # round half up
        return max(1, int(math.floor(n * config.ratio + 0.5)))
    return min(n, max(1, config.num_sentences))

def select_top_indices(scores: Sequence[float], k: int) -> List[int]:
    """Indices of the k best scores, lower index first on ties, in document order."""
    ranked = sorted(range(len(scores)), key=lambda i: (-scores[i], i))
    return sorted(ranked[:max(0, k)])

def generate_summary(doc: Document, scores: Sequence[float], config: SummaryConfig) -> str:
    k = target_sentence_count(len(doc.sentences), config)
    selected = select_top_indices(scores, k)
    return " ".join(doc.sentences[i].text for i in selected)

def summarize(text: str, config: Union[SummaryConfig, Mapping[str, Any], None] = None,
              **options: Any) -> str:
    """
    Extractive TextRank summary of ``text``.

    Options may be given as a SummaryConfig or a plain mapping, as keyword arguments
    (``numSentences=2`` or ``num_sentences=2``), or both; keyword arguments
    win. Returns "" when the text is not a string or no sentence survives
    the length filter.
    """
    if not isinstance(text, str) or not text.strip():
        return ""
    cfg = _resolve_config(config, options)

    # Pipeline glue
    doc = preprocess_text(text, min_sentence_length=cfg.min_sentence_length)
    if not doc.sentences:
        return ""
    if len(doc.sentences) == 1:
        return doc.sentences[0].text

    vectors = compute_tfidf_vectors(doc)
    simM = compute_similarity_matrix(vectors, threshold=cfg.similarity_threshold)
    scores = pagerank_scores(simM, damping=cfg.damping, max_iter=cfg.max_iter,
                             tolerance=cfg.tolerance)
    summary = generate_summary(doc, scores, cfg)
    logger.debug("Summarized %d sentence(s) into %d char(s)", len(doc.sentences), len(summary))
    return summary

def summarize_with_fallback(text: str, excerpt: str = "",
                            config: Union[SummaryConfig, Mapping[str, Any], None] = None,
                            **options: Any) -> str:
    """Summarize, falling back to ``excerpt`` when the summary is empty or fails."""
    try:
        summary = summarize(text, config=config, **options)
    except Exception:
        logger.exception("Summarization failed, using excerpt")
        return excerpt or ""
    return summary or excerpt or ""
