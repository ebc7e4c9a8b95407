"""Tag suggestions: explicit page keywords first, then the most frequent
content words of the article body."""
from __future__ import annotations
import logging
from collections import Counter
from typing import Iterable, List, Optional, Tuple
from .config import KeywordConfig
from .datatypes import TagList
from .preprocessing import tokenize

logger = logging.getLogger(__name__)


def rank_frequent_tokens(text: str, limit: int = 12) -> List[Tuple[str, int]]:
    """Keyword-mode tokens by count, descending; ties keep first-occurrence order."""
    counts = Counter(tokenize(text, "keyword"))
    # Counter keeps insertion (first occurrence) order and sorted() is stable
    ranked = sorted(counts.items(), key=lambda kv: -kv[1])
    return ranked[:max(0, limit)]


def parse_keyword_metadata(raw: Optional[str]) -> List[str]:
    """Split a comma separated meta keywords value into trimmed entries."""
    if not isinstance(raw, str):
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def _clean_explicit(keywords: Optional[Iterable[str]]) -> List[str]:
    if keywords is None:
        return []
    if isinstance(keywords, str):
        keywords = [keywords]
    cleaned = []
    for kw in keywords:
        if not isinstance(kw, str):
            logger.debug("Skipping non-string keyword %r", kw)
            continue
        kw = kw.strip().lower()
        if kw:
            cleaned.append(kw)
    return cleaned


def _dedupe(tags: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(tags))


def extract_keywords(text: str, explicit_keywords: Optional[Iterable[str]] = (),
                     config: Optional[KeywordConfig] = None) -> TagList:
    """
    Build the tag list for a document.

    Args:
        text: article body; may be empty or not a string
        explicit_keywords: ordered keywords from page metadata
        config: caps for the frequency list and the final list

    Returns:
        Explicit keywords followed by frequent body tokens, deduplicated and
        capped to ``max_tags`` (``max_tags_without_body`` when there is no
        body text).
    """
    cfg = (config or KeywordConfig()).normalized()
    explicit = _clean_explicit(explicit_keywords)
    if not isinstance(text, str) or not text.strip():
        return _dedupe(explicit)[:cfg.max_tags_without_body]

    frequent = [tok for tok, _ in rank_frequent_tokens(text, limit=cfg.top_frequent)]
    tags = _dedupe(explicit + frequent)[:cfg.max_tags]
    logger.debug("Extracted %d tag(s) (%d explicit)", len(tags), len(explicit))
    return tags
