"""Engine configuration.

Every option the summarizer understands is enumerated here with its default.
Callers may pass loose option mappings (camelCase names as produced by the
browser side, or snake_case); values are coerced and clamped instead of
rejected, and unknown keys are ignored.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Mapping, Optional

logger = logging.getLogger(__name__)

_ALIASES = {
    "numSentences": "num_sentences",
    "ratio": "ratio",
    "minSentenceLength": "min_sentence_length",
    "similarityThreshold": "similarity_threshold",
    "damping": "damping",
    "maxIter": "max_iter",
    "tolerance": "tolerance",
}


def _clamp(value, low=None, high=None):
    if low is not None and value < low:
        return low
    if high is not None and value > high:
        return high
    return value


@dataclass(frozen=True)
class SummaryConfig:
    num_sentences: int = 3
    ratio: Optional[float] = None  # overrides num_sentences when in (0, 1)
    min_sentence_length: int = 10  # characters
    similarity_threshold: float = 0.0
    damping: float = 0.85
    max_iter: int = 100
    tolerance: float = 1e-6

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "SummaryConfig":
        """Build a config from a loose option mapping.

        Args:
            options: mapping using camelCase or snake_case option names.
                ``None`` values mean "use the default".

        Returns:
            A normalized SummaryConfig.
        """
        if not options:
            return cls()
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in options.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                logger.debug("Ignoring unknown summary option %r", key)
                continue
            if value is None:
                continue
            values[name] = value
        return cls(**values).normalized()

    def normalized(self) -> "SummaryConfig":
        """Return a copy with every field coerced to its type and valid range."""
        ratio = _coerce(self.ratio, float, None, "ratio")
        if ratio is not None and not (0.0 < ratio < 1.0):
            ratio = None
        return replace(
            self,
            num_sentences=_clamp(_coerce(self.num_sentences, int, 3, "num_sentences"), low=1),
            ratio=ratio,
            min_sentence_length=_clamp(
                _coerce(self.min_sentence_length, int, 10, "min_sentence_length"), low=0),
            similarity_threshold=_clamp(
                _coerce(self.similarity_threshold, float, 0.0, "similarity_threshold"), 0.0, 1.0),
            damping=_clamp(_coerce(self.damping, float, 0.85, "damping"), 0.0, 1.0),
            max_iter=_clamp(_coerce(self.max_iter, int, 100, "max_iter"), low=1),
            tolerance=_clamp(_coerce(self.tolerance, float, 1e-6, "tolerance"), low=0.0),
        )


def _coerce(value: Any, kind: Callable[[Any], Any], default: Any, name: str) -> Any:
    if value is None:
        return default
    try:
        if kind is int:
            # "3.7" and 3.7 both become 3
            return int(float(value))
        result = kind(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning("Invalid value %r for %s, using default %r", value, name, default)
        return default
    if result != result:  # NaN
        logger.warning("Invalid value %r for %s, using default %r", value, name, default)
        return default
    return result


@dataclass(frozen=True)
class KeywordConfig:
    top_frequent: int = 12
    max_tags: int = 10
    max_tags_without_body: int = 6

    def normalized(self) -> "KeywordConfig":
        """Return a copy with every cap coerced to a non-negative int."""
        return replace(
            self,
            top_frequent=_clamp(_coerce(self.top_frequent, int, 12, "top_frequent"), low=0),
            max_tags=_clamp(_coerce(self.max_tags, int, 10, "max_tags"), low=0),
            max_tags_without_body=_clamp(
                _coerce(self.max_tags_without_body, int, 6, "max_tags_without_body"), low=0),
        )
