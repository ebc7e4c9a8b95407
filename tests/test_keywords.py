"""Tests for tag extraction."""

from text_summarizer.config import KeywordConfig
from text_summarizer.keywords import extract_keywords, parse_keyword_metadata, rank_frequent_tokens


class TestRankFrequentTokens:
    """Tests for rank_frequent_tokens."""

    def test_counts_descending(self):
        text = "Python code. Python tests. Python code review."
        assert rank_frequent_tokens(text)[:2] == [("python", 3), ("code", 2)]

    def test_ties_keep_first_occurrence(self):
        """Equal counts are ordered by where the word first appears."""
        text = "zebra apple mango apple zebra mango"
        assert [t for t, _ in rank_frequent_tokens(text)] == ["zebra", "apple", "mango"]

    def test_limit(self):
        text = " ".join(f"word{i}" for i in range(30))
        assert len(rank_frequent_tokens(text)) == 12
        assert len(rank_frequent_tokens(text, limit=5)) == 5

    def test_short_and_stopwords_excluded(self):
        assert rank_frequent_tokens("an ox is at the zoo") == [("zoo", 1)]


class TestParseKeywordMetadata:
    """Tests for parse_keyword_metadata."""

    def test_splits_and_trims(self):
        assert parse_keyword_metadata(" Climate, energy ,, policy ") == ["Climate", "energy", "policy"]

    def test_empty(self):
        assert parse_keyword_metadata("") == []
        assert parse_keyword_metadata(None) == []


class TestExtractKeywords:
    """Tests for extract_keywords."""

    def test_explicit_first_then_frequent(self):
        text = "Rockets launch satellites. Rockets need fuel. Satellites orbit."
        tags = extract_keywords(text, ["Space", "NASA"])
        assert tags[:2] == ["space", "nasa"]
        assert tags[2:4] == ["rockets", "satellites"]

    def test_deduplicated(self):
        """A keyword given explicitly is not repeated from the body."""
        text = "Rockets launch. Rockets land. Rockets fly."
        tags = extract_keywords(text, ["rockets", "ROCKETS "])
        assert tags.count("rockets") == 1
        assert len(tags) == len(set(tags))

    def test_capped_at_ten(self):
        text = " ".join(f"token{i} token{i}" for i in range(20))
        explicit = [f"meta{i}" for i in range(4)]
        tags = extract_keywords(text, explicit)
        assert len(tags) == 10
        assert tags[:4] == explicit

    def test_many_explicit_capped(self):
        tags = extract_keywords("Some body text here.", [f"k{i}" for i in range(15)])
        assert tags == [f"k{i}" for i in range(10)]

    def test_no_body_explicit_only(self):
        assert extract_keywords("", ["a", "b"]) == ["a", "b"]

    def test_no_body_capped_at_six(self):
        assert extract_keywords(None, [str(i) for i in range(9)]) == [str(i) for i in range(6)]

    def test_nothing_at_all(self):
        assert extract_keywords("", []) == []
        assert extract_keywords("   ") == []

    def test_non_string_explicit_skipped(self):
        assert extract_keywords("", ["ok", None, 3, "  "]) == ["ok"]

    def test_custom_config(self):
        cfg = KeywordConfig(top_frequent=2, max_tags=3)
        text = "alpha alpha beta beta gamma gamma delta"
        assert extract_keywords(text, ["x"], cfg) == ["x", "alpha", "beta"]

    def test_negative_caps_clamped_to_zero(self):
        """A negative cap yields no tags instead of slicing from the end."""
        assert extract_keywords("alpha beta", ["a"], KeywordConfig(max_tags=-1)) == []
        assert extract_keywords("", ["a", "b"], KeywordConfig(max_tags_without_body=-2)) == []
        assert extract_keywords("alpha beta", [], KeywordConfig(top_frequent=-5)) == []

    def test_caps_coerced_from_strings(self):
        cfg = KeywordConfig(max_tags="2").normalized()
        assert cfg.max_tags == 2
        assert extract_keywords("alpha beta gamma", [], cfg) == ["alpha", "beta"]
