"""Tests for sentence segmentation and tokenization."""

import pytest

from text_summarizer.preprocessing import (
    STOPWORDS,
    normalize_whitespace,
    preprocess_text,
    split_sentences,
    tokenize,
)


class TestSplitSentences:
    """Tests for split_sentences."""

    def test_splits_on_terminators(self):
        """Each run of text ends at its terminator punctuation."""
        assert split_sentences("One here. Two there! Three? Four") == [
            "One here.", "Two there!", "Three?", "Four",
        ]

    def test_keeps_repeated_terminators(self):
        """Consecutive terminators stay attached to their sentence."""
        assert split_sentences("Really?! Yes...") == ["Really?!", "Yes..."]

    def test_normalizes_whitespace(self):
        """Newlines and tabs collapse into single spaces."""
        assert split_sentences("  First\n\nline  of\ttext.   Second. ") == [
            "First line of text.", "Second.",
        ]

    def test_empty_and_non_string(self):
        """Empty or non-string input yields no sentences."""
        assert split_sentences("") == []
        assert split_sentences("   \n ") == []
        assert split_sentences(None) == []
        assert split_sentences(42) == []

    def test_lone_punctuation_dropped(self):
        """Leading punctuation does not become a sentence of its own."""
        assert split_sentences("... Hello there.") == ["Hello there."]

    def test_normalize_whitespace(self):
        assert normalize_whitespace(" a \n b\t\tc ") == "a b c"


class TestTokenize:
    """Tests for tokenize in both modes."""

    def test_summary_mode_lowercases_and_drops_stopwords(self):
        """Summary mode keeps every non-stopword token."""
        assert tokenize("The Cat sat on a mat, by X.") == ["cat", "sat", "mat", "x"]

    def test_keyword_mode_requires_three_chars(self):
        """Keyword mode drops tokens of two characters or fewer."""
        assert tokenize("AI and ML go far in 2024 tech", "keyword") == ["far", "2024", "tech"]

    def test_curly_quotes_normalized(self):
        """Curly apostrophes become straight so contractions match stopwords."""
        assert tokenize("Don’t stop the ‘music’") == ["stop", "'music'"]

    def test_punctuation_becomes_separator(self):
        """Characters outside [a-z0-9'] split tokens."""
        assert tokenize("state-of-the-art e-mail") == ["state", "art", "e", "mail"]

    def test_unknown_mode_raises(self):
        with pytest.raises(ValueError):
            tokenize("text", mode="nope")

    def test_non_string(self):
        assert tokenize(None) == []

    def test_stopwords_immutable(self):
        """The shared stopword set cannot be mutated."""
        assert isinstance(STOPWORDS, frozenset)
        assert 150 <= len(STOPWORDS) <= 190
        assert "the" in STOPWORDS


class TestPreprocessText:
    """Tests for preprocess_text."""

    def test_short_sentences_dropped(self):
        """Sentences under the minimum length are excluded entirely."""
        doc = preprocess_text("Ok. This sentence is long enough.", min_sentence_length=10)
        assert [s.text for s in doc.sentences] == ["This sentence is long enough."]

    def test_indices_follow_kept_sentences(self):
        """Sentence indices are positions among the kept sentences."""
        doc = preprocess_text("Hi. First real sentence. No. Second real sentence.")
        assert [(s.idx, s.text) for s in doc.sentences] == [
            (0, "First real sentence."), (1, "Second real sentence."),
        ]

    def test_tokens_attached(self):
        doc = preprocess_text("The dog ran home quickly.")
        assert doc.sentences[0].tokens == ("dog", "ran", "home", "quickly")

    def test_zero_min_length_keeps_all(self):
        doc = preprocess_text("A. B. C.", min_sentence_length=0)
        assert len(doc) == 3

    def test_non_string(self):
        assert preprocess_text(None).sentences == []
