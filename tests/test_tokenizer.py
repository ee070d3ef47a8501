"""Tests for tokenizer module."""

import pytest
import sys
import time
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.tokenizer import (
    SEPARATORS, next_word, skip_separators, iter_words, word_end, separators_end,
)


class TestSeparators:
    """Test the default separator set."""

    def test_contains_punctuation_and_whitespace(self):
        """All documented separators are present."""
        for ch in " \t\n\r`-\\/(),.!?[]';:\"_*":
            assert ch in SEPARATORS

    def test_letters_and_digits_are_not_separators(self):
        """Word characters are never separators."""
        for ch in "aZ09<>&é":
            assert ch not in SEPARATORS

    def test_size(self):
        """22 distinct separator characters."""
        assert len(SEPARATORS) == 22


class TestNextWord:
    """Test extraction of a single word."""

    def test_prefix_up_to_separator(self):
        assert next_word("hello, world") == "hello"

    def test_whole_text_without_separator(self):
        assert next_word("hello") == "hello"

    def test_leading_separator_gives_empty(self):
        assert next_word(" hello") == ""

    def test_empty_text(self):
        assert next_word("") == ""

    def test_keeps_case(self):
        """Case folding is not the tokenizer's job."""
        assert next_word("HeLLo world") == "HeLLo"

    def test_custom_separators(self):
        assert next_word("a+b c", frozenset("+")) == "a"
        assert next_word("a-b", frozenset("+")) == "a-b"


class TestIterWords:
    """Test splitting a line into words."""

    def test_simple_sentence(self):
        assert list(iter_words("the cat the dog")) == ["the", "cat", "the", "dog"]

    def test_punctuation_runs(self):
        text = '"Well -- (I think) it\'s_fine!", she said.'
        assert list(iter_words(text)) == ["Well", "I", "think", "it", "s", "fine", "she", "said"]

    def test_only_separators(self):
        """A line of separators yields no word."""
        assert list(iter_words(" ,.;-- \t\n")) == []

    def test_empty(self):
        assert list(iter_words("")) == []

    def test_no_empty_words(self):
        assert "" not in list(iter_words("a,,b..c  d\r\n"))

    def test_non_separator_symbols_are_kept(self):
        assert list(iter_words("x<y & z")) == ["x<y", "&", "z"]

    def test_rejoin_recovers_text_modulo_separators(self):
        """Joining the words equals the text with separators removed."""
        text = "Hello, world! (This) is--a test_case."
        words = list(iter_words(text))
        stripped = "".join(ch for ch in text if ch not in SEPARATORS)
        assert "".join(words) == stripped

    def test_is_lazy(self):
        words = iter_words("one two")
        assert next(words) == "one"
        assert next(words) == "two"
        with pytest.raises(StopIteration):
            next(words)


class TestLongLines:
    """Test tokenizing very long single lines."""

    def test_long_line_counts_every_word(self):
        words = list(iter_words("ab " * 200000))
        assert len(words) == 200000
        assert set(words) == {"ab"}

    def test_long_line_is_linear(self):
        """A line ten times longer takes roughly ten times as long, not a hundred."""
        def timed(n):
            start = time.perf_counter()
            for _ in iter_words("ab " * n):
                pass
            return time.perf_counter() - start

        small = max(timed(20000), 1e-3)
        large = timed(200000)
        assert large < small * 40


class TestIndexHelpers:
    """Test the position-based scanners."""

    def test_word_end(self):
        assert word_end("ab cd", 0) == 2
        assert word_end("ab cd", 3) == 5
        assert word_end("ab cd", 2) == 2

    def test_separators_end(self):
        assert separators_end("ab , cd", 2) == 5
        assert separators_end("ab", 0) == 0
        assert separators_end("...", 1) == 3


class TestSkipSeparators:
    """Test skipping the leading separator run."""

    def test_skips_leading_run(self):
        assert skip_separators(" ,.word rest") == "word rest"

    def test_nothing_to_skip(self):
        assert skip_separators("word") == "word"

    def test_all_separators(self):
        assert skip_separators("...") == ""


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
