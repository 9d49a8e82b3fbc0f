"""Tests for word_counter.counting.tokenizer module."""

import pytest

from word_counter.counting.tokenizer import tokenize


class TestTokenize:
    """Tests for tokenize function."""

    def test_lowercases_and_splits_on_punctuation(self) -> None:
        """Tokens are lower-cased and split on the delimiter set."""
        assert list(tokenize("the Tempest. The sea, the sea!")) == [
            "the",
            "tempest",
            "the",
            "sea",
            "the",
            "sea",
        ]

    @pytest.mark.parametrize("delimiter", ["&", ".", ",", ":", ";", "!", "?", " ", "\t", "[", "]"])
    def test_each_delimiter_splits(self, delimiter: str) -> None:
        """Every delimiter character separates two words."""
        assert list(tokenize(f"left{delimiter}right")) == ["left", "right"]

    def test_consecutive_delimiters_produce_no_empty_tokens(self) -> None:
        """Runs of delimiters never yield empty strings."""
        assert list(tokenize("a,,, ;;b")) == ["a", "b"]

    def test_only_delimiters_yields_nothing(self) -> None:
        """A line of delimiters only has zero tokens."""
        assert list(tokenize(" .,;:!?[]&\t ")) == []

    def test_empty_line_yields_nothing(self) -> None:
        """An empty line has zero tokens."""
        assert list(tokenize("")) == []

    @pytest.mark.parametrize(
        "line",
        ["Full fathom five thy father lies", "[Exit ARIEL.]", "Where should this music be? i' the air"],
    )
    def test_extra_leading_and_trailing_delimiters_are_ignored(self, line: str) -> None:
        """Wrapping a line in delimiters does not change its tokens."""
        assert list(tokenize(f"  [.;{line}!?]\t")) == list(tokenize(line))

    def test_keeps_non_delimiter_punctuation(self) -> None:
        """Apostrophes and hyphens stay inside a token."""
        assert list(tokenize("I' the sea-swallow'd")) == ["i'", "the", "sea-swallow'd"]

    def test_is_restartable(self) -> None:
        """Each call derives tokens again from the same line."""
        line = "Ariel and Caliban"
        first = list(tokenize(line))
        second = list(tokenize(line))
        assert first == second == ["ariel", "and", "caliban"]

    def test_is_lazy(self) -> None:
        """Tokens are produced on demand."""
        tokens = tokenize("one two three")
        assert next(tokens) == "one"
        assert next(tokens) == "two"
