"""Word tokenization driven by a fixed separator set."""

from typing import AbstractSet, Iterator

# Characters that terminate a word
SEPARATORS: frozenset = frozenset(
    " \t\n\r`-\\/(),.!?[]';:\"_*"
)


def word_end(text: str, start: int = 0, separators: AbstractSet[str] = SEPARATORS) -> int:
    """Index of the first separator at or after start (len(text) if none)."""
    end = start
    while end < len(text) and text[end] not in separators:
        end += 1
    return end


def separators_end(text: str, start: int = 0, separators: AbstractSet[str] = SEPARATORS) -> int:
    """Index of the first non-separator at or after start (len(text) if none)."""
    end = start
    while end < len(text) and text[end] in separators:
        end += 1
    return end


def next_word(text: str, separators: AbstractSet[str] = SEPARATORS) -> str:
    """Return the longest prefix of text that contains no separator.

    Returns "" when text is empty or starts with a separator.
    """
    return text[:word_end(text, 0, separators)]


def skip_separators(text: str, separators: AbstractSet[str] = SEPARATORS) -> str:
    """Drop the leading run of separator characters."""
    return text[separators_end(text, 0, separators):]


def iter_words(text: str, separators: AbstractSet[str] = SEPARATORS) -> Iterator[str]:
    """
    Yield every word in text, in order.

    Case is left untouched; folding happens when a word is counted.
    A text made only of separators yields nothing. Runs in time linear
    in len(text).

    Args:
        text: Text to split (usually a single line)
        separators: Characters that delimit words

    Yields:
        Non-empty words
    """
    pos = separators_end(text, 0, separators)
    while pos < len(text):
        end = word_end(text, pos, separators)
        yield text[pos:end]
        pos = separators_end(text, end, separators)
