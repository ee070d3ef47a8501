"""Word frequency counting over text files."""

import sys
from pathlib import Path
from typing import AbstractSet, Iterable, Union

from core.errors import InputOpenError, InputReadError
from core.tokenizer import SEPARATORS, iter_words


def add_word(table: dict[str, int], word: str) -> None:
    """Count one occurrence of word (case-insensitive). Empty words are ignored."""
    if not word:
        return
    key = word.lower()
    table[key] = table.get(key, 0) + 1


def count_words(
    lines: Iterable[str],
    separators: AbstractSet[str] = SEPARATORS,
) -> dict[str, int]:
    """
    Build a fresh word -> count table from lines of text.

    Args:
        lines: Any iterable of strings (file object, list, ...)
        separators: Characters that delimit words

    Returns:
        Dict mapping lowercase word -> number of occurrences
    """
    table: dict[str, int] = {}
    for line in lines:
        for word in iter_words(line, separators):
            add_word(table, word)
    return table


def read_word_counts(
    path: Union[str, Path],
    separators: AbstractSet[str] = SEPARATORS,
    encoding: str = "utf-8",
) -> dict[str, int]:
    """
    Count the words of a text file, streaming it line by line.

    Args:
        path: Input text file
        separators: Characters that delimit words
        encoding: Text encoding of the file

    Returns:
        Dict mapping lowercase word -> number of occurrences

    Raises:
        InputOpenError: If the file cannot be opened
        InputReadError: If the file cannot be read or decoded
    """
    try:
        in_file = open(path, "r", encoding=encoding)
    except OSError as e:
        raise InputOpenError(path, e) from e

    try:
        table = count_words(in_file, separators)
    except (OSError, UnicodeDecodeError) as e:
        in_file.close()
        raise InputReadError(path, e) from e

    try:
        in_file.close()
    except OSError as e:
        print(f"Warning: {path} was read but could not be closed: {e}", file=sys.stderr)

    return table
