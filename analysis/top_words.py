"""Top-N selection of a word frequency table."""

import heapq

from core.errors import InvalidCountError


def trim(table: dict[str, int], n: int) -> dict[str, int]:
    """
    Keep only the n most frequent words.

    Among words with equal counts the alphabetically smallest are dropped
    first, so the result is deterministic.

    Args:
        table: Word -> count mapping (not modified)
        n: Number of words to keep, must be a positive integer

    Returns:
        New dict with min(n, len(table)) entries; every kept count is
        >= every dropped count

    Raises:
        InvalidCountError: If n is not a positive integer
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise InvalidCountError(n)

    if n >= len(table):
        return dict(table)

    # O(len(table) * log n)
    kept = heapq.nlargest(n, table.items(), key=lambda item: (item[1], item[0]))
    return dict(kept)


def max_count(table: dict[str, int]) -> int:
    """Largest count in the table, 0 if it is empty."""
    return max(table.values(), default=0)
