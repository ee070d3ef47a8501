"""Ordering and font assignment for selected words."""

from dataclasses import dataclass
from typing import Iterator, Mapping

from analysis.top_words import max_count
from report.font_scaler import MINFONT, MAXFONT, FontScaler


@dataclass(frozen=True)
class TagEntry:
    """One word of the cloud, ready for output."""
    word: str
    count: int
    font_size: int


def _sort_key(item: tuple[str, int]) -> tuple[str, str]:
    word = item[0]
    return (word.lower(), word)


def render(
    selection: Mapping[str, int],
    min_font: int = MINFONT,
    max_font: int = MAXFONT,
) -> Iterator[TagEntry]:
    """
    Yield the selected words in case-insensitive alphabetical order.

    Works on a sorted copy taken up front; the selection itself is never
    modified. An empty selection yields nothing.

    Args:
        selection: Word -> count mapping (already trimmed)
        min_font: Smallest font size
        max_font: Largest font size

    Yields:
        TagEntry(word, count, font_size)
    """
    items = sorted(selection.items(), key=_sort_key)
    if not items:
        return

    scaler = FontScaler(max_count(selection), min_font, max_font)
    for word, count in items:
        yield TagEntry(word, count, scaler.size(count))
