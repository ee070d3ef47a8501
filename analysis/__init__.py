"""Analysis modules for word counting and top-N selection."""

from .word_counter import add_word, count_words, read_word_counts
from .top_words import trim, max_count

__all__ = ["add_word", "count_words", "read_word_counts", "trim", "max_count"]
