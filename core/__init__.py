"""Core modules for tagcloud."""

from .errors import (
    TagCloudError,
    InputOpenError,
    InputReadError,
    OutputOpenError,
    OutputWriteError,
    InvalidCountError,
)
from .tokenizer import SEPARATORS, next_word, skip_separators, iter_words

__all__ = [
    "TagCloudError",
    "InputOpenError",
    "InputReadError",
    "OutputOpenError",
    "OutputWriteError",
    "InvalidCountError",
    "SEPARATORS",
    "next_word",
    "skip_separators",
    "iter_words",
]
