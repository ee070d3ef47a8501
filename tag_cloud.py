"""Tag cloud generation: count words in a file, keep the top N, write HTML."""

import re
from pathlib import Path
from typing import Optional, Union

from analysis.top_words import trim
from analysis.word_counter import read_word_counts
from config import Config
from core.errors import InvalidCountError, OutputOpenError, OutputWriteError
from report.html_writer import write_tag_cloud

_DIGITS = re.compile(r"[0-9]+")


def validate_word_count(value: Union[int, str]) -> int:
    """
    Parse the number of words to show.

    Accepts a positive int or a string of digits ("12", " 12 ").

    Raises:
        InvalidCountError: For anything else ("0", "-1", "2.5", "abc", True)
    """
    if isinstance(value, bool):
        raise InvalidCountError(value)
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and _DIGITS.fullmatch(value.strip()):
        number = int(value.strip())
    else:
        raise InvalidCountError(value)

    if number < 1:
        raise InvalidCountError(value)
    return number


def generate_tag_cloud(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    num_words: Union[int, str],
    config: Optional[Config] = None,
) -> dict[str, int]:
    """
    Run the whole pipeline for one input file.

    The count is validated before any file is opened, and the output file
    is only opened once the table is built and trimmed.

    Args:
        input_path: Text file to read
        output_path: HTML file to create (overwritten)
        num_words: Number of words to show (int or digit string)
        config: Fonts, encoding and stylesheets (defaults if None)

    Returns:
        The selected word -> count mapping

    Raises:
        InvalidCountError: If num_words is not a positive integer
        InputOpenError, InputReadError: If the input cannot be read
        OutputOpenError: If the output cannot be created
        OutputWriteError: If the output cannot be written; the partial file is removed
    """
    n = validate_word_count(num_words)
    config = (config or Config()).validate()

    table = read_word_counts(input_path, encoding=config.encoding)
    selection = trim(table, n)

    try:
        out_file = open(output_path, "w", encoding=config.encoding)
    except OSError as e:
        raise OutputOpenError(output_path, e) from e

    try:
        with out_file:
            write_tag_cloud(out_file, str(input_path), selection, config)
    except (OSError, UnicodeError) as e:
        Path(output_path).unlink(missing_ok=True)
        raise OutputWriteError(output_path, e) from e

    return selection
