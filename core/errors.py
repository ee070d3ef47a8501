"""Error kinds raised while building a tag cloud.

Every failure is terminal for the run: nothing here is retried.
"""

from pathlib import Path
from typing import Optional, Union


class TagCloudError(Exception):
    """Base class for all tag cloud failures."""


class _FileError(TagCloudError):
    """Failure tied to a file path."""

    action = "accessing"

    def __init__(self, path: Union[str, Path], reason: Optional[Exception] = None):
        self.path = str(path)
        self.reason = reason
        message = f"Error when {self.action} {self.path}"
        if reason is not None:
            detail = getattr(reason, "strerror", None) or str(reason)
            message += f": {detail}"
        super().__init__(message)


class InputOpenError(_FileError):
    """Raised when the input file cannot be opened."""

    action = "trying to open read file"


class InputReadError(_FileError):
    """Raised when the input file cannot be read or decoded."""

    action = "reading from read file"


class OutputOpenError(_FileError):
    """Raised when the output file cannot be opened for writing."""

    action = "opening output file"


class OutputWriteError(_FileError):
    """Raised when writing or encoding the output file fails."""

    action = "writing to output file"


class InvalidCountError(TagCloudError, ValueError):
    """Raised when the number of words is not a positive integer.

    Checked before any file is touched.
    """

    def __init__(self, value):
        self.value = value
        super().__init__(
            f"number of words to be read must be a positive integer, got {value!r}"
        )
