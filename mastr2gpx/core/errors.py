"""Errors raised by the export pipeline."""

from pathlib import Path
from typing import Optional, Union


class Mastr2GpxError(Exception):
    """Base error for this package."""


class ConfigurationError(Mastr2GpxError):
    """Raised when the export configuration is invalid (e.g. a malformed bounding box)."""


class DirectoryAccessError(Mastr2GpxError):
    """Raised when the input directory is missing or cannot be listed."""


class FileAccessError(Mastr2GpxError):
    """Raised when a dump file cannot be opened."""

    def __init__(self, path: Union[str, Path], message: str):
        super().__init__(f"{message}: {path}")
        self.path = Path(path)


class RecordDecodeError(Mastr2GpxError):
    """Raised when a dump file cannot be decoded (bad XML, bad UTF-16, bad field value)."""

    def __init__(self, path: Union[str, Path], cause: Optional[BaseException] = None):
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Could not read generators from {Path(path).name}{detail}")
        self.path = Path(path)
        self.cause = cause


class FieldDecodeError(ValueError):
    """Raised when the text of a record field cannot be converted to its type."""

    def __init__(self, tag: str, text: str, expected: str):
        super().__init__(f"Invalid {expected} value for <{tag}>: {text!r}")
        self.tag = tag
        self.text = text
