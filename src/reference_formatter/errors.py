"""Exceptions raised by the reference formatter."""
from __future__ import annotations

from typing import Optional


class ReferenceFormatterError(Exception):
    """Base class for formatter errors."""


class ClassificationError(ReferenceFormatterError):
    """A classification result points outside the entry's parent list."""


class EntryLoadError(ReferenceFormatterError, ValueError):
    """A library record could not be turned into an entry."""

    def __init__(self, message: str, key: Optional[str] = None):
        self.key = key
        if key is not None:
            message = f"{key}: {message}"
        super().__init__(message)
