from __future__ import annotations


class LineFinderError(Exception):
    """Base class for errors raised by the line finder."""


class EmptyIndexError(LineFinderError, LookupError):
    """fuzzy_find() was called on an index that holds no non-empty lines."""


class DocumentLoadError(LineFinderError, OSError):
    """A document or query file could not be read, or had no lines."""
