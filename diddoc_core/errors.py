"""
Exception hierarchy for diddoc.

Every failure raised by the package derives from ``DIDDocumentError`` so
callers can catch the whole family in one place.
"""

from __future__ import annotations


class DIDDocumentError(Exception):
    """Base class for all diddoc errors."""


class InvalidArgument(DIDDocumentError, TypeError):
    """An operation received an argument of the wrong shape."""


class InvalidIdentifier(InvalidArgument):
    """A DID (or DID URL) failed syntax validation."""
