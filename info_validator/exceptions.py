"""
Custom exception hierarchy for info validation.

The predicates themselves never raise. These exceptions surface from the
helpers around them: the ID-number checksum routine and the kind dispatcher.
"""

from __future__ import annotations


class InfoValidationError(Exception):
    """Base exception for all info validation failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class ChecksumParseError(InfoValidationError):
    """A character of an ID number could not be read as a digit.

    Raised by the checksum routine; ``is_id_number`` always recovers it.
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("CHECKSUM_PARSE_FAILED", message, details)


class UnknownValidationKindError(InfoValidationError):
    """The requested validation kind is not one we know how to check."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNKNOWN_VALIDATION_KIND", message, details)
