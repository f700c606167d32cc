"""
Custom exception hierarchy for numeral conversion.

Malformed phrases are NOT exceptional on the main `convert()` path: they
come back as the invalid sentinel. These exceptions exist for the strict
helper (`words_to_number`) and for broken vocabulary data, which is a
programming error and must fail loudly at import time.
"""

from __future__ import annotations


class NumeralError(Exception):
    """Base exception for all numeral conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidNumberError(NumeralError, ValueError):
    """The phrase is not a well-formed cardinal numeral.

    `code` is the InvalidReason value naming the rule that rejected it.
    """


class VocabularyError(NumeralError):
    """A vocabulary's classification sets disagree with its tables."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("VOCABULARY_INCONSISTENT", message, details)
