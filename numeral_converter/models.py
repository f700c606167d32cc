"""
Pydantic models for conversion results. The result type IS the error channel.

A conversion never raises for malformed input. Instead it returns a
ConversionResult that carries either the resolved integer or a typed
ConversionError explaining exactly which rule rejected the phrase.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel

# Returned by convert() in place of a number when the phrase is rejected.
INVALID_NUMBER = "InvalidNumber"


# ─── Scale Mode ─────────────────────────────────────────────────────


class ScaleMode(str, Enum):
    """Naming convention for milhão / bilião / trilião magnitudes."""

    SHORT = "short"  # bilião = 10^9
    LONG = "long"  # bilião = 10^12

    @classmethod
    def from_flag(cls, use_short_scale: bool) -> ScaleMode:
        return cls.SHORT if use_short_scale else cls.LONG


# ─── Failure Reasons ────────────────────────────────────────────────


class InvalidReason(str, Enum):
    """Machine-readable reason a phrase was rejected."""

    EMPTY_PHRASE = "EMPTY_PHRASE"
    LEADING_SEPARATOR = "LEADING_SEPARATOR"
    TRAILING_SEPARATOR = "TRAILING_SEPARATOR"
    SEPARATOR_BEFORE_EXEMPT = "SEPARATOR_BEFORE_EXEMPT"
    DOUBLED_SEPARATOR = "DOUBLED_SEPARATOR"
    MISSING_SEPARATOR = "MISSING_SEPARATOR"
    THOUSAND_SCALE_COMBINATION = "THOUSAND_SCALE_COMBINATION"
    UNRESOLVABLE_TOKEN = "UNRESOLVABLE_TOKEN"


class ConversionError(BaseModel):
    """Why the token scan stopped, and where."""

    code: InvalidReason
    message: str  # Human-readable explanation
    position: Optional[int] = None  # Index of the offending token
    token: Optional[str] = None  # The offending token (after any rewrite)


# ─── Conversion Result ──────────────────────────────────────────────


class ConversionResult(BaseModel):
    """The final output of a single conversion call."""

    phrase: str
    normalized: str
    scale: ScaleMode
    value: Optional[int] = None
    error: Optional[ConversionError] = None
    direct_match: bool = False  # Resolved without the token scan

    @property
    def is_valid(self) -> bool:
        return self.error is None and self.value is not None

    @property
    def text(self) -> str:
        """Decimal string of the value, or the invalid sentinel."""
        return str(self.value) if self.is_valid else INVALID_NUMBER
