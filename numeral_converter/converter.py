"""
Main conversion pipeline — orchestrates the three stages.

Flow:
  ┌──────────────┐
  │  Raw phrase  │
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │  Normalizer  │   ← Collapse whitespace, canonical casing
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │Direct Matcher│   ← Whole phrase as one vocabulary key
  └──────┬───────┘
         │ (no match)
  ┌──────▼───────┐
  │Token Reducer │   ← Separator rules + multiplier stack
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │    Result    │   ← Integer or typed ConversionError
  └──────────────┘

Design principles:
  - convert() is a total function over strings: malformed input returns
    the "InvalidNumber" sentinel, it never raises.
  - No state survives a call; the vocabulary is immutable and shared.
  - words_to_number() is the strict variant for callers that want exceptions.
"""

from __future__ import annotations

import logging

from .exceptions import InvalidNumberError
from .matcher import resolve_whole
from .models import ConversionError, ConversionResult, ScaleMode
from .normalizer import normalize_phrase
from .reducer import reduce_tokens
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

logger = logging.getLogger(__name__)


class NumeralConverter:
    """Converts numeral phrases using one vocabulary and a default scale mode.

    Usage:
        converter = NumeralConverter(short_scale=True)
        result = converter.run("dois biliões e cinco")
        if result.is_valid:
            print(result.value)  # 2000000005
    """

    def __init__(
        self, vocabulary: Vocabulary = DEFAULT_VOCABULARY, short_scale: bool = False
    ):
        self.vocabulary = vocabulary
        self.short_scale = short_scale

    def run(self, phrase: str, short_scale: bool | None = None) -> ConversionResult:
        """Execute the full pipeline on one phrase.

        Args:
            phrase: e.g. "cento e vinte e dois"
            short_scale: Overrides the converter's default scale mode.

        Returns:
            ConversionResult with either `value` or `error` populated.
        """
        scale = ScaleMode.from_flag(self.short_scale if short_scale is None else short_scale)
        normalized = normalize_phrase(phrase)

        # ── Step 1: Whole-phrase lookup ─────────────────────────────
        direct = resolve_whole(normalized, scale, self.vocabulary)
        if direct is not None:
            logger.debug("Direct match for %r (%s scale): %d", normalized, scale.value, direct)
            return ConversionResult(
                phrase=phrase,
                normalized=normalized,
                scale=scale,
                value=direct,
                direct_match=True,
            )

        # ── Step 2: Token scan ──────────────────────────────────────
        tokens = normalized.split(" ") if normalized else []
        outcome = reduce_tokens(tokens, scale, self.vocabulary)

        if isinstance(outcome, ConversionError):
            return ConversionResult(
                phrase=phrase, normalized=normalized, scale=scale, error=outcome
            )
        return ConversionResult(
            phrase=phrase, normalized=normalized, scale=scale, value=outcome
        )

    def convert(self, phrase: str, short_scale: bool | None = None) -> str:
        """Decimal string for the phrase, or the "InvalidNumber" sentinel."""
        return self.run(phrase, short_scale).text

    def to_int(self, phrase: str, short_scale: bool | None = None) -> int:
        """Like run(), but raises InvalidNumberError instead of returning a sentinel."""
        result = self.run(phrase, short_scale)
        if result.error is not None:
            raise InvalidNumberError(
                result.error.code.value,
                f"{result.error.message} in {phrase!r}",
                details={
                    "phrase": phrase,
                    "position": result.error.position,
                    "token": result.error.token,
                },
            )
        assert result.value is not None
        return result.value


# ─── Module-level API ───────────────────────────────────────────────

_default_converter = NumeralConverter()


def convert(phrase: str, use_short_scale: bool = False) -> str:
    """Convert a phrase, i.e. "cento e vinte e dois", to "122".

    Returns:
        The decimal string, or "InvalidNumber" when the phrase is malformed.
    """
    return _default_converter.convert(phrase, use_short_scale)


def convert_detailed(phrase: str, use_short_scale: bool = False) -> ConversionResult:
    """Full ConversionResult, including the rejection reason when invalid."""
    return _default_converter.run(phrase, use_short_scale)


explain = convert_detailed


def words_to_number(phrase: str, use_short_scale: bool = False) -> int:
    """Strict conversion.

    Raises:
        InvalidNumberError: If the phrase is empty or malformed.
    """
    return _default_converter.to_int(phrase, use_short_scale)
