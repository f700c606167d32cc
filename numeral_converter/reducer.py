"""
Token reducer — the left-to-right scan that turns words into a number.

Runs only when the whole phrase is not a vocabulary entry. For each token:

  1. Separator ("E")  → validate placement, then skip it
  2. Bare singular scale word ("Milhão") → look it up as "Um Milhão"
  3. Non-exempt token after the first → must follow a separator
  4. Short scale: "Mil" directly before milhão/bilião/trilião → reject
  5. Resolve the token (base table, then the active scale table)
  6. Scale word with a non-empty stack → collapse the stack into a multiplier
  7. Push the value

The result is the sum of whatever is left on the stack.

Example, "Trezentos E Vinte E Cinco Mil":
    Trezentos → [300]
    Vinte     → [300, 20]
    Cinco     → [300, 20, 5]
    Mil       → [(300 + 20 + 5) * 1000] = [325000]

NOTE: the multiplier is the sum of EVERYTHING on the stack, not just the
terms since the last scale word, so "Um Milhão E Duzentos Mil" yields
(1000000 + 200) * 1000.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .models import ConversionError, InvalidReason, ScaleMode
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

logger = logging.getLogger(__name__)


# ─── Main Reducer ───────────────────────────────────────────────────


def reduce_tokens(
    tokens: Sequence[str],
    scale: ScaleMode,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> int | ConversionError:
    """Reduce normalized tokens to an integer.

    Args:
        tokens: Words of a normalized phrase, e.g. ["Cento", "E", "Dois"].
        scale: Which table resolves milhão / bilião / trilião.
        vocabulary: Word tables and classification sets.

    Returns:
        The integer value, or a ConversionError naming the rule that failed.
        Never raises for malformed input.
    """
    if not tokens:
        return _reject(InvalidReason.EMPTY_PHRASE, "Phrase contains no words")

    separator = vocabulary.separator
    last = len(tokens) - 1
    stack: list[int] = []

    for cursor, raw in enumerate(tokens):
        if raw == separator:
            failure = _check_separator(tokens, cursor, vocabulary)
            if failure is not None:
                return failure
            continue

        token = vocabulary.join_one(raw) if _is_to_join_one(raw, vocabulary) else raw

        if (
            cursor > 0
            and token not in vocabulary.exempt_words
            and tokens[cursor - 1] != separator
        ):
            return _reject(
                InvalidReason.MISSING_SEPARATOR,
                f"'{token}' must be preceded by '{separator}'",
                cursor,
                token,
            )

        if (
            scale is ScaleMode.SHORT
            and 0 < cursor < last
            and token == vocabulary.thousand
            and tokens[cursor + 1] in vocabulary.not_with_thousand
        ):
            return _reject(
                InvalidReason.THOUSAND_SCALE_COMBINATION,
                f"'{token} {tokens[cursor + 1]}' is not valid in short scale",
                cursor,
                token,
            )

        value = vocabulary.resolve(token, scale)
        if value is None:
            return _reject(
                InvalidReason.UNRESOLVABLE_TOKEN,
                f"Unrecognized number word: '{token}'",
                cursor,
                token,
            )

        if token in vocabulary.multiplier_words and stack:
            value *= _collect_multiplier(stack)

        stack.append(value)

    return sum(stack)


# ─── Helpers ────────────────────────────────────────────────────────


def _check_separator(
    tokens: Sequence[str], cursor: int, vocabulary: Vocabulary
) -> ConversionError | None:
    """Validate a separator token; None means it may be skipped."""
    separator = vocabulary.separator

    if cursor == 0:
        return _reject(
            InvalidReason.LEADING_SEPARATOR,
            f"Phrase cannot start with '{separator}'",
            cursor,
            separator,
        )
    if cursor == len(tokens) - 1:
        return _reject(
            InvalidReason.TRAILING_SEPARATOR,
            f"Phrase cannot end with '{separator}'",
            cursor,
            separator,
        )
    if tokens[cursor + 1] in vocabulary.exempt_words:
        return _reject(
            InvalidReason.SEPARATOR_BEFORE_EXEMPT,
            f"'{tokens[cursor + 1]}' cannot follow '{separator}'",
            cursor,
            separator,
        )
    if tokens[cursor - 1] == separator:
        return _reject(
            InvalidReason.DOUBLED_SEPARATOR,
            f"'{separator}' is repeated",
            cursor,
            separator,
        )
    return None


def _is_to_join_one(token: str, vocabulary: Vocabulary) -> bool:
    """Bare "Milhão" / "Bilião" / "Trilião" are only mapped with a leading "Um"."""
    return (
        token not in (vocabulary.one, vocabulary.thousand)
        and token in vocabulary.singular_words
    )


def _collect_multiplier(stack: list[int]) -> int:
    """Pop every stacked value and return their sum."""
    multiplier = stack.pop()
    while stack:
        multiplier += stack.pop()
    return multiplier


def _reject(
    code: InvalidReason,
    message: str,
    position: int | None = None,
    token: str | None = None,
) -> ConversionError:
    logger.debug("Rejected at position %s (%s): %s", position, code.value, message)
    return ConversionError(code=code, message=message, position=position, token=token)
