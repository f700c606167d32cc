"""
Direct whole-phrase matching.

Some numerals are lexicalized as multi-word phrases that do not decompose
under the token scan (e.g. "Mil Milhões" in long scale). Those are looked up
as a single key before any tokenizing happens.
"""

from __future__ import annotations

from .models import ScaleMode
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary


def resolve_whole(
    phrase: str, scale: ScaleMode, vocabulary: Vocabulary = DEFAULT_VOCABULARY
) -> int | None:
    """Look the entire normalized phrase up as one vocabulary key.

    Returns:
        The mapped value, or None when the phrase is not a single entry.
    """
    if not phrase:
        return None
    return vocabulary.resolve(phrase, scale)
