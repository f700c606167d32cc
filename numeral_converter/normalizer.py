"""Text normalization into the vocabulary's canonical casing."""

from __future__ import annotations

import re

_MULTISPACE_RE = re.compile(r"\s+")


def normalize_phrase(text: str) -> str:
    """Normalize a numeral phrase for exact-string vocabulary lookups.

    Normalization is intentionally conservative:
        - Collapse whitespace runs to a single space.
        - Strip leading/trailing whitespace.
        - Capitalize every word ("cento e DOIS" -> "Cento E Dois").

    No validation happens here: a malformed phrase simply fails lookups later.
    """

    value = _MULTISPACE_RE.sub(" ", text or "").strip()
    return " ".join(word.capitalize() for word in value.split(" ")) if value else ""
