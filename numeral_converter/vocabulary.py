"""
Portuguese number vocabulary — the closed word tables the converter reads.

Every word is stored in canonical casing (first letter upper, rest lower),
which is exactly what the normalizer produces. Lookups are exact-string.

Tables:
  - base:        scale-independent words (0-19, tens, hundreds, "Mil")
  - short_scale: milhão = 10^6, bilião = 10^9,  trilião = 10^12
  - long_scale:  milhão = 10^6, bilião = 10^12, trilião = 10^18

The base table always wins over a scale table when both define a word.
Classification sets (separator-exempt words, scale tiers, words that may not
follow "Mil" in short scale) are derived data, not algorithmic state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .exceptions import VocabularyError
from .models import ScaleMode


# ─── Data Structures ────────────────────────────────────────────────


@dataclass(frozen=True)
class ScaleTier:
    """One large-number magnitude, e.g. milhão / milhões."""

    singular: str  # "Milhão", mapped in the tables only as "Um Milhão"
    plural: str  # "Milhões"


@dataclass(frozen=True)
class Vocabulary:
    """Immutable word tables plus the classification sets derived from them.

    Safe to share between threads: nothing here is mutated after __post_init__.
    """

    name: str
    separator: str
    one: str
    thousand: str
    base: Mapping[str, int]
    short_scale: Mapping[str, int]
    long_scale: Mapping[str, int]
    tiers: tuple[ScaleTier, ...]
    not_with_thousand: frozenset[str]

    # Derived in __post_init__
    singular_words: frozenset[str] = field(init=False)
    exempt_words: frozenset[str] = field(init=False)
    multiplier_words: frozenset[str] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "base", MappingProxyType(dict(self.base)))
        object.__setattr__(self, "short_scale", MappingProxyType(dict(self.short_scale)))
        object.__setattr__(self, "long_scale", MappingProxyType(dict(self.long_scale)))

        joined = {self.join_one(t.singular) for t in self.tiers}
        singular = {t.singular for t in self.tiers}
        plural = {t.plural for t in self.tiers}

        object.__setattr__(self, "singular_words", frozenset(singular))
        # Raw singulars are listed too: the separator check looks at the raw
        # next token, the separator-requirement check at the rewritten one.
        object.__setattr__(
            self, "exempt_words", frozenset({self.thousand} | singular | joined | plural)
        )
        object.__setattr__(
            self, "multiplier_words", frozenset({self.thousand} | joined | plural)
        )
        self._check_consistency()

    # ─── Lookups ────────────────────────────────────────────────────

    def join_one(self, word: str) -> str:
        """Prefix the word for one: Milhão → Um Milhão."""
        return f"{self.one} {word}"

    def table_for(self, scale: ScaleMode) -> Mapping[str, int]:
        return self.short_scale if scale is ScaleMode.SHORT else self.long_scale

    def resolve(self, word: str, scale: ScaleMode) -> int | None:
        """Base table first, then the table for the active scale mode."""
        value = self.base.get(word)
        if value is None:
            value = self.table_for(scale).get(word)
        return value

    def __len__(self) -> int:
        return len(set(self.base) | set(self.short_scale) | set(self.long_scale))

    # ─── Integrity ──────────────────────────────────────────────────

    def _check_consistency(self) -> None:
        """Every word the reducer treats specially must resolve in both scales."""
        required = {self.one, self.thousand} | (self.exempt_words - self.singular_words)
        for scale in ScaleMode:
            missing = sorted(w for w in required if self.resolve(w, scale) is None)
            if missing:
                raise VocabularyError(
                    f"Vocabulary '{self.name}' cannot resolve {missing} in {scale.value} scale",
                    details={"missing": missing, "scale": scale.value},
                )
        if self.separator in self.base:
            raise VocabularyError(
                f"Separator '{self.separator}' must not be a number word",
                details={"separator": self.separator},
            )


# ─── Portuguese Tables ──────────────────────────────────────────────

_PT_BASE: dict[str, int] = {
    "Zero": 0,
    "Um": 1,
    "Dois": 2,
    "Três": 3,
    "Quatro": 4,
    "Cinco": 5,
    "Seis": 6,
    "Sete": 7,
    "Oito": 8,
    "Nove": 9,
    "Dez": 10,
    "Onze": 11,
    "Doze": 12,
    "Treze": 13,
    "Catorze": 14,
    "Quatorze": 14,  # pt-BR
    "Quinze": 15,
    "Dezasseis": 16,
    "Dezesseis": 16,  # pt-BR
    "Dezassete": 17,
    "Dezessete": 17,  # pt-BR
    "Dezoito": 18,
    "Dezanove": 19,
    "Dezenove": 19,  # pt-BR
    "Vinte": 20,
    "Trinta": 30,
    "Quarenta": 40,
    "Cinquenta": 50,
    "Sessenta": 60,
    "Setenta": 70,
    "Oitenta": 80,
    "Noventa": 90,
    "Cem": 100,
    "Cento": 100,
    "Duzentos": 200,
    "Trezentos": 300,
    "Quatrocentos": 400,
    "Quinhentos": 500,
    "Seiscentos": 600,
    "Setecentos": 700,
    "Oitocentos": 800,
    "Novecentos": 900,
    "Mil": 1_000,
}

_PT_SHORT_SCALE: dict[str, int] = {
    "Um Milhão": 1_000_000,
    "Milhões": 1_000_000,
    "Um Bilião": 1_000_000_000,
    "Biliões": 1_000_000_000,
    "Um Trilião": 1_000_000_000_000,
    "Triliões": 1_000_000_000_000,
}

_PT_LONG_SCALE: dict[str, int] = {
    "Um Milhão": 1_000_000,
    "Milhões": 1_000_000,
    "Mil Milhões": 1_000_000_000,  # Idiomatic, matched only as a whole phrase
    "Um Bilião": 1_000_000_000_000,
    "Biliões": 1_000_000_000_000,
    "Mil Biliões": 1_000_000_000_000_000,
    "Um Trilião": 1_000_000_000_000_000_000,
    "Triliões": 1_000_000_000_000_000_000,
}

_PT_TIERS: tuple[ScaleTier, ...] = (
    ScaleTier(singular="Milhão", plural="Milhões"),
    ScaleTier(singular="Bilião", plural="Biliões"),
    ScaleTier(singular="Trilião", plural="Triliões"),
)

PORTUGUESE = Vocabulary(
    name="pt",
    separator="E",
    one="Um",
    thousand="Mil",
    base=_PT_BASE,
    short_scale=_PT_SHORT_SCALE,
    long_scale=_PT_LONG_SCALE,
    tiers=_PT_TIERS,
    not_with_thousand=frozenset(
        {"Milhão", "Milhões", "Bilião", "Biliões", "Trilião", "Triliões"}
    ),
)

DEFAULT_VOCABULARY = PORTUGUESE
