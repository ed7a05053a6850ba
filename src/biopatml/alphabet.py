"""
Alphabets and symbol validation.

Symbols are compared case-insensitively. The wildcard symbols ``x`` and
``n`` are valid in every alphabet.
"""

from enum import Enum
from typing import Iterable

WILDCARDS = frozenset("xn")


class Alphabet(Enum):
    """Sequence alphabets a pattern can be built for."""

    DNA = "ACGT-"
    RNA = "ACGU-"
    PROTEIN = "ACDEFGHIKLMNPQRSTVWYUO*-"

    @property
    def symbols(self) -> frozenset[str]:
        """Valid symbols, lower-cased."""
        return frozenset(self.value.lower())


def is_wildcard(symbol: str) -> bool:
    return symbol.lower() in WILDCARDS


def is_valid(alphabet: Alphabet, symbol: str) -> bool:
    """True if ``symbol`` is a wildcard or a member of ``alphabet``."""
    return is_wildcard(symbol) or symbol.lower() in alphabet.symbols


def check_alphabet(alphabet: Alphabet, symbols: Iterable[str]) -> bool:
    """True if every symbol passes :func:`is_valid` for ``alphabet``."""
    return all(is_valid(alphabet, s) for s in symbols)
