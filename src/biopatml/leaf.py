"""
Leaf patterns: region patterns (Any, Gap), fuzzy literal motifs and
delegated regular expressions.
"""

import re
from dataclasses import dataclass, field
from typing import Iterator

from loguru import logger

from biopatml.alphabet import WILDCARDS, Alphabet, check_alphabet
from biopatml.errors import PatternConstructionError
from biopatml.sequence import Sequence


def _check_bounds(kind: str, min_length: int, max_length: int) -> None:
    if min_length < 0 or min_length > max_length:
        raise PatternConstructionError(
            f"{kind} bounds must satisfy 0 <= min <= max, got ({min_length}, {max_length})"
        )


def _check_threshold(threshold: float) -> None:
    if not 0.0 <= threshold <= 1.0:
        raise PatternConstructionError(f"Threshold must lie in [0, 1], got {threshold}")


@dataclass(frozen=True, slots=True)
class Gap:
    """A bounded-length spacer between two motifs of a Series or Repeat.

    Gaps carry bounds only and cannot be matched on their own.
    """

    min_length: int
    max_length: int

    def __post_init__(self):
        _check_bounds("Gap", self.min_length, self.max_length)

    def lengths(self) -> range:
        """Admissible gap lengths, ascending."""
        return range(self.min_length, self.max_length + 1)


@dataclass(frozen=True, slots=True)
class Any:
    """A region of any content whose length lies in [min_length, max_length]."""

    min_length: int
    max_length: int

    def __post_init__(self):
        _check_bounds("Any", self.min_length, self.max_length)

    def windows(self, sequence: Sequence | str) -> Iterator[str]:
        """Yield every admissible window of ``sequence``.

        Windows are ordered by start offset, then by ascending length.
        """
        text = str(sequence)
        for start in range(len(text)):
            remaining = len(text) - start
            for length in range(self.min_length, min(self.max_length, remaining) + 1):
                yield text[start : start + length]

    def match(self, sequence: Sequence | str) -> bool:
        """True if at least one admissible window exists."""
        return next(self.windows(sequence), None) is not None


@dataclass(frozen=True, slots=True)
class Motif:
    """
    A literal motif matched with wildcard tolerance and a similarity threshold.

    The literal is compared case-insensitively against the start of the
    candidate sequence. ``x`` and ``n`` in the literal match any symbol.

    Attributes:
        pattern: Literal symbols of the motif
        threshold: Minimum fraction of literal positions that must match
        alphabet: Alphabet the literal is validated against
    """

    pattern: str
    threshold: float = 1.0
    alphabet: Alphabet = Alphabet.DNA
    literal: str = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.pattern:
            raise PatternConstructionError("Motif literal must not be empty")
        _check_threshold(self.threshold)
        if not check_alphabet(self.alphabet, self.pattern):
            raise PatternConstructionError(
                f"Supplied motif {self.pattern!r} is not a valid {self.alphabet.name} sequence"
            )
        object.__setattr__(self, "literal", self.pattern.lower())

    def __len__(self) -> int:
        return len(self.literal)

    def _score_text(self, text: str) -> float:
        matched = 0
        for expected, actual in zip(self.literal, text):
            if expected not in WILDCARDS and expected != actual:
                break
            matched += 1
        return matched / len(self.literal)

    def score(self, sequence: Sequence | str) -> float:
        """Fraction of literal positions matched before the first mismatch.

        Scoring stops at the first mismatching position or when the sequence
        runs out, whichever comes first.
        """
        return self._score_text(str(sequence).lower())

    def match(self, sequence: Sequence | str, threshold: float | None = None) -> bool:
        """
        Test the motif against the start of ``sequence``.

        Args:
            sequence: Candidate sequence
            threshold: Effective threshold for this call only; defaults to
                the motif's own threshold

        Returns:
            True if the score reaches the effective threshold
        """
        if threshold is None:
            threshold = self.threshold
        text = str(sequence).lower()

        if threshold == 1.0 and len(text) == len(self.literal):
            return all(
                expected in WILDCARDS or expected == actual
                for expected, actual in zip(self.literal, text)
            )
        return self._score_text(text) >= threshold


@dataclass(frozen=True, slots=True)
class Regex:
    """A pattern delegated to the ``re`` module.

    Matching is case-insensitive and a match anywhere in the sequence
    counts. The expression is compiled with ``re.IGNORECASE`` rather than
    lower-cased, so escapes such as ``\\D`` or ``\\W`` keep their meaning.
    """

    expression: str
    compiled: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        try:
            compiled = re.compile(self.expression, re.IGNORECASE)
        except re.error as err:
            raise PatternConstructionError(
                f"Invalid regular expression {self.expression!r}: {err}"
            ) from err
        object.__setattr__(self, "compiled", compiled)
        logger.debug(f"Compiled regex pattern {self.expression!r}")

    def match(self, sequence: Sequence | str) -> bool:
        return self.compiled.search(str(sequence).lower()) is not None
