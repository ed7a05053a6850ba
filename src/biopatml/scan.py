"""
Scanning primitives: slide a pattern along a sequence and report where it
matches.

``locate`` tests the pattern against every suffix of the sequence, shortest
offset first. Exact motifs (threshold 1.0, no wildcards) are a literal
prefix test on each suffix, so they are located with Aho-Corasick instead.
"""

from typing import Iterable, Iterator

from loguru import logger

from biopatml.alphabet import WILDCARDS
from biopatml.dispatch import Pattern, check_pattern, match_pattern
from biopatml.leaf import Motif
from biopatml.literals import LiteralIndex, MotifHit, check_backend
from biopatml.sequence import Sequence, as_sequence


def _is_exact_literal(pattern: object) -> bool:
    return (
        isinstance(pattern, Motif)
        and pattern.threshold == 1.0
        and not WILDCARDS.intersection(pattern.literal)
    )


def _matching_offsets(sequence: Sequence, pattern: Pattern) -> Iterator[int]:
    for start in range(len(sequence)):
        if match_pattern(pattern, sequence.suffix(start)):
            yield start


def locate(
    sequence: Sequence | str,
    pattern: Pattern,
    backend: str = "auto",
) -> int | None:
    """
    Find the first offset at which ``pattern`` matches.

    Args:
        sequence: Sequence to search
        pattern: Any matchable pattern
        backend: Aho-Corasick backend used for exact motifs

    Returns:
        Smallest offset ``i`` such that the pattern matches ``sequence[i:]``,
        or None if there is none

    Raises:
        InvalidPatternError: If ``pattern`` is not a matchable pattern, even
            when ``sequence`` is empty
        ValueError: If ``backend`` is unknown

    Example:
        >>> locate("ACGTACGT", Motif("ACGT"))
        0
        >>> locate("ACGTACGT", Motif("TTTT")) is None
        True
    """
    check_pattern(pattern)
    check_backend(backend)
    sequence = as_sequence(sequence)

    if _is_exact_literal(pattern):
        offset = LiteralIndex([pattern.literal], backend=backend).first_offset(str(sequence))
    else:
        offset = next(_matching_offsets(sequence, pattern), None)

    if offset is None:
        logger.debug(f"{pattern!r} not found in sequence of length {len(sequence)}")
    else:
        logger.debug(f"{pattern!r} found at offset {offset}")
    return offset


def exists(
    sequence: Sequence | str,
    pattern: Pattern,
    backend: str = "auto",
) -> bool:
    """True if ``pattern`` matches at some offset of ``sequence``."""
    return locate(sequence, pattern, backend=backend) is not None


def locate_all(sequence: Sequence | str, pattern: Pattern) -> list[int]:
    """Every offset at which ``pattern`` matches, ascending.

    Raises:
        InvalidPatternError: If ``pattern`` is not a matchable pattern
    """
    check_pattern(pattern)
    return list(_matching_offsets(as_sequence(sequence), pattern))


def search_motifs(
    sequence: Sequence | str,
    motifs: Iterable[Motif | str],
    backend: str = "auto",
) -> list[MotifHit]:
    """
    Find every occurrence of several exact motifs in one pass.

    Motifs are compared case-insensitively; overlapping occurrences are all
    reported. Wildcards are not expanded, so motifs containing them are
    rejected.

    Args:
        sequence: Sequence to search
        motifs: Motif patterns, or plain literals validated as DNA
        backend: Aho-Corasick backend ("auto", "ahocorapy", "ahocorasick_rs")

    Returns:
        Hits sorted by start offset, then literal; literals are lower-cased

    Raises:
        ValueError: If a motif contains a wildcard or ``backend`` is unknown
    """
    check_backend(backend)
    literals = []
    for motif in motifs:
        literal = motif.literal if isinstance(motif, Motif) else Motif(motif).literal
        if WILDCARDS.intersection(literal):
            raise ValueError(f"Motif {literal!r} contains wildcards; use locate() instead")
        literals.append(literal)

    hits = LiteralIndex(literals, backend=backend).hits(str(as_sequence(sequence)))
    logger.debug(f"Found {len(hits)} occurrences of {len(set(literals))} motifs")
    return hits
