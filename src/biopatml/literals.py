"""
Exact search for many motif literals at once.

Literals are folded to lower case and indexed in a single Aho-Corasick
automaton, built with ``ahocorapy`` or, when installed, ``ahocorasick_rs``
(``pip install biopatml[fast]``). Occurrences may overlap.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator

from loguru import logger

BACKENDS = ("auto", "ahocorapy", "ahocorasick_rs")


@dataclass(frozen=True, slots=True)
class MotifHit:
    """One occurrence of an indexed literal, as a half-open span."""

    literal: str
    start: int
    end: int


def check_backend(backend: str) -> None:
    """Reject unknown backend names.

    Raises:
        ValueError: If ``backend`` is not one of :data:`BACKENDS`
    """
    if backend not in BACKENDS:
        raise ValueError(f"Unknown Aho-Corasick backend {backend!r}, expected one of {BACKENDS}")


def _rust_installed() -> bool:
    try:
        import ahocorasick_rs  # noqa: F401
    except ImportError:
        return False
    return True


def available_backends() -> list[str]:
    """Installed backends, ``ahocorapy`` first."""
    return ["ahocorapy", "ahocorasick_rs"] if _rust_installed() else ["ahocorapy"]


class LiteralIndex:
    """
    Case-insensitive automaton over a fixed set of motif literals.

    Args:
        literals: Motif literals; duplicates are collapsed
        backend: "auto" prefers ahocorasick_rs when installed, otherwise
            "ahocorapy" or "ahocorasick_rs" force one implementation

    Raises:
        ValueError: If ``backend`` is unknown
        ImportError: If ahocorasick_rs is forced but not installed

    Example:
        >>> index = LiteralIndex(["ACGT", "gta"])
        >>> [(h.literal, h.start) for h in index.hits("ttACGTA")]
        [('acgt', 2), ('gta', 4)]
    """

    def __init__(self, literals: Iterable[str], backend: str = "auto"):
        check_backend(backend)
        self.literals = sorted({literal.lower() for literal in literals})
        if backend == "auto":
            backend = "ahocorasick_rs" if _rust_installed() else "ahocorapy"
        self.backend = backend

        if not self.literals:
            self._automaton = None
        elif backend == "ahocorasick_rs":
            import ahocorasick_rs

            self._automaton = ahocorasick_rs.AhoCorasick(self.literals)
        else:
            from ahocorapy.keywordtree import KeywordTree

            self._automaton = KeywordTree()
            for literal in self.literals:
                self._automaton.add(literal)
            self._automaton.finalize()
        logger.debug(f"Indexed {len(self.literals)} literals with {backend}")

    def _spans(self, text: str) -> Iterator[tuple[str, int]]:
        if self.backend == "ahocorasick_rs":
            for idx, start, _ in self._automaton.find_matches_as_indexes(text, overlapping=True):
                yield self.literals[idx], start
        else:
            yield from self._automaton.search_all(text)

    def hits(self, text: str) -> list[MotifHit]:
        """Every occurrence in ``text``, sorted by start then literal."""
        if not self.literals:
            return []
        found = [
            MotifHit(literal, start, start + len(literal))
            for literal, start in self._spans(text.lower())
        ]
        return sorted(found, key=lambda hit: (hit.start, hit.literal))

    def first_offset(self, text: str) -> int | None:
        """Start of the leftmost occurrence, or None."""
        if not self.literals:
            return None
        return min((start for _, start in self._spans(text.lower())), default=None)
