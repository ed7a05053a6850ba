"""
Structured patterns: patterns composed of other patterns.

Series and Repeat share one matcher: an ordered chain of motifs separated
by gaps, matched left to right with backtracking over every admissible
gap length.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING, Sequence as ComponentList

from loguru import logger

from biopatml.alphabet import Alphabet
from biopatml.errors import PatternConstructionError
from biopatml.leaf import Gap, Motif, _check_threshold
from biopatml.sequence import Sequence

if TYPE_CHECKING:
    from biopatml.dispatch import Pattern


def _split_components(components: ComponentList) -> tuple[tuple[Motif, ...], tuple[Gap, ...]]:
    """Separate an alternating Motif/Gap list into motifs and gaps.

    Raises:
        PatternConstructionError: If the list does not alternate
            Motif, Gap, ..., Motif
    """
    if not components:
        raise PatternConstructionError("Series must contain at least one Motif")

    if len(components) % 2 == 0:
        raise PatternConstructionError("Series must start and end with a Motif")
    for position, component in enumerate(components):
        expected = Motif if position % 2 == 0 else Gap
        if not isinstance(component, expected):
            raise PatternConstructionError(
                f"Series component {position} must be a {expected.__name__}, "
                f"got {type(component).__name__}"
            )
    return tuple(components[0::2]), tuple(components[1::2])


def match_chain(motifs: tuple[Motif, ...], gaps: tuple[Gap, ...], text: str) -> bool:
    """
    Match motifs separated by gaps against ``text``.

    Motif ``i`` is tested against the remaining slice. Unless it is the last
    motif, the slice is then split after the motif plus every admissible
    length of gap ``i`` (only where input remains) and the search recurses
    on the rest. Results are memoised per (motif index, slice start).

    Args:
        motifs: Motifs in order, at least one
        gaps: Gaps between consecutive motifs, ``len(motifs) - 1`` of them
        text: Candidate sequence as a string

    Returns:
        True if some choice of gap lengths matches every motif
    """

    @lru_cache(maxsize=None)
    def compute(index: int, start: int) -> bool:
        motif = motifs[index]
        if not motif.match(text[start:]):
            return False
        if index == len(gaps):
            return True
        remaining = len(text) - start
        return any(
            compute(index + 1, start + len(motif) + gap)
            for gap in gaps[index].lengths()
            if remaining > len(motif) + gap
        )

    return compute(0, 0)


@dataclass(frozen=True, slots=True)
class Series:
    """An ordered sequence of motifs separated by gaps.

    Example:
        >>> series = Series([Motif("ACGT"), Gap(1, 3), Motif("TTTT")])
        >>> series.match("ACGTAATTTT")
        True
    """

    components: tuple[Motif | Gap, ...]
    motifs: tuple[Motif, ...] = field(init=False, repr=False, compare=False)
    gaps: tuple[Gap, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        components = tuple(self.components)
        motifs, gaps = _split_components(components)
        object.__setattr__(self, "components", components)
        object.__setattr__(self, "motifs", motifs)
        object.__setattr__(self, "gaps", gaps)

    def match(self, sequence: Sequence | str) -> bool:
        return match_chain(self.motifs, self.gaps, str(sequence))


@dataclass(frozen=True, slots=True)
class Repeat:
    """
    One motif repeated ``repeat_count`` times, consecutive copies separated
    by a gap of ``min_gap`` to ``max_gap`` symbols.

    Attributes:
        pattern: Literal of the repeated motif
        min_gap: Shortest gap between copies
        max_gap: Longest gap between copies
        threshold: Threshold of every motif copy
        repeat_count: Number of motif copies, at least 1
        alphabet: Alphabet the literal is validated against
    """

    pattern: str
    min_gap: int
    max_gap: int
    threshold: float = 1.0
    repeat_count: int = 1
    alphabet: Alphabet = Alphabet.DNA
    components: tuple[Motif | Gap, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.repeat_count < 1:
            raise PatternConstructionError(
                f"Repeat count must be at least 1, got {self.repeat_count}"
            )
        motif = Motif(self.pattern, self.threshold, self.alphabet)
        gap = Gap(self.min_gap, self.max_gap)

        components: list[Motif | Gap] = [motif]
        for _ in range(self.repeat_count - 1):
            components.extend([gap, motif])
        object.__setattr__(self, "components", tuple(components))

    @property
    def motifs(self) -> tuple[Motif, ...]:
        return self.components[0::2]

    @property
    def gaps(self) -> tuple[Gap, ...]:
        return self.components[1::2]

    def match(self, sequence: Sequence | str) -> bool:
        return match_chain(self.motifs, self.gaps, str(sequence))


@dataclass(frozen=True, slots=True)
class Set:
    """
    First-match-wins alternation over arbitrary patterns.

    Direct Motif children are matched with the Set's threshold instead of
    their own; other pattern kinds ignore it. Members that are not matchable
    patterns, a standalone Gap included, raise InvalidPatternError at
    construction.
    """

    components: tuple["Pattern", ...]
    threshold: float = 1.0

    def __post_init__(self):
        components = tuple(self.components)
        if not components:
            raise PatternConstructionError("Set must contain at least one pattern")
        _check_threshold(self.threshold)
        from biopatml.dispatch import check_pattern

        for component in components:
            check_pattern(component)
        object.__setattr__(self, "components", components)

    def match(self, sequence: Sequence | str) -> bool:
        from biopatml.dispatch import match_pattern

        for position, pattern in enumerate(self.components):
            if match_pattern(pattern, sequence, threshold=self.threshold):
                logger.debug(f"Set matched on component {position}: {pattern!r}")
                return True
        return False
