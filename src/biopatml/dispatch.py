"""
The closed set of matchable pattern kinds and the single place that
dispatches a match over them.
"""

from typing import Union, get_args

from biopatml.errors import InvalidPatternError
from biopatml.leaf import Any, Motif, Regex
from biopatml.prosite import Prosite
from biopatml.sequence import Sequence
from biopatml.structured import Repeat, Series, Set

# Gap is not matchable on its own and is deliberately absent.
Pattern = Union[Any, Motif, Regex, Prosite, Repeat, Series, Set]


def check_pattern(pattern: object) -> None:
    """Raise InvalidPatternError unless ``pattern`` is a matchable kind."""
    if not isinstance(pattern, get_args(Pattern)):
        raise InvalidPatternError(pattern)


def match_pattern(
    pattern: Pattern,
    sequence: Sequence | str,
    threshold: float | None = None,
) -> bool:
    """
    Match any pattern kind against ``sequence``.

    Args:
        pattern: Pattern to evaluate
        sequence: Candidate sequence
        threshold: Threshold override applied to a Motif only (used by Set)

    Returns:
        True if the pattern matches

    Raises:
        InvalidPatternError: If ``pattern`` is not a matchable pattern
    """
    match pattern:
        case Motif():
            return pattern.match(sequence, threshold=threshold)
        case Any() | Regex() | Prosite() | Repeat() | Series() | Set():
            return pattern.match(sequence)
        case _:
            raise InvalidPatternError(pattern)
