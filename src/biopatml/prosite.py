"""
Prosite pattern compiler.

Translates the Prosite token mini-language (tokens separated by ``-``)
into a regular expression, e.g. ``A-x-T(2,3)`` becomes ``A.T{2,3}``.
"""

import re
from dataclasses import dataclass, field

from loguru import logger

from biopatml.alphabet import Alphabet, check_alphabet, is_wildcard
from biopatml.errors import PatternConstructionError
from biopatml.leaf import Regex
from biopatml.sequence import Sequence

_EXCLUSION = re.compile(r"\{([A-Za-z]+)\}")
_BOUNDED_REPEAT = re.compile(r"([A-Za-z])\((\d+)(?:,(\d+))?\)")
_CLASS_REPEAT = re.compile(r"(\[[^\]]+\])\((\d+)(?:,(\d+))?\)")


def _braces(low: str, high: str | None) -> str:
    return f"{{{low},{high}}}" if high else f"{{{low}}}"


def _parse_class(token: str) -> str:
    found = _CLASS_REPEAT.fullmatch(token)
    if found is None:
        return token
    char_class, low, high = found.groups()
    return char_class + _braces(low, high)


def _parse_exclusion(token: str, alphabet: Alphabet) -> str | None:
    found = _EXCLUSION.fullmatch(token)
    if found is None or not check_alphabet(alphabet, found.group(1)):
        return None
    return f"[^{found.group(1)}]"


def _parse_repeat(token: str, alphabet: Alphabet) -> str | None:
    found = _BOUNDED_REPEAT.fullmatch(token)
    if found is None:
        return None
    symbol, low, high = found.groups()
    if not check_alphabet(alphabet, symbol):
        return None
    if is_wildcard(symbol):
        symbol = "."
    return symbol + _braces(low, high)


def parse_token(token: str, alphabet: Alphabet = Alphabet.DNA) -> str | None:
    """Rewrite one Prosite token as a regex fragment.

    Returns:
        The fragment, or None if the token is not valid Prosite
    """
    if "[" in token:
        return _parse_class(token)
    if "{" in token:
        return _parse_exclusion(token, alphabet)
    if "(" in token:
        return _parse_repeat(token, alphabet)
    if is_wildcard(token):
        return "."
    if token and check_alphabet(alphabet, token):
        return token
    return None


def compile_prosite(pattern: str, alphabet: Alphabet = Alphabet.DNA) -> str:
    """
    Compile a Prosite pattern into a regular expression string.

    A trailing ``.`` terminator is ignored, a leading ``<`` anchors the
    pattern at the sequence start and a trailing ``>`` at its end.

    Args:
        pattern: Prosite pattern, tokens separated by ``-``
        alphabet: Alphabet literal tokens are validated against

    Returns:
        Regular expression equivalent to ``pattern``

    Raises:
        PatternConstructionError: If any token cannot be classified

    Example:
        >>> compile_prosite("A-x-T(2,3)")
        'A.T{2,3}'
        >>> compile_prosite("{AG}-C")
        '[^AG]C'
    """
    body = pattern.strip()
    if body.endswith("."):
        body = body[:-1]

    prefix = suffix = ""
    if body.startswith("<"):
        prefix, body = "^", body[1:]
    if body.endswith(">"):
        suffix, body = "$", body[:-1]

    fragments = []
    for token in body.split("-"):
        fragment = parse_token(token, alphabet)
        if fragment is None:
            raise PatternConstructionError(
                f"Invalid Prosite pattern {pattern!r}: cannot parse token {token!r}"
            )
        fragments.append(fragment)

    expression = prefix + "".join(fragments) + suffix
    logger.debug(f"Compiled Prosite pattern {pattern!r} -> {expression!r}")
    return expression


@dataclass(frozen=True, slots=True)
class Prosite:
    """A Prosite pattern, matched through its compiled :class:`Regex`."""

    pattern: str
    alphabet: Alphabet = Alphabet.DNA
    regex: Regex = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "regex", Regex(compile_prosite(self.pattern, self.alphabet)))

    @property
    def expression(self) -> str:
        return self.regex.expression

    def match(self, sequence: Sequence | str) -> bool:
        return self.regex.match(sequence)
