"""
biopatml - declarative pattern matching over DNA, RNA and protein sequences.

This package provides:
- Leaf patterns: fuzzy literal motifs, regular expressions, bounded regions
- A Prosite pattern compiler
- Structured patterns: ordered series with gaps, repeats and alternations
- Scanning primitives to locate a pattern within a longer sequence

Example:
    >>> from biopatml import Gap, Motif, Series, locate
    >>>
    >>> series = Series([Motif("ACGT"), Gap(1, 3), Motif("TTTT")])
    >>> locate("GGACGTAATTTT", series)
    2

Logging uses loguru and is disabled by default; call
``logger.enable("biopatml")`` to see debug output.
"""

from loguru import logger

from biopatml.alphabet import Alphabet, check_alphabet, is_valid, is_wildcard
from biopatml.dispatch import Pattern, match_pattern
from biopatml.errors import BioPatternError, InvalidPatternError, PatternConstructionError
from biopatml.leaf import Any, Gap, Motif, Regex
from biopatml.prosite import Prosite, compile_prosite
from biopatml.scan import exists, locate, locate_all, search_motifs
from biopatml.sequence import Sequence
from biopatml.structured import Repeat, Series, Set

logger.disable("biopatml")

__all__ = [
    "Alphabet",
    "Any",
    "BioPatternError",
    "Gap",
    "InvalidPatternError",
    "Motif",
    "Pattern",
    "PatternConstructionError",
    "Prosite",
    "Regex",
    "Repeat",
    "Sequence",
    "Series",
    "Set",
    "check_alphabet",
    "compile_prosite",
    "exists",
    "is_valid",
    "is_wildcard",
    "locate",
    "locate_all",
    "match_pattern",
    "search_motifs",
]

__version__ = "0.1.0"
