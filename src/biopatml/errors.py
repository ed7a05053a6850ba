"""Exceptions raised by pattern construction and pattern dispatch.

A failed comparison is never an exception: matching returns ``False`` and
scanning returns ``None``.
"""


class BioPatternError(Exception):
    """Base class for all biopatml errors."""


class PatternConstructionError(BioPatternError, ValueError):
    """A pattern could not be built from the supplied arguments."""


class InvalidPatternError(BioPatternError, TypeError):
    """A value handed to the matcher is not a matchable pattern."""

    def __init__(self, pattern: object):
        self.pattern = pattern
        super().__init__(f"Supplied pattern is invalid: {pattern!r}")
