"""
Minimal sequence value consumed by the matchers.

Matchers only need a stringified view and suffix extraction, so every public
entry point also accepts a plain ``str``.
"""

from dataclasses import dataclass

from biopatml.alphabet import Alphabet, check_alphabet


@dataclass(frozen=True, slots=True)
class Sequence:
    """An immutable run of symbols tagged with its alphabet."""

    symbols: str
    alphabet: Alphabet = Alphabet.DNA

    @classmethod
    def checked(cls, symbols: str, alphabet: Alphabet = Alphabet.DNA) -> "Sequence":
        """Build a sequence, rejecting symbols outside ``alphabet``.

        Raises:
            ValueError: If any symbol is not valid for ``alphabet``
        """
        if not check_alphabet(alphabet, symbols):
            raise ValueError(f"Sequence {symbols!r} is not valid {alphabet.name}")
        return cls(symbols, alphabet)

    def __str__(self) -> str:
        return self.symbols

    def __len__(self) -> int:
        return len(self.symbols)

    def __getitem__(self, key: slice) -> "Sequence":
        if not isinstance(key, slice):
            raise TypeError("Sequence indices must be slices")
        return Sequence(self.symbols[key], self.alphabet)

    def suffix(self, start: int) -> "Sequence":
        """Sub-sequence from ``start`` to the end."""
        return self[start:]


def as_sequence(value: "Sequence | str") -> Sequence:
    """Coerce a plain string to a DNA :class:`Sequence`."""
    if isinstance(value, Sequence):
        return value
    return Sequence(str(value))
