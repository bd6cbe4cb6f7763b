"""
Word model: finite state labels and ultimately periodic infinite words.

A ``Class`` is a finite word used as the canonical label of a state. Classes
are ordered length-first and then lexicographically, which is the order in
which breadth-first constructions discover them.

An ``UltimatelyPeriodicWord`` is the finite representation u·v^ω of an infinite
word. Words are kept in reduced form: the period is primitive and the base does
not end with the period's last symbol, so two representations of the same
infinite word compare equal.
"""

from typing import Hashable, Iterable, Optional, Sequence, Set, Tuple


class Class(tuple):
    """Finite symbol sequence used as a state label."""

    def __new__(cls, symbols: Iterable[Hashable] = ()):
        return super().__new__(cls, symbols)

    @classmethod
    def epsilon(cls) -> 'Class':
        """The empty class."""
        return cls()

    def append(self, symbol: Hashable) -> 'Class':
        """Return ``self·symbol`` as a new class."""
        return Class(tuple(self) + (symbol,))

    def prefix(self, length: int) -> 'Class':
        return Class(tuple(self)[:length])

    @staticmethod
    def _key(word) -> Tuple[int, tuple]:
        return len(word), tuple(word)

    def __lt__(self, other):
        if not isinstance(other, tuple):
            return NotImplemented
        return self._key(self) < self._key(other)

    def __le__(self, other):
        if not isinstance(other, tuple):
            return NotImplemented
        return self._key(self) <= self._key(other)

    def __gt__(self, other):
        if not isinstance(other, tuple):
            return NotImplemented
        return self._key(self) > self._key(other)

    def __ge__(self, other):
        if not isinstance(other, tuple):
            return NotImplemented
        return self._key(self) >= self._key(other)

    # tuple defines __eq__, so __hash__ has to be restated after overriding comparisons
    __hash__ = tuple.__hash__

    def __str__(self) -> str:
        if not self:
            return "[ε]"
        return "[" + "".join(str(symbol) for symbol in self) + "]"

    def __repr__(self) -> str:
        return f"Class({tuple(self)!r})"


def _primitive_root(period: Tuple) -> Tuple:
    """Shortest word whose repetition yields ``period``."""
    length = len(period)
    for size in range(1, length + 1):
        if length % size == 0 and period[:size] * (length // size) == period:
            return period[:size]
    return period


class UltimatelyPeriodicWord:
    """
    Infinite word base·recur^ω.

    Symbols at positions ``>= base_length()`` are read from the period with
    modular indexing. The representation is reduced on construction.
    """

    __slots__ = ("base", "recur")

    def __init__(self, base: Sequence[Hashable], recur: Sequence[Hashable]):
        """
        Initialize word.

        Args:
            base: Finite prefix u
            recur: Non-empty period v

        Raises:
            ValueError: If the period is empty
        """
        base = tuple(base)
        recur = tuple(recur)
        if not recur:
            raise ValueError("The period of an ultimately periodic word must be non-empty")

        recur = _primitive_root(recur)
        # Rotate the period backwards as long as the base ends with its last symbol
        while base and base[-1] == recur[-1]:
            base = base[:-1]
            recur = recur[-1:] + recur[:-1]

        self.base: Tuple[Hashable, ...] = base
        self.recur: Tuple[Hashable, ...] = recur

    @classmethod
    def periodic(cls, recur: Sequence[Hashable]) -> 'UltimatelyPeriodicWord':
        """Build v^ω."""
        return cls((), recur)

    @classmethod
    def from_loop_index(cls, word: Sequence[Hashable], loop_index: int) -> 'UltimatelyPeriodicWord':
        """
        Build the word that reads ``word`` and then loops back to position ``loop_index``.

        ``from_loop_index("abab", 3)`` is aba·b^ω.
        """
        if not 0 <= loop_index < len(word):
            raise ValueError(f"Loop index {loop_index} outside of word of length {len(word)}")
        return cls(tuple(word[:loop_index]), tuple(word[loop_index:]))

    @classmethod
    def from_string(cls, text: str) -> 'UltimatelyPeriodicWord':
        """
        Parse the ``u(v)`` notation, e.g. ``"a(b)"`` for a·b^ω or ``"(ab)"`` for (ab)^ω.

        Raises:
            ValueError: If the text is not of the form ``u(v)`` with non-empty v
        """
        text = text.strip()
        if text.count("(") != 1 or text.count(")") != 1 or not text.endswith(")"):
            raise ValueError(f"Expected an ultimately periodic word of the form u(v), got {text!r}")
        base, recur = text[:-1].split("(")
        return cls(base, recur)

    def base_length(self) -> int:
        return len(self.base)

    def recur_length(self) -> int:
        return len(self.recur)

    def nth(self, position: int) -> Hashable:
        """Symbol at ``position`` of the infinite expansion."""
        if position < 0:
            raise IndexError(f"Negative position {position}")
        if position < len(self.base):
            return self.base[position]
        return self.recur[(position - len(self.base)) % len(self.recur)]

    def prefix(self, length: int) -> Class:
        """The finite prefix of the given length."""
        return Class(self.nth(position) for position in range(length))

    def has_prefix(self, word: Sequence[Hashable]) -> bool:
        """Check whether ``word`` is a prefix of the infinite expansion."""
        return all(self.nth(position) == symbol for position, symbol in enumerate(word))

    def alphabet(self) -> Set[Hashable]:
        """Symbols occurring in the word."""
        return set(self.base) | set(self.recur)

    def infinity_set(self) -> Set[Hashable]:
        """Symbols occurring infinitely often."""
        return set(self.recur)

    def __eq__(self, other) -> bool:
        if not isinstance(other, UltimatelyPeriodicWord):
            return NotImplemented
        return self.base == other.base and self.recur == other.recur

    def __hash__(self) -> int:
        return hash((self.base, self.recur))

    def __str__(self) -> str:
        base = "".join(str(symbol) for symbol in self.base)
        recur = "".join(str(symbol) for symbol in self.recur)
        return f"{base}({recur})"

    def __repr__(self) -> str:
        return f"UltimatelyPeriodicWord({str(self)!r})"


def upw(first: Sequence[Hashable], second: Optional[Sequence[Hashable]] = None) -> UltimatelyPeriodicWord:
    """
    Shorthand constructor.

    ``upw("ab")`` is (ab)^ω and ``upw("a", "b")`` is a·b^ω.
    """
    if second is None:
        return UltimatelyPeriodicWord.periodic(first)
    return UltimatelyPeriodicWord(first, second)
