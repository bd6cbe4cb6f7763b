"""
Finite alphabets with a fixed enumeration order.

Every traversal in the library (breadth-first construction of prefix trees,
the work queue of the sprout learner, product exploration) enumerates symbols
in the order fixed here, which is what makes the constructions deterministic.
"""

from typing import Hashable, Iterable, Iterator, Tuple


class Alphabet:
    """Ordered set of distinct symbols."""

    def __init__(self, symbols: Iterable[Hashable]):
        """
        Initialize alphabet.

        Args:
            symbols: Symbols in enumeration order

        Raises:
            ValueError: If a symbol occurs twice
        """
        self.symbols: Tuple[Hashable, ...] = tuple(symbols)
        self._positions = {}
        for position, symbol in enumerate(self.symbols):
            if symbol in self._positions:
                raise ValueError(f"Duplicate symbol {symbol!r} in alphabet")
            self._positions[symbol] = position

    @classmethod
    def from_string(cls, symbols: str) -> 'Alphabet':
        """Build an alphabet of single characters, e.g. ``Alphabet.from_string("ab")``."""
        return cls(symbols)

    def universe(self) -> Iterator[Hashable]:
        """Iterate over all symbols in enumeration order."""
        return iter(self.symbols)

    def index(self, symbol: Hashable) -> int:
        """Position of ``symbol`` in the enumeration order."""
        return self._positions[symbol]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def __contains__(self, symbol) -> bool:
        return symbol in self._positions

    def __eq__(self, other) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self.symbols == other.symbols

    def __hash__(self) -> int:
        return hash(self.symbols)

    def __repr__(self) -> str:
        return f"Alphabet({list(self.symbols)!r})"
