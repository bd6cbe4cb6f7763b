"""
Labeled samples of ultimately periodic words.

A sample is a pair of disjoint finite sets (positive, negative). It is the
read-only input of the passive learner.
"""

from dataclasses import dataclass
from typing import FrozenSet, Hashable, Iterable, Iterator, Sequence, Set, Tuple

from core.words import UltimatelyPeriodicWord


@dataclass(frozen=True)
class Sample:
    """Finite sample of positive and negative ω-words."""

    positive: FrozenSet[UltimatelyPeriodicWord] = frozenset()
    negative: FrozenSet[UltimatelyPeriodicWord] = frozenset()

    def __post_init__(self):
        object.__setattr__(self, "positive", frozenset(self.positive))
        object.__setattr__(self, "negative", frozenset(self.negative))
        overlap = self.positive & self.negative
        if overlap:
            words = ", ".join(sorted(str(word) for word in overlap))
            raise ValueError(f"Words labeled both positive and negative: {words}")

    @classmethod
    def from_iters(cls, positive: Iterable[UltimatelyPeriodicWord],
                   negative: Iterable[UltimatelyPeriodicWord]) -> 'Sample':
        return cls(frozenset(positive), frozenset(negative))

    @classmethod
    def from_strings(cls, positive: Iterable[str], negative: Iterable[str]) -> 'Sample':
        """Build a sample from words in ``u(v)`` notation."""
        return cls.from_iters(
            (UltimatelyPeriodicWord.from_string(text) for text in positive),
            (UltimatelyPeriodicWord.from_string(text) for text in negative),
        )

    @classmethod
    def from_loop_indices(cls, entries: Iterable[Tuple[Sequence[Hashable], int, bool]]) -> 'Sample':
        """
        Build a sample from (word, loop_index, label) triples.

        ``("abab", 3, True)`` stands for the positive word aba·b^ω.
        """
        positive, negative = [], []
        for word, loop_index, label in entries:
            target = positive if label else negative
            target.append(UltimatelyPeriodicWord.from_loop_index(word, loop_index))
        return cls.from_iters(positive, negative)

    def __len__(self) -> int:
        return len(self.positive) + len(self.negative)

    def is_empty(self) -> bool:
        return len(self) == 0

    def iter(self) -> Iterator[UltimatelyPeriodicWord]:
        """All words, positive ones first."""
        yield from self.positive
        yield from self.negative

    def annotated_iter(self) -> Iterator[Tuple[bool, UltimatelyPeriodicWord]]:
        """All words together with their label."""
        for word in self.positive:
            yield True, word
        for word in self.negative:
            yield False, word

    def max_base_len(self) -> int:
        """Maximum length of the base of any word in the sample."""
        return max((word.base_length() for word in self.iter()), default=0)

    def max_recur_len(self) -> int:
        """Maximum length of the period of any word in the sample."""
        return max((word.recur_length() for word in self.iter()), default=0)

    def alphabet(self) -> Set[Hashable]:
        """Symbols occurring in the sample."""
        symbols = set()
        for word in self.iter():
            symbols |= word.alphabet()
        return symbols

    def __str__(self) -> str:
        positive = ", ".join(sorted(str(word) for word in self.positive))
        negative = ", ".join(sorted(str(word) for word in self.negative))
        return f"Sample(+{{{positive}}}, -{{{negative}}})"
