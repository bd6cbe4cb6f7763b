"""
Deterministic Finite Automaton (DFA) implementation.

A DFA is formally a 5-tuple (Q, Σ, δ, q₀, F) where Q is the state set,
Σ is the alphabet, δ: Q × Σ → Q is the (partial) transition function,
q₀ is the initial state, and F is the set of accepting states.

Here a DFA is a transition system with an accepting set on top. A missing
edge rejects, which is what prefix recognisers rely on.
"""

from typing import Hashable, List, Optional, Sequence, Set

from .alphabet import Alphabet
from .transition_system import TransitionSystem


class DFA(TransitionSystem):
    """Deterministic Finite Automaton over a transition system."""

    def __init__(self, alphabet: Alphabet, final_states: Optional[Set[int]] = None):
        """
        Initialize DFA.

        Args:
            alphabet: Input alphabet
            final_states: Set of accepting state indices
        """
        super().__init__(alphabet)
        self.F: Set[int] = set(final_states or ())

    def set_accepting(self, index: int, accepting: bool = True):
        """Mark a state as accepting or rejecting."""
        self._require(index)
        self._log.append(("set_accepting", index, index in self.F))
        if accepting:
            self.F.add(index)
        else:
            self.F.discard(index)

    def accepting_states(self) -> List[int]:
        return sorted(self.F)

    def remove_state(self, index: int):
        if index in self.F:
            self.set_accepting(index, False)
        super().remove_state(index)

    def accepts(self, word: Sequence[Hashable]) -> bool:
        """
        Determine if DFA accepts given word.

        Args:
            word: Sequence of symbols from alphabet

        Returns:
            True if word leads to accepting state

        Time Complexity: O(|word|)
        """
        if self.initial not in self.colors:
            return False
        current_state = self.initial

        for symbol in word:
            if symbol not in self.alphabet:
                return False
            current_state = self.delta[current_state].get(symbol)
            if current_state is None:
                return False

        return current_state in self.F

    def classify_word(self, word: str) -> bool:
        """Classify word as accepted/rejected (string input variant)."""
        return self.accepts(list(word))

    def copy(self) -> 'DFA':
        duplicate = super().copy()
        duplicate.F = set(self.F)
        return duplicate

    def _revert(self, entry: tuple):
        if entry[0] == "set_accepting":
            _, index, was_accepting = entry
            if was_accepting:
                self.F.add(index)
            else:
                self.F.discard(index)
        else:
            super()._revert(entry)

    def __str__(self) -> str:
        return (f"DFA(|Q|={self.size()}, |Σ|={len(self.alphabet)}, "
                f"q0={self.initial}, |F|={len(self.F)})")
