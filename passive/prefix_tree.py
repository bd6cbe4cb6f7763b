"""
Prefix trees of sets of ultimately periodic words.

The prefix tree automaton of a set W recognises exactly the finite prefixes of
the words in W. States are labeled by ``Class``es, each of which is a prefix of
some word. Once a prefix identifies a single word, the periodic tail is folded
back onto an earlier state, which keeps the automaton finite.

Successor of state c on symbol a, with candidate = c·a:
- no word has the candidate as prefix: no edge
- several words do: the candidate itself
- exactly one word w does: truncate the candidate by one period of w; if the
  truncated prefix still identifies w alone, loop back to it, otherwise keep
  the candidate
"""

from collections import deque
from typing import Dict, Hashable, Iterable, List, Optional, Sequence

from core.alphabet import Alphabet
from core.dfa import DFA
from core.words import Class, UltimatelyPeriodicWord


class PrefixTreeAutomaton(DFA):
    """DFA over ``Class``-labeled states in which every state accepts."""

    def __init__(self, alphabet: Alphabet):
        super().__init__(alphabet)
        self.initial = self.add_state(Class.epsilon())

    def add_state(self, color=None) -> int:
        index = super().add_state(color)
        self.set_accepting(index)
        return index

    def class_to_index(self, label: Sequence[Hashable]) -> Optional[int]:
        """Index of the state labeled ``label``, None if it is not a state."""
        label = Class(label)
        for index in self.state_indices():
            if self.colors[index] == label:
                return index
        return None

    def classes(self) -> List[Class]:
        return [self.colors[index] for index in self.state_indices()]


class PrefixTreeBuilder:
    """Computes the prefix tree automaton of a finite set of ω-words."""

    def __init__(self, alphabet: Alphabet, words: Iterable[UltimatelyPeriodicWord],
                 verbose: bool = False):
        """
        Initialize builder.

        Args:
            alphabet: Alphabet whose order drives the breadth-first construction
            words: Finite set of ultimately periodic words
            verbose: Print every computed successor

        Raises:
            ValueError: If a word uses symbols outside of the alphabet
        """
        self.alphabet = alphabet
        self.words: List[UltimatelyPeriodicWord] = sorted(set(words), key=str)
        self.verbose = verbose

        for word in self.words:
            foreign = word.alphabet() - set(alphabet.universe())
            if foreign:
                raise ValueError(f"Word {word} uses symbols {sorted(map(str, foreign))} "
                                 f"outside of {alphabet!r}")

    def words_with_prefix(self, prefix: Sequence[Hashable]) -> List[UltimatelyPeriodicWord]:
        """All words of the set that have ``prefix`` as a prefix."""
        return [word for word in self.words if word.has_prefix(prefix)]

    def successor(self, state: Class, symbol: Hashable) -> Optional[Class]:
        """
        Successor of ``state`` on ``symbol``.

        Returns:
            The label of the successor state, or None if no word continues
        """
        candidate = state.append(symbol)
        matching = self.words_with_prefix(candidate)

        if not matching:
            return None
        if len(matching) > 1:
            return candidate

        word = matching[0]
        cut = len(candidate) - word.recur_length()
        # Folding is only phase preserving inside the periodic part of the word
        if cut < word.base_length():
            return candidate

        base = candidate.prefix(cut)
        if len(self.words_with_prefix(base)) == 1:
            if self.verbose:
                print(f"    {state} --{symbol}--> {base} (loop back for {word})")
            return base
        return candidate

    def build(self) -> PrefixTreeAutomaton:
        """
        Materialise the automaton by breadth-first exploration from ε.

        States are discovered in length-lexicographic order.
        """
        tree = PrefixTreeAutomaton(self.alphabet)
        index: Dict[Class, int] = {Class.epsilon(): tree.initial}
        queue = deque([Class.epsilon()])

        while queue:
            state = queue.popleft()
            for symbol in self.alphabet.universe():
                target = self.successor(state, symbol)
                if target is None:
                    continue
                if target not in index:
                    index[target] = tree.add_state(target)
                    queue.append(target)
                tree.add_edge(index[state], symbol, index[target])

        tree.clear_history()
        if self.verbose:
            print(f"  Prefix tree of {len(self.words)} words: {tree.size()} states")
        return tree


def prefix_tree(alphabet: Alphabet, words: Iterable[UltimatelyPeriodicWord],
                verbose: bool = False) -> PrefixTreeAutomaton:
    """Convenience wrapper around ``PrefixTreeBuilder``."""
    return PrefixTreeBuilder(alphabet, words, verbose=verbose).build()
