"""
Deterministic transition systems with a reversible edit log.

A transition system is the tuple (Q, Σ, δ, q₀) together with a color (label)
for every state. States are integer indices handed out in creation order and
δ is stored as a nested adjacency map ``delta[state][symbol] -> state``.

Every mutation is recorded in an edit log, so tentative changes can be undone
in LIFO order. Searches that test a change and then keep or discard it should
use ``transaction()`` instead of pairing additions and removals by hand.
"""

from collections import deque
from contextlib import contextmanager
from typing import Any, Dict, Hashable, Iterator, List, Optional, Sequence, Tuple
import copy

from .alphabet import Alphabet
from .words import Class


class UnknownStateError(KeyError):
    """Raised when an operation refers to a state that does not exist."""
    pass


class Transaction:
    """Handle for a tentative group of edits, see ``TransitionSystem.transaction``."""

    def __init__(self, checkpoint: int):
        self.checkpoint = checkpoint
        self.committed = False

    def commit(self):
        """Keep the edits made inside the transaction."""
        self.committed = True


class TransitionSystem:
    """Deterministic labeled transition system over a fixed alphabet."""

    def __init__(self, alphabet: Alphabet):
        """
        Initialize an empty transition system.

        Args:
            alphabet: Input alphabet Σ
        """
        self.alphabet = alphabet
        self.colors: Dict[int, Any] = {}
        self.delta: Dict[int, Dict[Hashable, int]] = {}
        self.initial: int = 0

        self._next_index = 0
        self._log: List[tuple] = []

    # ------------------------------------------------------------------
    # States
    # ------------------------------------------------------------------

    def add_state(self, color: Any = None) -> int:
        """Add a state with the given color and return its index."""
        index = self._next_index
        self._next_index += 1
        self.colors[index] = color
        self.delta[index] = {}
        self._log.append(("add_state", index))
        return index

    def remove_state(self, index: int):
        """Remove a state together with all edges entering or leaving it."""
        self._require(index)
        outgoing = dict(self.delta[index])
        incoming = [(source, symbol)
                    for source, edges in self.delta.items() if source != index
                    for symbol, target in edges.items() if target == index]
        for source, symbol in incoming:
            del self.delta[source][symbol]
        color = self.colors.pop(index)
        del self.delta[index]
        self._log.append(("remove_state", index, color, outgoing, incoming))

    def contains_state(self, index: int) -> bool:
        return index in self.colors

    def state_color(self, index: int) -> Any:
        self._require(index)
        return self.colors[index]

    def set_state_color(self, index: int, color: Any):
        self._require(index)
        self._log.append(("set_color", index, self.colors[index]))
        self.colors[index] = color

    def state_indices(self) -> List[int]:
        """All state indices in ascending (creation) order."""
        return sorted(self.colors)

    def size(self) -> int:
        return len(self.colors)

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(self, source: int, symbol: Hashable, target: int) -> Optional[int]:
        """
        Add the edge source --symbol--> target.

        An existing edge for (source, symbol) is replaced.

        Returns:
            The replaced target, or None if there was no edge before

        Raises:
            UnknownStateError: If source or target does not exist
            ValueError: If symbol is not part of the alphabet
        """
        self._require(source)
        self._require(target)
        if symbol not in self.alphabet:
            raise ValueError(f"Symbol {symbol!r} is not part of {self.alphabet!r}")

        previous = self.delta[source].get(symbol)
        self.delta[source][symbol] = target
        self._log.append(("add_edge", source, symbol, previous))
        return previous

    def remove_edge(self, source: int, symbol: Hashable) -> bool:
        """Remove the edge leaving source on symbol, returns whether it existed."""
        self._require(source)
        if symbol not in self.delta[source]:
            return False
        target = self.delta[source].pop(symbol)
        self._log.append(("remove_edge", source, symbol, target))
        return True

    def successor(self, state: int, symbol: Hashable) -> Optional[int]:
        self._require(state)
        return self.delta[state].get(symbol)

    def edges_from(self, state: int) -> Iterator[Tuple[Hashable, int]]:
        """Outgoing edges of a state as (symbol, target), in alphabet order."""
        self._require(state)
        edges = self.delta[state]
        for symbol in self.alphabet.universe():
            if symbol in edges:
                yield symbol, edges[symbol]

    def edges(self) -> Iterator[Tuple[int, Hashable, int]]:
        """All edges as (source, symbol, target)."""
        for source in self.state_indices():
            for symbol, target in self.edges_from(source):
                yield source, symbol, target

    # ------------------------------------------------------------------
    # Edit log
    # ------------------------------------------------------------------

    def undo_add_edge(self):
        """
        Revert the most recent mutation, which has to be an edge addition.

        Every tentative ``add_edge`` must be paired with exactly one undo or be
        kept; calling this without a pending addition is a caller error.
        """
        assert self._log and self._log[-1][0] == "add_edge", \
            "undo_add_edge called without a pending edge addition"
        self._revert(self._log.pop())

    def checkpoint(self) -> int:
        """Mark the current position in the edit log."""
        return len(self._log)

    def rollback(self, checkpoint: int):
        """Undo all edits made after ``checkpoint``, most recent first."""
        while len(self._log) > checkpoint:
            self._revert(self._log.pop())

    def clear_history(self):
        """Forget the edit log; the current structure becomes the base for later rollbacks."""
        self._log.clear()

    @contextmanager
    def transaction(self):
        """
        Group tentative edits.

        Edits made inside the block are rolled back on exit unless
        ``commit()`` was called on the yielded handle. If an exception escapes
        the block, the edits are rolled back as well.

        Usage:
            with ts.transaction() as trial:
                ts.add_edge(source, symbol, target)
                if acceptable(ts):
                    trial.commit()
        """
        trial = Transaction(self.checkpoint())
        committed = False
        try:
            yield trial
            committed = trial.committed
        finally:
            if not committed:
                self.rollback(trial.checkpoint)

    def _revert(self, entry: tuple):
        kind = entry[0]
        if kind == "add_state":
            index = entry[1]
            del self.colors[index]
            del self.delta[index]
            self._next_index = index
        elif kind == "remove_state":
            _, index, color, outgoing, incoming = entry
            self.colors[index] = color
            self.delta[index] = dict(outgoing)
            for source, symbol in incoming:
                self.delta[source][symbol] = index
        elif kind == "add_edge":
            _, source, symbol, previous = entry
            if previous is None:
                del self.delta[source][symbol]
            else:
                self.delta[source][symbol] = previous
        elif kind == "remove_edge":
            _, source, symbol, target = entry
            self.delta[source][symbol] = target
        elif kind == "set_color":
            _, index, color = entry
            self.colors[index] = color
        else:
            raise ValueError(f"Unknown edit log entry {kind!r}")

    # ------------------------------------------------------------------
    # Runs and reachability
    # ------------------------------------------------------------------

    def run(self, word: Sequence[Hashable], start: Optional[int] = None) -> Optional[int]:
        """
        Get state reached after processing word.

        Args:
            word: Sequence of symbols (a string works for character alphabets)
            start: State to start in, defaults to the initial state

        Returns:
            Reached state index or None if an edge is missing on the way
        """
        current = self.initial if start is None else start
        self._require(current)
        for symbol in word:
            current = self.delta[current].get(symbol)
            if current is None:
                return None
        return current

    def reached_color(self, word: Sequence[Hashable]) -> Any:
        """Color of the state reached on word, None if the run is undefined."""
        state = self.run(word)
        return None if state is None else self.colors[state]

    def is_complete(self) -> bool:
        """Check that every state has an edge for every symbol."""
        return not self.missing_transitions()

    def missing_transitions(self) -> List[Tuple[int, Hashable]]:
        """All (state, symbol) pairs without an outgoing edge."""
        return [(state, symbol)
                for state in self.state_indices()
                for symbol in self.alphabet.universe()
                if symbol not in self.delta[state]]

    def reachable_state_indices(self) -> List[int]:
        """States reachable from the initial state, in breadth-first order."""
        return [state for _, state in self.minimal_representatives()]

    def minimal_representatives(self) -> Iterator[Tuple[Class, int]]:
        """
        Length-lexicographically minimal word reaching each reachable state.

        Yields:
            (word, state) pairs in breadth-first order
        """
        if self.initial not in self.colors:
            return
        queue = deque([(Class.epsilon(), self.initial)])
        visited = {self.initial}
        while queue:
            word, state = queue.popleft()
            yield word, state
            for symbol, target in self.edges_from(state):
                if target not in visited:
                    visited.add(target)
                    queue.append((word.append(symbol), target))

    # ------------------------------------------------------------------
    # Misc
    # ------------------------------------------------------------------

    def copy(self) -> 'TransitionSystem':
        """Independent copy (structure and edit log)."""
        duplicate = copy.copy(self)
        duplicate.colors = dict(self.colors)
        duplicate.delta = {state: dict(edges) for state, edges in self.delta.items()}
        duplicate._log = list(self._log)
        return duplicate

    def format_transitions(self) -> str:
        """Human readable listing of all edges, one per line."""
        lines = []
        for source, symbol, target in self.edges():
            lines.append(f"{self.colors[source]} --{symbol}--> {self.colors[target]}")
        return "\n".join(lines)

    def _require(self, index: int):
        if index not in self.colors:
            raise UnknownStateError(index)

    def __len__(self) -> int:
        return self.size()

    def __str__(self) -> str:
        return (f"{self.__class__.__name__}(|Q|={self.size()}, "
                f"|Σ|={len(self.alphabet)}, q0={self.initial})")
