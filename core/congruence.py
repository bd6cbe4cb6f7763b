"""
Right congruences represented by their quotient transition system.

A right congruence ~ on finite words is an equivalence with u ~ v ⟹ ua ~ va.
Its quotient is a deterministic transition system whose states are the
classes; each state is labeled by a representative ``Class``. State 0 is the
class of the empty word.
"""

from typing import Hashable, List, Optional, Sequence

from .alphabet import Alphabet
from .transition_system import TransitionSystem
from .words import Class


class RightCongruence(TransitionSystem):
    """Quotient structure of a right congruence with ``Class`` labels."""

    def __init__(self, alphabet: Alphabet):
        super().__init__(alphabet)
        self.initial = self.add_state(Class.epsilon())
        self.clear_history()

    def class_to_index(self, label: Sequence[Hashable]) -> Optional[int]:
        """Index of the state labeled ``label``, None if there is none."""
        label = Class(label)
        for index in self.state_indices():
            if self.colors[index] == label:
                return index
        return None

    def reached_class(self, word: Sequence[Hashable]) -> Optional[Class]:
        """Label of the class that ``word`` belongs to (None if the run is undefined)."""
        return self.reached_color(word)

    def classes(self) -> List[Class]:
        """State labels in creation order."""
        return [self.colors[index] for index in self.state_indices()]

    def __str__(self) -> str:
        labels = ", ".join(str(label) for label in self.classes())
        return f"RightCongruence(|Q|={self.size()}, |Σ|={len(self.alphabet)}, classes={labels})"
