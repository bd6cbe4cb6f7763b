"""Core components: words, transition systems, products and SCCs."""

from .alphabet import Alphabet
from .words import Class, UltimatelyPeriodicWord, upw
from .transition_system import TransitionSystem, UnknownStateError
from .dfa import DFA
from .congruence import RightCongruence
from .product import Product
from .scc import StronglyConnectedComponent, sccs

__all__ = [
    "Alphabet",
    "Class",
    "UltimatelyPeriodicWord",
    "upw",
    "TransitionSystem",
    "UnknownStateError",
    "DFA",
    "RightCongruence",
    "Product",
    "StronglyConnectedComponent",
    "sccs",
]
