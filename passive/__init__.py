"""Passive learning of right congruences from samples of ω-words."""

from .sample import Sample
from .config import SproutConfig
from .prefix_tree import PrefixTreeAutomaton, PrefixTreeBuilder, prefix_tree
from .conflicts import ConflictRelation, compute_conflicts
from .sprout import SproutBuilder, SproutLimitExceeded, omega_sprout, learn_skeleton

__all__ = [
    "Sample",
    "SproutConfig",
    "PrefixTreeAutomaton",
    "PrefixTreeBuilder",
    "prefix_tree",
    "ConflictRelation",
    "compute_conflicts",
    "SproutBuilder",
    "SproutLimitExceeded",
    "omega_sprout",
    "learn_skeleton",
]
