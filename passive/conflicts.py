"""
Conflict relation between the positive and negative prefix trees.

A pair (p, n) of a positive-tree state and a negative-tree state is in conflict
if it lies on a cycle of the synchronous product of the two trees: some
non-empty word x returns both runs to the same component, so a positive word
continuing from p and a negative word continuing from n share their periodic
behaviour. A right congruence that puts the words leading to p and to n into
the same class cannot be extended to an acceptor that separates the sample.

Pairs from which such a cycle can be reached jointly (the closure) are just as
bad: the common continuation leads a shared class onto a conflict pair.
"""

from collections import defaultdict, deque
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from core.alphabet import Alphabet
from core.congruence import RightCongruence
from core.product import Product
from core.scc import sccs
from .prefix_tree import PrefixTreeAutomaton, prefix_tree
from .sample import Sample

StatePair = Tuple[int, int]


class ConflictRelation:
    """
    Positive/negative prefix trees together with their conflicting state pairs.

    Attributes:
        positive_tree: Prefix tree automaton of the positive words
        negative_tree: Prefix tree automaton of the negative words
        conflicts: Pairs drawn from non-trivial SCCs of the trees' product
        closure: Pairs from which some conflict pair is reachable in the product
    """

    def __init__(self, positive_tree: PrefixTreeAutomaton,
                 negative_tree: PrefixTreeAutomaton,
                 conflicts: Iterable[StatePair]):
        self.positive_tree = positive_tree
        self.negative_tree = negative_tree
        self.conflicts: FrozenSet[StatePair] = frozenset(conflicts)
        self.closure: FrozenSet[StatePair] = frozenset(self._backward_closure())

    def _backward_closure(self) -> Set[StatePair]:
        if not self.conflicts:
            return set()

        product = Product(self.positive_tree, self.negative_tree)
        predecessors: Dict[StatePair, List[StatePair]] = defaultdict(list)
        for state in product.state_indices():
            for _, target in product.edges_from(state):
                predecessors[target].append(state)

        closed = set(self.conflicts)
        queue = deque(sorted(self.conflicts))
        while queue:
            state = queue.popleft()
            for predecessor in predecessors[state]:
                if predecessor not in closed:
                    closed.add(predecessor)
                    queue.append(predecessor)
        return closed

    def conflict_witness(self, congruence: RightCongruence) -> Optional[Tuple[int, int, int]]:
        """
        Find a class that is shared by a positive and a negative tree state in conflict.

        Reachability is computed independently in congruence × positive tree
        and congruence × negative tree.

        Returns:
            (class, positive state, negative state) or None if there is none
        """
        if not self.closure:
            return None

        positive_reached: Dict[int, Set[int]] = defaultdict(set)
        for state, positive_state in Product(congruence, self.positive_tree).reachable_state_indices():
            positive_reached[state].add(positive_state)

        for state, negative_state in Product(congruence, self.negative_tree).reachable_state_indices():
            for positive_state in sorted(positive_reached.get(state, ())):
                if (positive_state, negative_state) in self.closure:
                    return state, positive_state, negative_state
        return None

    def consistent(self, congruence: RightCongruence) -> bool:
        """Check that no class of ``congruence`` joins a conflicting pair."""
        return self.conflict_witness(congruence) is None

    def __len__(self) -> int:
        return len(self.conflicts)

    def __str__(self) -> str:
        return (f"ConflictRelation(positive={self.positive_tree.size()} states, "
                f"negative={self.negative_tree.size()} states, "
                f"conflicts={len(self.conflicts)}, closure={len(self.closure)})")


def compute_conflicts(alphabet: Alphabet, sample: Sample, verbose: bool = False) -> ConflictRelation:
    """
    Build the conflict relation of a sample.

    Args:
        alphabet: Input alphabet
        sample: Disjoint positive and negative ω-words
        verbose: Print progress information

    Returns:
        ConflictRelation owning both prefix trees
    """
    positive_tree = prefix_tree(alphabet, sample.positive, verbose=verbose)
    negative_tree = prefix_tree(alphabet, sample.negative, verbose=verbose)

    # All pairs are roots; pairs reachable from (ε, ε) alone never cycle for a disjoint sample
    product = Product(positive_tree, negative_tree)
    conflicts: List[StatePair] = []
    for component in sccs(product):
        if not component.is_trivial():
            conflicts.extend(component)

    relation = ConflictRelation(positive_tree, negative_tree, conflicts)
    if verbose:
        print(f"  {relation}")
    return relation
