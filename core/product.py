"""
Synchronous product of two transition systems.

The product has pairs (l, r) as states and an edge (l, r) --a--> (l', r')
whenever both components have an a-edge. It is evaluated lazily: nothing is
materialised, successors are computed from the components on demand.
"""

from collections import deque
from typing import Hashable, Iterator, List, Optional, Tuple

Pair = Tuple[int, int]


class Product:
    """Lazy synchronous product of ``left`` and ``right``."""

    def __init__(self, left, right):
        """
        Args:
            left: Transition system whose alphabet order drives the enumeration
            right: Second transition system
        """
        self.left = left
        self.right = right
        self.alphabet = left.alphabet

    @property
    def initial(self) -> Pair:
        return self.left.initial, self.right.initial

    def successor(self, state: Pair, symbol: Hashable) -> Optional[Pair]:
        left_state, right_state = state
        left_target = self.left.successor(left_state, symbol)
        if left_target is None:
            return None
        right_target = self.right.successor(right_state, symbol)
        if right_target is None:
            return None
        return left_target, right_target

    def edges_from(self, state: Pair) -> Iterator[Tuple[Hashable, Pair]]:
        """Outgoing product edges as (symbol, pair), in alphabet order."""
        for symbol in self.alphabet.universe():
            target = self.successor(state, symbol)
            if target is not None:
                yield symbol, target

    def state_indices(self) -> List[Pair]:
        """All pairs of component states (the full product)."""
        return [(left_state, right_state)
                for left_state in self.left.state_indices()
                for right_state in self.right.state_indices()]

    def reachable_state_indices(self) -> List[Pair]:
        """Pairs reachable from the initial pair, in breadth-first order."""
        start = self.initial
        if not (self.left.contains_state(start[0]) and self.right.contains_state(start[1])):
            return []
        visited = {start}
        order = [start]
        queue = deque([start])
        while queue:
            state = queue.popleft()
            for _, target in self.edges_from(state):
                if target not in visited:
                    visited.add(target)
                    order.append(target)
                    queue.append(target)
        return order

    def __str__(self) -> str:
        return f"Product({self.left}, {self.right})"
