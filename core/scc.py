"""
Strongly connected component decomposition.

Iterative version of Tarjan's algorithm, so deep graphs do not hit the
recursion limit. Works on anything that exposes ``state_indices()`` and
``edges_from(state)`` yielding (symbol, target) pairs, i.e. transition
systems as well as products.
"""

from typing import Hashable, Iterable, Iterator, List, Optional, Tuple


class StronglyConnectedComponent:
    """Maximal set of mutually reachable states."""

    def __init__(self, states: Iterable[Hashable], has_self_loop: bool = False):
        self.states: Tuple[Hashable, ...] = tuple(states)
        self.has_self_loop = has_self_loop

    def is_trivial(self) -> bool:
        """A component is trivial if it is a single state without a self-loop (no cycle)."""
        return len(self.states) == 1 and not self.has_self_loop

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.states)

    def __len__(self) -> int:
        return len(self.states)

    def __contains__(self, state) -> bool:
        return state in self.states

    def __repr__(self) -> str:
        return f"SCC({list(self.states)!r}, trivial={self.is_trivial()})"


def sccs(graph, roots: Optional[Iterable[Hashable]] = None) -> List[StronglyConnectedComponent]:
    """
    Decompose ``graph`` into strongly connected components.

    Args:
        graph: Object with ``state_indices()`` and ``edges_from(state)``
        roots: States to start the search from, defaults to ``graph.state_indices()``.
            Everything reachable from the roots is decomposed.

    Returns:
        Components in the order Tarjan's algorithm completes them
        (reverse topological order of the condensation)
    """
    if roots is None:
        roots = graph.state_indices()

    def successors(state):
        return [target for _, target in graph.edges_from(state)]

    index_of = {}
    lowlink = {}
    stack: List[Hashable] = []
    on_stack = set()
    components: List[StronglyConnectedComponent] = []
    counter = 0

    for root in roots:
        if root in index_of:
            continue

        index_of[root] = lowlink[root] = counter
        counter += 1
        stack.append(root)
        on_stack.add(root)
        work = [(root, iter(successors(root)))]

        while work:
            node, children = work[-1]
            descended = False
            for child in children:
                if child not in index_of:
                    index_of[child] = lowlink[child] = counter
                    counter += 1
                    stack.append(child)
                    on_stack.add(child)
                    work.append((child, iter(successors(child))))
                    descended = True
                    break
                if child in on_stack:
                    lowlink[node] = min(lowlink[node], index_of[child])
            if descended:
                continue

            work.pop()
            if work:
                parent = work[-1][0]
                lowlink[parent] = min(lowlink[parent], lowlink[node])

            if lowlink[node] == index_of[node]:
                members = []
                while True:
                    member = stack.pop()
                    on_stack.discard(member)
                    members.append(member)
                    if member == node:
                        break
                members.reverse()
                self_loop = len(members) == 1 and node in successors(node)
                components.append(StronglyConnectedComponent(members, self_loop))

    return components
