"""
Greedy construction of a right congruence that is consistent with a conflict relation.

The congruence starts with the single class ε. Missing transitions (state, symbol)
are processed first-in first-out. For each of them the existing classes are tried
as targets in ascending index order; the first one that keeps the congruence
consistent is kept. If none does, a new class labeled ``label(state)·symbol`` is
created ("sprouted") and its outgoing transitions are queued.

Reusing classes whenever possible keeps the congruence small, although the greedy
order does not guarantee a minimal result.
"""

from collections import deque
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Deque, Dict, Hashable, Optional, Tuple
import time

from core.alphabet import Alphabet
from core.congruence import RightCongruence
from .config import SproutConfig
from .conflicts import ConflictRelation, compute_conflicts
from .sample import Sample


class SproutLimitExceeded(RuntimeError):
    """Raised when the congruence would grow beyond ``SproutConfig.max_states``."""
    pass


class SproutBuilder:
    """Sprout learner for right congruences."""

    def __init__(self, alphabet: Alphabet, conflicts: ConflictRelation,
                 config: Optional[SproutConfig] = None):
        """
        Initialize learner.

        Args:
            alphabet: Input alphabet, its order fixes the processing order
            conflicts: Conflict relation of the sample
            config: Limits and verbosity, defaults to ``SproutConfig()``
        """
        self.alphabet = alphabet
        self.conflicts = conflicts
        self.config = config or SproutConfig()

        self.congruence = RightCongruence(alphabet)
        self.queue: Deque[Tuple[int, Hashable]] = deque(
            (self.congruence.initial, symbol) for symbol in alphabet.universe())

        # Statistics
        self.consistency_checks = 0
        self.rejected_edges = 0
        self.states_created = 1
        self.start_time = None
        self.end_time = None

    def run(self) -> RightCongruence:
        """
        Process the work queue until every transition is defined.

        Returns:
            Complete right congruence consistent with the conflict relation

        Raises:
            SproutLimitExceeded: If more than ``config.max_states`` classes are needed
        """
        self.start_time = time.time()
        congruence = self.congruence

        if self.config.workers > 1:
            with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
                self._process_queue(executor)
        else:
            self._process_queue(None)

        congruence.clear_history()
        self.end_time = time.time()

        if self.config.verbose:
            print(f"Sprout finished: {congruence.size()} classes, "
                  f"{self.consistency_checks} consistency checks")
        return congruence

    def _process_queue(self, executor: Optional[ThreadPoolExecutor]):
        """Resolve work items until the queue is empty, checking candidates on ``executor`` if given."""
        congruence = self.congruence
        while self.queue:
            source, symbol = self.queue.popleft()

            if executor is not None:
                target = self._find_target_parallel(executor, source, symbol)
                if target is not None:
                    congruence.add_edge(source, symbol, target)
            else:
                target = self._find_target(source, symbol)

            if target is None:
                target = self._sprout(source, symbol)
            elif self.config.verbose:
                print(f"  {congruence.colors[source]} --{symbol}--> "
                      f"{congruence.colors[target]}")

    def _find_target(self, source: int, symbol: Hashable) -> Optional[int]:
        """Try existing targets in ascending order, keeping the first consistent edge."""
        congruence = self.congruence
        for target in congruence.state_indices():
            with congruence.transaction() as trial:
                congruence.add_edge(source, symbol, target)
                self.consistency_checks += 1
                if self.conflicts.consistent(congruence):
                    trial.commit()
                    return target
            self.rejected_edges += 1
        return None

    def _find_target_parallel(self, executor: ThreadPoolExecutor,
                              source: int, symbol: Hashable) -> Optional[int]:
        """
        Check all existing targets concurrently on copies of the congruence.

        Only the lowest consistent target is returned, so the result equals
        the sequential search.
        """
        targets = self.congruence.state_indices()

        def check(target: int) -> bool:
            trial = self.congruence.copy()
            trial.add_edge(source, symbol, target)
            return self.conflicts.consistent(trial)

        results = list(executor.map(check, targets))

        self.consistency_checks += len(targets)
        for position, accepted in enumerate(results):
            if accepted:
                self.rejected_edges += position
                return targets[position]
        self.rejected_edges += len(targets)
        return None

    def _sprout(self, source: int, symbol: Hashable) -> int:
        """Create the class ``label(source)·symbol`` and queue its transitions."""
        congruence = self.congruence
        max_states = self.config.max_states
        if max_states is not None and congruence.size() >= max_states:
            raise SproutLimitExceeded(
                f"Congruence needs more than {max_states} classes "
                f"(processing {congruence.colors[source]} on {symbol!r})")

        label = congruence.colors[source].append(symbol)
        target = congruence.add_state(label)
        congruence.add_edge(source, symbol, target)
        self.states_created += 1

        for next_symbol in self.alphabet.universe():
            self.queue.append((target, next_symbol))

        if self.config.verbose:
            print(f"  {congruence.colors[source]} --{symbol}--> {label} (new class)")
        return target

    def get_statistics(self) -> Dict[str, Any]:
        """
        Return learning statistics.

        Returns:
            Dictionary with run metrics
        """
        if self.start_time is None:
            total_time = 0.0
        else:
            total_time = (self.end_time or time.time()) - self.start_time

        return {
            "states": self.congruence.size(),
            "states_created": self.states_created,
            "consistency_checks": self.consistency_checks,
            "rejected_edges": self.rejected_edges,
            "conflicts": len(self.conflicts.conflicts),
            "closure": len(self.conflicts.closure),
            "total_time": total_time,
            "config": self.config.to_dict(),
        }

    def print_summary(self):
        """Print learning summary."""
        stats = self.get_statistics()

        print("\n" + "="*50)
        print("Sprout Learning Summary")
        print("="*50)

        print(f"Classes: {stats['states']}")
        print(f"Total time: {stats['total_time']:.2f}s")

        print(f"\nConflict pairs: {stats['conflicts']} (closure: {stats['closure']})")
        print(f"Consistency checks: {stats['consistency_checks']}")
        print(f"Rejected edges: {stats['rejected_edges']}")

        print(f"\nClasses:")
        for label in self.congruence.classes():
            print(f"  {label}")

        print("="*50)


def omega_sprout(alphabet: Alphabet, conflicts: ConflictRelation,
                 config: Optional[SproutConfig] = None) -> RightCongruence:
    """
    Build a right congruence consistent with ``conflicts``.

    Args:
        alphabet: Input alphabet
        conflicts: Conflict relation, e.g. from ``compute_conflicts``
        config: Optional learner configuration

    Returns:
        Complete right congruence
    """
    return SproutBuilder(alphabet, conflicts, config).run()


def learn_skeleton(alphabet: Alphabet, sample: Sample,
                   config: Optional[SproutConfig] = None) -> RightCongruence:
    """Compute the conflict relation of ``sample`` and sprout a congruence from it."""
    verbose = config.verbose if config else False
    conflicts = compute_conflicts(alphabet, sample, verbose=verbose)
    return omega_sprout(alphabet, conflicts, config)
