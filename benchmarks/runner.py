"""
Benchmark runner for the sprout learner.

For every language and sample size a random sample is drawn, its conflict
relation is computed and a congruence is sprouted from it. Runs that exceed the
state limit are recorded as failures instead of aborting the sweep.
"""

import time
from typing import Optional

from core.alphabet import Alphabet
from languages.omega import LANGUAGE_SYMBOLS, generate_sample, get_omega_language
from passive.conflicts import compute_conflicts
from passive.config import SproutConfig
from passive.sample import Sample
from passive.sprout import SproutBuilder, SproutLimitExceeded
from benchmarks.config import BenchmarkConfig
from benchmarks.metrics import BenchmarkResults, SproutMetrics


class BenchmarkRunner:
    """Orchestrates benchmark execution across languages and sample sizes."""

    def __init__(self, config: Optional[BenchmarkConfig] = None):
        self.config = config or BenchmarkConfig()
        self.alphabet = Alphabet.from_string(self.config.alphabet)
        missing = [symbol for symbol in LANGUAGE_SYMBOLS if symbol not in self.alphabet]
        if missing:
            raise ValueError(f"Benchmark alphabet {self.config.alphabet!r} lacks symbols {missing}")
        self.results = BenchmarkResults()

    def run(self) -> BenchmarkResults:
        """
        Run the configured sweep.

        Returns:
            Collected results of all runs
        """
        config = self.config
        # Fail early on unknown names
        languages = [(name, get_omega_language(name)) for name in config.languages]

        total_experiments = len(languages) * len(config.sample_sizes) * config.num_runs
        print("=" * 80)
        print("Starting Sprout Benchmark")
        print(f"Languages: {config.languages}")
        print(f"Sample sizes: {config.sample_sizes}")
        print(f"Runs per config: {config.num_runs}")
        print(f"Word bounds: base <= {config.max_base}, period <= {config.max_recur}")
        print("=" * 80)

        completed = 0
        for language_index, (name, (predicate, description)) in enumerate(languages):
            for size_index, size in enumerate(config.sample_sizes):
                for run in range(config.num_runs):
                    sample = generate_sample(
                        predicate, self.alphabet, size,
                        max_base=config.max_base, max_recur=config.max_recur,
                        seed=config.run_seed(language_index, size_index, run))
                    metrics = self.run_single(sample)
                    self.results.add_result(name, size, metrics)

                    completed += 1
                    if metrics.successful:
                        print(f"[{completed}/{total_experiments}] ✅ {name}/size_{size}/run_{run+1} "
                              f"({metrics.num_states} states, {metrics.total_time:.2f}s)")
                    else:
                        print(f"[{completed}/{total_experiments}] ❌ {name}/size_{size}/run_{run+1} "
                              f"({metrics.failure_reason})")

        return self.results

    def run_single(self, sample: Sample) -> SproutMetrics:
        """Compute conflicts and sprout a congruence for one sample."""
        config = self.config
        metrics = SproutMetrics(positive_words=len(sample.positive),
                                negative_words=len(sample.negative))

        if config.verbose:
            print(f"    {sample}")

        start = time.time()
        conflicts = compute_conflicts(self.alphabet, sample, verbose=config.verbose)
        metrics.conflict_time = time.time() - start
        metrics.positive_tree_states = conflicts.positive_tree.size()
        metrics.negative_tree_states = conflicts.negative_tree.size()
        metrics.conflicts = len(conflicts.conflicts)
        metrics.closure = len(conflicts.closure)

        learner = SproutBuilder(self.alphabet, conflicts,
                                SproutConfig(max_states=config.max_states,
                                             workers=config.workers,
                                             verbose=config.verbose))
        start = time.time()
        try:
            congruence = learner.run()
        except SproutLimitExceeded as e:
            metrics.failure_reason = str(e)
        else:
            metrics.successful = True
            metrics.num_states = congruence.size()
        metrics.sprout_time = time.time() - start

        stats = learner.get_statistics()
        metrics.consistency_checks = stats['consistency_checks']
        metrics.rejected_edges = stats['rejected_edges']
        if not metrics.successful:
            metrics.num_states = stats['states']
        return metrics
