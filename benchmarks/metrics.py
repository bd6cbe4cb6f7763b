"""
Metrics collection and storage for sprout benchmarks.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import pandas as pd


@dataclass
class SproutMetrics:
    """Metrics collected during a single sprout run."""

    # Sample
    positive_words: int = 0
    negative_words: int = 0

    # Conflict relation
    positive_tree_states: int = 0
    negative_tree_states: int = 0
    conflicts: int = 0
    closure: int = 0

    # Learner
    num_states: int = 0
    consistency_checks: int = 0
    rejected_edges: int = 0

    # Timing
    conflict_time: float = 0.0
    sprout_time: float = 0.0

    successful: bool = False
    failure_reason: Optional[str] = None

    @property
    def total_time(self) -> float:
        return self.conflict_time + self.sprout_time

    @property
    def sample_size(self) -> int:
        return self.positive_words + self.negative_words

    @property
    def checks_per_state(self) -> float:
        """Average number of consistency checks per learned class."""
        if self.num_states == 0:
            return 0.0
        return self.consistency_checks / self.num_states


@dataclass
class BenchmarkResults:
    """Stores and analyzes results from multiple benchmark runs."""

    results: Dict[str, Dict[int, List[SproutMetrics]]] = field(default_factory=dict)
    # Structure: {language: {sample_size: [metrics1, metrics2, ...]}}

    def add_result(self, language: str, sample_size: int, metrics: SproutMetrics):
        """Add a benchmark result."""
        self.results.setdefault(language, {}).setdefault(sample_size, []).append(metrics)

    def __len__(self) -> int:
        return sum(len(runs) for sizes in self.results.values() for runs in sizes.values())

    def to_dataframe(self) -> pd.DataFrame:
        """Convert results to a pandas DataFrame for analysis."""
        data = []
        for language, size_results in self.results.items():
            for sample_size, metrics_list in size_results.items():
                for i, metrics in enumerate(metrics_list):
                    data.append({
                        'language': language,
                        'sample_size': sample_size,
                        'run': i,
                        'positive_words': metrics.positive_words,
                        'negative_words': metrics.negative_words,
                        'positive_tree_states': metrics.positive_tree_states,
                        'negative_tree_states': metrics.negative_tree_states,
                        'conflicts': metrics.conflicts,
                        'closure': metrics.closure,
                        'num_states': metrics.num_states,
                        'consistency_checks': metrics.consistency_checks,
                        'rejected_edges': metrics.rejected_edges,
                        'checks_per_state': metrics.checks_per_state,
                        'conflict_time': metrics.conflict_time,
                        'sprout_time': metrics.sprout_time,
                        'total_time': metrics.total_time,
                        'successful': metrics.successful,
                        'failure_reason': metrics.failure_reason,
                    })

        return pd.DataFrame(data)

    def print_summary(self):
        """Print a clear summary of benchmark results."""
        df = self.to_dataframe()

        print("\n" + "="*80)
        print("BENCHMARK RESULTS SUMMARY")
        print("="*80)

        if df.empty:
            print("No results recorded.")
            return

        for language in df['language'].unique():
            print(f"\nLanguage: {language}")
            print("-" * 60)

            language_df = df[df['language'] == language]

            summary = language_df.groupby('sample_size').agg({
                'total_time': 'mean',
                'conflicts': 'mean',
                'num_states': 'mean',
                'consistency_checks': 'mean',
                'successful': 'mean'
            }).round(3)

            # Rename columns for clarity
            summary.columns = [
                'Avg Time (s)',
                'Avg Conflicts',
                'Avg States',
                'Avg Checks',
                'Success Rate'
            ]

            print(summary.to_string())
