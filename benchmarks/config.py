"""
Configuration of sprout benchmark sweeps.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class BenchmarkConfig:
    """Parameters of a benchmark sweep over languages and sample sizes."""

    languages: List[str] = field(default_factory=lambda: ["inf_a", "fin_a", "no_aa"])
    sample_sizes: List[int] = field(default_factory=lambda: [4, 8, 16])
    num_runs: int = 3

    # Random sample generation
    alphabet: str = "ab"
    max_base: int = 3
    max_recur: int = 3
    seed: Optional[int] = 0

    # Learner parameters
    max_states: Optional[int] = 50
    workers: int = 1
    verbose: bool = False

    def __post_init__(self):
        if self.num_runs < 1:
            raise ValueError(f"num_runs must be at least 1, got {self.num_runs}")
        if any(size < 0 for size in self.sample_sizes):
            raise ValueError(f"Sample sizes must be non-negative, got {self.sample_sizes}")

    def run_seed(self, language_index: int, size_index: int, run: int) -> Optional[int]:
        """Seed of a single run, derived from the base seed (None keeps runs random)."""
        if self.seed is None:
            return None
        return self.seed + 1000 * language_index + 100 * size_index + run

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for reporting."""
        return {
            'languages': list(self.languages),
            'sample_sizes': list(self.sample_sizes),
            'num_runs': self.num_runs,
            'alphabet': self.alphabet,
            'max_base': self.max_base,
            'max_recur': self.max_recur,
            'seed': self.seed,
            'max_states': self.max_states,
            'workers': self.workers,
        }
