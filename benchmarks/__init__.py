"""
Benchmarking framework for the sprout learner on random samples of
benchmark ω-languages.
"""

from .config import BenchmarkConfig
from .metrics import SproutMetrics, BenchmarkResults
from .runner import BenchmarkRunner

__all__ = [
    "BenchmarkConfig",
    "SproutMetrics",
    "BenchmarkResults",
    "BenchmarkRunner"
]
