#!/usr/bin/env python
"""
Main entry point for the sprout learner.

Runs benchmark sweeps over random samples of the benchmark ω-languages, or
learns a single congruence from words given on the command line.

Usage:
    python run_benchmark.py [options]
    python run_benchmark.py --languages inf_a no_aa --sizes 8 16 --runs 5
    python run_benchmark.py --positive "(b)" "(ab)" --negative "a(b)" "(a)"
"""

import argparse
import sys
import time
from typing import List, Optional

from benchmarks.config import BenchmarkConfig
from benchmarks.runner import BenchmarkRunner
from core.alphabet import Alphabet
from languages.omega import OMEGA_LANGUAGES
from passive.conflicts import compute_conflicts
from passive.config import SproutConfig
from passive.sample import Sample
from passive.sprout import SproutBuilder, SproutLimitExceeded


def print_header():
    """Print the benchmark header."""
    print("=" * 70)
    print("Sprout: passive learning of right congruences for ω-languages")
    print("=" * 70)


def run_sprout(args) -> int:
    """Learn a congruence from the words given on the command line."""
    sample = Sample.from_strings(args.positive or [], args.negative or [])
    symbols = args.alphabet or "".join(sorted(str(symbol) for symbol in sample.alphabet()))
    if not symbols:
        print("Error: Cannot infer an alphabet from an empty sample, use --alphabet")
        return 1
    alphabet = Alphabet.from_string(symbols)

    print(f"Alphabet: {', '.join(alphabet.symbols)}")
    print(f"{sample}")

    conflicts = compute_conflicts(alphabet, sample, verbose=args.verbose)
    print(f"Conflict pairs: {len(conflicts.conflicts)} (closure: {len(conflicts.closure)})")

    learner = SproutBuilder(alphabet, conflicts,
                            SproutConfig(max_states=args.max_states,
                                         workers=args.workers,
                                         verbose=args.verbose))
    try:
        congruence = learner.run()
    except SproutLimitExceeded as e:
        print(f"Error: {e}")
        return 1

    print(f"\n{congruence}")
    print(congruence.format_transitions())
    if args.verbose:
        learner.print_summary()
    return 0


def run_sweep(args) -> int:
    """Run a benchmark sweep over languages and sample sizes."""
    config = BenchmarkConfig(
        languages=args.languages,
        sample_sizes=args.sizes,
        num_runs=args.runs,
        alphabet=args.alphabet or "ab",
        max_base=args.max_base,
        max_recur=args.max_recur,
        seed=args.seed,
        max_states=args.max_states,
        workers=args.workers,
        verbose=args.verbose,
    )

    print_header()
    print(f"\nConfiguration:")
    for key, value in config.to_dict().items():
        print(f"  {key}: {value}")
    print()

    start_time = time.time()
    results = BenchmarkRunner(config).run()
    results.print_summary()

    total_time = time.time() - start_time
    print(f"\nTotal benchmark time: {total_time:.1f} seconds")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with command line interface."""
    parser = argparse.ArgumentParser(
        description="Sprout learner for right congruences of ω-languages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run default benchmark
  python run_benchmark.py

  # Selected languages and sample sizes
  python run_benchmark.py --languages inf_a even_fin_a --sizes 4 8 16 32

  # Learn from an explicit sample (words in u(v) notation)
  python run_benchmark.py --positive "(b)" "(abab)" "(abbab)" --negative "a(b)" "(a)"
        """
    )

    # Explicit sample
    parser.add_argument(
        '--positive',
        nargs='*',
        default=None,
        help='Positive words in u(v) notation, switches to single sample mode'
    )
    parser.add_argument(
        '--negative',
        nargs='*',
        default=None,
        help='Negative words in u(v) notation, switches to single sample mode'
    )
    parser.add_argument(
        '--alphabet',
        type=str,
        default=None,
        help='Alphabet symbols in enumeration order (default: symbols of the sample, or "ab")'
    )

    # Benchmark sweep
    parser.add_argument(
        '--languages',
        nargs='+',
        choices=sorted(OMEGA_LANGUAGES),
        default=['inf_a', 'fin_a', 'no_aa'],
        help='Benchmark languages (default: inf_a fin_a no_aa)'
    )
    parser.add_argument(
        '--sizes',
        nargs='+',
        type=int,
        default=[4, 8, 16],
        help='Sample sizes (default: 4 8 16)'
    )
    parser.add_argument(
        '--runs',
        type=int,
        default=3,
        help='Number of runs per configuration (default: 3)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=0,
        help='Base random seed (default: 0)'
    )
    parser.add_argument(
        '--max-base',
        type=int,
        default=3,
        help='Maximum base length of random words (default: 3)'
    )
    parser.add_argument(
        '--max-recur',
        type=int,
        default=3,
        help='Maximum period length of random words (default: 3)'
    )

    # Learner configuration
    parser.add_argument(
        '--max-states',
        type=int,
        default=50,
        help='Abort a run when the congruence needs more classes (default: 50)'
    )
    parser.add_argument(
        '--workers',
        type=int,
        default=1,
        help='Threads checking candidate targets (default: 1, sequential)'
    )

    # Verbosity
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    args = parser.parse_args(argv)

    try:
        if args.positive is not None or args.negative is not None:
            return run_sprout(args)
        return run_sweep(args)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
