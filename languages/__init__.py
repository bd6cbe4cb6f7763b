"""Benchmark ω-languages and random sample generation."""

from .omega import (
    infinitely_many_a, finitely_many_a, eventually_always_a,
    infinitely_many_a_and_b, even_finite_a, no_aa, b_followed_by_a,
    OMEGA_LANGUAGES,
    LANGUAGE_SYMBOLS,
    get_omega_language,
    random_word,
    generate_sample
)

__all__ = [
    'infinitely_many_a', 'finitely_many_a', 'eventually_always_a',
    'infinitely_many_a_and_b', 'even_finite_a', 'no_aa', 'b_followed_by_a',
    'OMEGA_LANGUAGES',
    'LANGUAGE_SYMBOLS',
    'get_omega_language',
    'random_word',
    'generate_sample'
]
