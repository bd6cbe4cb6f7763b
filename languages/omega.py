"""
Benchmark ω-languages over {a, b}.

Every language is given as a predicate on ultimately periodic words. Words are in
reduced form, so a symbol occurs infinitely often iff it occurs in the period.
"""

from typing import Callable, Dict, Optional, Tuple

import numpy as np

from core.alphabet import Alphabet
from core.words import UltimatelyPeriodicWord
from passive.sample import Sample

OmegaPredicate = Callable[[UltimatelyPeriodicWord], bool]

# Symbols every benchmark language refers to
LANGUAGE_SYMBOLS = ("a", "b")


def infinitely_many_a(word: UltimatelyPeriodicWord) -> bool:
    """
    GF a: the symbol a occurs infinitely often.
    Büchi recognisable with two states.
    """
    return "a" in word.infinity_set()


def finitely_many_a(word: UltimatelyPeriodicWord) -> bool:
    """
    FG ¬a: the symbol a occurs only finitely often.
    """
    return "a" not in word.infinity_set()


def eventually_always_a(word: UltimatelyPeriodicWord) -> bool:
    """
    FG a: from some point on only a is read.
    """
    return word.infinity_set() == {"a"}


def infinitely_many_a_and_b(word: UltimatelyPeriodicWord) -> bool:
    """
    GF a ∧ GF b: both symbols occur infinitely often.
    """
    return {"a", "b"} <= word.infinity_set()


def even_finite_a(word: UltimatelyPeriodicWord) -> bool:
    """
    Finitely many a, and an even number of them.
    Needs a parity counter on top of the acceptance condition.
    """
    if "a" in word.infinity_set():
        return False
    return word.base.count("a") % 2 == 0


def no_aa(word: UltimatelyPeriodicWord) -> bool:
    """
    G ¬(a ∧ X a): the factor aa never occurs.
    """
    # One period past the base covers every factor of length two
    for position in range(word.base_length() + word.recur_length()):
        if word.nth(position) == "a" and word.nth(position + 1) == "a":
            return False
    return True


def b_followed_by_a(word: UltimatelyPeriodicWord) -> bool:
    """
    G (b → X a): every b is immediately followed by an a.
    """
    for position in range(word.base_length() + word.recur_length()):
        if word.nth(position) == "b" and word.nth(position + 1) != "a":
            return False
    return True


# Dictionary of all benchmark languages
OMEGA_LANGUAGES: Dict[str, Tuple[OmegaPredicate, str]] = {
    "inf_a": (infinitely_many_a, "GF a (infinitely many a)"),
    "fin_a": (finitely_many_a, "FG !a (finitely many a)"),
    "fg_a": (eventually_always_a, "FG a (eventually only a)"),
    "inf_a_inf_b": (infinitely_many_a_and_b, "GF a AND GF b"),
    "even_fin_a": (even_finite_a, "finitely many a, even count"),
    "no_aa": (no_aa, "G !(a AND X a) (no factor aa)"),
    "b_then_a": (b_followed_by_a, "G (b -> X a)"),
}


def get_omega_language(name: str) -> Tuple[OmegaPredicate, str]:
    """
    Get language predicate and description by name.

    Args:
        name: Key of ``OMEGA_LANGUAGES``

    Returns:
        Tuple of (predicate, description)
    """
    if name not in OMEGA_LANGUAGES:
        raise ValueError(f"Unknown ω-language: {name}. "
                         f"Valid names are {', '.join(OMEGA_LANGUAGES)}.")
    return OMEGA_LANGUAGES[name]


def random_word(rng: np.random.Generator, alphabet: Alphabet,
                max_base: int, max_recur: int) -> UltimatelyPeriodicWord:
    """
    Draw an ultimately periodic word with uniformly chosen lengths and symbols.

    Args:
        rng: Numpy random generator
        alphabet: Alphabet to draw symbols from
        max_base: Maximum base length (may be 0)
        max_recur: Maximum period length (at least 1)
    """
    if max_base < 0 or max_recur < 1:
        raise ValueError(f"Invalid length bounds: max_base={max_base}, max_recur={max_recur}")

    symbols = alphabet.symbols
    base_length = int(rng.integers(0, max_base + 1))
    recur_length = int(rng.integers(1, max_recur + 1))
    positions = rng.integers(0, len(symbols), size=base_length + recur_length)
    word = [symbols[position] for position in positions]
    return UltimatelyPeriodicWord(word[:base_length], word[base_length:])


def generate_sample(predicate: OmegaPredicate, alphabet: Alphabet, size: int,
                    max_base: int = 3, max_recur: int = 3,
                    seed: Optional[int] = None,
                    max_attempts: Optional[int] = None) -> Sample:
    """
    Generate a labeled sample of distinct random words.

    Args:
        predicate: Target language
        alphabet: Alphabet to draw symbols from
        size: Number of distinct words to collect
        max_base: Maximum base length of drawn words
        max_recur: Maximum period length of drawn words
        seed: Seed for reproducible samples
        max_attempts: Number of draws before giving up (defaults to 50 per word)

    Returns:
        Sample labeled by ``predicate``; smaller than ``size`` if the bounds
        do not admit enough distinct words
    """
    rng = np.random.default_rng(seed)
    if max_attempts is None:
        max_attempts = 50 * max(size, 1)

    positive, negative = set(), set()
    attempts = 0
    while len(positive) + len(negative) < size and attempts < max_attempts:
        attempts += 1
        word = random_word(rng, alphabet, max_base, max_recur)
        if word in positive or word in negative:
            continue
        if predicate(word):
            positive.add(word)
        else:
            negative.add(word)

    return Sample.from_iters(positive, negative)
