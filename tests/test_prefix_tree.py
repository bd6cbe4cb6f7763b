import pytest

from core.alphabet import Alphabet
from core.words import Class, upw
from passive.prefix_tree import PrefixTreeBuilder, prefix_tree

AB = Alphabet.from_string("ab")


@pytest.fixture
def words():
    return [upw("a"), upw("b"), upw("ab")]


def test_accepts_prefixes(words):
    tree = prefix_tree(AB, words)
    for word in ["", "a", "b", "ab", "a" * 10, "ab" * 6, "ab" * 7 + "a"]:
        assert tree.accepts(word), word


def test_rejects_non_prefixes(words):
    tree = prefix_tree(AB, words)
    for word in ["bba", "aab", "abb", "abababbabababaa"]:
        assert not tree.accepts(word), word


def test_states_and_loops(words):
    tree = prefix_tree(AB, words)
    assert sorted(tree.classes()) == [Class(), Class("a"), Class("b"),
                                      Class("aa"), Class("ab"), Class("aba")]
    b = tree.class_to_index("b")
    assert tree.successor(b, "b") == b
    assert tree.successor(tree.class_to_index("aba"), "b") == tree.class_to_index("ab")
    assert tree.accepting_states() == tree.state_indices()


def test_coverage_of_expansions():
    words = [upw("b"), upw("abab"), upw("abbab"), upw("a", "b"), upw("a")]
    tree = prefix_tree(AB, words)
    for word in words:
        for length in range(15):
            assert tree.accepts(word.prefix(length)), (word, length)
    for label in tree.classes():
        assert any(word.has_prefix(label) for word in words), label


def test_long_base_is_not_folded():
    word = upw("aab", "ab")
    tree = prefix_tree(AB, [word])
    assert tree.accepts("aabab")
    assert not tree.accepts("ab")
    assert not tree.accepts("aaab")


def test_empty_word_set():
    tree = prefix_tree(AB, [])
    assert tree.size() == 1
    assert tree.accepts("")
    assert not tree.accepts("a")


def test_successor():
    builder = PrefixTreeBuilder(AB, [upw("a"), upw("ab")])
    assert builder.successor(Class(), "a") == Class("a")
    assert builder.successor(Class(), "b") is None
    assert builder.successor(Class("a"), "a") == Class("aa")
    assert builder.successor(Class("aa"), "a") == Class("aa")


def test_foreign_symbols_rejected():
    with pytest.raises(ValueError):
        PrefixTreeBuilder(AB, [upw("c")])
