import pytest

from core.alphabet import Alphabet
from core.words import Class, UltimatelyPeriodicWord, upw


def test_alphabet_order_and_duplicates():
    alphabet = Alphabet.from_string("ba")
    assert list(alphabet.universe()) == ["b", "a"]
    assert alphabet.index("a") == 1
    assert "a" in alphabet and "c" not in alphabet
    with pytest.raises(ValueError):
        Alphabet("aba")


def test_class_length_lexicographic_order():
    classes = [Class("ba"), Class("b"), Class("ab"), Class.epsilon()]
    assert sorted(classes) == [Class(), Class("b"), Class("ab"), Class("ba")]
    assert Class("b") < Class("aa")


def test_class_append_and_str():
    label = Class.epsilon().append("a").append("b")
    assert label == Class("ab")
    assert label.prefix(1) == Class("a")
    assert str(Class()) == "[ε]"
    assert str(label) == "[ab]"
    assert {Class("ab"): 1}[Class(("a", "b"))] == 1


def test_reduced_form():
    assert upw("abab") == upw("ab")
    assert UltimatelyPeriodicWord("ab", "ab") == upw("ab")
    assert UltimatelyPeriodicWord("a", "ba") == upw("ab")
    assert UltimatelyPeriodicWord("bb", "b") == upw("b")
    assert upw("a", "b") != upw("b")
    assert len({upw("abab"), upw("ab"), upw("ba", "ba")}) == 2


def test_empty_period_rejected():
    with pytest.raises(ValueError):
        UltimatelyPeriodicWord("ab", "")


def test_nth_and_prefix():
    word = upw("a", "b")
    assert word.nth(0) == "a"
    assert word.nth(5) == "b"
    assert word.prefix(3) == Class("abb")
    assert word.has_prefix("abbb")
    assert not word.has_prefix("aa")
    with pytest.raises(IndexError):
        word.nth(-1)


def test_from_string():
    word = UltimatelyPeriodicWord.from_string("a(b)")
    assert word.base == ("a",)
    assert word.recur == ("b",)
    assert str(word) == "a(b)"
    assert UltimatelyPeriodicWord.from_string("(abab)") == upw("ab")


@pytest.mark.parametrize("text", ["ab", "a()", "(a)(b)", "a(b"])
def test_from_string_malformed(text):
    with pytest.raises(ValueError):
        UltimatelyPeriodicWord.from_string(text)


def test_from_loop_index():
    word = UltimatelyPeriodicWord.from_loop_index("abab", 3)
    assert word == upw("aba", "b")
    assert UltimatelyPeriodicWord.from_loop_index("abab", 0) == upw("ab")
    with pytest.raises(ValueError):
        UltimatelyPeriodicWord.from_loop_index("ab", 2)


def test_symbol_sets():
    word = upw("aab", "b")
    assert word.alphabet() == {"a", "b"}
    assert word.infinity_set() == {"b"}
