import pytest

from core.alphabet import Alphabet
from core.congruence import RightCongruence
from core.product import Product
from core.scc import sccs
from core.words import Class
from passive.conflicts import compute_conflicts
from passive.sample import Sample

AB = Alphabet.from_string("ab")


@pytest.fixture
def example():
    sample = Sample.from_strings(["(b)", "(abab)", "(abbab)"], ["a(b)", "(a)"])
    return compute_conflicts(AB, sample)


def labels(relation, pairs):
    return {(relation.positive_tree.colors[p], relation.negative_tree.colors[n])
            for p, n in pairs}


def test_conflicts_of_example(example):
    assert labels(example, example.conflicts) == {(Class("b"), Class("ab"))}


def test_closure_of_example(example):
    assert labels(example, example.closure) == {
        (Class("b"), Class("ab")),
        (Class("b"), Class("a")),
        (Class(), Class("a")),
        (Class(), Class("ab")),
    }
    assert example.conflicts <= example.closure


def test_conflicts_come_from_non_trivial_components(example):
    product = Product(example.positive_tree, example.negative_tree)
    cyclic = set()
    for component in sccs(product):
        if not component.is_trivial():
            cyclic.update(component)
    assert example.conflicts == cyclic


def test_one_state_congruence_is_inconsistent(example):
    cong = RightCongruence(AB)
    cong.add_edge(0, "a", 0)
    cong.add_edge(0, "b", 0)
    assert not example.consistent(cong)
    state, positive, negative = example.conflict_witness(cong)
    assert state == 0
    assert (positive, negative) in example.closure


def test_partial_congruence_is_consistent(example):
    cong = RightCongruence(AB)
    assert example.consistent(cong)
    assert example.conflict_witness(cong) is None


@pytest.mark.parametrize("positive,negative", [
    (["(b)", "(ab)"], []),
    ([], ["(a)", "a(b)"]),
    ([], []),
])
def test_one_side_empty_has_no_conflicts(positive, negative):
    relation = compute_conflicts(AB, Sample.from_strings(positive, negative))
    assert relation.conflicts == frozenset()
    assert relation.closure == frozenset()
    assert len(relation) == 0


def test_overlapping_sample_rejected():
    with pytest.raises(ValueError):
        Sample.from_strings(["(ab)"], ["(abab)"])


def test_sample_helpers():
    sample = Sample.from_loop_indices([("abab", 3, True), ("aa", 0, False)])
    assert len(sample) == 2
    assert not sample.is_empty()
    assert sample.max_base_len() == 3
    assert sample.max_recur_len() == 1
    assert sample.alphabet() == {"a", "b"}
    assert {label for label, _ in sample.annotated_iter()} == {True, False}
    assert Sample().is_empty()
