from concurrent.futures import ThreadPoolExecutor

import pytest

import passive.sprout as sprout_module
from core.alphabet import Alphabet
from core.congruence import RightCongruence
from core.words import Class
from passive.config import SproutConfig
from passive.conflicts import compute_conflicts
from passive.sample import Sample
from passive.sprout import SproutBuilder, SproutLimitExceeded, learn_skeleton, omega_sprout

AB = Alphabet.from_string("ab")


@pytest.fixture
def conflicts():
    sample = Sample.from_strings(["(b)", "(abab)", "(abbab)"], ["a(b)", "(a)"])
    return compute_conflicts(AB, sample)


def expected_congruence():
    cong = RightCongruence(AB)
    q1 = cong.add_state(Class("a"))
    cong.add_edge(0, "a", q1)
    cong.add_edge(0, "b", 0)
    cong.add_edge(q1, "a", 0)
    cong.add_edge(q1, "b", q1)
    return cong


def structure(cong):
    return cong.classes(), list(cong.edges())


def test_example_result(conflicts):
    result = omega_sprout(AB, conflicts)
    assert result.size() == 2
    assert result.classes() == [Class(), Class("a")]
    assert list(result.edges()) == [(0, "a", 1), (0, "b", 0), (1, "a", 0), (1, "b", 1)]


def test_example_runs_match_expected(conflicts):
    result = omega_sprout(AB, conflicts)
    expected = expected_congruence()
    for word in ["aba", "abbabb", "baabaaba", "bababaaba", "b", "a", ""]:
        assert result.run(word) == expected.run(word), word


def test_result_is_complete_and_consistent(conflicts):
    result = omega_sprout(AB, conflicts)
    assert result.is_complete()
    for state in result.state_indices():
        assert len(list(result.edges_from(state))) == len(AB)
    assert conflicts.consistent(result)


def test_deterministic(conflicts):
    assert structure(omega_sprout(AB, conflicts)) == structure(omega_sprout(AB, conflicts))


def test_parallel_search_matches_sequential(conflicts):
    sequential = omega_sprout(AB, conflicts)
    parallel = omega_sprout(AB, conflicts, SproutConfig(workers=2))
    assert structure(parallel) == structure(sequential)


def test_parallel_search_reuses_one_pool(conflicts, monkeypatch):
    created = []

    class CountingExecutor(ThreadPoolExecutor):
        def __init__(self, *args, **kwargs):
            created.append(self)
            super().__init__(*args, **kwargs)

    monkeypatch.setattr(sprout_module, "ThreadPoolExecutor", CountingExecutor)
    result = omega_sprout(AB, conflicts, SproutConfig(workers=2))
    assert result.size() == 2
    assert len(created) == 1

    omega_sprout(AB, conflicts)
    assert len(created) == 1


def test_one_side_empty_gives_trivial_congruence():
    result = learn_skeleton(AB, Sample.from_strings(["(b)", "a(b)"], []))
    assert result.size() == 1
    assert list(result.edges()) == [(0, "a", 0), (0, "b", 0)]


def test_max_states(conflicts):
    with pytest.raises(SproutLimitExceeded):
        omega_sprout(AB, conflicts, SproutConfig(max_states=1))
    assert omega_sprout(AB, conflicts, SproutConfig(max_states=2)).size() == 2


def test_statistics(conflicts, capsys):
    learner = SproutBuilder(AB, conflicts)
    learner.run()
    stats = learner.get_statistics()
    assert stats["states"] == 2
    assert stats["states_created"] == 2
    # (0,a): 1 rejected; (0,b): 1 kept; (1,a): 1 kept; (1,b): 1 rejected, 1 kept
    assert stats["consistency_checks"] == 5
    assert stats["rejected_edges"] == 2
    learner.print_summary()
    assert "Sprout Learning Summary" in capsys.readouterr().out


def test_learn_skeleton_verbose(capsys):
    sample = Sample.from_strings(["(b)", "(abab)", "(abbab)"], ["a(b)", "(a)"])
    result = learn_skeleton(AB, sample, SproutConfig(verbose=True))
    assert result.size() == 2
    assert "new class" in capsys.readouterr().out


def test_config_validation():
    with pytest.raises(ValueError):
        SproutConfig(workers=0)
    with pytest.raises(ValueError):
        SproutConfig(max_states=0)
    assert SproutConfig().to_dict() == {'max_states': None, 'workers': 1, 'verbose': False}
