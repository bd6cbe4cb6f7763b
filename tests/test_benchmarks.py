import pytest

from benchmarks.config import BenchmarkConfig
from benchmarks.metrics import BenchmarkResults, SproutMetrics
from benchmarks.runner import BenchmarkRunner
from passive.sample import Sample
import run_benchmark


def small_config(**overrides):
    settings = dict(languages=["inf_a"], sample_sizes=[3], num_runs=2,
                    max_base=2, max_recur=2, seed=3)
    settings.update(overrides)
    return BenchmarkConfig(**settings)


def test_runner_dataframe(capsys):
    results = BenchmarkRunner(small_config()).run()
    df = results.to_dataframe()
    assert len(df) == 2
    assert set(df['language']) == {"inf_a"}
    assert {'num_states', 'conflicts', 'successful', 'total_time'} <= set(df.columns)

    results.print_summary()
    assert "BENCHMARK RESULTS SUMMARY" in capsys.readouterr().out


def test_run_single_records_limit_failure():
    runner = BenchmarkRunner(small_config(max_states=1))
    sample = Sample.from_strings(["(b)", "(abab)", "(abbab)"], ["a(b)", "(a)"])
    metrics = runner.run_single(sample)
    assert not metrics.successful
    assert "1 classes" in metrics.failure_reason
    assert metrics.conflicts == 1


def test_run_single_success():
    runner = BenchmarkRunner(small_config())
    sample = Sample.from_strings(["(b)", "(abab)", "(abbab)"], ["a(b)", "(a)"])
    metrics = runner.run_single(sample)
    assert metrics.successful
    assert metrics.num_states == 2
    assert metrics.sample_size == 5
    assert metrics.checks_per_state == 2.5


def test_unknown_language():
    with pytest.raises(ValueError):
        BenchmarkRunner(small_config(languages=["nope"])).run()


def test_config_validation():
    with pytest.raises(ValueError):
        small_config(num_runs=0)
    assert small_config().run_seed(1, 0, 1) == 1004
    assert small_config(seed=None).run_seed(0, 0, 0) is None


def test_empty_results(capsys):
    results = BenchmarkResults()
    assert results.to_dataframe().empty
    results.print_summary()
    assert "No results recorded." in capsys.readouterr().out
    results.add_result("inf_a", 4, SproutMetrics())
    assert len(results) == 1


def test_cli_single_sample(capsys):
    code = run_benchmark.main(["--positive", "(b)", "(abab)", "(abbab)",
                               "--negative", "a(b)", "(a)"])
    assert code == 0
    out = capsys.readouterr().out
    assert "[ε] --a--> [a]" in out
    assert "[a] --b--> [a]" in out


def test_cli_sweep(capsys):
    assert run_benchmark.main(["--languages", "fin_a", "--sizes", "3", "--runs", "1"]) == 0
    assert "BENCHMARK RESULTS SUMMARY" in capsys.readouterr().out


def test_cli_malformed_word(capsys):
    assert run_benchmark.main(["--positive", "ab"]) == 1
    assert "Error" in capsys.readouterr().out


def test_alphabet_without_language_symbols_rejected():
    with pytest.raises(ValueError):
        BenchmarkRunner(small_config(alphabet="xy"))
    assert BenchmarkRunner(small_config(alphabet="abc")).alphabet.symbols == ("a", "b", "c")


def test_cli_sweep_rejects_foreign_alphabet(capsys):
    assert run_benchmark.main(["--alphabet", "xy", "--sizes", "3", "--runs", "1"]) == 1
    assert "lacks symbols" in capsys.readouterr().out
