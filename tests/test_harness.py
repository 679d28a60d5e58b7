import pytest

from search_benchmark.harness import BenchmarkBatch, BenchmarkConfig, run_benchmark, summarize_results
from search_benchmark.searches import SEARCH_ALGORITHMS, SearchOutcome


@pytest.fixture
def small_results():
    return run_benchmark(BenchmarkConfig(num_arrays=60, min_len=2, max_len=80, seed=2024))


def test_one_batch_per_array(small_results):
    assert len(small_results) == 60
    assert small_results.algorithms == list(SEARCH_ALGORITHMS)
    for batch in small_results.batches:
        assert set(batch.outcomes) == set(SEARCH_ALGORITHMS)


def test_batches_ordered_by_length(small_results):
    lengths = [batch.sequence_length for batch in small_results.batches]
    assert lengths == sorted(lengths)


def test_every_target_is_found(small_results):
    for batch in small_results.batches:
        for name, outcome in batch.outcomes.items():
            assert outcome.found, (name, batch)
            assert outcome.sequence_length == batch.sequence_length
            assert outcome.comparison_count >= 1
            assert batch.successes[name]


def test_columns_stay_aligned(small_results):
    columns = [small_results.outcomes_for(name) for name in small_results.algorithms]
    for row in zip(*columns):
        assert len({outcome.sequence_length for outcome in row}) == 1


def test_outcomes_for_unknown_algorithm(small_results):
    with pytest.raises(KeyError):
        small_results.outcomes_for("Linear search")


def test_rows(small_results):
    rows = list(small_results.rows())
    assert len(rows) == 60 * 3
    name, length, comparisons = rows[0]
    assert name == "Binary search"
    assert length == small_results.batches[0].sequence_length
    assert comparisons >= 1


def test_same_seed_same_results():
    config = BenchmarkConfig(num_arrays=25, max_len=40, seed=7)
    assert run_benchmark(config).batches == run_benchmark(config).batches


def test_caller_arrays_are_sorted_by_length_first():
    arrays = [[1, 2, 3, 4, 5], [10, 20], [0, 0, 0]]
    results = run_benchmark(BenchmarkConfig(seed=1), arrays=arrays)
    assert [batch.sequence_length for batch in results.batches] == [2, 3, 5]
    # The caller's list is left untouched
    assert arrays[0] == [1, 2, 3, 4, 5]


def test_caller_arrays_must_not_be_empty():
    with pytest.raises(ValueError):
        run_benchmark(BenchmarkConfig(seed=1), arrays=[[1, 2], []])


def test_algorithm_subset():
    config = BenchmarkConfig(num_arrays=5, max_len=20, seed=3, algorithms=["Interpolation search"])
    results = run_benchmark(config)
    assert results.algorithms == ["Interpolation search"]
    assert all(list(batch.outcomes) == ["Interpolation search"] for batch in results.batches)


@pytest.mark.parametrize("kwargs", [
    {"num_arrays": -1},
    {"min_len": 0},
    {"min_len": 5, "max_len": 5},
    {"value_step": 0},
    {"algorithms": []},
    {"algorithms": ["Linear search"]},
])
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        BenchmarkConfig(**kwargs).validate()


def test_to_dataframe(small_results):
    df = small_results.to_dataframe()
    assert list(df.columns) == ['algorithm', 'sequence_length', 'comparison_count', 'found_index', 'target']
    assert len(df) == 60 * 3
    assert set(df['algorithm']) == set(SEARCH_ALGORITHMS)
    assert (df['comparison_count'] >= 1).all()
    assert df['found_index'].notna().all()


def test_to_dataframe_uses_nullable_found_index():
    results = run_benchmark(BenchmarkConfig(seed=0), arrays=[[1, 2, 3]])
    batch = results.batches[0]
    assert batch.successes == {name: True for name in SEARCH_ALGORITHMS}
    df = results.to_dataframe()
    assert str(df['found_index'].dtype) == 'Int64'


def test_summary(small_results):
    summary = summarize_results(small_results)
    assert list(summary['Search Method']) == list(SEARCH_ALGORITHMS)
    assert (summary['Success Rate'] == 100.0).all()
    assert (summary['Avg Comparisons'] >= 1).all()
    assert (summary['Max Comparisons'] >= summary['Avg Comparisons']).all()


def test_summary_of_empty_run():
    results = run_benchmark(BenchmarkConfig(num_arrays=0))
    summary = summarize_results(results)
    assert len(summary) == 3
    assert (summary['Avg Comparisons'] == 0).all()


def test_caller_arrays_must_be_sorted():
    with pytest.raises(ValueError):
        run_benchmark(BenchmarkConfig(seed=1), arrays=[[3, 1, 2]])


def test_batch_cannot_be_changed_after_recording():
    outcomes = {"Binary search": SearchOutcome(found_index=1, comparison_count=3, sequence_length=3)}
    successes = {"Binary search": True}
    batch = BenchmarkBatch(sequence_length=3, target=7, outcomes=outcomes, successes=successes)

    # Later changes to the caller's dicts do not leak into the batch
    outcomes.clear()
    successes["Binary search"] = False
    assert batch.outcomes["Binary search"].found_index == 1
    assert batch.successes["Binary search"]

    with pytest.raises(TypeError):
        batch.outcomes["Binary search"] = None
    with pytest.raises(TypeError):
        batch.successes["Interpolation search"] = True


def test_batches_are_hashable(small_results):
    batch = small_results.batches[0]
    copy = BenchmarkBatch(batch.sequence_length, batch.target, dict(batch.outcomes), dict(batch.successes))
    assert copy == batch
    assert hash(copy) == hash(batch)
    assert len(set(small_results.batches)) <= len(small_results)
