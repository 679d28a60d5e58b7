from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from .data_loader import generate_sorted_arrays, make_rng, pick_target
from .searches import SEARCH_ALGORITHMS, SearchOutcome
from .utils import is_non_decreasing


@dataclass
class BenchmarkConfig:
    """Settings for one benchmark run."""
    num_arrays: int = 1000
    min_len: int = 2
    max_len: int = 500
    value_step: int = 10
    seed: Optional[int] = None
    show_progress: bool = False
    algorithms: list[str] = field(default_factory=lambda: list(SEARCH_ALGORITHMS))

    def validate(self):
        if self.num_arrays < 0:
            raise ValueError(f"num_arrays must be non-negative, got {self.num_arrays}")
        if self.min_len < 1:
            raise ValueError(f"min_len must be at least 1, got {self.min_len}")
        if self.max_len <= self.min_len:
            raise ValueError(f"max_len must be greater than min_len ({self.min_len}), got {self.max_len}")
        if self.value_step < 1:
            raise ValueError(f"value_step must be at least 1, got {self.value_step}")
        if not self.algorithms:
            raise ValueError("At least one search algorithm must be selected")
        unknown = [name for name in self.algorithms if name not in SEARCH_ALGORITHMS]
        if unknown:
            raise ValueError(f"Unknown search algorithm(s): {', '.join(unknown)}. "
                             f"Choose from: {', '.join(SEARCH_ALGORITHMS)}")


@dataclass(frozen=True)
class BenchmarkBatch:
    """The outcomes of every algorithm on one (array, target) pair."""
    sequence_length: int
    target: int
    outcomes: Mapping[str, SearchOutcome]
    successes: Mapping[str, bool]

    def __post_init__(self):
        # Read-only copies, so a batch cannot change after the harness records it
        object.__setattr__(self, "outcomes", MappingProxyType(dict(self.outcomes)))
        object.__setattr__(self, "successes", MappingProxyType(dict(self.successes)))

    def __hash__(self):
        return hash((self.sequence_length, self.target,
                     tuple(self.outcomes.items()), tuple(self.successes.items())))


@dataclass
class BenchmarkResults:
    algorithms: list[str]
    batches: list[BenchmarkBatch] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.batches)

    def outcomes_for(self, algorithm: str) -> list[SearchOutcome]:
        """Per-algorithm column; row i belongs to the same array for every algorithm."""
        if algorithm not in self.algorithms:
            raise KeyError(algorithm)
        return [batch.outcomes[algorithm] for batch in self.batches]

    def rows(self) -> Iterator[tuple[str, int, int]]:
        """Yields (algorithm_name, sequence_length, comparison_count) rows."""
        for batch in self.batches:
            for name in self.algorithms:
                outcome = batch.outcomes[name]
                yield name, outcome.sequence_length, outcome.comparison_count

    def to_dataframe(self) -> pd.DataFrame:
        records = []
        for batch in self.batches:
            for name in self.algorithms:
                outcome = batch.outcomes[name]
                records.append({
                    'algorithm': name,
                    'sequence_length': outcome.sequence_length,
                    'comparison_count': outcome.comparison_count,
                    'found_index': outcome.found_index,
                    'target': batch.target,
                })
        columns = ['algorithm', 'sequence_length', 'comparison_count', 'found_index', 'target']
        df = pd.DataFrame.from_records(records, columns=columns)
        # Keep not-found rows as missing values rather than floats
        df['found_index'] = df['found_index'].astype('Int64')
        return df


def run_benchmark(config: Optional[BenchmarkConfig] = None,
                  arrays: Optional[list[list[int]]] = None) -> BenchmarkResults:
    """
    Runs every selected search algorithm over a batch of sorted arrays.

    Arrays are ordered by ascending length before any search runs, and one target
    is picked per array from its own elements. When `arrays` is given it is used
    instead of generating new ones.
    """
    if config is None:
        config = BenchmarkConfig()
    config.validate()

    rng = make_rng(config.seed)
    if arrays is None:
        arrays = generate_sorted_arrays(config.num_arrays, config.min_len, config.max_len,
                                        config.value_step, rng=rng)
    else:
        if any(len(data) == 0 for data in arrays):
            raise ValueError("Benchmark arrays must not be empty")
        if not all(is_non_decreasing(data) for data in arrays):
            raise ValueError("Benchmark arrays must be sorted in non-decreasing order")
        arrays = sorted(arrays, key=len)

    results = BenchmarkResults(algorithms=list(config.algorithms))
    for data in tqdm(arrays, desc="Searching", unit="array", disable=not config.show_progress):
        target = pick_target(data, rng)
        outcomes = {}
        successes = {}
        for name in config.algorithms:
            outcome = SEARCH_ALGORITHMS[name](data, target)
            outcomes[name] = outcome
            successes[name] = outcome.found and data[outcome.found_index] == target
        results.batches.append(BenchmarkBatch(sequence_length=len(data), target=target,
                                              outcomes=outcomes, successes=successes))
    return results


def summarize_results(results: BenchmarkResults) -> pd.DataFrame:
    """Averages comparison counts and success rates per search method."""
    summary = []
    for name in results.algorithms:
        comps = [outcome.comparison_count for outcome in results.outcomes_for(name)]
        successes = [batch.successes[name] for batch in results.batches]
        summary.append({
            'Search Method': name,
            'Avg Comparisons': np.mean(comps) if comps else 0.0,
            'Median Comparisons': np.median(comps) if comps else 0.0,
            'Max Comparisons': max(comps) if comps else 0,
            'Success Rate': np.mean(successes) * 100 if successes else 0.0,
        })
    return pd.DataFrame(summary)
