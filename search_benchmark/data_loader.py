from typing import Optional

import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def generate_sorted_array(length: int, rng: np.random.Generator, value_step: int = 10) -> list[int]:
    """
    Generates one non-decreasing array of unsigned integers.
    Element k is drawn uniformly from [k * value_step, k * value_step + value_step),
    so neighbouring elements may repeat but never decrease.
    """
    bases = np.arange(length, dtype=np.int64) * value_step
    offsets = rng.integers(0, value_step, size=length, dtype=np.int64)
    return (bases + offsets).tolist()


def generate_sorted_arrays(count: int = 1000, min_len: int = 2, max_len: int = 500,
                           value_step: int = 10, rng: Optional[np.random.Generator] = None) -> list[list[int]]:
    """
    Generates `count` sorted arrays with lengths drawn uniformly from [min_len, max_len).

    The arrays come back ordered by ascending length, which gives downstream
    charts a monotonic x-axis.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if min_len < 1:
        raise ValueError(f"min_len must be at least 1, got {min_len}")
    if max_len <= min_len:
        raise ValueError(f"max_len must be greater than min_len ({min_len}), got {max_len}")
    if value_step < 1:
        raise ValueError(f"value_step must be at least 1, got {value_step}")

    if rng is None:
        rng = make_rng()

    lengths = rng.integers(min_len, max_len, size=count)
    arrays = [generate_sorted_array(int(length), rng, value_step) for length in lengths]

    # Stable sort keeps arrays of equal length in generation order
    arrays.sort(key=len)
    return arrays


def pick_target(data: list[int], rng: np.random.Generator) -> int:
    """Picks one existing element uniformly, so every target has at least one match."""
    if not data:
        raise ValueError("Cannot pick a target from an empty array")
    if len(data) == 1:
        return data[0]
    return data[int(rng.integers(0, len(data)))]
