from dataclasses import dataclass
from typing import Callable, Optional

from .utils import checked_decrement, interpolation_probe, midpoint


@dataclass(frozen=True)
class SearchOutcome:
    """
    Result of a single search.
    found_index is None when the query is not in the data.
    """
    found_index: Optional[int]
    comparison_count: int
    sequence_length: int

    @property
    def found(self) -> bool:
        return self.found_index is not None


class ComparisonCounter:
    """
    Tallies the comparisons a search performs.

    Every search starts with one charged comparison: the check whether the
    data is empty.
    """

    def __init__(self):
        self._count = 1

    @property
    def count(self) -> int:
        return self._count

    def charge(self, comparisons: int = 1):
        if comparisons < 1:
            raise ValueError(f"Comparison charge must be positive, got {comparisons}")
        self._count += comparisons

    def outcome(self, data: list[int], found_index: Optional[int]) -> SearchOutcome:
        return SearchOutcome(found_index=found_index, comparison_count=self._count, sequence_length=len(data))


# --- Instrumented Search Algorithms ---

def binary_search(data: list[int], query: int) -> SearchOutcome:
    """
    Classic binary search over a closed index range.
    Each round pays for the range test, the equality test at the midpoint and,
    when the midpoint misses, the direction test.
    """
    counter = ComparisonCounter()
    if not data:
        return counter.outcome(data, None)

    low, high = 0, len(data) - 1
    while low <= high:
        counter.charge()
        mid = midpoint(low, high)

        counter.charge()
        if data[mid] == query:
            return counter.outcome(data, mid)

        counter.charge()
        if data[mid] < query:
            low = mid + 1
        else:
            next_high = checked_decrement(mid)
            if next_high is None:
                break
            high = next_high

    # The range test that ended the loop
    counter.charge()
    return counter.outcome(data, None)


def interpolation_search(data: list[int], query: int) -> SearchOutcome:
    """
    Interpolation search.
    Probes where the query should sit given the values at the range boundaries
    instead of always probing the middle. The loop only runs while the boundary
    values differ and the query lies between them, so the probe never divides
    by zero.
    """
    counter = ComparisonCounter()
    if not data:
        return counter.outcome(data, None)

    low, high = 0, len(data) - 1
    while data[high] != data[low] and data[low] <= query <= data[high]:
        counter.charge(3)
        probe = interpolation_probe(data, low, high, query)

        counter.charge()
        if data[probe] == query:
            return counter.outcome(data, probe)

        counter.charge()
        if query < data[probe]:
            next_high = checked_decrement(probe)
            if next_high is None:
                break
            high = next_high
        else:
            low = probe + 1

    # Re-evaluated loop guard plus the final equality test
    counter.charge(4)
    if data[low] == query:
        return counter.outcome(data, low)
    return counter.outcome(data, None)


def interpolated_binary_search(data: list[int], query: int) -> SearchOutcome:
    """
    Hybrid of interpolation and binary search.

    Every round probes by interpolation, then bisects the side of the probe the
    query falls on. A round with equal boundary values stops the probing and
    falls back to comparing the lower boundary directly.
    """
    counter = ComparisonCounter()
    if not data:
        return counter.outcome(data, None)

    low, high = 0, len(data) - 1
    exhausted = False
    while low < high:
        counter.charge()
        if data[high] == data[low]:
            break

        probe = interpolation_probe(data, low, high, query)
        counter.charge()
        if query > data[probe]:
            mid = midpoint(probe, high)
            counter.charge()
            if query <= data[mid]:
                low, high = probe + 1, mid
            else:
                low = mid + 1
        elif query < data[probe]:
            mid = midpoint(low, probe)
            counter.charge()
            if query >= data[mid]:
                new_low, new_high = mid, checked_decrement(probe)
            else:
                new_low, new_high = low, checked_decrement(mid)
            if new_high is None:
                exhausted = True
                break
            low, high = new_low, new_high
        else:
            return counter.outcome(data, probe)

        counter.charge()

    counter.charge(2)
    if not exhausted and low <= high and data[low] == query:
        return counter.outcome(data, low)
    return counter.outcome(data, None)


SEARCH_ALGORITHMS: dict[str, Callable[[list[int], int], SearchOutcome]] = {
    "Binary search": binary_search,
    "Interpolation search": interpolation_search,
    "Interpolated binary search": interpolated_binary_search,
}
