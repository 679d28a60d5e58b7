from typing import Optional


# --- Index Arithmetic Helpers ---

def checked_decrement(index: int) -> Optional[int]:
    """
    Returns index - 1, or None when that would step below position zero.
    None signals an empty search range to the caller.
    """
    if index <= 0:
        return None
    return index - 1


def midpoint(low: int, high: int) -> int:
    """Midpoint of a closed index range, written so low + high is never formed."""
    return low + (high - low) // 2


def interpolation_probe(data: list[int], low: int, high: int, target: int) -> int:
    """
    Estimates where the target should sit between low and high, assuming the
    values in that range are spread roughly uniformly.

    The probe is clamped to [low, high]: targets at or below data[low] map to low,
    targets at or above data[high] map to high. The division is therefore only
    reached when data[high] > data[low].
    """
    low_value = data[low]
    high_value = data[high]
    if target <= low_value:
        return low
    if target >= high_value:
        return high
    return low + (target - low_value) * (high - low) // (high_value - low_value)


def is_non_decreasing(data: list[int]) -> bool:
    return all(a <= b for a, b in zip(data, data[1:]))
