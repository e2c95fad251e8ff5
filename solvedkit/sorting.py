"""Sorting exercises: counting sorts, traced insertion sort and quicksort."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_COUNT_RANGE = 100


def _checked(value: int) -> int:
    if not 0 <= value < _COUNT_RANGE:
        raise ValueError(f"value {value} is outside 0..{_COUNT_RANGE - 1}")
    return value


def big_sort(nums: Iterable[str]) -> list[str]:
    """Sort decimal strings of any length by numeric value."""
    return sorted(nums, key=lambda text: (len(text), text))


def counting_frequencies(nums: Iterable[int]) -> list[int]:
    """How often each value in ``0..99`` occurs."""
    counts = [0] * _COUNT_RANGE
    for value in nums:
        counts[_checked(value)] += 1
    return counts


def counting_sort(nums: Iterable[int]) -> list[int]:
    """Values in ``0..99`` sorted by counting."""
    counts = counting_frequencies(nums)
    return [value for value, count in enumerate(counts) for _ in range(count)]


def counting_prefix_sums(entries: Iterable[tuple[int, str]]) -> list[int]:
    """For each value ``k`` in ``0..99``, how many entries have a key at most ``k``."""
    counts = counting_frequencies(key for key, _ in entries)
    total = 0
    sums = []
    for count in counts:
        total += count
        sums.append(total)
    return sums


def full_counting_sort(entries: Sequence[tuple[int, str]]) -> list[str]:
    """Stable sort of ``(key, word)`` pairs, hiding the first half as ``'-'``.

    Only keys below the number of entries are emitted.
    """
    size = len(entries)
    buckets: dict[int, list[str]] = {}
    for index, (key, word) in enumerate(entries):
        buckets.setdefault(key, []).append("-" if index < size // 2 else word)
    return [word for key in range(size) for word in buckets.get(key, [])]


def insertion_sort_step(arr: Sequence[int]) -> list[list[int]]:
    """States while inserting the last element into the sorted rest.

    Each shift shows the moved element twice; the final state has the last
    element in place.
    """
    if not arr:
        raise ValueError("cannot insert from an empty sequence")
    values = list(arr)
    last = values[-1]
    rest = values[:-1]
    states = []
    position = len(rest) - 1
    while position >= 0 and rest[position] > last:
        states.append(rest[: position + 1] + rest[position:])
        position -= 1
    position += 1
    states.append(rest[:position] + [last] + rest[position:])
    return states


def insertion_sort_trace(arr: Sequence[int]) -> list[list[int]]:
    """The list after each pass of insertion sort."""
    values = list(arr)
    states = []
    for end in range(1, len(values)):
        k = end
        while k > 0 and values[k - 1] > values[k]:
            values[k - 1], values[k] = values[k], values[k - 1]
            k -= 1
        states.append(list(values))
    return states


def quicksort_partition(arr: Sequence[int]) -> list[int]:
    """Smaller values, the first element, then larger values, each in order.

    Values equal to the pivot other than the pivot itself are dropped.
    """
    if not arr:
        raise ValueError("cannot partition an empty sequence")
    pivot = arr[0]
    return [v for v in arr if v < pivot] + [pivot] + [v for v in arr if v > pivot]


def quicksort_trace(arr: Sequence[int]) -> list[list[int]]:
    """Every merged sub-list longer than one element, then the sorted result."""
    trace: list[list[int]] = []

    def sort(values: list[int]) -> list[int]:
        if len(values) <= 1:
            return values
        pivot = values[0]
        smaller = sort([v for v in values if v < pivot])
        if len(smaller) > 1:
            trace.append(smaller)
        larger = sort([v for v in values if v > pivot])
        if len(larger) > 1:
            trace.append(larger)
        return smaller + [pivot] + larger

    result = sort(list(arr))
    if result:
        trace.append(result)
    return trace


def index_of(value: int, arr: Iterable[int]) -> int:
    """Index of the first element at least ``value``, or the length if none."""
    count = 0
    for index, element in enumerate(arr):
        if element >= value:
            return index
        count = index + 1
    return count