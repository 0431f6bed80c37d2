from typing import List, Sequence, TypeVar

T = TypeVar('T')


def merge_sort(values: Sequence[T]) -> List[T]:
    """Return a new list with ``values`` in non-decreasing order.

    Stable: equal elements keep their relative input order.
    """
    if len(values) <= 1:
        return list(values)
    mid = len(values) // 2
    return merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def merge(left: Sequence[T], right: Sequence[T]) -> List[T]:
    result: List[T] = []
    i = 0
    j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def unique_sorted(values: Sequence[T]) -> List[T]:
    """Drop adjacent duplicates from an already sorted sequence."""
    result: List[T] = []
    for value in values:
        if not result or result[-1] != value:
            result.append(value)
    return result
