"""Classic comparison sorts. Each function returns a new sorted list."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        for j in range(n - 1 - done):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front each pass."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        smallest = min(range(i, n), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def _sift_down(heap: list[Any], size: int, index: int) -> None:
    while True:
        left, right = 2 * index + 1, 2 * index + 2
        largest = index
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == index:
            return
        heap[index], heap[largest] = heap[largest], heap[index]
        index = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Sort using a binary max-heap built in place."""
    result = list(items)
    n = len(result)
    for index in range(n // 2 - 1, -1, -1):
        _sift_down(result, n, index)
    for end in range(n - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves and merging the sorted halves."""
    result = list(items)
    if len(result) <= 1:
        return result
    middle = (len(result) + 1) // 2
    return _merge(merge_sort(result[:middle]), merge_sort(result[middle:]))


def _random_partition(data: list[Any], low: int, high: int, rng: random.Random) -> int:
    pivot_index = rng.randint(low, high)
    data[low], data[pivot_index] = data[pivot_index], data[low]
    pivot = data[low]
    left, right = low, high
    while left < right:
        while data[right] > pivot:
            right -= 1
        while left < right and data[left] <= pivot:
            left += 1
        if left < right:
            data[left], data[right] = data[right], data[left]
    data[low], data[right] = data[right], data[low]
    return right


def randomized_quicksort(items: Iterable[Any], rng: random.Random | None = None) -> list[Any]:
    """Quicksort with a pivot chosen at random by ``rng``."""
    rng = rng if rng is not None else random.Random()
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _random_partition(result, low, high, rng)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return result