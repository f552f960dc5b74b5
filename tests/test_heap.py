import random

import pytest

from dsakit.heap import MaxHeap


def _is_heap(values):
    return all(
        values[i] >= values[c]
        for i in range(len(values))
        for c in (2 * i + 1, 2 * i + 2)
        if c < len(values)
    )


def test_insert_order_pinned():
    heap = MaxHeap()
    for value in (10, 20, 30):
        heap.insert(value)
    assert list(heap) == [30, 10, 20]


def test_heap_property_after_each_insert():
    heap = MaxHeap()
    rng = random.Random(7)
    seen = []
    for _ in range(60):
        value = rng.randint(-50, 50)
        seen.append(value)
        heap.insert(value)
        contents = list(heap)
        assert sorted(contents) == sorted(seen)
        assert contents[0] == max(seen)
        assert _is_heap(contents) is True


def test_root_is_maximum():
    values = [4, 17, 9, 1, 23, 8]
    heap = MaxHeap()
    for value in values:
        heap.insert(value)
    assert next(iter(heap)) == max(values)
    assert len(heap) == len(values)


def test_delete_root_yields_descending_order():
    rng = random.Random(3)
    values = [rng.randint(0, 100) for _ in range(40)]
    heap = MaxHeap()
    for value in values:
        heap.insert(value)
    drained = []
    while len(heap):
        drained.append(heap.delete_root())
        assert _is_heap(list(heap))
    assert drained == sorted(values, reverse=True)


def test_delete_single_element():
    heap = MaxHeap()
    heap.insert(5)
    assert heap.delete_root() == 5
    assert len(heap) == 0


def test_delete_from_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap().delete_root()