import pytest

from dsakit.queues import (
    ArrayQueue,
    LinkedQueue,
    PriorityQueue,
    QueueOverflowError,
    QueueUnderflowError,
)


def test_first_in_first_out():
    for queue in (ArrayQueue(), LinkedQueue()):
        for item in (1, 2, 3):
            queue.enqueue(item)
        assert list(queue) == [1, 2, 3]
        assert [queue.dequeue() for _ in range(3)] == [1, 2, 3]
        assert len(queue) == 0


def test_peek_returns_front():
    for queue in (ArrayQueue(), LinkedQueue()):
        queue.enqueue("x")
        queue.enqueue("y")
        assert queue.peek() == "x"
        queue.dequeue()
        assert queue.peek() == "y"
        assert len(queue) == 1


def test_underflow():
    for queue in (ArrayQueue(), LinkedQueue()):
        with pytest.raises(QueueUnderflowError):
            queue.dequeue()
        with pytest.raises(IndexError):
            queue.peek()


def test_array_queue_overflow():
    queue = ArrayQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    with pytest.raises(QueueOverflowError):
        queue.enqueue(3)
    assert list(queue) == [1, 2]


def test_array_queue_slots_not_reused_until_empty():
    queue = ArrayQueue(3)
    for item in (1, 2, 3):
        queue.enqueue(item)
    assert queue.dequeue() == 1
    with pytest.raises(OverflowError):
        queue.enqueue(4)
    queue.dequeue()
    queue.dequeue()
    for item in (5, 6, 7):
        queue.enqueue(item)
    assert list(queue) == [5, 6, 7]


def test_array_queue_invalid_capacity():
    with pytest.raises(ValueError):
        ArrayQueue(0)


def test_linked_queue_is_unbounded():
    queue = LinkedQueue()
    for item in range(500):
        queue.enqueue(item)
    assert len(queue) == 500
    assert queue.peek() == 0


def test_priority_order():
    queue = PriorityQueue()
    queue.insert(10, 3)
    queue.insert(20, 1)
    queue.insert(30, 2)
    queue.insert(40, 1)
    assert list(queue) == [(20, 1), (40, 1), (30, 2), (10, 3)]
    assert [queue.pop() for _ in range(4)] == [20, 40, 30, 10]
    assert len(queue) == 0


def test_priority_iteration_is_sorted_by_priority():
    queue = PriorityQueue()
    for value, priority in [("a", 5), ("b", -1), ("c", 5), ("d", 0)]:
        queue.insert(value, priority)
    priorities = [priority for _, priority in queue]
    assert priorities == sorted(priorities)
    assert len(queue) == 4


def test_priority_queue_underflow():
    queue = PriorityQueue()
    with pytest.raises(QueueUnderflowError):
        queue.pop()