import pytest

from algokit.structures import StackQueue


def test_fifo_order():
    queue = StackQueue()
    values = [4, 8, 15, 16, 23, 42]
    for value in values:
        queue.push(value)
    assert [queue.pop() for _ in values] == values


def test_front_does_not_remove():
    queue = StackQueue()
    queue.push(3)
    queue.push(9)
    assert queue.front() == 3
    assert queue.front() == 3
    assert len(queue) == 2


def test_interleaved_push_and_pop():
    queue = StackQueue()
    queue.push(1)
    queue.push(2)
    assert queue.pop() == 1
    queue.push(3)
    assert queue.front() == 2
    assert queue.pop() == 2
    assert queue.pop() == 3
    assert len(queue) == 0


def test_len_tracks_pushes_and_pops():
    queue = StackQueue()
    for value in range(5):
        queue.push(value)
    queue.pop()
    assert len(queue) == 4


def test_empty_front_raises():
    with pytest.raises(IndexError):
        StackQueue().front()


def test_empty_pop_raises():
    queue = StackQueue()
    queue.push(7)
    queue.pop()
    with pytest.raises(IndexError):
        queue.pop()