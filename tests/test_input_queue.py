import threading

import pytest

from ngsnake.config import UP, DOWN, LEFT, RIGHT
from ngsnake.game import InputQueue


def test_fifo_and_empty_pop():
    q = InputQueue()
    q.push(UP)
    q.push(LEFT)
    assert q.pop() == UP
    assert q.pop() == LEFT
    assert q.pop() is None


def test_push_rejects_non_direction():
    with pytest.raises(ValueError):
        InputQueue().push((2, 0))


def test_concurrent_pushes_never_leave_adjacent_duplicates():
    q = InputQueue()

    def spam(first, second):
        for _ in range(500):
            q.push(first)
            q.push(second)

    threads = [
        threading.Thread(target=spam, args=(UP, DOWN)),
        threading.Thread(target=spam, args=(DOWN, UP)),
        threading.Thread(target=spam, args=(LEFT, RIGHT)),
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    items = list(q)
    assert items
    assert all(a != b for a, b in zip(items, items[1:]))
