import numpy as np
import pytest
from structures.indexed_heap import IndexedHeap


class Task:
    def __init__(self, name, priority):
        self.name = name
        self.priority = priority

    def __repr__(self):
        return f"Task({self.name}, {self.priority})"


def by_priority(task):
    return task.priority


def drain(heap):
    out = []
    while heap.size() > 0:
        out.append(heap.poll())
    return out


def test_poll_returns_items_in_order():
    rng = np.random.default_rng(3)
    values = [int(v) for v in rng.integers(-100, 100, size=200)]
    heap = IndexedHeap(key=by_priority)
    for v in values:
        heap.offer(Task(v, v))
    assert [t.priority for t in drain(heap)] == sorted(values)


def test_poll_never_worse_than_remaining():
    rng = np.random.default_rng(11)
    heap = IndexedHeap(key=by_priority)
    for i, p in enumerate(rng.random(60)):
        heap.offer(Task(i, float(p)))
    while len(heap) > 1:
        best = heap.poll()
        assert all(best.priority <= t.priority for t in heap)


def test_peek_does_not_mutate():
    heap = IndexedHeap(key=by_priority)
    for p in [5, 3, 8]:
        heap.offer(Task(p, p))
    assert heap.peek().priority == 3
    assert heap.peek().priority == 3
    assert heap.size() == 3


def test_empty_heap_returns_none():
    heap = IndexedHeap()
    assert heap.peek() is None
    assert heap.poll() is None
    assert heap.is_empty()
    assert repr(heap) == "IndexedHeap([])"


def test_max_heap():
    heap = IndexedHeap(key=by_priority, reverse=True)
    for p in [4, 9, 1, 7, 7]:
        heap.offer(Task(p, p))
    assert [t.priority for t in drain(heap)] == [9, 7, 7, 4, 1]


def test_update_priority_both_directions():
    tasks = [Task(i, i) for i in range(20)]
    heap = IndexedHeap(key=by_priority)
    for t in tasks:
        heap.offer(t)

    tasks[15].priority = -5   # improves, must rise
    heap.update_priority(tasks[15])
    tasks[0].priority = 100   # worsens, must sink
    heap.update_priority(tasks[0])
    tasks[7].priority = 7.5   # small change, may stay
    heap.update_priority(tasks[7])

    assert heap.peek() is tasks[15]
    order = [t.priority for t in drain(heap)]
    assert order == sorted(order)
    assert order[-1] == 100


def test_update_priority_random_changes_keep_heap_sorted():
    rng = np.random.default_rng(42)
    tasks = [Task(i, float(rng.random())) for i in range(100)]
    heap = IndexedHeap(key=by_priority)
    for t in tasks:
        heap.offer(t)
    for _ in range(300):
        t = tasks[int(rng.integers(len(tasks)))]
        t.priority = float(rng.random())
        heap.update_priority(t)
    order = [t.priority for t in drain(heap)]
    assert order == sorted(order)


def test_update_priority_on_absent_item():
    heap = IndexedHeap(key=by_priority)
    present = Task("a", 1)
    heap.offer(present)
    with pytest.raises(ValueError):
        heap.update_priority(Task("b", 0))
    polled = heap.poll()
    with pytest.raises(ValueError):
        heap.update_priority(polled)
    assert heap.size() == 0


def test_offer_same_item_twice_rejected():
    heap = IndexedHeap(key=by_priority)
    t = Task("a", 1)
    heap.offer(t)
    with pytest.raises(ValueError):
        heap.offer(t)
    assert heap.size() == 1
    assert t in heap


def test_equal_priorities_are_distinct_items():
    heap = IndexedHeap(key=by_priority)
    a, b = Task("a", 1), Task("b", 1)
    heap.offer(a)
    heap.offer(b)
    first, second = heap.poll(), heap.poll()
    assert {first.name, second.name} == {"a", "b"}
