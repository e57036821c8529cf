import random

import pytest

from hopgraph import (
    AlgorithmError,
    DuplicateElementError,
    EmptyQueueError,
    ErrorKind,
    IndexedPriorityQueue,
    NegativePriorityError,
    UnknownElementError,
)


def test_push_pop_change_priority_sequence():
    pq = IndexedPriorityQueue()
    pq.push(5, 100)
    pq.push(2, 200)
    pq.push(8, 300)
    assert pq.top_element() == 200
    pq.pop()
    assert pq.top_element() == 100
    pq.change_priority(1, 300)
    assert pq.top_element() == 300
    assert pq.top_priority() == 1
    pq.check_invariants()


def test_pop_returns_root_pair():
    pq = IndexedPriorityQueue()
    pq.push(4, 1)
    pq.push(3, 2)
    assert pq.pop() == (3, 2)
    assert pq.pop() == (4, 1)
    assert pq.is_empty()


def test_push_rejects_duplicates_and_negative_priorities():
    pq = IndexedPriorityQueue()
    pq.push(1, 7)
    with pytest.raises(DuplicateElementError) as info:
        pq.push(2, 7)
    assert info.value.kind is ErrorKind.DUPLICATE_ELEMENT
    with pytest.raises(NegativePriorityError):
        pq.push(-1, 8)
    assert pq.size() == 1
    assert not pq.is_present(8)


def test_empty_queue_operations_raise():
    pq = IndexedPriorityQueue()
    for call in (pq.pop, pq.top_priority, pq.top_element):
        with pytest.raises(EmptyQueueError):
            call()
    with pytest.raises(IndexError):
        pq.pop()


def test_unknown_element_raises():
    pq = IndexedPriorityQueue()
    pq.push(1, 1)
    with pytest.raises(UnknownElementError):
        pq.change_priority(3, 2)
    with pytest.raises(UnknownElementError):
        pq.get_priority(2)
    with pytest.raises(KeyError):
        pq.get_priority(2)
    with pytest.raises(NegativePriorityError):
        pq.change_priority(-5, 1)
    assert pq.get_priority(1) == 1


def test_equal_children_push_down_goes_right():
    pq = IndexedPriorityQueue()
    pq.push(0, 1)
    pq.push(5, 2)
    pq.push(5, 3)
    pq.push(6, 4)
    pq.pop()
    assert pq.top_element() == 3


def test_entry_equal_to_smaller_child_sinks_below_it():
    pq = IndexedPriorityQueue()
    pq.push(1, "a")
    pq.push(2, "b")
    pq.push(3, "c")
    pq.change_priority(2, "a")
    assert pq.top_element() == "b"
    assert pq._heap[1] == [2, "a"]
    pq.check_invariants()


def test_ties_do_not_percolate_up():
    pq = IndexedPriorityQueue()
    pq.push(3, 1)
    pq.push(3, 2)
    assert pq.top_element() == 1


def test_single_left_child_is_swapped():
    pq = IndexedPriorityQueue()
    pq.push(1, 10)
    pq.push(2, 20)
    pq.change_priority(5, 10)
    assert pq.top_element() == 20
    assert pq.get_priority(10) == 5
    pq.check_invariants()


def test_change_priority_increase_moves_entry_down():
    pq = IndexedPriorityQueue()
    for p, e in [(1, 1), (2, 2), (3, 3), (4, 4), (5, 5)]:
        pq.push(p, e)
    pq.change_priority(10, 1)
    assert pq.top_element() == 2
    pq.check_invariants()
    assert [pq.pop()[1] for _ in range(pq.size())] == [2, 3, 4, 5, 1]


def test_sorted_pop_order():
    rng = random.Random(7)
    pq = IndexedPriorityQueue()
    priorities = [rng.randrange(50) for _ in range(200)]
    for element, p in enumerate(priorities):
        pq.push(p, element)
    popped = [pq.pop()[0] for _ in range(len(priorities))]
    assert popped == sorted(priorities)
    assert pq.is_empty()


@pytest.mark.parametrize("seed", range(5))
def test_random_operations_keep_invariants(seed):
    rng = random.Random(seed)
    pq = IndexedPriorityQueue()
    shadow = {}
    next_element = 0
    for _ in range(400):
        op = rng.random()
        if op < 0.45 or not shadow:
            p = rng.randrange(30)
            pq.push(p, next_element)
            shadow[next_element] = p
            next_element += 1
        elif op < 0.7:
            priority, element = pq.pop()
            assert priority == min(shadow.values())
            assert shadow.pop(element) == priority
        else:
            element = rng.choice(list(shadow))
            p = rng.randrange(30)
            pq.change_priority(p, element)
            shadow[element] = p
        pq.check_invariants()
        assert pq.size() == len(shadow)
        if shadow:
            assert pq.top_priority() == min(shadow.values())
            assert shadow[pq.top_element()] == pq.top_priority()


def test_clear_and_container_protocol():
    pq = IndexedPriorityQueue()
    pq.push(2, 1)
    assert 1 in pq and len(pq) == 1 and pq
    pq.clear()
    assert pq.is_empty() and not pq
    assert not pq.is_present(1)
    pq.push(0, 1)
    assert pq.top_element() == 1


def test_check_invariants_detects_corruption():
    pq = IndexedPriorityQueue()
    pq.push(1, 1)
    pq.push(2, 2)
    pq._heap[0][0] = 100
    with pytest.raises(AlgorithmError):
        pq.check_invariants()
