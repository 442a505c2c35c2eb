from collections import deque

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.containers import (
    CircularQueue,
    DirectHashMap,
    MinStack,
    SinglyLinkedList,
    StackQueue,
)


def test_min_stack_example():
    stack = MinStack()
    stack.push(-2)
    stack.push(0)
    stack.push(-3)
    assert stack.get_min() == -3
    assert stack.pop() == -3
    assert stack.top() == 0
    assert stack.get_min() == -2
    assert len(stack) == 2


@given(st.lists(st.integers(), min_size=1))
def test_min_stack_tracks_minimum_while_popping(values):
    stack = MinStack()
    for value in values:
        stack.push(value)
    remaining = list(values)
    while remaining:
        assert stack.get_min() == min(remaining)
        assert stack.top() == remaining[-1]
        assert stack.pop() == remaining.pop()
    assert len(stack) == 0


@pytest.mark.parametrize("method", ["pop", "top", "get_min"])
def test_min_stack_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(MinStack(), method)()


def test_stack_queue_example():
    queue = StackQueue()
    queue.push(1)
    queue.push(2)
    assert queue.peek() == 1
    assert queue.pop() == 1
    assert len(queue) == 1


@given(st.lists(st.one_of(st.integers(), st.none())))
def test_stack_queue_behaves_like_deque(ops):
    queue = StackQueue()
    model = deque()
    for op in ops:
        if op is None:
            if model:
                assert queue.pop() == model.popleft()
            else:
                with pytest.raises(IndexError):
                    queue.pop()
        else:
            queue.push(op)
            model.append(op)
        assert len(queue) == len(model)


def test_stack_queue_empty_peek_raises():
    with pytest.raises(IndexError):
        StackQueue().peek()


def test_hash_map_example():
    table = DirectHashMap()
    table.put(1, 1)
    table.put(2, 2)
    assert table.get(1) == 1
    assert table.get(3) == -1
    table.put(2, 1)
    assert table.get(2) == 1
    table.remove(2)
    assert table.get(2) == table.get(3)


def test_hash_map_accepts_bounds():
    table = DirectHashMap()
    table.put(0, 7)
    table.put(DirectHashMap.MAX_KEY, 8)
    assert (table.get(0), table.get(DirectHashMap.MAX_KEY)) == (7, 8)


@pytest.mark.parametrize("key", [-1, DirectHashMap.MAX_KEY + 1])
def test_hash_map_rejects_out_of_range_keys(key):
    with pytest.raises(ValueError):
        DirectHashMap().put(key, 1)


def test_linked_list_example():
    lst = SinglyLinkedList()
    lst.add_at_head(1)
    lst.add_at_tail(3)
    lst.add_at_index(1, 2)
    assert list(lst) == [1, 2, 3]
    assert lst.get(1) == 2
    lst.delete_at_index(1)
    assert lst.get(1) == 3
    assert list(lst) == [1, 3]


def test_linked_list_out_of_range_is_ignored():
    lst = SinglyLinkedList()
    lst.add_at_index(1, 5)
    lst.delete_at_index(0)
    assert len(lst) == 0
    assert lst.get(0) == -1


_list_ops = st.lists(
    st.tuples(
        st.sampled_from(["head", "tail", "insert", "delete", "get"]),
        st.integers(min_value=-1, max_value=6),
        st.integers(),
    )
)


def _expected_get(model, index):
    return model[index] if 0 <= index < len(model) else -1


@given(_list_ops)
def test_linked_list_matches_python_list(ops):
    lst = SinglyLinkedList()
    model = []
    for name, index, value in ops:
        if name == "head":
            lst.add_at_head(value)
            model.insert(0, value)
        elif name == "tail":
            lst.add_at_tail(value)
            model.append(value)
        elif name == "insert":
            lst.add_at_index(index, value)
            if 0 <= index <= len(model):
                model.insert(index, value)
        elif name == "delete":
            lst.delete_at_index(index)
            if 0 <= index < len(model):
                del model[index]
        assert lst.get(index) == _expected_get(model, index)
        assert list(lst) == model
        assert len(lst) == len(model)
    last = len(model) - 1
    assert lst.get(last) == _expected_get(model, last)


def test_circular_queue_example():
    queue = CircularQueue(3)
    assert queue.enqueue(1)
    assert queue.enqueue(2)
    assert queue.enqueue(3)
    assert not queue.enqueue(4)
    assert queue.rear() == 3
    assert queue.is_full()
    assert queue.dequeue()
    assert queue.enqueue(4)
    assert queue.rear() == 4
    assert queue.front() == 2


def test_circular_queue_empty():
    queue = CircularQueue(2)
    assert queue.is_empty()
    assert not queue.dequeue()
    assert queue.front() == queue.rear() == -1


def test_circular_queue_negative_capacity_raises():
    with pytest.raises(ValueError):
        CircularQueue(-1)


@given(
    st.integers(min_value=1, max_value=5),
    st.lists(st.one_of(st.integers(), st.none())),
)
def test_circular_queue_matches_bounded_deque(capacity, ops):
    queue = CircularQueue(capacity)
    model = deque()
    for op in ops:
        if op is None:
            assert queue.dequeue() == bool(model)
            if model:
                model.popleft()
        else:
            accepted = len(model) < capacity
            assert queue.enqueue(op) == accepted
            if accepted:
                model.append(op)
        assert queue.is_empty() == (not model)
        assert queue.is_full() == (len(model) == capacity)
        assert queue.front() == (model[0] if model else -1)
        assert queue.rear() == (model[-1] if model else -1)