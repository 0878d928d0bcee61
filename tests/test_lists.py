import pytest
from hypothesis import given
from hypothesis import strategies as st

from cstrkit.lists import LinkedList, Node


def test_construct_and_iterate():
    items = ["a", "b", "c"]
    assert list(LinkedList(items)) == items


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []


def test_head_is_node_chain():
    lst = LinkedList([1, 2])
    assert isinstance(lst.head, Node)
    assert lst.head.content == 1
    assert lst.head.next.content == 2
    assert lst.head.next.next is None


def test_push_front_order():
    lst = LinkedList()
    lst.push_front(1)
    lst.push_front(2)
    lst.push_front(3)
    assert list(lst) == [3, 2, 1]


def test_push_back_order():
    lst = LinkedList()
    lst.push_back(1)
    lst.push_back(2)
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]


def test_push_front_accepts_none_content():
    lst = LinkedList([1])
    lst.push_front(None)
    assert list(lst) == [None, 1]


def test_last():
    assert LinkedList([1, 2, 3]).last() == 3


def test_last_of_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().last()


def test_remove_first_calls_delete():
    deleted = []
    lst = LinkedList(["x", "y"])
    removed = lst.remove_first(deleted.append)
    assert removed == "x"
    assert deleted == ["x"]
    assert list(lst) == ["y"]


def test_remove_first_without_delete():
    lst = LinkedList([5, 6])
    assert lst.remove_first() == 5
    assert list(lst) == [6]


def test_remove_first_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().remove_first()


def test_clear_deletes_in_order():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_iterate_visits_in_order():
    seen = []
    LinkedList(["p", "q", "r"]).iterate(seen.append)
    assert seen == ["p", "q", "r"]


def test_iterate_empty_calls_nothing():
    seen = []
    LinkedList().iterate(seen.append)
    assert seen == []


def test_map_builds_new_list():
    source = LinkedList([1, 2, 3])
    mapped = source.map(lambda x: x * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(source) == [1, 2, 3]


def test_map_failure_deletes_partial_results():
    deleted = []

    def f(x):
        if x == 3:
            raise RuntimeError("boom")
        return -x

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert deleted == [-1, -2]


@given(st.lists(st.integers()))
def test_round_trip_and_length(items):
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


@given(st.lists(st.integers(), min_size=1))
def test_last_matches_final_item(items):
    assert LinkedList(items).last() == items[-1]


@given(st.lists(st.integers()), st.integers())
def test_push_back_then_last(items, value):
    lst = LinkedList(items)
    lst.push_back(value)
    assert lst.last() == value
    assert len(lst) == len(items) + 1


@given(st.lists(st.integers()))
def test_map_identity_preserves_items(items):
    assert list(LinkedList(items).map(lambda x: x)) == items