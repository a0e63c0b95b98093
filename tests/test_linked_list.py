import pytest

from dsakit.linked_list import LinkedList, Node


def test_from_values_round_trip():
    values = [1, 2, 3, 4, 5]
    ll = LinkedList(values)
    assert list(ll) == values
    assert len(ll) == len(values)


def test_empty_list():
    ll = LinkedList()
    assert list(ll) == []
    assert len(ll) == 0
    assert str(ll) == "NULL"
    assert ll.head is None


def test_str_format():
    assert str(LinkedList([1, 2, 3, 4, 5])) == "1 → 2 → 3 → 4 → 5 → NULL"


def test_head_nodes_are_linked():
    ll = LinkedList([7, 8])
    assert ll.head == Node(7, Node(8))


def test_source_walkthrough():
    ll = LinkedList([1, 2, 3, 4, 5])
    ll.push_front(0)
    assert list(ll) == [0, 1, 2, 3, 4, 5]
    ll.append(6)
    assert list(ll) == [0, 1, 2, 3, 4, 5, 6]
    ll.insert_at(99, 4)
    assert list(ll) == [0, 1, 2, 99, 3, 4, 5, 6]
    assert ll.remove(99) is True
    assert list(ll) == [0, 1, 2, 3, 4, 5, 6]
    assert len(ll) == 7
    assert 3 in ll
    assert 99 not in ll


def test_append_to_empty():
    ll = LinkedList()
    ll.append("a")
    ll.append("b")
    assert list(ll) == ["a", "b"]
    assert len(ll) == 2


def test_insert_at_end_position():
    ll = LinkedList([1, 2])
    ll.insert_at(3, len(ll) + 1)
    assert list(ll) == [1, 2, 3]


def test_insert_at_first_position_on_empty():
    ll = LinkedList()
    ll.insert_at("x", 1)
    assert list(ll) == ["x"]


@pytest.mark.parametrize("position", [0, -1, 4, 10])
def test_insert_at_out_of_bounds(position):
    ll = LinkedList([1, 2])
    with pytest.raises(IndexError):
        ll.insert_at(5, position)
    assert list(ll) == [1, 2]


def test_remove_head_and_first_match_only():
    ll = LinkedList([4, 5, 4, 6])
    assert ll.remove(4) is True
    assert list(ll) == [5, 4, 6]
    assert ll.remove(4) is True
    assert list(ll) == [5, 6]


def test_remove_missing_value_leaves_list():
    ll = LinkedList([1, 2, 3])
    assert ll.remove(42) is False
    assert list(ll) == [1, 2, 3]
    assert len(ll) == 3


def test_remove_from_empty():
    ll = LinkedList()
    assert ll.remove(1) is False
    assert len(ll) == 0