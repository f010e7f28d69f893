import pytest

from algodrills.doubly import DoublyLinkedList, DoublyNode


def sample():
    return DoublyLinkedList([10, 20, 30, 40])


def test_format_of_sample():
    assert sample().format() == "10->20->30->40->NULL"


def test_empty_format():
    assert DoublyLinkedList().format() == "NULL"


def test_insert_at_head_and_tail_as_in_sample_run():
    dll = sample()
    dll.insert_at_head(5)
    dll.insert_at_tail(50)
    assert dll.values() == [5, 10, 20, 30, 40, 50]
    dll.insert_at_position(60, 8)
    assert dll.values() == [5, 10, 20, 30, 40, 50, 60]


def test_insert_at_position_middle():
    dll = sample()
    dll.insert_at_position(25, 3)
    assert dll.values() == [10, 20, 25, 30, 40]
    assert dll.values()[2] == 25


def test_insert_at_position_one_goes_to_head():
    dll = sample()
    dll.insert_at_position(1, 1)
    assert dll.head.data == 1


def test_insert_into_empty():
    dll = DoublyLinkedList()
    dll.insert_at_position(7, 4)
    assert dll.values() == [7]
    assert dll.head is dll.tail


def test_insert_at_head_builds_reversed():
    dll = DoublyLinkedList()
    for value in [10, 20, 30, 40, 50]:
        dll.insert_at_head(value)
    assert dll.values() == [50, 40, 30, 20, 10]


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_delete_each_position(position):
    dll = sample()
    expected = dll.values()
    removed = expected.pop(position - 1)
    assert dll.delete(position) == removed
    assert dll.values() == expected
    assert dll.values_backward() == list(reversed(expected))
    assert len(dll) == 3


def test_delete_updates_head_and_tail():
    dll = sample()
    dll.delete(1)
    dll.delete(len(dll))
    assert dll.head.data == 20
    assert dll.tail.data == 30
    assert dll.head.prev is None
    assert dll.tail.next is None


def test_delete_only_element_empties_list():
    dll = DoublyLinkedList([9])
    assert dll.delete(1) == 9
    assert dll.head is None and dll.tail is None
    assert dll.values() == []


def test_delete_from_empty_raises():
    with pytest.raises(IndexError):
        DoublyLinkedList().delete(1)


@pytest.mark.parametrize("position", [0, 5, -1])
def test_delete_invalid_position_raises(position):
    dll = sample()
    with pytest.raises(IndexError):
        dll.delete(position)
    assert dll.values() == [10, 20, 30, 40]


def test_backward_links_consistent_after_mixed_operations():
    dll = DoublyLinkedList()
    dll.insert_at_tail(1)
    dll.insert_at_head(0)
    dll.insert_at_position(5, 2)
    dll.insert_at_tail(3)
    dll.delete(3)
    assert dll.values_backward() == list(reversed(dll.values()))
    assert len(dll) == len(dll.values())


def test_node_defaults():
    node = DoublyNode(3)
    assert node.data == 3
    assert node.prev is None and node.next is None