import pytest

from dsakit.linked_list import LinkedList


def test_items_kept_in_order():
    assert list(LinkedList([1, 2, 3])) == [1, 2, 3]


def test_push_adds_to_front():
    lst = LinkedList([10, 15, 20, 25])
    lst.push(5)
    assert list(lst) == [5, 10, 15, 20, 25]


def test_append_adds_to_back():
    lst = LinkedList([10, 15])
    lst.append(30)
    assert list(lst) == [10, 15, 30]


def test_append_on_empty_list():
    lst = LinkedList()
    lst.append(7)
    lst.append(8)
    assert list(lst) == [7, 8]
    assert len(lst) == 2


def test_push_then_append_on_empty_list():
    lst = LinkedList()
    lst.push(1)
    lst.append(2)
    assert list(lst) == [1, 2]


def test_find_returns_zero_based_position():
    lst = LinkedList([10, 15, 20, 25])
    assert lst.find(10) == 0
    assert lst.find(25) == 3
    assert lst.find(99) is None


def test_find_on_empty_list():
    assert LinkedList().find(1) is None


def test_remove_head_middle_and_tail():
    lst = LinkedList([10, 15, 20, 25])
    lst.remove(10)
    assert list(lst) == [15, 20, 25]
    lst.remove(20)
    assert list(lst) == [15, 25]
    lst.remove(25)
    assert list(lst) == [15]
    lst.append(40)
    assert list(lst) == [15, 40]


def test_remove_missing_raises():
    lst = LinkedList([1, 2])
    with pytest.raises(ValueError):
        lst.remove(3)
    assert list(lst) == [1, 2]


def test_remove_from_empty_raises():
    with pytest.raises(ValueError):
        LinkedList().remove(1)


def test_insert_after_key():
    lst = LinkedList([1, 2, 3])
    lst.insert_after(2, 9)
    assert list(lst) == [1, 2, 9, 3]


def test_insert_after_last_updates_tail():
    lst = LinkedList([1, 2])
    lst.insert_after(2, 5)
    lst.append(6)
    assert list(lst) == [1, 2, 5, 6]


def test_insert_after_missing_key_raises():
    with pytest.raises(ValueError):
        LinkedList([1]).insert_after(4, 5)


def test_delete_at_index():
    lst = LinkedList()
    for value in (1, 2, 3):
        lst.push(value)
    assert lst.delete_at(1) == 2
    assert list(lst) == [3, 1]
    assert lst.delete_at(0) == 3
    assert list(lst) == [1]


@pytest.mark.parametrize("index", [-1, 3])
def test_delete_at_out_of_bounds(index):
    lst = LinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        lst.delete_at(index)
    assert len(lst) == 3


def test_len_matches_iteration_after_mixed_operations():
    lst = LinkedList([4, 5, 6])
    lst.push(3)
    lst.append(7)
    lst.remove(5)
    lst.insert_after(6, 8)
    lst.delete_at(0)
    assert len(lst) == len(list(lst))
    assert list(lst) == [4, 6, 8, 7]


def test_equality_compares_contents():
    assert LinkedList([1, 2]) == LinkedList([1, 2])
    assert not LinkedList([1, 2]) == LinkedList([2, 1])