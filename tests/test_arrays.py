import pytest

from dsakit.arrays import ArrayFullError, BoundedArray

INITIAL = [10, 12, 7, 8, 15]


@pytest.fixture
def arr():
    return BoundedArray(10, INITIAL)


def test_initial_contents(arr):
    assert list(arr) == INITIAL
    assert len(arr) == len(INITIAL)
    assert arr.capacity == 10


def test_insert_source_example(arr):
    arr.insert(2, 5)
    assert list(arr) == [10, 12, 5, 7, 8, 15]


def test_insert_then_delete_round_trip(arr):
    arr.insert(2, 5)
    assert arr.delete(2) == 5
    assert list(arr) == INITIAL


def test_insert_shifts_items_right(arr):
    arr.insert(1, 99)
    assert arr[1] == 99
    assert list(arr)[2:] == INITIAL[1:]
    assert arr[0] == INITIAL[0]


def test_insert_at_end_appends(arr):
    arr.insert(len(arr), 42)
    assert arr[len(arr) - 1] == 42
    assert list(arr)[:-1] == INITIAL


@pytest.mark.parametrize("index", [-1, 6, 100])
def test_insert_out_of_range(arr, index):
    with pytest.raises(IndexError):
        arr.insert(index, 1)
    assert list(arr) == INITIAL


def test_insert_into_full_array():
    full = BoundedArray(3, [1, 2, 3])
    with pytest.raises(ArrayFullError):
        full.insert(0, 4)
    assert list(full) == [1, 2, 3]


def test_fill_to_capacity():
    arr = BoundedArray(4)
    for value in range(4):
        arr.insert(len(arr), value)
    assert arr.is_full
    assert list(arr) == list(range(4))
    with pytest.raises(ArrayFullError):
        arr.insert(0, 9)


def test_update(arr):
    arr.update(3, 77)
    assert arr[3] == 77
    assert len(arr) == len(INITIAL)


@pytest.mark.parametrize("index", [-1, 5])
def test_update_out_of_range(arr, index):
    with pytest.raises(IndexError):
        arr.update(index, 1)


def test_delete_shifts_items_left(arr):
    removed = arr.delete(0)
    assert removed == INITIAL[0]
    assert list(arr) == INITIAL[1:]


@pytest.mark.parametrize("index", [-1, 5])
def test_delete_out_of_range(arr, index):
    with pytest.raises(IndexError):
        arr.delete(index)
    assert list(arr) == INITIAL


def test_delete_from_empty():
    with pytest.raises(IndexError):
        BoundedArray(5).delete(0)


def test_array_c_walkthrough():
    start = range(1, 6)
    arr = BoundedArray(100, start)
    arr.insert(2, 10)
    assert arr[2] == 10
    arr.delete(2)
    assert list(arr) == list(start)
    assert arr.find(3) == 2


def test_find_returns_last_occurrence():
    arr = BoundedArray(10, [3, 1, 3])
    assert arr.find(3) == 2


def test_find_missing(arr):
    assert arr.find(1000) is None


@pytest.mark.parametrize("value", INITIAL)
def test_find_locates_each_item(arr, value):
    assert arr[arr.find(value)] == value


def test_too_many_initial_items():
    with pytest.raises(ArrayFullError):
        BoundedArray(2, [1, 2, 3])


def test_negative_capacity():
    with pytest.raises(ValueError):
        BoundedArray(-1)


def test_equality_and_repr(arr):
    same = BoundedArray(10, INITIAL)
    assert arr == same
    assert eval_free_repr(arr) == "BoundedArray(capacity=10, items=[10, 12, 7, 8, 15])"


def eval_free_repr(obj):
    return repr(obj)