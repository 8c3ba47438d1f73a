import pytest

from dsakit.array import DynamicArray


def make(values, capacity=None):
    arr = DynamicArray(len(values), capacity if capacity is not None else len(values))
    arr.set_values(values)
    return arr


def test_capacity_smaller_than_size_rejected():
    with pytest.raises(ValueError):
        DynamicArray(5, 3)


def test_new_array_has_requested_size_and_capacity():
    arr = DynamicArray(3, 8)
    assert len(arr) == 3
    assert arr.capacity == 8


def test_set_values_round_trip():
    values = [4, 7, 1]
    arr = make(values, 5)
    assert list(arr) == values
    assert arr[1] == 7


def test_set_values_wrong_count():
    arr = DynamicArray(2, 4)
    with pytest.raises(ValueError):
        arr.set_values([1, 2, 3])


def test_getitem_reads_in_bounds_and_rejects_past_end():
    arr = make([1, 2])
    assert [arr[position] for position in range(len(arr))] == [1, 2]
    with pytest.raises(IndexError):
        arr[2]
    assert list(arr) == [1, 2]


def test_resize_grows_by_ten_and_keeps_items():
    arr = make([1, 2, 3], 3)
    arr.resize()
    assert arr.capacity == 3 + DynamicArray.GROWTH
    assert list(arr) == [1, 2, 3]


def test_override_replaces_element():
    arr = make([1, 2, 3], 5)
    arr.insert(9, 1, override=True)
    assert arr[1] == 9
    assert len(arr) == 3


def test_override_at_end_is_out_of_bounds():
    arr = make([1, 2, 3], 5)
    with pytest.raises(IndexError):
        arr.insert(9, 3, override=True)


@pytest.mark.parametrize("index", [-1, 4])
def test_insert_index_out_of_bounds(index):
    arr = make([1, 2, 3], 5)
    with pytest.raises(IndexError):
        arr.insert(9, index)


@pytest.mark.parametrize("index", [0, 1, 2, 3])
def test_shifting_insert_keeps_order(index):
    before = [1, 2, 3]
    arr = make(before, 5)
    arr.insert(9, index)
    after = list(arr)
    assert after[index] == 9
    assert after[:index] + after[index + 1:] == before


def test_swap_back_moves_displaced_to_end():
    before = [1, 2, 3]
    arr = make(before, 5)
    arr.insert(9, 0, swap_back=True)
    after = list(arr)
    assert after[0] == 9
    assert after[-1] == before[0]
    assert after[1:3] == before[1:3]


def test_insert_when_full_grows_capacity():
    arr = make([1, 2], 2)
    arr.insert(5, 2)
    assert arr.capacity == 2 + DynamicArray.GROWTH
    assert list(arr) == [1, 2, 5]


def test_delete_shifting():
    arr = make([1, 2, 3, 4], 4)
    assert arr.delete(1) == 2
    assert list(arr) == [1, 3, 4]


def test_delete_swap_last():
    arr = make([1, 2, 3, 4], 4)
    assert arr.delete(0, swap_last=True) == 1
    assert list(arr) == [4, 2, 3]


def test_delete_empty():
    arr = DynamicArray(0, 4)
    with pytest.raises(IndexError):
        arr.delete(0)


def test_delete_out_of_bounds():
    arr = make([1, 2])
    with pytest.raises(IndexError):
        arr.delete(2)


def test_linear_search():
    arr = make([5, 8, 5, 3])
    assert arr.linear_search(5) == 0
    assert arr.linear_search(3) == 3
    assert arr.linear_search(42) is None


def test_binary_search_finds_every_element():
    values = [1, 3, 5, 7, 9, 11]
    arr = make(values)
    for position, value in enumerate(values):
        assert arr.binary_search(value) == position
    assert arr.binary_search(4) is None
    assert arr.binary_search(12) is None