import pytest

from algokit.circular_list import CircularList


def test_insert_at_tail_keeps_order():
    items = CircularList()
    for value in [1, 2, 3, 4]:
        items.insert_at_tail(value)
    assert list(items) == [1, 2, 3, 4]
    assert len(items) == 4


def test_source_walkthrough():
    items = CircularList([1, 2, 3, 4])
    items.insert_at_head(5)
    assert list(items) == [5, 1, 2, 3, 4]
    assert items.delete(5) == 4
    assert list(items) == [5, 1, 2, 3]


def test_insert_at_head_on_empty():
    items = CircularList()
    items.insert_at_head(7)
    assert list(items) == [7]


def test_delete_at_head():
    items = CircularList([1, 2, 3])
    assert items.delete_at_head() == 1
    assert list(items) == [2, 3]


def test_delete_only_element():
    items = CircularList([9])
    assert items.delete_at_head() == 9
    assert list(items) == []
    assert len(items) == 0


def test_delete_middle_and_tail_then_append():
    items = CircularList([1, 2, 3, 4])
    assert items.delete(2) == 2
    assert items.delete(3) == 4
    items.insert_at_tail(8)
    assert list(items) == [1, 3, 8]


def test_delete_from_empty():
    with pytest.raises(IndexError):
        CircularList().delete_at_head()


@pytest.mark.parametrize("position", [0, 4, -1])
def test_delete_out_of_range(position):
    with pytest.raises(IndexError):
        CircularList([1, 2, 3]).delete(position)


def test_str_is_space_separated():
    assert str(CircularList([1, 2, 3])) == "1 2 3"