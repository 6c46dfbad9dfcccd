import pytest

from dsakit.singly_linked import (
    Node,
    SinglyLinkedList,
    compare_lists,
    cycle_start,
    has_cycle,
)


def test_build_and_iterate():
    values = [34, 344, 324]
    lst = SinglyLinkedList(values)
    assert list(lst) == values
    assert len(lst) == len(values)


def test_empty_list():
    lst = SinglyLinkedList()
    assert list(lst) == []
    assert len(lst) == 0


def test_insert_beginning():
    lst = SinglyLinkedList([34, 344, 324])
    lst.insert_beginning(76)
    assert list(lst) == [76, 34, 344, 324]


def test_insert_end_and_on_empty():
    lst = SinglyLinkedList()
    lst.insert_end(5)
    lst.insert_end(6)
    assert list(lst) == [5, 6]


def test_insert_before_middle_and_head():
    lst = SinglyLinkedList([10, 20, 30])
    lst.insert_before(15, 20)
    lst.insert_before(5, 10)
    assert list(lst) == [5, 10, 15, 20, 30]


def test_insert_before_missing():
    lst = SinglyLinkedList([10, 20])
    with pytest.raises(ValueError):
        lst.insert_before(1, 99)


def test_insert_after():
    lst = SinglyLinkedList([10, 20, 30])
    lst.insert_after(25, 20)
    lst.insert_after(35, 30)
    lst.insert_after(12, 10)
    assert list(lst) == [10, 12, 20, 25, 30, 35]


def test_insert_after_missing():
    with pytest.raises(ValueError):
        SinglyLinkedList([1]).insert_after(2, 7)


def test_delete_beginning_and_end():
    lst = SinglyLinkedList([10, 20, 30])
    assert lst.delete_beginning() == 10
    assert lst.delete_end() == 30
    assert list(lst) == [20]
    assert lst.delete_end() == 20
    assert list(lst) == []


def test_delete_from_empty():
    lst = SinglyLinkedList()
    with pytest.raises(IndexError):
        lst.delete_beginning()
    with pytest.raises(IndexError):
        lst.delete_end()


def test_delete_value():
    lst = SinglyLinkedList([10, 20, 30, 20])
    lst.delete_value(20)
    assert list(lst) == [10, 30, 20]
    lst.delete_value(10)
    assert list(lst) == [30, 20]
    with pytest.raises(ValueError):
        lst.delete_value(99)


def test_delete_after():
    lst = SinglyLinkedList([10, 20, 30, 40])
    assert lst.delete_after(10) == 20
    assert list(lst) == [10, 30, 40]
    with pytest.raises(ValueError):
        lst.delete_after(40)
    with pytest.raises(ValueError):
        lst.delete_after(99)


def test_clear():
    lst = SinglyLinkedList([1, 2, 3])
    lst.clear()
    assert list(lst) == []


@pytest.mark.parametrize("values", [[], [1], [5, 3, 9, 1, 3], [3, 2, 1]])
def test_sort(values):
    lst = SinglyLinkedList(values)
    lst.sort()
    assert list(lst) == sorted(values)


def test_compare_lists_same():
    first = SinglyLinkedList([500, 400, 300, 100, 200])
    second = SinglyLinkedList([500, 400, 300, 100, 200])
    assert compare_lists(first, second) is True


def test_compare_lists_different():
    assert compare_lists([500, 400, 300], [500, 401, 300]) is False


def test_compare_lists_only_common_prefix():
    assert compare_lists([1, 2, 3], [1, 2]) is True


def test_no_cycle():
    lst = SinglyLinkedList([1, 2, 3, 4, 5, 6, 7])
    assert has_cycle(lst.head) is False
    assert cycle_start(lst.head) is None


def test_cycle_detected_at_four():
    lst = SinglyLinkedList([1, 2, 3, 4, 5, 6, 7])
    node = lst.head
    loop_target = None
    while node.next is not None:
        if node.data == 4:
            loop_target = node
        node = node.next
    node.next = loop_target
    assert has_cycle(lst.head) is True
    assert cycle_start(lst.head) is loop_target
    assert cycle_start(lst.head).data == 4


def test_cycle_starting_at_head():
    head = Node(1)
    head.next = Node(2, Node(3, head))
    assert cycle_start(head) is head


def test_cycle_on_empty_chain():
    assert has_cycle(None) is False