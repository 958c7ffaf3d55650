import pytest

from lotuskit.linked_list import LinkedList, ListHeader


def _three_node_list():
    lst = LinkedList(4)
    lst.head.data = 420.0
    lst.append_node()
    lst.append_node()
    lst.node(1).data = 123.0
    lst.node(2).data = 456.0
    return lst


def test_core_test_node_data():
    lst = _three_node_list()
    node2 = lst.node(1)
    node3 = lst.node(2)
    assert [lst.head.data, node3.prev.data, node2.next.data] == [420.0, 123.0, 456.0]


def test_header_tracks_length_and_size():
    lst = _three_node_list()
    assert lst.header() == ListHeader(size=12 + 3 * 24, stride=4, length=3)


def test_new_list_has_one_node():
    lst = LinkedList(8)
    assert len(lst) == 1
    assert lst.node(0) is lst.head


def test_node_out_of_range_raises():
    lst = LinkedList(4)
    with pytest.raises(IndexError):
        lst.node(1)


def test_remove_node_drops_tail():
    lst = _three_node_list()
    lst.remove_node()
    assert len(lst) == 2
    assert lst.node(1).next is None
    assert [n.data for n in lst] == [420.0, 123.0]


def test_remove_start_node_raises():
    with pytest.raises(IndexError):
        LinkedList(4).remove_node()


def test_append_after_remove_links_correctly():
    lst = _three_node_list()
    lst.remove_node()
    new = lst.append_node()
    assert new.prev is lst.node(1)
    assert lst.header().length == 3