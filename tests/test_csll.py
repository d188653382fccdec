import pytest

from genutils.csll import CSLL
from genutils.nodes import SingleNode


def _walk(lst):
    """Follow the node links from the head, checking the ring closes."""
    if not len(lst):
        assert lst.begin() is None and lst.end() is None
        return []
    assert lst.end().next is lst.begin()
    values, node = [], lst.begin()
    for _ in range(len(lst)):
        values.append(node.value)
        node = node.next
    return values


def test_scenario_from_source():
    lst = CSLL()
    assert lst.is_empty()

    for value, expected in zip(
        range(5),
        [[0], [1, 0], [2, 1, 0], [3, 2, 1, 0], [4, 3, 2, 1, 0]],
    ):
        lst.push_front(value)
        assert _walk(lst) == expected

    for value in range(5, 10):
        lst.push_back(value)
    assert _walk(lst) == [4, 3, 2, 1, 0, 5, 6, 7, 8, 9]

    insert_states = [
        [4, 3, 3, 2, 1, 0, 5, 6, 7, 8, 9],
        [4, 4, 3, 3, 2, 1, 0, 5, 6, 7, 8, 9],
        [4, 5, 4, 3, 3, 2, 1, 0, 5, 6, 7, 8, 9],
        [4, 6, 5, 4, 3, 3, 2, 1, 0, 5, 6, 7, 8, 9],
        [4, 7, 6, 5, 4, 3, 3, 2, 1, 0, 5, 6, 7, 8, 9],
    ]
    for value, expected in zip(range(3, 8), insert_states):
        lst.insert_after(lst.begin(), value)
        assert _walk(lst) == expected

    assert [lst.pop_front() for _ in range(3)] == [4, 7, 6]
    assert _walk(lst) == [5, 4, 3, 3, 2, 1, 0, 5, 6, 7, 8, 9]

    assert [lst.pop_back() for _ in range(3)] == [9, 8, 7]
    assert _walk(lst) == [5, 4, 3, 3, 2, 1, 0, 5, 6]

    assert [lst.remove_after(lst.begin()) for _ in range(2)] == [4, 3]
    assert _walk(lst) == [5, 3, 2, 1, 0, 5, 6]
    assert len(lst) == 7

    lst.clear()
    assert _walk(lst) == []


def test_constructor_and_repr():
    lst = CSLL("abc")
    assert _walk(lst) == ["a", "b", "c"]
    assert (lst.begin().value, lst.end().value) == ("a", "c")
    assert repr(lst) == "CSLL(['a', 'b', 'c'])"


def test_insert_into_empty_ignores_node():
    lst = CSLL()
    node = lst.insert(None, 42)
    assert node.value == 42
    assert node.next is node
    assert lst.begin() is node is lst.end()


def test_insert_before_middle_node():
    lst = CSLL([1, 2, 3])
    returned = lst.insert(lst.begin().next, 9)
    assert returned.value == 9
    assert _walk(lst) == [1, 9, 2, 3]


def test_insert_before_tail_moves_tail():
    lst = CSLL([1, 2])
    lst.insert(lst.end(), 9)
    assert lst.end().value == 2
    lst.push_back(3)
    assert _walk(lst) == [1, 9, 2, 3]


def test_insert_after_tail_updates_tail():
    lst = CSLL([1, 2])
    new = lst.insert_after(lst.end(), 3)
    assert lst.end() is new
    assert _walk(lst) == [1, 2, 3]


def test_remove_head_middle_tail():
    lst = CSLL([1, 2, 3, 4])
    steps = [
        (lambda: lst.begin(), 1, [2, 3, 4]),
        (lambda: lst.begin().next, 3, [2, 4]),
        (lambda: lst.end(), 4, [2]),
        (lambda: lst.begin(), 2, []),
    ]
    for pick, removed, remaining in steps:
        assert lst.remove(pick()) == removed
        assert _walk(lst) == remaining


def test_removed_node_is_unlinked():
    lst = CSLL([1, 2])
    node = lst.begin()
    lst.remove(node)
    assert node.next is None
    with pytest.raises(ValueError):
        lst.remove(node)


def test_remove_node_from_other_list_raises():
    lst = CSLL([1, 2, 3])
    with pytest.raises(ValueError):
        lst.remove(CSLL([4, 5]).begin())
    assert _walk(lst) == [1, 2, 3]


@pytest.mark.parametrize("node", [SingleNode(1), None])
def test_remove_unlinked_node_raises(node):
    with pytest.raises(ValueError):
        CSLL([1]).remove(node)


@pytest.mark.parametrize(
    "initial, pick, removed, remaining",
    [
        ([1, 2, 3], lambda lst: lst.end(), 1, [2, 3]),
        ([1, 2, 3], lambda lst: lst.begin().next, 3, [1, 2]),
        ([7], lambda lst: lst.begin(), 7, []),
    ],
)
def test_remove_after(initial, pick, removed, remaining):
    lst = CSLL(initial)
    assert lst.remove_after(pick(lst)) == removed
    assert _walk(lst) == remaining


def test_remove_after_none_raises():
    with pytest.raises(ValueError):
        CSLL().remove_after(None)


@pytest.mark.parametrize("method", ["insert", "insert_after"])
def test_insert_with_none_on_nonempty_raises(method):
    lst = CSLL([1])
    with pytest.raises(ValueError):
        getattr(lst, method)(None, 2)
    assert _walk(lst) == [1]


@pytest.mark.parametrize("method", ["pop_back", "pop_front"])
def test_pop_on_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(CSLL(), method)()


def test_none_values_kept_at_both_ends():
    lst = CSLL()
    lst.push_back(None)
    lst.push_front(None)
    assert _walk(lst) == [None, None]
    assert lst.pop_back() is None
    assert len(lst) == 1


def test_iterate_with_extradata():
    seen = []
    CSLL([1, 2, 3]).iterate(lambda value, out: out.append(value * 10), seen)
    assert seen == [10, 20, 30]


def test_iterate_empty_never_calls():
    calls = []
    CSLL().iterate(lambda value, extra: calls.append(value))
    assert calls == []


def test_clear_then_reuse():
    lst = CSLL(range(5))
    lst.clear()
    lst.push_front("x")
    assert _walk(lst) == ["x"]