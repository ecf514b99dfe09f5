import pytest
from hypothesis import given
from hypothesis import strategies as st

from redblack.tree import Color, RedBlackTree


def _black_height(node, parent):
    if node is None:
        return 1
    assert node.parent is parent
    assert node.color in (Color.RED, Color.BLACK)
    if node.left is not None:
        assert node.left.value < node.value
    if node.right is not None:
        assert node.right.value > node.value
    if node.color is Color.RED:
        for child in (node.left, node.right):
            assert child is None or child.color is Color.BLACK
    left = _black_height(node.left, node)
    right = _black_height(node.right, node)
    assert left == right
    return left + (1 if node.color is Color.BLACK else 0)


def _check(tree):
    if tree.root is not None:
        assert tree.root.color is Color.BLACK
    _black_height(tree.root, None)
    values = list(tree)
    assert values == sorted(set(values))
    assert len(values) == len(tree)


def _build(values):
    tree = RedBlackTree()
    for value in values:
        tree.insert(value)
    return tree


def test_empty_tree():
    tree = RedBlackTree()
    assert len(tree) == 0
    assert list(tree) == []
    assert tree.format_preorder() == ""
    assert 5 not in tree


def test_ascending_insert_rebalances():
    tree = _build([1, 2, 3])
    assert tree.format_preorder() == "[2 B][1 R][3 R]"
    _check(tree)


def test_preorder_pairs():
    tree = _build([1, 2, 3])
    assert list(tree.preorder()) == [
        (2, Color.BLACK),
        (1, Color.RED),
        (3, Color.RED),
    ]


def test_duplicate_insert_ignored():
    tree = _build([4, 8, 2])
    assert tree.insert(8) is False
    assert len(tree) == 3
    assert list(tree) == [2, 4, 8]


def test_remove_red_leaf():
    tree = _build([1, 2, 3])
    assert tree.remove(1) is True
    assert tree.format_preorder() == "[2 B][3 R]"
    _check(tree)


def test_remove_missing_returns_false():
    tree = _build([1, 2, 3])
    assert tree.remove(42) is False
    assert list(tree) == [1, 2, 3]


def test_remove_only_node():
    tree = _build([7])
    assert tree.remove(7) is True
    assert tree.root is None
    assert len(tree) == 0


def test_remove_root_with_single_child():
    tree = _build([1, 2])
    tree.remove(1)
    assert list(tree) == [2]
    assert tree.root.value == 2
    assert tree.root.parent is None
    _check(tree)


def test_remove_node_with_two_children():
    tree = _build(range(1, 8))
    root_value = tree.root.value
    tree.remove(root_value)
    assert root_value not in tree
    assert list(tree) == [v for v in range(1, 8) if v != root_value]
    _check(tree)


def test_node_relations():
    tree = _build([1, 2, 3, 4])
    root = tree.root
    assert root.is_root()
    assert not root.is_left_child()
    assert root.left.is_left_child()
    assert root.left.sibling() is root.right
    deepest = root.right.right
    assert deepest.value == 4
    assert deepest.grandparent() is root
    assert deepest.uncle() is root.left
    assert root.uncle() is None
    assert root.sibling() is None


def test_drain_in_insertion_order():
    values = [50, 20, 70, 10, 30, 60, 80, 5, 15, 25, 35]
    tree = _build(values)
    for removed, value in enumerate(values, start=1):
        assert tree.remove(value)
        _check(tree)
        assert len(tree) == len(values) - removed
    assert tree.root is None


@given(st.lists(st.integers(-1000, 1000), max_size=200))
def test_insert_keeps_invariants(values):
    tree = _build(values)
    _check(tree)
    assert list(tree) == sorted(set(values))


@given(st.lists(st.tuples(st.booleans(), st.integers(-60, 60)), max_size=300))
def test_mixed_operations_match_set(operations):
    tree = RedBlackTree()
    model = set()
    for add, value in operations:
        if add:
            assert tree.insert(value) == (value not in model)
            model.add(value)
        else:
            assert tree.remove(value) == (value in model)
            model.discard(value)
        _check(tree)
    assert list(tree) == sorted(model)
    for value in range(-60, 61):
        assert (value in tree) == (value in model)


@pytest.mark.parametrize("count", [2, 9, 33])
def test_remove_all_descending(count):
    tree = _build(range(count))
    for value in reversed(range(count)):
        tree.remove(value)
        _check(tree)
    assert list(tree) == []