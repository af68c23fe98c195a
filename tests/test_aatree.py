import pytest
from hypothesis import given
from hypothesis import strategies as st

from dslib.aatree import AATree, AATreeNode


class IntNode(AATreeNode):
    def __init__(self, val=0):
        super().__init__()
        self.val = val


def less_than(a, b):
    return a.val < b.val


def copy_node(src, dst):
    dst.val = src.val


def make_tree(freed=None):
    return AATree(less_than, copy_node, freed.append if freed is not None else None)


def in_order(node):
    if node is None:
        return []
    return in_order(node.left) + [node.val] + in_order(node.right)


def check_invariants(node):
    if node is None:
        return
    if node.is_leaf():
        assert node.level == 1
    if node.left is not None:
        assert node.left.level == node.level - 1
    else:
        assert node.level == 1
    if node.right is not None:
        assert node.right.level in (node.level, node.level - 1)
        if node.right.right is not None:
            assert node.right.right.level < node.level
    if node.level > 1:
        assert node.left is not None and node.right is not None
    check_invariants(node.left)
    check_invariants(node.right)


VALS = [16, 53, 3, 98, 79, 80, 17, 11, 42, 86]


def test_insert():
    tree = make_tree()
    for v in VALS:
        assert tree.insert(IntNode(v)) is True
    for i in range(100):
        assert tree.contains(IntNode(i)) == (i in VALS)
        assert (IntNode(i) in tree) == (i in VALS)
    check_invariants(tree._root)
    assert in_order(tree._root) == sorted(VALS)


def test_insert_duplicate_rejected():
    tree = make_tree()
    first = IntNode(5)
    assert tree.insert(first)
    assert tree.insert(IntNode(5)) is False
    assert tree.find(IntNode(5)) is first


def test_find_missing_returns_none():
    tree = make_tree()
    assert tree.find(IntNode(1)) is None
    tree.insert(IntNode(2))
    assert tree.find(IntNode(1)) is None
    assert tree.find(IntNode(2)).val == 2


def test_insert_non_fresh_node_raises():
    tree = make_tree()
    node = IntNode(1)
    node.level = 2
    with pytest.raises(ValueError):
        tree.insert(node)


def test_remove_leaf_frees_node():
    freed = []
    tree = make_tree(freed)
    node = IntNode(7)
    tree.insert(node)
    assert tree.remove(IntNode(7)) is True
    assert freed == [node]
    assert not tree.contains(IntNode(7))
    assert tree.remove(IntNode(7)) is False


def test_remove_missing_returns_false():
    freed = []
    tree = make_tree(freed)
    for v in VALS:
        tree.insert(IntNode(v))
    assert tree.remove(IntNode(50)) is False
    assert freed == []
    assert in_order(tree._root) == sorted(VALS)


def test_remove_internal_node_uses_victim():
    freed = []
    tree = make_tree(freed)
    nodes = {v: IntNode(v) for v in range(1, 8)}
    for node in nodes.values():
        tree.insert(node)
    root = tree._root
    root_val = root.val
    assert root.left is not None and root.right is not None
    assert tree.remove(IntNode(root_val)) is True
    assert len(freed) == 1
    assert freed[0] is not root
    assert freed[0].val == min(v for v in nodes if v > root_val)
    assert in_order(tree._root) == [v for v in range(1, 8) if v != root_val]
    check_invariants(tree._root)


def test_remove_all_in_sequence():
    tree = make_tree()
    for v in VALS:
        tree.insert(IntNode(v))
    remaining = sorted(VALS)
    for v in VALS:
        assert tree.remove(IntNode(v))
        remaining.remove(v)
        assert in_order(tree._root) == remaining
        check_invariants(tree._root)
    assert tree._root is None


@given(st.lists(st.integers(-50, 50)), st.lists(st.integers(-50, 50)))
def test_matches_set_model(inserts, removals):
    tree = make_tree()
    model = set()
    for v in inserts:
        assert tree.insert(IntNode(v)) == (v not in model)
        model.add(v)
    check_invariants(tree._root)
    for v in removals:
        assert tree.remove(IntNode(v)) == (v in model)
        model.discard(v)
        check_invariants(tree._root)
    assert in_order(tree._root) == sorted(model)