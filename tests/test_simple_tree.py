import pytest

from pracollections.simple_tree import (
    TreeNode,
    delete,
    inorder,
    insert,
    postorder,
    preorder,
)

VALUES = [50, 30, 70, 20, 40, 60, 80, 35]


def build(values):
    root = None
    for value in values:
        root = insert(root, value)
    return root


def test_chain_example_preorder():
    root = build([2, 3, 4, 5, 6])
    assert list(preorder(root)) == [2, 3, 4, 5, 6]
    root = delete(root, 6)
    assert list(preorder(root)) == [2, 3, 4, 5]


def test_duplicate_insert_raises():
    root = build([2, 3, 4, 5])
    with pytest.raises(ValueError):
        insert(root, 5)
    assert list(inorder(root)) == [2, 3, 4, 5]


def test_inorder_sorted():
    assert list(inorder(build(VALUES))) == sorted(VALUES)


def test_preorder_and_postorder_root_position():
    root = build(VALUES)
    pre = list(preorder(root))
    post = list(postorder(root))
    assert pre[0] == VALUES[0]
    assert post[-1] == VALUES[0]
    assert sorted(pre) == sorted(post) == sorted(VALUES)


def test_empty_traversals():
    assert list(preorder(None)) == []
    assert list(inorder(None)) == []
    assert list(postorder(None)) == []


@pytest.mark.parametrize("target", VALUES)
def test_delete_keeps_other_nodes(target):
    root = delete(build(VALUES), target)
    expected = sorted(v for v in VALUES if v != target)
    assert list(inorder(root)) == expected


def test_delete_root_with_two_children():
    root = delete(build(VALUES), VALUES[0])
    assert isinstance(root, TreeNode)
    assert root.data != VALUES[0]
    assert list(inorder(root)) == sorted(VALUES[1:])


def test_delete_missing_raises():
    with pytest.raises(KeyError):
        delete(build(VALUES), 99)
    with pytest.raises(KeyError):
        delete(None, 1)


def test_delete_last_node_empties_tree():
    assert delete(build([7]), 7) is None