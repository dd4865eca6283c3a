import pytest

from bintree.node import Node


@pytest.fixture
def family():
    root = Node(98)
    left = root.insert_left(12)
    right = root.insert_right(402)
    left_left = left.insert_left(6)
    left_right = left.insert_right(54)
    right_right = right.insert_right(128)
    return root, left, right, left_left, left_right, right_right


def test_new_node_holds_value_and_parent():
    parent = Node(1)
    node = Node(7, parent)
    assert node.value == 7
    assert node.parent is parent
    assert node.left is None and node.right is None
    # Creating a node with a parent does not attach it as a child.
    assert parent.left is None and parent.right is None


def test_insert_left_on_empty_slot():
    root = Node(98)
    child = root.insert_left(12)
    assert root.left is child
    assert child.parent is root
    assert child.value == 12


def test_insert_left_pushes_existing_child_down():
    root = Node(98)
    old = root.insert_left(12)
    new = root.insert_left(54)
    assert root.left is new
    assert new.left is old
    assert old.parent is new
    assert new.parent is root
    assert new.right is None


def test_insert_right_on_empty_slot():
    root = Node(98)
    child = root.insert_right(402)
    assert root.right is child
    assert child.parent is root


def test_insert_right_pushes_existing_child_down():
    root = Node(98)
    old = root.insert_right(402)
    new = root.insert_right(128)
    assert root.right is new
    assert new.right is old
    assert old.parent is new
    assert new.left is None


def test_is_leaf(family):
    root, left, right, left_left, left_right, right_right = family
    assert left_left.is_leaf()
    assert left_right.is_leaf()
    assert right_right.is_leaf()
    assert not root.is_leaf()
    assert not right.is_leaf()


def test_is_root(family):
    root, left, *_ = family
    assert root.is_root()
    assert not left.is_root()


def test_sibling(family):
    root, left, right, left_left, left_right, right_right = family
    assert left.sibling() is right
    assert right.sibling() is left
    assert left_left.sibling() is left_right
    assert right_right.sibling() is None
    assert root.sibling() is None


def test_sibling_of_unattached_node_is_none():
    parent = Node(1)
    orphan = Node(2, parent)
    assert orphan.sibling() is None


def test_uncle(family):
    root, left, right, left_left, left_right, right_right = family
    assert left_left.uncle() is right
    assert left_right.uncle() is right
    assert right_right.uncle() is left
    assert left.uncle() is None
    assert root.uncle() is None


def test_uncle_missing_returns_none():
    root = Node(1)
    child = root.insert_left(2)
    grandchild = child.insert_left(3)
    assert grandchild.uncle() is None


def test_delete_subtree_detaches_from_parent(family):
    root, left, right, left_left, left_right, right_right = family
    left.delete()
    assert root.left is None
    assert root.right is right
    assert left.parent is None
    assert left.left is None and left.right is None
    assert left_left.parent is None
    assert left_right.parent is None


def test_delete_whole_tree_unlinks_everything(family):
    nodes = family
    nodes[0].delete()
    for node in nodes:
        assert node.parent is None
        assert node.left is None
        assert node.right is None


def test_repr_shows_value():
    assert repr(Node(42)) == "Node(42)"