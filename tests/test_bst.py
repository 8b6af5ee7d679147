import pytest

from dslab.bst import BinarySearchTree, KeyTree, Record

DRIVER_KEYS = [8, 3, 1, 6, 7, 10, 14, 4]


def build(keys):
    tree = BinarySearchTree()
    for key in keys:
        tree.insert(key, f"n{key}")
    return tree


def test_new_tree_is_empty():
    tree = BinarySearchTree()
    assert tree.is_empty()
    assert len(tree) == 0
    assert list(tree.inorder()) == []


def test_insert_returns_record_and_counts():
    tree = BinarySearchTree()
    record = tree.insert(5, "alice")
    assert record == Record(5, "alice")
    assert len(tree) == 1
    assert not tree.is_empty()


def test_inorder_is_sorted():
    tree = build(DRIVER_KEYS)
    assert [r.key for r in tree.inorder()] == sorted(DRIVER_KEYS)


def test_preorder_starts_and_postorder_ends_at_root():
    tree = build(DRIVER_KEYS)
    pre = [r.key for r in tree.preorder()]
    post = [r.key for r in tree.postorder()]
    assert pre[0] == 8
    assert post[-1] == 8
    assert sorted(pre) == sorted(post) == sorted(DRIVER_KEYS)


def test_preorder_of_driver_tree():
    tree = build(DRIVER_KEYS)
    assert [r.key for r in tree.preorder()] == [8, 3, 1, 6, 4, 7, 10, 14]


def test_search_finds_record():
    tree = build(DRIVER_KEYS)
    assert tree.search(6) == Record(6, "n6")
    assert 6 in tree
    assert 99 not in tree
    assert "6" not in tree


def test_search_missing_raises():
    tree = build(DRIVER_KEYS)
    with pytest.raises(KeyError):
        tree.search(2)


def test_delete_leaf():
    tree = build(DRIVER_KEYS)
    assert tree.delete(4) == Record(4, "n4")
    assert 4 not in tree
    assert len(tree) == len(DRIVER_KEYS) - 1


def test_delete_node_with_two_children_uses_predecessor():
    tree = build(DRIVER_KEYS)
    removed = tree.delete(8)
    assert removed == Record(8, "n8")
    pre = [r.key for r in tree.preorder()]
    assert pre[0] == 7
    assert [r.key for r in tree.inorder()] == [1, 3, 4, 6, 7, 10, 14]


def test_delete_missing_raises_and_keeps_tree():
    tree = build(DRIVER_KEYS)
    before = list(tree.preorder())
    with pytest.raises(KeyError):
        tree.delete(100)
    assert list(tree.preorder()) == before
    assert len(tree) == len(DRIVER_KEYS)


def test_delete_everything_empties_tree():
    tree = build(DRIVER_KEYS)
    for key in DRIVER_KEYS:
        tree.delete(key)
    assert tree.is_empty()
    assert list(tree.inorder()) == []


def test_duplicate_keys_go_right():
    tree = BinarySearchTree()
    tree.insert(5, "first")
    tree.insert(5, "second")
    assert [r.name for r in tree.inorder()] == ["first", "second"]
    assert tree.search(5).name == "first"
    tree.delete(5)
    assert tree.search(5).name == "second"


def test_clear():
    tree = build(DRIVER_KEYS)
    tree.clear()
    assert tree.is_empty()
    assert 8 not in tree


def test_key_tree_driver_example():
    tree = KeyTree()
    for key in DRIVER_KEYS:
        tree.insert(key)
    assert list(tree.inorder()) == [1, 3, 4, 6, 7, 8, 10, 14]
    tree.delete(10)
    assert list(tree.inorder()) == [1, 3, 4, 6, 7, 8, 14]
    assert 10 not in tree
    assert 14 in tree


def test_key_tree_delete_root_with_two_children():
    tree = KeyTree()
    for key in DRIVER_KEYS:
        tree.insert(key)
    tree.delete(8)
    assert list(tree.inorder()) == sorted(k for k in DRIVER_KEYS if k != 8)


def test_key_tree_delete_missing_is_noop():
    tree = KeyTree()
    for key in DRIVER_KEYS:
        tree.insert(key)
    tree.delete(2)
    assert list(tree.inorder()) == sorted(DRIVER_KEYS)