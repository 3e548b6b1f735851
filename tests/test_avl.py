import pytest

from dsalab.avl import AVLNode, AVLTree, SearchResult


def _build(keys):
    tree = AVLTree()
    for key in keys:
        tree.insert(key, f"v{key}")
    return tree


def _check_balanced(node):
    """Return the height of node, asserting AVL invariants along the way."""
    if node is None:
        return -1
    lh = _check_balanced(node.left)
    rh = _check_balanced(node.right)
    assert abs(lh - rh) <= 1
    assert node.height == 1 + max(lh, rh)
    if node.left is not None:
        assert node.left.key < node.key
    if node.right is not None:
        assert node.right.key > node.key
    return node.height


@pytest.mark.parametrize(
    "keys",
    [
        list(range(1, 20)),
        list(range(20, 0, -1)),
        [10, 20, 30, 40, 50, 25],
        [50, 30, 70, 20, 40, 60, 80, 10, 5, 1],
        [3, 1, 2],
        [1, 3, 2],
    ],
)
def test_insert_keeps_tree_balanced_and_sorted(keys):
    tree = _build(keys)
    assert tree.keys() == sorted(set(keys))
    assert _check_balanced(tree.root) == tree.height()
    assert len(tree) == len(set(keys))


def test_empty_tree():
    tree = AVLTree()
    assert tree.height() == -1
    assert tree.keys() == []
    assert tree.render() == ""
    assert tree.search(5) == SearchResult(False, None, 0)


def test_single_node_height_zero():
    tree = _build([7])
    assert tree.height() == 0
    assert tree.root == AVLNode(7, "v7")


@pytest.mark.parametrize("keys", [[1, 2, 3], [3, 2, 1], [1, 3, 2], [3, 1, 2]])
def test_three_keys_rotate_to_middle_root(keys):
    tree = _build(keys)
    assert tree.root.key == 2
    assert tree.root.left.key == 1
    assert tree.root.right.key == 3


def test_duplicate_insert_is_rejected():
    tree = AVLTree()
    assert tree.insert(5, "first") is True
    assert tree.insert(5, "second") is False
    assert tree.search(5).value == "first"
    assert len(tree) == 1


def test_update_existing_and_missing():
    tree = _build([4, 2, 6])
    assert tree.update(2, "changed") is True
    assert tree.search(2).value == "changed"
    assert tree.update(9, "nothing") is False
    assert 9 not in tree


def test_search_counts_comparisons():
    tree = _build(list(range(1, 16)))
    root_key = tree.root.key
    assert tree.search(root_key) == SearchResult(True, f"v{root_key}", 1)
    for key in range(1, 16):
        result = tree.search(key)
        assert result.found
        assert 1 <= result.comparisons <= tree.height() + 1
    missing = tree.search(100)
    assert not missing.found
    assert missing.comparisons == tree.height() + 1 or missing.comparisons <= tree.height() + 1


def test_contains():
    tree = _build([10, 5, 15])
    assert 5 in tree
    assert 11 not in tree


def test_render_single_node():
    assert _build([1]).render() == "\n\n1\n"


def test_render_three_nodes():
    text = _build([1, 2, 3]).render()
    assert text == "\n" + "\n\n" + " " * 10 + "3\n" + "\n" + "2\n" + "\n\n" + " " * 10 + "1\n"


def test_render_lists_keys_in_descending_order():
    keys = [8, 3, 12, 1, 5, 10, 14]
    lines = [line.strip() for line in _build(keys).render().splitlines() if line.strip()]
    assert [int(x) for x in lines] == sorted(keys, reverse=True)