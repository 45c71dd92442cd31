import pytest

from algokit.trees import TreeNode, build_tree, inorder, level_order


def _seven_node_tree():
    return TreeNode(
        10,
        TreeNode(20, TreeNode(40), TreeNode(50)),
        TreeNode(30, TreeNode(60), TreeNode(70)),
    )


def _preorder(node):
    if node is None:
        return []
    return [node.value, *_preorder(node.left), *_preorder(node.right)]


def test_inorder_of_small_tree():
    root = TreeNode(10, TreeNode(20), TreeNode(30, TreeNode(40), TreeNode(50)))
    assert inorder(root) == [20, 10, 40, 30, 50]


def test_level_order_of_full_tree():
    assert level_order(_seven_node_tree()) == [10, 20, 30, 40, 50, 60, 70]


def test_inorder_of_full_tree():
    assert inorder(_seven_node_tree()) == [40, 20, 50, 10, 60, 30, 70]


def test_empty_tree_traversals():
    assert inorder(None) == []
    assert level_order(None) == []


def test_build_round_trip_full_tree():
    original = _seven_node_tree()
    rebuilt = build_tree(_preorder(original), inorder(original))
    assert rebuilt == original


@pytest.mark.parametrize(
    "tree",
    [
        TreeNode(1, TreeNode(2, TreeNode(3, TreeNode(4)))),
        TreeNode(1, None, TreeNode(2, None, TreeNode(3))),
        TreeNode(5, TreeNode(3, None, TreeNode(4)), TreeNode(8, TreeNode(7))),
        TreeNode(9),
    ],
)
def test_build_round_trip_shapes(tree):
    rebuilt = build_tree(_preorder(tree), inorder(tree))
    assert rebuilt == tree
    assert level_order(rebuilt) == level_order(tree)


def test_build_level_order():
    root = build_tree([3, 9, 20, 15, 7], [9, 3, 15, 20, 7])
    assert level_order(root) == [3, 9, 20, 15, 7]


def test_build_empty():
    assert build_tree([], []) is None


def test_build_mismatched_lengths():
    with pytest.raises(ValueError):
        build_tree([1, 2], [1])


def test_build_value_missing_from_inorder():
    with pytest.raises(ValueError):
        build_tree([1, 2, 3], [2, 4, 3])