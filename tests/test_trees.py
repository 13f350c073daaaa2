import pytest

from puzzlekit.trees import (
    TreeNode,
    flip_equiv,
    from_level_order,
    kth_largest_level_sum,
    replace_value_in_tree,
    to_level_order,
    tree_queries,
)


def _mirror(node):
    if node is None:
        return None
    return TreeNode(node.val, _mirror(node.right), _mirror(node.left))


@pytest.mark.parametrize(
    "values",
    [
        [],
        [1],
        [1, 2, 3],
        [5, 4, 9, 1, 10, None, 7],
        [1, None, 2, None, 3],
        [1, 3, 4, 2, None, 6, 5, None, None, None, None, None, 7],
    ],
)
def test_level_order_round_trip(values):
    assert to_level_order(from_level_order(values)) == values


def test_from_level_order_shape():
    root = from_level_order([1, 2, 3])
    assert (root.val, root.left.val, root.right.val) == (1, 2, 3)
    assert root.left.children == []


def test_tree_queries_worked_example():
    root = from_level_order([1, 3, 4, 2, None, 6, 5, None, None, None, None, None, 7])
    assert tree_queries(root, [4]) == [2]


def test_tree_queries_on_chain():
    values = [1, None, 2, None, 3, None, 4, None, 5]
    root = from_level_order(values)
    chain = [1, 2, 3, 4, 5]
    assert tree_queries(root, chain) == [v - 2 for v in chain]


def test_tree_queries_are_independent():
    listing = [5, 8, 9, 2, 1, 3, 7, 4, 6]
    root = from_level_order(listing)
    together = tree_queries(root, [3, 2, 4, 8])
    separate = [tree_queries(root, [q])[0] for q in (3, 2, 4, 8)]
    assert together == separate
    assert to_level_order(root) == listing


def test_tree_queries_unknown_value():
    with pytest.raises(ValueError):
        tree_queries(from_level_order([1, 2]), [99])


def test_tree_queries_empty_tree():
    with pytest.raises(ValueError):
        tree_queries(None, [1])


def test_replace_value_worked_example():
    root = from_level_order([5, 4, 9, 1, 10, None, 7])
    assert to_level_order(replace_value_in_tree(root)) == [0, 0, 0, 7, 7, None, 11]


def test_replace_value_chain_has_no_cousins():
    root = from_level_order([3, 1, None, 2, None, 9])
    result = replace_value_in_tree(root)
    assert result is root
    assert [v for v in to_level_order(result) if v is not None] == [0, 0, 0, 0]


def test_replace_value_siblings_match():
    root = replace_value_in_tree(from_level_order([1, 2, 3, 4, 5, 6, 7]))
    assert root.left.left.val == root.left.right.val
    assert root.right.left.val == root.right.right.val
    assert root.left.val == root.right.val


def test_replace_value_empty():
    assert replace_value_in_tree(None) is None


def test_flip_equiv_worked_example():
    first = from_level_order([1, 2, 3, 4, 5, 6, None, None, None, 7, 8])
    second = from_level_order([1, 3, 2, None, 6, 4, 5, None, None, None, None, 8, 7])
    assert flip_equiv(first, second) is True


def test_flip_equiv_mirror():
    root = from_level_order([1, 2, 3, 4, 5, None, 6])
    assert flip_equiv(root, _mirror(root)) is True


def test_flip_equiv_different_value():
    assert flip_equiv(from_level_order([1, 2, 3]), from_level_order([1, 2, 4])) is False


def test_flip_equiv_empty_cases():
    assert flip_equiv(None, None) is True
    assert flip_equiv(None, TreeNode(1)) is False


def test_kth_largest_worked_example():
    root = from_level_order([5, 8, 9, 2, 1, 3, 7, 4, 6])
    assert kth_largest_level_sum(root, 2) == 13
    assert kth_largest_level_sum(root, 4) == 5


def test_kth_largest_too_few_levels():
    assert kth_largest_level_sum(from_level_order([1, 2, None, 3]), 4) == -1


def test_kth_largest_is_non_increasing():
    root = from_level_order([5, 8, 9, 2, 1, 3, 7, 4, 6, 11])
    sums = [kth_largest_level_sum(root, k) for k in range(1, 5)]
    assert sums == sorted(sums, reverse=True)


def test_kth_largest_invalid_k():
    with pytest.raises(ValueError):
        kth_largest_level_sum(from_level_order([1]), 0)