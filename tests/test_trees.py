import pytest

from algoset.linked_list import from_values
from algoset.trees import (
    TreeNode,
    build_tree,
    can_split_by_edge,
    complete_tree_from_list,
    diameter,
    generate_trees,
    has_path_sum,
    is_symmetric,
    level_order,
    populate_next,
    reverse_level_order,
    sorted_levels,
    zigzag_level_order,
)


def inorder_values(node):
    if node is None:
        return []
    return inorder_values(node.left) + [node.val] + inorder_values(node.right)


def chain(n):
    root = None
    for value in range(n, 0, -1):
        root = TreeNode(value, left=root)
    return root


PERFECT = [1, 2, 3, 4, 5, 6, 7]
PATH_TREE = [5, 4, 8, 11, None, 13, 4, 7, 2, None, None, None, 1]


def test_level_order_worked_example():
    assert level_order(build_tree(PERFECT)) == [[1], [2, 3], [4, 5, 6, 7]]


def test_level_order_empty():
    assert level_order(None) == []
    assert build_tree([]) is None


def test_build_tree_skips_gaps():
    root = build_tree([1, None, 2])
    assert root.left is None
    assert root.right.val == 2


def test_zigzag_reverses_odd_levels():
    tree = build_tree([9, 3, 8, 1, 6, 2, 7, 4])
    levels = level_order(tree)
    zigzag = zigzag_level_order(tree)
    assert len(zigzag) == len(levels)
    for depth, (z, plain) in enumerate(zip(zigzag, levels)):
        assert z == (plain if depth % 2 == 0 else plain[::-1])


def test_zigzag_empty():
    assert zigzag_level_order(None) == []


def test_sorted_levels_sorted_and_same_contents():
    tree = build_tree([5, 9, 1, 3, 8, 2, 7])
    result = sorted_levels(tree)
    for got, plain in zip(result, level_order(tree)):
        assert got == sorted(got)
        assert sorted(plain) == got


def test_reverse_level_order_flattens_to_reversed():
    tree = build_tree(PERFECT)
    forward = [v for level in level_order(tree) for v in level]
    backward = [v for level in reverse_level_order(tree) for v in level]
    assert backward == forward[::-1]
    assert reverse_level_order(tree)[-1] == [1]


def test_is_symmetric_worked_example():
    assert is_symmetric(build_tree([1, 2, 2, 3, 4, 4, 3])) is True


def test_is_symmetric_false_cases():
    assert is_symmetric(build_tree([1, 2, 2, None, 3, None, 3])) is False
    assert is_symmetric(build_tree([1, 2, 3])) is False
    assert is_symmetric(build_tree([1, 2])) is False


def test_is_symmetric_single_node():
    assert is_symmetric(TreeNode(1)) is True


def test_has_path_sum_worked_example():
    assert has_path_sum(build_tree(PATH_TREE), 22) is True


def test_has_path_sum_requires_leaf():
    tree = build_tree(PATH_TREE)
    assert has_path_sum(tree, 9) is False
    assert has_path_sum(None, 0) is False


def test_diameter_of_chain():
    for n in range(1, 6):
        assert diameter(chain(n)) == n - 1
    assert diameter(None) == 0


def test_diameter_through_root_of_perfect_tree():
    assert diameter(build_tree(PERFECT)) == diameter(chain(5))


def test_can_split_by_edge():
    assert can_split_by_edge(chain(4)) is True
    assert can_split_by_edge(build_tree([1, 2, 3, 4, 5, 6])) is True
    assert can_split_by_edge(build_tree([1, 2, None, 3, 4])) is False


def test_can_split_odd_or_empty():
    assert can_split_by_edge(chain(3)) is False
    assert can_split_by_edge(None) is False


def test_generate_trees_preserve_inorder():
    trees = generate_trees([1, 2, 3])
    assert len(trees) == 5
    for tree in trees:
        assert inorder_values(tree) == [1, 2, 3]
    shapes = {tuple(map(tuple, level_order(t))) for t in trees}
    assert len(shapes) == len(trees)


def test_generate_trees_empty():
    assert generate_trees([]) == [None]


def test_populate_next_follows_inorder():
    tree = build_tree(PERFECT)
    populate_next(tree)
    node = tree
    while node.left is not None:
        node = node.left
    seen = []
    while node is not None:
        seen.append(node.val)
        node = node.next
    assert seen == inorder_values(tree)


def test_complete_tree_level_order_matches_list():
    values = [10, 12, 15, 25, 30, 36]
    tree = complete_tree_from_list(from_values(values))
    assert level_order(tree) == level_order(build_tree(values))
    assert [v for level in level_order(tree) for v in level] == values


@pytest.mark.parametrize("count", [1, 2, 3, 8])
def test_complete_tree_sizes(count):
    values = list(range(count))
    tree = complete_tree_from_list(from_values(values))
    assert [v for level in level_order(tree) for v in level] == values


def test_complete_tree_empty():
    assert complete_tree_from_list(None) is None