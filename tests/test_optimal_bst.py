import builtins

import pytest

from dsakit.optimal_bst import TreeNode, inorder, optimal_bst, main


def search_cost(node, freq_of, depth=1):
    if node is None:
        return 0
    return (
        freq_of[node.key] * depth
        + search_cost(node.left, freq_of, depth + 1)
        + search_cost(node.right, freq_of, depth + 1)
    )


def right_chain(keys):
    root = None
    for key in reversed(keys):
        root = TreeNode(key, None, root)
    return root


def test_empty_gives_none():
    assert optimal_bst([], []) is None
    assert list(inorder(None)) == []


def test_single_key():
    assert optimal_bst([5], [3]) == TreeNode(5)


def test_length_mismatch():
    with pytest.raises(ValueError):
        optimal_bst([1, 2], [1])


def test_too_many_keys():
    with pytest.raises(ValueError):
        optimal_bst(list(range(101)), [1] * 101)


@pytest.mark.parametrize(
    "keys,freqs",
    [([10, 12, 20], [34, 8, 50]), ([1, 2, 3, 4, 5, 6], [4, 2, 6, 3, 1, 7]), ([7, 9], [1, 1])],
)
def test_inorder_is_sorted_keys(keys, freqs):
    assert list(inorder(optimal_bst(keys, freqs))) == keys


def test_higher_frequency_key_is_root_of_two():
    assert optimal_bst([10, 12], [34, 50]).key == 12
    assert optimal_bst([10, 12], [50, 34]).key == 10


def test_ties_choose_leftmost_root():
    assert optimal_bst([7, 9], [1, 1]).key == 7


def test_uniform_three_keys_rooted_in_middle():
    root = optimal_bst([1, 2, 3], [1, 1, 1])
    assert root == TreeNode(2, TreeNode(1), TreeNode(3))


def test_cost_no_worse_than_alternatives():
    keys = [1, 2, 3, 4, 5, 6]
    freqs = [4, 2, 6, 3, 1, 7]
    freq_of = dict(zip(keys, freqs))
    best = search_cost(optimal_bst(keys, freqs), freq_of)
    assert best <= search_cost(right_chain(keys), freq_of)
    balanced = TreeNode(4, TreeNode(2, TreeNode(1), TreeNode(3)), TreeNode(6, TreeNode(5)))
    assert best <= search_cost(balanced, freq_of)


def test_main_prints_inorder(monkeypatch, capsys):
    answers = iter(["3", "10 12", "20", "34 8 50"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))
    assert main([]) == 0
    assert "Inorder traversal of the Optimal BST: 10 12 20" in capsys.readouterr().out