import builtins

import pytest

from dsakit.bst import BinarySearchTree, main

VALUES = [50, 30, 70, 20, 40, 60, 80, 30]


def test_iteration_is_sorted():
    assert list(BinarySearchTree(VALUES)) == sorted(VALUES)


def test_empty_tree():
    tree = BinarySearchTree()
    assert list(tree) == []
    assert tree.height() == 0
    assert 5 not in tree
    with pytest.raises(ValueError):
        tree.minimum()


def test_height_of_degenerate_tree_is_length():
    values = list(range(2000))
    assert BinarySearchTree(values).height() == len(values)


def test_height_of_small_tree():
    assert BinarySearchTree([50, 30, 70, 20]).height() == 3


def test_minimum():
    assert BinarySearchTree(VALUES).minimum() == min(VALUES)


def test_contains():
    tree = BinarySearchTree(VALUES)
    assert all(value in tree for value in VALUES)
    assert 55 not in tree


def test_mirror_reverses_order():
    tree = BinarySearchTree(VALUES)
    height = tree.height()
    tree.mirror()
    assert list(tree) == sorted(VALUES, reverse=True)
    assert tree.height() == height
    assert tree.minimum() == min(VALUES)
    assert 60 in tree and 65 not in tree


def test_mirror_twice_restores():
    tree = BinarySearchTree(VALUES)
    tree.mirror()
    tree.mirror()
    assert list(tree) == sorted(VALUES)


def test_main_reports(monkeypatch, capsys):
    answers = iter(["3", "5", "2", "8", "8"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "In-order Traversal of the BST (Sorted Order): 2 5 8" in out
    assert "Minimum value in BST: 2" in out
    assert "Key is present in BST." in out
    assert "In-order Traversal after Mirroring: 8 5 2" in out