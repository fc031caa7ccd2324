"""Binary search tree with height, minimum, mirroring and search."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """Binary search tree; equal values go to the right subtree."""

    def __init__(self, values: Iterable[int] = ()):
        self._root: _Node | None = None
        self._mirrored = False
        for value in values:
            self.insert(value)

    def _side(self, larger: bool) -> str:
        """Attribute holding the larger or smaller subtree, honouring mirroring."""
        return "left" if larger == self._mirrored else "right"

    def insert(self, value: int) -> None:
        """Add ``value`` to the tree."""
        if self._root is None:
            self._root = _Node(value)
            return
        node = self._root
        while True:
            side = self._side(value >= node.value)
            child = getattr(node, side)
            if child is None:
                setattr(node, side, _Node(value))
                return
            node = child

    def height(self) -> int:
        """Number of nodes on the longest path from the root; 0 when empty."""
        level = [self._root] if self._root else []
        depth = 0
        while level:
            depth += 1
            level = [child for node in level for child in (node.left, node.right) if child]
        return depth

    def minimum(self) -> int:
        """Smallest value in the tree; raise ValueError when empty."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        smaller = self._side(False)
        while (child := getattr(node, smaller)) is not None:
            node = child
        return node.value

    def mirror(self) -> None:
        """Swap the left and right subtrees of every node."""
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            node.left, node.right = node.right, node.left
            stack.extend(child for child in (node.left, node.right) if child)
        self._mirrored = not self._mirrored

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = getattr(node, self._side(not value < node.value))
        return False

    def __iter__(self) -> Iterator[int]:
        """In-order traversal: left subtree, node, right subtree."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right


def _read_int(prompt: str) -> int:
    return int(input(prompt).strip())


def main(argv=None) -> int:
    """Build a tree from typed values and report on it."""
    try:
        count = _read_int("Enter the number of nodes to be inserted in the BST: ")
        tree = BinarySearchTree(
            _read_int(f"Enter the data value for NODE {i}: ") for i in range(1, count + 1)
        )
        rule = "========================================="
        print(f"\n{rule}")
        print("In-order Traversal of the BST (Sorted Order): " + " ".join(map(str, tree)))
        print(rule)
        print(f"Height of the tree (Longest path from root): {tree.height()}")
        print(rule)
        try:
            minimum = tree.minimum()
        except ValueError:
            print("Tree is empty!")
            minimum = -1
        print(f"Minimum value in BST: {minimum}")
        print(rule)
        key = _read_int("Enter a value to search in BST: ")
        print("Key is present in BST." if key in tree else "Key not found in BST.")
        print(rule)
        print("Mirroring the BST...")
        tree.mirror()
        print("In-order Traversal after Mirroring: " + " ".join(map(str, tree)))
    except ValueError as error:
        print(f"Invalid input: {error}")
        return 1
    except EOFError:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())