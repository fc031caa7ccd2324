"""Dictionary of keywords and meanings kept in a self-balancing AVL tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    keyword: str
    meaning: str
    height: int = 1
    left: _Node | None = None
    right: _Node | None = None


def _height(node: _Node | None) -> int:
    return 0 if node is None else node.height


def _balance(node: _Node | None) -> int:
    return 0 if node is None else _height(node.left) - _height(node.right)


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _insert(node: _Node | None, keyword: str, meaning: str) -> _Node:
    if node is None:
        return _Node(keyword, meaning)
    if keyword < node.keyword:
        node.left = _insert(node.left, keyword, meaning)
    elif keyword > node.keyword:
        node.right = _insert(node.right, keyword, meaning)
    else:
        node.meaning = meaning
        return node

    _update(node)
    balance = _balance(node)
    if balance > 1:
        if keyword > node.left.keyword:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if keyword < node.right.keyword:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: _Node | None, keyword: str) -> tuple[_Node | None, bool]:
    if node is None:
        return None, False
    if keyword < node.keyword:
        node.left, removed = _delete(node.left, keyword)
    elif keyword > node.keyword:
        node.right, removed = _delete(node.right, keyword)
    else:
        removed = True
        if node.left is None or node.right is None:
            node = node.left if node.left is not None else node.right
        else:
            successor = _min_node(node.right)
            node.keyword, node.meaning = successor.keyword, successor.meaning
            node.right, _ = _delete(node.right, successor.keyword)

    if node is None:
        return None, removed

    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node), removed
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node), removed
    return node, removed


def _walk(node: _Node | None, reverse: bool) -> Iterator[tuple[str, str]]:
    stack: list[_Node] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.right if reverse else node.left
        node = stack.pop()
        yield node.keyword, node.meaning
        node = node.left if reverse else node.right


class AVLDictionary:
    """Keywords mapped to meanings, ordered and height-balanced."""

    def __init__(self):
        self._root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, keyword: object) -> bool:
        return isinstance(keyword, str) and self.find(keyword)[0] is not None

    def add(self, keyword: str, meaning: str) -> None:
        """Add ``keyword`` or replace the meaning it already has."""
        existed = keyword in self
        self._root = _insert(self._root, keyword, meaning)
        if not existed:
            self._size += 1

    def delete(self, keyword: str) -> bool:
        """Remove ``keyword``; return whether it was present."""
        self._root, removed = _delete(self._root, keyword)
        if removed:
            self._size -= 1
        return removed

    def find(self, keyword: str) -> tuple[str | None, int]:
        """Return the meaning of ``keyword`` (None if absent) and the comparisons made.

        Every node visited counts as one comparison, and so does reaching an
        empty subtree.
        """
        comparisons = 0
        node = self._root
        while True:
            comparisons += 1
            if node is None:
                return None, comparisons
            if node.keyword == keyword:
                return node.meaning, comparisons
            node = node.left if keyword < node.keyword else node.right

    def ascending(self) -> list[tuple[str, str]]:
        """Return (keyword, meaning) pairs in ascending keyword order."""
        return list(_walk(self._root, reverse=False))

    def descending(self) -> list[tuple[str, str]]:
        """Return (keyword, meaning) pairs in descending keyword order."""
        return list(_walk(self._root, reverse=True))

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return _height(self._root)


def _print_entries(title: str, entries: list[tuple[str, str]]) -> None:
    if not entries:
        print("The dictionary is empty.")
        return
    print(title)
    for keyword, meaning in entries:
        print(f"Keyword: {keyword}, Meaning: {meaning}")


def main(argv=None) -> int:
    """Run a short demonstration of the dictionary."""
    dictionary = AVLDictionary()
    for keyword, meaning in (
        ("Apple", "A fruit."),
        ("Banana", "A curved fruit."),
        ("Cat", "A furry animal."),
    ):
        dictionary.add(keyword, meaning)
        print("Keyword added or updated successfully.")

    print()
    _print_entries("Dictionary in Ascending Order:", dictionary.ascending())
    print()
    _print_entries("Dictionary in Descending Order:", dictionary.descending())
    print()
    meaning, comparisons = dictionary.find("Apple")
    if meaning is None:
        print("Keyword not found.")
    else:
        print(f"Keyword: Apple, Meaning: {meaning}")
        print(f"Total Comparisons: {comparisons}")
    print()
    dictionary.delete("Banana")
    print("Keyword deleted successfully.")
    print()
    _print_entries("Dictionary in Ascending Order:", dictionary.ascending())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())