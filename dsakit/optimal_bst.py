"""Optimal binary search tree for keys with known search frequencies."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import accumulate

MAX_KEYS = 100


@dataclass
class TreeNode:
    """A key with its left and right subtrees."""

    key: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def _root_table(freqs: Sequence[int]) -> list[list[int]]:
    n = len(freqs)
    prefix = [0, *accumulate(freqs)]
    cost = [[0] * n for _ in range(n)]
    roots = [[0] * n for _ in range(n)]
    for i, freq in enumerate(freqs):
        cost[i][i] = freq
        roots[i][i] = i
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            weight = prefix[j + 1] - prefix[i]
            best = None
            for r in range(i, j + 1):
                c = (cost[i][r - 1] if r > i else 0) + (cost[r + 1][j] if r < j else 0) + weight
                if best is None or c < best:
                    best = c
                    roots[i][j] = r
            cost[i][j] = best
    return roots


def optimal_bst(keys: Sequence[int], freqs: Sequence[int]) -> TreeNode | None:
    """Build the tree of least weighted search cost; None for no keys.

    ``keys`` must be sorted; ``freqs[i]`` is the search frequency of ``keys[i]``.
    Among roots of equal cost the leftmost is chosen.
    """
    if len(keys) != len(freqs):
        raise ValueError("keys and frequencies must have the same length")
    if len(keys) > MAX_KEYS:
        raise ValueError(f"at most {MAX_KEYS} keys are supported")
    if not keys:
        return None
    roots = _root_table(freqs)

    def build(i: int, j: int) -> TreeNode | None:
        if i > j:
            return None
        r = roots[i][j]
        return TreeNode(keys[r], build(i, r - 1), build(r + 1, j))

    return build(0, len(keys) - 1)


def inorder(root: TreeNode | None) -> Iterator[int]:
    """Yield keys in order: left subtree, node, right subtree."""
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.key
        node = node.right


def _read_ints(prompt: str, count: int) -> list[int]:
    values: list[int] = []
    text = input(prompt)
    while True:
        values.extend(int(token) for token in text.split())
        if len(values) >= count:
            return values[:count]
        text = input()


def main(argv=None) -> int:
    """Read keys and frequencies, then print the optimal tree in order."""
    try:
        (count,) = _read_ints("Enter number of keys: ", 1)
        if not 0 <= count <= MAX_KEYS:
            print(f"Number of keys must be between 0 and {MAX_KEYS}.")
            return 1
        keys = _read_ints(f"Enter {count} keys in sorted order: ", count)
        freqs = _read_ints(f"Enter corresponding {count} frequencies: ", count)
        root = optimal_bst(keys, freqs)
    except ValueError as error:
        print(f"Invalid input: {error}")
        return 1
    except EOFError:
        return 1
    print("Inorder traversal of the Optimal BST: " + " ".join(map(str, inorder(root))))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())