"""Expression trees built from prefix expressions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass

DEFAULT_EXPRESSION = "+--a*bc/def"


class InvalidExpressionError(ValueError):
    """Raised for a prefix expression that does not form a single tree."""


@dataclass
class ExpressionNode:
    """An operand or an operator with two operand subtrees."""

    data: str
    left: ExpressionNode | None = None
    right: ExpressionNode | None = None


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def build_expression_tree(prefix: str) -> ExpressionNode:
    """Build a tree from a prefix expression of one-character tokens."""
    stack: list[ExpressionNode] = []
    for ch in reversed(prefix):
        if _is_operand(ch):
            stack.append(ExpressionNode(ch))
            continue
        if len(stack) < 2:
            raise InvalidExpressionError(f"invalid prefix expression: {prefix!r}")
        left = stack.pop()
        right = stack.pop()
        stack.append(ExpressionNode(ch, left, right))
    if len(stack) != 1:
        raise InvalidExpressionError(f"invalid prefix expression: {prefix!r}")
    return stack[0]


def postorder(root: ExpressionNode | None) -> Iterator[str]:
    """Yield node symbols in post-order without recursion."""
    stack: list[ExpressionNode] = []
    current = root
    last_visited = None
    while stack or current is not None:
        if current is not None:
            stack.append(current)
            current = current.left
            continue
        top = stack[-1]
        if top.right is not None and top.right is not last_visited:
            current = top.right
        else:
            yield top.data
            last_visited = stack.pop()


def main(argv=None) -> int:
    """Print the post-order traversal of a prefix expression."""
    args = sys.argv[1:] if argv is None else list(argv)
    expression = args[0] if args else DEFAULT_EXPRESSION
    try:
        root = build_expression_tree(expression)
    except InvalidExpressionError:
        print("Invalid prefix expression!", file=sys.stderr)
        print("Expression tree could not be created due to invalid input.")
        return 1
    print("Post-order traversal: " + " ".join(postorder(root)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())