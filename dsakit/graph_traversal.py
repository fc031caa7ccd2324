"""Depth-first and breadth-first traversal of a graph held as an adjacency matrix."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

MAX_CITIES = 50

Matrix = Sequence[Sequence[int]]


def _check_start(matrix: Matrix, start: int) -> None:
    if not 0 <= start < len(matrix):
        raise ValueError(f"starting vertex out of range: {start}")


def _neighbours(matrix: Matrix, node: int) -> Iterator[int]:
    return (other for other, weight in enumerate(matrix[node]) if weight)


def dfs(matrix: Matrix, start: int) -> list[int]:
    """Return vertices in depth-first order from ``start``; nonzero entries are edges."""
    _check_start(matrix, start)
    order = [start]
    seen = {start}
    stack = [_neighbours(matrix, start)]
    while stack:
        for nxt in stack[-1]:
            if nxt not in seen:
                seen.add(nxt)
                order.append(nxt)
                stack.append(_neighbours(matrix, nxt))
                break
        else:
            stack.pop()
    return order


def bfs(matrix: Matrix, start: int) -> list[int]:
    """Return vertices in breadth-first order from ``start``; nonzero entries are edges."""
    _check_start(matrix, start)
    order = [start]
    seen = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for nxt in _neighbours(matrix, node):
            if nxt not in seen:
                seen.add(nxt)
                order.append(nxt)
                queue.append(nxt)
    return order


def format_matrix(names: Sequence[str], matrix: Matrix) -> str:
    """Return the matrix as a tab-separated table headed by vertex names."""
    header = "".join(f"\t{name}\t" for name in names)
    rows = "".join(
        "\n" + name + "".join(f"\t{value}\t" for value in row) + "\n"
        for name, row in zip(names, matrix)
    )
    return header + rows


def main(argv=None) -> int:
    """Read cities and distances, then print DFS and BFS orders."""
    try:
        count = int(input("Enter no. of cities: ").strip())
        if not 0 < count <= MAX_CITIES:
            print(f"Number of cities must be between 1 and {MAX_CITIES}.")
            return 1
        names = [input(f"Enter city #{i} (Airport Code): ").strip() for i in range(count)]
        print("\nYour cities are: ")
        for number, name in enumerate(names):
            print(f"city #{number}: {name}")
        matrix = [[0] * count for _ in range(count)]
        for i in range(count):
            for j in range(i + 1, count):
                distance = int(
                    input(f"Enter distance between {names[i]} and {names[j]} : ").strip()
                )
                matrix[i][j] = matrix[j][i] = distance
        print()
        print(format_matrix(names, matrix), end="")
        start = int(input("Enter Starting Vertex: ").strip())
        print("DFS: " + " ".join(names[node] for node in dfs(matrix, start)))
        print("BFS: " + " ".join(names[node] for node in bfs(matrix, start)))
    except ValueError as error:
        print(f"Invalid input: {error}")
        return 1
    except EOFError:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())