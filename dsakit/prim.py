"""Cheapest set of leased lines connecting all branches, by Prim's algorithm."""

from __future__ import annotations

from dataclasses import dataclass

NO_LINK = 999
MAX_BRANCHES = 20


@dataclass(frozen=True)
class Connection:
    """A line between two branches (numbered from 1) and its charge."""

    first: int
    second: int
    charge: int


class BranchNetwork:
    """Branches with the charges for lines between pairs of them.

    A pair with no line has the charge ``NO_LINK``.
    """

    def __init__(self, branches: int):
        if not 0 <= branches <= MAX_BRANCHES:
            raise ValueError(f"number of branches must be between 0 and {MAX_BRANCHES}")
        self._charges = [[NO_LINK] * branches for _ in range(branches)]

    def __len__(self) -> int:
        return len(self._charges)

    def _index(self, branch: int) -> int:
        if not 1 <= branch <= len(self._charges):
            raise ValueError(f"branch out of range: {branch}")
        return branch - 1

    def connect(self, first: int, second: int, charge: int) -> None:
        """Set the charge of the line between two branches, numbered from 1."""
        a, b = self._index(first), self._index(second)
        self._charges[a][b] = self._charges[b][a] = charge

    def render(self) -> str:
        """Return the charge matrix as text."""
        rows = "".join(
            "\n" + "".join(f"{charge}   " for charge in row) + "\n" for row in self._charges
        )
        return "\nAdjacency matrix:" + rows

    def minimum_spanning_tree(self) -> list[Connection]:
        """Return the chosen lines in the order Prim's algorithm picks them.

        Growth starts at branch 1.  Only charges below ``NO_LINK`` count as
        lines; when no line reaches a new branch, the step is reported with
        charge ``NO_LINK`` and the endpoints of the previous step.
        """
        size = len(self._charges)
        joined = {0} if size else set()
        p = q = 0
        chosen = []
        for _ in range(size - 1):
            best = NO_LINK
            for i in range(size):
                if i not in joined:
                    continue
                for j, charge in enumerate(self._charges[i]):
                    if j not in joined and charge < best:
                        best, p, q = charge, i, j
            joined.update((p, q))
            chosen.append(Connection(p + 1, q + 1, best))
        return chosen


def _read_ints(prompt: str, count: int) -> list[int]:
    values: list[int] = []
    first = True
    while len(values) < count:
        values.extend(int(token) for token in input(prompt if first else "").split())
        first = False
    if len(values) != count:
        raise ValueError(f"expected {count} numbers, got {len(values)}")
    return values


def _read_network() -> BranchNetwork:
    (branches,) = _read_ints("Enter the number of branches: ", 1)
    network = BranchNetwork(branches)
    (connections,) = _read_ints("\nEnter the number of connections: ", 1)
    for _ in range(connections):
        print("Enter the end branches of connection: ")
        first, second = _read_ints("", 2)
        (charge,) = _read_ints("Enter the phone company charges for this connection: ", 1)
        network.connect(first, second, charge)
    return network


def main(argv=None) -> int:
    """Run the interactive Prim's algorithm menu; choice 4 quits."""
    network = BranchNetwork(0)
    try:
        while True:
            print("========== PRIM'S ALGORITHM =================")
            print("\n1. INPUT\n2. DISPLAY\n3. MINIMUM\n")
            choice = input("Enter your choice: ").strip()
            if choice == "1":
                print("******* INPUT YOUR VALUES *******")
                try:
                    network = _read_network()
                except ValueError as error:
                    print(f"Invalid input: {error}")
            elif choice == "2":
                print("******* DISPLAY THE CONTENTS *******")
                print(network.render(), end="")
            elif choice == "3":
                print("********* MINIMUM ************")
                chosen = network.minimum_spanning_tree()
                for line in chosen:
                    print(
                        f"Minimum cost connection is {line.first} -> {line.second}"
                        f"  with charge : {line.charge}"
                    )
                total = sum(line.charge for line in chosen)
                print(f"The minimum total cost of connections of all branches is: {total}")
            elif choice == "4":
                return 0
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())