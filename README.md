# dsakit

A small collection of classic data structures and algorithms. Each module
can be used as a library and also has an interactive command-line program.

| Module | What it does |
| --- | --- |
| `dsakit.telephone_book` | Fixed-size (10 slot) hash table of telephone numbers and names, linear probing with replacement |
| `dsakit.book_tree` | Book → chapters → sections tree, read from prompts and rendered as a hierarchy |
| `dsakit.bst` | Binary search tree: insert, height, minimum, mirror, membership, in-order iteration |
| `dsakit.expression_tree` | Expression tree built from a prefix expression, with non-recursive post-order traversal |
| `dsakit.graph_traversal` | Depth-first and breadth-first search over an adjacency matrix |
| `dsakit.prim` | Cheapest set of lines connecting office branches, by Prim's algorithm |
| `dsakit.optimal_bst` | Optimal binary search tree from sorted keys and search frequencies |
| `dsakit.avl_dictionary` | Self-balancing (AVL) keyword/meaning dictionary |

No third-party dependencies; Python 3.10 or newer.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

### Telephone book

```python
from dsakit.telephone_book import TelephoneBook, TableFullError

book = TelephoneBook()
book.insert(23, "alice")   # 3: the home slot is 23 % 10
book.insert(43, "bob")     # 4: slot 3 is taken, so the next free slot
book.find(43)              # 4
book.find(99)              # None
book.delete(23)            # Entry(key=23, name='alice')
book.slots()               # list of 10 entries, None for empty slots
print(book.render())
```

When the home slot is held by an entry that is not in its own home slot,
the new entry takes the slot and the old one moves on to the next free slot.
Inserting into a full table raises `TableFullError`; a negative number
raises `ValueError`; deleting an absent number raises `KeyError`.
`len(book)` is the number of filled slots.

### Book tree

```python
from dsakit.book_tree import BookNode, read_book, render_book

answers = iter(["Algorithms", "1", "Sorting", "2", "Merge sort", "Quick sort"])
book = read_book(lambda prompt: next(answers))
print(render_book(book))
```

`read_book(ask)` calls `ask(prompt)` for every answer it needs. A book has
at most 10 chapters and a chapter at most 10 sections; other counts raise
`ValueError`. `render_book(None)` returns an empty string.

### Binary search tree

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.insert(60)
list(tree)          # [20, 30, 40, 50, 60, 70]
tree.height()       # 3
tree.minimum()      # 20
40 in tree          # True
tree.mirror()       # swaps left and right children at every node
list(tree)          # [70, 60, 50, 40, 30, 20]
```

Equal values go to the right subtree. `minimum()` on an empty tree raises
`ValueError`. Membership and insertion keep working after mirroring.

### Expression tree

```python
from dsakit.expression_tree import build_expression_tree, postorder

root = build_expression_tree("+--a*bc/def")
"".join(postorder(root))   # "abc*-de/-f+"
```

Letters and digits are operands; every other character is a binary
operator. A malformed prefix expression raises `InvalidExpressionError`
(a subclass of `ValueError`).

### Graph traversal

```python
from dsakit.graph_traversal import bfs, dfs, format_matrix

matrix = [
    [0, 1, 2],
    [1, 0, 3],
    [2, 3, 0],
]
dfs(matrix, 2)   # [2, 0, 1]
bfs(matrix, 2)   # [2, 0, 1]
print(format_matrix(["AAA", "BBB", "CCC"], matrix))
```

Any nonzero entry is an edge. A starting vertex outside the matrix raises
`ValueError`.

### Minimum-cost connections (Prim)

```python
from dsakit.prim import BranchNetwork

network = BranchNetwork(4)
network.connect(1, 2, 12)
network.connect(2, 3, 5)
network.connect(3, 4, 8)
print(network.render())
network.minimum_spanning_tree()
# [Connection(first=1, second=2, charge=12),
#  Connection(first=2, second=3, charge=5),
#  Connection(first=3, second=4, charge=8)]
```

Branches are numbered from 1, and a network has at most 20. A pair with no
line has the charge `NO_LINK` (999). Growth starts at branch 1; when no line
reaches a new branch, that step is reported with charge 999.

### Optimal binary search tree

```python
from dsakit.optimal_bst import inorder, optimal_bst

root = optimal_bst([10, 12, 20], [34, 8, 50])
root.key              # the key chosen as root
list(inorder(root))   # [10, 12, 20]
```

Keys must be sorted; at most 100 are accepted, and keys and frequencies of
different lengths raise `ValueError`. No keys gives `None`.

### AVL dictionary

```python
from dsakit.avl_dictionary import AVLDictionary

words = AVLDictionary()
words.add("Apple", "A fruit.")
words.add("Banana", "A curved fruit.")
words.add("Cat", "A furry animal.")
words.find("Apple")      # ("A fruit.", 2): meaning and comparisons made
words.height()           # 2
words.delete("Banana")   # True
words.ascending()        # [("Apple", "A fruit."), ("Cat", "A furry animal.")]
words.descending()       # [("Cat", "A furry animal."), ("Apple", "A fruit.")]
```

Adding a keyword that is already present replaces its meaning. `find`
returns `None` as the meaning of an absent keyword. `len(words)` and
`"Apple" in words` work as expected.

## Command-line programs

Each module has an interactive program that prompts on standard input:

```
dsakit-telephone-book     # menu: insert, display, find, delete
dsakit-book-tree          # create and display a book structure
dsakit-bst                # build a BST, search it, mirror it
dsakit-expression-tree    # post-order of a prefix expression
dsakit-graph-traversal    # enter cities and distances, run DFS and BFS
dsakit-prim               # enter branches and charges, find minimum cost
dsakit-optimal-bst        # enter keys and frequencies, show the optimal BST
dsakit-avl-dictionary     # demonstrate the AVL dictionary
```

`dsakit-expression-tree` takes an optional prefix expression as its first
argument and uses `+--a*bc/def` without one. In `dsakit-prim`, choice 4
quits.

## What it does not do

Everything lives in memory: the telephone book, book tree and the other
structures are not saved anywhere and are gone when a program exits. The
command-line programs are plain prompt-driven menus; there is no
non-interactive mode beyond the expression argument above.