"""Hash table, search trees, expression trees, graph traversal and Prim's algorithm."""

__version__ = "0.1.0"

__all__ = [
    "avl_dictionary",
    "book_tree",
    "bst",
    "expression_tree",
    "graph_traversal",
    "optimal_bst",
    "prim",
    "telephone_book",
]